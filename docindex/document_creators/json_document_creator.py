import json
import logging
import math
from typing import Any

from docindex.document_creators.abstract_classes import ABCDocumentCreator
from docindex.document_creators.field_name_sanitizer import sanitize_field_name
from docindex.dtos.flat_document import FlatDocument, Scalar
from docindex.exceptions import DocumentProcessingError, ErrorKind

logger = logging.getLogger(__name__)

_MIN_LONG = -(2**63)
_MAX_LONG = 2**63 - 1


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


class JsonDocumentCreator(ABCDocumentCreator):
    """Convert a JSON array of objects into flat documents.

    Nested objects are flattened with underscores (``user.name`` becomes
    ``user_name``), arrays of scalars become multi-valued fields and
    ``null`` values are left out. Arrays of objects are not supported and
    their object elements are dropped. Empty strings count as missing values.

    Example:
        Input:  [{"user": {"name": "John", "age": 30}, "tags": ["tech", "java"]}]
        Output: [{"user_name": "John", "user_age": 30, "tags": ["tech", "java"]}]
    """

    def create(self, content: str) -> list[FlatDocument]:
        """Parse a JSON array and flatten every element into one document.

        Args:
            content: JSON text. A root that is not an array yields no documents.

        Returns:
            list[FlatDocument]: One document per array element.

        Raises:
            DocumentProcessingError: TOO_LARGE above the byte ceiling,
                PARSE_ERROR when the text is not valid JSON.
        """
        self._validate_size(content)

        try:
            root = json.loads(content, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            raise DocumentProcessingError(
                f"Failed to parse JSON document: {exc}", ErrorKind.PARSE_ERROR
            ) from exc

        if not isinstance(root, list):
            logger.debug(
                "JSON root is %s, not an array; no documents created",
                type(root).__name__,
            )
            return []

        documents = []
        for item in root:
            document: FlatDocument = {}
            if isinstance(item, dict):
                self._add_fields_flat(document, item, "")
            documents.append(document)

        return documents

    def _add_fields_flat(self, document: FlatDocument, node: dict, prefix: str) -> None:
        """Recursively copy the members of a JSON object into the document."""
        for key, value in node.items():
            field_name = sanitize_field_name(prefix + key)

            if value is None or value == "":
                continue

            if isinstance(value, list):
                values = [
                    self._convert_value(item)
                    for item in value
                    if item is not None and item != "" and not isinstance(item, (dict, list))
                ]
                if values:
                    document[field_name] = values
            elif isinstance(value, dict):
                self._add_fields_flat(document, value, field_name + "_")
            else:
                document[field_name] = self._convert_value(value)

    @staticmethod
    def _convert_value(value: Any) -> Scalar:
        """Map a JSON scalar to the type the store should see.

        bool is tested before int because ``bool`` is an ``int`` subclass.
        Integers outside the signed 64-bit range are kept as text. Numbers
        too large for a float (``1e400``) are rejected like ``NaN``.
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            if _MIN_LONG <= value <= _MAX_LONG:
                return value
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise DocumentProcessingError(
                    f"Failed to parse JSON document: number out of range: {value}",
                    ErrorKind.PARSE_ERROR,
                )
            return value
        return str(value)
