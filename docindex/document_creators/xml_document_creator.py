import logging
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from docindex.document_creators.abstract_classes import ABCDocumentCreator
from docindex.document_creators.field_name_sanitizer import sanitize_field_name
from docindex.dtos.flat_document import FlatDocument
from docindex.exceptions import DocumentProcessingError, ErrorKind

logger = logging.getLogger(__name__)

# Direct children of the root with one of these tag names mark a
# multi-document payload. This is a naming heuristic, not derived from any schema.
RECORD_TAG_NAMES = frozenset(
    {
        "document",
        "record",
        "item",
        "entry",
        "book",
        "product",
        "person",
        "customer",
        "order",
        "article",
    }
)

ATTRIBUTE_SUFFIX = "_attr"


def _local_name(tag: str) -> str:
    """Drop the ``{namespace}`` part ElementTree puts in front of qualified names."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag


class XmlDocumentCreator(ABCDocumentCreator):
    """Convert an XML payload into flat documents.

    When any direct child of the root carries a record-like tag name (see
    ``RECORD_TAG_NAMES``) every direct child becomes its own document,
    otherwise the whole tree is a single document.

    Element paths are joined with underscores, attributes get an ``_attr``
    suffix, and text is stored under the element path. Repeated sibling tags
    are not merged into a multi-valued field: the last occurrence wins.

    DOCTYPE declarations, entity declarations and external references are
    always rejected.
    """

    def create(self, content: str) -> list[FlatDocument]:
        """Parse the XML payload and flatten it into documents.

        Args:
            content: The XML text.

        Returns:
            list[FlatDocument]: The documents; elements without any field are dropped.

        Raises:
            DocumentProcessingError: INVALID_INPUT for empty input, TOO_LARGE
                above the byte ceiling, PARSE_ERROR for malformed or unsafe XML.
        """
        if content is None or not content.strip():
            raise DocumentProcessingError(
                "XML input cannot be null or empty", ErrorKind.INVALID_INPUT
            )

        self._validate_size(content)

        root = self._parse(content)
        children = list(root)

        if self._has_record_children(children):
            logger.debug("Treating %d child elements as separate documents", len(children))
            candidates = children
        else:
            candidates = [root]

        documents = []
        for element in candidates:
            document: FlatDocument = {}
            self._add_element_fields(document, element, "")
            if document:
                documents.append(document)

        return documents

    def _parse(self, content: str) -> Element:
        try:
            return fromstring(
                content,
                forbid_dtd=True,
                forbid_entities=True,
                forbid_external=True,
            )
        except DefusedXmlException as exc:
            raise DocumentProcessingError(
                f"Rejected unsafe XML document: {exc}", ErrorKind.PARSE_ERROR
            ) from exc
        except ParseError as exc:
            raise DocumentProcessingError(
                f"Failed to parse XML document: structural error: {exc}",
                ErrorKind.PARSE_ERROR,
            ) from exc

    @staticmethod
    def _has_record_children(children: list[Element]) -> bool:
        return any(
            _local_name(child.tag).lower() in RECORD_TAG_NAMES for child in children
        )

    def _add_element_fields(self, document: FlatDocument, element: Element, prefix: str) -> None:
        """Flatten one element, its attributes and its descendants into the document.

        ``prefix`` is the flattened path of the parent, empty for the element
        a document is built from. The tree is walked depth-first with an
        explicit stack, so nesting depth is bounded only by the input size.
        Fields are written in document order, which keeps last-write-wins
        for repeated names.
        """
        stack = [(element, prefix)]
        while stack:
            node, parent_prefix = stack.pop()
            element_name = sanitize_field_name(_local_name(node.tag))
            current_prefix = (
                f"{parent_prefix}_{element_name}" if parent_prefix else element_name
            )

            for attr_name, attr_value in node.attrib.items():
                if not attr_value or not attr_value.strip():
                    continue
                field_name = sanitize_field_name(_local_name(attr_name)) + ATTRIBUTE_SUFFIX
                if parent_prefix:
                    field_name = f"{current_prefix}_{field_name}"
                document[field_name] = attr_value.strip()

            text = self._extract_text(node)
            if text:
                document[current_prefix] = text

            # reversed so the first child is popped first
            stack.extend((child, current_prefix) for child in reversed(node))

    @staticmethod
    def _extract_text(element: Element) -> str:
        """Join the element's own text nodes, i.e. its text and the tails of its children."""
        parts = [element.text] + [child.tail for child in element]
        return " ".join(part.strip() for part in parts if part and part.strip())
