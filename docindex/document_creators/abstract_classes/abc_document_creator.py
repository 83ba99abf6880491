from abc import ABC, abstractmethod

from docindex.dtos.flat_document import FlatDocument
from docindex.exceptions import DocumentProcessingError, ErrorKind

# 10 MiB, measured on the UTF-8 encoding of the payload.
MAX_INPUT_SIZE_BYTES = 10 * 1024 * 1024


class ABCDocumentCreator(ABC):
    """Contract for converters that turn one input format into flat documents."""

    def __init__(self, max_input_bytes: int = MAX_INPUT_SIZE_BYTES):
        self.max_input_bytes = max_input_bytes

    @abstractmethod
    def create(self, content: str) -> list[FlatDocument]:
        """
        Parse the content and convert it into schema-less flat documents.

        args:
            content (str): The raw payload in the format handled by the implementation.

        returns:
            list[FlatDocument]: The documents, in source order.

        raises:
            DocumentProcessingError: If the payload is too large or cannot be parsed.
        """

    def _validate_size(self, content: str) -> None:
        """
        Reject payloads above the byte ceiling before any parsing happens.

        Raises:
            DocumentProcessingError: With kind TOO_LARGE.
        """
        size = len(content.encode("utf-8"))
        if size > self.max_input_bytes:
            raise DocumentProcessingError(
                f"Input too large: {size} bytes exceeds maximum size of "
                f"{self.max_input_bytes} bytes",
                ErrorKind.TOO_LARGE,
            )
