from enum import Enum


class ErrorKind(str, Enum):
    """Why a payload could not be turned into documents."""

    TOO_LARGE = "too_large"
    PARSE_ERROR = "parse_error"
    INVALID_INPUT = "invalid_input"


class DocumentProcessingError(Exception):
    """Raised when raw content cannot be converted into flat documents.

    The error always reaches the caller of the creator; no partial document
    list is ever returned alongside it.
    """

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind


class IndexingError(Exception):
    """Base class for failures of the indexing coordinator itself."""


class CommitError(IndexingError):
    """The store rejected the commit, so the submitted documents may stay invisible."""

    def __init__(self, collection: str):
        super().__init__(f"Failed to commit collection '{collection}'")
        self.collection = collection
