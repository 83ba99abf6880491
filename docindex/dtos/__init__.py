from .document_format import DocumentFormat
from .flat_document import FieldValue, FlatDocument, Scalar
from .indexing_outcome import IndexingOutcome

__all__ = [
    "DocumentFormat",
    "FieldValue",
    "FlatDocument",
    "IndexingOutcome",
    "Scalar",
]
