"""
Schema-less document ingestion for search indexing.

Raw JSON, CSV or XML payloads are flattened into sparse documents with
sanitized field names and submitted to a document store, falling back to
per-document submission when a bulk request fails.

Quick Start:
    from docindex import IndexingService, OpenSearchDocumentStoreClient

    service = IndexingService(OpenSearchDocumentStoreClient(client))
    outcome = service.index_from_content("books", "json", '[{"id": 1}]')
"""

from .document_creators import (
    CsvDocumentCreator,
    IndexingDocumentCreator,
    JsonDocumentCreator,
    XmlDocumentCreator,
    sanitize_field_name,
)
from .dtos import DocumentFormat, FlatDocument, IndexingOutcome
from .exceptions import CommitError, DocumentProcessingError, ErrorKind, IndexingError
from .opensearch import (
    ABCDocumentStoreClient,
    OpenSearchDocumentStoreClient,
    build_opensearch_client,
)
from .services import IndexingService

__all__ = [
    # Creators
    "CsvDocumentCreator",
    "IndexingDocumentCreator",
    "JsonDocumentCreator",
    "XmlDocumentCreator",
    "sanitize_field_name",
    # DTOs
    "DocumentFormat",
    "FlatDocument",
    "IndexingOutcome",
    # Store
    "ABCDocumentStoreClient",
    "OpenSearchDocumentStoreClient",
    "build_opensearch_client",
    # Service
    "IndexingService",
    # Errors
    "CommitError",
    "DocumentProcessingError",
    "ErrorKind",
    "IndexingError",
]
