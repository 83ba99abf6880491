from .abc_document_store_client import ABCDocumentStoreClient

__all__ = [
    "ABCDocumentStoreClient",
]
