from .abstract_classes import ABCDocumentStoreClient
from .open_search_client import OpenSearchDocumentStoreClient, build_opensearch_client

__all__ = [
    "ABCDocumentStoreClient",
    "OpenSearchDocumentStoreClient",
    "build_opensearch_client",
]
