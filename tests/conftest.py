"""Pytest configuration and fixtures."""
import pytest

from docindex.dtos.flat_document import FlatDocument
from docindex.opensearch.abstract_classes import ABCDocumentStoreClient


class RecordingStoreClient(ABCDocumentStoreClient):
    """In-memory store that records every call and fails on demand."""

    def __init__(self, fail_batch=False, failing_ids=(), fail_commit=False):
        self.fail_batch = fail_batch
        self.failing_ids = set(failing_ids)
        self.fail_commit = fail_commit
        self.batch_calls: list[tuple[str, list[FlatDocument]]] = []
        self.one_calls: list[tuple[str, FlatDocument]] = []
        self.commit_calls: list[str] = []
        self.stored: list[FlatDocument] = []

    def add_batch(self, collection, documents):
        self.batch_calls.append((collection, list(documents)))
        if self.fail_batch:
            raise ConnectionError("bulk request rejected")
        self.stored.extend(documents)

    def add_one(self, collection, document):
        self.one_calls.append((collection, document))
        if document.get("id") in self.failing_ids:
            raise ValueError(f"document {document.get('id')} rejected")
        self.stored.append(document)

    def commit(self, collection):
        self.commit_calls.append(collection)
        if self.fail_commit:
            raise TimeoutError("commit timed out")


@pytest.fixture
def store():
    """Store client whose calls always succeed."""
    return RecordingStoreClient()


@pytest.fixture
def make_store():
    """Factory for store clients with configurable failures."""
    return RecordingStoreClient

