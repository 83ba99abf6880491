from abc import ABC, abstractmethod

from docindex.dtos.flat_document import FlatDocument


class ABCDocumentStoreClient(ABC):
    """Abstract base class for the search store the pipeline writes into.

    Implementations must be safe to share between concurrent requests. Every
    method may raise; callers decide which failures are fatal.
    """

    @abstractmethod
    def add_one(self, collection: str, document: FlatDocument) -> None:
        """Submit a single document to the collection."""
        raise NotImplementedError

    @abstractmethod
    def add_batch(self, collection: str, documents: list[FlatDocument]) -> None:
        """Submit all documents in one round trip; raise if any of them is rejected."""
        raise NotImplementedError

    @abstractmethod
    def commit(self, collection: str) -> None:
        """Make everything submitted so far visible to readers."""
        raise NotImplementedError
