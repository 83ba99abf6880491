import logging

from docindex.document_creators.indexing_document_creator import IndexingDocumentCreator
from docindex.dtos.document_format import DocumentFormat
from docindex.dtos.flat_document import FlatDocument
from docindex.dtos.indexing_outcome import IndexingOutcome
from docindex.exceptions import CommitError
from docindex.opensearch.abstract_classes import ABCDocumentStoreClient

logger = logging.getLogger(__name__)


class IndexingService:
    """Submit flat documents to the document store with partial-failure recovery.

    The whole list is first sent as one bulk request. If that fails for any
    reason every document is resubmitted on its own, so a single bad document
    only costs itself. Either way the collection is committed exactly once.
    """

    def __init__(
        self,
        store_client: ABCDocumentStoreClient,
        document_creator: IndexingDocumentCreator | None = None,
    ):
        """
            Class constructor inject the required dependencies via the parameters
        Args:
            store_client (ABCDocumentStoreClient): Store receiving the documents.
            document_creator (IndexingDocumentCreator, optional): Converts raw
                payloads into documents. Defaults to the standard creators.
        """
        self._store_client = store_client
        self._document_creator = document_creator or IndexingDocumentCreator()

    def index(self, collection: str, documents: list[FlatDocument]) -> int:
        """Index the documents and return how many of them were accepted."""
        return self.index_documents(collection, documents).success_count

    def index_documents(self, collection: str, documents: list[FlatDocument]) -> IndexingOutcome:
        """Index the documents, falling back to one request per document on bulk failure.

        Args:
            collection (str): Target collection.
            documents (list[FlatDocument]): Documents to submit.

        Returns:
            IndexingOutcome: Accepted count out of ``len(documents)``.

        Raises:
            CommitError: If the final commit fails.
        """
        total = len(documents)
        bulk_succeeded = False

        if not documents:
            logger.info("No documents to index into %s", collection)
            success_count = 0
        else:
            try:
                self._store_client.add_batch(collection, documents)
                success_count = total
                bulk_succeeded = True
            except Exception as exc:
                logger.warning(
                    "Bulk indexing of %d documents into %s failed, retrying one by one: %s",
                    total,
                    collection,
                    exc,
                )
                success_count = self._index_individually(collection, documents)

        self._commit(collection)

        logger.info("Indexed %d/%d documents into %s", success_count, total, collection)
        return IndexingOutcome(
            collection=collection,
            total=total,
            success_count=success_count,
            bulk_succeeded=bulk_succeeded,
        )

    def index_from_content(
        self, collection: str, fmt: DocumentFormat | str, content: str
    ) -> IndexingOutcome:
        """Create documents from a raw payload and index them.

        Creation errors propagate before anything reaches the store.
        """
        documents = self._document_creator.create_for(fmt, content)
        return self.index_documents(collection, documents)

    def index_json_documents(self, collection: str, json_text: str) -> IndexingOutcome:
        return self.index_from_content(collection, DocumentFormat.JSON, json_text)

    def index_csv_documents(self, collection: str, csv_text: str) -> IndexingOutcome:
        return self.index_from_content(collection, DocumentFormat.CSV, csv_text)

    def index_xml_documents(self, collection: str, xml_text: str) -> IndexingOutcome:
        return self.index_from_content(collection, DocumentFormat.XML, xml_text)

    def _index_individually(self, collection: str, documents: list[FlatDocument]) -> int:
        success_count = 0
        for position, document in enumerate(documents):
            try:
                self._store_client.add_one(collection, document)
                success_count += 1
            except Exception as exc:
                # recorded in the tally, never raised
                logger.warning(
                    "Failed to index document %d into %s: %s", position, collection, exc
                )
        return success_count

    def _commit(self, collection: str) -> None:
        try:
            self._store_client.commit(collection)
        except Exception as exc:
            logger.error("Commit of %s failed: %s", collection, exc)
            raise CommitError(collection) from exc
