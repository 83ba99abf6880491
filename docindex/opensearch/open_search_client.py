import logging
from typing import Any, Iterable

import boto3
from opensearchpy import OpenSearch, RequestsHttpConnection, helpers
from requests_aws4auth import AWS4Auth

from docindex.dtos.flat_document import FlatDocument
from docindex.opensearch.abstract_classes import ABCDocumentStoreClient

logger = logging.getLogger(__name__)

AUTH_MODES = ("none", "basic", "aws")


def build_opensearch_client(config: Any) -> OpenSearch:
    """Create an OpenSearch connection from the application settings.

    Args:
        config: Settings object exposing the ``opensearch_*``, ``auth_mode``,
            ``aws_*``, ``use_ssl``, ``verify_certs`` and ``request_timeout``
            attributes (see ``GlobalConfig``).

    Returns:
        OpenSearch: A connection-pooled client; no request is sent here.

    Raises:
        ValueError: If ``auth_mode`` is unknown or its credentials are missing.
    """
    auth_mode = (config.auth_mode or "none").lower()
    if auth_mode not in AUTH_MODES:
        raise ValueError(
            f"Unsupported auth_mode '{config.auth_mode}'. Supported: {', '.join(AUTH_MODES)}"
        )

    kwargs: dict[str, Any] = {
        "hosts": [
            {
                "host": config.opensearch_host,
                "port": config.opensearch_port,
            }
        ],
        "use_ssl": config.use_ssl,
        "verify_certs": config.verify_certs,
        "timeout": config.request_timeout,
    }

    if auth_mode == "basic":
        if not config.opensearch_username:
            raise ValueError("auth_mode 'basic' requires opensearch_username")
        kwargs["http_auth"] = (config.opensearch_username, config.opensearch_password)
    elif auth_mode == "aws":
        # Note: AWS IAM usually requires SSL to be True
        session = boto3.Session()
        credentials = session.get_credentials()
        if credentials is None:
            raise ValueError("auth_mode 'aws' requires AWS credentials in the environment")

        kwargs["http_auth"] = AWS4Auth(
            credentials.access_key,
            credentials.secret_key,
            config.aws_region,
            config.aws_service,
            session_token=credentials.token,
        )
        kwargs["connection_class"] = RequestsHttpConnection

    logger.info(
        "Connecting to OpenSearch at %s:%s (auth=%s)",
        config.opensearch_host,
        config.opensearch_port,
        auth_mode,
    )
    return OpenSearch(**kwargs)


def _document_id(document: FlatDocument) -> str | None:
    """Use a scalar ``id`` field as the store id so re-ingesting a record replaces it."""
    value = document.get("id")
    if value is None or isinstance(value, list):
        return None
    return str(value)


class OpenSearchDocumentStoreClient(ABCDocumentStoreClient):
    """Document store backed by an OpenSearch cluster.

    Collections map to indices, batches go through the bulk helper and a
    commit is an index refresh.
    """

    def __init__(self, client: OpenSearch):
        """
        Args:
            client (OpenSearch): Connection used for every call, shared across requests.
        """
        self._client = client

    def add_one(self, collection: str, document: FlatDocument) -> None:
        doc_id = _document_id(document)
        if doc_id is None:
            self._client.index(index=collection, body=document)
        else:
            self._client.index(index=collection, body=document, id=doc_id)

    def add_batch(self, collection: str, documents: list[FlatDocument]) -> None:
        """Bulk index the documents.

        ``raise_on_error`` makes a partially rejected bulk raise
        ``BulkIndexError`` instead of reporting the failures silently.
        """
        success, _ = helpers.bulk(
            self._client,
            self._actions(collection, documents),
            raise_on_error=True,
        )
        logger.debug("Bulk indexed %d documents into %s", success, collection)

    def commit(self, collection: str) -> None:
        self._client.indices.refresh(index=collection)

    @staticmethod
    def _actions(collection: str, documents: list[FlatDocument]) -> Iterable[dict[str, Any]]:
        for document in documents:
            action: dict[str, Any] = {
                "_op_type": "index",
                "_index": collection,
                "_source": document,
            }
            doc_id = _document_id(document)
            if doc_id is not None:
                action["_id"] = doc_id
            yield action
