import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request

from docindex.document_creators import IndexingDocumentCreator
from docindex.dtos import DocumentFormat, IndexingOutcome
from docindex.exceptions import CommitError, DocumentProcessingError, ErrorKind
from docindex.logging_setup import configure_logging
from docindex.opensearch import OpenSearchDocumentStoreClient, build_opensearch_client
from docindex.services import IndexingService
from global_config import global_config

configure_logging(global_config.log_level)
logger = logging.getLogger(__name__)

# opensearch-py connects lazily, nothing is sent until the first request
store_client = OpenSearchDocumentStoreClient(build_opensearch_client(global_config))
logger.info("OpenSearch store client initialized.")

indexing_service = IndexingService(
    store_client,
    document_creator=IndexingDocumentCreator.with_max_input_bytes(
        global_config.max_input_bytes
    ),
)

# Initialize FastAPI app
main = FastAPI(title="docindex")

_STATUS_BY_KIND = {
    ErrorKind.TOO_LARGE: 413,
    ErrorKind.PARSE_ERROR: 400,
    ErrorKind.INVALID_INPUT: 400,
}


def get_indexing_service() -> IndexingService:
    return indexing_service


async def read_text_body(request: Request) -> str:
    """Return the raw request body; payloads are never parsed by the web layer."""
    body = await request.body()
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Request body must be UTF-8 text")


def _index(
    service: IndexingService, collection: str, fmt: DocumentFormat, content: str
) -> IndexingOutcome:
    try:
        return service.index_from_content(collection, fmt, content)
    except DocumentProcessingError as exc:
        raise HTTPException(status_code=_STATUS_BY_KIND[exc.kind], detail=str(exc))
    except CommitError as exc:
        raise HTTPException(status_code=502, detail=str(exc))


# generic ingestion endpoint, the format comes from the query string
@main.post("/api/index/{collection}", response_model=IndexingOutcome)
def index_content(
    collection: str,
    fmt: DocumentFormat = Query(..., alias="format"),
    content: str = Depends(read_text_body),
    service: IndexingService = Depends(get_indexing_service),
):
    return _index(service, collection, fmt, content)


@main.post("/api/index/{collection}/json", response_model=IndexingOutcome)
def index_json_documents(
    collection: str,
    content: str = Depends(read_text_body),
    service: IndexingService = Depends(get_indexing_service),
):
    return _index(service, collection, DocumentFormat.JSON, content)


@main.post("/api/index/{collection}/csv", response_model=IndexingOutcome)
def index_csv_documents(
    collection: str,
    content: str = Depends(read_text_body),
    service: IndexingService = Depends(get_indexing_service),
):
    return _index(service, collection, DocumentFormat.CSV, content)


@main.post("/api/index/{collection}/xml", response_model=IndexingOutcome)
def index_xml_documents(
    collection: str,
    content: str = Depends(read_text_body),
    service: IndexingService = Depends(get_indexing_service),
):
    return _index(service, collection, DocumentFormat.XML, content)
