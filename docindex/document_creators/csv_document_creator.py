import csv
import io

from docindex.document_creators.abstract_classes import MAX_INPUT_SIZE_BYTES, ABCDocumentCreator
from docindex.document_creators.field_name_sanitizer import sanitize_field_name
from docindex.dtos.flat_document import FlatDocument
from docindex.exceptions import DocumentProcessingError, ErrorKind


class CsvDocumentCreator(ABCDocumentCreator):
    """Convert CSV text into flat documents, one per data row.

    The first row holds the column names. Values are trimmed and passed
    through as strings; empty cells are left out of the document, and a
    row whose cells are all empty (such as ``,,``) produces no document.

    Example:
        id,name,price,inStock
        123,Product A,19.99,true

        -> {"id": "123", "name": "Product A", "price": "19.99", "instock": "true"}
    """

    def __init__(self, max_input_bytes: int = MAX_INPUT_SIZE_BYTES):
        super().__init__(max_input_bytes)
        # a single cell may be as large as the whole payload
        csv.field_size_limit(max(csv.field_size_limit(), max_input_bytes))

    def create(self, content: str) -> list[FlatDocument]:
        self._validate_size(content)

        reader = csv.reader(io.StringIO(content, newline=""), strict=True)
        documents: list[FlatDocument] = []

        try:
            header = next(reader, None)
            if header is None:
                return documents

            # sanitized once, reused for every row
            field_names = [sanitize_field_name(cell.strip()) for cell in header]

            for row in reader:
                if not row:
                    continue

                document: FlatDocument = {}
                for field_name, raw_value in zip(field_names, row):
                    value = raw_value.strip()
                    if value:
                        document[field_name] = value

                if document:
                    documents.append(document)
        except csv.Error as exc:
            raise DocumentProcessingError(
                f"Failed to parse CSV document at line {reader.line_num}: {exc}",
                ErrorKind.PARSE_ERROR,
            ) from exc

        return documents
