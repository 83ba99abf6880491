from docindex.document_creators.abstract_classes import ABCDocumentCreator
from docindex.document_creators.csv_document_creator import CsvDocumentCreator
from docindex.document_creators.json_document_creator import JsonDocumentCreator
from docindex.document_creators.xml_document_creator import XmlDocumentCreator
from docindex.dtos.document_format import DocumentFormat
from docindex.dtos.flat_document import FlatDocument


class IndexingDocumentCreator:
    """Route raw content to the creator registered for its declared format.

    No format detection happens here; the caller states the format and any
    error raised by the selected creator propagates unchanged.
    """

    def __init__(
        self,
        json_creator: ABCDocumentCreator | None = None,
        csv_creator: ABCDocumentCreator | None = None,
        xml_creator: ABCDocumentCreator | None = None,
    ):
        """
            Class constructor inject the format creators via the parameters
        Args:
            json_creator (ABCDocumentCreator, optional): Creator used for JSON payloads.
            csv_creator (ABCDocumentCreator, optional): Creator used for CSV payloads.
            xml_creator (ABCDocumentCreator, optional): Creator used for XML payloads.
        """
        self._creators: dict[DocumentFormat, ABCDocumentCreator] = {
            DocumentFormat.JSON: json_creator or JsonDocumentCreator(),
            DocumentFormat.CSV: csv_creator or CsvDocumentCreator(),
            DocumentFormat.XML: xml_creator or XmlDocumentCreator(),
        }

    @classmethod
    def with_max_input_bytes(cls, max_input_bytes: int) -> "IndexingDocumentCreator":
        """Build the default creators with a shared byte ceiling."""
        return cls(
            json_creator=JsonDocumentCreator(max_input_bytes),
            csv_creator=CsvDocumentCreator(max_input_bytes),
            xml_creator=XmlDocumentCreator(max_input_bytes),
        )

    def create_for(self, fmt: DocumentFormat | str, content: str) -> list[FlatDocument]:
        """Create documents from content in the given format.

        Args:
            fmt (DocumentFormat | str): Declared format of the content.
            content (str): Raw payload.

        Returns:
            list[FlatDocument]: Documents produced by the matching creator.
        """
        return self._creators[DocumentFormat.parse(fmt)].create(content)

    def create_from_json(self, json_text: str) -> list[FlatDocument]:
        return self.create_for(DocumentFormat.JSON, json_text)

    def create_from_csv(self, csv_text: str) -> list[FlatDocument]:
        return self.create_for(DocumentFormat.CSV, csv_text)

    def create_from_xml(self, xml_text: str) -> list[FlatDocument]:
        return self.create_for(DocumentFormat.XML, xml_text)
