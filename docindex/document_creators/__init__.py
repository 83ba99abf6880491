from .abstract_classes import MAX_INPUT_SIZE_BYTES, ABCDocumentCreator
from .csv_document_creator import CsvDocumentCreator
from .field_name_sanitizer import sanitize_field_name
from .indexing_document_creator import IndexingDocumentCreator
from .json_document_creator import JsonDocumentCreator
from .xml_document_creator import XmlDocumentCreator

__all__ = [
    "ABCDocumentCreator",
    "CsvDocumentCreator",
    "IndexingDocumentCreator",
    "JsonDocumentCreator",
    "MAX_INPUT_SIZE_BYTES",
    "XmlDocumentCreator",
    "sanitize_field_name",
]
