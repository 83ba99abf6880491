from .abc_document_creator import MAX_INPUT_SIZE_BYTES, ABCDocumentCreator

__all__ = [
    "ABCDocumentCreator",
    "MAX_INPUT_SIZE_BYTES",
]
