from enum import Enum


class DocumentFormat(str, Enum):
    """Input formats accepted by the ingestion pipeline."""

    JSON = "json"
    CSV = "csv"
    XML = "xml"

    @classmethod
    def parse(cls, value: "str | DocumentFormat") -> "DocumentFormat":
        """Resolve a user supplied format name, ignoring case and surrounding blanks.

        Raises:
            ValueError: If the name is not one of json, csv or xml.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Unsupported format '{value}'. Supported: {supported}"
            ) from None
