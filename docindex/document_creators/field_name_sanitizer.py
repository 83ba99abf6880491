import re

_INVALID_CHARACTERS = re.compile(r"[^a-z0-9_]")
_EDGE_UNDERSCORES = re.compile(r"^_+|_+$")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")

DEFAULT_FIELD_NAME = "field"


def sanitize_field_name(name: str) -> str:
    """Turn an arbitrary key into a name the search engine accepts as a field.

    Rules, applied in order:
        1) lowercase everything
        2) replace anything outside ``[a-z0-9_]`` with ``_``
        3) strip leading and trailing underscores
        4) collapse runs of underscores into one
        5) fall back to ``field`` when nothing is left
        6) prefix ``field_`` when the name starts with a digit

    Examples:
        "User-Name" -> "user_name"
        "product.price" -> "product_price"
        "__field__name__" -> "field_name"
        "123field" -> "field_123field"

    The function is total and idempotent.
    """
    sanitized = _INVALID_CHARACTERS.sub("_", name.lower())
    sanitized = _EDGE_UNDERSCORES.sub("", sanitized)
    sanitized = _REPEATED_UNDERSCORES.sub("_", sanitized)

    if not sanitized:
        return DEFAULT_FIELD_NAME

    if sanitized[0].isdigit():
        sanitized = f"{DEFAULT_FIELD_NAME}_{sanitized}"

    return sanitized
