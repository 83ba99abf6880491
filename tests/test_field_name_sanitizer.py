import re

import pytest

from docindex.document_creators.field_name_sanitizer import sanitize_field_name

SAMPLES = [
    "",
    "_",
    "___",
    "@@@",
    "User-Name",
    "product.price",
    "__field__name__",
    "Field123@Test",
    "123field",
    "_9lives",
    "  spaced   out  ",
    "Ünïcödé Kéy",
    "field",
    "field_123",
    "a__b",
    "ALLCAPS",
    "tab\tand\nnewline",
    "emoji 🚀 name",
    "0",
]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("User-Name", "user_name"),
        ("product.price", "product_price"),
        ("__field__name__", "field_name"),
        ("Field123@Test", "field123_test"),
        ("123field", "field_123field"),
        ("a  b", "a_b"),
        ("_9lives", "field_9lives"),
        ("already_clean", "already_clean"),
    ],
)
def test_sanitize_examples(raw, expected):
    assert sanitize_field_name(raw) == expected


@pytest.mark.parametrize("raw", ["", "_", "___", "@@@", "...", "   "])
def test_names_without_usable_characters_fall_back_to_field(raw):
    assert sanitize_field_name(raw) == "field"


@pytest.mark.parametrize("raw", SAMPLES)
def test_sanitize_is_idempotent(raw):
    once = sanitize_field_name(raw)
    assert sanitize_field_name(once) == once


@pytest.mark.parametrize("raw", SAMPLES)
def test_sanitized_names_are_valid_identifiers(raw):
    name = sanitize_field_name(raw)
    assert re.fullmatch(r"[a-z][a-z0-9_]*", name)
    assert "__" not in name
    assert not name.endswith("_")
