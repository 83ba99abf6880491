import pytest

from docindex.document_creators import MAX_INPUT_SIZE_BYTES, CsvDocumentCreator
from docindex.exceptions import DocumentProcessingError, ErrorKind


@pytest.fixture
def creator():
    return CsvDocumentCreator()


def test_rows_become_documents_with_sanitized_headers(creator):
    csv_text = "id,Product Name,Unit-Price,inStock\n1,Widget,19.99,true\n2,Gadget,5,false\n"

    docs = creator.create(csv_text)

    assert docs == [
        {"id": "1", "product_name": "Widget", "unit_price": "19.99", "instock": "true"},
        {"id": "2", "product_name": "Gadget", "unit_price": "5", "instock": "false"},
    ]


def test_empty_cells_are_omitted(creator):
    csv_text = "id,name,description\n1,Product,Some text\n2,Another Product,\n"

    docs = creator.create(csv_text)

    assert docs[1] == {"id": "2", "name": "Another Product"}
    assert "description" not in docs[1]


def test_values_and_headers_are_trimmed(creator):
    docs = creator.create(" id , name \n 7 ,  Seven  \n")

    assert docs == [{"id": "7", "name": "Seven"}]


def test_values_are_never_type_converted(creator):
    doc = creator.create("count,flag\n10,true\n")[0]

    assert doc == {"count": "10", "flag": "true"}


def test_quoted_values_keep_delimiters_and_newlines(creator):
    docs = creator.create('id,author\n1,"Smith, John"\n2,"line one\nline two"\n')

    assert docs == [
        {"id": "1", "author": "Smith, John"},
        {"id": "2", "author": "line one\nline two"},
    ]


def test_rows_shorter_or_longer_than_header_are_truncated(creator):
    docs = creator.create("a,b,c\n1,2\n1,2,3,4\n")

    assert docs == [{"a": "1", "b": "2"}, {"a": "1", "b": "2", "c": "3"}]


def test_blank_rows_are_skipped(creator):
    docs = creator.create("id,name\n1,one\n\n,\n2,two\n")

    assert docs == [{"id": "1", "name": "one"}, {"id": "2", "name": "two"}]


def test_crlf_line_endings(creator):
    docs = creator.create("id,name\r\n1,one\r\n")

    assert docs == [{"id": "1", "name": "one"}]


@pytest.mark.parametrize("csv_text", ["", "id,name\n"])
def test_no_data_rows_yield_no_documents(creator, csv_text):
    assert creator.create(csv_text) == []


@pytest.mark.parametrize(
    "csv_text",
    [
        'id,name\n1,"unterminated\n',
        'id,name\n1,"quoted"trailing\n',
    ],
)
def test_malformed_csv_raises_parse_error(creator, csv_text):
    with pytest.raises(DocumentProcessingError) as exc_info:
        creator.create(csv_text)

    assert exc_info.value.kind is ErrorKind.PARSE_ERROR


def test_payload_one_byte_over_limit_is_rejected(creator):
    csv_text = "id\n" + "x" * (MAX_INPUT_SIZE_BYTES - 2)
    assert len(csv_text.encode("utf-8")) == MAX_INPUT_SIZE_BYTES + 1

    with pytest.raises(DocumentProcessingError) as exc_info:
        creator.create(csv_text)

    assert exc_info.value.kind is ErrorKind.TOO_LARGE


def test_cells_larger_than_the_csv_module_default_are_accepted(creator):
    body = "x" * 200_000

    docs = creator.create("id,body\n1," + body + "\n")

    assert docs == [{"id": "1", "body": body}]


def test_rows_of_only_empty_cells_produce_no_document(creator):
    docs = creator.create("a,b,c\n,,\n1,,\n")

    assert docs == [{"a": "1"}]
