import pytest

from opossum.storage.dictionary_segment import DictionarySegment
from opossum.storage.table import Table
from opossum.storage.value_segment import ValueSegment
from opossum.types import MAX_CHUNK_OFFSET
from opossum.utils import OpossumError
from opossum.variant import NULL_VALUE, variant_is_null


@pytest.fixture
def table():
    table = Table(2)
    table.add_column("col_1", "int", False)
    table.add_column("col_2", "string", True)
    return table


def fill(table):
    table.append([4, "Hello,"])
    table.append([6, "world"])
    table.append([3, "!"])


def test_chunk_count(table):
    assert table.chunk_count() == 1
    fill(table)
    assert table.chunk_count() == 2


def test_get_chunk(table):
    table.get_chunk(0)
    fill(table)
    table.get_chunk(1)
    assert table.get_chunk(0).size() == 2
    with pytest.raises(OpossumError):
        table.get_chunk(7)


def test_column_count(table):
    assert table.column_count() == 2


def test_row_count(table):
    assert table.row_count() == 0
    fill(table)
    table.append([7, NULL_VALUE])
    assert table.row_count() == 4


def test_get_column_name(table):
    assert table.column_name(0) == "col_1"
    assert table.column_name(1) == "col_2"
    assert table.column_names() == ["col_1", "col_2"]
    with pytest.raises(OpossumError):
        table.column_name(7)


def test_get_column_type(table):
    assert table.column_type(0) == "int"
    assert table.column_type(1) == "string"
    with pytest.raises(OpossumError):
        table.column_type(7)


def test_column_nullable(table):
    assert table.column_nullable(0) is False
    assert table.column_nullable(1) is True
    with pytest.raises(OpossumError):
        table.column_nullable(7)


def test_get_column_id_by_name(table):
    assert table.column_id_by_name("col_2") == 1
    with pytest.raises(OpossumError):
        table.column_id_by_name("no_column_name")


def test_get_chunk_size(table):
    assert table.target_chunk_size() == 2


def test_default_chunk_size():
    assert Table().target_chunk_size() == MAX_CHUNK_OFFSET - 1


def test_append_null_values(table):
    assert table.row_count() == 0
    table.append([1, NULL_VALUE])
    assert table.row_count() == 1
    with pytest.raises(OpossumError):
        table.append([NULL_VALUE, "foo"])


def test_append_wrong_width(table):
    with pytest.raises(OpossumError):
        table.append([1])
    assert table.row_count() == 0


def test_segments_nullable(table):
    table.append([1, "foo"])
    assert table.chunk_count() == 1
    chunk = table.get_chunk(0)
    first = chunk.get_segment(0)
    second = chunk.get_segment(1)
    assert isinstance(first, ValueSegment)
    assert first.is_nullable() is False
    assert isinstance(second, ValueSegment)
    assert second.is_nullable() is True


def test_append_with_encoded_segments(table):
    table.append([1, "foo"])
    assert table.row_count() == 1
    table.compress_chunk(0)
    table.append([2, "bar"])
    assert table.row_count() == 2
    assert table.chunk_count() == 2


def test_compress_chunk_keeps_values(table):
    fill(table)
    table.append([7, NULL_VALUE])
    table.compress_chunk(1)
    chunk = table.get_chunk(1)
    assert isinstance(chunk.get_segment(0), DictionarySegment)
    assert chunk.get_segment(0)[0] == 3
    assert chunk.get_segment(1)[0] == "!"
    assert variant_is_null(chunk.get_segment(1)[1])


def test_compress_chunk_out_of_range(table):
    with pytest.raises(OpossumError):
        table.compress_chunk(3)


def test_add_column_after_rows_fails(table):
    table.append([1, "foo"])
    with pytest.raises(OpossumError):
        table.add_column("col_3", "int", False)
    assert table.column_count() == 2


def test_add_column_unknown_type(table):
    with pytest.raises(OpossumError):
        table.add_column("col_3", "blob", False)


def test_add_column_definition_creates_no_segments():
    table = Table(2)
    table.add_column_definition("a", "int", False)
    assert table.column_count() == 1
    assert table.get_chunk(0).column_count() == 0
    table.create_new_chunk()
    assert table.get_chunk(1).column_count() == 1


def test_zero_chunk_size_is_unlimited():
    table = Table(0)
    table.add_column("a", "int", False)
    for value in range(10):
        table.append([value])
    assert table.chunk_count() == 1
    assert table.row_count() == 10