import pytest

from opossum.storage.dictionary_segment import DictionarySegment
from opossum.storage.value_segment import ValueSegment
from opossum.types import INVALID_VALUE_ID
from opossum.utils import OpossumError
from opossum.variant import NULL_VALUE, variant_is_null


@pytest.fixture
def string_segment():
    segment = ValueSegment("string", nullable=True)
    for value in ["Bill", "Steve", "Alexander", "Steve", "Hasso", "Bill", NULL_VALUE]:
        segment.append(value)
    return DictionarySegment(segment)


@pytest.fixture
def int_segment():
    segment = ValueSegment("int")
    for value in range(0, 11, 2):
        segment.append(value)
    return DictionarySegment(segment)


def test_compress_segment_string_size(string_segment):
    assert len(string_segment) == 7
    assert string_segment.unique_values_count() == 4


def test_compress_segment_string_sorted(string_segment):
    assert string_segment.dictionary() == ["Alexander", "Bill", "Hasso", "Steve"]


def test_compress_segment_string_null_handling(string_segment):
    assert string_segment.attribute_vector().get(6) == string_segment.null_value_id()
    assert string_segment.get_typed_value(6) is None
    with pytest.raises(OpossumError):
        string_segment.get(6)
    assert variant_is_null(string_segment[6])


def test_values_are_preserved(string_segment):
    assert [string_segment[offset] for offset in range(6)] == [
        "Bill", "Steve", "Alexander", "Steve", "Hasso", "Bill",
    ]
    assert string_segment.get(1) == "Steve"
    assert string_segment.get_typed_value(4) == "Hasso"


def test_lower_upper_bound(int_segment):
    assert int_segment.lower_bound(4) == 2
    assert int_segment.upper_bound(4) == 3
    assert int_segment.lower_bound(5) == 3
    assert int_segment.upper_bound(5) == 3
    assert int_segment.lower_bound(15) == INVALID_VALUE_ID
    assert int_segment.upper_bound(15) == INVALID_VALUE_ID


def test_bounds_convert_search_value(int_segment):
    assert int_segment.lower_bound("4") == 2
    assert int_segment.upper_bound("4") == 3


def test_bounds_reject_null(int_segment):
    with pytest.raises(OpossumError):
        int_segment.lower_bound(NULL_VALUE)


def test_value_of_value_id(int_segment):
    assert int_segment.value_of_value_id(3) == 6
    with pytest.raises(OpossumError):
        int_segment.value_of_value_id(6)


def test_null_value_id_is_dictionary_size(int_segment):
    assert int_segment.null_value_id() == 6


def test_attribute_vector_width_grows():
    segment = ValueSegment("int")
    for value in range(300):
        segment.append(value)
    assert DictionarySegment(segment).attribute_vector().width() == 2


def test_offset_out_of_range(int_segment):
    with pytest.raises(IndexError):
        int_segment[6]
    assert int_segment[5] == 10


def test_memory_usage_smaller_for_repeated_values():
    segment = ValueSegment("int")
    for _ in range(100):
        segment.append(7)
    assert DictionarySegment(segment).estimate_memory_usage() < segment.estimate_memory_usage()