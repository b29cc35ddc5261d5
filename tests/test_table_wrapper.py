from opossum.operators.table_wrapper import TableWrapper
from opossum.storage.table import Table


def _table():
    table = Table(2)
    table.add_column("a", "int", False)
    table.append([1])
    table.append([2])
    table.append([3])
    return table


def test_output_is_wrapped_table():
    table = _table()
    wrapper = TableWrapper(table)
    wrapper.execute()
    assert wrapper.get_output() is table


def test_output_missing_before_execution():
    wrapper = TableWrapper(_table())
    assert wrapper.get_output() is None


def test_wrapper_has_no_inputs():
    wrapper = TableWrapper(_table())
    assert wrapper.left_input() is None
    assert wrapper.right_input() is None


def test_wrapped_table_content_is_unchanged():
    table = _table()
    wrapper = TableWrapper(table)
    wrapper.execute()
    output = wrapper.get_output()
    assert output.row_count() == table.row_count()
    assert output.chunk_count() == table.chunk_count()