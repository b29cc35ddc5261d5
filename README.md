# opossum

An in-memory column store for Python. A table is split into chunks of rows,
and each chunk holds one segment for each column. A chunk can be compressed
into dictionary-encoded segments. Operators scan and print these tables.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Concepts

- `Table` (`opossum.storage.table`): columns have a name, a data type
  (`int`, `long`, `float`, `double`, `string`) and a nullable flag. Add
  columns with `add_column` while the table is empty, and rows with `append`.
  Once the last chunk holds `target_chunk_size` rows, or has been compressed,
  a new chunk is started. A target chunk size of 0 lets chunks grow without
  limit. `compress_chunk` replaces a chunk's segments with dictionary-encoded
  ones.
- `Chunk` (`opossum.storage.chunk`): one segment per column; `size()` is the
  number of rows.
- `ValueSegment` (`opossum.storage.value_segment`): stores plain values,
  converted to the column's type, plus NULL flags when the column is nullable.
- `DictionarySegment` (`opossum.storage.dictionary_segment`): stores a sorted
  dictionary of distinct values and a `FixedWidthIntegerVector`
  (`opossum.storage.attribute_vector`) of value ids that uses 1, 2 or 4 bytes
  per id, depending on the dictionary size. NULL is encoded as the value id
  one past the last dictionary entry (`null_value_id()`). `lower_bound` and
  `upper_bound` return `INVALID_VALUE_ID` when no entry qualifies.
- `ReferenceSegment` (`opossum.storage.reference_segment`): points into one
  column of another table through a list of `RowID`s (`opossum.types`).
  `NULL_ROW_ID` yields NULL.
- `StorageManager` (`opossum.storage.storage_manager`): `StorageManager.get()`
  returns the shared registry that maps table names to tables.
- Operators (`opossum.operators`): `TableWrapper`, `GetTable`, `TableScan` and
  `Print`. Call `execute()` on an operator, then read the result with
  `get_output()`, which is `None` until the operator has run.

`TableScan` compares one column with a search value using a `ScanType`
(`OpEquals`, `OpNotEquals`, `OpLessThan`, `OpLessThanEquals`,
`OpGreaterThan`, `OpGreaterThanEquals`). Its output is a table with a single
chunk of reference segments into the table that holds the values; NULL values
never match, and a NULL search value matches nothing.

SQL NULL is represented by `NullValue` (or `NULL_VALUE`) from
`opossum.variant`. Use `variant_is_null` to test for it; every comparison with
NULL is false. `type_cast(value, data_type)` converts a value to a named data
type.

## Example

```python
import io

from opossum.operators.print import Print
from opossum.operators.table_scan import TableScan
from opossum.operators.table_wrapper import TableWrapper
from opossum.storage.table import Table
from opossum.types import ScanType
from opossum.variant import NullValue

table = Table(2)
table.add_column("id", "int", False)
table.add_column("name", "string", True)
table.append([1, "alpha"])
table.append([2, NullValue()])
table.append([3, "gamma"])
table.compress_chunk(0)

source = TableWrapper(table)
source.execute()

scan = TableScan(source, 0, ScanType.OpGreaterThanEquals, 2)
scan.execute()
print(scan.get_output().row_count())  # 2

out = io.StringIO()
Print.print(scan.get_output(), out)
print(out.getvalue())
```

## Errors

When an operation is invalid, the package raises `OpossumError` from
`opossum.utils`. Examples are an unknown column, chunk or table, a NULL
written to a column that is not nullable, or a value that cannot be converted
to the column's type. Reading a segment at an offset out of range raises
`IndexError`.

## What it does not do

The package is a library only: it has no command line, no query language and
no server. Tables live in memory only; there is no loading of tables from
files and no persistence.