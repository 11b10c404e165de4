"""
variadic-table: pretty print tables of typed columns.

A table is declared with one header and one value type per column. Rows
are added as tuples and the table is rendered with every column sized to
its widest value:

    from variadic_table import TableRenderer

    table = TableRenderer(["Name", "Weight", "Age", "Brother"], (str, float, int, str))
    table.add_row(("Fred", 193.4, 35, "Sam"))
    table.add_row(("Billy", 89.2, 7, "Fred"))
    table.print()

Numeric columns are right-justified and sized by ``static_column_size``;
str columns are left-justified and sized by their longest value.
"""

from .exceptions import (
    ColumnCountMismatchError,
    ConfigurationError,
    InputError,
    InvalidColumnError,
    InvalidColumnSizeError,
    RowArityError,
    RowShapeError,
    RowTypeError,
    VariadicTableError,
)
from .models import Column, ColumnKind
from .table import TableRenderer

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "TableRenderer",
    "Column",
    "ColumnKind",
    # Exceptions
    "VariadicTableError",
    "ConfigurationError",
    "ColumnCountMismatchError",
    "InvalidColumnError",
    "InvalidColumnSizeError",
    "RowShapeError",
    "RowArityError",
    "RowTypeError",
    "InputError",
]
