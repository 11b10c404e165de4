"""
Typed table renderer with dash-and-pipe borders.

This module provides a TableRenderer class that collects rows for a fixed
set of typed columns and renders them as an aligned ASCII table.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TextIO

from .exceptions import (
    ColumnCountMismatchError,
    InvalidColumnError,
    InvalidColumnSizeError,
    RowArityError,
    RowTypeError,
)
from .models import Column, ColumnKind

logger = logging.getLogger(__name__)

# Kinds whose values report their own printed length. Every other kind falls
# back to the table's static column size.
_LENGTH_OF: dict[ColumnKind, Callable[[Any], int]] = {
    ColumnKind.TEXTUAL: len,
}


class TableRenderer:
    """Render rows of typed values as a bordered table.

    Example:
        table = TableRenderer(["Name", "Weight", "Age", "Brother"], (str, float, int, str))
        table.add_row(("Fred", 193.4, 35, "Sam"))
        table.print()

    Output:
        -------------------------
        |Name|Weight|Age|Brother|
        -------------------------
        |Fred| 193.4| 35|Sam    |
        -------------------------

    Numeric columns are right-justified, everything else is left-justified.
    str columns are as wide as their longest value. Every other column
    (numbers, bytes, containers, arbitrary objects) is sized by
    ``static_column_size``.
    """

    def __init__(
        self,
        headers: Sequence[str],
        types: Sequence[type],
        static_column_size: int = 0,
    ) -> None:
        """Initialize the table.

        Args:
            headers: Column header labels, one per declared type
            types: Declared value type of each column. Fixes the column count.
            static_column_size: Width assumed for values that cannot report
                their own length

        Raises:
            ColumnCountMismatchError: If len(headers) != len(types)
            InvalidColumnSizeError: If static_column_size is negative
        """
        if len(headers) != len(types):
            raise ColumnCountMismatchError(len(headers), len(types))

        self._init(
            [Column(label, value_type) for label, value_type in zip(headers, types)],
            static_column_size,
        )

    @classmethod
    def from_columns(
        cls, columns: Iterable[Column], static_column_size: int = 0
    ) -> TableRenderer:
        """Create a table from explicit column definitions.

        Raises:
            InvalidColumnError: If an item is not a Column
            InvalidColumnSizeError: If static_column_size is negative
        """
        columns = list(columns)
        for i, column in enumerate(columns):
            if not isinstance(column, Column):
                raise InvalidColumnError(f"Column {i} must be a Column, got {column!r}")

        table = cls.__new__(cls)
        table._init(columns, static_column_size)
        return table

    def _init(self, columns: list[Column], static_column_size: int) -> None:
        if (
            isinstance(static_column_size, bool)
            or not isinstance(static_column_size, int)
            or static_column_size < 0
        ):
            raise InvalidColumnSizeError(static_column_size)

        self._columns = tuple(columns)
        self._headers = tuple(c.label for c in self._columns)
        self._num_columns = len(self._columns)
        self._static_column_size = static_column_size
        self._data: list[tuple[Any, ...]] = []
        self._column_sizes: list[int] = []

        logger.debug(
            "Created table with %d columns (static column size %d)",
            self._num_columns,
            self._static_column_size,
        )

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    @property
    def headers(self) -> tuple[str, ...]:
        return self._headers

    @property
    def num_columns(self) -> int:
        return self._num_columns

    @property
    def static_column_size(self) -> int:
        return self._static_column_size

    @property
    def rows(self) -> tuple[tuple[Any, ...], ...]:
        """Rows in the order they were added."""
        return tuple(self._data)

    @property
    def column_sizes(self) -> list[int]:
        """Column widths computed by the most recent render."""
        return list(self._column_sizes)

    def __len__(self) -> int:
        return len(self._data)

    def add_row(self, data: Sequence[Any]) -> None:
        """Add a row of data.

        Args:
            data: One value per column, in column order

        Raises:
            RowArityError: If the row does not have one value per column
            RowTypeError: If a value does not match its column's type
        """
        row = tuple(data)
        if len(row) != self._num_columns:
            raise RowArityError(self._num_columns, len(row))

        for i, (column, value) in enumerate(zip(self._columns, row)):
            if not column.accepts(value):
                raise RowTypeError(i, column.label, column.type, value)

        self._data.append(row)

    def print(self, stream: TextIO | None = None) -> None:
        """Pretty print the table.

        Args:
            stream: Writable text stream (default: sys.stdout)
        """
        if stream is None:
            stream = sys.stdout

        self._size_columns()

        # One "|" before each column plus a trailing one
        total_width = self._num_columns + 1 + sum(self._column_sizes)
        rule = "-" * total_width + "\n"

        stream.write(rule)

        stream.write("|")
        for header, size in zip(self._headers, self._column_sizes):
            # Center on floor halves of the width and the label
            half = size // 2 - len(header) // 2
            stream.write(f"{' ' * half + header:<{size}}|")
        stream.write("\n")

        stream.write(rule)

        for row in self._data:
            stream.write("|")
            self._print_row(row, stream)
            stream.write("\n")

        stream.write(rule)

    def render(self) -> str:
        """Render the table and return it as a string."""
        buffer = io.StringIO()
        self.print(buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render()

    def _print_row(self, row: tuple[Any, ...], stream: TextIO) -> None:
        for column, size, value in zip(self._columns, self._column_sizes, row):
            align = ">" if column.kind.right_justified else "<"
            stream.write(f"{str(value):{align}{size}}|")

    def _size_of(self, column: Column, value: Any) -> int:
        length_of = _LENGTH_OF.get(column.kind)
        if length_of is None:
            return self._static_column_size
        return length_of(value)

    def _size_columns(self) -> None:
        """Find the width of each column and store it in _column_sizes."""
        # Start with the size of the headers
        sizes = [len(header) for header in self._headers]

        for row in self._data:
            for i, (column, value) in enumerate(zip(self._columns, row)):
                sizes[i] = max(sizes[i], self._size_of(column, value))

        self._column_sizes = sizes
        logger.debug("Sized %d rows into column widths %s", len(self._data), sizes)
