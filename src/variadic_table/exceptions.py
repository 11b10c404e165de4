"""Exceptions for variadic-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class VariadicTableError(Exception):
    """
    Base exception for all variadic-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(VariadicTableError):
    """
    Raised when a table is constructed with an invalid definition.

    A table definition is fixed for the lifetime of the table, so these
    errors indicate a programming mistake rather than bad data. Callers
    are not expected to recover from them.
    """

    pass


class RowShapeError(VariadicTableError):
    """
    Base exception for rows that do not fit the declared columns.

    The row is rejected and the table is left unchanged.
    """

    pass


class InputError(VariadicTableError):
    """
    Raised when external input cannot be turned into table rows.

    This covers unknown column type names and cell text that cannot be
    converted to its column's declared type.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ColumnCountMismatchError(ConfigurationError):
    """
    Raised when the number of headers does not match the number of columns.

    Attributes:
        num_headers: Number of header labels supplied
        num_columns: Number of declared column types
    """

    def __init__(self, num_headers: int, num_columns: int) -> None:
        self.num_headers = num_headers
        self.num_columns = num_columns
        super().__init__(
            f"Number of headers must match number of columns: "
            f"got {num_headers} headers for {num_columns} columns"
        )


class InvalidColumnError(ConfigurationError):
    """Raised when a column definition is malformed or self-contradictory."""

    pass


class InvalidColumnSizeError(ConfigurationError):
    """Raised when the static column size is not a non-negative integer."""

    def __init__(self, size: Any) -> None:
        self.size = size
        super().__init__(f"Static column size must be a non-negative integer, got {size!r}")


# ---------------------------------------------------------------------------
# Row Exceptions
# ---------------------------------------------------------------------------


class RowArityError(RowShapeError):
    """
    Raised when a row has the wrong number of values.

    Attributes:
        expected: Number of declared columns
        actual: Number of values in the rejected row
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row has {actual} values, expected {expected}")


class RowTypeError(RowShapeError):
    """
    Raised when a row value does not match its column's declared type.

    Attributes:
        column: Zero-based index of the offending column
        label: Header label of the offending column
        expected_type: The column's declared type
        value: The rejected value
    """

    def __init__(self, column: int, label: str, expected_type: type, value: Any) -> None:
        self.column = column
        self.label = label
        self.expected_type = expected_type
        self.value = value
        super().__init__(
            f"Column {column} ({label!r}) expects {expected_type.__name__}, "
            f"got {type(value).__name__}: {value!r}"
        )
