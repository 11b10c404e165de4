"""Column models for variadic-table."""

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .exceptions import InvalidColumnError


class ColumnKind(Enum):
    """How a column's values are measured and aligned."""

    NUMERIC = "numeric"  # Right-justified, sized by the static column size
    TEXTUAL = "textual"  # Left-justified, sized by len(value); str only
    OTHER = "other"  # Left-justified, sized by the static column size

    @classmethod
    def for_type(cls, value_type: type) -> "ColumnKind":
        """Derive the kind of a column from its declared value type."""
        if issubclass(value_type, numbers.Number):
            return cls.NUMERIC
        if issubclass(value_type, str):
            return cls.TEXTUAL
        return cls.OTHER

    @property
    def right_justified(self) -> bool:
        return self is ColumnKind.NUMERIC


@dataclass(frozen=True)
class Column:
    """
    A single column definition.

    The kind is derived from ``type`` when not given, and is fixed for the
    lifetime of the column.

    Attributes:
        label: Header text shown above the column
        type: Declared type of every value in the column
        kind: Measurement and alignment class of the column
    """

    label: str
    type: type
    kind: ColumnKind = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.type, type):
            raise InvalidColumnError(f"Column type must be a class, got {self.type!r}")
        if self.kind is None:
            object.__setattr__(self, "kind", ColumnKind.for_type(self.type))
        elif not isinstance(self.kind, ColumnKind):
            raise InvalidColumnError(f"Column kind must be a ColumnKind, got {self.kind!r}")

        # Textual cells are sized by len(), which only matches the printed
        # width for strings
        if self.kind is ColumnKind.TEXTUAL and not issubclass(self.type, str):
            raise InvalidColumnError(
                f"Column {self.label!r} cannot be textual: "
                f"{self.type.__name__} is not a str type"
            )

    def accepts(self, value: Any) -> bool:
        """Check whether ``value`` may be stored in this column."""
        if self.kind is ColumnKind.NUMERIC and isinstance(value, numbers.Number):
            return True
        return isinstance(value, self.type)
