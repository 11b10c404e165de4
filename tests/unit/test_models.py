"""Tests for column models."""

from decimal import Decimal
from fractions import Fraction

import pytest

from variadic_table import Column, ColumnKind, ConfigurationError, InvalidColumnError


class Opaque:
    """Type with neither a length nor a numeric base."""


class Label(str):
    """str subclass."""


class TestColumnKind:
    """Tests for ColumnKind derivation."""

    @pytest.mark.parametrize("value_type", [int, float, bool, complex, Decimal, Fraction])
    def test_numeric_types(self, value_type: type) -> None:
        """Number subclasses are numeric."""
        assert ColumnKind.for_type(value_type) is ColumnKind.NUMERIC

    @pytest.mark.parametrize("value_type", [str, Label])
    def test_str_types(self, value_type: type) -> None:
        """str and its subclasses are textual."""
        assert ColumnKind.for_type(value_type) is ColumnKind.TEXTUAL

    @pytest.mark.parametrize(
        "value_type", [Opaque, object, type(None), bytes, list, tuple, dict]
    )
    def test_other_types(self, value_type: type) -> None:
        """Everything else is other."""
        assert ColumnKind.for_type(value_type) is ColumnKind.OTHER

    def test_justification(self) -> None:
        """Only numeric columns are right-justified."""
        assert ColumnKind.NUMERIC.right_justified
        assert not ColumnKind.TEXTUAL.right_justified
        assert not ColumnKind.OTHER.right_justified


class TestColumn:
    """Tests for Column."""

    def test_kind_derived_from_type(self) -> None:
        """Kind defaults to the one derived from the type."""
        assert Column("Age", int).kind is ColumnKind.NUMERIC
        assert Column("Name", str).kind is ColumnKind.TEXTUAL

    def test_explicit_kind(self) -> None:
        """An explicit kind overrides derivation."""
        column = Column("Code", str, ColumnKind.NUMERIC)
        assert column.kind is ColumnKind.NUMERIC

    def test_frozen(self) -> None:
        """Columns cannot change after creation."""
        column = Column("Age", int)
        with pytest.raises(AttributeError):
            column.label = "Years"  # type: ignore[misc]

    def test_type_must_be_a_class(self) -> None:
        """Column types are classes, not instances."""
        with pytest.raises(InvalidColumnError, match="must be a class"):
            Column("Age", 3)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value_type", [int, bytes, list, Opaque])
    def test_textual_requires_str_type(self, value_type: type) -> None:
        """Only str types can be declared textual."""
        with pytest.raises(InvalidColumnError, match="cannot be textual"):
            Column("N", value_type, ColumnKind.TEXTUAL)

    def test_textual_str_subclass(self) -> None:
        """str subclasses can be declared textual."""
        assert Column("Tag", Label, ColumnKind.TEXTUAL).kind is ColumnKind.TEXTUAL

    @pytest.mark.parametrize("kind", ["textual", 1])
    def test_kind_must_be_column_kind(self, kind: object) -> None:
        """Kinds are ColumnKind members, not their values."""
        with pytest.raises(InvalidColumnError, match="must be a ColumnKind"):
            Column("Name", str, kind)  # type: ignore[arg-type]

    def test_invalid_column_is_configuration_error(self) -> None:
        """Bad column definitions are configuration errors."""
        with pytest.raises(ConfigurationError):
            Column("N", int, ColumnKind.TEXTUAL)

    def test_accepts_matching_type(self) -> None:
        """Values of the declared type are accepted."""
        assert Column("Name", str).accepts("Fred")
        assert Column("Where", Opaque).accepts(Opaque())

    def test_numeric_accepts_any_number(self) -> None:
        """Numeric columns accept any number type."""
        column = Column("Weight", float)
        assert column.accepts(193.4)
        assert column.accepts(193)
        assert column.accepts(Decimal("193.4"))

    def test_rejects_other_types(self) -> None:
        """Values of other types are rejected."""
        assert not Column("Weight", float).accepts("193.4")
        assert not Column("Name", str).accepts(42)
        assert not Column("Where", Opaque).accepts("here")
