"""Command-line interface for rendering CSV data as variadic tables."""

import csv
import io
import logging
import sys
from collections.abc import Sequence
from typing import Any, BinaryIO

import click

from .exceptions import InputError, VariadicTableError
from .models import Column
from .table import TableRenderer

logger = logging.getLogger(__name__)

# Column type names accepted by --types
COLUMN_TYPES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
}


def parse_types(spec: str) -> list[type]:
    """
    Parse a comma-separated list of column type names.

    Args:
        spec: Type names such as "str,float,int,str"

    Returns:
        Declared column types in order

    Raises:
        InputError: If a name is not a supported column type
    """
    types: list[type] = []
    for name in spec.split(","):
        name = name.strip()
        if name not in COLUMN_TYPES:
            supported = ", ".join(COLUMN_TYPES)
            raise InputError(f"Unknown column type {name!r} (supported: {supported})")
        types.append(COLUMN_TYPES[name])
    return types


def convert_row(record: Sequence[str], types: Sequence[type], line: int) -> tuple[Any, ...]:
    """
    Convert one CSV record to a row of typed values.

    Raises:
        InputError: If the record has the wrong number of cells or a cell
            cannot be converted to its column type
    """
    if len(record) != len(types):
        raise InputError(f"Line {line}: expected {len(types)} cells, got {len(record)}")

    values = []
    for cell, value_type in zip(record, types):
        try:
            values.append(value_type(cell))
        except ValueError as e:
            raise InputError(
                f"Line {line}: cannot convert {cell!r} to {value_type.__name__}"
            ) from e
    return tuple(values)


def read_records(source: BinaryIO, delimiter: str = ",") -> list[tuple[int, list[str]]]:
    """
    Read the non-blank CSV records from a UTF-8 byte stream.

    The stream is decoded with newline="" so that line breaks inside quoted
    fields are kept as written. The source is left open.

    Returns:
        (line number, record) pairs, where the line number is the physical
        line the record ends on
    """
    text = io.TextIOWrapper(source, encoding="utf-8", newline="")
    try:
        reader = csv.reader(text, delimiter=delimiter)
        return [(reader.line_num, record) for record in reader if record]
    finally:
        text.detach()


@click.group()
@click.version_option(package_name="variadic-table")
def cli() -> None:
    """variadic-table: render typed tabular data as aligned text tables."""
    pass


@cli.command()
@click.argument("input_file", metavar="INPUT", type=click.File("rb"))
@click.option(
    "--types",
    "-t",
    "type_spec",
    required=True,
    help="Comma-separated column types, one per CSV column (str, int, float)",
)
@click.option(
    "--static-column-size",
    "-s",
    type=click.IntRange(min=0),
    default=0,
    help="Width assumed for numeric cells, which cannot be measured (default: 0)",
)
@click.option(
    "--delimiter",
    "-d",
    default=",",
    help="CSV field delimiter (default: ',')",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Output file (default: stdout)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def render(
    input_file: BinaryIO,
    type_spec: str,
    static_column_size: int,
    delimiter: str,
    output: str | None,
    verbose: bool,
) -> None:
    """Render a CSV file as a table.

    The first CSV record holds the column headers. Use '-' to read stdin.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
        )

    try:
        if len(delimiter) != 1:
            raise InputError(f"Delimiter must be a single character, got {delimiter!r}")

        types = parse_types(type_spec)
        records = read_records(input_file, delimiter)
        if not records:
            raise InputError("Input has no header row")

        table = TableRenderer(records[0][1], types, static_column_size)
        for line, record in records[1:]:
            table.add_row(convert_row(record, types, line))

        logger.debug("Loaded %d rows", len(table))

        if output:
            with open(output, "w", encoding="utf-8") as f:
                table.print(f)
            click.echo(f"✓ Table written to: {output}")
        else:
            click.echo(table.render(), nl=False)

    except (VariadicTableError, csv.Error, UnicodeDecodeError, OSError) as e:
        click.echo(f"✗ Failed to render table: {e}", err=True)
        sys.exit(1)


@cli.command("types")
def list_types() -> None:
    """List supported column types and how they are aligned."""
    table = TableRenderer.from_columns(
        [Column("Type", str), Column("Kind", str), Column("Justification", str)]
    )
    for name, value_type in COLUMN_TYPES.items():
        kind = Column(name, value_type).kind
        table.add_row((name, kind.value, "right" if kind.right_justified else "left"))

    click.echo(table.render(), nl=False)
