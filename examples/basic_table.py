#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates declaring typed columns, adding rows and printing.

Run:
    python examples/basic_table.py
"""

import io

from variadic_table import Column, ColumnKind, TableRenderer


def main() -> None:
    """Print a small table of people."""
    print("=== People ===\n")

    table = TableRenderer(["Name", "Weight", "Age", "Brother"], (str, float, int, str))
    table.add_row(("Fred", 193.4, 35, "Sam"))
    table.add_row(("Billy", 89.2, 7, "Fred"))
    table.add_row(("Leonardo", 130.0, 28, "Donatello"))
    table.print()

    print("\n=== Static column size ===\n")

    # Numbers have no length, so give them room explicitly
    table = TableRenderer(["Item", "Qty", "Price"], (str, int, float), static_column_size=8)
    table.add_row(("Apple", 3, 0.5))
    table.add_row(("Watermelon", 1, 4.25))
    table.print()

    print("\n=== Explicit column kinds ===\n")

    # Right-justify zip codes even though they are strings
    table = TableRenderer.from_columns(
        [Column("City", str), Column("Zip", str, ColumnKind.NUMERIC)]
    )
    table.add_row(("Springfield", "62701"))
    table.add_row(("Boise", "83702"))

    buffer = io.StringIO()
    table.print(buffer)
    print(buffer.getvalue(), end="")


if __name__ == "__main__":
    main()
