"""Pytest fixtures for variadic-table tests."""

import io

import pytest

from variadic_table import TableRenderer

PEOPLE_HEADERS = ["Name", "Weight", "Age", "Brother"]
PEOPLE_TYPES = (str, float, int, str)


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory text sink for rendered tables."""
    return io.StringIO()


@pytest.fixture
def people_table() -> TableRenderer:
    """Table with the four-column people layout and no rows."""
    return TableRenderer(PEOPLE_HEADERS, PEOPLE_TYPES)


@pytest.fixture
def populated_table(people_table: TableRenderer) -> TableRenderer:
    """People table with two rows."""
    people_table.add_row(("Fred", 193.4, 35, "Sam"))
    people_table.add_row(("Billy", 89.2, 7, "Fred"))
    return people_table
