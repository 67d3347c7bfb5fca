"""Shared fixtures: in-memory SQLite and a controllable clock."""

import sqlite3
from datetime import date

import pytest

from src.data.db.day_repo import DayRepository


class FixedClock:
    """Callable returning a settable "today"."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def clock():
    # Thursday
    return FixedClock(date(2024, 3, 14))


@pytest.fixture
def repo(conn, clock):
    return DayRepository(conn, clock=clock)


@pytest.fixture
def row_count(conn):
    """Returns a callable counting rows in the days table."""
    return lambda: conn.execute("SELECT COUNT(*) FROM days").fetchone()[0]
