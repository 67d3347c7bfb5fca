"""Tests for the days table store adapter."""

import sqlite3
from datetime import date, datetime

import pytest

from src.core.errors import DecodeError, StoreError
from src.core.models.day import Day
from src.data.db.day_store import INSERT_DATE, SELECT_BY_ID, DayStore, row_to_day


@pytest.fixture
def store(conn):
    s = DayStore(conn)
    s.ensure_schema()
    return s


class TestEnsureSchema:
    """Tests for DayStore.ensure_schema."""

    def test_is_idempotent(self, conn):
        store = DayStore(conn)
        store.ensure_schema()
        store.ensure_schema()
        tables = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='days'"
        ).fetchall()
        assert len(tables) == 1

    def test_creates_unique_date_index(self, conn, store):
        index = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='index' AND name='ux_days_date'"
        ).fetchone()
        assert index is not None

    def test_existing_duplicates_surface_as_store_error(self, conn):
        conn.execute("CREATE TABLE days (id INTEGER PRIMARY KEY AUTOINCREMENT, date DATE NOT NULL)")
        conn.execute("INSERT INTO days (date) VALUES ('2024-03-14')")
        conn.execute("INSERT INTO days (date) VALUES ('2024-03-14')")
        conn.commit()
        with pytest.raises(StoreError) as exc_info:
            DayStore(conn).ensure_schema()
        assert exc_info.value.operation == "ensure_schema"
        assert "ux_days_date" in exc_info.value.statement


class TestInsertAndFind:
    """Tests for insert_date / find_by_date / find_by_id."""

    def test_insert_then_find(self, store):
        new_id = store.insert_date(date(2024, 3, 14))
        assert new_id is not None
        assert store.find_by_date(date(2024, 3, 14)) == Day(new_id, date(2024, 3, 14))
        assert store.find_by_id(new_id) == Day(new_id, date(2024, 3, 14))

    def test_missing_returns_none(self, store):
        assert store.find_by_date(date(2024, 3, 14)) is None
        assert store.find_by_id(42) is None

    def test_duplicate_insert_returns_none(self, store):
        store.insert_date(date(2024, 3, 14))
        assert store.insert_date(date(2024, 3, 14)) is None

    def test_dates_stored_as_iso_text(self, conn, store):
        store.insert_date(date(2024, 3, 4))
        assert conn.execute("SELECT date FROM days").fetchone()[0] == "2024-03-04"

    def test_does_not_touch_connection_row_factory(self, conn, store):
        store.insert_date(date(2024, 3, 14))
        store.find_by_date(date(2024, 3, 14))
        assert conn.row_factory is None

    def test_ids_increase(self, store):
        first = store.insert_date(date(2024, 3, 15))
        second = store.insert_date(date(2024, 3, 14))
        assert second > first

    def test_list_recent_orders_by_date_desc(self, store):
        for d in (date(2024, 3, 12), date(2024, 3, 14), date(2024, 3, 13)):
            store.insert_date(d)
        assert [d.date for d in store.list_recent(2)] == [date(2024, 3, 14), date(2024, 3, 13)]


class TestStoreErrors:
    """Statement failures are wrapped with the statement text."""

    def test_query_without_table(self, conn):
        store = DayStore(conn)
        with pytest.raises(StoreError) as exc_info:
            store.find_by_id(1)
        assert exc_info.value.statement == SELECT_BY_ID
        assert exc_info.value.operation == "find_by_id"
        assert isinstance(exc_info.value.__cause__, sqlite3.OperationalError)

    def test_insert_without_table(self, conn):
        store = DayStore(conn)
        with pytest.raises(StoreError) as exc_info:
            store.insert_date(date(2024, 3, 14))
        assert exc_info.value.statement == INSERT_DATE

    def test_closed_connection(self):
        connection = sqlite3.connect(":memory:")
        store = DayStore(connection)
        connection.close()
        with pytest.raises(StoreError):
            store.find_by_date(date(2024, 3, 14))


class TestRowToDay:
    """Tests for row_to_day decoding."""

    def test_decodes_mapping(self):
        assert row_to_day({"id": 3, "date": "2024-03-14"}) == Day(3, date(2024, 3, 14))

    def test_accepts_date_value(self):
        assert row_to_day({"id": 3, "date": date(2024, 3, 14)}) == Day(3, date(2024, 3, 14))

    def test_decodes_sqlite_row(self, conn):
        cursor = conn.cursor()
        cursor.row_factory = sqlite3.Row
        row = cursor.execute("SELECT 7 AS id, '2024-03-14' AS date").fetchone()
        assert row_to_day(row) == Day(7, date(2024, 3, 14))

    def test_missing_field_in_sqlite_row(self, conn):
        cursor = conn.cursor()
        cursor.row_factory = sqlite3.Row
        row = cursor.execute("SELECT 7 AS id").fetchone()
        with pytest.raises(DecodeError):
            row_to_day(row)

    @pytest.mark.parametrize(
        "row",
        [
            {"date": "2024-03-14"},
            {"id": 1},
            {"id": "1", "date": "2024-03-14"},
            {"id": True, "date": "2024-03-14"},
            {"id": None, "date": "2024-03-14"},
            {"id": 1, "date": "14/03/2024"},
            {"id": 1, "date": "2024-02-30"},
            {"id": 1, "date": 20240314},
            {"id": 1, "date": None},
            {"id": 1, "date": datetime(2024, 3, 14, 8, 30)},
            (1, "2024-03-14"),
        ],
    )
    def test_malformed_rows(self, row):
        with pytest.raises(DecodeError):
            row_to_day(row)
