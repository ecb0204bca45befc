"""Tests for history.py - Bounded calculation history."""

import dataclasses
from datetime import timezone

import pytest

from scicalc.history import DEFAULT_CAPACITY, HistoryLog, HistoryRecord


class TestHistoryRecord:
    """Tests for HistoryRecord dataclass."""

    def test_record_creation(self):
        """Test record creation."""
        record = HistoryRecord(expression="6 ^ 2", result="36")
        assert record.expression == "6 ^ 2"
        assert record.result == "36"
        assert record.id
        assert record.timestamp.tzinfo == timezone.utc

    def test_record_is_immutable(self):
        """Test record is immutable."""
        record = HistoryRecord(expression="1 + 1", result="2")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.result = "3"

    def test_record_str(self):
        """Test record str."""
        assert str(HistoryRecord(expression="sqrt(9)", result="3")) == "sqrt(9) = 3"

    def test_record_to_dict(self):
        """Test record to dict."""
        record = HistoryRecord(expression="1 + 1", result="2")
        data = record.to_dict()
        assert data["id"] == record.id
        assert data["expression"] == "1 + 1"
        assert data["result"] == "2"
        assert data["timestamp"] == record.timestamp.isoformat()


class TestHistoryLog:
    """Tests for HistoryLog."""

    def test_default_capacity(self):
        """Test default capacity."""
        assert HistoryLog().capacity == DEFAULT_CAPACITY == 50

    def test_invalid_capacity(self):
        """Test invalid capacity."""
        with pytest.raises(ValueError):
            HistoryLog(capacity=0)

    def test_record_returns_entry(self):
        """Test record returns entry."""
        log = HistoryLog()
        entry = log.record("2 + 3", "5")
        assert entry.expression == "2 + 3"
        assert log.all() == [entry]

    def test_newest_first(self):
        """Test newest first."""
        log = HistoryLog()
        first = log.record("1 + 1", "2")
        second = log.record("2 + 2", "4")
        assert log.all() == [second, first]
        assert log.latest() is second

    def test_latest_empty(self):
        """Test latest empty."""
        assert HistoryLog().latest() is None

    def test_unique_ids(self):
        """Test unique ids."""
        log = HistoryLog()
        ids = {log.record(f"{i} + 0", str(i)).id for i in range(20)}
        assert len(ids) == 20

    def test_capacity_evicts_oldest(self):
        """Test that more than 50 records keeps the 50 most recent."""
        log = HistoryLog()
        for i in range(60):
            log.record(f"{i} + 0", str(i))

        records = log.all()
        assert len(records) == 50
        assert len(log) == 50
        assert [r.result for r in records] == [str(i) for i in range(59, 9, -1)]

    def test_small_capacity(self):
        """Test small capacity."""
        log = HistoryLog(capacity=2)
        log.record("a", "1")
        log.record("b", "2")
        log.record("c", "3")
        assert [r.expression for r in log.all()] == ["c", "b"]

    def test_clear(self):
        """Test clear."""
        log = HistoryLog()
        log.record("1 + 1", "2")
        log.clear()
        assert log.all() == []
        assert len(log) == 0

    def test_all_is_snapshot(self):
        """Test all is snapshot."""
        log = HistoryLog()
        log.record("1 + 1", "2")
        snapshot = log.all()
        snapshot.clear()
        assert len(log) == 1

    def test_search(self):
        """Test search."""
        log = HistoryLog()
        log.record("sqrt(9)", "3")
        log.record("2 + 3", "5")
        log.record("SQRT(16)", "4")
        assert [r.result for r in log.search("sqrt")] == ["4", "3"]
        assert log.search("÷") == []
