"""Calculation history management."""

import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Deque, List, Optional


DEFAULT_CAPACITY = 50


@dataclass(frozen=True)
class HistoryRecord:
    """A single completed calculation."""

    expression: str
    result: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "expression": self.expression,
            "result": self.result,
            "timestamp": self.timestamp.isoformat(),
        }


class HistoryLog:
    """Newest-first log of calculations, bounded to ``capacity`` entries.

    Recording past capacity evicts the oldest record.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._records: Deque[HistoryRecord] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._records.maxlen

    def record(self, expression: str, result: str) -> HistoryRecord:
        """Add a calculation to the front of the log."""
        entry = HistoryRecord(expression=expression, result=result)
        self._records.appendleft(entry)
        return entry

    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()

    def all(self) -> List[HistoryRecord]:
        """Snapshot of the log, newest first."""
        return list(self._records)

    def latest(self) -> Optional[HistoryRecord]:
        """Most recent record, if any."""
        return self._records[0] if self._records else None

    def search(self, term: str) -> List[HistoryRecord]:
        """Records whose expression contains term (case-insensitive)."""
        needle = term.lower()
        return [r for r in self._records if needle in r.expression.lower()]

    def __len__(self) -> int:
        return len(self._records)
