"""Tests for the readiness trend aggregator."""

from dataclasses import dataclass
from datetime import date
from uuid import uuid4

import pytest

from ptcoach.exceptions import InvalidInput, NotFound
from ptcoach.readiness import DateRange, TrendPoint, readiness_trend
from ptcoach.readiness.trends import format_label, trailing_range


@dataclass
class StoredRow:
    date: date
    score: int


class FakeStore:
    """In-memory store that counts queries."""

    def __init__(self, rows=None, known_clients=None):
        self.rows = rows or {}
        self.known_clients = known_clients
        self.query_count = 0

    def create_assessment(self, record):
        raise AssertionError("trend queries must not write")

    def query_assessments(self, client_id, date_range):
        self.query_count += 1
        if self.known_clients is not None and client_id not in self.known_clients:
            raise NotFound("Client", str(client_id))
        rows = [row for row in self.rows.get(client_id, []) if row.date in date_range]
        return sorted(rows, key=lambda row: row.date)


class TestDateRange:
    """Tests for DateRange."""

    def test_inclusive(self):
        date_range = DateRange(date(2026, 10, 1), date(2026, 10, 5))
        assert date(2026, 10, 1) in date_range
        assert date(2026, 10, 5) in date_range
        assert date(2026, 10, 6) not in date_range

    def test_single_day(self):
        day = date(2026, 10, 1)
        assert day in DateRange(day, day)

    def test_reversed_range_rejected(self):
        with pytest.raises(InvalidInput, match="date range start after end"):
            DateRange(date(2026, 10, 5), date(2026, 10, 1))

    def test_trailing_range(self):
        date_range = trailing_range(30, today=date(2026, 10, 31))
        assert date_range == DateRange(date(2026, 10, 1), date(2026, 10, 31))


class TestFormatLabel:
    def test_short_month_and_day(self):
        assert format_label(date(2026, 1, 9)) == "Jan 9"
        assert format_label(date(2026, 10, 18)) == "Oct 18"


class TestReadinessTrend:
    """Tests for readiness_trend / TrendSeries."""

    def setup_method(self):
        self.client_id = uuid4()
        self.october = DateRange(date(2026, 10, 1), date(2026, 10, 31))

    def test_three_assessments_in_date_order(self):
        store = FakeStore({
            self.client_id: [
                StoredRow(date(2026, 10, 5), 65),
                StoredRow(date(2026, 10, 1), 42),
                StoredRow(date(2026, 10, 3), 90),
            ]
        })
        points = list(readiness_trend(store, self.client_id, self.october))
        assert [(p.label, p.value) for p in points] == [
            ("Oct 1", 42),
            ("Oct 3", 90),
            ("Oct 5", 65),
        ]

    def test_uses_stored_scores_verbatim(self):
        # 37 is not a score formula v1 can produce; it must pass through untouched
        store = FakeStore({self.client_id: [StoredRow(date(2026, 10, 2), 37)]})
        assert [p.value for p in readiness_trend(store, self.client_id, self.october)] == [37]

    def test_empty_range_is_empty_series(self):
        store = FakeStore({self.client_id: [StoredRow(date(2026, 9, 15), 80)]})
        assert list(readiness_trend(store, self.client_id, self.october)) == []

    def test_points_carry_tier_colors(self):
        store = FakeStore({
            self.client_id: [
                StoredRow(date(2026, 10, 1), 95),
                StoredRow(date(2026, 10, 2), 70),
                StoredRow(date(2026, 10, 3), 10),
            ]
        })
        colors = [p.color for p in readiness_trend(store, self.client_id, self.october)]
        assert colors == ["#34C759", "#FF9500", "#FF3B30"]

    def test_lazy_and_restartable(self):
        store = FakeStore({self.client_id: [StoredRow(date(2026, 10, 1), 80)]})
        series = readiness_trend(store, self.client_id, self.october)
        assert store.query_count == 0

        first = list(series)
        second = list(series)
        assert first == second == [TrendPoint("Oct 1", 80, "#34C759")]
        assert store.query_count == 2

    def test_max_value_override(self):
        series = readiness_trend(FakeStore(), self.client_id, self.october)
        assert series.max_value == 100

    def test_unknown_client_propagates_not_found(self):
        store = FakeStore(known_clients=set())
        series = readiness_trend(store, self.client_id, self.october)
        with pytest.raises(NotFound):
            list(series)
