"""Projection of stored readiness scores into chart series."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, NamedTuple, Optional, Tuple
from uuid import UUID

from ptcoach.readiness.recommendation import DEFAULT_TIERS, ReadinessTier, select_tier
from ptcoach.readiness.scoring import MAX_SCORE
from ptcoach.readiness.types import AssessmentStore, DateRange


class TrendPoint(NamedTuple):
    """One bar of the readiness chart."""

    label: str
    value: int
    color: Optional[str] = None


def format_label(day: date) -> str:
    """Short chart label, e.g. ``Oct 3``."""
    return f"{day:%b} {day.day}"


def trailing_range(days: int, today: Optional[date] = None) -> DateRange:
    """The ``days`` days up to and including ``today``."""
    today = today or date.today()
    return DateRange(today - timedelta(days=days), today)


@dataclass(frozen=True)
class TrendSeries:
    """
    Lazy, restartable readiness series for one client.

    Each iteration queries the store once and yields points in the store's
    ascending date order. Scores are read as stored, never recomputed.
    """

    store: AssessmentStore
    client_id: UUID
    date_range: DateRange
    tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS
    max_value: int = MAX_SCORE

    def __iter__(self) -> Iterator[TrendPoint]:
        for assessment in self.store.query_assessments(self.client_id, self.date_range):
            yield TrendPoint(
                label=format_label(assessment.date),
                value=assessment.score,
                color=select_tier(assessment.score, self.tiers).color,
            )


def readiness_trend(
    store: AssessmentStore,
    client_id: UUID,
    date_range: DateRange,
    tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS,
) -> TrendSeries:
    """Build the readiness trend series for ``client_id`` over ``date_range``."""
    return TrendSeries(store=store, client_id=client_id, date_range=date_range, tiers=tiers)
