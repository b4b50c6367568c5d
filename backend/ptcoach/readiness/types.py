"""Value types shared by the readiness engine."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Protocol, Sequence
from uuid import UUID

from ptcoach.exceptions import InvalidInput


class WellnessLabel(str, Enum):
    """Closed categorical label whose weight is its declaration position."""

    @property
    def weight(self) -> int:
        return list(type(self)).index(self)


class StressLevel(WellnessLabel):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MuscleSoreness(WellnessLabel):
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class EnergyLevel(WellnessLabel):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class NormalizedWellness(NamedTuple):
    """Validated wellness report ready for scoring."""

    sleep_hours: Decimal
    stress: StressLevel
    soreness: MuscleSoreness
    energy: EnergyLevel

    @property
    def weights(self) -> tuple[float, int, int, int]:
        """Canonical ``(sleep_hours, stress, soreness, energy)`` scoring tuple."""
        return (
            float(self.sleep_hours),
            self.stress.weight,
            self.soreness.weight,
            self.energy.weight,
        )


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidInput("date range start after end", field="start")

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class AssessmentRecord:
    """A scored assessment as handed to the storage collaborator."""

    client_id: UUID
    trainer_id: UUID
    date: date
    sleep_hours: Decimal
    stress_level: StressLevel
    muscle_soreness: MuscleSoreness
    energy_level: EnergyLevel
    score: int
    recommendation: str
    formula_version: str


class StoredAssessment(Protocol):
    """Read-side shape of a persisted assessment."""

    date: date
    score: int


class AssessmentStore(Protocol):
    """Storage collaborator used by the readiness engine."""

    def create_assessment(self, record: AssessmentRecord) -> UUID:
        ...

    def query_assessments(
        self, client_id: UUID, date_range: DateRange
    ) -> Sequence[StoredAssessment]:
        ...
