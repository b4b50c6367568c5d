"""Validation and normalization of raw wellness inputs."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Type, TypeVar

from ptcoach.exceptions import InvalidInput
from ptcoach.readiness.types import (
    EnergyLevel,
    MuscleSoreness,
    NormalizedWellness,
    StressLevel,
    WellnessLabel,
)

MIN_SLEEP_HOURS = Decimal("0")
MAX_SLEEP_HOURS = Decimal("24")

_ONE_DECIMAL = Decimal("0.1")

LabelT = TypeVar("LabelT", bound=WellnessLabel)


def normalize_sleep_hours(value: Any) -> Decimal:
    """Validate sleep duration and round it to one fractional digit."""
    # bool is an int subclass
    if isinstance(value, bool) or value is None:
        raise InvalidInput("sleepHours out of range", field="sleepHours")
    try:
        hours = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidInput("sleepHours out of range", field="sleepHours") from None
    if not hours.is_finite() or not MIN_SLEEP_HOURS <= hours <= MAX_SLEEP_HOURS:
        raise InvalidInput("sleepHours out of range", field="sleepHours")
    return hours.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def parse_label(label_type: Type[LabelT], value: Any, field: str) -> LabelT:
    """Map a raw string onto its closed label set."""
    if not isinstance(value, str):
        raise InvalidInput(f"unknown category: {field}", field=field)
    try:
        return label_type(value.strip().lower())
    except ValueError:
        raise InvalidInput(f"unknown category: {field}", field=field) from None


def normalize_wellness(
    sleep_hours: Any,
    stress_level: Any,
    muscle_soreness: Any,
    energy_level: Any,
) -> NormalizedWellness:
    """
    Validate a raw wellness report.

    Raises:
        InvalidInput: if ``sleep_hours`` is not a number in [0, 24] or a
            categorical value is outside its label set.
    """
    return NormalizedWellness(
        sleep_hours=normalize_sleep_hours(sleep_hours),
        stress=parse_label(StressLevel, stress_level, "stressLevel"),
        soreness=parse_label(MuscleSoreness, muscle_soreness, "muscleSoreness"),
        energy=parse_label(EnergyLevel, energy_level, "energyLevel"),
    )
