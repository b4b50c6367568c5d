"""Tests for wellness input validation and normalization."""

from decimal import Decimal

import pytest

from ptcoach.exceptions import ErrorCode, InvalidInput
from ptcoach.readiness import (
    EnergyLevel,
    MuscleSoreness,
    StressLevel,
    normalize_wellness,
)
from ptcoach.readiness.normalizer import normalize_sleep_hours, parse_label


class TestNormalizeSleepHours:
    """Tests for normalize_sleep_hours."""

    def test_accepts_int_and_float(self):
        assert normalize_sleep_hours(8) == Decimal("8.0")
        assert normalize_sleep_hours(7.5) == Decimal("7.5")

    def test_accepts_numeric_string(self):
        assert normalize_sleep_hours(" 6.5 ") == Decimal("6.5")

    def test_rounds_half_up_to_one_digit(self):
        assert normalize_sleep_hours("7.25") == Decimal("7.3")
        assert normalize_sleep_hours("7.24") == Decimal("7.2")

    def test_bounds_are_inclusive(self):
        assert normalize_sleep_hours(0) == Decimal("0.0")
        assert normalize_sleep_hours(24) == Decimal("24.0")

    @pytest.mark.parametrize("value", [30, 24.01, -0.5, -1])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidInput) as exc_info:
            normalize_sleep_hours(value)
        assert exc_info.value.message == "sleepHours out of range"
        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert exc_info.value.details == {"field": "sleepHours"}

    @pytest.mark.parametrize("value", [None, True, "eight", "", float("nan"), float("inf")])
    def test_non_numeric(self, value):
        with pytest.raises(InvalidInput, match="sleepHours out of range"):
            normalize_sleep_hours(value)


class TestParseLabel:
    """Tests for categorical label parsing."""

    def test_exact_labels(self):
        assert parse_label(StressLevel, "medium", "stressLevel") is StressLevel.MEDIUM
        assert parse_label(MuscleSoreness, "severe", "muscleSoreness") is MuscleSoreness.SEVERE

    def test_case_and_whitespace_insensitive(self):
        assert parse_label(EnergyLevel, " HIGH ", "energyLevel") is EnergyLevel.HIGH

    def test_unknown_label(self):
        with pytest.raises(InvalidInput) as exc_info:
            parse_label(StressLevel, "extreme", "stressLevel")
        assert exc_info.value.message == "unknown category: stressLevel"

    def test_label_sets_do_not_mix(self):
        # "none" is a soreness label, not a stress label
        with pytest.raises(InvalidInput, match="unknown category: stressLevel"):
            parse_label(StressLevel, "none", "stressLevel")

    def test_non_string(self):
        with pytest.raises(InvalidInput, match="unknown category: energyLevel"):
            parse_label(EnergyLevel, 2, "energyLevel")


class TestLabelWeights:
    """Ordinal weights follow declaration order."""

    def test_stress_weights(self):
        assert [level.weight for level in StressLevel] == [0, 1, 2]
        assert StressLevel.HIGH.weight == 2

    def test_soreness_weights(self):
        assert MuscleSoreness.NONE.weight == 0
        assert MuscleSoreness.SEVERE.weight == 3

    def test_energy_weights(self):
        assert EnergyLevel.LOW.weight == 0
        assert EnergyLevel.HIGH.weight == 2


class TestNormalizeWellness:
    """Tests for the full normalizer."""

    def test_canonical_tuple(self):
        wellness = normalize_wellness(7.5, "high", "moderate", "low")
        assert wellness.sleep_hours == Decimal("7.5")
        assert wellness.stress is StressLevel.HIGH
        assert wellness.soreness is MuscleSoreness.MODERATE
        assert wellness.energy is EnergyLevel.LOW
        assert wellness.weights == (7.5, 2, 2, 0)

    @pytest.mark.parametrize(
        "args, field",
        [
            ((8, "calm", "none", "high"), "stressLevel"),
            ((8, "low", "aching", "high"), "muscleSoreness"),
            ((8, "low", "none", "max"), "energyLevel"),
        ],
    )
    def test_reports_offending_field(self, args, field):
        with pytest.raises(InvalidInput) as exc_info:
            normalize_wellness(*args)
        assert exc_info.value.message == f"unknown category: {field}"

    def test_sleep_checked_first(self):
        with pytest.raises(InvalidInput, match="sleepHours out of range"):
            normalize_wellness(30, "calm", "none", "high")
