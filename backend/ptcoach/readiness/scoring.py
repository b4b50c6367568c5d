"""
Readiness scoring model.

A score starts from ``base`` and loses a fixed penalty per factor:

- sleep: the penalty of the first band whose upper bound the sleep duration
  falls below (no penalty past the last band);
- stress, soreness, energy: a penalty table indexed by the label weight.

The result is clamped to [0, 100]. Formulas are plain values passed to
``score_readiness`` so several versions can coexist.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from ptcoach.readiness.types import EnergyLevel, MuscleSoreness, StressLevel

MIN_SCORE = 0
MAX_SCORE = 100


def _non_decreasing(values) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def _non_increasing(values) -> bool:
    return all(a >= b for a, b in zip(values, values[1:]))


@dataclass(frozen=True)
class ScoringFormula:
    """Versioned set of scoring constants."""

    version: str
    sleep_bands: Tuple[Tuple[float, int], ...]
    stress_penalties: Tuple[int, ...]
    soreness_penalties: Tuple[int, ...]
    energy_penalties: Tuple[int, ...]
    base: int = MAX_SCORE

    def __post_init__(self):
        tables = {
            "stress_penalties": (self.stress_penalties, len(StressLevel)),
            "soreness_penalties": (self.soreness_penalties, len(MuscleSoreness)),
            "energy_penalties": (self.energy_penalties, len(EnergyLevel)),
        }
        for name, (table, size) in tables.items():
            if len(table) != size:
                raise ValueError(f"{name} needs {size} entries, got {len(table)}")
            if any(p < 0 for p in table):
                raise ValueError(f"{name} must not contain negative penalties")

        # Higher stress and soreness weigh more, higher energy weighs less
        if not _non_decreasing(self.stress_penalties):
            raise ValueError("stress_penalties must not decrease")
        if not _non_decreasing(self.soreness_penalties):
            raise ValueError("soreness_penalties must not decrease")
        if not _non_increasing(self.energy_penalties):
            raise ValueError("energy_penalties must not increase")

        thresholds = [upper for upper, _ in self.sleep_bands]
        penalties = [penalty for _, penalty in self.sleep_bands]
        if not all(a < b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("sleep_bands thresholds must be strictly ascending")
        if any(p < 0 for p in penalties) or not _non_increasing(penalties):
            raise ValueError("sleep_bands penalties must be non-negative and not increase")

    def sleep_penalty(self, sleep_hours: float) -> int:
        for upper, penalty in self.sleep_bands:
            if sleep_hours < upper:
                return penalty
        return 0


FORMULA_V1 = ScoringFormula(
    version="v1",
    sleep_bands=((6.0, 20), (7.0, 10)),
    stress_penalties=(0, 10, 25),
    soreness_penalties=(0, 5, 15, 30),
    energy_penalties=(20, 5, 0),
)

FORMULAS: Dict[str, ScoringFormula] = {
    FORMULA_V1.version: FORMULA_V1,
}


def get_formula(version: str) -> ScoringFormula:
    """Look up a registered formula by version tag."""
    try:
        return FORMULAS[version]
    except KeyError:
        raise ValueError(f"Unknown readiness formula version: {version!r}") from None


def clamp_score(value: float) -> int:
    return int(max(MIN_SCORE, min(MAX_SCORE, round(value))))


def score_readiness(
    sleep_hours: float,
    stress_weight: int,
    soreness_weight: int,
    energy_weight: int,
    formula: ScoringFormula = FORMULA_V1,
) -> int:
    """Compute the readiness score for already-normalized inputs."""
    penalty = (
        formula.sleep_penalty(sleep_hours)
        + formula.stress_penalties[stress_weight]
        + formula.soreness_penalties[soreness_weight]
        + formula.energy_penalties[energy_weight]
    )
    return clamp_score(formula.base - penalty)
