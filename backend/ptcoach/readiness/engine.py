"""Readiness assessment pipeline: normalize, score, recommend."""

from dataclasses import dataclass
from typing import Any, Tuple

from ptcoach.readiness.normalizer import normalize_wellness
from ptcoach.readiness.recommendation import DEFAULT_TIERS, ReadinessTier, select_tier
from ptcoach.readiness.scoring import FORMULA_V1, ScoringFormula, score_readiness
from ptcoach.readiness.types import AssessmentRecord, NormalizedWellness


@dataclass(frozen=True)
class Assessment:
    """Outcome of scoring one wellness report."""

    wellness: NormalizedWellness
    score: int
    tier: ReadinessTier
    formula_version: str

    @property
    def recommendation(self) -> str:
        return self.tier.recommendation


def evaluate(
    wellness: NormalizedWellness,
    formula: ScoringFormula = FORMULA_V1,
    tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS,
) -> Assessment:
    """Score an already-normalized report."""
    score = score_readiness(*wellness.weights, formula=formula)
    return Assessment(
        wellness=wellness,
        score=score,
        tier=select_tier(score, tiers),
        formula_version=formula.version,
    )


def assess(
    sleep_hours: Any,
    stress_level: Any,
    muscle_soreness: Any,
    energy_level: Any,
    formula: ScoringFormula = FORMULA_V1,
    tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS,
) -> Assessment:
    """Validate and score a raw wellness report.

    Raises InvalidInput before any scoring happens if the report is invalid.
    """
    wellness = normalize_wellness(sleep_hours, stress_level, muscle_soreness, energy_level)
    return evaluate(wellness, formula=formula, tiers=tiers)


def is_consistent(
    record: AssessmentRecord,
    formula: ScoringFormula = FORMULA_V1,
    tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS,
) -> bool:
    """Whether a stored record's score and recommendation reproduce from its inputs."""
    expected = assess(
        record.sleep_hours,
        record.stress_level,
        record.muscle_soreness,
        record.energy_level,
        formula=formula,
        tiers=tiers,
    )
    return (
        record.score == expected.score
        and record.recommendation == expected.recommendation
    )
