"""Readiness assessment and recommendation engine."""

from ptcoach.readiness.engine import Assessment, assess, evaluate, is_consistent
from ptcoach.readiness.normalizer import normalize_wellness
from ptcoach.readiness.recommendation import (
    DEFAULT_TIERS,
    ReadinessTier,
    recommend,
    select_tier,
)
from ptcoach.readiness.scoring import (
    FORMULA_V1,
    ScoringFormula,
    get_formula,
    score_readiness,
)
from ptcoach.readiness.trends import TrendPoint, TrendSeries, readiness_trend
from ptcoach.readiness.types import (
    AssessmentRecord,
    AssessmentStore,
    DateRange,
    EnergyLevel,
    MuscleSoreness,
    NormalizedWellness,
    StressLevel,
)

__all__ = [
    "Assessment",
    "AssessmentRecord",
    "AssessmentStore",
    "DEFAULT_TIERS",
    "DateRange",
    "EnergyLevel",
    "FORMULA_V1",
    "MuscleSoreness",
    "NormalizedWellness",
    "ReadinessTier",
    "ScoringFormula",
    "StressLevel",
    "TrendPoint",
    "TrendSeries",
    "assess",
    "evaluate",
    "get_formula",
    "is_consistent",
    "normalize_wellness",
    "readiness_trend",
    "recommend",
    "score_readiness",
    "select_tier",
]
