"""Mapping from readiness score to training recommendation tiers."""

from dataclasses import dataclass
from typing import Tuple

from ptcoach.readiness.scoring import MAX_SCORE, MIN_SCORE


@dataclass(frozen=True)
class ReadinessTier:
    """Score band ``[min_score, next tier's min_score)`` with its guidance."""

    name: str
    min_score: int
    recommendation: str
    color: str


def validate_tiers(tiers: Tuple[ReadinessTier, ...]) -> Tuple[ReadinessTier, ...]:
    """Check tiers are ordered high to low and cover [0, 100] exactly once."""
    if not tiers:
        raise ValueError("at least one readiness tier is required")
    bounds = [tier.min_score for tier in tiers]
    if not all(a > b for a, b in zip(bounds, bounds[1:])):
        raise ValueError("tier lower bounds must be strictly descending")
    if bounds[0] > MAX_SCORE or bounds[-1] != MIN_SCORE:
        raise ValueError(f"tiers must cover {MIN_SCORE}..{MAX_SCORE}")
    return tiers


DEFAULT_TIERS = validate_tiers((
    ReadinessTier("high", 80, "Proceed as planned", "#34C759"),
    ReadinessTier("moderate", 60, "Reduce intensity by 20%", "#FF9500"),
    ReadinessTier("low", 40, "Light workout or rest day", "#FF3B30"),
    ReadinessTier("very_low", 0, "Rest day recommended", "#FF3B30"),
))


def select_tier(score: int, tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS) -> ReadinessTier:
    """Return the tier whose band contains ``score``."""
    for tier in tiers:
        if score >= tier.min_score:
            return tier
    # Scores below range fall into the bottom tier
    return tiers[-1]


def recommend(score: int, tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS) -> str:
    """Return the recommendation text for ``score``."""
    return select_tier(score, tiers).recommendation
