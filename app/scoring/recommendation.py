"""Recommendation classifier.

Ordered guard chain, first match wins:

  1. no exec sponsor OR data disconnected      → Diagnostic
  2. fit_score ≥ 70 AND willingness Medium/High → Exec Bootcamp
  3. 55 ≤ fit_score < 70                        → Literacy Sprint
  4. otherwise                                  → Not now

Rule 1 vetoes the score-based path entirely. Willingness only gates rule 2.
"""
import structlog

from app.models.enums import DataPosture, Recommendation, SponsorStrength, Willingness60d
from app.models.portfolio import PortfolioItem

logger = structlog.get_logger(__name__)

# ── Thresholds ────────────────────────────────────────────────────────────────
EXEC_BOOTCAMP_MIN_SCORE: int = 70
LITERACY_SPRINT_MIN_SCORE: int = 55

_WILLING_VALUES = frozenset({Willingness60d.MEDIUM.value, Willingness60d.HIGH.value})


def has_red_flag(item: PortfolioItem) -> bool:
    """True when the item has no exec sponsor or no accessible data."""
    return (
        item.sponsor_strength == SponsorStrength.NONE.value
        or item.data_posture == DataPosture.DISCONNECTED.value
    )


def get_recommendation(item: PortfolioItem, fit_score: int) -> str:
    """Assign the next-step recommendation for a scored item.

    Args:
        item: Portfolio item (only sponsor_strength, data_posture and
              willingness_60d are inspected).
        fit_score: Pre-computed fit score for the item.

    Returns:
        One of "Exec Bootcamp", "Literacy Sprint", "Diagnostic", "Not now".
    """
    if has_red_flag(item):
        recommendation = Recommendation.DIAGNOSTIC
    elif fit_score >= EXEC_BOOTCAMP_MIN_SCORE and item.willingness_60d in _WILLING_VALUES:
        recommendation = Recommendation.EXEC_BOOTCAMP
    elif LITERACY_SPRINT_MIN_SCORE <= fit_score < EXEC_BOOTCAMP_MIN_SCORE:
        recommendation = Recommendation.LITERACY_SPRINT
    else:
        recommendation = Recommendation.NOT_NOW

    logger.debug(
        "recommendation_assigned",
        name=item.name,
        fit_score=fit_score,
        recommendation=recommendation.value,
    )
    return recommendation.value
