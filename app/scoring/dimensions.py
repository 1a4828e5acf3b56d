"""Dimension scorers for partner portfolio items.

Each scorer is a fixed lookup table from a categorical value to points,
with 0 for anything outside the table. Maxima sum to 100:

    ai_posture        20
    data_posture      20
    value_pressure    20
    decision_cadence  15
    sponsor_strength  15
    willingness_60d   10
"""
from typing import Callable, Dict, Mapping, Optional

from app.models.enums import (
    AIPosture,
    DataPosture,
    DecisionCadence,
    SponsorStrength,
    ValuePressure,
    Willingness60d,
)
from app.models.portfolio import PortfolioItem

# ── Lookup tables (keyed by enum value, not member) ───────────────────────────
AI_POSTURE_POINTS: Dict[str, int] = {
    AIPosture.NONE.value: 0,
    AIPosture.EXPLORING.value: 8,
    AIPosture.ACTIVE.value: 15,
    AIPosture.LEADING.value: 20,
}

DATA_POSTURE_POINTS: Dict[str, int] = {
    DataPosture.DISCONNECTED.value: 0,
    DataPosture.SCATTERED.value: 8,
    DataPosture.CONNECTED.value: 15,
    DataPosture.OPTIMIZED.value: 20,
}

VALUE_PRESSURE_POINTS: Dict[str, int] = {
    ValuePressure.LOW.value: 5,
    ValuePressure.MEDIUM.value: 12,
    ValuePressure.HIGH.value: 18,
    ValuePressure.CRITICAL.value: 20,
}

DECISION_CADENCE_POINTS: Dict[str, int] = {
    DecisionCadence.SLOW.value: 3,
    DecisionCadence.MODERATE.value: 8,
    DecisionCadence.FAST.value: 12,
    DecisionCadence.URGENT.value: 15,
}

SPONSOR_STRENGTH_POINTS: Dict[str, int] = {
    SponsorStrength.NONE.value: 0,
    SponsorStrength.WEAK.value: 5,
    SponsorStrength.MODERATE.value: 10,
    SponsorStrength.STRONG.value: 15,
}

WILLINGNESS_60D_POINTS: Dict[str, int] = {
    Willingness60d.LOW.value: 0,
    Willingness60d.MEDIUM.value: 6,
    Willingness60d.HIGH.value: 10,
}


def _lookup(table: Mapping[str, int], value: Optional[str]) -> int:
    if not isinstance(value, str):
        return 0
    return table.get(value, 0)


def score_ai_posture(value: Optional[str]) -> int:
    """Points for ai_posture (0-20)."""
    return _lookup(AI_POSTURE_POINTS, value)


def score_data_posture(value: Optional[str]) -> int:
    """Points for data_posture (0-20)."""
    return _lookup(DATA_POSTURE_POINTS, value)


def score_value_pressure(value: Optional[str]) -> int:
    """Points for value_pressure (0-20)."""
    return _lookup(VALUE_PRESSURE_POINTS, value)


def score_decision_cadence(value: Optional[str]) -> int:
    """Points for decision_cadence (0-15)."""
    return _lookup(DECISION_CADENCE_POINTS, value)


def score_sponsor_strength(value: Optional[str]) -> int:
    """Points for sponsor_strength (0-15)."""
    return _lookup(SPONSOR_STRENGTH_POINTS, value)


def score_willingness_60d(value: Optional[str]) -> int:
    """Points for willingness_60d (0-10)."""
    return _lookup(WILLINGNESS_60D_POINTS, value)


# field name → scorer, in fixed evaluation order
DIMENSION_SCORERS: Dict[str, Callable[[Optional[str]], int]] = {
    "ai_posture": score_ai_posture,
    "data_posture": score_data_posture,
    "value_pressure": score_value_pressure,
    "decision_cadence": score_decision_cadence,
    "sponsor_strength": score_sponsor_strength,
    "willingness_60d": score_willingness_60d,
}

DIMENSION_MAX_POINTS: Dict[str, int] = {
    "ai_posture": max(AI_POSTURE_POINTS.values()),
    "data_posture": max(DATA_POSTURE_POINTS.values()),
    "value_pressure": max(VALUE_PRESSURE_POINTS.values()),
    "decision_cadence": max(DECISION_CADENCE_POINTS.values()),
    "sponsor_strength": max(SPONSOR_STRENGTH_POINTS.values()),
    "willingness_60d": max(WILLINGNESS_60D_POINTS.values()),
}


def score_dimensions(item: PortfolioItem) -> Dict[str, int]:
    """Score every dimension of an item exactly once.

    Args:
        item: Portfolio item to score.

    Returns:
        Mapping of dimension field name → points.
    """
    return {
        field: scorer(getattr(item, field))
        for field, scorer in DIMENSION_SCORERS.items()
    }
