"""Pydantic models for the Partner Portfolio Scoring platform."""

# Common Models
from app.models.common import (
    HealthResponse,
    ErrorResponse,
)

# Enums
from app.models.enums import (
    AIPosture,
    DataPosture,
    ValuePressure,
    DecisionCadence,
    SponsorStrength,
    Willingness60d,
    Recommendation,
    QUALIFIED_RECOMMENDATIONS,
)

# Portfolio Models
from app.models.portfolio import (
    PortfolioItem,
    ScoredPortfolioItem,
    PortfolioSummary,
    PortfolioScoreRequest,
    PortfolioScoreResponse,
    PortfolioSummaryRequest,
    DimensionBreakdown,
)

# Partner Plan Models
from app.models.plan import (
    HeatmapPoint,
    CoDeliveryEntry,
    PartnerPlanRequest,
    PartnerPlan,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    # Enums
    "AIPosture",
    "DataPosture",
    "ValuePressure",
    "DecisionCadence",
    "SponsorStrength",
    "Willingness60d",
    "Recommendation",
    "QUALIFIED_RECOMMENDATIONS",
    # Portfolio
    "PortfolioItem",
    "ScoredPortfolioItem",
    "PortfolioSummary",
    "PortfolioScoreRequest",
    "PortfolioScoreResponse",
    "PortfolioSummaryRequest",
    "DimensionBreakdown",
    # Partner Plan
    "HeatmapPoint",
    "CoDeliveryEntry",
    "PartnerPlanRequest",
    "PartnerPlan",
]
