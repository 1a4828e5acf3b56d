"""Portfolio item, scored item and summary Pydantic models."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PortfolioItem(BaseModel):
    """Qualitative profile of one portfolio company.

    The six categorical fields are plain strings on purpose: values outside
    their enumerations must reach the scoring engine, which scores them 0.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Company name")
    sector: Optional[str] = None
    stage: Optional[str] = None
    ai_posture: Optional[str] = Field(
        default=None, description="None | Exploring | Active | Leading"
    )
    data_posture: Optional[str] = Field(
        default=None, description="Disconnected | Scattered | Connected | Optimized"
    )
    value_pressure: Optional[str] = Field(
        default=None, description="Low | Medium | High | Critical"
    )
    decision_cadence: Optional[str] = Field(
        default=None, description="Slow | Moderate | Fast | Urgent"
    )
    sponsor_strength: Optional[str] = Field(
        default=None, description="None | Weak | Moderate | Strong"
    )
    willingness_60d: Optional[str] = Field(
        default=None, description="Low | Medium | High"
    )


class ScoredPortfolioItem(PortfolioItem):
    """Portfolio item with fit score, recommendation and risk flags."""
    fit_score: int = Field(..., ge=0, le=100, description="Fit score from 0-100")
    recommendation: str
    risk_flags: List[str] = Field(default_factory=list)


class PortfolioSummary(BaseModel):
    """Aggregate view of a scored portfolio.

    Serialised with camelCase keys (``averageFitScore``, ``topCandidates``...)
    for the UI; accepts snake_case names on construction.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    total_companies: int = Field(default=0, ge=0)
    exec_bootcamp_count: int = Field(default=0, ge=0)
    literacy_sprint_count: int = Field(default=0, ge=0)
    diagnostic_count: int = Field(default=0, ge=0)
    average_fit_score: int = Field(default=0, ge=0, le=100)
    top_candidates: List[ScoredPortfolioItem] = Field(default_factory=list)

    @property
    def not_now_count(self) -> int:
        """Items recommended "Not now" (everything not otherwise counted)."""
        return self.total_companies - (
            self.exec_bootcamp_count + self.literacy_sprint_count + self.diagnostic_count
        )


class PortfolioScoreRequest(BaseModel):
    """Request body for scoring a portfolio."""
    items: List[PortfolioItem]


class PortfolioScoreResponse(BaseModel):
    """Scored portfolio, one entry per submitted item, same order."""
    items: List[ScoredPortfolioItem]
    total: int


class PortfolioSummaryRequest(BaseModel):
    """Request body for summarising an already-scored portfolio."""
    items: List[ScoredPortfolioItem]


class DimensionBreakdown(BaseModel):
    """Per-dimension scoring detail for a single portfolio item."""
    name: str
    dimension_scores: dict[str, int]
    fit_score: int = Field(..., ge=0, le=100)
    recommendation: str
    risk_flags: List[str]
