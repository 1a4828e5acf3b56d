"""Partner plan models: lead hand-off, co-delivery plan and heatmap."""
from typing import List, Optional

from pydantic import BaseModel, Field

from .portfolio import PortfolioItem, PortfolioSummary, ScoredPortfolioItem


class HeatmapPoint(BaseModel):
    """One company plotted as fit score vs. engagement urgency."""
    name: str
    fit_score: int = Field(..., ge=0, le=100)
    urgency: int = Field(..., ge=0, le=100, description="Derived from willingness_60d")
    recommendation: str
    sponsor: Optional[str] = None
    pressure: Optional[str] = None


class CoDeliveryEntry(BaseModel):
    """A top candidate with the pre-work required before kickoff."""
    name: str
    sector: Optional[str] = None
    fit_score: int = Field(..., ge=0, le=100)
    recommendation: str
    pre_work: List[str]


class PartnerPlanRequest(BaseModel):
    """Request body for building a partner plan."""
    firm_name: Optional[str] = Field(default=None, max_length=255)
    items: List[PortfolioItem]


class PartnerPlan(BaseModel):
    """Everything the partner results screen shows for one scoring pass."""
    firm_name: Optional[str] = None
    items: List[ScoredPortfolioItem]
    summary: PortfolioSummary
    qualified_candidates: List[ScoredPortfolioItem]
    co_delivery_plan: List[CoDeliveryEntry]
    heatmap: List[HeatmapPoint]
