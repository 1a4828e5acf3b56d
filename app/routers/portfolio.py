"""Portfolio scoring endpoints."""
from typing import Sequence

import structlog
from fastapi import APIRouter, HTTPException

from app.config import get_settings
from app.models import (
    DimensionBreakdown,
    ErrorResponse,
    PartnerPlan,
    PartnerPlanRequest,
    PortfolioItem,
    PortfolioScoreRequest,
    PortfolioScoreResponse,
    PortfolioSummary,
    PortfolioSummaryRequest,
)
from app.pipelines.partner_plan import PartnerPlanPipeline
from app.scoring.dimensions import score_dimensions
from app.scoring.portfolio import get_portfolio_summary, score_item, score_portfolio

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/portfolio", tags=["Portfolio Scoring"])

PORTFOLIO_SIZE_RESPONSES = {
    413: {"model": ErrorResponse, "description": "Portfolio exceeds the configured size limit"},
}


def _check_size(items: Sequence) -> None:
    """Reject portfolios larger than the configured limit."""
    limit = get_settings().max_portfolio_size
    if len(items) > limit:
        logger.warning("portfolio_too_large", item_count=len(items), limit=limit)
        raise HTTPException(
            status_code=413,
            detail=f"Portfolio has {len(items)} items; at most {limit} allowed",
        )


@router.post(
    "/score",
    response_model=PortfolioScoreResponse,
    responses=PORTFOLIO_SIZE_RESPONSES,
    summary="Score Portfolio",
)
async def score_portfolio_endpoint(request: PortfolioScoreRequest):
    """Score every item; output order matches input order."""
    _check_size(request.items)
    scored = score_portfolio(request.items)
    return PortfolioScoreResponse(items=scored, total=len(scored))


@router.post(
    "/summary",
    response_model=PortfolioSummary,
    responses=PORTFOLIO_SIZE_RESPONSES,
    summary="Summarize Scored Portfolio",
)
async def summarize_portfolio_endpoint(request: PortfolioSummaryRequest):
    """Counts, average fit score and top candidates for scored items."""
    _check_size(request.items)
    return get_portfolio_summary(request.items)


@router.post(
    "/plan",
    response_model=PartnerPlan,
    responses=PORTFOLIO_SIZE_RESPONSES,
    summary="Build Partner Plan",
)
async def build_plan_endpoint(request: PartnerPlanRequest):
    """Score, summarise and build the co-delivery plan in one call."""
    _check_size(request.items)
    return PartnerPlanPipeline().run(request.items, firm_name=request.firm_name)


@router.post(
    "/breakdown",
    response_model=DimensionBreakdown,
    summary="Score Breakdown For One Item",
)
async def breakdown_endpoint(item: PortfolioItem):
    """Per-dimension points alongside the item's fit score and flags."""
    scored = score_item(item)
    return DimensionBreakdown(
        name=item.name,
        dimension_scores=score_dimensions(item),
        fit_score=scored.fit_score,
        recommendation=scored.recommendation,
        risk_flags=scored.risk_flags,
    )
