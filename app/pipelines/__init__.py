"""Pipelines built on top of the scoring engine."""

from app.pipelines.partner_plan import (
    PartnerPlanPipeline,
    build_co_delivery_plan,
    build_heatmap_points,
    get_pre_work,
    get_qualified_candidates,
)
from app.pipelines.portfolio_loader import (
    PortfolioFileError,
    load_portfolio,
    parse_portfolio_rows,
)

__all__ = [
    "PartnerPlanPipeline",
    "build_co_delivery_plan",
    "build_heatmap_points",
    "get_pre_work",
    "get_qualified_candidates",
    "PortfolioFileError",
    "load_portfolio",
    "parse_portfolio_rows",
]
