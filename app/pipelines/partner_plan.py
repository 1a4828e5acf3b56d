"""Partner plan pipeline.

Scores a partner's portfolio and assembles everything the results screen
needs: summary, qualified leads, co-delivery plan and heatmap points.
"""
from typing import Dict, Iterable, List, Optional, Sequence

import structlog

from app.models.enums import QUALIFIED_RECOMMENDATIONS, Recommendation, Willingness60d
from app.models.plan import CoDeliveryEntry, HeatmapPoint, PartnerPlan
from app.models.portfolio import PortfolioItem, ScoredPortfolioItem
from app.scoring.portfolio import get_portfolio_summary, score_portfolio

logger = structlog.get_logger(__name__)

# ── Pre-work checklists per recommendation ────────────────────────────────────
PRE_WORK: Dict[str, List[str]] = {
    Recommendation.EXEC_BOOTCAMP.value: [
        "Confirm CEO/COO sponsor availability",
        "Secure 90-day objective definition",
        "Schedule kickoff within 14 days",
    ],
    Recommendation.LITERACY_SPRINT.value: [
        "Identify team leads for sprint",
        "Map initial AI use cases",
        "Schedule 60-min alignment call",
    ],
    Recommendation.DIAGNOSTIC.value: [
        "Secure data access contact",
        "Define current AI baseline",
        "Schedule diagnostic session",
    ],
}
_DEFAULT_PRE_WORK: List[str] = ["Further qualification needed"]

# willingness_60d → heatmap urgency axis
_URGENCY: Dict[str, int] = {
    Willingness60d.HIGH.value: 100,
    Willingness60d.MEDIUM.value: 65,
}
_DEFAULT_URGENCY: int = 30


def get_pre_work(recommendation: str) -> List[str]:
    """Checklist to complete before engaging a company on this recommendation."""
    return list(PRE_WORK.get(recommendation, _DEFAULT_PRE_WORK))


def get_qualified_candidates(
    scored_items: Sequence[ScoredPortfolioItem],
) -> List[ScoredPortfolioItem]:
    """Every Exec Bootcamp / Literacy Sprint item, in input order.

    Unlike the summary shortlist this is not capped; it is the full set of
    leads handed off for follow-up.
    """
    return [i for i in scored_items if i.recommendation in QUALIFIED_RECOMMENDATIONS]


def build_heatmap_points(scored_items: Sequence[ScoredPortfolioItem]) -> List[HeatmapPoint]:
    """Plot each item as fit score vs. urgency derived from willingness_60d."""
    return [
        HeatmapPoint(
            name=item.name,
            fit_score=item.fit_score,
            urgency=_URGENCY.get(item.willingness_60d, _DEFAULT_URGENCY),
            recommendation=item.recommendation,
            sponsor=item.sponsor_strength,
            pressure=item.value_pressure,
        )
        for item in scored_items
    ]


def build_co_delivery_plan(
    top_candidates: Sequence[ScoredPortfolioItem],
) -> List[CoDeliveryEntry]:
    """Attach the pre-work checklist to each top candidate."""
    return [
        CoDeliveryEntry(
            name=c.name,
            sector=c.sector,
            fit_score=c.fit_score,
            recommendation=c.recommendation,
            pre_work=get_pre_work(c.recommendation),
        )
        for c in top_candidates
    ]


class PartnerPlanPipeline:
    """Score a portfolio and build the partner plan for it."""

    def run(
        self,
        items: Iterable[PortfolioItem],
        firm_name: Optional[str] = None,
    ) -> PartnerPlan:
        """Run score → summarise → leads / co-delivery / heatmap.

        Does NOT persist; persistence and lead delivery are the caller's
        responsibility.
        """
        scored = score_portfolio(items)
        summary = get_portfolio_summary(scored)

        plan = PartnerPlan(
            firm_name=firm_name,
            items=scored,
            summary=summary,
            qualified_candidates=get_qualified_candidates(scored),
            co_delivery_plan=build_co_delivery_plan(summary.top_candidates),
            heatmap=build_heatmap_points(scored),
        )

        logger.info(
            "partner_plan_built",
            firm_name=firm_name,
            total_companies=summary.total_companies,
            qualified_count=len(plan.qualified_candidates),
            average_fit_score=summary.average_fit_score,
        )
        return plan
