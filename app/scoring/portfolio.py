"""Portfolio scorer and summarizer.

``score_portfolio`` maps every item through fit score → recommendation →
risk flags, one output per input in the same order. ``get_portfolio_summary``
counts recommendations, averages fit scores and shortlists the top
candidates.
"""
from typing import Iterable, List, Sequence

import structlog

from app.models.enums import QUALIFIED_RECOMMENDATIONS, Recommendation
from app.models.portfolio import PortfolioItem, PortfolioSummary, ScoredPortfolioItem
from app.scoring.fit_score import calculate_fit_score
from app.scoring.recommendation import get_recommendation
from app.scoring.risk_flags import get_risk_flags
from app.scoring.utils import mean_rounded

logger = structlog.get_logger(__name__)

TOP_CANDIDATE_LIMIT: int = 3


def score_item(item: PortfolioItem) -> ScoredPortfolioItem:
    """Score a single portfolio item.

    The input is never modified; a new ``ScoredPortfolioItem`` carrying all
    of the item's fields is returned.
    """
    fit_score = calculate_fit_score(item)
    return ScoredPortfolioItem(
        **item.model_dump(include=set(PortfolioItem.model_fields)),
        fit_score=fit_score,
        recommendation=get_recommendation(item, fit_score),
        risk_flags=get_risk_flags(item),
    )


def score_portfolio(items: Iterable[PortfolioItem]) -> List[ScoredPortfolioItem]:
    """Score every item of a portfolio.

    Args:
        items: Portfolio items, in display order.

    Returns:
        Scored items in the same order (no filtering, no deduplication).
    """
    scored = [score_item(item) for item in items]
    logger.info("portfolio_scored", item_count=len(scored))
    return scored


def get_top_candidates(
    scored_items: Sequence[ScoredPortfolioItem],
    limit: int = TOP_CANDIDATE_LIMIT,
) -> List[ScoredPortfolioItem]:
    """Best Exec Bootcamp / Literacy Sprint items by descending fit score.

    ``sorted`` is stable, so equal scores keep their input order.
    """
    qualified = [i for i in scored_items if i.recommendation in QUALIFIED_RECOMMENDATIONS]
    return sorted(qualified, key=lambda i: i.fit_score, reverse=True)[:limit]


def get_portfolio_summary(scored_items: Sequence[ScoredPortfolioItem]) -> PortfolioSummary:
    """Summarise a scored portfolio.

    Args:
        scored_items: Output of ``score_portfolio`` (or equivalent records).

    Returns:
        PortfolioSummary with recommendation counts, rounded average fit
        score (0 when empty) and up to three top candidates.
    """
    def _count(recommendation: Recommendation) -> int:
        return sum(1 for i in scored_items if i.recommendation == recommendation.value)

    summary = PortfolioSummary(
        total_companies=len(scored_items),
        exec_bootcamp_count=_count(Recommendation.EXEC_BOOTCAMP),
        literacy_sprint_count=_count(Recommendation.LITERACY_SPRINT),
        diagnostic_count=_count(Recommendation.DIAGNOSTIC),
        average_fit_score=mean_rounded([i.fit_score for i in scored_items]),
        top_candidates=get_top_candidates(scored_items),
    )

    logger.info(
        "portfolio_summarized",
        total_companies=summary.total_companies,
        exec_bootcamp_count=summary.exec_bootcamp_count,
        literacy_sprint_count=summary.literacy_sprint_count,
        diagnostic_count=summary.diagnostic_count,
        average_fit_score=summary.average_fit_score,
        top_candidates=[c.name for c in summary.top_candidates],
    )
    return summary
