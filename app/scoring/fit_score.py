"""Fit score aggregator.

    fit_score = clamp(Σ dimension points, 0, 100)

With the current tables the clamp never bites (maxima sum to exactly 100);
it keeps the output range fixed if a table is edited.
"""
import structlog

from app.models.portfolio import PortfolioItem
from app.scoring.dimensions import score_dimensions
from app.scoring.utils import clamp

logger = structlog.get_logger(__name__)

MIN_FIT_SCORE = 0
MAX_FIT_SCORE = 100


def calculate_fit_score(item: PortfolioItem) -> int:
    """Calculate the 0-100 fit score for one portfolio item.

    Unrecognised categorical values contribute 0 rather than failing.

    Args:
        item: Portfolio item to score.

    Returns:
        Integer fit score in [0, 100].
    """
    points = score_dimensions(item)
    fit_score = clamp(sum(points.values()), MIN_FIT_SCORE, MAX_FIT_SCORE)

    logger.debug(
        "fit_score_calculated",
        name=item.name,
        dimension_points=points,
        fit_score=fit_score,
    )
    return fit_score
