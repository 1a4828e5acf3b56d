"""Health check endpoint."""
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.models import HealthResponse, PortfolioItem, Recommendation
from app.scoring.fit_score import MAX_FIT_SCORE, calculate_fit_score
from app.scoring.recommendation import get_recommendation

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Health"])

_MAX_ITEM = PortfolioItem(
    name="healthcheck-max",
    ai_posture="Leading",
    data_posture="Optimized",
    value_pressure="Critical",
    decision_cadence="Urgent",
    sponsor_strength="Strong",
    willingness_60d="High",
)
_MIN_ITEM = PortfolioItem(
    name="healthcheck-min",
    ai_posture="None",
    data_posture="Disconnected",
    value_pressure="Low",
    decision_cadence="Slow",
    sponsor_strength="None",
    willingness_60d="Low",
)


def check_scoring_engine() -> tuple[bool, str | None]:
    """Score two reference items and confirm the tables still add up."""
    max_score = calculate_fit_score(_MAX_ITEM)
    if max_score != MAX_FIT_SCORE:
        return False, f"all-maximum item scored {max_score}, expected {MAX_FIT_SCORE}"

    min_score = calculate_fit_score(_MIN_ITEM)
    recommendation = get_recommendation(_MIN_ITEM, min_score)
    if recommendation != Recommendation.DIAGNOSTIC.value:
        return False, f"all-minimum item recommended {recommendation!r}"

    return True, None


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check health status of the API and the scoring engine."
)
async def health_check():
    """
    Check health of the scoring engine.

    Returns 200 if healthy, 503 if the engine self-check fails.
    """
    settings = get_settings()
    dependencies: dict[str, str] = {}

    try:
        engine_healthy, engine_error = check_scoring_engine()
        dependencies["scoring_engine"] = (
            "healthy" if engine_healthy else f"unhealthy: {engine_error}"
        )
    except Exception as e:
        logger.error("scoring_engine_check_failed", error=str(e))
        dependencies["scoring_engine"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in dependencies.values())
    overall_status = "healthy" if all_healthy else "degraded"

    response = HealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        dependencies=dependencies
    )

    if not all_healthy:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump()
        )

    return response
