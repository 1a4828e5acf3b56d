"""Pytest fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient

from app.models import PortfolioItem, ScoredPortfolioItem


def _build_item(**overrides) -> PortfolioItem:
    data = {
        "name": "Acme Logistics",
        "sector": "Industrials",
        "stage": "Growth",
        "ai_posture": "Exploring",
        "data_posture": "Scattered",
        "value_pressure": "Medium",
        "decision_cadence": "Moderate",
        "sponsor_strength": "Moderate",
        "willingness_60d": "Medium",
    }
    data.update(overrides)
    return PortfolioItem(**data)


def _build_scored(name: str, fit_score: int, recommendation: str, **overrides) -> ScoredPortfolioItem:
    return ScoredPortfolioItem(
        name=name,
        fit_score=fit_score,
        recommendation=recommendation,
        **overrides,
    )


@pytest.fixture
def make_item():
    """Factory for a mid-range portfolio item (fit score 52), overriding any field."""
    return _build_item


@pytest.fixture
def make_scored():
    """Factory for a scored item built directly, bypassing the engine."""
    return _build_scored


@pytest.fixture
def client():
    """Create test client for the FastAPI app."""
    from app.main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def strong_item():
    """Active/Connected/High/Fast/Strong/High → fit score 85."""
    return _build_item(
        name="Northwind Health",
        ai_posture="Active",
        data_posture="Connected",
        value_pressure="High",
        decision_cadence="Fast",
        sponsor_strength="Strong",
        willingness_60d="High",
    )


@pytest.fixture
def weakest_item():
    """Every dimension at its minimum → fit score 8."""
    return _build_item(
        name="Legacy Fabrication",
        ai_posture="None",
        data_posture="Disconnected",
        value_pressure="Low",
        decision_cadence="Slow",
        sponsor_strength="None",
        willingness_60d="Low",
    )


@pytest.fixture
def max_item():
    """Every dimension at its maximum → fit score 100."""
    return _build_item(
        name="Vector Analytics",
        ai_posture="Leading",
        data_posture="Optimized",
        value_pressure="Critical",
        decision_cadence="Urgent",
        sponsor_strength="Strong",
        willingness_60d="High",
    )


@pytest.fixture
def sample_portfolio_payload():
    """JSON body for the portfolio endpoints (scores 85, 59, 8)."""
    return {
        "items": [
            {
                "name": "Northwind Health",
                "sector": "Healthcare",
                "ai_posture": "Active",
                "data_posture": "Connected",
                "value_pressure": "High",
                "decision_cadence": "Fast",
                "sponsor_strength": "Strong",
                "willingness_60d": "High",
            },
            {
                "name": "Bluebird Retail",
                "sector": "Consumer",
                "ai_posture": "Exploring",
                "data_posture": "Connected",
                "value_pressure": "High",
                "decision_cadence": "Moderate",
                "sponsor_strength": "Moderate",
                "willingness_60d": "Low",
            },
            {
                "name": "Legacy Fabrication",
                "ai_posture": "None",
                "data_posture": "Disconnected",
                "value_pressure": "Low",
                "decision_cadence": "Slow",
                "sponsor_strength": "None",
                "willingness_60d": "Low",
            },
        ]
    }
