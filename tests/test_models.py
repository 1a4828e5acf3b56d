"""Tests for Pydantic models."""
import pytest
from pydantic import ValidationError

from app.models import (
    PortfolioItem,
    PortfolioSummary,
    Recommendation,
    ScoredPortfolioItem,
    SponsorStrength,
)


class TestPortfolioItem:
    """Tests for PortfolioItem."""

    def test_only_name_required(self):
        item = PortfolioItem(name="Solo Co")
        assert item.ai_posture is None
        assert item.sector is None

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            PortfolioItem(ai_posture="Active")
        assert "missing" in str(exc_info.value)

    def test_out_of_domain_values_accepted(self):
        """Unknown categorical values must reach the engine untouched."""
        item = PortfolioItem(name="Odd Co", ai_posture="Quantum", willingness_60d="Eager")
        assert item.ai_posture == "Quantum"
        assert item.willingness_60d == "Eager"

    def test_frozen(self):
        item = PortfolioItem(name="Frozen Co")
        with pytest.raises(ValidationError):
            item.name = "Thawed Co"

    def test_enum_members_match_raw_strings(self):
        item = PortfolioItem(name="Enum Co", sponsor_strength=SponsorStrength.NONE)
        assert item.sponsor_strength == "None"


class TestScoredPortfolioItem:
    """Tests for ScoredPortfolioItem."""

    def test_fit_score_bounds(self):
        with pytest.raises(ValidationError):
            ScoredPortfolioItem(name="x", fit_score=101, recommendation="Not now")
        with pytest.raises(ValidationError):
            ScoredPortfolioItem(name="x", fit_score=-1, recommendation="Not now")

    def test_default_risk_flags_empty(self):
        item = ScoredPortfolioItem(name="x", fit_score=50, recommendation="Not now")
        assert item.risk_flags == []


class TestPortfolioSummary:
    """Tests for PortfolioSummary."""

    def test_accepts_camel_case_input(self):
        summary = PortfolioSummary.model_validate({
            "totalCompanies": 4,
            "execBootcampCount": 1,
            "literacySprintCount": 1,
            "diagnosticCount": 1,
            "averageFitScore": 61,
            "topCandidates": [],
        })
        assert summary.average_fit_score == 61
        assert summary.not_now_count == 1

    def test_defaults_are_empty_portfolio(self):
        summary = PortfolioSummary()
        assert summary.total_companies == 0
        assert summary.top_candidates == []

    def test_recommendation_labels(self):
        assert [r.value for r in Recommendation] == [
            "Exec Bootcamp", "Literacy Sprint", "Diagnostic", "Not now",
        ]
