"""Property-based tests for the scoring engine.

Uses Hypothesis to verify:
  Fit score:
    1. test_fit_score_always_bounded   – 0 ≤ fit score ≤ 100, any input
    2. test_fit_score_deterministic    – same item ⇒ same score
    3. test_fit_score_is_sum_of_dims   – score equals the dimension breakdown sum

  Recommendation:
    4. test_red_flag_always_diagnostic – no sponsor / disconnected ⇒ Diagnostic
    5. test_threshold_rules            – EB / LS / Not now iff thresholds hold

  Portfolio:
    6. test_one_output_per_input
    7. test_summary_counts_consistent
    8. test_top_candidates_sorted_and_qualified
"""
from hypothesis import HealthCheck, given, settings as h_settings
from hypothesis import strategies as st

from app.models import (
    AIPosture,
    DataPosture,
    DecisionCadence,
    PortfolioItem,
    Recommendation,
    SponsorStrength,
    ValuePressure,
    Willingness60d,
)
from app.scoring.dimensions import score_dimensions
from app.scoring.fit_score import calculate_fit_score
from app.scoring.portfolio import get_portfolio_summary, score_portfolio
from app.scoring.recommendation import get_recommendation

# ── Hypothesis configuration ──────────────────────────────────────────────────
h_settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
)
h_settings.load_profile("ci")


# ── Strategy helpers ──────────────────────────────────────────────────────────

def _field(enum_cls):
    """Mostly in-domain values, sometimes junk or missing."""
    return st.one_of(
        st.sampled_from([m.value for m in enum_cls]),
        st.text(max_size=12),
        st.none(),
    )


_item = st.builds(
    PortfolioItem,
    name=st.text(min_size=1, max_size=20),
    ai_posture=_field(AIPosture),
    data_posture=_field(DataPosture),
    value_pressure=_field(ValuePressure),
    decision_cadence=_field(DecisionCadence),
    sponsor_strength=_field(SponsorStrength),
    willingness_60d=_field(Willingness60d),
)

# Items that never trip the Diagnostic override
_clean_item = st.builds(
    PortfolioItem,
    name=st.text(min_size=1, max_size=20),
    ai_posture=_field(AIPosture),
    data_posture=st.sampled_from(["Scattered", "Connected", "Optimized"]),
    value_pressure=_field(ValuePressure),
    decision_cadence=_field(DecisionCadence),
    sponsor_strength=st.sampled_from(["Weak", "Moderate", "Strong"]),
    willingness_60d=_field(Willingness60d),
)

_fit = st.integers(min_value=0, max_value=100)

_QUALIFIED = {Recommendation.EXEC_BOOTCAMP.value, Recommendation.LITERACY_SPRINT.value}


# ── Fit score properties ──────────────────────────────────────────────────────

class TestFitScoreProperties:
    """Property-based tests for calculate_fit_score."""

    @given(item=_item)
    def test_fit_score_always_bounded(self, item):
        score = calculate_fit_score(item)
        assert isinstance(score, int)
        assert 0 <= score <= 100, f"fit_score={score} out of [0,100] for {item}"

    @given(item=_item)
    @h_settings(max_examples=200)
    def test_fit_score_deterministic(self, item):
        assert calculate_fit_score(item) == calculate_fit_score(item)

    @given(item=_item)
    @h_settings(max_examples=200)
    def test_fit_score_is_sum_of_dims(self, item):
        assert calculate_fit_score(item) == sum(score_dimensions(item).values())


# ── Recommendation properties ─────────────────────────────────────────────────

class TestRecommendationProperties:
    """Property-based tests for get_recommendation."""

    @given(item=_item, which=st.sampled_from(["sponsor", "data"]), fit=_fit)
    def test_red_flag_always_diagnostic(self, item, which, fit):
        update = (
            {"sponsor_strength": "None"} if which == "sponsor"
            else {"data_posture": "Disconnected"}
        )
        flagged = item.model_copy(update=update)
        assert get_recommendation(flagged, fit) == Recommendation.DIAGNOSTIC.value

    @given(item=_clean_item, fit=_fit)
    def test_threshold_rules(self, item, fit):
        rec = get_recommendation(item, fit)
        willing = item.willingness_60d in ("Medium", "High")
        if fit >= 70 and willing:
            assert rec == Recommendation.EXEC_BOOTCAMP.value
        elif 55 <= fit < 70:
            assert rec == Recommendation.LITERACY_SPRINT.value
        else:
            assert rec == Recommendation.NOT_NOW.value


# ── Portfolio properties ──────────────────────────────────────────────────────

class TestPortfolioProperties:
    """Property-based tests for score_portfolio / get_portfolio_summary."""

    @given(items=st.lists(_item, max_size=15))
    @h_settings(max_examples=200)
    def test_one_output_per_input(self, items):
        scored = score_portfolio(items)
        assert len(scored) == len(items)
        assert [s.name for s in scored] == [i.name for i in items]

    @given(items=st.lists(_item, max_size=15))
    @h_settings(max_examples=200)
    def test_summary_counts_consistent(self, items):
        scored = score_portfolio(items)
        summary = get_portfolio_summary(scored)
        counted = (
            summary.exec_bootcamp_count
            + summary.literacy_sprint_count
            + summary.diagnostic_count
        )
        assert counted <= len(scored)
        assert summary.not_now_count == sum(
            1 for s in scored if s.recommendation == Recommendation.NOT_NOW.value
        )
        if scored:
            scores = [s.fit_score for s in scored]
            assert min(scores) <= summary.average_fit_score <= max(scores)
        else:
            assert summary.average_fit_score == 0

    @given(items=st.lists(_item, max_size=15))
    @h_settings(max_examples=200)
    def test_top_candidates_sorted_and_qualified(self, items):
        summary = get_portfolio_summary(score_portfolio(items))
        top = summary.top_candidates
        assert len(top) <= 3
        assert all(c.recommendation in _QUALIFIED for c in top)
        assert [c.fit_score for c in top] == sorted((c.fit_score for c in top), reverse=True)
