"""Unit tests for the Dopamine ROI scoring algorithm.

Tests cover:
- Component weights sum to exactly 1.0
- Per-component sub-scores and their fallbacks
- Final score bounds, clamping and half-up rounding
- Monotonicity in flow count, vampire count and chaos level
- Score breakdown shape, idempotence and rounding
"""

import pytest

from dopamine_roi.core.questions import ENERGY_VAMPIRE_TAGS, FLOW_ACTIVITY_TAGS
from dopamine_roi.core.scoring import (
    COMPONENT_LABELS,
    COMPONENT_WEIGHTS,
    DELEGATION_SCORES,
    REVENUE_MULTIPLIERS,
    AssessmentAnswers,
    DopamineRoiScorer,
    calculate_score,
    get_score_breakdown,
    round_half_up,
)
from tests.conftest import make_answers


@pytest.fixture()
def scorer() -> DopamineRoiScorer:
    """Provide a fresh DopamineRoiScorer instance."""
    return DopamineRoiScorer()


# ---------------------------------------------------------------------------
# Configuration tables
# ---------------------------------------------------------------------------


class TestScoringTables:
    """Verify the weight and lookup tables."""

    def test_weights_sum_to_one(self) -> None:
        """COMPONENT_WEIGHTS must sum to 1.0 within floating-point tolerance."""
        total = sum(COMPONENT_WEIGHTS.values())
        assert abs(total - 1.0) < 1e-9, f"Weights sum to {total}, expected 1.0"

    def test_every_component_has_a_label(self) -> None:
        assert set(COMPONENT_LABELS) == set(COMPONENT_WEIGHTS)

    def test_revenue_multipliers_increase_with_bracket(self) -> None:
        """Higher revenue brackets never get a smaller multiplier."""
        multipliers = list(REVENUE_MULTIPLIERS.values())
        assert multipliers == sorted(multipliers)


# ---------------------------------------------------------------------------
# Component sub-scores
# ---------------------------------------------------------------------------


class TestComponentScores:
    """Tests for the individual 0-100 component scores."""

    def test_flow_score_saturates_at_six(self, scorer: DopamineRoiScorer) -> None:
        answers = make_answers(flow_activities=FLOW_ACTIVITY_TAGS)
        assert scorer.flow_score(answers) == pytest.approx(100.0)

    def test_flow_score_partial(self, scorer: DopamineRoiScorer) -> None:
        answers = make_answers(flow_activities=("strategy", "selling", "building"))
        assert scorer.flow_score(answers) == pytest.approx(50.0)

    def test_vampire_score_inverts_count(self, scorer: DopamineRoiScorer) -> None:
        assert scorer.vampire_score(make_answers(energy_vampires=())) == pytest.approx(100.0)
        assert scorer.vampire_score(
            make_answers(energy_vampires=ENERGY_VAMPIRE_TAGS)
        ) == pytest.approx(0.0)

    def test_time_split_at_or_above_fifty_is_linear(self, scorer: DopamineRoiScorer) -> None:
        assert scorer.time_split_score(make_answers(time_split=50)) == pytest.approx(50.0)
        assert scorer.time_split_score(make_answers(time_split=80)) == pytest.approx(80.0)
        assert scorer.time_split_score(make_answers(time_split=100)) == pytest.approx(100.0)

    def test_time_split_below_fifty_is_scaled(self, scorer: DopamineRoiScorer) -> None:
        """Below 50% the share is multiplied by 1.5."""
        assert scorer.time_split_score(make_answers(time_split=40)) == pytest.approx(60.0)
        assert scorer.time_split_score(make_answers(time_split=0)) == pytest.approx(0.0)

    def test_chaos_extremes(self, scorer: DopamineRoiScorer) -> None:
        """chaos_level 1 scores 100 and chaos_level 10 scores 0."""
        assert scorer.chaos_score(make_answers(chaos_level=1)) == pytest.approx(100.0)
        assert scorer.chaos_score(make_answers(chaos_level=10)) == pytest.approx(0.0)

    @pytest.mark.parametrize("status,expected", list(DELEGATION_SCORES.items()))
    def test_delegation_lookup(
        self, scorer: DopamineRoiScorer, status: str, expected: float
    ) -> None:
        assert scorer.delegation_score(make_answers(delegation_status=status)) == expected

    def test_unknown_delegation_defaults_to_fifty(self, scorer: DopamineRoiScorer) -> None:
        answers = make_answers(delegation_status="outsourced-everything")
        assert scorer.delegation_score(answers) == 50.0

    def test_unknown_revenue_defaults_to_one(self, scorer: DopamineRoiScorer) -> None:
        answers = make_answers(revenue_range="pre-revenue")
        assert scorer.revenue_multiplier(answers) == 1.0


# ---------------------------------------------------------------------------
# Final score
# ---------------------------------------------------------------------------


class TestCalculateScore:
    """Tests for the combined, multiplied and rounded score."""

    def test_cash_engine_reference_case(self, cash_engine_answers: AssessmentAnswers) -> None:
        """10k-50k, 80% split, 6 flow, 0 vampires, chaos 2, delegating well -> 93."""
        assert calculate_score(cash_engine_answers) == 93

    def test_profitable_chaos_reference_case(
        self, profitable_chaos_answers: AssessmentAnswers
    ) -> None:
        """under-10k, 0% split, 0 flow, 6 vampires, chaos 10, solo -> 3."""
        assert calculate_score(profitable_chaos_answers) == 3

    def test_score_is_clamped_to_one_hundred(
        self, cash_engine_answers: AssessmentAnswers
    ) -> None:
        """93.3 x 1.2 would exceed 100."""
        answers = make_answers(
            revenue_range="over-500k",
            time_split=cash_engine_answers.time_split,
            flow_activities=cash_engine_answers.flow_activities,
            energy_vampires=(),
            chaos_level=2,
            delegation_status="delegating-well",
        )
        assert calculate_score(answers) == 100

    def test_score_is_int_within_bounds(self) -> None:
        for chaos_level in (1, 5, 10):
            for revenue_range in REVENUE_MULTIPLIERS:
                score = calculate_score(
                    make_answers(chaos_level=chaos_level, revenue_range=revenue_range)
                )
                assert isinstance(score, int)
                assert 0 <= score <= 100

    def test_more_flow_activities_never_lowers_score(self) -> None:
        scores = [
            calculate_score(make_answers(flow_activities=FLOW_ACTIVITY_TAGS[:count]))
            for count in range(len(FLOW_ACTIVITY_TAGS) + 1)
        ]
        assert scores == sorted(scores)

    def test_more_energy_vampires_never_raises_score(self) -> None:
        scores = [
            calculate_score(make_answers(energy_vampires=ENERGY_VAMPIRE_TAGS[:count]))
            for count in range(len(ENERGY_VAMPIRE_TAGS) + 1)
        ]
        assert scores == sorted(scores, reverse=True)

    def test_lower_chaos_never_lowers_score(self) -> None:
        scores = [calculate_score(make_answers(chaos_level=level)) for level in range(1, 11)]
        assert scores == sorted(scores, reverse=True)


class TestRoundHalfUp:
    """Tests for the half-up rounding helper."""

    def test_half_rounds_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(2.49) == 2

    def test_negative_half_rounds_towards_positive_infinity(self) -> None:
        assert round_half_up(-0.5) == 0


class TestAnswerValidation:
    """AssessmentAnswers rejects out-of-range numeric answers."""

    def test_time_split_above_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="time_split"):
            make_answers(time_split=101)

    def test_chaos_level_below_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="chaos_level"):
            make_answers(chaos_level=0)


# ---------------------------------------------------------------------------
# Breakdown
# ---------------------------------------------------------------------------


class TestScoreBreakdown:
    """Tests for the per-component breakdown."""

    def test_breakdown_lists_components_in_weight_order(
        self, cash_engine_answers: AssessmentAnswers
    ) -> None:
        breakdown = get_score_breakdown(cash_engine_answers)
        assert [item.component for item in breakdown] == [
            "Flow Activities",
            "Energy Vampires",
            "Time Balance",
            "Chaos Management",
            "Delegation",
        ]
        assert [item.weight for item in breakdown] == list(COMPONENT_WEIGHTS.values())

    def test_breakdown_values_for_reference_case(
        self, cash_engine_answers: AssessmentAnswers
    ) -> None:
        breakdown = get_score_breakdown(cash_engine_answers)
        assert [item.score for item in breakdown] == [100, 100, 80, 89, 90]
        assert [item.contribution for item in breakdown] == [30, 25, 16, 13, 9]

    def test_breakdown_excludes_revenue_multiplier(self) -> None:
        low = get_score_breakdown(make_answers(revenue_range="under-10k"))
        high = get_score_breakdown(make_answers(revenue_range="over-500k"))
        assert low == high

    def test_breakdown_is_idempotent(self, cash_engine_answers: AssessmentAnswers) -> None:
        assert get_score_breakdown(cash_engine_answers) == get_score_breakdown(
            cash_engine_answers
        )

    def test_contribution_rounds_from_unrounded_score(self, scorer: DopamineRoiScorer) -> None:
        """Contribution is round(raw x weight), not round(rounded score x weight)."""
        answers = make_answers(chaos_level=2)
        raw_chaos = scorer.chaos_score(answers)
        chaos_item = scorer.score_breakdown(answers)[3]
        assert chaos_item.contribution == round_half_up(raw_chaos * 0.15)

    def test_unrounded_contributions_sum_to_weighted_score(
        self, scorer: DopamineRoiScorer
    ) -> None:
        answers = make_answers(time_split=35, chaos_level=7, delegation_status="small-team")
        scores = scorer.component_scores(answers)
        total = sum(scores[name] * weight for name, weight in COMPONENT_WEIGHTS.items())
        assert total == pytest.approx(scorer.weighted_score(answers))
