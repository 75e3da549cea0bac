"""Unit tests for the question catalog.

The catalog drives both the wizard UI and answer validation, so its
vocabularies must line up with the scoring tables.
"""

from dopamine_roi.core.questions import (
    CHAOS_LEVEL,
    DELEGATION_STATUSES,
    ENERGY_VAMPIRE_TAGS,
    FLOW_ACTIVITY_TAGS,
    MAX_MULTISELECT_TAGS,
    QUESTION_TYPES,
    QUESTIONS,
    QUESTIONS_BY_ID,
    REVENUE_RANGES,
    TIME_SPLIT,
)
from dopamine_roi.core.scoring import DELEGATION_SCORES, REVENUE_MULTIPLIERS


class TestQuestionCatalog:
    """Structure of the question list."""

    def test_seven_questions_in_wizard_order(self) -> None:
        assert [question.question_id for question in QUESTIONS] == [
            "revenueRange",
            "timeSplit",
            "energyVampires",
            "flowActivities",
            "chaosLevel",
            "delegationStatus",
            "biggestStruggle",
        ]

    def test_question_ids_are_unique(self) -> None:
        assert len(QUESTIONS_BY_ID) == len(QUESTIONS)

    def test_question_types_are_known(self) -> None:
        for question in QUESTIONS:
            assert question.type in QUESTION_TYPES

    def test_sliders_have_bounds(self) -> None:
        assert (TIME_SPLIT.min, TIME_SPLIT.max) == (0, 100)
        assert (CHAOS_LEVEL.min, CHAOS_LEVEL.max) == (1, 10)


class TestVocabularies:
    """Answer vocabularies agree with the scoring tables."""

    def test_revenue_ranges_match_multipliers(self) -> None:
        assert REVENUE_RANGES == tuple(REVENUE_MULTIPLIERS)

    def test_delegation_statuses_match_scores(self) -> None:
        assert DELEGATION_STATUSES == tuple(DELEGATION_SCORES)

    def test_multiselects_have_six_distinct_tags(self) -> None:
        for tags in (ENERGY_VAMPIRE_TAGS, FLOW_ACTIVITY_TAGS):
            assert len(tags) == MAX_MULTISELECT_TAGS
            assert len(set(tags)) == len(tags)
