"""Dopamine ROI scoring algorithm.

Scores five components of the questionnaire on a 0-100 scale, combines them
with fixed weights, then applies a revenue-bracket multiplier. The final
score is clamped to 0-100 and rounded half-up to an integer.

This module is independent of the database and HTTP layers so that the
scoring logic can be unit-tested without any infrastructure.
"""

import math
from dataclasses import dataclass

from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

# Component weights must sum to 1.0
COMPONENT_WEIGHTS: dict[str, float] = {
    "flow_activities": 0.30,
    "energy_vampires": 0.25,
    "time_split": 0.20,
    "chaos_level": 0.15,
    "delegation_status": 0.10,
}

COMPONENT_LABELS: dict[str, str] = {
    "flow_activities": "Flow Activities",
    "energy_vampires": "Energy Vampires",
    "time_split": "Time Balance",
    "chaos_level": "Chaos Management",
    "delegation_status": "Delegation",
}

# Monotonically increasing with the revenue bracket
REVENUE_MULTIPLIERS: dict[str, float] = {
    "under-10k": 0.9,
    "10k-50k": 1.0,
    "50k-100k": 1.05,
    "100k-250k": 1.1,
    "250k-500k": 1.15,
    "over-500k": 1.2,
}

DELEGATION_SCORES: dict[str, float] = {
    "solo": 30.0,
    "some-help": 50.0,
    "small-team": 70.0,
    "delegating-well": 90.0,
}

DEFAULT_REVENUE_MULTIPLIER: float = 1.0
DEFAULT_DELEGATION_SCORE: float = 50.0

# Multiselect counts saturate at this many selections
_MAX_SELECTIONS: int = 6
# Below this share of energising time the slider value is scaled up
_TIME_SPLIT_PIVOT: float = 50.0
_LOW_TIME_SPLIT_FACTOR: float = 1.5


@dataclass(frozen=True)
class AssessmentAnswers:
    """One respondent's questionnaire answers.

    Attributes:
        revenue_range: Monthly revenue bracket (e.g. '10k-50k').
        time_split: Percentage of work time spent on energising tasks, 0-100.
        energy_vampires: Distinct draining-task tags.
        flow_activities: Distinct energising-task tags.
        chaos_level: Self-reported chaos, 1 (calm) to 10 (tornado).
        delegation_status: Delegation tier (e.g. 'solo').
        biggest_struggle: Free-text struggle tag; not scored.
        email: Contact email; not scored.
    """

    revenue_range: str
    time_split: float
    energy_vampires: tuple[str, ...]
    flow_activities: tuple[str, ...]
    chaos_level: int
    delegation_status: str
    biggest_struggle: str = ""
    email: str = ""

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises:
            ValueError: If time_split or chaos_level is out of range.
        """
        if not (0 <= self.time_split <= 100):
            raise ValueError(
                f"time_split must be between 0 and 100, got {self.time_split!r}"
            )
        if not (1 <= self.chaos_level <= 10):
            raise ValueError(
                f"chaos_level must be between 1 and 10, got {self.chaos_level!r}"
            )


@dataclass(frozen=True)
class ScoreComponent:
    """One line of the score breakdown.

    Attributes:
        component: Display name of the component.
        score: Sub-score 0-100, rounded.
        weight: Fixed component weight.
        contribution: score x weight, rounded from the unrounded sub-score.
    """

    component: str
    score: int
    weight: float
    contribution: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding towards +infinity."""
    return math.floor(value + 0.5)


class DopamineRoiScorer:
    """Stateless scoring engine for the Dopamine ROI assessment.

    Component weights sum to exactly 1.0:
        flow_activities    0.30
        energy_vampires    0.25
        time_split         0.20
        chaos_level        0.15
        delegation_status  0.10
    """

    COMPONENT_WEIGHTS: dict[str, float] = COMPONENT_WEIGHTS

    def flow_score(self, answers: AssessmentAnswers) -> float:
        """More flow activities is better, saturating at six."""
        return min(len(answers.flow_activities) / _MAX_SELECTIONS, 1.0) * 100.0

    def vampire_score(self, answers: AssessmentAnswers) -> float:
        """Fewer energy vampires is better, saturating at six."""
        return (1.0 - min(len(answers.energy_vampires) / _MAX_SELECTIONS, 1.0)) * 100.0

    def time_split_score(self, answers: AssessmentAnswers) -> float:
        """Score the energising-time share.

        At or above 50% the share is used directly (capped at 100). Below
        50% it is multiplied by 1.5 and not clamped.
        """
        if answers.time_split >= _TIME_SPLIT_PIVOT:
            return min(float(answers.time_split), 100.0)
        return answers.time_split * _LOW_TIME_SPLIT_FACTOR

    def chaos_score(self, answers: AssessmentAnswers) -> float:
        """Linear inversion of the chaos level: 1 -> 100, 10 -> 0."""
        return ((10 - answers.chaos_level) / 9) * 100.0

    def delegation_score(self, answers: AssessmentAnswers) -> float:
        """Table lookup on delegation status, 50 for unknown statuses."""
        return DELEGATION_SCORES.get(answers.delegation_status, DEFAULT_DELEGATION_SCORE)

    def revenue_multiplier(self, answers: AssessmentAnswers) -> float:
        """Table lookup on revenue bracket, 1.0 for unknown brackets."""
        return REVENUE_MULTIPLIERS.get(answers.revenue_range, DEFAULT_REVENUE_MULTIPLIER)

    def component_scores(self, answers: AssessmentAnswers) -> dict[str, float]:
        """Unrounded 0-100 sub-scores keyed by component, in weight order."""
        return {
            "flow_activities": self.flow_score(answers),
            "energy_vampires": self.vampire_score(answers),
            "time_split": self.time_split_score(answers),
            "chaos_level": self.chaos_score(answers),
            "delegation_status": self.delegation_score(answers),
        }

    def weighted_score(self, answers: AssessmentAnswers) -> float:
        """Weighted sum of the five components before the revenue multiplier."""
        scores = self.component_scores(answers)
        return sum(scores[name] * weight for name, weight in COMPONENT_WEIGHTS.items())

    def calculate_score(self, answers: AssessmentAnswers) -> int:
        """Compute the final Dopamine ROI score.

        Args:
            answers: The respondent's answers.

        Returns:
            Integer score in range 0-100.
        """
        weighted = self.weighted_score(answers)
        multiplier = self.revenue_multiplier(answers)
        score = round_half_up(max(0.0, min(100.0, weighted * multiplier)))

        logger.debug(
            "Dopamine ROI score computed",
            weighted_score=round(weighted, 2),
            revenue_multiplier=multiplier,
            score=score,
        )
        return score

    def score_breakdown(self, answers: AssessmentAnswers) -> list[ScoreComponent]:
        """Per-component breakdown without the revenue multiplier.

        Sub-scores and contributions are rounded independently, so the
        contributions do not always add up to the rounded weighted score.

        Args:
            answers: The respondent's answers.

        Returns:
            Five ScoreComponent entries in weight order.
        """
        scores = self.component_scores(answers)
        return [
            ScoreComponent(
                component=COMPONENT_LABELS[name],
                score=round_half_up(scores[name]),
                weight=weight,
                contribution=round_half_up(scores[name] * weight),
            )
            for name, weight in COMPONENT_WEIGHTS.items()
        ]


_SCORER = DopamineRoiScorer()


def calculate_score(answers: AssessmentAnswers) -> int:
    """Module-level shortcut for DopamineRoiScorer.calculate_score."""
    return _SCORER.calculate_score(answers)


def get_score_breakdown(answers: AssessmentAnswers) -> list[ScoreComponent]:
    """Module-level shortcut for DopamineRoiScorer.score_breakdown."""
    return _SCORER.score_breakdown(answers)
