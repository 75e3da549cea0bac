"""Pydantic request/response schemas for the Dopamine ROI HTTP API.

Field names are snake_case in Python and camelCase on the wire, matching
what the marketing site sends and expects.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from dopamine_roi.core.categories import Category
from dopamine_roi.core.questions import (
    ENERGY_VAMPIRE_TAGS,
    FLOW_ACTIVITY_TAGS,
    MAX_MULTISELECT_TAGS,
    Question,
)
from dopamine_roi.core.scoring import AssessmentAnswers

# One "@", at least one "." after it, no whitespace; always used with fullmatch
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email_format(value: str) -> str:
    """Check an email against the simple site-wide pattern.

    Raises:
        ValueError: If the address does not match.
    """
    if not EMAIL_PATTERN.fullmatch(value):
        raise ValueError("Invalid email format")
    return value


def _unique_known_tags(values: list[str], vocabulary: tuple[str, ...], label: str) -> list[str]:
    """Drop duplicate tags (keeping first-seen order) and reject unknown ones."""
    unknown = sorted({value for value in values if value not in vocabulary})
    if unknown:
        raise ValueError(f"Unknown {label}: {', '.join(unknown)}")
    return list(dict.fromkeys(values))


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Assessment submission
# ---------------------------------------------------------------------------


class AnswersPayload(CamelModel):
    """Questionnaire answers as posted by the assessment wizard.

    Every scored field is required. Unknown revenue brackets and delegation
    statuses are accepted and scored with their defaults.
    """

    revenue_range: str = Field(..., min_length=1, max_length=50)
    time_split: float = Field(..., ge=0, le=100)
    energy_vampires: list[str] = Field(..., max_length=MAX_MULTISELECT_TAGS * 2)
    flow_activities: list[str] = Field(..., max_length=MAX_MULTISELECT_TAGS * 2)
    chaos_level: int = Field(..., ge=1, le=10)
    delegation_status: str = Field(..., min_length=1, max_length=50)
    biggest_struggle: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)

    @field_validator("energy_vampires")
    @classmethod
    def validate_energy_vampires(cls, value: list[str]) -> list[str]:
        """Energy vampires must come from the catalog; duplicates collapse."""
        return _unique_known_tags(value, ENERGY_VAMPIRE_TAGS, "energy vampire tag(s)")

    @field_validator("flow_activities")
    @classmethod
    def validate_flow_activities(cls, value: list[str]) -> list[str]:
        """Flow activities must come from the catalog; duplicates collapse."""
        return _unique_known_tags(value, FLOW_ACTIVITY_TAGS, "flow activity tag(s)")

    def to_answers(self, email: str) -> AssessmentAnswers:
        """Convert to the immutable domain type used by the scorer.

        Args:
            email: Validated top-level contact email.
        """
        return AssessmentAnswers(
            revenue_range=self.revenue_range,
            time_split=self.time_split,
            energy_vampires=tuple(self.energy_vampires),
            flow_activities=tuple(self.flow_activities),
            chaos_level=self.chaos_level,
            delegation_status=self.delegation_status,
            biggest_struggle=self.biggest_struggle or "",
            email=email,
        )


class SubmitAssessmentRequest(CamelModel):
    """Body of POST /submit-assessment."""

    email: str = Field(..., max_length=255)
    answers: AnswersPayload
    referred_by: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        """Apply the simple email pattern."""
        return validate_email_format(value)


class SubmitAssessmentResponse(CamelModel):
    """Score, category id and referral code for a submission."""

    success: bool = True
    score: int
    category: str
    referral_code: str


# ---------------------------------------------------------------------------
# Referrals, events, contact
# ---------------------------------------------------------------------------


class SuccessResponse(BaseModel):
    """Generic acknowledgement."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Error body for 4xx and 5xx responses."""

    error: str
    details: str | None = None


class ReferralStatsResponse(CamelModel):
    """Click and conversion counts for a referral code."""

    clicks: int
    conversions: int
    conversion_rate: str


class TrackEventRequest(CamelModel):
    """Body of POST /track-event."""

    event: str | None = None
    referral_code: str | None = Field(None, max_length=16)
    metadata: dict[str, Any] | None = None


class ContactRequest(CamelModel):
    """Body of POST /contact."""

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1, max_length=5000)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        """Apply the simple email pattern."""
        return validate_email_format(value)


# ---------------------------------------------------------------------------
# Catalog and categories
# ---------------------------------------------------------------------------


class QuestionOptionSchema(CamelModel):
    """A selectable answer option."""

    value: str
    label: str
    description: str | None = None
    icon: str | None = None


class QuestionSchema(CamelModel):
    """A wizard step as rendered by the front end."""

    id: str
    title: str
    subtitle: str
    type: str
    options: list[QuestionOptionSchema] = []
    min: int | None = None
    max: int | None = None
    step: int | None = None
    labels: dict[str, str] = {}

    @classmethod
    def from_question(cls, question: Question) -> "QuestionSchema":
        """Build the schema from a catalog Question."""
        return cls(
            id=question.question_id,
            title=question.title,
            subtitle=question.subtitle,
            type=question.type,
            options=[
                QuestionOptionSchema(
                    value=option.value,
                    label=option.label,
                    description=option.description,
                    icon=option.icon,
                )
                for option in question.options
            ],
            min=question.min,
            max=question.max,
            step=question.step,
            labels=dict(question.labels),
        )


class QuestionCatalogResponse(CamelModel):
    """Ordered questions plus the trailing email step."""

    questions: list[QuestionSchema]
    email_step: QuestionSchema


class ScoreRangeSchema(BaseModel):
    """Inclusive score range."""

    min: int
    max: int


class CategorySchema(CamelModel):
    """A result category with its marketing copy."""

    id: str
    name: str
    tagline: str
    range: ScoreRangeSchema
    color: str
    bg_color: str
    description: str
    strengths: list[str]
    recommendations: list[str]
    share_emoji: str

    @classmethod
    def from_category(cls, category: Category) -> "CategorySchema":
        """Build the schema from a Category."""
        return cls(
            id=category.id,
            name=category.name,
            tagline=category.tagline,
            range=ScoreRangeSchema(min=category.min_score, max=category.max_score),
            color=category.color,
            bg_color=category.bg_color,
            description=category.description,
            strengths=list(category.strengths),
            recommendations=list(category.recommendations),
            share_emoji=category.share_emoji,
        )
