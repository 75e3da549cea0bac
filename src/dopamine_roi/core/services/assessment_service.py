"""Service layer orchestrating a Dopamine ROI quiz submission.

Flow for one submission:
    1. score the answers and build the breakdown
    2. look up the category and issue a referral code
    3. persist the assessment (failures are logged, never raised)
    4. record a referral conversion when the respondent was referred
    5. deliver_follow_ups(): results email and CRM subscription, run by the
       caller after the response has been prepared

All database access goes through repository interfaces. No SQLAlchemy or
FastAPI imports belong here.
"""

import asyncio
import secrets
from dataclasses import asdict, dataclass
from typing import Any

from dopamine_roi.core.categories import Category, get_category_by_score
from dopamine_roi.core.errors import PersistenceError
from dopamine_roi.core.interfaces import (
    IAssessmentRepository,
    ICrmSubscriber,
    IEmailSender,
    IReferralClickRepository,
)
from dopamine_roi.core.scoring import (
    AssessmentAnswers,
    DopamineRoiScorer,
    ScoreComponent,
)
from dopamine_roi.core.services.referral_service import is_plausible_referral_code
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

_SCORER: DopamineRoiScorer = DopamineRoiScorer()

# token_urlsafe(6) yields 8 characters from [A-Za-z0-9_-]
_REFERRAL_CODE_BYTES: int = 6


def generate_referral_code() -> str:
    """Return a fresh 8-character URL-safe referral code."""
    return secrets.token_urlsafe(_REFERRAL_CODE_BYTES)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a scored submission.

    Attributes:
        email: Respondent email.
        score: Final Dopamine ROI score 0-100.
        category: Category the score falls into.
        referral_code: Referral code issued to the respondent.
        breakdown: Per-component score breakdown.
        persisted: Whether the assessment row was written.
    """

    email: str
    score: int
    category: Category
    referral_code: str
    breakdown: list[ScoreComponent]
    persisted: bool


class AssessmentService:
    """Scores submissions, stores them, and hands off follow-up messaging.

    Repositories are optional: when persistence is disabled the service
    still scores and responds, it just skips the writes.
    """

    def __init__(
        self,
        assessment_repository: IAssessmentRepository | None,
        referral_repository: IReferralClickRepository | None,
        email_sender: IEmailSender,
        crm_subscriber: ICrmSubscriber,
    ) -> None:
        """Initialise the service with its collaborators.

        Args:
            assessment_repository: Assessment storage, or None when disabled.
            referral_repository: Referral click storage, or None when disabled.
            email_sender: Transactional email adapter.
            crm_subscriber: CRM / mailing-list adapter.
        """
        self._assessment_repo = assessment_repository
        self._referral_repo = referral_repository
        self._email_sender = email_sender
        self._crm_subscriber = crm_subscriber

    async def submit_assessment(
        self,
        email: str,
        answers: AssessmentAnswers,
        raw_answers: dict[str, Any],
        referred_by: str | None = None,
    ) -> SubmissionResult:
        """Score a submission and persist it.

        Args:
            email: Respondent email (already validated).
            answers: Parsed answers.
            raw_answers: Answers exactly as submitted, stored verbatim.
            referred_by: Referral code that brought the respondent, if any.
                An over-long code is logged and ignored.

        Returns:
            SubmissionResult with the score, category and new referral code.
        """
        if referred_by and not is_plausible_referral_code(referred_by):
            logger.warning("Ignoring malformed referredBy", code_length=len(referred_by))
            referred_by = None

        score = _SCORER.calculate_score(answers)
        breakdown = _SCORER.score_breakdown(answers)
        category = get_category_by_score(score)
        referral_code = generate_referral_code()

        persisted = await self._persist(
            email=email,
            raw_answers=raw_answers,
            score=score,
            breakdown=breakdown,
            category=category,
            referral_code=referral_code,
            referred_by=referred_by,
        )

        logger.info(
            "Assessment scored",
            score=score,
            category=category.id,
            referral_code=referral_code,
            referred_by=referred_by,
            persisted=persisted,
        )

        return SubmissionResult(
            email=email,
            score=score,
            category=category,
            referral_code=referral_code,
            breakdown=breakdown,
            persisted=persisted,
        )

    async def deliver_follow_ups(
        self,
        result: SubmissionResult,
        answers: AssessmentAnswers,
    ) -> None:
        """Send the results email and subscribe the respondent to the CRM.

        Both calls run concurrently and fail independently. Errors are
        logged and never raised, since the respondent already has their score.

        Args:
            result: The submission outcome returned by submit_assessment().
            answers: Parsed answers, used for CRM custom fields.
        """
        outcomes = await asyncio.gather(
            self._email_sender.send_results_email(
                email=result.email,
                score=result.score,
                category=result.category,
                referral_code=result.referral_code,
            ),
            self._crm_subscriber.subscribe(
                email=result.email,
                category=result.category,
                fields={
                    "dopamine_roi_score": result.score,
                    "dopamine_roi_category": result.category.id,
                    "referral_code": result.referral_code,
                    "biggest_struggle": answers.biggest_struggle,
                    "revenue_range": answers.revenue_range,
                },
            ),
            return_exceptions=True,
        )

        for channel, outcome in zip(("results_email", "crm_subscription"), outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    "Follow-up delivery raised",
                    channel=channel,
                    referral_code=result.referral_code,
                    error=repr(outcome),
                )

    async def _persist(
        self,
        email: str,
        raw_answers: dict[str, Any],
        score: int,
        breakdown: list[ScoreComponent],
        category: Category,
        referral_code: str,
        referred_by: str | None,
    ) -> bool:
        """Write the assessment and any referral conversion.

        Returns:
            True if the assessment row was written.
        """
        if self._assessment_repo is None:
            logger.warning(
                "Database not configured - assessment not saved",
                referral_code=referral_code,
            )
            return False

        persisted = True
        try:
            await self._assessment_repo.create_assessment(
                email=email,
                answers=raw_answers,
                score=score,
                score_breakdown=[asdict(component) for component in breakdown],
                category=category.id,
                referral_code=referral_code,
                referred_by=referred_by,
            )
        except PersistenceError as exc:
            persisted = False
            logger.error(
                "Failed to persist assessment",
                referral_code=referral_code,
                error=str(exc),
            )

        if referred_by and self._referral_repo is not None:
            try:
                await self._referral_repo.record_click(referred_by, converted=True)
            except PersistenceError as exc:
                logger.error(
                    "Failed to record referral conversion",
                    referred_by=referred_by,
                    error=str(exc),
                )

        return persisted
