"""Repositories for the Dopamine ROI data layer.

Implements the repository interfaces from ``core/interfaces.py`` using the
SQLAlchemy 2.0 async ORM. Every write commits its own unit of work so that a
failed write can be rolled back and reported without affecting the rest of
the request. Database errors, including driver-level connection failures
that SQLAlchemy does not wrap, are re-raised as ``PersistenceError``.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dopamine_roi.core.errors import PersistenceError
from dopamine_roi.core.models import AnalyticsEvent, AssessmentRecord, ReferralClick
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

# asyncpg raises OSError subclasses (ConnectionRefusedError, TimeoutError)
# straight through SQLAlchemy when the server cannot be reached
DATABASE_ERRORS: tuple[type[Exception], ...] = (SQLAlchemyError, OSError)


async def _rollback(session: AsyncSession) -> None:
    try:
        await session.rollback()
    except DATABASE_ERRORS as exc:
        logger.warning("Rollback failed", error=repr(exc))


class AssessmentRepository:
    """Repository for AssessmentRecord persistence."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create_assessment(
        self,
        email: str,
        answers: dict[str, Any],
        score: int,
        score_breakdown: list[dict[str, Any]],
        category: str,
        referral_code: str,
        referred_by: str | None,
    ) -> AssessmentRecord:
        """Persist a scored submission.

        Args:
            email: Respondent email.
            answers: Raw answers as submitted.
            score: Final score 0-100.
            score_breakdown: Serialised per-component breakdown.
            category: Category id.
            referral_code: Code generated for this respondent.
            referred_by: Code of the referring respondent, if any.

        Returns:
            The persisted AssessmentRecord.

        Raises:
            PersistenceError: If the insert fails.
        """
        record = AssessmentRecord(
            email=email,
            answers=answers,
            score=score,
            score_breakdown=score_breakdown,
            category=category,
            referral_code=referral_code,
            referred_by=referred_by,
        )
        try:
            self._session.add(record)
            await self._session.commit()
            await self._session.refresh(record)
        except DATABASE_ERRORS as exc:
            await _rollback(self._session)
            raise PersistenceError(f"Could not save assessment: {exc}") from exc

        logger.debug(
            "Assessment persisted",
            assessment_id=str(record.id),
            referral_code=referral_code,
            score=score,
        )
        return record

    async def referral_code_exists(self, referral_code: str) -> bool:
        """Whether an assessment was issued this referral code.

        Raises:
            PersistenceError: If the query fails.
        """
        try:
            result = await self._session.execute(
                select(AssessmentRecord.id)
                .where(AssessmentRecord.referral_code == referral_code)
                .limit(1)
            )
        except DATABASE_ERRORS as exc:
            raise PersistenceError(f"Could not look up referral code: {exc}") from exc
        return result.scalar_one_or_none() is not None


class ReferralClickRepository:
    """Repository for ReferralClick persistence."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def record_click(self, referral_code: str, converted: bool) -> ReferralClick:
        """Append a click or conversion row.

        Args:
            referral_code: Referral code being credited.
            converted: True when recording a completed referred assessment.

        Returns:
            The persisted ReferralClick.

        Raises:
            PersistenceError: If the insert fails.
        """
        record = ReferralClick(referral_code=referral_code, converted=converted)
        try:
            self._session.add(record)
            await self._session.commit()
        except DATABASE_ERRORS as exc:
            await _rollback(self._session)
            raise PersistenceError(f"Could not record referral click: {exc}") from exc
        return record

    async def count_clicks(self, referral_code: str) -> int:
        """Count all rows recorded against a referral code."""
        return await self._count(ReferralClick.referral_code == referral_code)

    async def count_conversions(self, referral_code: str) -> int:
        """Count converted rows recorded against a referral code."""
        return await self._count(
            ReferralClick.referral_code == referral_code,
            ReferralClick.converted.is_(True),
        )

    async def _count(self, *conditions: Any) -> int:
        try:
            result = await self._session.execute(
                select(func.count(ReferralClick.id)).where(*conditions)
            )
        except DATABASE_ERRORS as exc:
            raise PersistenceError(f"Could not count referral clicks: {exc}") from exc
        return int(result.scalar_one())


class EventRepository:
    """Repository for AnalyticsEvent persistence."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def record_event(
        self,
        event_name: str,
        referral_code: str | None,
        metadata: dict[str, Any],
    ) -> AnalyticsEvent:
        """Append an analytics event.

        Raises:
            PersistenceError: If the insert fails.
        """
        record = AnalyticsEvent(
            event_name=event_name,
            referral_code=referral_code,
            event_metadata=metadata,
        )
        try:
            self._session.add(record)
            await self._session.commit()
        except DATABASE_ERRORS as exc:
            await _rollback(self._session)
            raise PersistenceError(f"Could not record event: {exc}") from exc
        return record
