"""Referral click tracking and statistics.

Clicks are only recorded against codes that were actually issued, but the
caller always sees the same outcome so codes cannot be enumerated.
"""

from dataclasses import dataclass

from dopamine_roi.core.errors import PersistenceError
from dopamine_roi.core.interfaces import IAssessmentRepository, IReferralClickRepository
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

# Width of the referral_code columns; longer codes can never have been issued
REFERRAL_CODE_MAX_LENGTH: int = 16


def is_plausible_referral_code(referral_code: str) -> bool:
    """Whether a code could have been issued, judged by length alone."""
    return 0 < len(referral_code) <= REFERRAL_CODE_MAX_LENGTH


@dataclass(frozen=True)
class ReferralStats:
    """Click and conversion counts for one referral code.

    Attributes:
        clicks: All rows recorded for the code (clicks and conversions).
        conversions: Rows flagged as converted.
    """

    clicks: int
    conversions: int

    @property
    def conversion_rate(self) -> str:
        """Conversions per click as a percentage with one decimal place."""
        if not self.clicks:
            return "0.0"
        return f"{self.conversions / self.clicks * 100:.1f}"


class ReferralService:
    """Records referral clicks and reports per-code statistics."""

    def __init__(
        self,
        assessment_repository: IAssessmentRepository | None,
        referral_repository: IReferralClickRepository | None,
    ) -> None:
        """Initialise with optional repositories (None when persistence is off).

        Args:
            assessment_repository: Used to verify that a code was issued.
            referral_repository: Referral click storage.
        """
        self._assessment_repo = assessment_repository
        self._referral_repo = referral_repository

    async def track_click(self, referral_code: str) -> bool:
        """Record a click against an issued referral code.

        Unknown codes and storage failures are not errors: nothing is recorded
        and the caller carries on.

        Args:
            referral_code: Code from the referral link.

        Returns:
            True if a click row was written.
        """
        if self._assessment_repo is None or self._referral_repo is None:
            return False

        if not is_plausible_referral_code(referral_code):
            logger.debug("Click on malformed referral code ignored", code_length=len(referral_code))
            return False

        try:
            exists = await self._assessment_repo.referral_code_exists(referral_code)
        except PersistenceError as exc:
            logger.error(
                "Referral code lookup failed",
                referral_code=referral_code,
                error=str(exc),
            )
            return False

        if not exists:
            logger.debug("Click on unknown referral code ignored", referral_code=referral_code)
            return False

        try:
            await self._referral_repo.record_click(referral_code, converted=False)
        except PersistenceError as exc:
            logger.error(
                "Failed to record referral click",
                referral_code=referral_code,
                error=str(exc),
            )
            return False

        logger.info("Referral click recorded", referral_code=referral_code)
        return True

    async def get_stats(self, referral_code: str) -> ReferralStats:
        """Return click and conversion counts, or zeros if unavailable.

        Args:
            referral_code: Code to report on.

        Returns:
            ReferralStats for the code.
        """
        if self._referral_repo is None or not is_plausible_referral_code(referral_code):
            return ReferralStats(clicks=0, conversions=0)

        try:
            clicks = await self._referral_repo.count_clicks(referral_code)
            conversions = await self._referral_repo.count_conversions(referral_code)
        except PersistenceError as exc:
            logger.error(
                "Referral stats lookup failed",
                referral_code=referral_code,
                error=str(exc),
            )
            return ReferralStats(clicks=0, conversions=0)

        return ReferralStats(clicks=clicks, conversions=conversions)
