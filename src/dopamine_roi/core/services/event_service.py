"""Funnel analytics event tracking.

Only whitelisted event names are accepted. Everything past validation is
best-effort: storage problems are logged and the caller still sees success.
"""

from typing import Any

from dopamine_roi.core.errors import PersistenceError
from dopamine_roi.core.interfaces import IEventRepository
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

ALLOWED_EVENTS: tuple[str, ...] = (
    "results_viewed",
    "share_clicked",
    "cta_clicked",
    "recommendation_checked",
    "assessment_started",
    "assessment_abandoned",
    "email_captured",
    "landing_page_viewed",
    "question_answered",
    "referral_link_copied",
)


class InvalidEventError(Exception):
    """Raised when the event name is missing or not whitelisted."""


class EventService:
    """Validates and stores front-end analytics events."""

    def __init__(self, event_repository: IEventRepository | None) -> None:
        """Initialise with an optional event repository.

        Args:
            event_repository: Event storage, or None when persistence is off.
        """
        self._event_repo = event_repository

    async def track_event(
        self,
        event: str | None,
        referral_code: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> bool:
        """Validate and record an analytics event.

        Args:
            event: Event name; must be in ALLOWED_EVENTS.
            referral_code: Visitor's referral code, if known.
            metadata: Free-form event properties.

        Returns:
            True if the event was stored, False if it was only logged.

        Raises:
            InvalidEventError: If the event name is missing or unknown.
        """
        if not event:
            raise InvalidEventError("Event name is required")
        if event not in ALLOWED_EVENTS:
            raise InvalidEventError("Invalid event type")

        if self._event_repo is None:
            logger.info(
                "Analytics event",
                event=event,
                referral_code=referral_code,
                metadata=metadata or {},
            )
            return False

        try:
            await self._event_repo.record_event(
                event_name=event,
                referral_code=referral_code,
                metadata=metadata or {},
            )
        except PersistenceError as exc:
            logger.error("Event tracking failed", event=event, error=str(exc))
            return False

        return True
