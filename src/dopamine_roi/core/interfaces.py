"""Abstract interfaces (Protocol classes) for the Dopamine ROI service.

Services depend on these interfaces, not on concrete implementations, so
they can be constructed with mocks in tests. Concrete repositories live in
``adapters/repositories.py``; outbound integrations live in
``adapters/email_sender.py`` and ``adapters/crm_subscriber.py``.

Repository methods raise ``PersistenceError`` on database failures.
"""

from typing import Any, Protocol, runtime_checkable

from dopamine_roi.core.categories import Category


@runtime_checkable
class IAssessmentRepository(Protocol):
    """Repository interface for AssessmentRecord persistence."""

    async def create_assessment(
        self,
        email: str,
        answers: dict[str, Any],
        score: int,
        score_breakdown: list[dict[str, Any]],
        category: str,
        referral_code: str,
        referred_by: str | None,
    ) -> Any:
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
            The persisted record.
        """
        ...

    async def referral_code_exists(self, referral_code: str) -> bool:
        """Whether an assessment was issued this referral code."""
        ...


@runtime_checkable
class IReferralClickRepository(Protocol):
    """Repository interface for ReferralClick persistence."""

    async def record_click(self, referral_code: str, converted: bool) -> Any:
        """Append a click (converted=False) or conversion (converted=True) row."""
        ...

    async def count_clicks(self, referral_code: str) -> int:
        """Count all rows recorded against a referral code."""
        ...

    async def count_conversions(self, referral_code: str) -> int:
        """Count converted rows recorded against a referral code."""
        ...


@runtime_checkable
class IEventRepository(Protocol):
    """Repository interface for AnalyticsEvent persistence."""

    async def record_event(
        self,
        event_name: str,
        referral_code: str | None,
        metadata: dict[str, Any],
    ) -> Any:
        """Append an analytics event."""
        ...


@runtime_checkable
class IEmailSender(Protocol):
    """Transactional email delivery.

    Every method returns True when the provider accepted the message and
    False otherwise. Provider failures are logged, never raised.
    """

    @property
    def configured(self) -> bool:
        """Whether provider credentials are present."""
        ...

    async def send_results_email(
        self,
        email: str,
        score: int,
        category: Category,
        referral_code: str,
    ) -> bool:
        """Send the respondent their score and category."""
        ...

    async def send_contact_notification(self, name: str, email: str, message: str) -> bool:
        """Forward a contact form submission to the site inbox."""
        ...

    async def send_contact_confirmation(self, name: str, email: str) -> bool:
        """Acknowledge a contact form submission to the applicant."""
        ...


@runtime_checkable
class ICrmSubscriber(Protocol):
    """Mailing-list / CRM subscription for nurture sequences."""

    async def subscribe(
        self,
        email: str,
        category: Category,
        fields: dict[str, Any],
    ) -> bool:
        """Tag the respondent for the nurture sequence matching their category.

        Returns True on success and False otherwise. Failures are logged,
        never raised.
        """
        ...
