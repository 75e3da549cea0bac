"""Founder Circle contact form handling.

The notification to the site inbox is the primary effect and must succeed.
The confirmation to the applicant is sent afterwards and may fail quietly.
"""

from dopamine_roi.core.interfaces import IEmailSender
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)


class EmailServiceNotConfiguredError(Exception):
    """Raised when no email provider credentials are configured."""


class ContactDeliveryError(Exception):
    """Raised when the inbox notification could not be delivered."""


class ContactService:
    """Forwards contact form submissions by email."""

    def __init__(self, email_sender: IEmailSender) -> None:
        """Initialise with the transactional email adapter.

        Args:
            email_sender: Email adapter used for both messages.
        """
        self._email_sender = email_sender

    async def submit_contact(self, name: str, email: str, message: str) -> None:
        """Deliver the contact form to the site inbox.

        Args:
            name: Applicant name.
            email: Applicant email (already validated).
            message: Free-text message.

        Raises:
            EmailServiceNotConfiguredError: If the email provider is not configured.
            ContactDeliveryError: If the provider rejected the notification.
        """
        if not self._email_sender.configured:
            logger.error("Email provider not configured - contact form rejected")
            raise EmailServiceNotConfiguredError("Email service not configured")

        delivered = await self._email_sender.send_contact_notification(
            name=name,
            email=email,
            message=message,
        )
        if not delivered:
            raise ContactDeliveryError("Failed to send message")

        logger.info("Contact form delivered", applicant_email=email)

    async def send_confirmation(self, name: str, email: str) -> None:
        """Acknowledge receipt to the applicant. Failures are only logged."""
        delivered = await self._email_sender.send_contact_confirmation(name=name, email=email)
        if not delivered:
            logger.warning("Contact confirmation not delivered", applicant_email=email)
