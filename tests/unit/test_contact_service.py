"""Unit tests for ContactService."""

from unittest.mock import MagicMock

import pytest

from dopamine_roi.core.services import (
    ContactDeliveryError,
    ContactService,
    EmailServiceNotConfiguredError,
)


class TestSubmitContact:
    """Inbox notification is mandatory."""

    @pytest.mark.asyncio()
    async def test_notification_sent(self, mock_email_sender: MagicMock) -> None:
        await ContactService(mock_email_sender).submit_contact(
            name="Ada",
            email="ada@example.com",
            message="I'd like to join.",
        )
        mock_email_sender.send_contact_notification.assert_awaited_once_with(
            name="Ada",
            email="ada@example.com",
            message="I'd like to join.",
        )

    @pytest.mark.asyncio()
    async def test_unconfigured_provider_rejected(self, mock_email_sender: MagicMock) -> None:
        mock_email_sender.configured = False

        with pytest.raises(EmailServiceNotConfiguredError, match="Email service not configured"):
            await ContactService(mock_email_sender).submit_contact(
                name="Ada", email="ada@example.com", message="Hi"
            )
        mock_email_sender.send_contact_notification.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_failed_notification_raises(self, mock_email_sender: MagicMock) -> None:
        mock_email_sender.send_contact_notification.return_value = False

        with pytest.raises(ContactDeliveryError, match="Failed to send message"):
            await ContactService(mock_email_sender).submit_contact(
                name="Ada", email="ada@example.com", message="Hi"
            )


class TestSendConfirmation:
    """Applicant confirmation is best-effort."""

    @pytest.mark.asyncio()
    async def test_failure_is_not_raised(self, mock_email_sender: MagicMock) -> None:
        mock_email_sender.send_contact_confirmation.return_value = False

        await ContactService(mock_email_sender).send_confirmation(
            name="Ada", email="ada@example.com"
        )

        mock_email_sender.send_contact_confirmation.assert_awaited_once_with(
            name="Ada", email="ada@example.com"
        )
