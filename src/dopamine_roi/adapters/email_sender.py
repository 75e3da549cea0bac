"""Transactional email adapter backed by the Resend HTTP API.

Implements the IEmailSender interface. HTML bodies are rendered from the
Jinja2 templates in ``templates/email/`` with autoescaping on, so names and
messages typed into public forms cannot inject markup.

Provider failures are logged and reported as ``False``; nothing here raises
on an HTTP error.
"""

from typing import Any

import httpx
from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from dopamine_roi.core.categories import Category
from dopamine_roi.observability import get_logger
from dopamine_roi.settings import Settings

logger = get_logger(__name__)

_TEMPLATES = Environment(
    loader=PackageLoader("dopamine_roi", "templates"),
    autoescape=select_autoescape(["html"]),
)


def render_template(name: str, **context: Any) -> str:
    """Render one of the bundled email templates."""
    return _TEMPLATES.get_template(name).render(**context)


def _message_to_html(message: str) -> Markup:
    """Escape a plain-text message and keep its line breaks."""
    return Markup("<br>").join(escape(line) for line in message.splitlines())


class ResendEmailSender:
    """Sends results and contact emails through Resend."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        """Initialise with a shared HTTP client and service settings.

        Args:
            client: Shared async HTTP client (timeouts configured by the app).
            settings: Service settings with Resend credentials and addresses.
        """
        self._client = client
        self._settings = settings

    @property
    def configured(self) -> bool:
        """Whether a Resend API key is present."""
        return bool(self._settings.resend_api_key)

    async def send_results_email(
        self,
        email: str,
        score: int,
        category: Category,
        referral_code: str,
    ) -> bool:
        """Send the respondent their Dopamine ROI score and category.

        Args:
            email: Respondent email.
            score: Final score 0-100.
            category: Category the score falls into.
            referral_code: Referral code issued to the respondent.

        Returns:
            True if Resend accepted the message.
        """
        if not self.configured:
            logger.warning("Resend API key not configured - skipping results email")
            return False

        results_url = f"{self._settings.results_base_url}?code={referral_code}"
        html = render_template(
            "email/results.html",
            score=score,
            category=category,
            results_url=results_url,
            referral_code=referral_code,
        )
        return await self._send(
            {
                "from": self._settings.email_from,
                "to": [email],
                "subject": f"Your Dopamine ROI Score: {score} ({category.name})",
                "html": html,
                "tags": [
                    {"name": "type", "value": "dopamine-roi-results"},
                    {"name": "category", "value": category.id},
                ],
            },
            kind="results",
        )

    async def send_contact_notification(self, name: str, email: str, message: str) -> bool:
        """Forward a contact form submission to the site inbox.

        The applicant's address is set as ``reply_to``.

        Returns:
            True if Resend accepted the message.
        """
        if not self.configured:
            logger.warning("Resend API key not configured - skipping contact notification")
            return False

        html = render_template(
            "email/contact_notification.html",
            name=name,
            email=email,
            message_html=_message_to_html(message),
        )
        return await self._send(
            {
                "from": self._settings.email_from,
                "to": [self._settings.contact_inbox],
                "reply_to": email,
                "subject": f"🔔 Founder Circle Application: {name}",
                "html": html,
                "tags": [
                    {"name": "type", "value": "contact-form"},
                    {"name": "source", "value": "founder-circle"},
                ],
            },
            kind="contact_notification",
        )

    async def send_contact_confirmation(self, name: str, email: str) -> bool:
        """Acknowledge a contact form submission to the applicant.

        Returns:
            True if Resend accepted the message.
        """
        if not self.configured:
            logger.warning("Resend API key not configured - skipping contact confirmation")
            return False

        html = render_template(
            "email/contact_confirmation.html",
            name=name,
            calculator_url=self._settings.calculator_url,
        )
        return await self._send(
            {
                "from": self._settings.confirmation_email_from,
                "to": [email],
                "subject": "Got your application! 🎯",
                "html": html,
                "tags": [{"name": "type", "value": "contact-confirmation"}],
            },
            kind="contact_confirmation",
        )

    async def _send(self, payload: dict[str, Any], kind: str) -> bool:
        """POST one message to Resend.

        Args:
            payload: Resend email payload.
            kind: Short label for log context.

        Returns:
            True on a 2xx response, False on any HTTP or transport error.
        """
        try:
            response = await self._client.post(
                self._settings.resend_api_url,
                headers={"Authorization": f"Bearer {self._settings.resend_api_key}"},
                json=payload,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Resend rejected email",
                kind=kind,
                status_code=exc.response.status_code,
                body=exc.response.text,
            )
            return False
        except httpx.HTTPError as exc:
            logger.error("Email send failed", kind=kind, error=repr(exc))
            return False

        logger.info("Email sent", kind=kind)
        return True
