"""Mailing-list subscription adapter for nurture sequences.

Implements the ICrmSubscriber interface against a ConvertKit-style v3 API:
each category id maps to a list tag (``crm_category_tag_ids``), and the
respondent is subscribed to that tag with their quiz results as custom
fields. Missing credentials or an unmapped category skip the call.
"""

from typing import Any

import httpx

from dopamine_roi.core.categories import Category
from dopamine_roi.observability import get_logger
from dopamine_roi.settings import Settings

logger = get_logger(__name__)


class TagSubscriber:
    """Subscribes respondents to the list tag for their category."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        """Initialise with a shared HTTP client and service settings.

        Args:
            client: Shared async HTTP client (timeouts configured by the app).
            settings: Service settings with CRM credentials and tag mapping.
        """
        self._client = client
        self._settings = settings

    async def subscribe(
        self,
        email: str,
        category: Category,
        fields: dict[str, Any],
    ) -> bool:
        """Tag-subscribe the respondent.

        Args:
            email: Respondent email.
            category: Category whose tag the respondent joins.
            fields: Custom fields stored on the subscriber.

        Returns:
            True if the provider accepted the subscription.
        """
        if not self._settings.crm_api_key:
            logger.warning("CRM API key not configured - skipping subscription")
            return False

        tag_id = self._settings.crm_category_tag_ids.get(category.id)
        if not tag_id:
            logger.warning("No CRM tag mapped for category", category=category.id)
            return False

        url = f"{self._settings.crm_api_url.rstrip('/')}/tags/{tag_id}/subscribe"
        try:
            response = await self._client.post(
                url,
                json={
                    "api_key": self._settings.crm_api_key,
                    "email": email,
                    "tags": [tag_id],
                    "fields": {key: str(value) for key, value in fields.items()},
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "CRM rejected subscription",
                category=category.id,
                status_code=exc.response.status_code,
                body=exc.response.text,
            )
            return False
        except httpx.HTTPError as exc:
            logger.error("CRM subscription failed", category=category.id, error=repr(exc))
            return False

        logger.info("CRM subscription created", category=category.id, tag_id=tag_id)
        return True
