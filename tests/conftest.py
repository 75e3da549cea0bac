"""Shared test fixtures for the Dopamine ROI service.

Provides answer factories, test settings and mock collaborators for the
service and API tests. No database or network access is required.
"""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from dopamine_roi.core.questions import ENERGY_VAMPIRE_TAGS, FLOW_ACTIVITY_TAGS
from dopamine_roi.core.scoring import AssessmentAnswers
from dopamine_roi.main import create_app
from dopamine_roi.settings import Settings


def make_answers(**overrides: Any) -> AssessmentAnswers:
    """Build AssessmentAnswers from a middle-of-the-road baseline.

    Args:
        **overrides: Field values replacing the baseline.

    Returns:
        AssessmentAnswers instance.
    """
    values: dict[str, Any] = {
        "revenue_range": "10k-50k",
        "time_split": 50,
        "energy_vampires": ("bookkeeping", "email", "admin"),
        "flow_activities": ("strategy", "creating", "selling"),
        "chaos_level": 5,
        "delegation_status": "some-help",
        "biggest_struggle": "overwhelm",
        "email": "founder@example.com",
    }
    values.update(overrides)
    return AssessmentAnswers(**values)


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------


@pytest.fixture()
def cash_engine_answers() -> AssessmentAnswers:
    """Answers that score 93 (Cash Engine)."""
    return make_answers(
        revenue_range="10k-50k",
        time_split=80,
        flow_activities=FLOW_ACTIVITY_TAGS,
        energy_vampires=(),
        chaos_level=2,
        delegation_status="delegating-well",
    )


@pytest.fixture()
def profitable_chaos_answers() -> AssessmentAnswers:
    """Answers that score 3 (Profitable Chaos)."""
    return make_answers(
        revenue_range="under-10k",
        time_split=0,
        flow_activities=(),
        energy_vampires=ENERGY_VAMPIRE_TAGS,
        chaos_level=10,
        delegation_status="solo",
    )


@pytest.fixture()
def answers_payload() -> dict[str, Any]:
    """A complete camelCase answers object as the front end posts it."""
    return {
        "revenueRange": "10k-50k",
        "timeSplit": 80,
        "energyVampires": [],
        "flowActivities": list(FLOW_ACTIVITY_TAGS),
        "chaosLevel": 2,
        "delegationStatus": "delegating-well",
        "biggestStruggle": "direction",
    }


# ---------------------------------------------------------------------------
# Settings and collaborators
# ---------------------------------------------------------------------------


@pytest.fixture()
def settings() -> Settings:
    """Settings with every integration configured and persistence off."""
    return Settings(
        database_url="",
        resend_api_key="re_test_key",
        resend_api_url="https://resend.test/emails",
        email_from="ADHD Founder <hello@adhd-founder.test>",
        confirmation_email_from="Jan <hello@adhd-founder.test>",
        contact_inbox="inbox@adhd-founder.test",
        results_base_url="https://adhd-founder.test/results",
        calculator_url="https://adhd-founder.test/calculator",
        crm_api_key="ck_test_key",
        crm_api_url="https://crm.test/v3",
        crm_category_tag_ids={
            "cash-engine": "101",
            "delegate-zone": "102",
            "kill-zone": "103",
            "profitable-chaos": "104",
        },
    )


@pytest.fixture()
def mock_assessment_repo() -> AsyncMock:
    """Mock IAssessmentRepository."""
    repo = AsyncMock()
    repo.referral_code_exists.return_value = True
    return repo


@pytest.fixture()
def mock_referral_repo() -> AsyncMock:
    """Mock IReferralClickRepository."""
    repo = AsyncMock()
    repo.count_clicks.return_value = 0
    repo.count_conversions.return_value = 0
    return repo


@pytest.fixture()
def mock_event_repo() -> AsyncMock:
    """Mock IEventRepository."""
    return AsyncMock()


@pytest.fixture()
def mock_email_sender() -> MagicMock:
    """Mock IEmailSender that reports every message as delivered."""
    sender = MagicMock()
    sender.configured = True
    sender.send_results_email = AsyncMock(return_value=True)
    sender.send_contact_notification = AsyncMock(return_value=True)
    sender.send_contact_confirmation = AsyncMock(return_value=True)
    return sender


@pytest.fixture()
def mock_crm_subscriber() -> AsyncMock:
    """Mock ICrmSubscriber."""
    subscriber = AsyncMock()
    subscriber.subscribe.return_value = True
    return subscriber


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    """A fresh application instance per test."""
    return create_app(settings)


@pytest_asyncio.fixture()
async def api_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the test application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as client:
        yield client

    app.dependency_overrides.clear()
