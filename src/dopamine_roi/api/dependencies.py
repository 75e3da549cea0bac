"""FastAPI dependency factories wiring services to their adapters.

Repositories are only built when a database session is available; with
persistence disabled the services receive ``None`` and skip their writes.
Tests replace the service factories through ``app.dependency_overrides``.
"""

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from dopamine_roi.adapters.crm_subscriber import TagSubscriber
from dopamine_roi.adapters.email_sender import ResendEmailSender
from dopamine_roi.adapters.repositories import (
    AssessmentRepository,
    EventRepository,
    ReferralClickRepository,
)
from dopamine_roi.core.services import (
    AssessmentService,
    ContactService,
    EventService,
    ReferralService,
)
from dopamine_roi.database import get_db_session
from dopamine_roi.settings import Settings, get_settings


def get_app_settings(request: Request) -> Settings:
    """Return the Settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the shared outbound HTTP client opened in the lifespan."""
    return request.app.state.http_client


def get_email_sender(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> ResendEmailSender:
    """Build the transactional email adapter."""
    return ResendEmailSender(client=client, settings=settings)


def get_crm_subscriber(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> TagSubscriber:
    """Build the CRM subscription adapter."""
    return TagSubscriber(client=client, settings=settings)


def get_assessment_service(
    session: AsyncSession | None = Depends(get_db_session),
    email_sender: ResendEmailSender = Depends(get_email_sender),
    crm_subscriber: TagSubscriber = Depends(get_crm_subscriber),
) -> AssessmentService:
    """Build AssessmentService with injected repository dependencies.

    Args:
        session: Async SQLAlchemy session, or None when persistence is off.
        email_sender: Results email adapter.
        crm_subscriber: CRM subscription adapter.

    Returns:
        Configured AssessmentService instance.
    """
    return AssessmentService(
        assessment_repository=AssessmentRepository(session) if session is not None else None,
        referral_repository=ReferralClickRepository(session) if session is not None else None,
        email_sender=email_sender,
        crm_subscriber=crm_subscriber,
    )


def get_referral_service(
    session: AsyncSession | None = Depends(get_db_session),
) -> ReferralService:
    """Build ReferralService for the current request."""
    if session is None:
        return ReferralService(assessment_repository=None, referral_repository=None)
    return ReferralService(
        assessment_repository=AssessmentRepository(session),
        referral_repository=ReferralClickRepository(session),
    )


def get_event_service(
    session: AsyncSession | None = Depends(get_db_session),
) -> EventService:
    """Build EventService for the current request."""
    return EventService(EventRepository(session) if session is not None else None)


def get_contact_service(
    email_sender: ResendEmailSender = Depends(get_email_sender),
) -> ContactService:
    """Build ContactService for the current request."""
    return ContactService(email_sender=email_sender)
