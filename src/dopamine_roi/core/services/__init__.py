"""Use-case services for the Dopamine ROI assessment service."""

from dopamine_roi.core.services.assessment_service import (
    AssessmentService,
    SubmissionResult,
    generate_referral_code,
)
from dopamine_roi.core.services.contact_service import (
    ContactDeliveryError,
    ContactService,
    EmailServiceNotConfiguredError,
)
from dopamine_roi.core.services.event_service import (
    ALLOWED_EVENTS,
    EventService,
    InvalidEventError,
)
from dopamine_roi.core.services.referral_service import ReferralService, ReferralStats

__all__ = [
    "ALLOWED_EVENTS",
    "AssessmentService",
    "ContactDeliveryError",
    "ContactService",
    "EmailServiceNotConfiguredError",
    "EventService",
    "InvalidEventError",
    "ReferralService",
    "ReferralStats",
    "SubmissionResult",
    "generate_referral_code",
]
