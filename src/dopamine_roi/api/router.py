"""Aggregate router for the Dopamine ROI API.

Mounted by the application under ``/api``:

    POST /submit-assessment
    POST /referral/{code}      GET /referral/{code}
    POST /track-event
    POST /contact
    GET  /questions            GET /categories      GET /categories/{id}
"""

from fastapi import APIRouter

from dopamine_roi.api.routes import assessment, catalog, contact, events, referral

router = APIRouter()

router.include_router(assessment.router)
router.include_router(referral.router)
router.include_router(events.router)
router.include_router(contact.router)
router.include_router(catalog.router)
