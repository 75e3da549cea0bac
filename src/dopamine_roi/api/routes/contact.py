"""Founder Circle contact form."""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from dopamine_roi.api.dependencies import get_contact_service
from dopamine_roi.api.errors import internal_error_response
from dopamine_roi.api.schemas import ContactRequest, ErrorResponse, SuccessResponse
from dopamine_roi.core.services import (
    ContactDeliveryError,
    ContactService,
    EmailServiceNotConfiguredError,
)
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Contact"])


@router.post(
    "/contact",
    response_model=SuccessResponse,
    summary="Forward a Founder Circle application to the inbox",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def submit_contact(
    body: ContactRequest,
    background_tasks: BackgroundTasks,
    service: ContactService = Depends(get_contact_service),
) -> SuccessResponse | JSONResponse:
    """Email the application to the inbox, then confirm to the applicant.

    The inbox notification must succeed for the request to succeed. The
    confirmation is sent in the background after the response.
    """
    try:
        await service.submit_contact(name=body.name, email=body.email, message=body.message)
    except (EmailServiceNotConfiguredError, ContactDeliveryError) as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    except Exception as exc:
        logger.exception("Contact form failed", error=repr(exc))
        return internal_error_response(exc)

    background_tasks.add_task(service.send_confirmation, body.name, body.email)
    return SuccessResponse()
