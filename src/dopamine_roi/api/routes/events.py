"""Front-end funnel analytics.

Tracking must never break the page that fires it: once the event name is
valid, every failure is logged and answered with success.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from dopamine_roi.api.dependencies import get_event_service
from dopamine_roi.api.schemas import ErrorResponse, SuccessResponse, TrackEventRequest
from dopamine_roi.core.services import EventService, InvalidEventError
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Analytics"])


@router.post(
    "/track-event",
    response_model=SuccessResponse,
    summary="Record a whitelisted analytics event",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def track_event(
    request: Request,
    service: EventService = Depends(get_event_service),
) -> SuccessResponse:
    """Validate the event name and store the event.

    The body is parsed here rather than by FastAPI so that a malformed
    payload degrades to a logged no-op instead of an error response.
    """
    try:
        payload: Any = await request.json()
    except ValueError:
        logger.warning("Analytics event body is not valid JSON")
        return SuccessResponse()

    if not isinstance(payload, dict):
        logger.warning("Analytics event body is not an object")
        return SuccessResponse()

    try:
        body = TrackEventRequest.model_validate(payload)
    except ValidationError as exc:
        invalid_fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        if "event" in invalid_fields:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid event type",
            ) from exc
        # Optional fields only: keep the event, drop what failed
        logger.warning("Analytics event fields dropped", fields=sorted(invalid_fields))
        body = TrackEventRequest.model_validate(
            {key: value for key, value in payload.items() if key not in invalid_fields}
        )

    try:
        await service.track_event(
            event=body.event,
            referral_code=body.referral_code,
            metadata=body.metadata,
        )
    except InvalidEventError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Event tracking failed", event=body.event, error=repr(exc))

    return SuccessResponse()
