"""FastAPI router for Dopamine ROI quiz submissions.

Routes are thin: they validate the body, delegate to AssessmentService and
serialise the response. The results email and CRM subscription run as
background tasks after the response is sent.

Auth: None. This is an anonymous lead-capture flow.
"""

from fastapi import APIRouter, BackgroundTasks, Depends, status
from fastapi.responses import JSONResponse

from dopamine_roi.api.dependencies import get_assessment_service
from dopamine_roi.api.errors import internal_error_response
from dopamine_roi.api.schemas import (
    ErrorResponse,
    SubmitAssessmentRequest,
    SubmitAssessmentResponse,
)
from dopamine_roi.core.services import AssessmentService
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Assessment"])


@router.post(
    "/submit-assessment",
    response_model=SubmitAssessmentResponse,
    status_code=status.HTTP_200_OK,
    summary="Score a completed quiz and issue a referral code",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def submit_assessment(
    body: SubmitAssessmentRequest,
    background_tasks: BackgroundTasks,
    service: AssessmentService = Depends(get_assessment_service),
) -> SubmitAssessmentResponse | JSONResponse:
    """Score the respondent's answers and return their category.

    Storage problems do not fail the request; the score is still returned.
    """
    try:
        answers = body.answers.to_answers(email=body.email)
        result = await service.submit_assessment(
            email=body.email,
            answers=answers,
            raw_answers=body.answers.model_dump(by_alias=True, exclude_none=True),
            referred_by=body.referred_by or None,
        )
    except Exception as exc:
        logger.exception("Assessment submission failed", error=repr(exc))
        return internal_error_response(exc)

    background_tasks.add_task(service.deliver_follow_ups, result, answers)

    return SubmitAssessmentResponse(
        score=result.score,
        category=result.category.id,
        referral_code=result.referral_code,
    )
