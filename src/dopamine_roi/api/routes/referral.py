"""Referral link click tracking and statistics."""

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse

from dopamine_roi.api.dependencies import get_referral_service
from dopamine_roi.api.errors import internal_error_response
from dopamine_roi.api.schemas import ErrorResponse, ReferralStatsResponse, SuccessResponse
from dopamine_roi.core.services import ReferralService
from dopamine_roi.observability import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/referral", tags=["Referral"])


@router.post(
    "/{code}",
    response_model=SuccessResponse,
    summary="Record a click on a referral link",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def track_referral_click(
    code: str = Path(..., min_length=1, description="Referral code from the share link"),
    service: ReferralService = Depends(get_referral_service),
) -> SuccessResponse | JSONResponse:
    """Record a click. Unknown and malformed codes get the same response as known ones."""
    try:
        await service.track_click(code)
    except Exception as exc:
        logger.exception("Referral click tracking failed", referral_code=code)
        return internal_error_response(exc)
    return SuccessResponse()


@router.get(
    "/{code}",
    response_model=ReferralStatsResponse,
    summary="Click and conversion counts for a referral code",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def get_referral_stats(
    code: str = Path(..., min_length=1, description="Referral code from the share link"),
    service: ReferralService = Depends(get_referral_service),
) -> ReferralStatsResponse | JSONResponse:
    """Return clicks, conversions and the conversion rate as a percentage string."""
    try:
        stats = await service.get_stats(code)
    except Exception as exc:
        logger.exception("Referral stats lookup failed", referral_code=code)
        return internal_error_response(exc)

    return ReferralStatsResponse(
        clicks=stats.clicks,
        conversions=stats.conversions,
        conversion_rate=stats.conversion_rate,
    )
