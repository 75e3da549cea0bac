"""Read-only question catalog and result categories for the front end."""

from fastapi import APIRouter, HTTPException, Path, status

from dopamine_roi.api.schemas import (
    CategorySchema,
    ErrorResponse,
    QuestionCatalogResponse,
    QuestionSchema,
)
from dopamine_roi.core.categories import CATEGORIES, get_category_by_id
from dopamine_roi.core.questions import EMAIL_STEP, QUESTIONS

router = APIRouter(tags=["Catalog"])


@router.get(
    "/questions",
    response_model=QuestionCatalogResponse,
    summary="The quiz questions in display order",
)
async def list_questions() -> QuestionCatalogResponse:
    """Return the scored questions followed by the email capture step."""
    return QuestionCatalogResponse(
        questions=[QuestionSchema.from_question(question) for question in QUESTIONS],
        email_step=QuestionSchema.from_question(EMAIL_STEP),
    )


@router.get(
    "/categories",
    response_model=list[CategorySchema],
    summary="All result categories, highest score band first",
)
async def list_categories() -> list[CategorySchema]:
    """Return every category with its score range and copy."""
    return [CategorySchema.from_category(category) for category in CATEGORIES]


@router.get(
    "/categories/{category_id}",
    response_model=CategorySchema,
    summary="One result category",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_category(
    category_id: str = Path(..., description="cash-engine | delegate-zone | kill-zone | profitable-chaos"),
) -> CategorySchema:
    """Return a single category by id."""
    category = get_category_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return CategorySchema.from_category(category)
