from fastapi import APIRouter

from app.models.reply import BusinessInfo, BusinessInfoValidation, ReviewPayload, ReviewValidation
from app.services import validator

router = APIRouter(prefix="/validate", tags=["validation"])


@router.post("/business-info", response_model=BusinessInfoValidation)
async def validate_business_info(info: BusinessInfo):
    """Check brand name, category and features without generating anything."""
    return validator.validate_business_info(info)


@router.post("/review", response_model=ReviewValidation)
async def validate_review(payload: ReviewPayload):
    return validator.validate_review(payload.review)
