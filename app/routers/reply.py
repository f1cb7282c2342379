import httpx
from fastapi import APIRouter, Depends, HTTPException

from app.models.reply import ReplyRequest, ReplyResponse
from app.services import validator
from app.services.reply_generator import ReplyGenerator, ReplyGeneratorError, get_reply_generator

router = APIRouter(prefix="/reply", tags=["reply"])


@router.post("", response_model=ReplyResponse)
async def generate_reply(
    request: ReplyRequest,
    generator: ReplyGenerator = Depends(get_reply_generator),
):
    """
    Draft a reply to a customer review.

    1. Validate business info and review; on failure return every message
       and skip the upstream call.
    2. Call the completion endpoint once and return the trimmed reply.
    """
    business = validator.validate_business_info(request)
    review = validator.validate_review(request.review)

    errors = list(business.errors)
    if review.error:
        errors.append(review.error)
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})

    try:
        reply = await generator.generate_reply(request)
    except ReplyGeneratorError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except httpx.HTTPError:
        raise HTTPException(status_code=503, detail="AI service unreachable")

    return ReplyResponse(reply=reply, tone=request.tone, word_count=request.word_count)
