from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Tone(str, Enum):
    LIVELY = "lively"
    PROFESSIONAL = "professional"
    HUMOROUS = "humorous"


class WordCount(IntEnum):
    SHORT = 100
    MEDIUM = 200
    LONG = 300
    EXTRA_LONG = 400


class BusinessInfo(BaseModel):
    # Accepts both brandName (form field) and brand_name
    model_config = ConfigDict(populate_by_name=True)

    brand_name: str = Field(default="", alias="brandName")
    category: str = ""
    features: str = ""


class ReviewPayload(BaseModel):
    review: str = ""


class ReplyRequest(BusinessInfo):
    review: str = ""
    tone: Tone = Tone.PROFESSIONAL
    word_count: WordCount = Field(default=WordCount.MEDIUM, alias="wordCount")


class ReplyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    tone: Tone
    word_count: WordCount = Field(alias="wordCount")


class BusinessInfoValidation(BaseModel):
    valid: bool
    errors: list[str]


class ReviewValidation(BaseModel):
    valid: bool
    error: str | None = None
