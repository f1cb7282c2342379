from collections.abc import Mapping
from typing import Any

from app.models.reply import BusinessInfo, BusinessInfoValidation, ReviewValidation

BRAND_NAME_LIMITS = (2, 30)
CATEGORY_LIMITS = (5, 50)
FEATURES_LIMITS = (10, 100)
REVIEW_MAX_LENGTH = 800

# (attribute, camelCase key, label, limits)
_BUSINESS_FIELDS = (
    ("brand_name", "brandName", "Brand name", BRAND_NAME_LIMITS),
    ("category", "category", "Category", CATEGORY_LIMITS),
    ("features", "features", "Features", FEATURES_LIMITS),
)


def _field_value(info: BusinessInfo | Mapping[str, Any] | None, attr: str, key: str) -> str:
    if info is None:
        return ""
    if isinstance(info, Mapping):
        value = info.get(key, info.get(attr))
    else:
        value = getattr(info, attr, None)
    return value if isinstance(value, str) else ""


def validate_business_info(info: BusinessInfo | Mapping[str, Any] | None) -> BusinessInfoValidation:
    """
    Check brand name, category and features against their length limits.

    Args:
        info: A BusinessInfo or a raw form mapping (camelCase or snake_case keys).

    Returns:
        BusinessInfoValidation with at most one message per field, in field order.
    """
    errors: list[str] = []

    for attr, key, label, (minimum, maximum) in _BUSINESS_FIELDS:
        length = len(_field_value(info, attr, key).strip())
        if length < minimum:
            errors.append(f"{label} must be at least {minimum} characters")
        elif length > maximum:
            errors.append(f"{label} must not exceed {maximum} characters")

    return BusinessInfoValidation(valid=not errors, errors=errors)


def validate_review(review: str | None) -> ReviewValidation:
    """Emptiness wins over length; only the first failing rule is reported."""
    if not review or not review.strip():
        return ReviewValidation(valid=False, error="Please enter a valid review")
    if len(review) > REVIEW_MAX_LENGTH:
        return ReviewValidation(
            valid=False,
            error=f"Please shorten the review to {REVIEW_MAX_LENGTH} characters",
        )
    return ReviewValidation(valid=True, error=None)
