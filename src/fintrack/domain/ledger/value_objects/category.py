"""Category name normalization."""

from fintrack.domain.shared.exceptions import ErrorCode, ValidationError

MAX_CATEGORY_LENGTH = 100


def to_category(value: str) -> str:
    category = (value or "").strip()
    if not category:
        msg = "Category is required"
        raise ValidationError(msg, code=ErrorCode.INVALID_CATEGORY)
    if len(category) > MAX_CATEGORY_LENGTH:
        msg = f"Category cannot exceed {MAX_CATEGORY_LENGTH} characters"
        raise ValidationError(msg, code=ErrorCode.INVALID_CATEGORY)
    return category
