"""Validation error codes and the text shown for them."""

REQUIRED = "required"
TYPE_MISMATCH = "typeMismatch"
DUPLICATE = "duplicate"
NOT_FOUND = "notFound"
TELEPHONE_INVALID = "telephone.invalid"

MESSAGES = {
    REQUIRED: "is required",
    TYPE_MISMATCH: "invalid value",
    DUPLICATE: "is already in use",
    NOT_FOUND: "has not been found",
    TELEPHONE_INVALID: "Telephone must be a 10-digit number",
}


def message_for(code: str) -> str:
    return MESSAGES.get(code, code)
