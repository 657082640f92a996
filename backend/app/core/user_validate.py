"""
Field checks for user payloads and path ids.

Both create and update run the same predicate; only the first failing rule
is reported.
"""

import re

from app.core.errors import MalformedRequestError, UserValidationError
from app.models import UserBase

_ID_RE = re.compile(r"[+-]?[0-9]+")
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def validate_user(user: UserBase) -> None:
    """Raise UserValidationError for the first rule the payload breaks."""
    if not user.name.strip():
        raise UserValidationError("name is required")
    if not user.email.strip():
        raise UserValidationError("email is required")
    if "@" not in user.email:
        raise UserValidationError("email format is invalid")


def parse_user_id(raw: str) -> int:
    """
    Parse a path segment as a base-10 integer in the signed 64-bit range.

    Anything else (letters, decimals, whitespace, overflow) is malformed input.
    """
    if not _ID_RE.fullmatch(raw):
        raise MalformedRequestError("Invalid ID")
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        raise MalformedRequestError("Invalid ID")
    return value
