"""
Input validation helpers shared by use case commands.

Commands are pydantic models; a failed command is reported as a
VALIDATION_ERROR whose details map each field to its messages.
"""

from typing import Any, Dict, List

from email_validator import EmailNotValidError, validate_email
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from agencyhub.domain.base import normalize_email

PASSWORD_MIN_LENGTH = 8
# bcrypt only accepts up to 72 bytes of input
PASSWORD_MAX_BYTES = 72


def normalized_email(value: Any) -> Any:
    """Trim and lowercase strings, leave anything else for type validation"""
    if not isinstance(value, str):
        return value
    return normalize_email(value)


def valid_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_invalid", "Email is invalid")
    return value


def required(value: str, message: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("required", message)
    return value


def password_within_limits(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            "password_too_short",
            "Password must be at least {min_length} characters",
            {"min_length": PASSWORD_MIN_LENGTH},
        )
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise PydanticCustomError(
            "password_too_long",
            "Password must be at most {max_bytes} bytes",
            {"max_bytes": PASSWORD_MAX_BYTES},
        )
    return value


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Flatten a ValidationError into {field: [messages]}"""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors
