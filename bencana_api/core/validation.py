"""
Field rules for request models and the route class that reports them.

Rules are used from pydantic ``field_validator``s and raise
``PydanticCustomError`` so the message reaches the client unchanged.
``ValidationRoute`` turns a failed request into ``ValidationFailure``
with every violation as ``{field, message}``, in field order, before the
endpoint (and so the database) is reached.
"""

from typing import Any, Callable, Collection, Optional

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from pydantic_core import PydanticCustomError

from bencana_api.core.exceptions import ValidationFailure, violations

UNPROCESSABLE = 422


def required(value: Any, message: str) -> Any:
    """Reject absent, null and blank values."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", message)
    return value


def one_of(value: Any, allowed: Collection[str], message: str) -> Any:
    if not isinstance(value, str) or value not in allowed:
        raise PydanticCustomError("one_of", message)
    return value


def parse_integer(value: Any) -> Optional[int]:
    """Base-10 integer from an int or a numeric string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in "+-" else text
        if digits.isdigit() and digits.isascii():
            return int(text)
    return None


def is_integer(value: Any, message: str) -> int:
    parsed = parse_integer(value)
    if parsed is None:
        raise PydanticCustomError("is_integer", message)
    return parsed


def validation_failure(status_code: int = UNPROCESSABLE, message: str = "Validation failed"):
    """Set the status and message an endpoint answers invalid input with."""
    def decorator(endpoint: Callable) -> Callable:
        endpoint.validation_failure = (status_code, message)
        return endpoint
    return decorator


class ValidationRoute(APIRoute):
    """APIRoute that reports request validation errors as ValidationFailure."""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()
        status_code, message = getattr(
            self.endpoint, "validation_failure", (UNPROCESSABLE, "Validation failed")
        )

        async def route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError as exc:
                raise ValidationFailure(
                    violations(exc.errors()), message=message, status_code=status_code
                ) from exc

        return route_handler
