"""Validation of raw greet payloads into a ``GreetRequest`` or an error tree.

The request shape is declared once on ``GreetRequest``; this module runs it in
strict mode (no coercion of numbers or booleans into strings) and maps the
pydantic error types onto the fixed messages clients rely on. Error types
outside that map keep pydantic's own message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.models.errors import GreetValidationError
from app.models.greeting import GreetRequest

__all__ = [
    "MUST_BE_A_JSON_OBJECT",
    "IS_REQUIRED",
    "MUST_BE_A_STRING",
    "MUST_NOT_BE_EMPTY",
    "ValidationResult",
    "validate",
]

MUST_BE_A_JSON_OBJECT = "Must be a JSON object."
IS_REQUIRED = "Is required."
MUST_BE_A_STRING = "Must be a string."
MUST_NOT_BE_EMPTY = "Must be at least 1 character long."

_SHAPE_ERROR_TYPES = frozenset({"model_type", "model_attributes_type", "dict_type"})

_FIELD_MESSAGES: dict[str, str] = {
    "missing": IS_REQUIRED,
    "string_type": MUST_BE_A_STRING,
    "string_too_short": MUST_NOT_BE_EMPTY,
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ``validate``: exactly one of ``request`` and ``error`` is set."""

    request: GreetRequest | None = None
    error: GreetValidationError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def validate(payload: Any) -> ValidationResult:
    """Validate a decoded JSON value against the greet request shape.

    Never raises for bad input: every rejection is described by the returned
    ``GreetValidationError``. A payload that is not an object short-circuits
    the field checks.
    """
    try:
        request = GreetRequest.model_validate(payload, strict=True)
    except PydanticValidationError as exc:
        return ValidationResult(error=_to_error_tree(exc))
    return ValidationResult(request=request)


def _to_error_tree(exc: PydanticValidationError) -> GreetValidationError:
    name_messages: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        if not loc or error["type"] in _SHAPE_ERROR_TYPES:
            return GreetValidationError.for_shape(MUST_BE_A_JSON_OBJECT)
        if loc[0] == "name":
            name_messages.append(_FIELD_MESSAGES.get(error["type"], error["msg"]))
    return GreetValidationError(root_errors=(), name_errors=tuple(name_messages[:1]))
