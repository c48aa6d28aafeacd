"""Greet endpoint schemas."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainValidator
from pydantic_core import PydanticCustomError


def _non_empty_string(value: Any) -> str:
    # Any Python str is accepted as-is, including lone surrogates that
    # pydantic's own str validator refuses.
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Input should be a valid string")
    if len(value) < 1:
        raise PydanticCustomError(
            "string_too_short", "String should have at least 1 character"
        )
    return value


NonEmptyString = Annotated[str, PlainValidator(_non_empty_string)]


class GreetRequest(BaseModel):
    """Validated body of ``POST /api/greet``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: NonEmptyString = Field(..., description="Name of the person to greet")


class GreetResponse(BaseModel):
    """Greet response schema."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"message": "Hello Agata!"}]}
    )

    message: str = Field(..., description="The greeting message")
