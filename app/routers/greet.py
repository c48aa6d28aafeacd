"""Greet endpoint."""

import logging

from fastapi import APIRouter, Depends, Request

from app.errors import BODY_MUST_BE_JSON, InvalidJSONBodyError
from app.models.greeting import GreetResponse
from app.responses import EscapedJSONResponse
from app.services.greeter import GreetService, get_greet_service
from app.utils.validation import validate

logger = logging.getLogger("greet.routers.greet")

router = APIRouter(prefix="/api", tags=["greet"])

_REJECTED_RESPONSE = {
    "description": "Payload rejected; the body mirrors the payload shape",
    "content": {
        "application/json": {
            "examples": {
                "not_an_object": {
                    "summary": "Body is not a JSON object",
                    "value": {"_errors": ["Must be a JSON object."]},
                },
                "name_missing": {
                    "summary": "Name is missing",
                    "value": {"_errors": [], "name": {"_errors": ["Is required."]}},
                },
                "name_not_a_string": {
                    "summary": "Name is not a string",
                    "value": {"_errors": [], "name": {"_errors": ["Must be a string."]}},
                },
                "name_empty": {
                    "summary": "Name is empty",
                    "value": {
                        "_errors": [],
                        "name": {"_errors": ["Must be at least 1 character long."]},
                    },
                },
                "body_not_json": {
                    "summary": "Body is not decodable JSON",
                    "value": BODY_MUST_BE_JSON,
                },
            }
        }
    },
}


@router.post(
    "/greet",
    response_model=GreetResponse,
    responses={400: _REJECTED_RESPONSE},
    summary="Greet",
    description="Validates a JSON body with a non-empty `name` and greets it",
)
async def greet(
    request: Request,
    greeter: GreetService = Depends(get_greet_service),
):
    """Greet the ``name`` sent in the request body.

    Returns 400 with the ``_errors`` tree when the payload is rejected.
    """
    try:
        payload = await request.json()
    except (ValueError, RecursionError) as exc:
        raise InvalidJSONBodyError(type(exc).__name__) from exc

    result = validate(payload)
    if not result.success:
        logger.info(
            "Rejected greet payload: %s",
            "shape" if result.error.is_shape_error else "field",
        )
        return EscapedJSONResponse(status_code=400, content=result.error.format())

    message = greeter.greet(result.request.name)
    logger.debug("Greeted %r", result.request.name)
    return EscapedJSONResponse(content={"message": message})
