"""Transport-level errors and their fixed response bodies."""

BODY_MUST_BE_JSON = {"_errors": ["Invalid media type. Expected JSON body."]}
ROUTE_NOT_FOUND = {"_errors": ["Route not found."]}


class InvalidJSONBodyError(Exception):
    """Request body could not be decoded as JSON."""
