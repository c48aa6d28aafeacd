"""Pydantic models for request/response validation.

This module contains data models used for:
- Greet request validation
- Greet response serialization
- The error tree returned for rejected payloads
"""

from app.models.errors import GreetValidationError
from app.models.greeting import GreetRequest, GreetResponse

__all__ = ["GreetRequest", "GreetResponse", "GreetValidationError"]
