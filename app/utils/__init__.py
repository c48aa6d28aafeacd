"""Utility functions and helpers.

This module contains utility classes and functions for:
- Greet payload validation
"""

from app.utils.validation import ValidationResult, validate

__all__ = ["ValidationResult", "validate"]
