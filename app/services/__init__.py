"""Business logic services.

This module contains service classes for:
- Greeting generation
"""

from app.services.greeter import GreetService, get_greet_service, greet_service

__all__ = ["GreetService", "get_greet_service", "greet_service"]
