"""Greet Service Application Package.

This package contains the core application components:
- models: Pydantic models for the greet request, response and error tree
- routers: API route handlers
- services: Greeting generation
- utils: Payload validation
"""

__version__ = "0.1.0"
