"""Greeting generation."""


class GreetService:
    """Builds the greeting returned by ``POST /api/greet``.

    Must only be called with a name that already passed validation.
    """

    def greet(self, name: str) -> str:
        return f"Hello {name}!"


greet_service = GreetService()


def get_greet_service() -> GreetService:
    """FastAPI dependency returning the shared greeter."""
    return greet_service
