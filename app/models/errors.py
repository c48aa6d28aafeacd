"""Error tree returned to clients when a greet payload is rejected."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["GreetValidationError"]


@dataclass(frozen=True)
class GreetValidationError:
    """Rejection of a greet payload, mirroring the payload's shape.

    ``root_errors`` holds messages about the payload as a whole. ``name_errors``
    holds messages about the ``name`` attribute and is ``None`` when the payload
    was not an object, in which case the ``name`` node is left out entirely.
    """

    root_errors: tuple[str, ...] = ()
    name_errors: tuple[str, ...] | None = None

    @classmethod
    def for_shape(cls, message: str) -> GreetValidationError:
        return cls(root_errors=(message,))

    @classmethod
    def for_name(cls, message: str) -> GreetValidationError:
        return cls(root_errors=(), name_errors=(message,))

    @property
    def is_shape_error(self) -> bool:
        return self.name_errors is None

    def format(self) -> dict[str, Any]:
        """Serialize to the ``_errors`` tree sent in the response body."""
        tree: dict[str, Any] = {"_errors": list(self.root_errors)}
        if self.name_errors is not None:
            tree["name"] = {"_errors": list(self.name_errors)}
        return tree
