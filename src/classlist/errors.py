"""Error types for class resolution."""
from __future__ import annotations


class ClassListError(Exception):
    """Base error for all classlist errors."""


class ResolverDepthError(ClassListError):
    """Raised when a chain of class resolvers never reaches a string or map."""

    def __init__(self, property_key: str, depth: int) -> None:
        super().__init__(
            f"Class resolver chain for {property_key!r} exceeded {depth} steps"
        )
        self.property_key = property_key
        self.depth = depth
