"""Exception hierarchy for mapkit."""

from __future__ import annotations


class MapkitError(Exception):
    """Base class for all errors raised by mapkit."""


class EmptyContainerError(MapkitError, LookupError):
    """Raised when an operation needs at least one entry but the mapping is empty."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires a non-empty mapping")
        self.operation = operation


class UnsupportedOperationError(MapkitError, TypeError):
    """Raised when keys or values lack a capability an operation requires."""


__all__ = ["EmptyContainerError", "MapkitError", "UnsupportedOperationError"]
