"""Common data types used across the mapkit package."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, NamedTuple, Protocol, TypeVar

T = TypeVar("T")

RandomFn = Callable[[], float]
"""Zero-argument callable returning a float in ``[0, 1)``, e.g. ``random.random``."""


class MergeTarget(str, Enum):
    """What the combine operation is applied to for keys shared by both mappings."""

    KEYS = "keys"
    VALUES = "values"
    KEYS_AND_VALUES = "keys_and_values"

    @classmethod
    def _missing_(cls, value: object) -> "MergeTarget | None":
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class UniqueKeyStrategy(str, Enum):
    """Supported ways of deriving an unused key from a taken one."""

    INTEGER_SUFFIX = "integer_suffix"

    @classmethod
    def _missing_(cls, value: object) -> "UniqueKeyStrategy | None":
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            if normalized in {"integer_suffix", "integer_concatenation"}:
                return cls.INTEGER_SUFFIX
        return None


class Pair(NamedTuple):
    """A key-value pair extracted from a mapping."""

    key: Any
    value: Any


class Combiner(Protocol[T]):
    """Binary operation used to combine two keys or two values."""

    def __call__(self, left: T, right: T) -> T:  # pragma: no cover - protocol definition
        ...


__all__ = [
    "Combiner",
    "MergeTarget",
    "Pair",
    "RandomFn",
    "UniqueKeyStrategy",
]
