"""Utility helpers for container construction and randomness."""

from __future__ import annotations

import random
from collections import defaultdict
from collections.abc import Mapping, MutableMapping
from typing import Any

from .types import RandomFn


def empty_like(mapping: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Return an empty container of the same type as ``mapping`` when possible.

    A ``defaultdict`` keeps its ``default_factory``. Falls back to ``dict`` for
    read-only mappings and types that cannot be constructed without arguments.
    """

    if isinstance(mapping, defaultdict):
        return type(mapping)(mapping.default_factory)
    if isinstance(mapping, MutableMapping):
        try:
            return type(mapping)()
        except TypeError:
            pass
    return {}


def random_index(size: int, *, random_fn: RandomFn = random.random) -> int:
    """Draw an index in ``range(size)`` from a uniform float source."""

    if size <= 0:
        raise ValueError("size must be positive")
    index = int(random_fn() * size)
    return min(max(index, 0), size - 1)


__all__ = ["empty_like", "random_index"]
