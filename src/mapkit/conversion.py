"""Read-only views of a mapping as sequences."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import EmptyContainerError
from .types import Pair


def to_pair_sequence(mapping: Mapping[Any, Any]) -> list[Pair]:
    """Return one :class:`Pair` per entry in the mapping's iteration order."""

    return [Pair(key, value) for key, value in mapping.items()]


def first_key(mapping: Mapping[Any, Any]) -> Any:
    """Return the first key in iteration order.

    Which key that is depends on the container: insertion order for ``dict``,
    arbitrary for other mapping types.
    """

    for key in mapping:
        return key
    raise EmptyContainerError("first_key")


def keys_of(mapping: Mapping[Any, Any]) -> list[Any]:
    return list(mapping)


__all__ = ["first_key", "keys_of", "to_pair_sequence"]
