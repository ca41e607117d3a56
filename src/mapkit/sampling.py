"""Random key selection and extraction."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, MutableMapping
from itertools import islice
from typing import Any

from .errors import EmptyContainerError
from .types import Pair, RandomFn
from .utils import random_index

LOGGER = logging.getLogger(__name__)


def pick_random_key(mapping: Mapping[Any, Any], *, random_fn: RandomFn = random.random) -> Any:
    """Choose a key uniformly at random.

    The draw indexes into the mapping's iteration order, so a seeded
    ``random_fn`` only reproduces results for mappings iterated in the same
    order.
    """

    if not mapping:
        raise EmptyContainerError("pick_random_key")
    index = random_index(len(mapping), random_fn=random_fn)
    return next(islice(iter(mapping), index, None))


def pop_random_pair(
    mapping: MutableMapping[Any, Any], *, random_fn: RandomFn = random.random
) -> Pair:
    """Remove a random entry from ``mapping`` and return it.

    Mutates ``mapping``. An empty mapping raises :class:`EmptyContainerError`
    and is left untouched.
    """

    if not mapping:
        raise EmptyContainerError("pop_random_pair")
    key = pick_random_key(mapping, random_fn=random_fn)
    value = mapping.pop(key)
    LOGGER.debug("Popped key %r, %d entries remain", key, len(mapping))
    return Pair(key, value)


__all__ = ["pick_random_key", "pop_random_pair"]
