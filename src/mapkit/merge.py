"""Combine two mappings key by key."""

from __future__ import annotations

import logging
import operator
from collections.abc import Mapping, MutableMapping
from typing import Any

from .config import MergeOptions
from .errors import UnsupportedOperationError
from .types import Combiner, MergeTarget
from .utils import empty_like

LOGGER = logging.getLogger(__name__)


def merge_mappings(
    a: Mapping[Any, Any],
    b: Mapping[Any, Any],
    target: MergeTarget | str = MergeTarget.KEYS_AND_VALUES,
    omit_unshared: bool = False,
    *,
    combine: Combiner[Any] = operator.add,
    combine_keys: Combiner[Any] = operator.add,
) -> MutableMapping[Any, Any]:
    """Return a new mapping combining the entries of ``a`` and ``b``.

    For every key present in both mappings the entries are combined according
    to ``target``:

    * ``values`` keeps the key and stores ``combine(a[k], b[k])``.
    * ``keys_and_values`` stores ``combine(a[k], b[k])`` under
      ``combine_keys(k, k)``.
    * ``keys`` stores ``a[k]`` under ``combine_keys(k, k)``.

    Entries found in only one mapping are copied through unless
    ``omit_unshared`` is set. Entries from ``b`` never overwrite an entry that
    is already in the result.

    Combining a key with itself maps different matched keys to the same output
    key whenever their combinations are equal. Such collisions are resolved
    last-write-wins in the iteration order of ``a`` and logged as warnings.
    """

    options = MergeOptions(target=target, omit_unshared=omit_unshared)
    combine_key = options.target is not MergeTarget.VALUES
    combine_value = options.target is not MergeTarget.KEYS

    result = empty_like(a)
    for key, value in a.items():
        if key in b:
            out_key = _apply(combine_keys, key, key, "keys") if combine_key else key
            out_value = _apply(combine, value, b[key], "values") if combine_value else value
            if out_key in result:
                LOGGER.warning(
                    "Merged key %r from %r overwrites an existing entry", out_key, key
                )
            result[out_key] = out_value
        elif not options.omit_unshared:
            if key in result:
                LOGGER.warning("Unshared key %r overwrites a combined entry", key)
            result[key] = value

    if not options.omit_unshared:
        for key, value in b.items():
            if key not in a and key not in result:
                result[key] = value
    return result


def _apply(fn: Combiner[Any], left: Any, right: Any, role: str) -> Any:
    try:
        return fn(left, right)
    except TypeError as exc:
        raise UnsupportedOperationError(
            f"cannot combine {role} of type {type(left).__name__} and {type(right).__name__}"
        ) from exc


__all__ = ["merge_mappings"]
