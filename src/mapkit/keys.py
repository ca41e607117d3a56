"""Helpers that select, rename, or synthesize string keys."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from .config import UniqueKeyOptions
from .errors import UnsupportedOperationError
from .strings import replace_substring, starts_with, strip_leading
from .types import UniqueKeyStrategy
from .utils import empty_like

LOGGER = logging.getLogger(__name__)


def filter_by_key_prefix(mapping: Mapping[str, Any], prefix: str) -> MutableMapping[str, Any]:
    """Return the entries whose key starts with ``prefix``.

    >>> filter_by_key_prefix({"style:color": "red", "name": "header"}, "style:")
    {'style:color': 'red'}
    """

    _require_str(prefix, "prefix")
    result = empty_like(mapping)
    for key, value in mapping.items():
        _require_str(key, "key")
        if starts_with(key, prefix):
            result[key] = value
    return result


def strip_prefix_from_keys(
    mapping: Mapping[str, Any],
    prefix: str,
    *,
    leading_only: bool = False,
) -> MutableMapping[str, Any]:
    """Return a copy of ``mapping`` with ``prefix`` removed from every key.

    By default every occurrence of ``prefix`` is removed, not only a leading
    one, so ``"a:b:a:c"`` stripped of ``"a:"`` becomes ``"b:c"``. Pass
    ``leading_only=True`` to remove a single leading occurrence instead.

    Keys that become equal after stripping keep the value of the entry that
    comes last in iteration order.
    """

    _require_str(prefix, "prefix")
    strip = strip_leading if leading_only else _remove_all
    result = empty_like(mapping)
    for key, value in mapping.items():
        _require_str(key, "key")
        stripped = strip(key, prefix)
        if stripped in result:
            LOGGER.debug("Stripped key %r from %r replaces an earlier entry", stripped, key)
        result[stripped] = value
    return result


def make_unique_key(
    mapping: Mapping[Any, Any],
    candidate: str = "",
    strategy: UniqueKeyStrategy | str = UniqueKeyStrategy.INTEGER_SUFFIX,
) -> str:
    """Return ``candidate`` or a variant of it that ``mapping`` does not contain.

    With the integer suffix strategy ``0``, ``1``, ``2`` ... are appended to
    the original candidate until an unused key is found. The key is not
    inserted, so callers sharing ``mapping`` across threads must hold a lock
    across this call and the insertion.
    """

    # integer suffix is the only strategy; validation rejects anything else
    UniqueKeyOptions(strategy=strategy)
    _require_str(candidate, "candidate key")
    if candidate not in mapping:
        return candidate

    suffix = 0
    key = f"{candidate}{suffix}"
    while key in mapping:
        suffix += 1
        key = f"{candidate}{suffix}"
    return key


def _remove_all(key: str, prefix: str) -> str:
    return replace_substring(key, prefix, "")


def _require_str(value: object, role: str) -> None:
    if not isinstance(value, str):
        raise UnsupportedOperationError(
            f"{role} must be a string, got {type(value).__name__}"
        )


__all__ = ["filter_by_key_prefix", "make_unique_key", "strip_prefix_from_keys"]
