"""String predicates and rewrites used by the key helpers."""

from __future__ import annotations


def starts_with(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


def replace_substring(value: str, target: str, replacement: str) -> str:
    """Replace every occurrence of ``target`` in ``value``.

    An empty ``target`` leaves ``value`` untouched rather than interleaving
    ``replacement`` between every character.
    """

    if not target:
        return value
    return value.replace(target, replacement)


def strip_leading(value: str, prefix: str) -> str:
    """Remove a single leading occurrence of ``prefix``."""

    if prefix and value.startswith(prefix):
        return value[len(prefix):]
    return value


__all__ = ["replace_substring", "starts_with", "strip_leading"]
