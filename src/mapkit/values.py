"""In-place value adjustments."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from .errors import UnsupportedOperationError

LOGGER = logging.getLogger(__name__)


def zero_negative_values(mapping: MutableMapping[Any, Any]) -> None:
    """Set every negative value in ``mapping`` to zero, in place.

    Each replacement zero has the type of the value it replaces. All values are
    compared before any is assigned, so a value that cannot be ordered against
    zero leaves the mapping unchanged.
    """

    zeros = {}
    for key, value in mapping.items():
        try:
            if value < 0:
                zeros[key] = type(value)(0)
        except TypeError as exc:
            raise UnsupportedOperationError(
                f"value for key {key!r} of type {type(value).__name__} cannot be compared with zero"
            ) from exc

    for key, zero in zeros.items():
        mapping[key] = zero
    if zeros:
        LOGGER.debug("Zeroed %d negative values", len(zeros))


__all__ = ["zero_negative_values"]
