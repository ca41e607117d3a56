"""Facade binding mapkit operations to a configuration and random source."""

from __future__ import annotations

import operator
import random
from collections.abc import Mapping, MutableMapping
from typing import Any

from .config import MapkitConfig
from .conversion import first_key, keys_of, to_pair_sequence
from .keys import filter_by_key_prefix, make_unique_key, strip_prefix_from_keys
from .merge import merge_mappings
from .sampling import pick_random_key, pop_random_pair
from .types import Combiner, MergeTarget, Pair, RandomFn, UniqueKeyStrategy
from .values import zero_negative_values


class MapToolkit:
    """Run mapkit operations with shared defaults.

    Useful when the same merge mode or a seeded random source should apply to
    every call, e.g. ``MapToolkit(random_fn=random.Random(7).random)`` in tests.
    """

    def __init__(
        self,
        config: MapkitConfig | None = None,
        *,
        random_fn: RandomFn = random.random,
    ) -> None:
        self.config = config or MapkitConfig()
        self._random = random_fn

    # ------------------------------------------------------------------
    # Pure operations
    # ------------------------------------------------------------------
    def merge(
        self,
        a: Mapping[Any, Any],
        b: Mapping[Any, Any],
        *,
        target: MergeTarget | str | None = None,
        omit_unshared: bool | None = None,
        combine: Combiner[Any] = operator.add,
        combine_keys: Combiner[Any] = operator.add,
    ) -> MutableMapping[Any, Any]:
        merge_cfg = self.config.merge
        return merge_mappings(
            a,
            b,
            target if target is not None else merge_cfg.target,
            merge_cfg.omit_unshared if omit_unshared is None else omit_unshared,
            combine=combine,
            combine_keys=combine_keys,
        )

    def pairs(self, mapping: Mapping[Any, Any]) -> list[Pair]:
        return to_pair_sequence(mapping)

    def keys(self, mapping: Mapping[Any, Any]) -> list[Any]:
        return keys_of(mapping)

    def first_key(self, mapping: Mapping[Any, Any]) -> Any:
        return first_key(mapping)

    def random_key(self, mapping: Mapping[Any, Any]) -> Any:
        return pick_random_key(mapping, random_fn=self._random)

    def with_prefix(self, mapping: Mapping[str, Any], prefix: str) -> MutableMapping[str, Any]:
        return filter_by_key_prefix(mapping, prefix)

    def strip_prefix(
        self,
        mapping: Mapping[str, Any],
        prefix: str,
        *,
        leading_only: bool | None = None,
    ) -> MutableMapping[str, Any]:
        if leading_only is None:
            leading_only = self.config.strip_leading_only
        return strip_prefix_from_keys(mapping, prefix, leading_only=leading_only)

    def unique_key(
        self,
        mapping: Mapping[Any, Any],
        candidate: str = "",
        *,
        strategy: UniqueKeyStrategy | str | None = None,
    ) -> str:
        if strategy is None:
            strategy = self.config.unique_key.strategy
        return make_unique_key(mapping, candidate, strategy)

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------
    def zero_negatives(self, mapping: MutableMapping[Any, Any]) -> None:
        zero_negative_values(mapping)

    def pop_random(self, mapping: MutableMapping[Any, Any]) -> Pair:
        return pop_random_pair(mapping, random_fn=self._random)


__all__ = ["MapToolkit"]
