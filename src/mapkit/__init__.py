"""Public package interface for mapkit."""

from .config import MapkitConfig, MergeOptions, UniqueKeyOptions
from .conversion import first_key, keys_of, to_pair_sequence
from .errors import EmptyContainerError, MapkitError, UnsupportedOperationError
from .keys import filter_by_key_prefix, make_unique_key, strip_prefix_from_keys
from .merge import merge_mappings
from .sampling import pick_random_key, pop_random_pair
from .toolkit import MapToolkit
from .types import MergeTarget, Pair, UniqueKeyStrategy
from .values import zero_negative_values

__all__ = [
    "EmptyContainerError",
    "MapToolkit",
    "MapkitConfig",
    "MapkitError",
    "MergeOptions",
    "MergeTarget",
    "Pair",
    "UniqueKeyOptions",
    "UniqueKeyStrategy",
    "UnsupportedOperationError",
    "filter_by_key_prefix",
    "first_key",
    "keys_of",
    "make_unique_key",
    "merge_mappings",
    "pick_random_key",
    "pop_random_pair",
    "strip_prefix_from_keys",
    "to_pair_sequence",
    "zero_negative_values",
]
