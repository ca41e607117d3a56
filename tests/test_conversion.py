from collections import Counter

import pytest

from mapkit.conversion import first_key, keys_of, to_pair_sequence
from mapkit.errors import EmptyContainerError
from mapkit.types import Pair


def test_pair_sequence_matches_entries():
    mapping = {"a": 1, "b": 2, "c": 3}

    pairs = to_pair_sequence(mapping)

    assert len(pairs) == len(mapping)
    assert Counter(pairs) == Counter(mapping.items())
    assert all(isinstance(pair, Pair) for pair in pairs)
    assert pairs[0].key == "a"
    assert pairs[0].value == 1


def test_pair_sequence_of_empty_mapping():
    assert to_pair_sequence({}) == []


def test_first_key_follows_insertion_order():
    mapping = {"second": 2}
    mapping["first"] = 1

    assert first_key(mapping) == "second"


def test_first_key_of_empty_mapping():
    with pytest.raises(EmptyContainerError):
        first_key({})


def test_keys_of_returns_every_key_in_order():
    mapping = {3: "c", 1: "a", 2: "b"}

    assert keys_of(mapping) == [3, 1, 2]
    assert keys_of({}) == []
