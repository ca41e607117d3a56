import random
from collections import Counter

import pytest

from mapkit.errors import EmptyContainerError
from mapkit.sampling import pick_random_key, pop_random_pair


def test_pick_random_key_uses_injected_source():
    mapping = {"a": 1, "b": 2, "c": 3, "d": 4}

    assert pick_random_key(mapping, random_fn=lambda: 0.0) == "a"
    assert pick_random_key(mapping, random_fn=lambda: 0.5) == "c"
    assert pick_random_key(mapping, random_fn=lambda: 0.9999) == "d"


def test_pick_random_key_distribution_is_roughly_uniform():
    mapping = {key: None for key in "abcd"}
    rng = random.Random(1234)

    counts = Counter(pick_random_key(mapping, random_fn=rng.random) for _ in range(4000))

    assert set(counts) == set(mapping)
    for count in counts.values():
        assert 850 <= count <= 1150


def test_pick_random_key_of_empty_mapping():
    with pytest.raises(EmptyContainerError):
        pick_random_key({})


def test_pop_random_pair_removes_entry():
    mapping = {"a": 1, "b": 2, "c": 3}
    original = dict(mapping)

    key, value = pop_random_pair(mapping, random_fn=random.Random(7).random)

    assert original[key] == value
    assert key not in mapping
    assert len(mapping) == len(original) - 1


def test_pop_random_pair_drains_mapping():
    mapping = {"a": 1, "b": 2}
    rng = random.Random(3)

    popped = {pop_random_pair(mapping, random_fn=rng.random) for _ in range(2)}

    assert popped == {("a", 1), ("b", 2)}
    assert mapping == {}


def test_pop_random_pair_of_empty_mapping_leaves_it_untouched():
    mapping: dict[str, int] = {}

    with pytest.raises(EmptyContainerError):
        pop_random_pair(mapping)

    assert mapping == {}
