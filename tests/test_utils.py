from collections import OrderedDict, defaultdict
from types import MappingProxyType

import pytest

from mapkit.strings import replace_substring, starts_with, strip_leading
from mapkit.utils import empty_like, random_index


def test_empty_like_keeps_mutable_mapping_type():
    assert isinstance(empty_like(OrderedDict(a=1)), OrderedDict)
    assert isinstance(empty_like(defaultdict(list)), defaultdict)
    assert empty_like({"a": 1}) == {}


def test_empty_like_falls_back_to_dict_for_read_only_mappings():
    result = empty_like(MappingProxyType({"a": 1}))

    assert type(result) is dict


@pytest.mark.parametrize(
    "draw, expected",
    [(0.0, 0), (0.24, 0), (0.25, 1), (0.99, 3), (1.0, 3)],
)
def test_random_index_buckets(draw, expected):
    assert random_index(4, random_fn=lambda: draw) == expected


def test_random_index_requires_positive_size():
    with pytest.raises(ValueError):
        random_index(0)


def test_string_helpers():
    assert starts_with("style:color", "style:")
    assert not starts_with("color", "style:")
    assert replace_substring("a-b-c", "-", "") == "abc"
    assert replace_substring("abc", "", "x") == "abc"
    assert strip_leading("a:a:b", "a:") == "a:b"
    assert strip_leading("b:a:", "a:") == "b:a:"


def test_empty_like_keeps_default_factory():
    result = empty_like(defaultdict(int, k=1))

    assert result.default_factory is int
    assert result == {}
    assert result["missing"] == 0
