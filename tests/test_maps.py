from handytools.maps import get_keys, get_values, has_key, map_keys, map_values
from handytools.numbers import string_to_int


def test_map_values():
    assert map_values({"a": "1", "b": "2"}, string_to_int) == {"a": 1, "b": 2}
    assert map_values({}, string_to_int) == {}


def test_map_values_leaves_input_unchanged():
    source = {"a": "1"}
    map_values(source, string_to_int)
    assert source == {"a": "1"}


def test_map_keys():
    assert map_keys({"1": "a", "2": "b"}, string_to_int) == {1: "a", 2: "b"}
    assert map_keys({}, string_to_int) == {}


def test_has_key():
    assert has_key({1: "a", 2: "b"}, 1) is True
    assert has_key({1: "a", 2: "b"}, 3) is False


def test_get_values():
    assert sorted(get_values({1: "one", 2: "two"})) == ["one", "two"]
    assert get_values({}) == []


def test_get_keys():
    assert sorted(get_keys({1: "one", 2: "two"})) == [1, 2]
    assert get_keys({}) == []