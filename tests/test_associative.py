import pytest

from algokit.associative import ChainedHashMap, LinearProbingMap, first_letter_hash


def test_first_letter_hash_empty_and_a():
    assert first_letter_hash("") == 0
    assert first_letter_hash("abc") == first_letter_hash("a") == 0


def test_first_letter_hash_orders_letters():
    assert first_letter_hash("c") > first_letter_hash("bc") > first_letter_hash("abc")
    assert first_letter_hash("cat") == first_letter_hash("c")


def test_chained_scenario_from_example():
    m = ChainedHashMap()
    for key, value in [("abc", 1), ("bc", 2), ("a", 3), ("c", 4)]:
        stored, added = m.add_or_get(key, value)
        assert added is True
        assert stored == value

    stored, added = m.add_or_get("c", 99)
    assert added is False
    assert stored == 4
    assert m["a"] == 3
    assert len(m) == 4


def test_chained_setitem_overwrites():
    m = ChainedHashMap()
    m["abc"] = 1
    m["abc"] = 7
    assert m["abc"] == 7
    assert len(m) == 1


def test_chained_missing_key_raises():
    m = ChainedHashMap()
    m["abc"] = 1
    with pytest.raises(KeyError):
        m["ab"]
    assert "ab" not in m
    assert "abc" in m


def test_chained_all_collisions():
    m = ChainedHashMap(lambda key: 0, 4)
    keys = ["x", "y", "z", "w", "v"]
    for i, key in enumerate(keys):
        m[key] = i
    assert [m[key] for key in keys] == list(range(len(keys)))
    assert len(m) == len(keys)


def test_chained_key_before_a():
    m = ChainedHashMap()
    m["A"] = 5
    assert m["A"] == 5


def test_chained_rejects_bad_bucket_count():
    with pytest.raises(ValueError):
        ChainedHashMap(first_letter_hash, 0)


def test_linear_scenario_from_example():
    m = LinearProbingMap()
    m.add("abc", 2)
    m.add("c", 5)
    m.add("ab", 6)
    assert m["abc"] == 2
    assert m["ab"] == 6
    assert m["c"] == 5
    assert len(m) == 3


def test_linear_missing_key():
    m = LinearProbingMap()
    m.add("abc", 2)
    assert m.get("zz") is None
    assert m.get("ab", "fallback") == "fallback"
    assert "ab" not in m
    with pytest.raises(KeyError):
        m["ab"]


def test_linear_wraps_around():
    m = LinearProbingMap(first_letter_hash, 8)
    m.add("h1", 1)
    m.add("h2", 2)
    m.add("a", 3)
    assert m["h1"] == 1
    assert m["h2"] == 2
    assert m["a"] == 3


def test_linear_full_raises():
    m = LinearProbingMap(lambda key: 0, 3)
    for key in ["p", "q", "r"]:
        m.add(key, key)
    assert len(m) == 3
    with pytest.raises(OverflowError):
        m.add("s", "s")
    assert m.get("s") is None
    assert m["r"] == "r"


def test_linear_duplicate_key_keeps_first():
    m = LinearProbingMap()
    m.add("k", 1)
    m.add("k", 2)
    assert m["k"] == 1
    assert len(m) == 2


def test_linear_rejects_bad_capacity():
    with pytest.raises(ValueError):
        LinearProbingMap(first_letter_hash, 0)