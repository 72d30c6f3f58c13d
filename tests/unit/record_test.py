import copy
import json
import pickle
from types import SimpleNamespace

from pytest import raises

from insort import SortedRecord, compare_str, reverse


def make():
    return SortedRecord({"b": 42, "x": 23, "q": -8})


def test_construction_sorts_fields():
    rec = make()
    assert list(rec) == ["b", "q", "x"]
    assert rec.b == 42
    assert rec.q == -8
    assert len(rec) == 3


def test_construction_from_object():
    rec = SortedRecord(SimpleNamespace(z=1, y=2))
    assert list(rec.items()) == [("y", 2), ("z", 1)]


def test_construction_copies_source():
    src = {"b": 1, "a": 2}
    rec = SortedRecord(src)
    rec.c = 3
    del rec.a
    assert src == {"b": 1, "a": 2}


def test_empty():
    rec = SortedRecord()
    assert list(rec) == []
    assert rec.to_dict() == {}


def test_write_new_field():
    rec = make()
    rec.a = 1
    rec.z = 2
    rec.g = 3
    assert list(rec) == ["a", "b", "g", "q", "x", "z"]
    rec.verify()


def test_write_existing_field():
    rec = make()
    rec.q = 99
    assert list(rec.items()) == [("b", 42), ("q", 99), ("x", 23)]


def test_delete_field():
    rec = make()
    del rec.q
    assert list(rec) == ["b", "x"]
    assert "q" not in rec
    with raises(AttributeError):
        rec.q


def test_delete_missing_field_is_noop():
    rec = make()
    del rec.g
    del rec["g"]
    assert list(rec) == ["b", "q", "x"]


def test_missing_field_read():
    rec = make()
    with raises(AttributeError, match="'g'"):
        rec.g
    with raises(KeyError):
        rec["g"]
    assert getattr(rec, "g", None) is None
    assert not hasattr(rec, "g")
    assert hasattr(rec, "b")


def test_item_syntax_allows_any_string():
    rec = make()
    rec["content-type"] = "text/plain"
    assert rec["content-type"] == "text/plain"
    assert list(rec) == ["b", "content-type", "q", "x"]


def test_field_names_must_be_str():
    rec = make()
    with raises(TypeError):
        rec[1] = "one"
    with raises(TypeError):
        SortedRecord({1: "one"})
    assert list(rec) == ["b", "q", "x"]


def test_shadowed_field_names():
    rec = make()
    rec.keys = "shadowed"
    assert callable(rec.keys)
    assert rec["keys"] == "shadowed"
    assert list(rec) == ["b", "keys", "q", "x"]


def test_serialization_follows_index():
    rec = SortedRecord({"b": 1, "a": 2})
    rec.c = 3
    assert json.dumps(rec.to_dict()) == '{"a": 2, "b": 1, "c": 3}'
    assert list(rec.keys()) == ["a", "b", "c"]
    assert list(rec.values()) == [2, 1, 3]
    assert list(reversed(rec)) == ["c", "b", "a"]


def test_custom_comparator():
    rec = SortedRecord({"a": 1, "c": 3}, cmp=reverse(compare_str))
    rec.b = 2
    assert list(rec) == ["c", "b", "a"]


def test_no_instance_dict():
    rec = make()
    with raises(TypeError):
        vars(rec)


def test_dir_lists_fields():
    rec = make()
    names = dir(rec)
    assert "b" in names
    assert "to_dict" in names


def test_mapping_helpers():
    rec = make()
    assert rec.pop("b") == 42
    rec.update({"a": 1})
    assert list(rec) == ["a", "q", "x"]
    assert rec == {"a": 1, "q": -8, "x": 23}
    rec.clear()
    assert list(rec) == []
    rec.verify()


def test_copies():
    rec = make()
    for other in (rec.copy(), copy.copy(rec), copy.deepcopy(rec), pickle.loads(pickle.dumps(rec))):
        assert other == rec
        assert other.cmp is rec.cmp
        other.a = 1
        assert list(other) == ["a", "b", "q", "x"]
        assert list(rec) == ["b", "q", "x"]


def test_repr():
    assert repr(make()) == "SortedRecord({'b': 42, 'q': -8, 'x': 23})"


def test_json_needs_to_dict():
    rec = SortedRecord({"b": 1, "a": 2})
    with raises(TypeError):
        json.dumps(rec)
    assert json.dumps(rec.to_dict()) == '{"a": 2, "b": 1}'


def test_check_mode_survives_copies():
    flipped = [False]

    def cmp(one, other):
        res = compare_str(one, other)
        return -res if flipped[0] else res

    rec = SortedRecord({"a": 1, "b": 2, "c": 3}, cmp=cmp, check=True)
    rec.d = 4
    del rec.a
    other = rec.copy()
    flipped[0] = True
    with raises(ValueError, match="out of order"):
        rec.e = 5
    with raises(ValueError, match="out of order"):
        other.e = 5
