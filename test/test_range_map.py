import pytest
from rangekit import Range, RangeMap


def test_overwriting_part_of_an_entry():
    m = RangeMap("-")
    m[Range(1.0, 7.0)] = "A"
    m[Range(3.0, 7.0)] = "B"
    assert str(m) == "{[1,3):A,[3,7]:B}"
    assert [m[x] for x in (0.0, 1.0, 2.9, 3.0, 7.0, 7.5)] == ["-", "A", "A", "B", "B", "-"]


def test_default_value():
    m = RangeMap(0, [(Range(1, 4), 10)])
    assert m[100] == 0 and m[-5] == 0
    m.default_value = -1
    assert m.default_value == -1 and m[100] == -1
    assert m.get(100) == -1
    assert m.get(100, "missing") == "missing"
    assert m.get(2, "missing") == 10
    assert m.get(100, None) is None
    assert RangeMap()[3] is None


def test_splitting_an_entry():
    m = RangeMap(items=[(Range(1.0, 10.0), "A")])
    m.insert(Range(4.0, 5.0), "B")
    assert str(m) == "{[1,4):A,[4,5]:B,(5,10]:A}"
    assert len(m) == 3


def test_equal_values_merge():
    m = RangeMap()
    m[Range(1, 2)] = "A"
    m[Range(2, 3)] = "A"
    assert str(m) == "{[1,3]:A}"
    m[Range(4, 6)] = "A"
    assert str(m) == "{[1,6]:A}"


def test_touching_entries_with_different_values_stay_apart():
    m = RangeMap()
    m[Range(1.0, 2.0, "[)")] = "A"
    m[Range(2.0, 3.0)] = "B"
    assert str(m) == "{[1,2):A,[2,3]:B}"


def test_touching_entry_does_not_hide_later_overlaps():
    m = RangeMap(items=[(Range(1.0, 3.0, "[)"), "A"), (Range(5.0, 8.0), "C")])
    m[Range(3.0, 6.0)] = "B"
    assert str(m) == "{[1,3):A,[3,6]:B,(6,8]:C}"


def test_merge_reaches_past_a_single_point():
    m = RangeMap(items=[(Range(1.0, 3.0, "[)"), "A"), (Range(3.0), "B")])
    m[Range(3.0, 6.0)] = "A"
    assert str(m) == "{[1,6]:A}"


def test_covering_several_entries():
    m = RangeMap(items=[(Range(1, 2), "a"), (Range(4, 5), "b"), (Range(7, 8), "c")])
    m[Range(2, 7)] = "z"
    assert str(m) == "{1:a,[2,7]:z,8:c}"


def test_erase():
    m = RangeMap("-", [(Range(1.0, 10.0), "A"), (Range(12.0, 15.0), "B")])
    m.erase(Range(4.0, 5.0))
    assert str(m) == "{[1,4):A,(5,10]:A,[12,15]:B}"
    assert m[4.5] == "-"
    del m[Range(8.0, 13.0)]
    assert str(m) == "{[1,4):A,(5,8):A,(13,15]:B}"
    m.erase(Range())
    assert len(m) == 3


def test_find_and_contains():
    m = RangeMap("-", [(Range(1.0, 3.0, "[)"), "A"), (Range(3.0, 7.0), "B")])
    assert m.find(3.0) == (Range(3.0, 7.0), "B")
    assert m.find(8.0) is None
    assert 2.0 in m and m.contains(7.0)
    assert 0.5 not in m and not RangeMap().contains(1.0)


def test_views_and_iteration():
    m = RangeMap(items={Range(5, 6): "y", Range(1, 2): "x"})
    assert list(m) == [Range(1, 2), Range(5, 6)]
    assert list(m.keys()) == [Range(1, 2), Range(5, 6)]
    assert list(m.values()) == ["x", "y"]
    assert list(m.items()) == [(Range(1, 2), "x"), (Range(5, 6), "y")]


def test_clear_and_reset():
    m = RangeMap(1, [(Range(1, 2), 5)])
    m.clear()
    assert m.is_empty and not m and m.default_value == 1
    m[Range(1, 2)] = 5
    m.reset(7)
    assert m.is_empty and m[1] == 7


def test_copy_is_independent():
    m = RangeMap("-", [(Range(1, 2), "x")])
    n = m.copy()
    n[Range(3, 4)] = "y"
    assert len(m) == 1 and len(n) == 2 and n.default_value == "-"
    assert str(n) == "{[1,2]:x,[3,4]:y}"


def test_comparison_and_hash():
    a = RangeMap("-", [(Range(1, 2), "x"), (Range(5, 6), "y")])
    b = RangeMap("?", [(Range(5, 6), "y"), (Range(1, 2), "x")])
    # default values take no part in comparisons
    assert a == b and hash(a) == hash(b)
    assert a != RangeMap("-", [(Range(1, 2), "x"), (Range(5, 6), "z")])
    assert a < RangeMap("-", [(Range(1, 2), "x"), (Range(5, 6), "z")])
    assert RangeMap("-", [(Range(1, 2), "x")]) < a
    assert RangeMap() < a


def test_from_string():
    m = RangeMap.from_string("{[1,3):A,[3,7]:B}", default="-")
    assert str(m) == "{[1,3):A,[3,7]:B}"
    assert m[2.0] == "A" and m[10.0] == "-"
    m = RangeMap.from_string("{1-5:10, 3-8:20}", int, int)
    assert list(m.items()) == [(Range(1, 2), 10), (Range(3, 8), 20)]


def test_json(tmp_path):
    m = RangeMap(0, [(Range(1.0, 2.0, "[)"), 1), (Range.greater_than(5.0), 2)])
    restored = RangeMap._from_dict(m._to_dict())
    assert restored == m and restored.default_value == 0
    file_path = str(tmp_path / "range_map.json")
    m.save_to_json(file_path)
    assert RangeMap.load_from_json(file_path) == m


def test_repr():
    assert repr(RangeMap(0, [(Range(1, 2), "x")])) == "RangeMap(0, [(Range(1, 2, '[]'), 'x')])"
