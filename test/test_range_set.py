import itertools
import pytest
from rangekit import Range, RangeSet


def test_normalization():
    s = RangeSet([Range(1.0, 3.0), Range(2.0, 5.0), Range(7.0, 8.0)])
    assert str(s) == "{[1,5],[7,8]}"
    assert len(s) == 2
    assert list(s) == [Range(1.0, 5.0), Range(7.0, 8.0)]
    assert s[-1] == Range(7.0, 8.0)
    assert str(RangeSet([Range(1.0, 2.0, "[)"), Range(2.0, 3.0)])) == "{[1,3]}"
    assert str(RangeSet([Range(1.0, 2.0, "[)"), Range(2.0, 3.0, "(]")])) == "{[1,2),(2,3]}"
    assert str(RangeSet([Range(1, 3), Range(4, 6)])) == "{[1,6]}"
    assert str(RangeSet([Range(), Range()])) == "{}"


def test_construction_from_values():
    assert str(RangeSet([1.0, 2.0, Range(3.0, 4.0)])) == "{1,2,[3,4]}"
    assert str(RangeSet([1, 2, Range(3, 4)])) == "{[1,4]}"
    assert str(RangeSet(5.0)) == "{5}"
    assert str(RangeSet("abc")) == "{abc}"
    assert str(RangeSet(Range(1.0, 2.0))) == "{[1,2]}"


def test_insertion_order_does_not_matter():
    ranges = [Range(1.0, 2.0), Range(3.0, 5.0, "()"), Range(5.0), Range(-1.0, 0.5), Range(1.5, 3.0, "[)")]
    results = {RangeSet(permutation) for permutation in itertools.permutations(ranges)}
    assert len(results) == 1
    assert str(results.pop()) == "{[-1,0.5],[1,3),(3,5]}"


def test_insert_and_erase():
    s = RangeSet([Range(1.0, 3.0), Range(5.0, 7.0)])
    s.insert(Range(3.0, 5.0, "()"))
    assert str(s) == "{[1,7]}"
    s.erase(Range(2.0, 4.0))
    assert str(s) == "{[1,2),(4,7]}"
    s.erase(4.5)
    assert str(s) == "{[1,2),(4,4.5),(4.5,7]}"
    s.discard(Range.greater_than(1.5))
    assert str(s) == "{[1,1.5]}"
    s.add(Range())
    assert str(s) == "{[1,1.5]}"
    s.clear()
    assert s.is_empty and not s


def test_erase_spanning_several():
    s = RangeSet([Range(1, 2), Range(4, 5), Range(7, 8), Range(10, 12)])
    s.erase(Range(2, 10))
    assert str(s) == "{1,[11,12]}"


def test_contains():
    s = RangeSet([Range(1.0, 2.0), Range(4.0, 5.0, "()")])
    assert 1.5 in s and 2.0 in s and 4.5 in s
    assert 0.0 not in s and 3.0 not in s and 5.0 not in s and 6.0 not in s
    assert Range(1.2, 1.8) in s
    assert Range(1.5, 4.5) not in s
    assert 1.0 not in RangeSet()


def test_envelope():
    assert RangeSet([Range(1, 2), Range(6, 9)]).envelope() == Range(1, 9)
    assert RangeSet().envelope().is_empty


def test_complement():
    s = RangeSet([Range(1.0, 2.0), Range(4.0, 5.0, "()")])
    assert str(s.complement()) == "{<1,(2,4],>=5}"
    assert ~~s == s
    assert str(~RangeSet()) == "{*}"
    assert str(~RangeSet(Range.all())) == "{}"
    assert str(~RangeSet(Range.less_than(0.0))) == "{>=0}"


sample_sets = [
    RangeSet(),
    RangeSet(Range.all()),
    RangeSet([Range(1.0, 2.0), Range(4.0, 5.0, "()")]),
    RangeSet([Range.less_than(1.5), Range(3.0), Range.greater_than(4.5)]),
    RangeSet([Range(0.0, 3.0, "(]"), Range(5.0, 6.0)]),
]

sample_points = [x / 4 for x in range(-4, 28)]


@pytest.mark.parametrize("a, b", itertools.product(sample_sets, repeat=2))
def test_set_operations_agree_with_membership(a, b):
    union, intersection = a | b, a & b
    difference, symmetric_difference = a - b, a ^ b
    for x in sample_points:
        in_a, in_b = x in a, x in b
        assert (x in union) == (in_a or in_b)
        assert (x in intersection) == (in_a and in_b)
        assert (x in difference) == (in_a and not in_b)
        assert (x in symmetric_difference) == (in_a != in_b)


@pytest.mark.parametrize("a, b", itertools.product(sample_sets, repeat=2))
def test_set_laws(a, b):
    assert ~(a | b) == ~a & ~b
    assert ~(a & b) == ~a | ~b
    assert a - b == a & ~b
    assert (a ^ b) == (a | b) - (a & b)
    assert a.issubset(a | b) and (a | b).issuperset(b)
    assert (a & b).issubset(a)


def test_in_place_operators():
    s = RangeSet(Range(1.0, 5.0))
    original = s
    s |= Range(7.0, 8.0)
    s -= Range(2.0, 3.0)
    assert str(s) == "{[1,2),(3,5],[7,8]}"
    s &= RangeSet([Range(0.0, 4.0), Range(7.5, 10.0)])
    assert str(s) == "{[1,2),(3,4],[7.5,8]}"
    s ^= Range(1.0, 2.0)
    assert str(s) == "{2,(3,4],[7.5,8]}"
    assert s is original


def test_mixing_with_ranges():
    s = RangeSet(Range(1.0, 2.0))
    assert str(Range(5.0, 6.0) | s) == "{[1,2],[5,6]}"
    assert str(Range(0.0, 3.0) - s) == "{[0,1),(2,3]}"
    assert str(s | 4.0) == "{[1,2],4}"


def test_copy_is_independent():
    s = RangeSet(Range(1.0, 2.0))
    t = s.copy()
    t.insert(Range(5.0))
    assert len(s) == 1 and len(t) == 2


def test_ordering_and_hash():
    a = RangeSet([Range(1, 2), Range(5, 6)])
    b = RangeSet([Range(5, 6), Range(1, 2)])
    assert a == b and hash(a) == hash(b)
    assert RangeSet(Range(1, 2)) < a
    assert a < RangeSet(Range(1, 3))
    assert RangeSet() < RangeSet(Range(1, 2))
    assert a != RangeSet(Range(1, 2))


def test_from_string():
    assert str(RangeSet.from_string("{[5,10], 1-3, 4}", int)) == "{[1,10]}"
    assert RangeSet.from_string("{}").is_empty
    assert RangeSet.from_string("{<1,(2,4],>=5}") == RangeSet([Range(1.0, 2.0), Range(4.0, 5.0, "()")]).complement()


def test_json(tmp_path):
    s = RangeSet([Range.less_than(1.5), Range(3.0), Range(4.0, 6.0, "(]")])
    assert RangeSet._from_dict(s._to_dict()) == s
    file_path = str(tmp_path / "range_set.json")
    s.save_to_json(file_path)
    assert RangeSet.load_from_json(file_path) == s


def test_repr():
    assert repr(RangeSet([Range(1, 2)])) == "RangeSet([Range(1, 2, '[]')])"
