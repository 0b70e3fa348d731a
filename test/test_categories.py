import datetime
import decimal
from fractions import Fraction
import pytest
from rangekit import DomainCategory, Range, register_stepwise
from rangekit.categories import category_of, common_category, domain_for


@pytest.mark.parametrize("value_type, category", [
    (int, DomainCategory.integral),
    (float, DomainCategory.continuous),
    (Fraction, DomainCategory.continuous),
    (decimal.Decimal, DomainCategory.continuous),
    (bool, DomainCategory.none),
    (complex, DomainCategory.none),
    (str, DomainCategory.ordered),
    (tuple, DomainCategory.ordered),
    (datetime.datetime, DomainCategory.ordered),
    (datetime.date, DomainCategory.stepwise),
])
def test_builtin_categories(value_type, category):
    assert category_of(value_type) is category


def test_mixed_numbers_are_continuous():
    assert common_category(1, 2.5) is DomainCategory.continuous
    assert common_category(None, None) is None
    assert Range(1, 2.5).category is DomainCategory.continuous


def test_unusable_values_are_rejected():
    with pytest.raises(TypeError):
        Range(1j, 2j)
    with pytest.raises(TypeError):
        domain_for(True, False)


class Cursor:

    def __init__(self, position):
        self.position = position

    def successor(self):
        return Cursor(self.position + 1)

    def predecessor(self):
        return Cursor(self.position - 1)

    def __lt__(self, other):
        return self.position < other.position

    def __le__(self, other):
        return self.position <= other.position

    def __eq__(self, other):
        return isinstance(other, Cursor) and self.position == other.position

    def __hash__(self):
        return hash(self.position)

    def __str__(self):
        return "c{}".format(self.position)


def test_stepwise_by_methods():
    assert category_of(Cursor) is DomainCategory.stepwise
    r = Range(Cursor(1), Cursor(5), "()")
    assert r.min == Cursor(2) and r.max == Cursor(4)
    assert r.is_left_closed and r.is_right_closed
    assert [c.position for c in r] == [2, 3, 4]


class Version:

    def __init__(self, major, minor):
        self.major, self.minor = major, minor

    def _key(self):
        return self.major, self.minor

    def __lt__(self, other):
        return self._key() < other._key()

    def __le__(self, other):
        return self._key() <= other._key()

    def __eq__(self, other):
        return isinstance(other, Version) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())


def test_register_stepwise():
    assert category_of(Version) is DomainCategory.ordered
    register_stepwise(Version, lambda v: Version(v.major, v.minor + 1), lambda v: Version(v.major, v.minor - 1))
    assert category_of(Version) is DomainCategory.stepwise
    r = Range(Version(1, 0), Version(1, 3), "[)")
    assert r.max == Version(1, 2)


def test_dates_step_by_day():
    r = Range(datetime.date(2020, 1, 1), datetime.date(2020, 1, 31), "[)")
    assert r.max == datetime.date(2020, 1, 30)
    assert r.size() == 30
    domain = domain_for(datetime.date(2020, 2, 28))
    assert domain.successor(datetime.date(2020, 2, 28)) == datetime.date(2020, 2, 29)
    assert domain.advance(datetime.date(2020, 1, 1), 31) == datetime.date(2020, 2, 1)


def test_integer_domain():
    domain = domain_for(3)
    assert domain.is_discrete
    assert domain.advance(3, -5) == -2
    assert domain.distance(3, 10) == 7
    assert not domain_for(3.0).is_discrete
