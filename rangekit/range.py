"""
Module containing the :class:`Range` class, a contiguous stretch of an ordered domain between two boundaries that
are each closed, open or unbounded. Ranges are immutable and normalized on construction: inconsistent inputs such
as a minimum above the maximum quietly produce the empty range, and in stepwise and integral domains open bounds are
rewritten as the neighboring closed bound.

>>> Range(1, 5, "()")
Range(2, 4, '[]')
>>> print(Range(2.0, 4.0, "()").set_intersection(Range(3.0, 5.0, "()")))
(3,4)
>>> print(Range.greater_than(2.0).complement())
{<=2}
"""

#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #
#  This file is part of rangekit (interval algebra over ordered domains in Python)               #
#  Copyright © 2020 The rangekit authors.                                                        #
#                                                                                                #
#  This program is free software: you can redistribute it and/or modify it under the terms of    #
#  the GNU General Public License as published by the Free Software Foundation, either version   #
#  3 of the License, or (at your option) any later version.                                      #
#                                                                                                #
#  This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;     #
#  without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.     #
#  See the GNU General Public License for more details.                                          #
#                                                                                                #
#  You should have received a copy of the GNU General Public License along with this program.    #
#  If not, see <http://www.gnu.org/licenses/>.                                                   #
#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #

import logging
import math
from .boundaries import BoundKind, BoundaryKind, Boundary, InvalidBoundsError, kinds_from_mode
from .categories import domain_for, common_category, DomainCategory
from .ordering import RelativePosition, RangeMatch
from .settings import formatting_settings
from .utilities import SavesToJSON, ComparesByCmp, hash_sequence

_P = RelativePosition


class Range(ComparesByCmp, SavesToJSON):

    """
    A contiguous range of values.

    :param min_value: the lower value (ignored if the left side is unbounded). If only one of min_value and
        max_value is given, it is used for both.
    :param max_value: the upper value (ignored if the right side is unbounded)
    :param left: the :class:`~rangekit.boundaries.BoundKind` of the left side, or a mode string ("()", "(]", "[)",
        "[]", ">", "<", ">=", "<=", "*") setting both sides at once. Defaults to closed, or to empty if no values
        are given at all.
    :param right: the :class:`~rangekit.boundaries.BoundKind` of the right side; defaults to the left kind
    :ivar min: the lower value, or None if the range is empty or unbounded below
    :ivar max: the upper value, or None if the range is empty or unbounded above
    :ivar left: the kind of the left side
    :ivar right: the kind of the right side
    """

    def __init__(self, min_value=None, max_value=None, left=None, right=None):
        if isinstance(left, str):
            if right is not None:
                raise ValueError("A mode string sets both bound kinds; it cannot be combined with a right kind.")
            left, right = kinds_from_mode(left)
        elif left is None and right is None:
            no_values = min_value is None and max_value is None
            left = right = BoundKind.empty if no_values else BoundKind.closed
        elif left is None:
            left = BoundKind.closed
        elif right is None:
            right = left

        if max_value is None:
            max_value = min_value
        if min_value is None:
            min_value = max_value

        self._min = min_value
        self._max = max_value
        self._left = BoundKind(left)
        self._right = BoundKind(right)
        self._domain = None
        self._normalize()

    def _normalize(self):
        if (self._left is BoundKind.empty) != (self._right is BoundKind.empty):
            raise InvalidBoundsError("One side of a range cannot be empty unless both are (got {} and {}).".format(
                self._left.name, self._right.name
            ))
        if self._left is BoundKind.empty:
            self._min = self._max = None
            self._domain = domain_for()
            return

        left_bounded = self._left in (BoundKind.closed, BoundKind.open)
        right_bounded = self._right in (BoundKind.closed, BoundKind.open)
        if (left_bounded and self._min is None) or (right_bounded and self._max is None):
            raise InvalidBoundsError("A bounded side of a range needs a value.")
        if not left_bounded:
            self._min = None
        if not right_bounded:
            self._max = None

        self._domain = domain_for(self._min, self._max)

        if self._domain.is_discrete:
            if self._left is BoundKind.open:
                self._min = self._domain.successor(self._min)
                self._left = BoundKind.closed
            if self._right is BoundKind.open:
                self._max = self._domain.predecessor(self._max)
                self._right = BoundKind.closed

        if left_bounded and right_bounded:
            if self._max < self._min or (self._min == self._max and BoundKind.open in (self._left, self._right)):
                logging.debug("Degenerate range ({}, {}, {}, {}) collapsed to empty.".format(
                    self._min, self._max, self._left.name, self._right.name))
                self._min = self._max = None
                self._left = self._right = BoundKind.empty
                self._domain = domain_for()

    # ------------------------------------- Alternative Constructors ---------------------------------------

    @classmethod
    def none(cls) -> 'Range':
        """
        Returns the empty range.

        >>> print(Range.none())
        {}
        """
        return cls()

    @classmethod
    def all(cls) -> 'Range':
        """
        Returns the range covering the entire domain.

        >>> print(Range.all())
        *
        """
        return cls(None, None, BoundKind.unbound, BoundKind.unbound)

    @classmethod
    def point(cls, value) -> 'Range':
        """Returns the closed range holding only the given value."""
        return cls(value, value)

    @classmethod
    def between(cls, min_value, max_value, left=BoundKind.closed, right=None) -> 'Range':
        """Returns the range between two values (closed on both sides by default)."""
        return cls(min_value, max_value, left, right)

    @classmethod
    def ordered(cls, a, b, left=BoundKind.closed, right=None) -> 'Range':
        """
        Like :meth:`between`, but if the values are reversed they (and their bound kinds) are swapped, rather than
        producing an empty range.

        >>> print(Range.ordered(5, 1, BoundKind.closed, BoundKind.open))
        [2,5]
        """
        if right is None:
            right = left
        if b < a:
            a, b, left, right = b, a, right, left
        return cls(a, b, left, right)

    @classmethod
    def less_than(cls, value) -> 'Range':
        return cls(None, value, BoundKind.unbound, BoundKind.open)

    @classmethod
    def less_than_or_equal_to(cls, value) -> 'Range':
        return cls(None, value, BoundKind.unbound, BoundKind.closed)

    @classmethod
    def greater_than(cls, value) -> 'Range':
        return cls(value, None, BoundKind.open, BoundKind.unbound)

    @classmethod
    def greater_than_or_equal_to(cls, value) -> 'Range':
        return cls(value, None, BoundKind.closed, BoundKind.unbound)

    @classmethod
    def from_string(cls, text: str, value_type=None) -> 'Range':
        """
        Parses a range from its textual form: "{}" (empty), "*" (everything), a bare value (a single point),
        "[a,b]", "(a,b)", "[a,b)", "(a,b]", "<a", "<=a", ">a", ">=a", "a+" (at least a), "a-" (at most a), or
        "a-b", "a..b", "a...b" (inclusive), "a..<b", "a<..b" and "a<..<b".

        :param text: the text to parse
        :param value_type: callable used to convert each value token (e.g. int, float, or a date parser). If None,
            numbers are read as floats (or as determined by the parse_numbers_as setting) and words as strings.
        :raises RangeFormatError: if the text is not a valid range

        >>> print(Range.from_string("3..<7", int))
        [3,6]
        >>> print(Range.from_string("5+"))
        >=5
        """
        from .parsing import parse_range
        return parse_range(text, value_type)

    # ------------------------------------------- Properties ----------------------------------------------

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    @property
    def left(self) -> BoundKind:
        return self._left

    @property
    def right(self) -> BoundKind:
        return self._right

    @property
    def category(self) -> DomainCategory:
        """The :class:`~rangekit.categories.DomainCategory` of the boundary values (None if there are none)."""
        return common_category(self._min, self._max)

    @property
    def is_empty(self) -> bool:
        return self._left is BoundKind.empty

    @property
    def is_single(self) -> bool:
        return self._left is BoundKind.closed and self._right is BoundKind.closed and self._min == self._max

    @property
    def is_finite(self) -> bool:
        return self.is_left_bounded and self.is_right_bounded

    @property
    def is_infinite(self) -> bool:
        return self._left is BoundKind.unbound or self._right is BoundKind.unbound

    @property
    def is_universal(self) -> bool:
        return self._left is BoundKind.unbound and self._right is BoundKind.unbound

    @property
    def is_left_bounded(self) -> bool:
        return self._left in (BoundKind.closed, BoundKind.open)

    @property
    def is_left_closed(self) -> bool:
        return self._left is BoundKind.closed

    @property
    def is_left_open(self) -> bool:
        return self._left is BoundKind.open

    @property
    def is_right_bounded(self) -> bool:
        return self._right in (BoundKind.closed, BoundKind.open)

    @property
    def is_right_closed(self) -> bool:
        return self._right is BoundKind.closed

    @property
    def is_right_open(self) -> bool:
        return self._right is BoundKind.open

    @property
    def left_boundary(self) -> Boundary:
        """The left side as a :class:`~rangekit.boundaries.Boundary` (minus infinity if unbounded)."""
        if self._left is BoundKind.empty:
            return Boundary.empty()
        if self._left is BoundKind.closed:
            return Boundary(self._min, BoundaryKind.closed)
        if self._left is BoundKind.open:
            return Boundary(self._min, BoundaryKind.open)
        return Boundary(None, BoundaryKind.minus_infinity)

    @property
    def right_boundary(self) -> Boundary:
        """The right side as a :class:`~rangekit.boundaries.Boundary` (plus infinity if unbounded)."""
        if self._right is BoundKind.empty:
            return Boundary.empty()
        if self._right is BoundKind.closed:
            return Boundary(self._max, BoundaryKind.closed)
        if self._right is BoundKind.open:
            return Boundary(self._max, BoundaryKind.open)
        return Boundary(None, BoundaryKind.plus_infinity)

    def __bool__(self):
        return not self.is_empty

    # --------------------------------------------- Queries -----------------------------------------------

    def match(self, value) -> RangeMatch:
        """
        Reports whether a value lies below, within or above this range.

        >>> Range(1, 5).match(0), Range(1, 5).match(3), Range(1.0, 5.0, "[)").match(5.0)
        (<RangeMatch.low: -1>, <RangeMatch.match: 0>, <RangeMatch.high: 1>)
        """
        if self.is_empty:
            return RangeMatch.empty
        if self.is_universal:
            return RangeMatch.match
        if (self._left is BoundKind.closed and value < self._min) \
                or (self._left is BoundKind.open and value <= self._min):
            return RangeMatch.low
        if (self._right is BoundKind.closed and value > self._max) \
                or (self._right is BoundKind.open and value >= self._max):
            return RangeMatch.high
        return RangeMatch.match

    def contains(self, value) -> bool:
        """Whether the given value lies in this range."""
        return self.match(value) is RangeMatch.match

    def __contains__(self, item):
        if isinstance(item, Range):
            return self.includes(item)
        return self.contains(item)

    def order(self, other: 'Range') -> RelativePosition:
        """
        Classifies how this range (a) is positioned relative to the other (b).

        >>> Range(2.0, 4.0, "()").order(Range(3.0, 5.0, "()"))
        <RelativePosition.a_overlaps_b: -4>
        >>> Range(10, 20).order(Range(21, 25))
        <RelativePosition.a_touches_b: -5>
        """
        a, b = self, other
        if a.is_empty and b.is_empty:
            return _P.both_empty
        if a.is_empty:
            return _P.b_only
        if b.is_empty:
            return _P.a_only

        al, ar = a.left_boundary, a.right_boundary
        bl, br = b.left_boundary, b.right_boundary

        if ar.compare_rl(bl):
            return _P.a_touches_b if ar.adjacent(bl) else _P.a_below_b
        if br.compare_rl(al):
            return _P.b_touches_a if br.adjacent(al) else _P.b_below_a
        if al.compare_ll(bl):
            if ar.compare_rr(br):
                return _P.a_overlaps_b
            if br.compare_rr(ar):
                return _P.a_encloses_b
            return _P.a_extends_below_b
        if bl.compare_ll(al):
            if ar.compare_rr(br):
                return _P.b_encloses_a
            if br.compare_rr(ar):
                return _P.b_overlaps_a
            return _P.b_extends_below_a
        if ar.compare_rr(br):
            return _P.b_extends_above_a
        if br.compare_rr(ar):
            return _P.a_extends_above_b
        return _P.equal

    def includes(self, other: 'Range') -> bool:
        """Whether every value in the other range is also in this one (the empty range is included by nothing)."""
        return self.order(other) in (_P.equal, _P.a_extends_above_b, _P.a_extends_below_b, _P.a_encloses_b)

    def overlaps(self, other: 'Range') -> bool:
        """Whether the two ranges share at least one value."""
        return self.order(other) not in (_P.both_empty, _P.a_only, _P.b_only, _P.a_below_b, _P.b_below_a,
                                         _P.a_touches_b, _P.b_touches_a)

    def touches(self, other: 'Range') -> bool:
        """Whether the two ranges overlap or meet with nothing in between."""
        return self.order(other) not in (_P.both_empty, _P.a_only, _P.b_only, _P.a_below_b, _P.b_below_a)

    def envelope(self, other: 'Range') -> 'Range':
        """
        The smallest range containing both ranges (and any gap between them).

        >>> print(Range(1, 2).envelope(Range(5, 6)))
        [1,6]
        """
        return _ENVELOPE[self.order(other)](self, other)

    def set_intersection(self, other: 'Range') -> 'Range':
        """The values found in both ranges."""
        return _INTERSECTION[self.order(other)](self, other)

    def set_union(self, other: 'Range') -> 'RangeSet':
        """
        The values found in either range, as a :class:`~rangekit.range_set.RangeSet` of one or two ranges.

        >>> print(Range(1.0).set_union(Range(2.0, 3.0)))
        {1,[2,3]}
        """
        from .range_set import RangeSet
        return RangeSet(_UNION[self.order(other)](self, other))

    def set_difference(self, other: 'Range') -> 'RangeSet':
        """
        The values in this range but not the other, as a :class:`~rangekit.range_set.RangeSet`.

        >>> print(Range(1.0, 10.0).set_difference(Range(4.0, 5.0)))
        {[1,4),(5,10]}
        """
        from .range_set import RangeSet
        return RangeSet(_DIFFERENCE[self.order(other)](self, other))

    def set_symmetric_difference(self, other: 'Range') -> 'RangeSet':
        """The values in exactly one of the two ranges, as a :class:`~rangekit.range_set.RangeSet`."""
        from .range_set import RangeSet
        return RangeSet(_SYMMETRIC_DIFFERENCE[self.order(other)](self, other))

    def complement(self) -> 'RangeSet':
        """
        All values outside this range, as a :class:`~rangekit.range_set.RangeSet`.

        >>> print(Range(86.0, 99.0, "()").complement())
        {<=86,>=99}
        >>> print(Range().complement())
        {*}
        """
        from .range_set import RangeSet
        if self.is_empty:
            return RangeSet(Range.all())
        if self.is_universal:
            return RangeSet()
        pieces = []
        if self.is_left_bounded:
            pieces.append(Range(self._min, self._min, BoundKind.unbound, ~self._left))
        if self.is_right_bounded:
            pieces.append(Range(self._max, self._max, ~self._right, BoundKind.unbound))
        return RangeSet(pieces)

    # ---------------------------------------- Size and Iteration -----------------------------------------

    def size(self):
        """
        For stepwise and integral ranges, the number of values in the range; for continuous ranges, the distance
        from min to max. Unbounded ranges have infinite size.

        >>> Range(1, 5).size(), Range(1.0, 5.0).size(), Range.greater_than(3).size()
        (5, 4.0, inf)
        """
        if self.is_empty:
            return 0
        if self._domain.category is DomainCategory.ordered:
            raise TypeError("Ranges of {} values have no size.".format(self._domain.category.name))
        if self.is_infinite:
            return math.inf
        if self._domain.is_discrete:
            return self._domain.distance(self._min, self._max) + 1
        return self._max - self._min

    def __iter__(self):
        if self.is_empty:
            return
        if not self._domain.is_discrete:
            raise TypeError("Only stepwise and integral ranges can be iterated over.")
        if self.is_infinite:
            raise TypeError("Cannot iterate over an unbounded range.")
        value = self._min
        while value <= self._max:
            yield value
            value = self._domain.successor(value)

    # ----------------------------------------- Set Operators -----------------------------------------------

    @staticmethod
    def _coerce(other):
        from .range_set import RangeSet
        if isinstance(other, Range):
            return other
        if isinstance(other, RangeSet):
            return None
        return Range(other)

    def __and__(self, other):
        other = Range._coerce(other)
        return NotImplemented if other is None else self.set_intersection(other)

    __rand__ = __and__

    def __or__(self, other):
        other = Range._coerce(other)
        return NotImplemented if other is None else self.set_union(other)

    __ror__ = __or__

    def __xor__(self, other):
        other = Range._coerce(other)
        return NotImplemented if other is None else self.set_symmetric_difference(other)

    __rxor__ = __xor__

    def __invert__(self):
        return self.complement()

    # ------------------------------------------ Arithmetic ------------------------------------------------

    def __pos__(self):
        from .arithmetic import check_arithmetic
        check_arithmetic(self)
        return self

    def __neg__(self):
        from .arithmetic import negate
        return negate(self)

    def __add__(self, other):
        from .arithmetic import add, as_range
        other = as_range(other)
        return NotImplemented if other is None else add(self, other)

    def __radd__(self, other):
        from .arithmetic import add, as_range
        other = as_range(other)
        return NotImplemented if other is None else add(other, self)

    def __sub__(self, other):
        from .arithmetic import subtract, as_range
        other = as_range(other)
        return NotImplemented if other is None else subtract(self, other)

    def __rsub__(self, other):
        from .arithmetic import subtract, as_range
        other = as_range(other)
        return NotImplemented if other is None else subtract(other, self)

    def __mul__(self, other):
        from .arithmetic import multiply, as_range
        other = as_range(other)
        return NotImplemented if other is None else multiply(self, other)

    def __rmul__(self, other):
        from .arithmetic import multiply, as_range
        other = as_range(other)
        return NotImplemented if other is None else multiply(other, self)

    def __truediv__(self, other):
        from .arithmetic import divide, as_range
        other = as_range(other)
        return NotImplemented if other is None else divide(self, other)

    def __rtruediv__(self, other):
        from .arithmetic import divide, as_range
        other = as_range(other)
        return NotImplemented if other is None else divide(other, self)

    # ---------------------------------------- Comparison, Hashing --------------------------------------------

    def __cmp__(self, other):
        """
        Total order on ranges: the empty range comes first, then ranges are ordered by their left side (unbounded
        first, then by value, closed before open) and then by their right side (by value, open before closed,
        unbounded last).
        """
        if not isinstance(other, Range):
            return NotImplemented
        a, b = self, other
        if a.is_empty and b.is_empty:
            return 0
        if a.is_empty:
            return -1
        if b.is_empty:
            return 1

        if a.is_left_bounded and b.is_left_bounded:
            if a._min > b._min:
                return 1
            if a._min < b._min:
                return -1
            if a.is_left_closed != b.is_left_closed:
                return -1 if a.is_left_closed else 1
        elif a.is_left_bounded or b.is_left_bounded:
            return 1 if a.is_left_bounded else -1

        if a.is_right_bounded and b.is_right_bounded:
            if a._max < b._max:
                return -1
            if a._max > b._max:
                return 1
            if a.is_right_closed != b.is_right_closed:
                return 1 if a.is_right_closed else -1
        elif a.is_right_bounded or b.is_right_bounded:
            return -1 if a.is_right_bounded else 1

        return 0

    def __hash__(self):
        return hash_sequence((self._min, self._max, self._left.value, self._right.value))

    # --------------------------------------- Text and Serialization ------------------------------------------

    def __str__(self):
        if self.is_empty:
            return "{}"
        if self.is_universal:
            return "*"
        fmt = formatting_settings.format_value
        if self.is_single:
            return fmt(self._min)
        if self._left is BoundKind.unbound:
            return ("<=" if self.is_right_closed else "<") + fmt(self._max)
        if self._right is BoundKind.unbound:
            return (">=" if self.is_left_closed else ">") + fmt(self._min)
        return "{}{},{}{}".format("[" if self.is_left_closed else "(", fmt(self._min),
                                  fmt(self._max), "]" if self.is_right_closed else ")")

    def _mode(self):
        if self.is_universal:
            return "*"
        if self._left is BoundKind.unbound:
            return "<=" if self.is_right_closed else "<"
        if self._right is BoundKind.unbound:
            return ">=" if self.is_left_closed else ">"
        return ("[" if self.is_left_closed else "(") + ("]" if self.is_right_closed else ")")

    def __repr__(self):
        if self.is_empty:
            return "Range()"
        return "Range({!r}, {!r}, {!r})".format(self._min, self._max, self._mode())

    def _to_dict(self):
        return {"min": self._min, "max": self._max, "left": self._left.name, "right": self._right.name}

    @classmethod
    def _from_dict(cls, json_dict):
        return cls(json_dict["min"], json_dict["max"], BoundKind[json_dict["left"]], BoundKind[json_dict["right"]])


# ------------------------------------------ Position Case Tables ------------------------------------------------
# Each table maps every RelativePosition of (a, b) to the result of one binary operation. The set operations
# produce lists of pieces, which the caller gathers into a RangeSet.

def _span(low: Range, high: Range) -> Range:
    # from the left side of low to the right side of high
    return Range(low.min, high.max, low.left, high.right)


def _below(a: Range, b: Range) -> Range:
    # the part of a that lies below the start of b
    return Range(a.min, b.min, a.left, ~b.left)


def _above(a: Range, b: Range) -> Range:
    # the part of a that lies above the end of b
    return Range(b.max, a.max, ~b.right, a.right)


def _first(a, b):
    return a


def _second(a, b):
    return b


_ENVELOPE = {
    _P.both_empty: _first,
    _P.b_only: _second,
    _P.a_below_b: _span,
    _P.a_touches_b: _span,
    _P.a_overlaps_b: _span,
    _P.a_extends_below_b: _first,
    _P.a_encloses_b: _first,
    _P.b_extends_above_a: _second,
    _P.equal: _first,
    _P.a_extends_above_b: _first,
    _P.b_encloses_a: _second,
    _P.b_extends_below_a: _second,
    _P.b_overlaps_a: lambda a, b: _span(b, a),
    _P.b_touches_a: lambda a, b: _span(b, a),
    _P.b_below_a: lambda a, b: _span(b, a),
    _P.a_only: _first,
}

_INTERSECTION = {
    _P.both_empty: lambda a, b: Range(),
    _P.b_only: lambda a, b: Range(),
    _P.a_below_b: lambda a, b: Range(),
    _P.a_touches_b: lambda a, b: Range(),
    _P.a_overlaps_b: lambda a, b: _span(b, a),
    _P.a_extends_below_b: _second,
    _P.a_encloses_b: _second,
    _P.b_extends_above_a: _first,
    _P.equal: _first,
    _P.a_extends_above_b: _second,
    _P.b_encloses_a: _first,
    _P.b_extends_below_a: _first,
    _P.b_overlaps_a: _span,
    _P.b_touches_a: lambda a, b: Range(),
    _P.b_below_a: lambda a, b: Range(),
    _P.a_only: lambda a, b: Range(),
}

_UNION = {
    _P.both_empty: lambda a, b: [],
    _P.b_only: lambda a, b: [b],
    _P.a_below_b: lambda a, b: [a, b],
    _P.a_touches_b: lambda a, b: [_span(a, b)],
    _P.a_overlaps_b: lambda a, b: [_span(a, b)],
    _P.a_extends_below_b: lambda a, b: [a],
    _P.a_encloses_b: lambda a, b: [a],
    _P.b_extends_above_a: lambda a, b: [b],
    _P.equal: lambda a, b: [a],
    _P.a_extends_above_b: lambda a, b: [a],
    _P.b_encloses_a: lambda a, b: [b],
    _P.b_extends_below_a: lambda a, b: [b],
    _P.b_overlaps_a: lambda a, b: [_span(b, a)],
    _P.b_touches_a: lambda a, b: [_span(b, a)],
    _P.b_below_a: lambda a, b: [b, a],
    _P.a_only: lambda a, b: [a],
}

_DIFFERENCE = {
    _P.both_empty: lambda a, b: [],
    _P.b_only: lambda a, b: [],
    _P.a_below_b: lambda a, b: [a],
    _P.a_touches_b: lambda a, b: [a],
    _P.a_overlaps_b: lambda a, b: [_below(a, b)],
    _P.a_extends_below_b: lambda a, b: [_below(a, b)],
    _P.a_encloses_b: lambda a, b: [_below(a, b), _above(a, b)],
    _P.b_extends_above_a: lambda a, b: [],
    _P.equal: lambda a, b: [],
    _P.a_extends_above_b: lambda a, b: [_above(a, b)],
    _P.b_encloses_a: lambda a, b: [],
    _P.b_extends_below_a: lambda a, b: [],
    _P.b_overlaps_a: lambda a, b: [_above(a, b)],
    _P.b_touches_a: lambda a, b: [a],
    _P.b_below_a: lambda a, b: [a],
    _P.a_only: lambda a, b: [a],
}

_SYMMETRIC_DIFFERENCE = {
    _P.both_empty: lambda a, b: [],
    _P.b_only: lambda a, b: [b],
    _P.a_below_b: lambda a, b: [a, b],
    _P.a_touches_b: lambda a, b: [_span(a, b)],
    _P.a_overlaps_b: lambda a, b: [_below(a, b), _above(b, a)],
    _P.a_extends_below_b: lambda a, b: [_below(a, b)],
    _P.a_encloses_b: lambda a, b: [_below(a, b), _above(a, b)],
    _P.b_extends_above_a: lambda a, b: [_above(b, a)],
    _P.equal: lambda a, b: [],
    _P.a_extends_above_b: lambda a, b: [_above(a, b)],
    _P.b_encloses_a: lambda a, b: [_below(b, a), _above(b, a)],
    _P.b_extends_below_a: lambda a, b: [_below(b, a)],
    _P.b_overlaps_a: lambda a, b: [_below(b, a), _above(a, b)],
    _P.b_touches_a: lambda a, b: [_span(b, a)],
    _P.b_below_a: lambda a, b: [b, a],
    _P.a_only: lambda a, b: [a],
}
