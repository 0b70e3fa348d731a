"""
Module containing the :class:`RangeSet` class: a set of values stored as sorted, disjoint ranges. Inserting a range
merges it with every stored range it overlaps or touches, and erasing a range trims the stored ranges around it, so
the stored ranges never overlap and never touch.

>>> s = RangeSet([Range(1.0, 3.0), Range(5.0, 7.0)])
>>> s.insert(Range(3.0, 5.0, "()"))
>>> print(s)
{[1,7]}
>>> s.erase(Range(2.0, 4.0))
>>> print(s)
{[1,2),(4,7]}
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

from sortedcontainers import SortedList
from .boundaries import BoundKind
from .ordering import RelativePosition, RangeMatch
from .range import Range
from .utilities import SavesToJSON, ComparesByCmp, hash_sequence


class RangeSet(ComparesByCmp, SavesToJSON):

    """
    A normalized set of ranges.

    :param items: a :class:`~rangekit.range.Range`, another RangeSet, or an iterable of ranges and plain values
        (each plain value is added as a single point). A string is treated as a single value.
    """

    def __init__(self, items=None):
        self._ranges = SortedList()
        if items is None:
            return
        if isinstance(items, (Range, str)) or not _is_iterable(items):
            items = [items]
        for item in items:
            self.insert(item)

    @classmethod
    def from_string(cls, text: str, value_type=None) -> 'RangeSet':
        """
        Parses a range set from text of the form "{r1,r2,...}", where each member uses the textual range syntax.

        >>> print(RangeSet.from_string("{[5,10], 1-3, 4}", int))
        {[1,10]}
        """
        from .parsing import parse_range_set
        return cls(parse_range_set(text, value_type))

    # --------------------------------------------- Queries -----------------------------------------------

    @property
    def is_empty(self) -> bool:
        return len(self._ranges) == 0

    def __bool__(self):
        return not self.is_empty

    def __len__(self):
        return len(self._ranges)

    def __iter__(self):
        return iter(self._ranges)

    def __reversed__(self):
        return reversed(self._ranges)

    def __getitem__(self, index):
        return self._ranges[index]

    def contains(self, value) -> bool:
        """
        Whether the given value lies in one of the stored ranges.
        """
        if self.is_empty:
            return False
        index = max(self._ranges.bisect_left(Range(value)) - 1, 0)
        for stored in self._ranges.islice(index):
            match = stored.match(value)
            if match is RangeMatch.match:
                return True
            if match is RangeMatch.low:
                return False
        return False

    def __contains__(self, item):
        if isinstance(item, Range):
            return item.is_empty or any(stored.includes(item) for stored in self._ranges)
        return self.contains(item)

    def envelope(self) -> Range:
        """
        The smallest single range containing every stored range.

        >>> print(RangeSet([Range(1, 2), Range(6, 9)]).envelope())
        [1,9]
        """
        if self.is_empty:
            return Range()
        return self._ranges[0].envelope(self._ranges[-1])

    def issubset(self, other) -> bool:
        return (self - _as_range_set(other)).is_empty

    def issuperset(self, other) -> bool:
        return (_as_range_set(other) - self).is_empty

    # -------------------------------------------- Mutation -----------------------------------------------

    def insert(self, item) -> None:
        """
        Adds a range (or a single value) to the set, merging it with any stored ranges it overlaps or touches.
        """
        new_range = item if isinstance(item, Range) else Range(item)
        if new_range.is_empty:
            return
        start = max(self._ranges.bisect_left(new_range) - 1, 0)
        merged_range = new_range
        merged = []
        for stored in self._ranges.islice(start):
            position = new_range.order(stored)
            if position <= RelativePosition.a_below_b:
                break
            if position <= RelativePosition.b_touches_a:
                merged_range = merged_range.envelope(stored)
                merged.append(stored)
        for stored in merged:
            self._ranges.remove(stored)
        self._ranges.add(merged_range)

    add = insert

    def erase(self, item) -> None:
        """
        Removes a range (or a single value) from the set, trimming or splitting any stored ranges it overlaps.
        """
        removed_range = item if isinstance(item, Range) else Range(item)
        if removed_range.is_empty or self.is_empty:
            return
        start = max(self._ranges.bisect_left(removed_range) - 1, 0)
        trimmed = []
        for stored in self._ranges.islice(start):
            position = removed_range.order(stored)
            if position <= RelativePosition.a_touches_b:
                break
            if position <= RelativePosition.b_overlaps_a:
                trimmed.append(stored)
        for stored in trimmed:
            self._ranges.remove(stored)
            self._ranges.update(stored.set_difference(removed_range))

    discard = erase

    def clear(self) -> None:
        self._ranges.clear()

    def copy(self) -> 'RangeSet':
        result = RangeSet()
        result._ranges.update(self._ranges)
        return result

    # ------------------------------------------ Set Algebra ----------------------------------------------

    def complement(self) -> 'RangeSet':
        """
        The set of all values not in this set.

        >>> print(RangeSet([Range(1.0, 2.0), Range(4.0, 5.0, "()")]).complement())
        {<1,(2,4],>=5}
        """
        result = RangeSet()
        if self.is_empty:
            result._ranges.add(Range.all())
            return result
        first, last = self._ranges[0], self._ranges[-1]
        if first.is_left_bounded:
            result._ranges.add(Range(first.min, first.min, BoundKind.unbound, ~first.left))
        for lower, upper in zip(self._ranges, self._ranges.islice(1)):
            gap = Range(lower.max, upper.min, ~lower.right, ~upper.left)
            if not gap.is_empty:
                result._ranges.add(gap)
        if last.is_right_bounded:
            result._ranges.add(Range(last.max, last.max, ~last.right, BoundKind.unbound))
        return result

    def set_union(self, other) -> 'RangeSet':
        result = self.copy()
        for r in _as_range_set(other):
            result.insert(r)
        return result

    def set_intersection(self, other) -> 'RangeSet':
        return self.complement().set_union(_as_range_set(other).complement()).complement()

    def set_difference(self, other) -> 'RangeSet':
        result = self.copy()
        for r in _as_range_set(other):
            result.erase(r)
        return result

    def set_symmetric_difference(self, other) -> 'RangeSet':
        other = _as_range_set(other)
        return self.set_difference(other).set_union(other.set_difference(self))

    def __invert__(self):
        return self.complement()

    def __or__(self, other):
        return self.set_union(other)

    def __and__(self, other):
        return self.set_intersection(other)

    def __sub__(self, other):
        return self.set_difference(other)

    def __xor__(self, other):
        return self.set_symmetric_difference(other)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def __rsub__(self, other):
        return _as_range_set(other).set_difference(self)

    def __ior__(self, other):
        for r in _as_range_set(other):
            self.insert(r)
        return self

    def __isub__(self, other):
        for r in _as_range_set(other):
            self.erase(r)
        return self

    def __iand__(self, other):
        self._ranges = self.set_intersection(other)._ranges
        return self

    def __ixor__(self, other):
        self._ranges = self.set_symmetric_difference(other)._ranges
        return self

    # ---------------------------------------- Comparison, Hashing --------------------------------------------

    def __cmp__(self, other):
        """
        Lexicographic comparison of the stored ranges, with a prefix coming before any longer set.
        """
        if not isinstance(other, RangeSet):
            return NotImplemented
        for a, b in zip(self._ranges, other._ranges):
            c = a.__cmp__(b)
            if c != 0:
                return c
        return len(self._ranges) - len(other._ranges)

    def __hash__(self):
        return hash_sequence(self._ranges)

    # --------------------------------------- Text and Serialization ------------------------------------------

    def __str__(self):
        return "{" + ",".join(str(r) for r in self._ranges) + "}"

    def __repr__(self):
        return "RangeSet([{}])".format(", ".join(repr(r) for r in self._ranges))

    def _to_dict(self):
        return {"ranges": [r._to_dict() for r in self._ranges]}

    @classmethod
    def _from_dict(cls, json_dict):
        return cls(Range._from_dict(range_dict) for range_dict in json_dict["ranges"])


def _is_iterable(x) -> bool:
    try:
        iter(x)
    except TypeError:
        return False
    return True


def _as_range_set(other) -> RangeSet:
    if isinstance(other, RangeSet):
        return other
    return RangeSet(other)
