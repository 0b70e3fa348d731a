"""
Bound kinds and boundary values. A :class:`Range` stores a :class:`BoundKind` for each side; when two ranges are
compared or combined arithmetically, each side is turned into a :class:`Boundary`, which pairs a value with a
:class:`BoundaryKind` that also knows which infinity an unbounded side stands for.
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

from enum import Enum
from functools import total_ordering
from .categories import domain_for


class InvalidBoundsError(ValueError):
    """Raised when a range is constructed with an inconsistent combination of bound kinds or values."""
    pass


class BoundKind(Enum):

    """
    How one side of a range ends. Inverting with ``~`` swaps closed and open, and swaps empty and unbound, which is
    what taking the complement of a side requires.

    >>> ~BoundKind.closed
    BoundKind.open
    >>> ~BoundKind.unbound
    BoundKind.empty
    """

    empty = 0
    closed = 1
    open = 2
    unbound = 3

    def __invert__(self):
        return BoundKind(3 - self.value)

    def __repr__(self):
        return "BoundKind.{}".format(self.name)


_modes = {
    "()": (BoundKind.open, BoundKind.open),
    "(]": (BoundKind.open, BoundKind.closed),
    "[)": (BoundKind.closed, BoundKind.open),
    "[]": (BoundKind.closed, BoundKind.closed),
    ">": (BoundKind.open, BoundKind.unbound),
    "<": (BoundKind.unbound, BoundKind.open),
    ">=": (BoundKind.closed, BoundKind.unbound),
    "<=": (BoundKind.unbound, BoundKind.closed),
    "*": (BoundKind.unbound, BoundKind.unbound),
}


def kinds_from_mode(mode: str):
    """
    Translates a textual mode into a (left, right) pair of bound kinds.

    :param mode: one of "()", "(]", "[)", "[]", ">", "<", ">=", "<=", "*"

    >>> kinds_from_mode("[)")
    (BoundKind.closed, BoundKind.open)
    >>> kinds_from_mode("<>")
    Traceback (most recent call last):
      ...
    ValueError: Invalid range mode: '<>'
    """
    try:
        return _modes[mode]
    except KeyError:
        raise ValueError("Invalid range mode: {!r}".format(mode)) from None


@total_ordering
class BoundaryKind(Enum):

    """
    The kind of a single boundary, ordered so that comparing kinds of boundaries at the same value gives the right
    answer: minus infinity is below everything, and an open boundary sits just past a closed one.
    """

    empty = -3
    minus_infinity = -2
    closed = -1
    open = 0
    plus_infinity = 1

    def __lt__(self, other):
        if not isinstance(other, BoundaryKind):
            return NotImplemented
        return self.value < other.value

    def __repr__(self):
        return "BoundaryKind.{}".format(self.name)


class Boundary:

    """
    One edge of a range: a value paired with a :class:`BoundaryKind`. The value is only meaningful when the kind is
    closed or open. Boundaries are immutable and are only built transiently, to compare or combine ranges.

    :param value: the boundary value (ignored unless the kind is closed or open)
    :param kind: the boundary kind
    """

    __slots__ = ("value", "kind")

    def __init__(self, value, kind: BoundaryKind):
        self.value = value
        self.kind = kind

    @classmethod
    def empty(cls):
        return cls(None, BoundaryKind.empty)

    @property
    def has_value(self) -> bool:
        return self.kind in (BoundaryKind.closed, BoundaryKind.open)

    def adjacent(self, other: 'Boundary') -> bool:
        """
        Whether this boundary and the other leave no element of the domain between them: the same value with one
        closed and one open, or two closed values one step apart in a stepwise or integral domain.
        """
        if not (self.has_value and other.has_value):
            return False
        if self.kind is BoundaryKind.open and other.kind is BoundaryKind.open:
            return False
        if self.value == other.value:
            return self.kind is not other.kind
        domain = domain_for(self.value, other.value)
        if domain.is_discrete and self.kind is BoundaryKind.closed and other.kind is BoundaryKind.closed:
            low, high = (self.value, other.value) if self.value < other.value else (other.value, self.value)
            return domain.successor(low) == high
        return False

    # The four comparisons below answer "is self below other", where each boundary is read as the left (l) or right
    # (r) end of a range. They differ only in how they break ties between equal values.

    def compare_ll(self, other: 'Boundary') -> bool:
        if self.has_value and other.has_value and self.value != other.value:
            return self.value < other.value
        return self.kind < other.kind

    def compare_rr(self, other: 'Boundary') -> bool:
        if not (self.has_value and other.has_value):
            return self.kind < other.kind
        if self.value != other.value:
            return self.value < other.value
        return self.kind > other.kind

    def compare_lr(self, other: 'Boundary') -> bool:
        if not (self.has_value and other.has_value):
            return self.kind < other.kind
        if self.value != other.value:
            return self.value < other.value
        return False

    def compare_rl(self, other: 'Boundary') -> bool:
        if not (self.has_value and other.has_value):
            return self.kind < other.kind
        if self.value != other.value:
            return self.value < other.value
        return self.kind is BoundaryKind.open or other.kind is BoundaryKind.open

    def _is_negative(self) -> bool:
        return self.kind is BoundaryKind.minus_infinity or (self.has_value and self.value < self.value - self.value)

    def _is_zero(self) -> bool:
        return self.has_value and self.value == self.value - self.value

    def __neg__(self):
        if self.kind is BoundaryKind.minus_infinity:
            return Boundary(self.value, BoundaryKind.plus_infinity)
        if self.kind is BoundaryKind.plus_infinity:
            return Boundary(self.value, BoundaryKind.minus_infinity)
        if self.has_value:
            return Boundary(-self.value, self.kind)
        return self

    def __add__(self, other):
        if not isinstance(other, Boundary):
            return NotImplemented
        if self.kind is BoundaryKind.empty or other.kind is BoundaryKind.empty:
            return Boundary.empty()
        if not self.has_value:
            return self
        if not other.has_value:
            return other
        both_closed = self.kind is BoundaryKind.closed and other.kind is BoundaryKind.closed
        return Boundary(self.value + other.value, BoundaryKind.closed if both_closed else BoundaryKind.open)

    def __sub__(self, other):
        if not isinstance(other, Boundary):
            return NotImplemented
        return self + -other

    def __mul__(self, other):
        if not isinstance(other, Boundary):
            return NotImplemented
        if self.kind is BoundaryKind.empty or other.kind is BoundaryKind.empty:
            return Boundary.empty()
        self_negative, other_negative = self._is_negative(), other._is_negative()
        if self_negative and other_negative:
            return -self * -other
        if self_negative:
            return -(-self * other)
        if other_negative:
            return -(self * -other)
        # both operands are now non-negative; make sure the larger one comes first
        if (self.kind is BoundaryKind.minus_infinity and other.kind is not BoundaryKind.minus_infinity) \
                or (other.kind is BoundaryKind.plus_infinity and self.kind is not BoundaryKind.plus_infinity) \
                or (self.has_value and other.has_value and self.value < other.value):
            return other * self
        a, b = self, other
        for boundary in (a, b):
            if boundary._is_zero() and boundary.kind is BoundaryKind.closed:
                return Boundary(boundary.value, BoundaryKind.closed)
        for boundary in (a, b):
            if boundary._is_zero():
                return Boundary(boundary.value, BoundaryKind.open)
        if a.kind is BoundaryKind.plus_infinity:
            return a
        both_closed = a.kind is BoundaryKind.closed and b.kind is BoundaryKind.closed
        return Boundary(a.value * b.value, BoundaryKind.closed if both_closed else BoundaryKind.open)

    def __eq__(self, other):
        if not isinstance(other, Boundary):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        return not self.has_value or self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value if self.has_value else None))

    def __str__(self):
        if self.kind is BoundaryKind.empty:
            return "{}"
        if self.kind is BoundaryKind.minus_infinity:
            return "-inf"
        if self.kind is BoundaryKind.plus_infinity:
            return "+inf"
        if self.kind is BoundaryKind.closed:
            return str(self.value)
        return "({})".format(self.value)

    def __repr__(self):
        return "Boundary({!r}, {!r})".format(self.value, self.kind)
