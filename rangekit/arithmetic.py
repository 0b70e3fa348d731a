"""
Arithmetic on ranges. Sums, differences and products are computed on the boundaries (see
:class:`~rangekit.boundaries.Boundary`), so open, closed and unbounded ends propagate correctly, including through
sign changes and zeros. Division multiplies by the reciprocal of the divisor; since a divisor spanning zero has a
reciprocal in two pieces, quotients are returned as a :class:`~rangekit.range_set.RangeSet`.

>>> print(Range(1, 2) + Range(10, 20))
[11,22]
>>> print(Range(-2.0, 3.0, "(]") * Range(4.0, 5.0))
(-10,15]
>>> print(Range(1.0, 2.0) / Range(-1.0, 1.0))
{<=-1,>=1}
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
from .boundaries import Boundary, BoundaryKind, BoundKind
from .categories import common_category, category_of, DomainCategory
from .range import Range


def check_arithmetic(*ranges: Range) -> None:
    """
    Raises a TypeError unless the values of the given ranges all support arithmetic.
    """
    values = [value for r in ranges for value in (r.min, r.max)]
    category = common_category(*values)
    if category is not None and not category.is_arithmetic:
        raise TypeError("Arithmetic is not defined for ranges of {} values.".format(category.name))


def as_range(value):
    """
    Turns a number into a single-point range so it can be combined with a range; ranges pass through unchanged.
    Returns None for anything else.
    """
    if isinstance(value, Range):
        return value
    try:
        if category_of(type(value)).is_arithmetic:
            return Range(value)
    except TypeError:
        pass
    return None


def _zero_like(*ranges: Range):
    for r in ranges:
        for value in (r.min, r.max):
            if value is not None:
                return value - value
    return 0.0


def range_from_boundaries(left: Boundary, right: Boundary) -> Range:
    """
    Builds a range from a left and a right boundary; infinite boundaries become unbounded sides.
    """
    def to_bound_kind(kind):
        if kind is BoundaryKind.empty:
            return BoundKind.empty
        if kind is BoundaryKind.open:
            return BoundKind.open
        if kind is BoundaryKind.closed:
            return BoundKind.closed
        return BoundKind.unbound

    return Range(left.value if left.has_value else None, right.value if right.has_value else None,
                 to_bound_kind(left.kind), to_bound_kind(right.kind))


def contains_zero(r: Range) -> bool:
    """
    Whether zero lies within the range.

    >>> contains_zero(Range(-1.0, 1.0)), contains_zero(Range(0.0, 1.0, "(]"))
    (True, False)
    """
    if r.is_empty:
        return False
    zero = _zero_like(r)
    right_reaches = r.right is BoundKind.unbound or (r.right is BoundKind.closed and r.max >= zero) \
        or (r.right is BoundKind.open and r.max > zero)
    if not right_reaches:
        return False
    return r.left is BoundKind.unbound or (r.left is BoundKind.closed and r.min <= zero) \
        or (r.left is BoundKind.open and r.min < zero)


def _reciprocal_of_range(r: Range, zero) -> Range:
    # reciprocal of a range that does not straddle zero
    if r.is_empty:
        return Range()
    left_value = right_value = zero
    if r.left is BoundKind.unbound:
        right_kind = BoundKind.open
    elif r.min == zero:
        right_kind = BoundKind.unbound
    else:
        right_value = 1 / r.min
        right_kind = r.left
    if r.right is BoundKind.unbound:
        left_kind = BoundKind.open
    elif r.max == zero:
        left_kind = BoundKind.unbound
    else:
        left_value = 1 / r.max
        left_kind = r.right
    return Range(left_value, right_value, left_kind, right_kind)


def reciprocal(r: Range, zero=None):
    """
    The set of reciprocals of the values in a range. If the range contains zero, it is split into its negative
    and positive parts, whose reciprocals are unbounded on the side nearest zero.

    :param r: a continuous range
    :param zero: the zero of the value type, if it cannot be inferred from the range itself
    :return: a :class:`~rangekit.range_set.RangeSet`

    >>> print(reciprocal(Range(2.0, 4.0)))
    {[0.25,0.5]}
    >>> print(reciprocal(Range(-2.0, 4.0)))
    {<=-0.5,>=0.25}
    """
    from .range_set import RangeSet
    if zero is None:
        zero = _zero_like(r)
    if r.is_empty:
        return RangeSet()
    if contains_zero(r):
        logging.debug("Splitting {} at zero to take its reciprocal.".format(r))
        negative_part = Range(r.min, zero, r.left, BoundKind.open)
        positive_part = Range(zero, r.max, BoundKind.open, r.right)
        return RangeSet([_reciprocal_of_range(negative_part, zero), _reciprocal_of_range(positive_part, zero)])
    return RangeSet(_reciprocal_of_range(r, zero))


def negate(r: Range) -> Range:
    check_arithmetic(r)
    if r.is_empty:
        return r
    return Range(None if r.max is None else -r.max, None if r.min is None else -r.min, r.right, r.left)


def add(a: Range, b: Range) -> Range:
    check_arithmetic(a, b)
    if a.is_empty or b.is_empty:
        return Range()
    return range_from_boundaries(a.left_boundary + b.left_boundary, a.right_boundary + b.right_boundary)


def subtract(a: Range, b: Range) -> Range:
    return add(a, negate(b))


def multiply(a: Range, b: Range) -> Range:
    """
    The product of two ranges: the extremes among the four products of their boundaries.
    """
    check_arithmetic(a, b)
    if a.is_empty or b.is_empty:
        return Range()
    al, ar = a.left_boundary, a.right_boundary
    bl, br = b.left_boundary, b.right_boundary
    products = [al * bl, al * br, ar * bl, ar * br]
    left = right = products[0]
    for product in products[1:]:
        if product.compare_ll(left):
            left = product
        if right.compare_rr(product):
            right = product
    return range_from_boundaries(left, right)


def divide(a: Range, b: Range):
    """
    The quotient of two continuous ranges, as a :class:`~rangekit.range_set.RangeSet`.
    """
    from .range_set import RangeSet
    category = common_category(a.min, a.max, b.min, b.max)
    if category is not None and category is not DomainCategory.continuous:
        raise TypeError("Division is only defined for continuous ranges, not {} ones.".format(category.name))
    if a.is_empty or b.is_empty:
        return RangeSet()
    quotient = RangeSet()
    for reciprocal_piece in reciprocal(b, _zero_like(b, a)):
        quotient.insert(multiply(a, reciprocal_piece))
    return quotient
