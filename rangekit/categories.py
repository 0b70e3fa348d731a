"""
Classification of the value types that ranges can be built over. Every type falls into one :class:`DomainCategory`,
which decides whether open bounds are rewritten as closed ones, how the size of a range is measured, and whether
the range supports arithmetic. The per-category behavior lives in a single :class:`Domain` adapter, obtained with
:func:`domain_for`, which is the only thing the rest of the package consults.
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
from functools import lru_cache
import numbers
import decimal
import datetime
from typing import Callable, Type


class DomainCategory(Enum):

    """
    The algebraic capability class of a value type.

    - none: not usable in a range (unordered, or bool)
    - continuous: ordered with full arithmetic and no guaranteed step (float, Fraction, Decimal)
    - integral: stepwise with full arithmetic (int)
    - ordered: only comparison is available (str, tuple, datetime)
    - stepwise: ordered with a successor and predecessor (date, or a registered cursor-like type)
    """

    none = 0
    continuous = 1
    integral = 2
    ordered = 3
    stepwise = 4

    @property
    def is_discrete(self) -> bool:
        """Whether values of this category can be stepped, so that open bounds normalize to closed ones."""
        return self in (DomainCategory.stepwise, DomainCategory.integral)

    @property
    def is_arithmetic(self) -> bool:
        """Whether ranges of this category support +, - and *."""
        return self in (DomainCategory.continuous, DomainCategory.integral)

    def __repr__(self):
        return "DomainCategory.{}".format(self.name)


# types registered via register_stepwise, mapped to their (successor, predecessor) functions
_registered_steps = {}


def register_stepwise(value_type: Type, successor: Callable, predecessor: Callable) -> None:
    """
    Registers a type as stepwise (or integral, if it also has full arithmetic), using the given functions to step
    forward and backward.

    :param value_type: the type to register
    :param successor: function taking a value and returning the next value
    :param predecessor: function taking a value and returning the previous value
    """
    _registered_steps[value_type] = (successor, predecessor)
    category_of.cache_clear()
    _domain_for_category_and_type.cache_clear()


def _defines(value_type, *method_names):
    return all(getattr(value_type, name, None) is not getattr(object, name, None)
               and getattr(value_type, name, None) is not None for name in method_names)


def _find_steps(value_type):
    for registered_type, steps in _registered_steps.items():
        if issubclass(value_type, registered_type):
            return steps
    if callable(getattr(value_type, "successor", None)) and callable(getattr(value_type, "predecessor", None)):
        return (lambda value: value.successor()), (lambda value: value.predecessor())
    return None


@lru_cache(maxsize=None)
def category_of(value_type: Type) -> DomainCategory:
    """
    Classifies a value type.

    >>> category_of(int), category_of(float), category_of(str), category_of(bool)
    (DomainCategory.integral, DomainCategory.continuous, DomainCategory.ordered, DomainCategory.none)
    >>> category_of(datetime.date)
    DomainCategory.stepwise
    """
    if issubclass(value_type, bool):
        return DomainCategory.none
    if issubclass(value_type, numbers.Integral):
        return DomainCategory.integral
    if issubclass(value_type, (numbers.Real, decimal.Decimal)):
        return DomainCategory.continuous
    if issubclass(value_type, numbers.Complex):
        return DomainCategory.none
    if issubclass(value_type, datetime.datetime):
        return DomainCategory.ordered
    if issubclass(value_type, datetime.date):
        return DomainCategory.stepwise
    if not _defines(value_type, "__lt__"):
        return DomainCategory.none
    arithmetic = _defines(value_type, "__add__", "__sub__", "__mul__", "__truediv__")
    if _find_steps(value_type) is not None:
        return DomainCategory.integral if arithmetic else DomainCategory.stepwise
    return DomainCategory.continuous if arithmetic else DomainCategory.ordered


def common_category(*values) -> DomainCategory:
    """
    The category shared by a group of boundary values, ignoring None placeholders. Mixed numeric types resolve to
    the wider category, so an int bound combined with a float bound is continuous. Returns None if no values are
    given.

    >>> common_category(1, 2.5)
    DomainCategory.continuous
    >>> common_category(None, 3)
    DomainCategory.integral
    """
    categories = {category_of(type(value)) for value in values if value is not None}
    if len(categories) == 0:
        return None
    if len(categories) == 1:
        return categories.pop()
    if categories == {DomainCategory.integral, DomainCategory.continuous}:
        return DomainCategory.continuous
    if DomainCategory.none in categories:
        return DomainCategory.none
    return DomainCategory.ordered


class Domain:

    """
    Adapter carrying the per-category behavior of a value type: stepping between neighboring values, advancing by
    a number of steps, and measuring the distance between two values.

    :param category: the :class:`DomainCategory` this adapter implements
    :param successor: function returning the next value (discrete categories only)
    :param predecessor: function returning the previous value (discrete categories only)
    """

    def __init__(self, category: DomainCategory, successor: Callable = None, predecessor: Callable = None):
        self.category = category
        self._successor = successor
        self._predecessor = predecessor

    @property
    def is_discrete(self) -> bool:
        return self.category.is_discrete

    def successor(self, value):
        if self._successor is None:
            raise TypeError("{} values cannot be stepped".format(self.category.name))
        return self._successor(value)

    def predecessor(self, value):
        if self._predecessor is None:
            raise TypeError("{} values cannot be stepped".format(self.category.name))
        return self._predecessor(value)

    def advance(self, value, steps: int):
        """
        Moves a value the given number of steps forward (or backward, if negative).
        """
        step = self.successor if steps >= 0 else self.predecessor
        for _ in range(abs(steps)):
            value = step(value)
        return value

    def distance(self, a, b):
        """
        The distance from a to b: a number of steps for discrete categories, or the difference b - a for
        continuous ones.
        """
        if self.category is DomainCategory.continuous:
            return b - a
        if not self.is_discrete:
            raise TypeError("cannot measure distances between {} values".format(self.category.name))
        count = 0
        while a < b:
            a = self.successor(a)
            count += 1
        return count

    def __repr__(self):
        return "Domain({})".format(self.category)


class _IntegerDomain(Domain):

    def __init__(self):
        super().__init__(DomainCategory.integral, lambda value: value + 1, lambda value: value - 1)

    def advance(self, value, steps: int):
        return value + steps

    def distance(self, a, b):
        return b - a


class _DateDomain(Domain):

    _one_day = datetime.timedelta(days=1)

    def __init__(self):
        super().__init__(DomainCategory.stepwise, lambda value: value + self._one_day,
                         lambda value: value - self._one_day)

    def advance(self, value, steps: int):
        return value + datetime.timedelta(days=steps)

    def distance(self, a, b):
        return (b - a).days


@lru_cache(maxsize=None)
def _domain_for_category_and_type(category, value_type):
    if value_type is not None:
        if issubclass(value_type, numbers.Integral) and category is DomainCategory.integral:
            return _IntegerDomain()
        steps = _find_steps(value_type)
        if steps is not None and category.is_discrete:
            return Domain(category, *steps)
        if issubclass(value_type, datetime.date) and category is DomainCategory.stepwise:
            return _DateDomain()
    return Domain(category)


def domain_for(*values) -> Domain:
    """
    Returns the :class:`Domain` adapter for a group of boundary values (None placeholders are ignored). Raises a
    TypeError if the values cannot form a range together.

    >>> domain_for(1, 5).successor(1)
    2
    >>> domain_for(1, 5.5).is_discrete
    False
    """
    category = common_category(*values)
    if category is None:
        return Domain(DomainCategory.none)
    if category is DomainCategory.none:
        raise TypeError("values of type {} cannot be the bounds of a range".format(
            ", ".join(sorted({type(value).__name__ for value in values if value is not None}))
        ))
    value_type = next(type(value) for value in values if value is not None)
    return _domain_for_category_and_type(category, value_type)
