"""
Various utility functions used throughout rangekit: hash combination, value formatting for the textual
rendering of ranges, and package path resolution for the settings files.
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

import os
import re
import sys
import math
import functools
from typing import Any, Iterable
from expenvelope.json_serializer import SavesToJSON


# -------------------------------------------- Hash Combination ---------------------------------------------

_HASH_MASK = (1 << (sys.hash_info.width - 1)) - 1


def hash_mix(h1: int, h2: int) -> int:
    """
    Folds the hash h2 into the hash h1 (the boost-style "hash_combine" recipe), keeping the result within the
    width of a Python hash.

    >>> hash_mix(0, 0) == 0x9e3779b9
    True
    """
    return (h1 ^ (h2 + 0x9e3779b9 + (h1 << 6) + (h1 >> 2))) & _HASH_MASK


def hash_sequence(items: Iterable[Any], seed: int = 0) -> int:
    """
    Combines the hashes of the given items in order.

    :param items: hashable items; order matters
    :param seed: starting hash value
    """
    return functools.reduce(lambda h, item: hash_mix(h, hash(item)), items, seed)


# ------------------------------------------- Comparison Mixin ----------------------------------------------


class ComparesByCmp:

    """
    Mixin that derives the rich comparison operators from a single ``__cmp__`` method, which returns a negative
    number, zero or a positive number (or NotImplemented for foreign types).
    """

    def __eq__(self, other):
        result = self.__cmp__(other)
        return result if result is NotImplemented else result == 0

    def __ne__(self, other):
        result = self.__cmp__(other)
        return result if result is NotImplemented else result != 0

    def __gt__(self, other):
        result = self.__cmp__(other)
        return result if result is NotImplemented else result > 0

    def __lt__(self, other):
        result = self.__cmp__(other)
        return result if result is NotImplemented else result < 0

    def __ge__(self, other):
        result = self.__cmp__(other)
        return result if result is NotImplemented else result >= 0

    def __le__(self, other):
        result = self.__cmp__(other)
        return result if result is NotImplemented else result <= 0


# ------------------------------------------- Value Formatting ----------------------------------------------

# these must agree with the number and word tokens of the grammar in parsing.py
_number_token = re.compile(r"[+-]?(inf|(\d+(\.\d+)?|\.\d+)([eE][+-]?\d+)?)")
_word_token = re.compile(r"[^\s\[\](){}<>=,.+\-*:'\"]+")


def quote(text: str) -> str:
    """
    Wraps text in single quotes, doubling any single quote within it.

    >>> print(quote("it's"))
    'it''s'
    """
    return "'{}'".format(text.replace("'", "''"))


def format_value(value, integral_floats_as_ints: bool = True, float_precision: int = None,
                 quote_strings: bool = False) -> str:
    """
    Formats a single boundary value for the textual form of a range. Whatever the settings, the result always
    parses back as a single value token: text that would otherwise be read as a number, or as more than one token,
    is quoted.

    :param value: the value to format
    :param integral_floats_as_ints: if True, floats with no fractional part are rendered like ints (3.0 -> "3")
    :param float_precision: if not None, floats are rendered with this many significant digits
    :param quote_strings: if True, strings are always wrapped in single quotes
    :return: the formatted string

    >>> format_value(3.0)
    '3'
    >>> format_value(2.5)
    '2.5'
    >>> format_value(1 / 3, float_precision=4)
    '0.3333'
    >>> format_value("abc", quote_strings=True)
    "'abc'"
    >>> format_value("x-y"), format_value("5"), format_value(float("-inf"))
    ("'x-y'", "'5'", '-inf')
    """
    if isinstance(value, float):
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if integral_floats_as_ints and value.is_integer():
            return str(int(value))
        if float_precision is not None:
            return format(value, ".{}g".format(float_precision))
        return repr(value)
    if isinstance(value, str):
        # a string that looks like a number would come back as a number
        if quote_strings or _number_token.fullmatch(value) or not _word_token.fullmatch(value):
            return quote(value)
        return value
    text = str(value)
    if _number_token.fullmatch(text) or _word_token.fullmatch(text):
        return text
    return quote(text)


# ------------------------------------------- Package Paths ---------------------------------------------


def resolve_package_path(path: str) -> str:
    """
    Resolves a path relative to the rangekit package directory (used to locate the settings files).
    """
    if getattr(sys, 'frozen', False):
        # Running from a frozen executable, where package data lives next to the executable
        package_dir = os.path.dirname(sys.executable)
    else:
        package_dir = os.path.dirname(__file__)

    return os.path.join(package_dir, path)


__all__ = ["SavesToJSON", "ComparesByCmp", "hash_mix", "hash_sequence", "quote", "format_value", "resolve_package_path"]
