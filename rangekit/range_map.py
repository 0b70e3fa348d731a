"""
Module containing the :class:`RangeMap` class, which associates values with disjoint ranges of keys and falls back
to a default value for keys outside every stored range.

>>> m = RangeMap("-")
>>> m[Range(1.0, 7.0)] = "A"
>>> m[Range(3.0, 7.0)] = "B"
>>> print(m)
{[1,3):A,[3,7]:B}
>>> m[0.0], m[2.0], m[3.0], m[9.0]
('-', 'A', 'B', '-')
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
from sortedcontainers import SortedDict
from .ordering import RelativePosition, RangeMatch
from .range import Range
from .settings import formatting_settings
from .utilities import SavesToJSON, ComparesByCmp, hash_sequence, hash_mix

# distinguishes "no fallback given" from a fallback of None
_missing = object()


class RangeMap(ComparesByCmp, SavesToJSON):

    """
    A mapping from ranges of keys to values. Stored ranges never overlap; inserting a range overwrites whatever
    part of the existing entries it covers, and adjacent or overlapping entries holding equal values are merged.

    :param default: the value returned for keys that are not in any stored range
    :param items: an iterable of (range, value) pairs, or a dictionary from ranges to values, inserted in order
    """

    def __init__(self, default=None, items=None):
        self._entries = SortedDict()
        self._default = default
        if items is not None:
            for key_range, value in (items.items() if isinstance(items, dict) else items):
                self.insert(key_range, value)

    @classmethod
    def from_string(cls, text: str, key_type=None, value_type=None, default=None) -> 'RangeMap':
        """
        Parses a range map from text of the form "{k1:v1,k2:v2,...}", where each key uses the textual range syntax.

        >>> print(RangeMap.from_string("{1-5:x, 3-8:y}", int))
        {[1,2]:x,[3,8]:y}
        """
        from .parsing import parse_range_map
        return cls(default, parse_range_map(text, key_type, value_type))

    # --------------------------------------------- Lookup ------------------------------------------------

    def _find(self, key):
        # the stored range containing key, or None
        if len(self._entries) == 0:
            return None
        start = max(self._entries.bisect_left(Range(key)) - 1, 0)
        for stored in self._entries.islice(start):
            match = stored.match(key)
            if match is not RangeMatch.high:
                return stored if match is RangeMatch.match else None
        return None

    def __getitem__(self, key):
        stored = self._find(key)
        return self._default if stored is None else self._entries[stored]

    def get(self, key, fallback=_missing):
        """
        The value associated with the given key, or the fallback if one is given and no stored range contains the
        key. Without a fallback, this is the same as ``map[key]``.
        """
        stored = self._find(key)
        if stored is None:
            return self._default if fallback is _missing else fallback
        return self._entries[stored]

    def find(self, key):
        """
        The stored entry whose range contains the given key, as a (range, value) tuple, or None if there is none.

        >>> RangeMap(0, [(Range(1, 4), 10)]).find(2)
        (Range(1, 4, '[]'), 10)
        """
        stored = self._find(key)
        return None if stored is None else (stored, self._entries[stored])

    def contains(self, key) -> bool:
        """Whether some stored range contains the given key."""
        return self._find(key) is not None

    def __contains__(self, key):
        return self.contains(key)

    @property
    def default_value(self):
        """The value returned for keys that are not in any stored range."""
        return self._default

    @default_value.setter
    def default_value(self, value):
        self._default = value

    @property
    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def __bool__(self):
        return not self.is_empty

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def keys(self):
        return self._entries.keys()

    def values(self):
        return self._entries.values()

    def items(self):
        return self._entries.items()

    def copy(self) -> 'RangeMap':
        result = RangeMap(self._default)
        result._entries.update(self._entries)
        return result

    # -------------------------------------------- Mutation -----------------------------------------------

    def insert(self, key_range: Range, value) -> None:
        """
        Associates every key in the given range with the given value. Existing entries are trimmed (or split) where
        the new range covers them, and entries with an equal value that overlap or touch the new range are merged
        into it.
        """
        if not isinstance(key_range, Range):
            key_range = Range(key_range)
        if key_range.is_empty:
            return
        merged_range = key_range
        removed, added = [], []
        # two entries may lie before the new range and still touch it: a single point and the one below it
        start = max(self._entries.bisect_right(key_range) - 2, 0)
        for stored in self._entries.islice(start):
            position = merged_range.order(stored)
            if position <= RelativePosition.a_below_b:
                break
            stored_value = self._entries[stored]
            if position <= RelativePosition.b_touches_a and stored_value == value:
                merged_range = merged_range.envelope(stored)
                removed.append(stored)
            elif position <= RelativePosition.b_overlaps_a:
                added.extend((piece, stored_value) for piece in stored.set_difference(key_range))
                removed.append(stored)
        for stored in removed:
            del self._entries[stored]
        self._entries.update(added)
        if merged_range != key_range:
            logging.debug("Merged {} into {} holding an equal value.".format(key_range, merged_range))
        self._entries[merged_range] = value

    def __setitem__(self, key_range, value):
        self.insert(key_range, value)

    def erase(self, key_range: Range) -> None:
        """
        Removes the given range from the map, so that its keys revert to the default value. Entries it only partly
        covers are trimmed or split and keep their values.
        """
        if not isinstance(key_range, Range):
            key_range = Range(key_range)
        if key_range.is_empty or self.is_empty:
            return
        start = max(self._entries.bisect_left(key_range) - 1, 0)
        trimmed = []
        for stored in self._entries.islice(start):
            position = key_range.order(stored)
            if position <= RelativePosition.a_touches_b:
                break
            if position <= RelativePosition.b_overlaps_a:
                trimmed.append(stored)
        for stored in trimmed:
            stored_value = self._entries.pop(stored)
            for piece in stored.set_difference(key_range):
                self._entries[piece] = stored_value

    def __delitem__(self, key_range):
        self.erase(key_range)

    def clear(self) -> None:
        self._entries.clear()

    def reset(self, default=None) -> None:
        """Removes every entry and sets a new default value."""
        self._default = default
        self.clear()

    # ---------------------------------------- Comparison, Hashing --------------------------------------------

    def __cmp__(self, other):
        """
        Lexicographic comparison of the stored (range, value) entries, with a prefix coming before any longer map.
        The default values take no part in the comparison.
        """
        if not isinstance(other, RangeMap):
            return NotImplemented
        for (a_range, a_value), (b_range, b_value) in zip(self._entries.items(), other._entries.items()):
            c = a_range.__cmp__(b_range)
            if c != 0:
                return c
            if a_value != b_value:
                return -1 if a_value < b_value else 1
        return len(self._entries) - len(other._entries)

    def __eq__(self, other):
        if not isinstance(other, RangeMap):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash_sequence(hash_mix(hash(key_range), hash(value)) for key_range, value in self._entries.items())

    # --------------------------------------- Text and Serialization ------------------------------------------

    def __str__(self):
        fmt = formatting_settings.format_value
        return "{" + ",".join("{}:{}".format(k, fmt(v)) for k, v in self._entries.items()) + "}"

    def __repr__(self):
        return "RangeMap({!r}, [{}])".format(
            self._default, ", ".join("({!r}, {!r})".format(k, v) for k, v in self._entries.items())
        )

    def _to_dict(self):
        return {"default": self._default, "entries": [[k._to_dict(), v] for k, v in self._entries.items()]}

    @classmethod
    def _from_dict(cls, json_dict):
        return cls(json_dict["default"], [(Range._from_dict(k), v) for k, v in json_dict["entries"]])
