"""
The sixteen relative positions two ranges can be in, and the four results of matching a value against a range.
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

from enum import IntEnum


class RelativePosition(IntEnum):

    """
    How range a sits relative to range b. The members are numbered from -8 to 7 so that related positions can be
    grouped with comparisons: everything up to ``a_below_b`` means a lies wholly below b with a gap, everything up
    to ``b_touches_a`` means the two ranges overlap or touch, and so on. Swapping a and b maps each position to
    its mirror image (see :meth:`mirror`).
    """

    both_empty = -8
    b_only = -7
    a_below_b = -6
    a_touches_b = -5
    a_overlaps_b = -4
    a_extends_below_b = -3
    a_encloses_b = -2
    b_extends_above_a = -1
    equal = 0
    a_extends_above_b = 1
    b_encloses_a = 2
    b_extends_below_a = 3
    b_overlaps_a = 4
    b_touches_a = 5
    b_below_a = 6
    a_only = 7

    def mirror(self) -> 'RelativePosition':
        """
        The position obtained by swapping the two ranges.

        >>> RelativePosition.a_below_b.mirror()
        <RelativePosition.b_below_a: 6>
        >>> RelativePosition.equal.mirror()
        <RelativePosition.equal: 0>
        """
        return _mirrors[self]


_mirrors = {
    RelativePosition.both_empty: RelativePosition.both_empty,
    RelativePosition.b_only: RelativePosition.a_only,
    RelativePosition.a_below_b: RelativePosition.b_below_a,
    RelativePosition.a_touches_b: RelativePosition.b_touches_a,
    RelativePosition.a_overlaps_b: RelativePosition.b_overlaps_a,
    RelativePosition.a_extends_below_b: RelativePosition.b_extends_below_a,
    RelativePosition.a_encloses_b: RelativePosition.b_encloses_a,
    RelativePosition.b_extends_above_a: RelativePosition.a_extends_above_b,
    RelativePosition.equal: RelativePosition.equal,
    RelativePosition.a_extends_above_b: RelativePosition.b_extends_above_a,
    RelativePosition.b_encloses_a: RelativePosition.a_encloses_b,
    RelativePosition.b_extends_below_a: RelativePosition.a_extends_below_b,
    RelativePosition.b_overlaps_a: RelativePosition.a_overlaps_b,
    RelativePosition.b_touches_a: RelativePosition.a_touches_b,
    RelativePosition.b_below_a: RelativePosition.a_below_b,
    RelativePosition.a_only: RelativePosition.b_only,
}


class RangeMatch(IntEnum):

    """Where a value falls relative to a range: below it, inside it, above it, or nowhere (the range is empty)."""

    low = -1
    match = 0
    high = 1
    empty = 2
