"""
rangekit: interval algebra over ordered domains. Provides immutable ranges with closed, open and unbounded ends,
normalized sets of ranges, maps from ranges to values, range arithmetic, and a compact textual syntax for all three.
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

from .categories import DomainCategory, register_stepwise
from .boundaries import BoundKind, BoundaryKind, Boundary, InvalidBoundsError
from .ordering import RelativePosition, RangeMatch
from .range import Range
from .range_set import RangeSet
from .range_map import RangeMap
from .parsing import RangeFormatError
from .settings import formatting_settings
from ._package_info import version as __version__
from ._package_info import author as __author__
