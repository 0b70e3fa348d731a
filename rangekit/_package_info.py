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

name = "rangekit"

version = "0.3.1"

author = "The rangekit authors"

author_email = "rangekit@users.noreply.github.com"

description = "Interval algebra over ordered domains: ranges with open, closed and unbounded ends, their sixteen " \
              "relative positions, normalized range sets, range-keyed maps and range arithmetic."

url = "https://github.com/rangekit/rangekit"

project_urls = {
    "Source Code": "https://github.com/rangekit/rangekit",
    "Issue Tracker": "https://github.com/rangekit/rangekit/issues",
}

install_requires = ['expenvelope >= 0.7.2', 'sortedcontainers >= 2.1', 'arpeggio >= 1.10']

extras_require = {
    'test': ['pytest'],
}

extras_require['all'] = [requirement for requirements in extras_require.values() for requirement in requirements]

package_data = {
    'rangekit': ['settings/*']
}

classifiers = [
    "Programming Language :: Python :: 3.6",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    "Operating System :: OS Independent",
]
