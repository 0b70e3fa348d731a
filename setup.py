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

import setuptools
import os
from types import SimpleNamespace

# load _package_info.py into a SimpleNamespace, without having to import the whole rangekit package
# (importing it would require the dependencies to already be installed)
package_info_file_path = os.path.join(os.path.dirname(__file__), "rangekit", "_package_info.py")
with open(package_info_file_path, "r", encoding="utf-8") as f:
    file_contents_string = f.read()
package_info_dict: dict = {}
exec(file_contents_string, None, package_info_dict)
package_info = SimpleNamespace(**package_info_dict)


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name=package_info.name,
    version=package_info.version,
    author=package_info.author,
    author_email=package_info.author_email,
    description=package_info.description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    url=package_info.url,
    project_urls=package_info.project_urls,
    packages=setuptools.find_packages(include=["rangekit", "rangekit.*"]),
    install_requires=package_info.install_requires,
    extras_require=package_info.extras_require,
    package_data=package_info.package_data,
    python_requires=">=3.6",
    classifiers=package_info.classifiers,
)
