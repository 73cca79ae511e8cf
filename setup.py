#!/usr/bin/python3
# vim: set fileencoding=utf-8 :
# Copyright (C) 2026 The apt-parser developers
#
#    This program is free software; you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation; either version 2 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program; if not, please see
#    <http://www.gnu.org/licenses/>
# END OF COPYRIGHT #

from setuptools import setup, find_packages

VERSION_PY_PATH = 'aptparser/version.py'


def _load_version():
    with open(VERSION_PY_PATH, 'r') as f:
        version_py = f.read()
    version_py_globals = {}
    exec(version_py, version_py_globals)
    return version_py_globals['aptparser_version']


setup(name="apt-parser",
      version=_load_version(),
      description="Parse APT's key-value control, Packages and Release data",
      license="GPLv2+",
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.7',
      install_requires=['python-dateutil'],
      extras_require={
          'tests': ['pytest', 'coverage>=2.85'],
      },
      entry_points={
          'console_scripts': ['apt-parser = aptparser.scripts.supercommand:supercommand'],
      },
      )
