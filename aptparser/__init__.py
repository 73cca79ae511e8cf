# vim: set fileencoding=utf-8 :
#
# (C) 2026 The apt-parser developers
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
"""Parse APT control, Packages and Release data"""

# Make sure these are available with 'import aptparser'
from aptparser.errors import (AptError, StructuralError,         # noqa: F401
                              AggregateError, MissingKeyError,
                              ValueCoercionError)
from aptparser.fields import FieldStore                          # noqa: F401
from aptparser.kv import parse_stanza, parse_document            # noqa: F401
from aptparser.control import Control, NoControlError            # noqa: F401
from aptparser.packages import Package, Packages                 # noqa: F401
from aptparser.release import Release, ReleaseHash               # noqa: F401
