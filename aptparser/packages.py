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
"""Stanzas of an APT Packages index"""

from aptparser.control import Control, read_contents
from aptparser.errors import ValueCoercionError
from aptparser.kv import map_stanzas, parse_int


class Package(Control):
    """A binary package as listed in a Packages index"""

    required_fields = Control.required_fields + ('Filename', 'Size')

    def __init__(self, contents=None, filename=None, skip_validation=False):
        super(Package, self).__init__(contents, filename, skip_validation)
        get = self._fields.get
        self.filename = get('Filename')
        self.size = self._parse_size(get('Size'))
        self.md5sum = get('MD5Sum')
        self.sha1sum = get('SHA1')
        self.sha256sum = get('SHA256')
        self.sha512sum = get('SHA512')
        self.description_md5sum = get('Description-md5')

    @staticmethod
    def _parse_size(value):
        """
        The package size, -1 if it is not an integer

        >>> Package._parse_size('9618')
        9618
        >>> Package._parse_size('unknown')
        -1
        >>> Package._parse_size(None)
        """
        try:
            return parse_int(value, 'Size')
        except ValueCoercionError:
            return -1


class Packages(object):
    """
    All packages of a Packages index

    Stanzas are parsed concurrently, the packages keep the order of the
    index.
    """

    def __init__(self, contents=None, filename=None, skip_validation=False,
                 workers=None):
        """
        @param contents: content of a Packages index
        @type contents: C{str}
        @param filename: name of the index, read if I{contents} is not given
        @type filename: C{str}
        @param workers: maximum number of parser threads
        @type workers: C{int}
        @raises AggregateError: if any of the stanzas failed to parse
        """
        self.path = filename
        data = read_contents(contents, filename, 'Packages')
        self._packages = map_stanzas(
            data,
            lambda chunk: Package(chunk, skip_validation=skip_validation),
            workers)

    def __len__(self):
        return len(self._packages)

    def __getitem__(self, index):
        return self._packages[index]

    def __iter__(self):
        return iter(self._packages)
