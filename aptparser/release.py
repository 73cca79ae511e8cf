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
"""An APT repository's Release file"""

import collections
import re

import dateutil.parser

from aptparser.control import read_contents
from aptparser.errors import MissingKeyError, ValueCoercionError
from aptparser.kv import parse_bool, parse_stanza


ReleaseHash = collections.namedtuple('ReleaseHash', ['hash', 'size', 'filename'])
ReleaseHash.__doc__ = "Checksum, size and name of a file listed in a Release file"


class Release(object):
    """A repository Release file"""

    required_fields = ('Architectures', 'Components')
    hash_fields = ('MD5Sum', 'SHA1', 'SHA256', 'SHA512')
    size_re = re.compile(r'^\+?\d+$')

    def __init__(self, contents=None, filename=None, skip_validation=False):
        """
        Parse a Release file

        @param contents: content of the Release file
        @type contents: C{str}
        @param filename: name of the Release file, read if I{contents} is
            not given
        @type filename: C{str}
        @param skip_validation: don't fail on missing required fields
        @type skip_validation: C{bool}
        @raises MissingKeyError: if I{Architectures} or I{Components} is missing
        @raises ValueCoercionError: if a checksum list is malformed
        """
        self.path = filename
        self.data = read_contents(contents, filename, 'Release')
        self._fields = parse_stanza(self.data)
        if not skip_validation:
            for key in self.required_fields:
                if key not in self._fields:
                    raise MissingKeyError(key, self.data)

        get = self._fields.get
        self.architectures = get('Architectures', '').split()
        self.components = get('Components', '').split()
        self.no_support_for_architecture_all = parse_bool(get('No-Support-for-Architecture-all'))

        description = get('Description')
        self.description = description.rstrip('\n') if description is not None else None
        self.origin = get('Origin')
        self.label = get('Label')
        self.suite = get('Suite')
        self.version = get('Version')
        self.codename = get('Codename')
        self.date = get('Date')
        self.valid_until = get('Valid-Until')

        self.md5sum = self.parse_hashes(get('MD5Sum'), 'MD5Sum')
        self.sha1sum = self.parse_hashes(get('SHA1'), 'SHA1')
        self.sha256sum = self.parse_hashes(get('SHA256'), 'SHA256')
        self.sha512sum = self.parse_hashes(get('SHA512'), 'SHA512')

        self.not_automatic = parse_bool(get('NotAutomatic'))
        self.but_automatic_upgrades = parse_bool(get('ButAutomaticUpgrades'))
        self.acquire_by_hash = parse_bool(get('Acquire-By-Hash'))
        self.signed_by = get('Signed-By')
        self.packages_require_authorization = parse_bool(get('Packages-Require-Authorization'))

    @classmethod
    def parse_hashes(cls, value, key):
        """
        Parse a checksum field into L{ReleaseHash}es

        >>> Release.parse_hashes("abc123 100 Packages def456 200 Packages.gz", 'MD5Sum')
        [ReleaseHash(hash='abc123', size=100, filename='Packages'), ReleaseHash(hash='def456', size=200, filename='Packages.gz')]
        >>> Release.parse_hashes("abc123 100", 'MD5Sum')
        Traceback (most recent call last):
        ...
        aptparser.errors.ValueCoercionError: Incomplete checksum entry 'abc123 100' in MD5Sum
        """
        if value is None:
            return None

        tokens = value.split()
        hashes = []
        for pos in range(0, len(tokens), 3):
            chunk = tokens[pos:pos + 3]
            if len(chunk) != 3:
                raise ValueCoercionError("Incomplete checksum entry '%s' in %s"
                                         % (' '.join(chunk), key))
            checksum, size, name = chunk
            if not cls.size_re.match(size):
                raise ValueCoercionError("Invalid size '%s' for %s in %s"
                                         % (size, name, key))
            hashes.append(ReleaseHash(hash=checksum, size=int(size), filename=name))
        return hashes

    @staticmethod
    def _parse_date(value, key):
        if value is None:
            return None
        try:
            return dateutil.parser.parse(value)
        except (ValueError, OverflowError) as err:
            raise ValueCoercionError("Failed to parse %s '%s': %s" % (key, value, err))

    @property
    def date_time(self):
        """The I{Date} field as C{datetime}"""
        return self._parse_date(self.date, 'Date')

    @property
    def valid_until_time(self):
        """The I{Valid-Until} field as C{datetime}"""
        return self._parse_date(self.valid_until, 'Valid-Until')

    @property
    def hashes(self):
        """All checksum lists keyed by field name, absent fields are skipped"""
        return dict((key, getattr(self, attr)) for (key, attr)
                    in zip(self.hash_fields, ('md5sum', 'sha1sum', 'sha256sum', 'sha512sum'))
                    if getattr(self, attr) is not None)

    @property
    def fields(self):
        """All fields of the Release file"""
        return self._fields

    def get(self, key, default=None):
        return self._fields.get(key, default)

    def __getitem__(self, item):
        return self._fields.get(item)

    def __contains__(self, item):
        return item in self._fields
