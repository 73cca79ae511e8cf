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
"""A binary package's control stanza"""

import os

from aptparser.errors import AptError, MissingKeyError
from aptparser.kv import make_list, parse_bool, parse_int, parse_stanza


class NoControlError(AptError):
    """No control found"""
    pass


def read_contents(contents, filename, kind):
    """
    Return I{contents} or, if not given, the contents of I{filename}
    """
    if contents is not None:
        return contents
    if not filename or not os.access(filename, os.F_OK):
        raise NoControlError("%s file %s does not exist" % (kind, filename))
    with open(filename, encoding='utf-8') as f:
        return f.read()


class Control(object):
    """A Debian binary package control stanza"""

    required_fields = ('Package', 'Version', 'Architecture')

    def __init__(self, contents=None, filename=None, skip_validation=False):
        """
        Parse a control stanza

        @param contents: content of a control file
        @type contents: C{str}
        @param filename: name of the control file, read if I{contents} is
            not given
        @type filename: C{str}
        @param skip_validation: don't fail on missing required fields
        @type skip_validation: C{bool}
        @raises StructuralError: if the contents aren't valid key-value data
        @raises MissingKeyError: if a required field is missing
        @raises ValueCoercionError: if I{Installed-Size} isn't an integer
        """
        self.path = filename
        self.data = read_contents(contents, filename, 'Control')
        self._fields = parse_stanza(self.data)
        if not skip_validation:
            self._check_required()

        get = self._fields.get
        self.package = get('Package')
        self.source = get('Source')
        self.version = get('Version')
        self.section = get('Section')
        self.priority = get('Priority')
        self.architecture = get('Architecture')
        self.is_essential = parse_bool(get('Essential'))
        self.depends = make_list(get('Depends'))
        self.pre_depends = make_list(get('Pre-Depends'))
        self.recommends = make_list(get('Recommends'))
        self.suggests = make_list(get('Suggests'))
        self.replaces = make_list(get('Replaces'))
        self.enhances = make_list(get('Enhances'))
        self.breaks = make_list(get('Breaks'))
        self.conflicts = make_list(get('Conflicts'))
        self.installed_size = parse_int(get('Installed-Size'), 'Installed-Size')
        self.maintainer = get('Maintainer')
        self.description = get('Description')
        self.homepage = get('Homepage')
        self.built_using = get('Built-Using')
        self.package_type = get('Package-Type')
        self.tags = make_list(get('Tag'))

    def _check_required(self):
        for key in self.required_fields:
            if key not in self._fields:
                raise MissingKeyError(key, self.data)

    @property
    def fields(self):
        """All fields of the stanza"""
        return self._fields

    def get(self, key, default=None):
        return self._fields.get(key, default)

    def __getitem__(self, item):
        return self._fields.get(item)

    def __contains__(self, item):
        return item in self._fields

    def __str__(self):
        return "<%s %s %s>" % (self.__class__.__name__, self.package, self.version)
