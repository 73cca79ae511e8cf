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
"""A case insensitive store for the fields of a stanza"""


class FieldStore(object):
    """
    Map field names to values ignoring the case of the field name

    The casing used when a field is inserted first is kept as the
    canonical name of that field.

    >>> fields = FieldStore()
    >>> fields.insert('Foo', '1')
    >>> fields.insert('FOO', '2')
    >>> fields.get('foo')
    '2'
    >>> list(fields.items())
    [('Foo', '2')]
    >>> len(fields)
    1
    """

    def __init__(self, items=None):
        # case folded name -> canonical name
        self._aliases = {}
        # canonical name -> value
        self._values = {}
        for key, value in items or []:
            self.insert(key, value)

    @staticmethod
    def fold(key):
        """The name used to compare field names"""
        return key.lower()

    def canonical(self, key):
        """
        The canonical casing of a field name

        >>> FieldStore([('Pre-Depends', 'a')]).canonical('pre-depends')
        'Pre-Depends'
        >>> FieldStore().canonical('Package')
        """
        return self._aliases.get(self.fold(key))

    def insert(self, key, value):
        """Store I{value} under I{key} keeping an existing canonical name"""
        folded = self.fold(key)
        canonical = self._aliases.setdefault(folded, key)
        self._values[canonical] = value

    def get(self, key, default=None):
        canonical = self.canonical(key)
        if canonical is None:
            return default
        return self._values[canonical]

    def contains(self, key):
        return self.fold(key) in self._aliases

    def keys(self):
        return list(self._values.keys())

    def items(self):
        """All fields as (canonical name, value) pairs"""
        return list(self._values.items())

    def __getitem__(self, key):
        canonical = self.canonical(key)
        if canonical is None:
            raise KeyError(key)
        return self._values[canonical]

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __contains__(self, key):
        return self.contains(key)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self.keys())

    def __eq__(self, other):
        if not isinstance(other, FieldStore):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self._values)
