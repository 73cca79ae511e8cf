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
"""Exceptions raised while parsing APT data"""


class AptError(Exception):
    """Generic exception raised while parsing APT key-value data"""
    pass


class StructuralError(AptError):
    """A line of a stanza matches none of the key-value forms"""
    def __init__(self, line=None):
        self.line = line
        msg = "Failed to parse APT key-value data"
        if line is not None:
            msg += ": invalid line '%s'" % line
        super(StructuralError, self).__init__(msg)


class ValueCoercionError(AptError):
    """A field value can't be converted to the expected type"""
    pass


class MissingKeyError(AptError):
    """A required field is absent from a stanza"""
    def __init__(self, key, data):
        self.key = key
        self.data = data
        super(MissingKeyError, self).__init__(
            "Failed to find key %s in data %s" % (key, data))


class AggregateError(AptError):
    """
    One or more stanzas of a multi stanza document failed to parse

    @ivar data: the complete document
    @ivar errors: the error messages of all failed stanzas in document order
    """
    def __init__(self, data, errors):
        self.data = data
        self.errors = list(errors)
        messages = "\n -".join(self.errors)
        super(AggregateError, self).__init__(
            "The following errors occurred while parsing multiple stanzas "
            "%s: %s" % (messages, data))

# vim:et:ts=4:sw=4:et:sts=4:ai:set list listchars=tab\:»·,trail\:·:
