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
"""
Parse APT key-value stanzas as found in control, Packages and Release files
"""

import re
from concurrent.futures import ThreadPoolExecutor

import aptparser.log
from aptparser.errors import AggregateError, AptError, StructuralError, ValueCoercionError
from aptparser.fields import FieldStore

field_re = re.compile(r'^(?P<key>.*?):\s(?P<value>.*)$')
int_re = re.compile(r'^[+-]?\d+$')

DESCRIPTION = 'description'


def normalize(data):
    """
    Unify line endings and drop NUL bytes

    >>> normalize('Package: foo\\r\\nVersion: 1\\x00\\r\\n')
    'Package: foo\\nVersion: 1\\n'
    """
    return data.replace('\r\n', '\n').replace('\0', '')


def _is_description(key):
    return key is not None and FieldStore.fold(key) == DESCRIPTION


def parse_stanza(data):
    """
    Parse a single stanza into a L{FieldStore}

    >>> fields = parse_stanza("Package: foo\\nDescription: short summary\\n detail line\\n")
    >>> fields['description']
    'short summary\\ndetail line'
    >>> parse_stanza("not a valid line")
    Traceback (most recent call last):
    ...
    aptparser.errors.StructuralError: Failed to parse APT key-value data: invalid line 'not a valid line'

    @param data: the stanza's text
    @type data: C{str}
    @return: the parsed fields
    @rtype: L{FieldStore}
    @raises StructuralError: if a line doesn't conform to the key-value grammar
    """
    fields = FieldStore()
    current = None

    for line in normalize(data).strip().split('\n'):
        line = line.strip()
        if not line:
            continue

        m = field_re.match(line)
        if not m:
            if line.endswith(':'):
                current = line[:-1]
                fields.insert(current, '')
                continue

            if current:
                value = fields.get(current, '')
                if line == '.':
                    value += '\n\n'
                elif value.endswith('\n'):
                    value += line
                else:
                    value += ' ' + line
                fields.insert(current, value)
                continue

            raise StructuralError(line)

        key, value = m.group('key'), m.group('value')
        if key is None or value is None:
            raise StructuralError(line)

        # first declaration of a field wins
        if key in fields:
            continue

        if _is_description(key) and value:
            fields.insert(key, value + '\n')
        else:
            if _is_description(current):
                previous = fields.get(current, '')
                if previous.endswith('\n'):
                    fields.insert(current, previous[:-1])
            fields.insert(key, value)

        current = key

    return fields


def split_stanzas(data):
    """
    Split a document into the text of its stanzas

    >>> split_stanzas("\\nPackage: a\\n\\nPackage: b\\n\\n")
    ['Package: a', 'Package: b']
    """
    return normalize(data).strip().split('\n\n')


def _attempt(build, chunk):
    try:
        return build(chunk), None
    except AptError as err:
        return None, str(err)


def map_stanzas(data, build, workers=None):
    """
    Run I{build} on every stanza of I{data} in a thread pool

    All stanzas are attempted even if some of them fail.

    @param data: the document's text
    @type data: C{str}
    @param build: callable turning a stanza's text into a record
    @param workers: maximum number of worker threads, C{None} or C{0} lets
        the executor decide
    @return: the built records in document order
    @rtype: C{list}
    @raises AggregateError: if any of the stanzas failed
    """
    chunks = split_stanzas(data)
    aptparser.log.debug("Parsing %d stanzas" % len(chunks))

    with ThreadPoolExecutor(max_workers=workers or None) as executor:
        outcomes = list(executor.map(lambda chunk: _attempt(build, chunk), chunks))

    errors = [error for (_, error) in outcomes if error is not None]
    if errors:
        aptparser.log.debug("%d of %d stanzas failed to parse" % (len(errors), len(chunks)))
        raise AggregateError(data, errors)
    return [record for (record, _) in outcomes]


def parse_document(data, workers=None):
    """
    Parse a document consisting of blank line separated stanzas

    >>> [fields['Package'] for fields in parse_document("Package: a\\n\\nPackage: b")]
    ['a', 'b']
    """
    return map_stanzas(data, parse_stanza, workers)


def make_list(value):
    """
    Split a comma separated field value

    >>> make_list("a, b (>= 1.0), c")
    ['a', 'b (>= 1.0)', 'c']
    >>> make_list(None)
    """
    if value is None:
        return None
    return [item.strip() for item in value.split(',')]


def parse_bool(value):
    """
    >>> parse_bool('yes'), parse_bool('Yes'), parse_bool(None)
    (True, False, None)
    """
    if value is None:
        return None
    return value == 'yes'


def parse_int(value, key):
    """
    Convert a field value to an integer

    >>> parse_int('1536', 'Installed-Size')
    1536
    >>> parse_int('1.5k', 'Installed-Size')
    Traceback (most recent call last):
    ...
    aptparser.errors.ValueCoercionError: Failed to parse value '1.5k' of Installed-Size as integer
    """
    if value is None:
        return None
    if not int_re.match(value.strip()):
        raise ValueCoercionError("Failed to parse value '%s' of %s as integer"
                                 % (value, key))
    return int(value)

# vim:et:ts=4:sw=4:et:sts=4:ai:set list listchars=tab\:»·,trail\:·:
