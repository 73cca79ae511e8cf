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
"""Parse control, Packages and Release files and print their fields"""

import os
import sys

import aptparser.log
from aptparser.config import AptConfArgParser
from aptparser.control import Control
from aptparser.errors import AggregateError, AptError, MissingKeyError
from aptparser.packages import Packages
from aptparser.release import Release

from aptparser.scripts.common import ExitCodes

KINDS = ['control', 'packages', 'release']


def format_field(key, value):
    """
    Format a field the way it appears in a control file

    >>> print(format_field('Description', 'short\\nfirst line\\n\\nsecond paragraph'))
    Description: short
     first line
     .
     second paragraph
    >>> format_field('Depends', '')
    'Depends:'
    """
    lines = value.rstrip('\n').split('\n')
    out = ["%s: %s" % (key, lines[0]) if lines[0] else "%s:" % key]
    for line in lines[1:]:
        out.append(" %s" % line if line else " .")
    return '\n'.join(out)


def format_record(record, selected=None, summarize_hashes=False):
    """
    Format the fields of a record, all of them or only the I{selected} ones
    """
    fields = record.fields
    if selected:
        keys = [fields.canonical(name) for name in selected if name in fields]
    else:
        keys = fields.keys()

    hashes = {}
    if summarize_hashes:
        # summaries are keyed by the casing used in the file
        hashes = dict((fields.canonical(name), entries)
                      for (name, entries) in record.hashes.items())
    out = []
    for key in keys:
        if key in hashes:
            out.append("%s: %d files" % (key, len(hashes[key])))
        else:
            out.append(format_field(key, fields[key]))
    return '\n'.join(out)


def parse_file(path, options):
    """Parse I{path} into a list of records"""
    if options.type == 'packages':
        return list(Packages(filename=path,
                             skip_validation=options.skip_validation,
                             workers=options.workers))
    elif options.type == 'release':
        return [Release(filename=path, skip_validation=options.skip_validation)]
    return [Control(filename=path, skip_validation=options.skip_validation)]


def show_file(path, options, printer):
    records = parse_file(path, options)
    blocks = [format_record(record, options.field, options.type == 'release')
              for record in records]
    printer('\n\n'.join(blocks))


def build_parser(name):
    try:
        parser = AptConfArgParser.create_parser(prog=name,
                                                description=__doc__)
    except AptError as err:
        aptparser.log.err(err)
        return None

    parser.add_conf_file_arg("--type", choices=KINDS)
    parser.add_conf_file_arg("--field", action="append", metavar="NAME")
    parser.add_conf_file_arg("--workers", type=int)
    parser.add_bool_conf_file_arg("--skip-validation")
    parser.add_conf_file_arg("--color", type='tristate')
    parser.add_conf_file_arg("--color-scheme")
    parser.add_arg("--verbose", action="store_true",
                   help="verbose command execution")
    parser.add_arg("files", nargs='+', metavar="FILE",
                   help="files to parse")
    return parser


def parse_args(argv):
    parser = build_parser(os.path.basename(argv[0]))
    if not parser:
        return None
    return parser.parse_args(argv[1:])


def main(argv, printer=print):
    retval = ExitCodes.ok

    options = parse_args(argv)
    if not options:
        return ExitCodes.parse_error

    aptparser.log.setup(options.color, options.verbose, options.color_scheme)

    for path in options.files:
        try:
            show_file(path, options, printer)
        except AggregateError as err:
            aptparser.log.err("%s: %d stanzas failed to parse"
                              % (path, len(err.errors)))
            for msg in err.errors:
                aptparser.log.debug(msg)
            retval = ExitCodes.failed
        except MissingKeyError as err:
            aptparser.log.err("%s: missing required field %s" % (path, err.key))
            retval = ExitCodes.failed
        except AptError as err:
            aptparser.log.err("%s: %s" % (path, err))
            retval = ExitCodes.failed
        except (OSError, UnicodeDecodeError) as err:
            aptparser.log.err("Failed to read %s: %s" % (path, err))
            retval = ExitCodes.failed
    return retval


if __name__ == '__main__':
    sys.exit(main(sys.argv))

# vim:et:ts=4:sw=4:et:sts=4:ai:set list listchars=tab\:»·,trail\:·:
