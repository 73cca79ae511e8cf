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
"""Query and display config file values"""

import os
import sys

import aptparser.log
from aptparser.config import AptConfArgParser, AptParserConfig
from aptparser.errors import AptError
from aptparser.scripts.supercommand import load_command
from aptparser.scripts.common import ExitCodes


def build_parser(name):
    try:
        parser = AptConfArgParser.create_parser(prog=name,
                                                description='display configuration settings')
    except AptError as err:
        aptparser.log.err(err)
        return None

    parser.add_arg("-v", "--verbose", action="store_true",
                   help="verbose command execution")
    parser.add_conf_file_arg("--color", type='tristate')
    parser.add_conf_file_arg("--color-scheme")
    parser.add_arg("query", metavar="command[.optionname]",
                   help="command to print the values for, optionally "
                   "restricted to a single option")
    return parser


def parse_args(argv):
    parser = build_parser(os.path.basename(argv[0]))
    if not parser:
        return None
    return parser.parse_args(argv[1:])


def build_cmd_parser(section):
    """
    Populate the parser to get a list of valid options
    """
    try:
        module = load_command(section)
        parser = module.build_parser(section)
    except (AttributeError, ImportError):
        # Use a plain config for sections that don't
        # map to a command
        parser = AptConfArgParser(
            AptConfArgParser._AptArgParser(prog=section),
            config=AptParserConfig(section))
        parser.conf_file_args.update(parser.config.config.keys())
    return parser


def print_single_option(parser, option, printer):
    try:
        value = parser.get_conf_file_value(option)
    except KeyError:
        return ExitCodes.no_value
    printer("%s.%s=%s" % (parser.command, option, value))
    return ExitCodes.ok


def print_all_options(parser, printer):
    if not parser.conf_file_args:
        return ExitCodes.no_value
    for opt in sorted(parser.conf_file_args):
        value = parser.get_conf_file_value(opt)
        printer("%s.%s=%s" % (parser.command, opt, value))
    return ExitCodes.ok


def print_cmd_values(query, printer):
    """
    Print configuration values of a command

    @param query: the section to print the values for or section.option to
        print
    @param printer: the printer to output the values
    """
    if not query:
        return ExitCodes.no_value

    try:
        section, option = query.split('.')
    except ValueError:
        section = query
        option = None

    parser = build_cmd_parser(section)
    if parser is None:
        return ExitCodes.parse_error

    if option:
        return print_single_option(parser, option, printer)
    return print_all_options(parser, printer)


def value_printer(output):
    print(output)


def main(argv):
    options = parse_args(argv)
    if options is None:
        return ExitCodes.parse_error

    aptparser.log.setup(options.color, options.verbose, options.color_scheme)
    return print_cmd_values(options.query, value_printer)


if __name__ == '__main__':
    sys.exit(main(sys.argv))

# vim:et:ts=4:sw=4:et:sts=4:ai:set list listchars=tab\:»·,trail\:·:
