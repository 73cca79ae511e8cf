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
"""The apt-parser command, dispatching to the modules in aptparser.scripts"""

import importlib
import os
import pkgutil
import re
import sys

import aptparser.scripts
from aptparser.version import aptparser_version

command_re = re.compile(r'^[a-z][a-z0-9-]*$')

# shared code, not commands
not_commands = ['common', 'supercommand']


def available_commands():
    """
    Names of all apt-parser commands, sorted

    >>> available_commands()
    ['config', 'show']
    """
    return sorted(name.replace('_', '-')
                  for (_, name, _) in pkgutil.iter_modules(aptparser.scripts.__path__)
                  if name not in not_commands)


def load_command(name):
    """
    Import the module implementing command I{name}

    @raises ImportError: if there's no such command
    """
    if not command_re.match(name) or name not in available_commands():
        raise ImportError("No apt-parser command %s" % name)
    return importlib.import_module('aptparser.scripts.%s' % name.replace('-', '_'))


def describe_commands():
    """One line per command with the first line of its docstring"""
    names = available_commands()
    width = max([len(name) for name in names] or [0])
    return ["%s - %s" % (name.rjust(width), load_command(name).__doc__.split('\n')[0])
            for name in names]


def usage(stream=None):
    stream = stream or sys.stdout
    print("Usage:\n    apt-parser <command> [<args>]\n", file=stream)
    print("Commands:", file=stream)
    for line in describe_commands():
        print("    %s" % line, file=stream)
    print("\nRun 'apt-parser <command> --help' for the options of a command.",
          file=stream)


def supercommand(argv=None):
    argv = argv or sys.argv
    if len(argv) < 2:
        usage()
        return 1

    cmd, args = argv[1], argv[1:]
    if cmd == 'help' and len(args) > 1:
        cmd, args = args[1], [args[1], '--help']
    elif cmd in ['-h', '--help', 'help']:
        usage()
        return 0
    if cmd in ['--version', 'version']:
        print("%s %s" % (os.path.basename(argv[0]), aptparser_version))
        return 0
    if cmd in ['--list-cmds', 'list-cmds']:
        for line in describe_commands():
            print(line)
        return 0

    try:
        module = load_command(cmd)
    except ImportError as err:
        print("'%s' is not a valid command." % cmd, file=sys.stderr)
        usage(sys.stderr)
        if '--verbose' in args:
            print(err, file=sys.stderr)
        return 2
    return module.main(args)


if __name__ == '__main__':
    sys.exit(supercommand())

# vim:et:ts=4:sw=4:et:sts=4:ai:set list listchars=tab\:»·,trail\:·:
