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
"""Command line and config file option parsing for the apt-parser commands"""

from argparse import (ArgumentParser, ArgumentDefaultsHelpFormatter,
                      ArgumentTypeError)
import ast
import configparser
import os.path

from aptparser.errors import AptError
from aptparser.tristate import Tristate

try:
    from aptparser.version import aptparser_version
except ImportError:
    aptparser_version = "[Unknown version]"


class AptParserConfig(object):
    """Handles apt-parser config files"""
    default_config_files = [('/etc/apt-parser.conf', 'system'),
                            ('~/.apt-parser.conf', 'global')]

    defaults = {'color': 'auto',
                'color-scheme': '',
                'field': [],
                'skip-validation': 'False',
                'type': 'control',
                'workers': '0',
                }

    default_helps = {
        'color': "Whether to use colored output",
        'color-scheme': "Colors to use in output (when color is enabled), "
                        "format is '<debug>:<info>:<warning>:<error>', "
                        "e.g. 'cyan:34::'. Numerical values and color names "
                        "are accepted, empty fields imply the default color.",
        'field': "Only print the given field, can be given multiple times",
        'skip-validation': "Don't fail on missing required fields",
        'type': "Kind of data to parse: 'control', 'packages' or 'release'",
        'workers': "Number of threads used to parse stanzas, "
                   "0 picks a default",
    }

    list_opts = ['field']

    @classmethod
    def get_config_files(cls):
        """
        Get list of config files from the I{APT_PARSER_CONF_FILES}
        environment variable or the default locations.

        >>> conf_backup = os.getenv('APT_PARSER_CONF_FILES')
        >>> os.environ['APT_PARSER_CONF_FILES'] = 'test1:test2'
        >>> AptParserConfig.get_config_files()
        ['test1', 'test2']
        >>> del os.environ['APT_PARSER_CONF_FILES']
        >>> AptParserConfig.get_config_files()[0]
        '/etc/apt-parser.conf'
        >>> if conf_backup is not None: os.environ['APT_PARSER_CONF_FILES'] = conf_backup
        """
        envvar = os.environ.get('APT_PARSER_CONF_FILES')
        files = envvar.split(':') if envvar else [f for (f, _) in cls.default_config_files]
        return [os.path.expanduser(fname) for fname in files]

    def __init__(self, command, config_files=None):
        self.command = os.path.basename(command[:-3] if command.endswith('.py') else command)
        self.config = {}
        self.config_parser = configparser.RawConfigParser()

        if config_files is None:
            config_files = self.get_config_files()
        try:
            self._parse_config_files(config_files)
        except configparser.Error as err:
            raise AptError("%s\nSee the apt-parser documentation for the config file format." % err)

    @staticmethod
    def _listify(value):
        """
        >>> AptParserConfig._listify(None)
        []
        >>> AptParserConfig._listify('string')
        ['string']
        >>> AptParserConfig._listify('["q", "e", "d"] ')
        ['q', 'e', 'd']
        >>> AptParserConfig._listify('[')
        Traceback (most recent call last):
        ...
        configparser.Error: [ is not a proper list
        """
        if not value:
            return []
        if isinstance(value, list):
            return value
        if value.startswith('['):
            try:
                parsed = ast.literal_eval(value.strip())
            except (SyntaxError, ValueError):
                raise configparser.Error("%s is not a proper list" % value)
            if not isinstance(parsed, list):
                raise configparser.Error("%s is not a proper list" % value)
            return parsed
        return [value]

    def parse_lists(self):
        """Parse options that can be given as lists"""
        for opt in self.list_opts:
            self.config[opt] = self._listify(self.config[opt])

    def _parse_config_files(self, config_files):
        """Parse the config files and take values from the appropriate sections"""
        parser = self.config_parser
        self.config = dict(self.defaults)
        for filename in config_files:
            parser.read(filename)

        # [DEFAULT] applies to all commands
        self.config.update(dict(parser.defaults()))
        if parser.has_section(self.command):
            self.config.update(dict(parser.items(self.command)))

        self.parse_lists()

    @property
    def config_file_sections(self):
        """List of all found config file sections"""
        return self.config_parser.sections()

    def get_value(self, name):
        """Get a value from configuration"""
        return self.config[name]

    def get_bool_value(self, name):
        """Get a boolean value from configuration"""
        value_str = self.config[name]
        if value_str.lower() in ["true", "1"]:
            return True
        elif value_str.lower() in ["false", "0"]:
            return False
        raise ValueError("Boolean options must be True or False")


def tristate_type(arg_str):
    """Type for tristate arguments"""
    try:
        return Tristate(arg_str)
    except TypeError:
        raise ArgumentTypeError("invalid value: %r" % arg_str)


class AptConfArgParser(object):
    """
    Wrap an argument parser so that option defaults are read from the
    config files
    """

    class _AptArgParser(ArgumentParser):
        """The "real" argument parser"""
        def __init__(self, **kwargs):
            prog = kwargs.get('prog')
            if prog and not prog.startswith('apt-parser'):
                kwargs['prog'] = "apt-parser %s" % prog
            kwargs.setdefault('formatter_class', ArgumentDefaultsHelpFormatter)
            ArgumentParser.__init__(self, **kwargs)
            self.command = prog if prog else self.prog
            self.register('type', 'tristate', tristate_type)

    def __init__(self, wrapped_instance, config=None, conf_file_args=None):
        self.wrapped = wrapped_instance
        self.config = config or AptParserConfig(wrapped_instance.command)
        self.conf_file_args = set() if conf_file_args is None else conf_file_args

    @classmethod
    def create_parser(cls, config=None, **kwargs):
        """Create new AptConfArgParser"""
        parser = cls._AptArgParser(**kwargs)
        parser.add_argument('--version', action='version',
                            version='%s %s' % (parser.prog, aptparser_version))
        return cls(parser, config=config)

    def _get_conf_key(self, *args):
        """Name of the config file key for an argument"""
        key = args[0]
        for arg in args:
            if len(arg) > 2 and arg[0:2] in [c * 2 for c in self.wrapped.prefix_chars]:
                key = arg
                break
        return key.lstrip(self.wrapped.prefix_chars)

    @staticmethod
    def _is_boolean(**kwargs):
        return kwargs.get('action') in ('store_true', 'store_false')

    def add_arg(self, *args, **kwargs):
        """Add a plain argument"""
        if 'dest' not in kwargs and args[0].startswith('-'):
            kwargs['dest'] = self._get_conf_key(*args).replace('-', '_')
        return self.wrapped.add_argument(*args, **kwargs)

    def add_conf_file_arg(self, *args, **kwargs):
        """Add an argument whose default comes from the config files"""
        name = self._get_conf_key(*args)
        is_boolean = self._is_boolean(**kwargs)
        if 'default' not in kwargs:
            if is_boolean:
                kwargs['default'] = self.config.get_bool_value(name)
            else:
                kwargs['default'] = self.config.get_value(name)
        self.conf_file_args.add(name)
        if 'help' not in kwargs and name in self.config.default_helps:
            kwargs['help'] = self.config.default_helps[name]
        new_arg = self.add_arg(*args, **kwargs)

        # Automatically add the inverse argument, with inverted default
        if is_boolean:
            kwargs['dest'] = new_arg.dest
            kwargs['help'] = "negates '--%s'" % name
            kwargs['action'] = 'store_false' \
                if kwargs['action'] == 'store_true' else 'store_true'
            kwargs['default'] = not kwargs['default']
            self.add_arg('--no-%s' % name, **kwargs)

    def add_bool_conf_file_arg(self, *args, **kwargs):
        """Shortcut to adding boolean args"""
        kwargs['action'] = 'store_true'
        self.add_conf_file_arg(*args, **kwargs)

    def __getattr__(self, name):
        return getattr(self.wrapped, name)

    def get_conf_file_value(self, option_name):
        """
        Query a single config file value

        @param option_name: the config file option to look up
        @type option_name: C{str}
        @returns: the config file option value
        @raises KeyError: if the option isn't a config file option of this
            command
        """
        if option_name in self.conf_file_args:
            return self.config.get_value(option_name)
        raise KeyError("Invalid option: %s" % option_name)

# vim:et:ts=4:sw=4:et:sts=4:ai:set list listchars=tab\:»·,trail\:·:
