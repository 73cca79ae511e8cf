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
#
"""Colored logging for apt-parser"""

import os
import sys
import logging
from logging import (DEBUG, INFO, WARNING, ERROR, CRITICAL, getLogger)

from aptparser.tristate import Tristate


COLORS = dict([('none', 0)] + list(zip(['black', 'red', 'green', 'yellow', 'blue',
                                        'magenta', 'cyan', 'white'], range(30, 38))))
DEFAULT_COLOR_SCHEME = {DEBUG: COLORS['green'],
                        INFO: COLORS['green'],
                        WARNING: COLORS['red'],
                        ERROR: COLORS['red'],
                        CRITICAL: COLORS['red']}


class LevelFilter(object):
    """Only pass records of the given levels"""
    def __init__(self, levels):
        self._levels = levels

    def filter(self, record):
        return record.levelno in self._levels


class AptStreamHandler(logging.StreamHandler):
    """Stream handler that colors its output on terminals"""

    COLOR_SEQ = "\033[%dm"
    OFF_SEQ = "\033[0m"

    def __init__(self, stream=None, color='auto'):
        super(AptStreamHandler, self).__init__(stream)
        self._color = Tristate(color)
        self._color_scheme = DEFAULT_COLOR_SCHEME.copy()
        self.set_format("%(color)s%(name)s:%(levelname)s: %(message)s%(coloroff)s")

    def set_color(self, color):
        self._color = Tristate(color)

    def set_color_scheme(self, color_scheme=None):
        self._color_scheme = DEFAULT_COLOR_SCHEME.copy()
        self._color_scheme.update(color_scheme or {})

    def set_format(self, fmt):
        self.setFormatter(logging.Formatter(fmt=fmt))

    def _use_color(self):
        if self._color.is_on():
            return True
        if self._color.is_auto() and hasattr(self.stream, 'isatty'):
            in_emacs = (os.getenv("EMACS") and
                        os.getenv("INSIDE_EMACS", "").endswith(",comint"))
            return self.stream.isatty() and not in_emacs
        return False

    def format(self, record):
        record.color = record.coloroff = ""
        if self._use_color():
            record.color = self.COLOR_SEQ % self._color_scheme[record.levelno]
            record.coloroff = self.OFF_SEQ
        record.levelname = record.levelname.lower()
        return super(AptStreamHandler, self).format(record)


class AptLogger(logging.Logger):
    """Logger sending info to stdout and problems to stderr"""

    def __init__(self, name, color='auto', *args, **kwargs):
        super(AptLogger, self).__init__(name, *args, **kwargs)
        out = AptStreamHandler(sys.stdout, color)
        out.addFilter(LevelFilter([DEBUG, INFO]))
        errout = AptStreamHandler(sys.stderr, color)
        errout.addFilter(LevelFilter([WARNING, ERROR, CRITICAL]))
        self._default_handlers = [out, errout]
        for hdlr in self._default_handlers:
            self.addHandler(hdlr)

    def set_color(self, color):
        for hdlr in self._default_handlers:
            hdlr.set_color(color)

    def set_color_scheme(self, color_scheme=None):
        for hdlr in self._default_handlers:
            hdlr.set_color_scheme(color_scheme)

    def set_format(self, fmt):
        for hdlr in self._default_handlers:
            hdlr.set_format(fmt)


def err(msg):
    """Logs a message with level ERROR on the apt-parser logger"""
    LOGGER.error(msg)


def warn(msg):
    """Logs a message with level WARNING on the apt-parser logger"""
    LOGGER.warning(msg)


def info(msg):
    """Logs a message with level INFO on the apt-parser logger"""
    LOGGER.info(msg)


def debug(msg):
    """Logs a message with level DEBUG on the apt-parser logger"""
    LOGGER.debug(msg)


def parse_color_scheme(color_scheme=""):
    """
    Parse a color scheme of the form debug:info:warning:error

    Colors can be given by name or number, unknown names are skipped.

    >>> parse_color_scheme("")
    {}
    >>> parse_color_scheme("blue:33::red") == {DEBUG: 34, INFO: 33, ERROR: 31}
    True
    >>> parse_color_scheme("red")
    Traceback (most recent call last):
    ...
    ValueError: Number of color fields in color scheme not 4
    """
    scheme = {}
    if not color_scheme:
        return scheme

    levels = (DEBUG, INFO, WARNING, ERROR)
    colors = color_scheme.split(':')
    if len(colors) != len(levels):
        raise ValueError("Number of color fields in color scheme not %d"
                         % len(levels))

    for level, color in zip(levels, colors):
        try:
            scheme[level] = int(color)
        except ValueError:
            if color.lower() in COLORS:
                scheme[level] = COLORS[color.lower()]
    return scheme


def setup(color, verbose, color_scheme=""):
    """Basic logger setup"""
    LOGGER.set_color(color)
    LOGGER.set_color_scheme(parse_color_scheme(color_scheme))
    LOGGER.setLevel(DEBUG if verbose else INFO)


# Initialize the module
logging.setLoggerClass(AptLogger)

LOGGER = getLogger("apt-parser")

# only our logger uses AptLogger
logging.setLoggerClass(logging.Logger)
