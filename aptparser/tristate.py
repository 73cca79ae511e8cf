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
A switch with three states: on|off|auto
"""


class Tristate(object):
    """Tri-state value used for options like --color"""
    ON = True
    OFF = False
    AUTO = -1

    # true and false are accepted as aliases for on and off
    _VALID_NAMES = ['on', 'off', 'true', 'false', 'auto']

    def __init__(self, val):
        if isinstance(val, Tristate):
            self._state = val.state
        elif isinstance(val, (bool, int)):
            if val > 0:
                self._state = self.ON
            elif val < 0:
                self._state = self.AUTO
            else:
                self._state = self.OFF
        elif isinstance(val, str):
            name = val.lower()
            if name not in self._VALID_NAMES:
                raise TypeError("Invalid tristate value '%s'" % val)
            if name in ['on', 'true']:
                self._state = self.ON
            elif name == 'auto':
                self._state = self.AUTO
            else:
                self._state = self.OFF
        else:
            raise TypeError("Invalid tristate value %r" % (val,))

    def __repr__(self):
        """
        >>> Tristate('on')
        on
        >>> Tristate(False)
        off
        >>> Tristate('AUTO')
        auto
        """
        if self._state is self.ON:
            return 'on'
        elif self._state == self.AUTO:
            return 'auto'
        return 'off'

    def __bool__(self):
        """
        >>> bool(Tristate('auto'))
        True
        >>> bool(Tristate('false'))
        False
        """
        return self._state is not self.OFF

    @property
    def state(self):
        return self._state

    def is_auto(self):
        return self._state == self.AUTO

    def is_on(self):
        return self._state is self.ON

    def is_off(self):
        return self._state is self.OFF
