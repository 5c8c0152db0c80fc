# pybmp180 - Python software for BMP180 barometric pressure sensors
# http://github.com/pybmp180/pybmp180
# Copyright (C) 2014-26  pybmp180 contributors

# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

"""Store parameters in easy to access files

Introduction
------------

Settings such as the I2C bus number and oversampling mode are kept in
an "ini" style text file, ``bmp180.ini``, in a directory chosen by the
user. For example::

  [config]
  i2c bus = 1
  oversampling = high res
  altitude = 112

Values are stored as strings. Reading a missing value with a default
stores the default, so after the first run the file lists every
setting in use. Changes are only written to disc when
:py:meth:`ParamStore.flush` is called, or when a
:py:func:`bmp180_params` block ends::

  with pybmp180.storage.bmp180_params('/home/pi/bmp180') as params:
      bus_number = int(params.get('config', 'i2c bus', '1'))

Detailed API
------------

"""

from configparser import RawConfigParser
from contextlib import contextmanager
import logging
import os
import threading

logger = logging.getLogger(__name__)


class ParamStore(object):
    def __init__(self, root_dir, file_name='bmp180.ini'):
        self._lock = threading.Lock()
        if not os.path.isdir(root_dir):
            raise RuntimeError('Directory "' + root_dir + '" does not exist.')
        self._path = os.path.join(root_dir, file_name)
        self._dirty = False
        self._config = RawConfigParser()
        self._config.read(self._path)

    def flush(self):
        if not self._dirty:
            return
        with self._lock:
            self._dirty = False
            logger.debug('writing %s', self._path)
            with open(self._path, 'w') as of:
                self._config.write(of)

    def get(self, section, option, default=None):
        """Get a parameter value and return a string.

        If default is specified and section or option are not defined
        in the file, they are created and set to default, which is
        then the return value.

        """
        with self._lock:
            if not self._config.has_option(section, option):
                if default is not None:
                    self._set(section, option, str(default))
                    return str(default)
                return None
            return self._config.get(section, option)

    def set(self, section, option, value):
        """Set option in section to string value."""
        with self._lock:
            self._set(section, option, str(value))

    def _set(self, section, option, value):
        if not self._config.has_section(section):
            self._config.add_section(section)
        elif (self._config.has_option(section, option) and
              self._config.get(section, option) == value):
            return
        self._config.set(section, option, value)
        self._dirty = True

    def unset(self, section, option):
        """Remove option from section."""
        with self._lock:
            if not self._config.has_section(section):
                return
            if self._config.has_option(section, option):
                self._config.remove_option(section, option)
                self._dirty = True
            if not self._config.options(section):
                self._config.remove_section(section)
                self._dirty = True


@contextmanager
def bmp180_params(data_dir, file_name='bmp180.ini'):
    """Open a parameter file and write back any changes when done."""
    params = ParamStore(data_dir, file_name)
    try:
        yield params
    finally:
        params.flush()
