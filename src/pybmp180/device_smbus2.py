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

"""Low level I2C interface to the sensor, using smbus2.

Introduction
============

This module handles low level communication with the sensor via the
`smbus2 <https://github.com/kplindegaard/smbus2>`_ library, a pure
Python implementation of the Linux SMBus interface. It is the default
device module and needs no compiler to install. See
:py:mod:`pybmp180.device_smbus` for an alternative.

Testing
=======

Run :py:mod:`pybmp180-read <pybmp180.readbmp180>` with increased
verbosity so it reports which device access module is being used::

    pybmp180-read -vv
    11:30:35:pybmp180.logger:pybmp180 version 26.10.0, build 1 (0000000)
    11:30:35:pybmp180.logger:Python version 3.11.2 (main, Mar 13 2023, 12:18:29) [GCC 12.2.0]
    11:30:35:pybmp180.bus:using pybmp180.device_smbus2

API
===

"""

__docformat__ = "restructuredtext en"

import smbus2


class I2CDevice(object):
    """Low level I2C device access via smbus2 library.

    :param bus_number: the I2C bus number, e.g. 1 for ``/dev/i2c-1``.

    :type bus_number: int

    :param address: the 7 bit I2C device address, for example 0x77.

    :type address: int

    """

    def __init__(self, bus_number, address):
        self.address = address
        self.bus = smbus2.SMBus(bus_number)

    def read_byte(self, register):
        """Read one byte from a device register.

        If the read fails for any reason, an :obj:`IOError` exception
        is raised.

        :rtype: int

        """
        return self.bus.read_byte_data(self.address, register)

    def write_byte(self, register, value):
        """Write one byte to a device register.

        If the write fails for any reason, an :obj:`IOError` exception
        is raised.

        """
        self.bus.write_byte_data(self.address, register, value)

    def close(self):
        self.bus.close()
