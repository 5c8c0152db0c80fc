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

"""Low level I2C interface to the sensor, using python-smbus.

This module handles low level communication with the sensor via the
``smbus`` extension module distributed with the Linux i2c-tools
package (``python3-smbus`` on Debian and Raspberry Pi OS). It's only
used if :py:mod:`pybmp180.device_smbus2` can't be imported.

"""

__docformat__ = "restructuredtext en"

import smbus


class I2CDevice(object):
    """Low level I2C device access via python-smbus library.

    :param bus_number: the I2C bus number, e.g. 1 for ``/dev/i2c-1``.

    :type bus_number: int

    :param address: the 7 bit I2C device address, for example 0x77.

    :type address: int

    """

    def __init__(self, bus_number, address):
        self.address = address
        self.bus = smbus.SMBus(bus_number)

    def read_byte(self, register):
        return self.bus.read_byte_data(self.address, register)

    def write_byte(self, register, value):
        self.bus.write_byte_data(self.address, register, value)

    def close(self):
        self.bus.close()
