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

"""Register level access to a BMP180 on an I2C bus.

The rest of pybmp180 only needs an object with two methods,
``read_register(address)`` and ``write_register(address, value)``.
:py:class:`I2CDrive` provides them for a real sensor, using whichever
I2C library is installed.

There's no locking. Only one thread should use a bus at a time.

"""

__docformat__ = "restructuredtext en"

import logging

import pybmp180.constants as reg

logger = logging.getLogger(__name__)


class BusError(IOError):
    """A read or write on the I2C bus failed."""
    pass


class I2CDrive(object):
    """Low level interface to the sensor via I2C.

    :param bus_number: the I2C bus number. The Raspberry Pi rev 2 and
        later have the primary bus on ``/dev/i2c-1``, rev 1 uses
        ``/dev/i2c-0``.

    :type bus_number: int

    :param address: the device address.

    :type address: int

    """
    def __init__(self, bus_number=1, address=reg.DEVICE_ADDRESS):
        for module_name in ('device_smbus2', 'device_smbus'):
            logger.debug('trying I2C module %s', module_name)
            try:
                module = __import__(module_name, globals(), locals(), level=1)
                I2CDevice = getattr(module, 'I2CDevice')
                break
            except ImportError:
                pass
        else:
            raise ImportError('No I2C library found')
        logger.info('using %s', module.__name__)
        self.bus_number = bus_number
        self.address = address
        try:
            self.dev = I2CDevice(bus_number, address)
        except (IOError, OSError) as ex:
            raise BusError('cannot open I2C bus {:d}: {!s}'.format(
                bus_number, ex))

    def read_register(self, address):
        """Read one byte from the sensor.

        :param address: register to read from.

        :type address: int

        :raises BusError: if the read fails.

        :rtype: int

        """
        try:
            return self.dev.read_byte(address)
        except (IOError, OSError) as ex:
            raise BusError('read of register 0x{:02X} failed: {!s}'.format(
                address, ex))

    def write_register(self, address, value):
        """Write one byte to the sensor.

        :param address: register to write to.

        :type address: int

        :param value: the value to write.

        :type value: int

        :raises BusError: if the write fails.

        """
        try:
            self.dev.write_byte(address, value)
        except (IOError, OSError) as ex:
            raise BusError('write of register 0x{:02X} failed: {!s}'.format(
                address, ex))

    def close(self):
        self.dev.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
