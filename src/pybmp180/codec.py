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

"""Decode BMP180 register contents.

The device only offers single byte register reads, so multi-byte
values are built up here. Each 16 bit value is read high byte first,
from ``register`` and then ``register + 1``. The two reads are never
combined or reordered.

The ``bus`` parameter of these functions is anything with a
``read_register(address)`` method returning an int in the range
0..255, usually a :py:class:`pybmp180.bus.I2CDrive` object.

"""

__docformat__ = "restructuredtext en"


def signed_byte(value):
    """Interpret an unsigned byte as two's-complement.

    :param value: byte value in the range 0..255.

    :type value: int

    :rtype: int

    """
    if value > 127:
        value -= 256
    return value


def read_s8(bus, register):
    """Read a signed byte from ``register``."""
    return signed_byte(bus.read_register(register))


def read_u8(bus, register):
    """Read an unsigned byte from ``register``."""
    return bus.read_register(register)


def read_s16(bus, register):
    """Read a signed 16 bit value, high byte first.

    :param bus: the device to read from.

    :param register: address of the high byte.

    :type register: int

    :return: a value in the range -32768..32767.

    :rtype: int

    """
    hi = read_s8(bus, register)
    lo = read_u8(bus, register + 1)
    return (hi << 8) + lo


def read_u16(bus, register):
    """Read an unsigned 16 bit value, high byte first.

    :return: a value in the range 0..65535.

    :rtype: int

    """
    hi = read_u8(bus, register)
    lo = read_u8(bus, register + 1)
    return (hi << 8) + lo


def read_u24(bus, register):
    # msb, lsb, xlsb of a pressure conversion
    msb = read_u8(bus, register)
    lsb = read_u8(bus, register + 1)
    xlsb = read_u8(bus, register + 2)
    return (msb << 16) + (lsb << 8) + xlsb


def _decode(bus, format_):
    if isinstance(format_, dict):
        result = {}
        for key, value in format_.items():
            result[key] = _decode(bus, value)
    else:
        register, reader = format_
        result = reader(bus, register)
    return result
