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

"""Get raw (uncompensated) samples from a BMP180.

A measurement starts by writing a command to the control register.
The result is only valid after the conversion time has elapsed, so
each function here blocks for the full conversion time before reading
the result registers.

Pressure conversions have four oversampling modes, trading conversion
time for resolution. The mode also sets the number of significant bits
in the raw pressure value, which is 16 + mode.

"""

__docformat__ = "restructuredtext en"

from enum import IntEnum
import time

from pybmp180.codec import read_u16, read_u24
import pybmp180.constants as reg


class OversamplingMode(IntEnum):
    ULTRA_LOW_POWER = 0
    STANDARD = 1
    HIGH_RES = 2
    ULTRA_HIGH_RES = 3


class InvalidMode(ValueError):
    """Oversampling mode is not one of the four the sensor supports."""
    pass


# (conversion time in microseconds, right shift of 24 bit result)
mode_timing = {
    OversamplingMode.ULTRA_LOW_POWER : (5000, 8),
    OversamplingMode.STANDARD        : (8000, 7),
    OversamplingMode.HIGH_RES        : (14000, 6),
    OversamplingMode.ULTRA_HIGH_RES  : (26000, 5),
    }


def sleep_us(n):
    """Block for ``n`` microseconds."""
    time.sleep(n / 1.0e6)


def validate_mode(mode):
    """Check an oversampling mode and convert it to an
    :py:class:`OversamplingMode`.

    :raises InvalidMode: if ``mode`` isn't in the range 0..3.

    """
    if isinstance(mode, bool):
        raise InvalidMode('invalid oversampling mode {!r}'.format(mode))
    try:
        return OversamplingMode(mode)
    except ValueError:
        raise InvalidMode('invalid oversampling mode {!r}'.format(mode))


def parse_mode(text):
    """Convert a mode number or name, e.g. from a config file, to an
    :py:class:`OversamplingMode`.

    Names are case insensitive and may use ``-`` or spaces instead of
    ``_``, so ``'ultra high res'`` and ``'3'`` are equivalent.

    """
    if isinstance(text, int):
        return validate_mode(text)
    text = str(text).strip()
    if text.lstrip('-').isdigit():
        try:
            value = int(text)
        except ValueError:
            raise InvalidMode('invalid oversampling mode {!r}'.format(text))
        return validate_mode(value)
    name = text.upper().replace('-', '_').replace(' ', '_')
    try:
        return OversamplingMode[name]
    except KeyError:
        raise InvalidMode('invalid oversampling mode {!r}'.format(text))


def read_raw_temperature(bus, sleep=sleep_us):
    """Start a temperature conversion and return the raw result.

    :param bus: the device, with ``read_register`` and
        ``write_register`` methods.

    :param sleep: function to block for a number of microseconds.

    :rtype: int

    """
    bus.write_register(reg.CONTROL, reg.READTEMPCMD)
    sleep(reg.TEMP_WAIT)
    return read_u16(bus, reg.TEMPDATA)


def read_raw_pressure(bus, mode, sleep=sleep_us):
    """Start a pressure conversion and return the raw result.

    :param mode: oversampling mode, 0..3.

    :type mode: OversamplingMode

    :raises InvalidMode: if ``mode`` isn't valid. Nothing is sent to
        the sensor.

    :rtype: int

    """
    mode = validate_mode(mode)
    wait, shift = mode_timing[mode]
    bus.write_register(reg.CONTROL, reg.READPRESSURECMD + (int(mode) << 6))
    sleep(wait)
    return read_u24(bus, reg.PRESSUREDATA) >> shift
