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

"""Convert raw BMP180 samples to real temperature and pressure.

This module implements the integer compensation algorithm from the
Bosch BMP180 datasheet. The sensor's raw temperature and pressure
counts are corrected with its factory calibration coefficients (see
:py:mod:`pybmp180.calibration`) to give temperature in units of
0.1 °C and pressure in Pa.

The results must be bit exact, so all arithmetic is on integers:

    - Right shifts are arithmetic (sign preserving). Python's ``>>``
      already behaves this way on negative numbers.

    - Divisions truncate towards zero, as in C. Python's ``//``
      rounds towards minus infinity, so :py:func:`trunc_div` is used
      instead.

    - The datasheet stores ``B7`` in an unsigned 32 bit variable and
      chooses between two division orders by comparing it with
      0x80000000. :py:func:`divide_b7` keeps this comparison on the
      low 32 bits of ``B7``, so negative or very large values take the
      same branch they would on the sensor's reference code.

Python integers don't overflow, so intermediate values never lose
precision.

Worked example from the datasheet, in oversampling mode 0::

  cal = CalibrationConstants(
      AC1=408, AC2=-72, AC3=-14383, AC4=32741, AC5=32757, AC6=23153,
      B1=6190, B2=4, MB=-32768, MC=-8711, MD=2868)
  compensate(27898, 23843, 0, cal)
  # CompensatedReading(temperature=15.0, pressure=69964)

Nothing in this module talks to the sensor or keeps state between
calls.

"""

__docformat__ = "restructuredtext en"

from collections import namedtuple

CompensatedReading = namedtuple('CompensatedReading', ('temperature', 'pressure'))


def trunc_div(a, b):
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def as_uint32(value):
    """Reinterpret the low 32 bits of ``value`` as unsigned."""
    return value & 0xFFFFFFFF


def divide_b7(b7, b4):
    """Compute uncorrected pressure from ``B7`` and ``B4``.

    Small values of ``B7`` are doubled before dividing to keep one more
    bit of precision. Values with bit 31 set, as an unsigned 32 bit
    number, are divided first.

    """
    if as_uint32(b7) < 0x80000000:
        return trunc_div(b7 * 2, b4)
    return trunc_div(b7, b4) * 2


def temperature_b5(raw_temperature, cal):
    """Compute the intermediate value ``B5``.

    ``B5`` is needed by both temperature and pressure compensation.

    """
    x1 = ((raw_temperature - cal.AC6) * cal.AC5) >> 15
    x2 = trunc_div(cal.MC << 11, x1 + cal.MD)
    return x1 + x2


def temperature_tenths(b5):
    return (b5 + 8) >> 4


def compensate_temperature(raw_temperature, cal):
    """Compute true temperature.

    :param raw_temperature: uncompensated temperature, 0..65535.

    :type raw_temperature: int

    :param cal: the sensor's calibration coefficients.

    :type cal: pybmp180.calibration.CalibrationConstants

    :return: temperature in °C, with 0.1 °C resolution.

    :rtype: float

    """
    return temperature_tenths(temperature_b5(raw_temperature, cal)) / 10.0


def pressure_from_b5(raw_pressure, b5, mode, cal):
    mode = int(mode)
    b6 = b5 - 4000
    x1 = (cal.B2 * ((b6 * b6) >> 12)) >> 11
    x2 = (cal.AC2 * b6) >> 11
    x3 = x1 + x2
    b3 = trunc_div(((cal.AC1 * 4 + x3) << mode) + 2, 4)
    x1 = (cal.AC3 * b6) >> 13
    x2 = (cal.B1 * ((b6 * b6) >> 12)) >> 16
    x3 = (x1 + x2 + 2) >> 2
    b4 = (cal.AC4 * (x3 + 32768)) >> 15
    b7 = (raw_pressure - b3) * (50000 >> mode)
    p = divide_b7(b7, b4)
    x1 = (p >> 8) * (p >> 8)
    x1 = (x1 * 3038) >> 16
    x2 = (-7357 * p) >> 16
    return p + ((x1 + x2 + 3791) >> 4)


def compensate_pressure(raw_temperature, raw_pressure, mode, cal):
    """Compute true pressure.

    Pressure compensation depends on temperature, so a raw
    temperature taken just before ``raw_pressure`` is needed.

    :param raw_pressure: uncompensated pressure, already shifted right
        by ``8 - mode`` bits.

    :type raw_pressure: int

    :param mode: the oversampling mode ``raw_pressure`` was read with.

    :type mode: pybmp180.sampler.OversamplingMode

    :return: pressure in Pa.

    :rtype: int

    """
    b5 = temperature_b5(raw_temperature, cal)
    return pressure_from_b5(raw_pressure, b5, mode, cal)


def compensate(raw_temperature, raw_pressure, mode, cal):
    """Compute temperature and pressure from one pair of raw samples.

    :rtype: CompensatedReading

    """
    b5 = temperature_b5(raw_temperature, cal)
    return CompensatedReading(
        temperature_tenths(b5) / 10.0,
        pressure_from_b5(raw_pressure, b5, mode, cal))
