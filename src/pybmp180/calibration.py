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

"""Factory calibration coefficients of a BMP180 sensor.

Every BMP180 is individually calibrated at the factory. The eleven
coefficients are stored in the sensor's EEPROM at addresses 0xAA to
0xBF and are needed to convert raw ADC counts into real temperature
and pressure values (see :py:mod:`pybmp180.compensation`).

The coefficients are read once, when a session starts, with
:py:func:`load`::

  import pybmp180.bus
  import pybmp180.calibration
  bus = pybmp180.bus.I2CDrive(1)
  cal = pybmp180.calibration.load(bus)
  print(cal.AC1, cal.MD)

The result is a :py:class:`CalibrationConstants` tuple, so it can't be
changed after it has been read.

Decoding is controlled by the ``calibration_format`` dictionary. The
keys are coefficient names and the values are ``(register, reader)``
tuples. ``AC4``, ``AC5`` and ``AC6`` are unsigned, all the others are
signed two's-complement values.

"""

__docformat__ = "restructuredtext en"

from collections import OrderedDict, namedtuple

from pybmp180.codec import _decode, read_s16, read_u16
import pybmp180.constants as reg

calibration_format = OrderedDict((
    ('AC1', (reg.CAL_AC1, read_s16)),
    ('AC2', (reg.CAL_AC2, read_s16)),
    ('AC3', (reg.CAL_AC3, read_s16)),
    ('AC4', (reg.CAL_AC4, read_u16)),
    ('AC5', (reg.CAL_AC5, read_u16)),
    ('AC6', (reg.CAL_AC6, read_u16)),
    ('B1', (reg.CAL_B1, read_s16)),
    ('B2', (reg.CAL_B2, read_s16)),
    ('MB', (reg.CAL_MB, read_s16)),
    ('MC', (reg.CAL_MC, read_s16)),
    ('MD', (reg.CAL_MD, read_s16)),
    ))


class CalibrationConstants(namedtuple(
        'CalibrationConstants', list(calibration_format.keys()))):
    """The eleven calibration coefficients of one sensor."""
    __slots__ = ()

    def to_text(self):
        """Format coefficients one per line, e.g. ``AC1 =    408``."""
        return '\n'.join(
            '{:s} = {:6d}'.format(k, v) for k, v in self._asdict().items())


def load(bus):
    """Read calibration coefficients from the sensor.

    Bus errors are not caught, so a failed read leaves no partial
    result.

    :param bus: the device to read from.

    :rtype: CalibrationConstants

    """
    return CalibrationConstants(**_decode(bus, calibration_format))
