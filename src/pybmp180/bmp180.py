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

"""Get calibrated temperature and pressure from a BMP180 sensor.

Introduction
------------

This is the module that user programs normally use. It ties together
the raw sample reading of :py:mod:`pybmp180.sampler` and the
compensation arithmetic of :py:mod:`pybmp180.compensation`.

Creating a :py:class:`BMP180` object opens the I2C bus and reads the
sensor's calibration coefficients. These are kept for the lifetime of
the object. Each reading then starts fresh conversions on the sensor::

  import pybmp180.bmp180
  with pybmp180.bmp180.BMP180(bus_number=1) as sensor:
      reading = sensor.take_reading()
      print(reading.temperature, reading.pressure)

The oversampling mode can be set when the object is created or for a
single reading, e.g. ``sensor.take_reading(mode=3)``. An invalid mode
raises :py:exc:`pybmp180.sampler.InvalidMode` before anything is sent
to the sensor.

An ``observer`` function can be passed in to see the calibration data
and raw values as they are read. It's called with an event name and a
value::

  def show(event, value):
      print(event, value)

  sensor = pybmp180.bmp180.BMP180(observer=show)

The same information is logged at debug level.

Detailed API
------------

"""

__docformat__ = "restructuredtext en"

from collections import namedtuple
import logging

import pybmp180.bus
import pybmp180.calibration
import pybmp180.compensation
import pybmp180.conversions
import pybmp180.sampler
from pybmp180.sampler import (
    OversamplingMode, read_raw_pressure, read_raw_temperature,
    validate_mode)

logger = logging.getLogger(__name__)

Reading = namedtuple(
    'Reading', ('temperature', 'temperature_f', 'pressure', 'pressure_pa'))
Reading.__doc__ = """A complete reading.

``temperature`` and ``temperature_f`` are in °C and °F, ``pressure``
is in hPa and ``pressure_pa`` in Pa.
"""


class BMP180(object):
    """Class that represents the sensor to user program.

    :param bus: an object with ``read_register`` and
        ``write_register`` methods. If :obj:`None` a
        :py:class:`pybmp180.bus.I2CDrive` is opened.

    :param bus_number: I2C bus to open if ``bus`` is :obj:`None`.

    :type bus_number: int

    :param mode: default oversampling mode.

    :type mode: OversamplingMode

    :param sleep_us: function to block for a number of microseconds.

    :param observer: function called with ``(event, value)`` for each
        value read from the sensor.

    """
    def __init__(self, bus=None, bus_number=1,
                 mode=OversamplingMode.STANDARD, sleep_us=None,
                 observer=None):
        self.mode = validate_mode(mode)
        self._sleep = sleep_us or pybmp180.sampler.sleep_us
        self._observer = observer
        self._own_bus = bus is None
        if self._own_bus:
            bus = pybmp180.bus.I2CDrive(bus_number)
        self.bus = bus
        try:
            self.calibration = pybmp180.calibration.load(self.bus)
        except BaseException:
            self.close()
            raise
        logger.debug('calibration %s', repr(self.calibration))
        self._notify('calibration', self.calibration)

    def _notify(self, event, value):
        if self._observer:
            self._observer(event, value)

    def _mode(self, mode):
        if mode is None:
            return self.mode
        return validate_mode(mode)

    def get_raw_temperature(self):
        result = read_raw_temperature(self.bus, sleep=self._sleep)
        logger.debug('raw temp 0x%04X (%d)', result, result)
        self._notify('raw_temperature', result)
        return result

    def get_raw_pressure(self, mode=None):
        mode = self._mode(mode)
        result = read_raw_pressure(self.bus, mode, sleep=self._sleep)
        logger.debug('raw pressure 0x%05X (%d) mode %d', result, result, mode)
        self._notify('raw_pressure', result)
        return result

    def get_temperature(self):
        """Get compensated temperature.

        :return: temperature in °C, 0.1 °C resolution.

        :rtype: float

        """
        return pybmp180.compensation.compensate_temperature(
            self.get_raw_temperature(), self.calibration)

    def get_pressure(self, mode=None):
        """Get compensated pressure.

        A new temperature conversion is done first, as pressure
        compensation needs the current temperature.

        :return: pressure in Pa.

        :rtype: int

        """
        mode = self._mode(mode)
        raw_temp = self.get_raw_temperature()
        raw_pressure = self.get_raw_pressure(mode)
        return pybmp180.compensation.compensate_pressure(
            raw_temp, raw_pressure, mode, self.calibration)

    def take_reading(self, mode=None):
        """Get temperature and pressure.

        If any bus operation fails the exception is propagated and no
        reading is returned.

        :param mode: oversampling mode, or :obj:`None` to use the
            default set when the object was created.

        :rtype: Reading

        """
        mode = self._mode(mode)
        temperature = self.get_temperature()
        pressure = self.get_pressure(mode)
        result = Reading(
            temperature, pybmp180.conversions.temp_f(temperature),
            pybmp180.conversions.pressure_hpa(pressure), pressure)
        logger.debug('reading %s', repr(result))
        self._notify('reading', result)
        return result

    def close(self):
        """Close the I2C bus, if this object opened it."""
        if self._own_bus:
            self.bus.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
