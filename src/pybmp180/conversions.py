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

"""conversions.py - a set of functions to convert pybmp180 native
units (Celsius, Pa, hPa) to other popular units

"""

__docformat__ = "restructuredtext en"

# standard atmosphere sea level pressure, hPa
SEA_LEVEL = 1013.25


def scale(value, factor):
    """Multiply value by factor, allowing for None values."""
    if value is None:
        return None
    return value * factor

def pressure_hpa(pa):
    "Convert pressure from pascals to hectopascals/millibar"
    if pa is None:
        return None
    return pa / 100.0

def pressure_inhg(hPa):
    "Convert pressure from hectopascals/millibar to inches of mercury"
    return scale(hPa, 1 / 33.86389)

def temp_f(c):
    "Convert temperature from Celsius to Fahrenheit"
    if c is None:
        return None
    return (c * 9.0 / 5.0) + 32.0

def altitude(hPa, sea_level=SEA_LEVEL):
    """Estimate altitude in metres from absolute pressure.

    Uses the international barometric formula, as given in the BMP180
    datasheet. The result is only as good as the ``sea_level``
    pressure value.

    """
    if hPa is None:
        return None
    return 44330.0 * (1.0 - ((hPa / sea_level) ** (1.0 / 5.255)))

def sea_level_pressure(hPa, altitude_m):
    """Convert absolute pressure at ``altitude_m`` metres to
    equivalent sea level pressure.

    """
    if hPa is None:
        return None
    return hPa / ((1.0 - (altitude_m / 44330.0)) ** 5.255)
