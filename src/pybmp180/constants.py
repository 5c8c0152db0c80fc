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

"""Bits of data used in several places.

This module collects together the BMP180 register map and command
codes used by other pybmp180 modules. The values come from the Bosch
BMP180 datasheet and must not be changed.

"""

__docformat__ = "restructuredtext en"

# the BMP180 always answers on this I2C address
DEVICE_ADDRESS = 0x77

# calibration coefficients, 16 bit big-endian pairs in EEPROM
CAL_AC1 = 0xAA
CAL_AC2 = 0xAC
CAL_AC3 = 0xAE
CAL_AC4 = 0xB0
CAL_AC5 = 0xB2
CAL_AC6 = 0xB4
CAL_B1 = 0xB6
CAL_B2 = 0xB8
CAL_MB = 0xBA
CAL_MC = 0xBC
CAL_MD = 0xBE

CONTROL = 0xF4
# temperature and pressure share the same result registers
TEMPDATA = 0xF6
PRESSUREDATA = 0xF6

READTEMPCMD = 0x2E
READPRESSURECMD = 0x34

# temperature conversion time, microseconds
TEMP_WAIT = 5000
