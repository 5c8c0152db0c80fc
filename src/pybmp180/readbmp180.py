#!/usr/bin/env python

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

"""Read temperature and pressure from a BMP180 sensor.

This script can also be run with the ``pybmp180-read`` command. ::
%s
This is a simple utility to read the sensor and print the results. If
a ``data_dir`` is given, settings are read from (and defaults written
to) the ``bmp180.ini`` file in that directory. Command line options
override the file.

If this doesn't work, then there's a problem that needs to be sorted
out first. Likely problems include the I2C interface not being
enabled, a permissions problem on ``/dev/i2c-*``, or the wrong bus
number.

"""

__docformat__ = "restructuredtext en"
__usage__ = """
 usage: %s [options] [data_dir]
 options are:
  -h   | --help          display this help
  -a   | --altitude      display estimated altitude & sea level pressure
  -b n | --bus n         use I2C bus n (default 1)
  -c   | --calibration   display calibration coefficients
  -i s | --interval s    wait s seconds between readings (default 10)
  -l f | --log f         write log information to file f
  -m m | --mode m        oversampling mode, 0..3 or name (default 1)
  -n n | --count n       take n readings (default 1, 0 for no limit)
  -r   | --raw           display raw sample values
  -v   | --verbose       increase amount of reassuring messages
                         (repeat for even more messages e.g. -vvv)
 data_dir is a directory containing bmp180.ini
"""
__doc__ %= __usage__ % ('python -m pybmp180.readbmp180')

import getopt
import logging
import sys
import time

import pybmp180.bmp180
import pybmp180.conversions
import pybmp180.logger
from pybmp180.sampler import InvalidMode, parse_mode
import pybmp180.storage

logger = logging.getLogger(__name__)


def print_reading(reading, altitude=None):
    print('Temperature: %.2f C' % reading.temperature)
    print('Temperature: %.2f F' % reading.temperature_f)
    print('Pressure: %.2f hPa' % reading.pressure)
    if altitude is not None:
        print('Altitude: %.1f m' % pybmp180.conversions.altitude(
            reading.pressure))
        print('Sea level pressure: %.2f hPa' % (
            pybmp180.conversions.sea_level_pressure(
                reading.pressure, altitude)))


def read_sensor(bus_number, mode, count, interval,
                calibration=False, raw=False, altitude=None):
    def show_raw(event, value):
        if event == 'raw_temperature':
            print('Raw Temp: 0x%x (%d)' % (value, value))
        elif event == 'raw_pressure':
            print('Raw Pressure value: 0x%X (%d)' % (value, value))

    observer = None
    if raw:
        observer = show_raw
    try:
        with pybmp180.bmp180.BMP180(
                bus_number=bus_number, mode=mode, observer=observer) as sensor:
            if calibration:
                print('Calibration Data')
                print('----------------')
                print(sensor.calibration.to_text())
            n = 0
            while True:
                print_reading(sensor.take_reading(), altitude)
                n += 1
                if count and n >= count:
                    break
                time.sleep(interval)
    except KeyboardInterrupt:
        return 0
    except Exception as ex:
        logger.exception(ex)
        return 3
    return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv
    usage = (__usage__ % (argv[0])).strip()
    try:
        opts, args = getopt.getopt(
            argv[1:], "hab:ci:l:m:n:rv",
            ('help', 'altitude', 'bus=', 'calibration', 'interval=', 'log=',
             'mode=', 'count=', 'raw', 'verbose'))
    except getopt.error as msg:
        print('Error: %s\n' % msg, file=sys.stderr)
        print(usage, file=sys.stderr)
        return 1
    # check arguments
    if len(args) > 1:
        print('Error: 0 or 1 arguments required\n', file=sys.stderr)
        print(usage, file=sys.stderr)
        return 2
    # get defaults, from file if there is one
    settings = {'bus': '1', 'mode': '1', 'altitude': '0'}
    if args:
        with pybmp180.storage.bmp180_params(args[0]) as params:
            settings['bus'] = params.get('config', 'i2c bus', '1')
            settings['mode'] = params.get('config', 'oversampling', 'standard')
            settings['altitude'] = params.get('config', 'altitude', '0')
    # process options
    show_altitude = False
    calibration = False
    count = 1
    interval = 10.0
    logfile = None
    raw = False
    verbose = 0
    try:
        for o, a in opts:
            if o in ('-h', '--help'):
                print(__doc__.split('\n\n')[0])
                print(usage)
                return 0
            elif o in ('-a', '--altitude'):
                show_altitude = True
            elif o in ('-b', '--bus'):
                settings['bus'] = a
            elif o in ('-c', '--calibration'):
                calibration = True
            elif o in ('-i', '--interval'):
                interval = float(a)
            elif o in ('-l', '--log'):
                logfile = a
            elif o in ('-m', '--mode'):
                settings['mode'] = a
            elif o in ('-n', '--count'):
                count = int(a)
            elif o in ('-r', '--raw'):
                raw = True
            elif o in ('-v', '--verbose'):
                verbose += 1
        bus_number = int(settings['bus'])
        mode = parse_mode(settings['mode'])
        altitude = float(settings['altitude'])
    except (ValueError, InvalidMode) as ex:
        print('Error: %s\n' % ex, file=sys.stderr)
        print(usage, file=sys.stderr)
        return 2
    if not show_altitude:
        altitude = None
    # do it!
    pybmp180.logger.setup_handler(verbose, logfile)
    return read_sensor(bus_number, mode, count, interval,
                       calibration=calibration, raw=raw, altitude=altitude)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
