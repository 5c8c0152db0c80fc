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

"""Configure Python logging system

Log records from all pybmp180 modules go to the root logger, so
:py:func:`setup_handler` is called once, by the command line program,
before opening the sensor. Each ``-v`` option lowers the threshold by
one level.

"""

import logging
import logging.handlers
import sys

from pybmp180 import __version__, _release, _commit

logger = logging.getLogger(__name__)


class SystemdFormatter(logging.Formatter):
    # prefix each line with a syslog priority, e.g. "<4>" for warnings
    def format(self, record):
        level = min((68 - record.levelno) // 8, 7)
        return '<{:d}>{:s}'.format(
            level, super(SystemdFormatter, self).format(record))

    def formatException(self, exc_info):
        msg = super(SystemdFormatter, self).formatException(exc_info)
        return msg.replace('\n', '\\n')


def _make_handler(logfile):
    if logfile == 'systemd':
        return (logging.ERROR, logging.StreamHandler(stream=sys.stdout),
                SystemdFormatter('%(name)s:%(message)s'))
    if logfile:
        return (logging.ERROR,
                logging.handlers.RotatingFileHandler(
                    logfile, maxBytes=128*1024, backupCount=3),
                logging.Formatter(
                    '%(asctime)s:%(name)s:%(message)s', '%Y-%m-%d %H:%M:%S'))
    return (logging.WARNING, logging.StreamHandler(),
            logging.Formatter('%(asctime)s:%(name)s:%(message)s', '%H:%M:%S'))


def setup_handler(verbose, logfile=None):
    """Add a handler to the root logger.

    :param verbose: number of levels to lower the threshold by.

    :type verbose: int

    :param logfile: file to write to, ``'systemd'`` for stdout with
        priority prefixes, or :obj:`None` for stderr.

    :type logfile: str

    :return: the new handler.

    """
    base_level, handler, formatter = _make_handler(logfile)
    level = max(base_level - (verbose * 10), 1)
    root_logger = logging.getLogger('')
    root_logger.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    logger.warning(
        'pybmp180 version %s, build %s (%s)', __version__, _release, _commit)
    logger.info('Python version %s', sys.version)
    return handler
