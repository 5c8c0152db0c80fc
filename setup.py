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

from setuptools import setup
from setuptools import __version__ as setuptools_version

# read current version info without importing pybmp180 package
with open('src/pybmp180/__init__.py') as f:
    exec(f.read())

# set options for building distributions
command_options = {
    'sdist': {
        'formats': ('setup.py', 'gztar'),
        },
    }

setup_kwds = {
    'command_options': command_options,
    }


if tuple(map(int, setuptools_version.split('.')[:2])) < (61, 0):
    from setuptools import find_packages
    # get metadata from pyproject.toml
    import toml
    metadata = toml.load('pyproject.toml')
    with open(metadata['project']['readme']) as ldf:
        long_description = ldf.read()
    find_args = metadata['tool']['setuptools']['packages']['find']
    find_args['where'] = find_args['where'][0]
    packages = find_packages(**find_args)
    # add to setup arguments
    setup_kwds.update(
        version = __version__,
        name = metadata['project']['name'],
        author = metadata['project']['authors'][0]['name'],
        author_email = metadata['project']['authors'][0]['email'],
        url = metadata['project']['urls']['Homepage'],
        description = metadata['project']['description'],
        long_description = long_description,
        classifiers = metadata['project']['classifiers'],
        license = metadata['project']['license']['text'],
        packages = packages,
        package_dir = {'' : 'src'},
        entry_points = {
            'console_scripts' : [
                '{} = {}'.format(k, v)
                for k, v in metadata['project']['scripts'].items()],
            },
        install_requires = metadata['project']['dependencies'],
        extras_require = metadata['project']['optional-dependencies'],
        zip_safe = metadata['tool']['setuptools']['zip-safe'],
        )

setup(**setup_kwds)
