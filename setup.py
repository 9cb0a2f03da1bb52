# setup.py - setuptools configuration for the tickplot package
# Copyright (C) 2014-2022 Jochen Voss <voss@seehuhn.de>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

"""setuptools configuration for the tickplot package"""

import os.path
import re

from setuptools import setup


def read_version():
    # importing the package would need all dependencies to be installed
    fname = os.path.join(os.path.dirname(__file__), 'tickplot', '__init__.py')
    with open(fname) as f:
        m = re.search(r"^__version__ = '([^']*)'", f.read(), re.M)
    return m.group(1)


setup(
    name='TickPlot',
    version=read_version(),
    packages=['tickplot'],
    python_requires='>=3.9',

    install_requires=[
        'cairocffi',
        'numpy',
        'python-dateutil',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
    },

    # metadata for upload to PyPI
    author='Jochen Voss',
    author_email='voss@seehuhn.de',
    description='plots with well-chosen axis ticks, drawn using Cairo',
    keywords='cairo graphics plotting axis ticks',
    url='http://github.com/seehuhn/py-tickplot',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 or later' +
        ' (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Scientific/Engineering :: Visualization',
    ]
)
