# __init__.py - package directory file for tickplot
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

"""Plots with Well-Chosen Axis Ticks
=================================

:copyright: 2014-2022, Jochen Voss
:license: GPL version 3 or newer, see LICENSE for more details

Quick Start
-----------

The main entry point for the tickplot package is the
:py:class:`tickplot.plot.Plot()` class which creates a new figure.  The
name :py:func:`tickplot.Plot()` can be used as a shorthand for
:py:class:`tickplot.plot.Plot()`.  Per-axis tick settings are passed
as :py:class:`tickplot.AxisOptions` objects.

The tick engine can also be used on its own, without drawing anything:
:py:func:`tickplot.bounds.find_bounds` finds the axis ranges for a set
of points, and the ``compute_ticks()`` method of the axis kinds
:py:data:`tickplot.REAL`, :py:data:`tickplot.INTEGER` and
:py:data:`tickplot.TIMESTAMP` chooses the ticks.

Modules
-------

The tickplot package is composed of the following main modules:

* :py:mod:`tickplot.plot`
* :py:mod:`tickplot.axes`
* :py:mod:`tickplot.canvas`
* :py:mod:`tickplot.param`
* :py:mod:`tickplot.num`
* :py:mod:`tickplot.bounds`
* :py:mod:`tickplot.scale`
* :py:mod:`tickplot.timescale`
* :py:mod:`tickplot.dash`
* :py:mod:`tickplot.fmt`

"""

__title__ = 'tickplot'
__version__ = '0.4'
__author__ = 'Jochen Voss'
__license__ = 'GPLv3+'
__copyright__ = 'Copyright (c) 2014-2022 Jochen Voss'

from .num import REAL, INTEGER, TIMESTAMP
from .plot import Plot
from .ticks import AxisOptions, Bound, Tick, TickInfo
