# ticks.py - tick data model and per-axis options for TickPlot
# Copyright (C) 2019-2022 Jochen Voss <voss@seehuhn.de>
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

"""Ticks and Axis Options
----------------------

A tick distribution for one axis is described by a :py:class:`TickInfo`
object, which holds an ascending list of :py:class:`Tick` values
together with the information needed to format and draw them.

"""

import collections
import datetime

Tick = collections.namedtuple('Tick', ['position', 'value'])
Tick.__doc__ = """One labelled graduation mark on an axis.

``position`` places the tick along the axis, ``value`` is the number
shown in the label.  The two only differ when the axis uses relative
display, in which case ``value == position - display_relative``.
"""

Bound = collections.namedtuple('Bound', ['min', 'max'])


class TickInfo:

    """The tick distribution chosen for one axis.

    Args:
        ticks (list of Tick): the ticks, in increasing order of
            position.  At least two ticks are required.
        step: the distance between adjacent ticks.  For calendar
            axes this is the integer multiple of `unit`.
        multiplier (int, optional): the "nice" multiplier (1, 2, 5 or
            10) the step was built from.  ``None`` for calendar axes.
        unit (calendar.StepUnit, optional): the calendar unit of the
            step, for timestamp axes only.
        display_relative (optional): if not ``None``, tick values are
            offsets from this base value.
        dash_size (float, optional): the length of one dash period of
            the axis line, in device units.

    """

    def __init__(self, ticks, step, *, multiplier=None, unit=None,
                 display_relative=None, dash_size=None):
        if len(ticks) < 2:
            raise AssertionError(f"need at least two ticks, got {len(ticks)}")
        self.ticks = list(ticks)
        self.step = step
        self.multiplier = multiplier
        self.unit = unit
        self.display_relative = display_relative
        self.dash_size = dash_size

    def __repr__(self):
        extra = ""
        if self.unit is not None:
            extra += f" unit={self.unit.name}"
        if self.display_relative is not None:
            extra += f" relative={self.display_relative!r}"
        if self.dash_size is not None:
            extra += f" dash={self.dash_size:g}"
        return f"<TickInfo {len(self.ticks)} ticks step={self.step!r}{extra}>"

    def __len__(self):
        return len(self.ticks)

    def __iter__(self):
        return iter(self.ticks)

    @property
    def positions(self):
        return [t.position for t in self.ticks]

    @property
    def values(self):
        return [t.value for t in self.ticks]


class AxisOptions:

    """Per-axis settings for the tick engine.

    Args:
        ideal_tick_count (int): the number of ticks to aim for.  Must
            be at least 2.
        ideal_dash_px (number): the preferred length of one dash
            period on the axis line, in device units.
        markers (iterable): values which must be inside the axis
            range, even if no data point is there.
        no_dash (bool): if true, no dash size is computed and the axis
            line is drawn solid.
        tick_fmt (callable, optional): ``tick_fmt(value, tick_info)``
            returns the label text for one tick, replacing the default
            formatting.
        ticks (iterable, optional): explicit tick positions in
            ascending order, replacing the automatic tick search.
            Positions outside the axis range are skipped and the
            iteration stops at the first position beyond the range, so
            an unbounded iterator like ``itertools.count(0, 6)`` can be
            used if it eventually reaches the range.  Explicit ticks
            never use relative display and have no dash size.
        kind (optional): one of :py:data:`num.REAL`,
            :py:data:`num.INTEGER`, :py:data:`num.TIMESTAMP`.  If
            unset, the kind is guessed from the data.
        tz (datetime.tzinfo): the time zone used to place and label
            calendar ticks.

    """

    def __init__(self, ideal_tick_count=6, *, ideal_dash_px=30.0,
                 markers=(), no_dash=False, tick_fmt=None, ticks=None,
                 kind=None, tz=datetime.timezone.utc):
        ideal_tick_count = int(ideal_tick_count)
        if ideal_tick_count < 2:
            raise ValueError(
                f"ideal tick count must be at least 2, not {ideal_tick_count}")
        ideal_dash_px = float(ideal_dash_px)
        if not ideal_dash_px > 0:
            raise ValueError(f"invalid ideal dash length {ideal_dash_px}")
        self.ideal_tick_count = ideal_tick_count
        self.ideal_dash_px = ideal_dash_px
        self.markers = list(markers) if markers is not None else []
        self.no_dash = bool(no_dash)
        self.tick_fmt = tick_fmt
        self.ticks = ticks
        self.kind = kind
        self.tz = tz

    def __repr__(self):
        return (f"<AxisOptions ideal={self.ideal_tick_count}"
                f" dash={self.ideal_dash_px:g} markers={len(self.markers)}>")

    def replace(self, **kwargs):
        """Return a copy of the options with some fields changed."""
        args = dict(ideal_dash_px=self.ideal_dash_px, markers=self.markers,
                    no_dash=self.no_dash, tick_fmt=self.tick_fmt,
                    ticks=self.ticks, kind=self.kind, tz=self.tz)
        ideal = kwargs.pop('ideal_tick_count', self.ideal_tick_count)
        args.update(kwargs)
        return AxisOptions(ideal, **args)
