# num.py - the kinds of values which can be shown on an axis
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

"""Axis Kinds
----------

Every axis shows values of one of three kinds:

:py:data:`REAL`
    floating point numbers.  NaN marks a gap in a line.

:py:data:`INTEGER`
    integers.  Tick steps are whole numbers.

:py:data:`TIMESTAMP`
    points in time, stored as integer seconds since the Unix epoch.
    Ticks are placed on calendar boundaries.

The kind objects share one interface, so that the bound aggregator and
the renderer do not need to know which kind they are dealing with.

"""

import datetime

import numpy as np

from . import dash, errors, scale, timescale
from .ticks import Bound, Tick, TickInfo


class _Kind:

    name = None

    def __repr__(self):
        return f"<{self.name} axis kind>"

    def coerce(self, val):
        raise NotImplementedError()

    def coerce_array(self, values):
        """Convert a sequence of values to a float array, for drawing."""
        return np.array([self.coerce(v) for v in np.ravel(values)],
                        dtype=float)

    def is_hole(self, val):
        return False

    def unit_range(self, offset=None):
        if offset is None:
            return Bound(-1, 1)
        return Bound(offset - 1, offset + 1)

    def scale(self, val, rng, pixel_max):
        """Map `val` from the range `rng` onto [0, pixel_max]."""
        lo, hi = rng
        return (self.coerce(val) - lo) * pixel_max / (hi - lo)

    def compute_ticks(self, bound, options, pixel_max=None):
        raise NotImplementedError()

    def given_ticks(self, bound, options):
        """Use the explicit tick positions from `options` which lie in
        `bound`.

        """
        lo, hi = bound
        ticks = []
        for pos in options.ticks:
            pos = self.coerce(pos)
            if pos < lo:
                continue
            if pos > hi:
                break
            ticks.append(Tick(pos, pos))
        if len(ticks) < 2:
            raise errors.NoTickCandidate(
                f"fewer than two of the given ticks lie in [{lo}, {hi}]",
                start=lo, end=hi)
        return TickInfo(ticks, ticks[1].position - ticks[0].position)


class Real(_Kind):

    name = 'real'
    scaler = scale.Linear()

    def coerce(self, val):
        return float(val)

    def coerce_array(self, values):
        return np.asarray(values, dtype=float).ravel()

    def is_hole(self, val):
        # NaN is the only value which is not equal to itself
        return val != val

    def unit_range(self, offset=None):
        if offset is None:
            return Bound(-1.0, 1.0)
        offset = float(offset)
        return Bound(offset - 1.0, offset + 1.0)

    def compute_ticks(self, bound, options, pixel_max=None):
        """Get the ticks for `bound`, together with the dash size if
        `pixel_max`, the axis length in device units, is given.

        """
        if options.ticks is not None:
            return self.given_ticks(bound, options)
        info = self.scaler.compute_ticks(bound, options.ideal_tick_count)
        if pixel_max is not None and not options.no_dash:
            lo, hi = bound
            one_step_px = info.step * pixel_max / (hi - lo)
            info.dash_size = dash.dash_size(
                one_step_px, options.ideal_dash_px, info.multiplier)
        return info


class Integer(Real):

    name = 'integer'
    scaler = scale.IntegerLinear()

    def coerce(self, val):
        return int(val)

    def is_hole(self, val):
        return False

    def unit_range(self, offset=None):
        return _Kind.unit_range(self, offset)


class Timestamp(_Kind):

    name = 'timestamp'

    def coerce(self, val):
        """Convert `val` to seconds since the epoch.

        Accepted are numbers, :py:class:`datetime.datetime` objects
        (naive ones are taken to be UTC), :py:class:`datetime.date`
        objects and :py:class:`numpy.datetime64` values.

        """
        if isinstance(val, datetime.datetime):
            if val.tzinfo is None:
                val = val.replace(tzinfo=datetime.timezone.utc)
            return int(val.timestamp())
        if isinstance(val, datetime.date):
            val = datetime.datetime.combine(val, datetime.time(),
                                            tzinfo=datetime.timezone.utc)
            return int(val.timestamp())
        if isinstance(val, np.datetime64):
            return int(val.astype('datetime64[s]').astype(np.int64))
        return int(val)

    def coerce_array(self, values):
        values = np.asarray(values)
        if values.dtype.kind == 'M':
            secs = values.astype('datetime64[s]').astype(np.int64)
            return secs.astype(float).ravel()
        return super().coerce_array(values)

    def unit_range(self, offset=None):
        if offset is None:
            return Bound(0, 1)
        return Bound(offset, offset + 1)

    def given_ticks(self, bound, options):
        info = super().given_ticks(bound, options)
        dts = [datetime.datetime.fromtimestamp(t, options.tz)
               for t in info.positions]
        info.unit = timescale.boundary_unit(dts)
        return info

    def compute_ticks(self, bound, options, pixel_max=None):
        if options.ticks is not None:
            return self.given_ticks(bound, options)
        # dashes cannot follow months and years of varying length
        return timescale.compute_ticks(bound, options.ideal_tick_count,
                                       options.tz)


REAL = Real()
INTEGER = Integer()
TIMESTAMP = Timestamp()

KINDS = {kind.name: kind for kind in (REAL, INTEGER, TIMESTAMP)}


def get_kind(kind):
    """Look up an axis kind by name.  Kind objects are passed through."""
    if isinstance(kind, _Kind):
        return kind
    try:
        return KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown axis kind {kind!r}") from None


def _column_kind(values):
    if isinstance(values, np.ndarray):
        if values.dtype.kind == 'M':
            return TIMESTAMP
        if values.dtype.kind in 'iub':
            return INTEGER
        if values.dtype.kind != 'O':
            return REAL
    kind = INTEGER
    for val in np.ravel(np.asarray(values, dtype=object)):
        if isinstance(val, (datetime.date, np.datetime64)):
            return TIMESTAMP
        if not isinstance(val, (int, np.integer)):
            kind = REAL
    return kind


def detect_kind(*columns):
    """Guess the axis kind from data values.

    Each argument is one column of values (a sequence or an array).
    Dates and times anywhere give :py:data:`TIMESTAMP`, if all values
    are integers the result is :py:data:`INTEGER`, otherwise
    :py:data:`REAL`.  Without any values, :py:data:`REAL` is returned.

    """
    kinds = [_column_kind(col) for col in columns
             if col is not None and np.size(col) > 0]
    if not kinds:
        return REAL
    if TIMESTAMP in kinds:
        return TIMESTAMP
    if all(kind is INTEGER for kind in kinds):
        return INTEGER
    return REAL
