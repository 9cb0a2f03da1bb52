# bounds.py - find the ranges covered by the data on each axis
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

import numpy as np

from .num import REAL
from .ticks import Bound


class _Range:

    def __init__(self, kind):
        self.kind = kind
        self.seed = None
        self.lower = None
        self.upper = None
        self.moved = False

    def add(self, val):
        if self.seed is None:
            self.seed = self.lower = self.upper = val
            return
        if val < self.lower:
            self.lower = val
            self.moved = True
        elif val > self.upper:
            self.upper = val
            self.moved = True

    def bound(self):
        if self.seed is None:
            return self.kind.unit_range(None)
        if not self.moved:
            return self.kind.unit_range(self.seed)
        return Bound(self.lower, self.upper)


def find_bounds(points, x_markers=(), y_markers=(), *, x_kind=REAL,
                y_kind=REAL):
    """Find the axis ranges for a collection of points.

    Points with a hole in either coordinate are ignored.  Markers widen
    the range of their axis, but only once at least one point has been
    seen.  If an axis range would be empty, the unit range of the axis
    kind around the single value (or the default unit range, if there
    is no data at all) is used instead.

    Args:
        points: an iterable of (x, y) pairs.  All series of a plot
            should be passed together, e.g. using
            :py:func:`itertools.chain`.
        x_markers: values which must be included in the x-range.
        y_markers: values which must be included in the y-range.
        x_kind: the kind of the x-axis, from :py:mod:`num`.
        y_kind: the kind of the y-axis.

    Returns:
        A pair of :py:class:`ticks.Bound` objects, the first for the
        x-axis and the second for the y-axis.  In both, min < max.

    """
    xr = _Range(x_kind)
    yr = _Range(y_kind)
    for x, y in points:
        if x_kind.is_hole(x) or y_kind.is_hole(y):
            continue
        xr.add(x_kind.coerce(x))
        yr.add(y_kind.coerce(y))

    if xr.seed is not None:
        for x in x_markers:
            if not x_kind.is_hole(x):
                xr.add(x_kind.coerce(x))
        for y in y_markers:
            if not y_kind.is_hole(y):
                yr.add(y_kind.coerce(y))

    return xr.bound(), yr.bound()


def data_range(*args):
    """Find the smallest and largest finite number in the arguments.

    Arguments can be numbers, arrays or (nested) sequences of numbers.
    ``None`` arguments are ignored.  Raises :py:class:`ValueError` if
    no finite value is found.

    """
    lower = np.inf
    upper = -np.inf
    for arg in args:
        # ignore default values for unset parameters
        if arg is None:
            continue

        # numbers are easy
        if isinstance(arg, (float, int, np.number)):
            if not np.isfinite(arg):
                continue
            lower = min(lower, arg)
            upper = max(upper, arg)
            continue
        if isinstance(arg, str):
            raise TypeError(f"invalid data range {arg!r}")

        # try whether numpy can deal with `arg`
        try:
            aa = np.asarray(arg, dtype=float).flatten()
        except (TypeError, ValueError):
            aa = None
        if aa is not None:
            aa = aa[np.isfinite(aa)]
            if len(aa) > 0:
                lower = min(lower, np.min(aa))
                upper = max(upper, np.max(aa))
            continue

        # ragged nested sequences
        try:
            parts = list(arg)
        except TypeError:
            raise TypeError(f"invalid data range {arg!r}") from None
        for part in parts:
            try:
                a, b = data_range(part)
            except ValueError:
                continue
            lower = min(lower, a)
            upper = max(upper, b)
    if lower > upper:
        raise ValueError("no data range specified")
    return lower, upper
