# fmt.py - tick label formatting for TickPlot
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

"""Tick Labels
-----------

Numbers are printed with just enough decimal places to distinguish
adjacent ticks.  For each value, the shorter of plain and scientific
notation is used.  Calendar ticks are printed according to the unit of
the tick step.

"""

import datetime
import math

import numpy as np

from .timescale import StepUnit

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Relative display is used once a label gets longer than this.
MAX_LABEL_LENGTH = 7

_EPS = 1e-9


def _decade(x):
    return math.floor(math.log10(abs(x)) + _EPS)


def precision(step):
    """The number of decimal places needed to resolve `step`."""
    return max(0, math.ceil(-math.log10(step) - _EPS))


def _strip_sign(s):
    if s.startswith('-') and float(s) == 0:
        return s[1:]
    return s


def _compact_exp(s):
    mant, exp = s.split('e')
    return f"{mant}e{int(exp)}"


def fmt_plain(val, step=None):
    """Format `val` in fixed-point notation.

    With `step` given, the number of decimal places is chosen to
    resolve multiples of `step`; otherwise the shortest exact
    representation is used.

    """
    if isinstance(val, (int, np.integer)):
        return str(int(val))
    if step is None:
        return _strip_sign(np.format_float_positional(val, trim='-'))
    return _strip_sign(f"{val:.{precision(step)}f}")


def fmt_sci(val, step=None):
    """Format `val` in compact scientific notation, e.g. ``1.5e12``."""
    if val == 0:
        return "0"
    if step is None:
        mant, exp = format(float(val), '.15e').split('e')
        mant = mant.rstrip('0').rstrip('.')
        return f"{mant}e{int(exp)}"
    digits = max(0, _decade(val) - _decade(step))
    return _compact_exp(format(float(val), f'.{digits}e'))


def fmt_number(val, step=None):
    """Format a tick value, choosing the shorter of plain and scientific
    notation.  Plain notation wins ties.

    """
    plain = fmt_plain(val, step)
    sci = fmt_sci(val, step)
    if len(plain) <= len(sci):
        return plain
    return sci


def should_fmt_offset(start, end, step):
    """Decide whether labels should be shown relative to `start`."""
    return (len(fmt_number(start, step)) > MAX_LABEL_LENGTH
            or len(fmt_number(end, step)) > MAX_LABEL_LENGTH)


def fmt_datetime(dt, unit):
    """Format a tick at calendar resolution `unit`.

    Each unit shows one coarser field for context.

    """
    if unit == StepUnit.YEAR:
        return f"{dt.year}"
    if unit == StepUnit.MONTH:
        return f"{dt.year} {MONTHS[dt.month-1]}"
    if unit == StepUnit.DAY:
        return f"{MONTHS[dt.month-1]} {dt.day}"
    if unit == StepUnit.HOUR:
        return f"{WEEKDAYS[dt.weekday()]}:{dt.hour:02d}"
    if unit == StepUnit.MINUTE:
        return f"{dt.hour:02d}:{dt.minute:02d}"
    if unit == StepUnit.SECOND:
        return f"{dt.minute:02d}:{dt.second:02d}"
    raise ValueError(f"invalid calendar unit {unit!r}")


def fmt_datetime_full(dt):
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def fmt_timestamp(ts, unit=None, tz=datetime.timezone.utc):
    dt = datetime.datetime.fromtimestamp(ts, tz)
    if unit is None:
        return fmt_datetime_full(dt)
    return fmt_datetime(dt, unit)


class WhereCounter:

    """Hands out the names used in "where" footnotes.

    One counter is shared by all axes of a figure, so that the first
    axis with relative labels gets "j", the next one "k", and so on.

    """

    NAMES = "jklmnpqrstuvw"

    def __init__(self):
        self.count = 0

    def request(self):
        names = self.NAMES
        idx = self.count
        self.count += 1
        name = names[idx % len(names)]
        if idx >= len(names):
            name += str(idx // len(names))
        return name


class TickFormatter:

    """Produce the label texts for one axis.

    Args:
        info (ticks.TickInfo): the tick distribution of the axis.
        options (ticks.AxisOptions, optional): a custom `tick_fmt`
            callback and the time zone are taken from here.
        where (WhereCounter, optional): needed if the axis uses
            relative display; supplies the footnote name.

    """

    def __init__(self, info, options=None, where=None):
        self.info = info
        self.tick_fmt = options.tick_fmt if options is not None else None
        self.tz = options.tz if options is not None else datetime.timezone.utc
        self.name = None
        if info.display_relative is not None:
            if where is None:
                where = WhereCounter()
            self.name = where.request()

    def _fmt_value(self, val, step):
        info = self.info
        if self.tick_fmt is not None:
            return str(self.tick_fmt(val, info))
        if info.unit is not None:
            return fmt_timestamp(val, step, self.tz)
        return fmt_number(val, step)

    def label(self, tick):
        info = self.info
        step = info.unit if info.unit is not None else info.step
        text = self._fmt_value(tick.value, step)
        if self.name is not None:
            text = f"{self.name}+{text}"
        return text

    def labels(self):
        return [self.label(tick) for tick in self.info.ticks]

    def where(self):
        """The footnote explaining relative labels, or ``None``."""
        if self.name is None:
            return None
        base = self._fmt_value(self.info.display_relative, None)
        return f"where {self.name} = {base}"
