# timescale.py - axis ticks for calendar time
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

"""Calendar Ticks
--------------

Timestamps are integer seconds since the Unix epoch.  Ticks for a time
axis are placed on calendar boundaries (new years, first of the month,
midnight, full hours, ...), so the step between two ticks is a multiple
of a calendar unit rather than a fixed number of seconds.  The
:py:class:`BestTickFinder` searches all units and their candidate step
multiples and keeps the tick list closest to the desired tick count.

Calendar arithmetic is delegated to :py:mod:`datetime` and
:py:class:`dateutil.relativedelta.relativedelta`.

"""

import collections
import datetime
import enum
import itertools
import logging

from dateutil.relativedelta import relativedelta
from dateutil.tz import resolve_imaginary

from . import errors
from .ticks import Tick, TickInfo

LOGGER = logging.getLogger(__name__)


class StepUnit(enum.IntEnum):

    """Calendar units for time axis ticks, ordered from coarse to fine."""

    YEAR = 0
    MONTH = 1
    DAY = 2
    HOUR = 3
    MINUTE = 4
    SECOND = 5


STEPS = {
    StepUnit.YEAR: (1, 2, 5, 10, 20, 25, 50, 100, 200, 500, 1000, 2000, 5000),
    StepUnit.MONTH: (1, 2, 3, 6),
    StepUnit.DAY: (1, 2, 4, 5, 7),
    StepUnit.HOUR: (1, 2, 4, 6),
    StepUnit.MINUTE: (1, 2, 10, 15, 30),
    StepUnit.SECOND: (1, 2, 5, 10, 15, 30),
}

_FIELDS = {
    StepUnit.YEAR: 'years',
    StepUnit.MONTH: 'months',
    StepUnit.DAY: 'days',
    StepUnit.HOUR: 'hours',
    StepUnit.MINUTE: 'minutes',
    StepUnit.SECOND: 'seconds',
}

# units counted in elapsed time rather than on the wall clock
_SECONDS = {
    StepUnit.HOUR: 3600,
    StepUnit.MINUTE: 60,
    StepUnit.SECOND: 1,
}

CalendarTicks = collections.namedtuple('CalendarTicks',
                                       ['unit', 'step', 'ticks'])


def _round_up(val, multiple):
    return -(-val // multiple) * multiple


def first_tick(dt, unit, step):
    """Get the first tick at or after `dt`.

    The time `dt` is rounded up to the next boundary of `unit`, and
    then further up until the unit count is a multiple of `step`.
    Years are counted from year 0, months, days, hours, minutes and
    seconds from the start of the enclosing year, month, day, hour and
    minute, respectively.  Returns ``None`` if the tick would be
    outside the range of :py:class:`datetime.datetime`.

    """
    if unit == StepUnit.YEAR:
        year = dt.year
        if dt != dt.replace(month=1, day=1, hour=0, minute=0, second=0,
                            microsecond=0):
            year += 1
        year = _round_up(year, step)
        if year > datetime.MAXYEAR:
            return None
        return dt.replace(year=year, month=1, day=1, hour=0, minute=0,
                          second=0, microsecond=0)

    if unit == StepUnit.MONTH:
        month0 = dt.month - 1
        if dt != dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0):
            month0 += 1
        month0 = _round_up(month0, step)
        year = dt.year + month0 // 12
        if year > datetime.MAXYEAR:
            return None
        return dt.replace(year=year, month=month0 % 12 + 1, day=1, hour=0,
                          minute=0, second=0, microsecond=0)

    if unit == StepUnit.DAY:
        base = dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        day0 = dt.day - 1
        if dt != dt.replace(hour=0, minute=0, second=0, microsecond=0):
            day0 += 1
        return _shift(base, 'days', _round_up(day0, step))

    if unit == StepUnit.HOUR:
        base = dt.replace(hour=0, minute=0, second=0, microsecond=0)
        hour = dt.hour
        if dt != dt.replace(minute=0, second=0, microsecond=0):
            hour += 1
        return _shift(base, 'hours', _round_up(hour, step))

    if unit == StepUnit.MINUTE:
        base = dt.replace(minute=0, second=0, microsecond=0)
        minute = dt.minute
        if dt.second or dt.microsecond:
            minute += 1
        return _shift(base, 'minutes', _round_up(minute, step))

    if unit == StepUnit.SECOND:
        base = dt.replace(second=0, microsecond=0)
        second = dt.second
        if dt.microsecond:
            second += 1
        return _shift(base, 'seconds', _round_up(second, step))

    raise ValueError(f"invalid calendar unit {unit!r}")


def _shift(dt, field, amount):
    try:
        return dt + relativedelta(**{field: amount})
    except (OverflowError, ValueError):
        # beyond datetime.MAXYEAR
        return None


def _resolve(dt):
    """Move a wall clock time which falls into a daylight saving gap
    forward by the length of the gap.

    """
    try:
        return resolve_imaginary(dt)
    except OverflowError:
        # no gaps within a day of datetime.MAXYEAR
        return dt


def boundary_unit(dts):
    """Find the coarsest calendar unit such that all of `dts` fall on a
    boundary of this unit.

    """
    for unit in StepUnit:
        if all(first_tick(dt, unit, 1) == dt for dt in dts):
            return unit
    return StepUnit.SECOND


def iter_ticks(dt, unit, step):
    """Iterate over the ticks of the given unit and step, starting at the
    first tick at or after `dt`.  The iteration stops at the end of the
    representable date range.

    Days, months and years follow the wall clock, so that ticks stay on
    local midnight when daylight saving time starts or ends.  Hours,
    minutes and seconds are counted in elapsed time from the first
    tick, so that these ticks are evenly spaced and never repeat.

    """
    first = first_tick(dt, unit, step)
    if first is None:
        return
    first = _resolve(first)

    if unit in _SECONDS:
        tz = first.tzinfo
        delta = datetime.timedelta(seconds=_SECONDS[unit] * step)
        try:
            first = first.astimezone(datetime.timezone.utc)
        except OverflowError:
            return
        for n in itertools.count():
            try:
                tick = (first + n * delta).astimezone(tz)
            except OverflowError:
                return
            yield tick

    field = _FIELDS[unit]
    for n in itertools.count():
        tick = _shift(first, field, n * step)
        if tick is None:
            return
        yield _resolve(tick)


class BestTickFinder:

    """Search calendar units and step sizes for the best tick distribution.

    Args:
        start (int): start of the time range, in seconds since the epoch.
        end (int): end of the time range, in seconds since the epoch.
        ideal_tick_count (int): the desired number of ticks.
        tz (datetime.tzinfo): the time zone which determines where
            calendar boundaries fall.

    """

    def __init__(self, start, end, ideal_tick_count, tz=datetime.timezone.utc):
        if ideal_tick_count < 2:
            raise ValueError(
                f"ideal tick count must be at least 2, not {ideal_tick_count}")
        if start > end:
            raise ValueError(f"invalid time range {start} > {end}")
        self.start = start
        self.end = end
        self.tz = tz
        self.ideal = ideal_tick_count
        # candidates with more ticks than this are given up on
        self.max_ticks = 2 * ideal_tick_count
        self.best = None

    def gen_ticks(self, unit, step):
        """Generate the ticks for one unit and step.

        Returns a list of timestamps, or ``None`` if more than
        `max_ticks` ticks would be needed to reach the end of the range.

        """
        ticks = []
        start = datetime.datetime.fromtimestamp(self.start, self.tz)
        for dt in iter_ticks(start, unit, step):
            ts = int(dt.timestamp())
            if ts > self.end:
                break
            if ts < self.start or (ticks and ts <= ticks[-1]):
                # a wall clock time repeated when the clocks go back
                continue
            if len(ticks) >= self.max_ticks:
                return None
            ticks.append(ts)
        return ticks

    def consider_set(self, candidate):
        """Make `candidate` the new best candidate, if it is better.

        A candidate is better if its tick count is closer to the ideal
        count, or equally close but with fewer ticks.  Returns whether
        the candidate was chosen.

        """
        n_best = len(self.best.ticks) if self.best is not None else 0
        n_new = len(candidate.ticks)
        old_closeness = abs(n_best - self.ideal)
        new_closeness = abs(n_new - self.ideal)
        if new_closeness < old_closeness or (
                new_closeness == old_closeness and n_new < n_best):
            self.best = candidate
            return True
        return False

    def consider(self, unit, steps=None):
        """Try all step sizes for `unit`, largest first.

        Smaller steps give more ticks, so once a step size is rejected
        for producing too many ticks, the remaining steps are skipped.

        """
        if steps is None:
            steps = STEPS[unit]
        for step in sorted(steps, reverse=True):
            ticks = self.gen_ticks(unit, step)
            if ticks is None:
                LOGGER.debug("%s x %d: too many ticks, skipping smaller steps",
                             unit.name, step)
                break
            if len(ticks) < 2:
                continue
            self.consider_set(CalendarTicks(unit, step, ticks))

    def search(self):
        for unit in StepUnit:
            self.consider(unit)
        return self.into_best()

    def into_best(self):
        if self.best is None or len(self.best.ticks) < 2:
            return None
        return self.best


def find_ticks(start, end, ideal_tick_count, tz=datetime.timezone.utc):
    """Find calendar ticks for the time range [start, end].

    Returns a :py:class:`CalendarTicks` tuple, or ``None`` if no unit
    and step produces at least two ticks.

    """
    return BestTickFinder(start, end, ideal_tick_count, tz).search()


def compute_ticks(bound, ideal_tick_count, tz=datetime.timezone.utc):
    """Compute the tick distribution for a time axis.

    Calendar axes never use relative labels and have no dash size,
    since dash spacing cannot follow the irregular lengths of months
    and years.

    Raises:
        errors.NoTickCandidate: if no tick distribution with at least
            two ticks exists.

    """
    start, end = bound
    res = find_ticks(start, end, ideal_tick_count, tz)
    if res is None:
        raise errors.NoTickCandidate(
            f"no calendar ticks found for time range [{start}, {end}]",
            start=start, end=end)
    LOGGER.debug("calendar ticks: %d x %s, %d ticks",
                 res.step, res.unit.name, len(res.ticks))
    ticks = [Tick(t, t) for t in res.ticks]
    return TickInfo(ticks, res.step, unit=res.unit)
