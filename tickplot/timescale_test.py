#! /usr/bin/env python3

import datetime

import pytest

from dateutil import tz as dateutil_tz

from . import errors, timescale
from .timescale import StepUnit

UTC = datetime.timezone.utc


def _ts(*args, tz=UTC):
    return int(datetime.datetime(*args, tzinfo=tz).timestamp())

def _dt(ts, tz=UTC):
    return datetime.datetime.fromtimestamp(ts, tz)


def test_thirteen_months():
    res = timescale.find_ticks(_ts(2020, 1, 1), _ts(2021, 2, 1), 6)
    assert res.unit == StepUnit.MONTH
    assert res.step in (2, 3)
    assert res.step == 3
    assert [_dt(t).month for t in res.ticks] == [1, 4, 7, 10, 1]

def test_days():
    res = timescale.find_ticks(_ts(2020, 1, 30), _ts(2020, 2, 4), 7)
    assert res.unit == StepUnit.DAY
    assert res.step == 1
    assert len(res.ticks) in (6, 7)
    days = [_dt(t).day for t in res.ticks]
    assert days == [30, 31, 1, 2, 3, 4]

def test_compute_ticks():
    info = timescale.compute_ticks((_ts(2020, 1, 30), _ts(2020, 2, 4)), 7)
    assert info.unit == StepUnit.DAY
    assert info.step == 1
    assert info.display_relative is None
    assert info.dash_size is None
    assert info.positions == info.values
    assert all(isinstance(t, int) for t in info.positions)

def test_first_tick():
    cases = [
        (datetime.datetime(2020, 1, 30, tzinfo=UTC), StepUnit.YEAR, 1,
         datetime.datetime(2021, 1, 1, tzinfo=UTC)),
        (datetime.datetime(2021, 1, 1, tzinfo=UTC), StepUnit.YEAR, 1,
         datetime.datetime(2021, 1, 1, tzinfo=UTC)),
        (datetime.datetime(2021, 3, 1, tzinfo=UTC), StepUnit.YEAR, 10,
         datetime.datetime(2030, 1, 1, tzinfo=UTC)),
        (datetime.datetime(2020, 2, 15, tzinfo=UTC), StepUnit.MONTH, 3,
         datetime.datetime(2020, 4, 1, tzinfo=UTC)),
        (datetime.datetime(2020, 11, 2, tzinfo=UTC), StepUnit.MONTH, 6,
         datetime.datetime(2021, 1, 1, tzinfo=UTC)),
        (datetime.datetime(2020, 1, 30, 12, tzinfo=UTC), StepUnit.DAY, 1,
         datetime.datetime(2020, 1, 31, tzinfo=UTC)),
        (datetime.datetime(2020, 1, 30, 13, 20, tzinfo=UTC), StepUnit.HOUR, 6,
         datetime.datetime(2020, 1, 30, 18, tzinfo=UTC)),
        (datetime.datetime(2020, 1, 30, 20, 10, tzinfo=UTC), StepUnit.HOUR, 6,
         datetime.datetime(2020, 1, 31, tzinfo=UTC)),
        (datetime.datetime(2020, 1, 30, 14, 5, 30, tzinfo=UTC),
         StepUnit.MINUTE, 15,
         datetime.datetime(2020, 1, 30, 14, 15, tzinfo=UTC)),
        (datetime.datetime(2020, 1, 30, 14, 5, 31, tzinfo=UTC),
         StepUnit.SECOND, 10,
         datetime.datetime(2020, 1, 30, 14, 5, 40, tzinfo=UTC)),
    ]
    for dt, unit, step, expected in cases:
        assert timescale.first_tick(dt, unit, step) == expected

def test_first_tick_out_of_range():
    dt = datetime.datetime(9999, 6, 1, tzinfo=UTC)
    assert timescale.first_tick(dt, StepUnit.YEAR, 1) is None
    assert timescale.first_tick(dt, StepUnit.MONTH, 1) is not None

def test_iter_ticks():
    dt = datetime.datetime(2020, 1, 30, 23, 59, tzinfo=UTC)
    it = timescale.iter_ticks(dt, StepUnit.MONTH, 1)
    assert [next(it).month for _ in range(4)] == [2, 3, 4, 5]

    dt = datetime.datetime(9999, 12, 31, 22, tzinfo=UTC)
    ticks = list(timescale.iter_ticks(dt, StepUnit.HOUR, 1))
    assert len(ticks) == 2

def test_monotonic_rejection():
    start, end = _ts(2020, 1, 1), _ts(2020, 3, 1)
    finder = timescale.BestTickFinder(start, end, 5)
    for unit in StepUnit:
        steps = sorted(timescale.STEPS[unit], reverse=True)
        rejected = False
        for step in steps:
            ticks = finder.gen_ticks(unit, step)
            if rejected:
                assert ticks is None
            rejected = ticks is None

def test_too_many_ticks():
    finder = timescale.BestTickFinder(_ts(2020, 1, 1), _ts(2020, 1, 2), 3)
    assert finder.gen_ticks(StepUnit.HOUR, 1) is None
    assert finder.gen_ticks(StepUnit.DAY, 1) == [_ts(2020, 1, 1),
                                                 _ts(2020, 1, 2)]

def test_consider_set():
    finder = timescale.BestTickFinder(0, 100, 4)
    a = timescale.CalendarTicks(StepUnit.SECOND, 30, [0, 30, 60, 90])
    b = timescale.CalendarTicks(StepUnit.SECOND, 15, [0, 15, 30, 45, 60])
    c = timescale.CalendarTicks(StepUnit.SECOND, 50, [0, 50, 100])
    assert finder.consider_set(b)
    assert finder.consider_set(a)
    assert not finder.consider_set(b)
    assert not finder.consider_set(c)
    assert finder.best is a

    # equally close, but fewer ticks
    finder = timescale.BestTickFinder(0, 100, 4)
    assert finder.consider_set(b)
    assert finder.consider_set(c)
    assert finder.best is c

def test_no_ticks():
    assert timescale.find_ticks(0, 0, 6) is None
    with pytest.raises(errors.NoTickCandidate):
        timescale.compute_ticks((0, 0), 6)

def test_end_of_time():
    start = _ts(9999, 12, 30)
    end = _ts(9999, 12, 31, 23, 59, 59)
    res = timescale.find_ticks(start, end, 5)
    assert res is not None
    assert res.unit == StepUnit.DAY
    assert len(res.ticks) == 2
    assert all(start <= t <= end for t in res.ticks)

def test_time_zone():
    tz = datetime.timezone(datetime.timedelta(hours=5, minutes=30))
    start = _ts(2020, 3, 1, tz=tz)
    end = _ts(2020, 3, 6, tz=tz)
    res = timescale.find_ticks(start, end, 6, tz)
    assert res.unit == StepUnit.DAY
    assert res.step == 1
    for t in res.ticks:
        dt = _dt(t, tz)
        assert (dt.hour, dt.minute, dt.second) == (0, 0, 0)
    # local midnight is not midnight in UTC
    assert _dt(res.ticks[0]).hour == 18

def test_invalid_arguments():
    with pytest.raises(ValueError):
        timescale.BestTickFinder(0, 100, 1)
    with pytest.raises(ValueError):
        timescale.BestTickFinder(100, 0, 5)

def test_units():
    assert list(StepUnit) == sorted(StepUnit)
    assert StepUnit.YEAR < StepUnit.MONTH < StepUnit.SECOND
    assert set(timescale.STEPS) == set(StepUnit)

def test_single_tick_candidates_skipped():
    # steps of 15 and 10 seconds give one tick each, 5 seconds give three
    res = timescale.find_ticks(272084531, 272084546, 2)
    assert res is not None
    assert res.unit == StepUnit.SECOND
    assert res.step == 5
    assert res.ticks == [272084535, 272084540, 272084545]

    finder = timescale.BestTickFinder(272084531, 272084546, 2)
    finder.consider(StepUnit.SECOND, [15])
    assert finder.best is None

def _check_ascending(res, start, end):
    assert all(a < b for a, b in zip(res.ticks[:-1], res.ticks[1:]))
    assert start <= res.ticks[0] and res.ticks[-1] <= end

def test_clocks_go_forward():
    new_york = dateutil_tz.gettz("America/New_York")
    start = _ts(2021, 3, 14, tz=new_york)
    end = start + 5 * 3600
    res = timescale.find_ticks(start, end, 6, new_york)
    _check_ascending(res, start, end)
    assert res.unit == StepUnit.HOUR
    assert res.step == 1
    assert res.ticks == [start + k * 3600 for k in range(6)]
    assert [_dt(t, new_york).hour for t in res.ticks] == [0, 1, 3, 4, 5, 6]

def test_clocks_go_back():
    new_york = dateutil_tz.gettz("America/New_York")
    start = _ts(2021, 11, 7, tz=new_york)
    end = start + 7 * 3600
    res = timescale.find_ticks(start, end, 8, new_york)
    _check_ascending(res, start, end)
    assert res.unit == StepUnit.HOUR
    assert res.ticks == [start + k * 3600 for k in range(8)]
    assert [_dt(t, new_york).hour for t in res.ticks] == \
        [0, 1, 1, 2, 3, 4, 5, 6]

    # every candidate step is evenly spaced in elapsed time
    finder = timescale.BestTickFinder(start, end, 8, new_york)
    for step in timescale.STEPS[StepUnit.HOUR]:
        ticks = finder.gen_ticks(StepUnit.HOUR, step)
        gaps = {b - a for a, b in zip(ticks[:-1], ticks[1:])}
        assert gaps <= {step * 3600}

def test_days_across_dst():
    new_york = dateutil_tz.gettz("America/New_York")
    start = _ts(2021, 3, 10, tz=new_york)
    end = _ts(2021, 3, 17, tz=new_york)
    res = timescale.find_ticks(start, end, 8, new_york)
    _check_ascending(res, start, end)
    assert res.unit == StepUnit.DAY
    assert len(res.ticks) == 8
    for t in res.ticks:
        dt = _dt(t, new_york)
        assert (dt.hour, dt.minute) == (0, 0)
    # one of the days is only 23 hours long
    gaps = [b - a for a, b in zip(res.ticks[:-1], res.ticks[1:])]
    assert sorted(set(gaps)) == [23 * 3600, 24 * 3600]
