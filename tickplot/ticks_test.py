#! /usr/bin/env python3

import datetime

import pytest

from . import ticks


def test_tick_info():
    tt = [ticks.Tick(10, 0), ticks.Tick(12, 2), ticks.Tick(14, 4)]
    info = ticks.TickInfo(tt, 2, multiplier=2, display_relative=10)
    assert len(info) == 3
    assert list(info) == tt
    assert info.positions == [10, 12, 14]
    assert info.values == [0, 2, 4]
    assert "relative=10" in repr(info)

    with pytest.raises(AssertionError):
        ticks.TickInfo(tt[:1], 2)

def test_axis_options():
    opts = ticks.AxisOptions()
    assert opts.ideal_tick_count == 6
    assert opts.markers == []
    assert not opts.no_dash
    assert opts.tz == datetime.timezone.utc

    with pytest.raises(ValueError):
        ticks.AxisOptions(1)
    with pytest.raises(ValueError):
        ticks.AxisOptions(5, ideal_dash_px=0)

def test_axis_options_replace():
    opts = ticks.AxisOptions(4, markers=[0], no_dash=True)
    new = opts.replace(ideal_tick_count=8, kind='integer')
    assert new.ideal_tick_count == 8
    assert new.kind == 'integer'
    assert new.markers == [0]
    assert new.no_dash
    assert opts.ideal_tick_count == 4
    assert opts.kind is None
