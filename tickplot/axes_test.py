#! /usr/bin/env python3

import numpy as np

import pytest

import cairocffi as cairo

from . import plot
from .axes import _segments, _shift_labels


def test_transforms():
    with plot.Plot('/dev/null', 500, 400) as pl:
        ax = pl.axes(x_lim=[0, 10], y_lim=[-1, 1])
        x, y, w, h = ax.rect
        assert ax.data_to_dev_x(0) == pytest.approx(x)
        assert ax.data_to_dev_x(10) == pytest.approx(x + w)
        assert ax.data_to_dev_y(-1) == pytest.approx(y)
        assert ax.data_to_dev_y(0) == pytest.approx(y + h/2)
        xx = ax._dev_x([0, 5, 10])
        assert xx == pytest.approx([x, x + w/2, x + w])
        yy = ax._dev_y(np.array([-1, 1]))
        assert yy == pytest.approx([y, y + h])

def test_set_dash():
    surface = cairo.RecordingSurface(cairo.CONTENT_COLOR_ALPHA, None)
    ctx = cairo.Context(surface)
    with plot.Plot('/dev/null', 500, 400) as pl:
        ax = pl.axes(x_lim=[0.5, 10], y_lim=[0, 1])
        info = ax.x_ticks
        assert info.step == 2
        assert info.positions[0] == 2

        ax._set_dash(ctx, info, 0)
        dashes, offset = ctx.get_dash()
        d = info.dash_size
        assert dashes == pytest.approx([d/2, d/2])
        distance_to_first = ax.data_to_dev_x(2) - ax.rect[0]
        assert offset == pytest.approx(-distance_to_first)

        ax._set_dash(ctx, None, 1)
        dashes, _ = ctx.get_dash()
        assert list(dashes) == []

def test_no_dash():
    with plot.Plot('/dev/null', 500, 400, style={'axis_dash': False}) as pl:
        ax = pl.axes(x_lim=[0, 10], y_lim=[0, 1])
        assert ax.x_ticks.dash_size is None
        assert ax.y_ticks.dash_size is None

def test_segments():
    nan = np.nan
    x = np.array([0, 1, nan, 3, 4, 5], dtype=float)
    y = np.ones(6)
    assert _segments(x, y) == [(0, 2), (3, 6)]

    x = np.array([nan, 1, 2], dtype=float)
    y = np.array([0, 1, np.inf])
    assert _segments(x, y) == [(1, 2)]

    assert _segments(np.array([nan]), np.array([0.0])) == []

def test_shift_labels():
    qq = _shift_labels(0, [10, 50, 90], 100, [5, 5, 5], 1)
    assert qq == pytest.approx([.5, .5, .5], abs=1e-3)

    # overlapping labels move apart
    qq = _shift_labels(0, [40, 45], 100, [10, 10], 1)
    assert qq[0] > .5 > qq[1]

def test_draw():
    nan = np.nan
    with plot.Plot('/dev/null', 500, 400) as pl:
        ax = pl.axes(x_lim=[0, 4], y_lim=[-1, 1])
        ax.draw_lines([0, 1, nan, 3, 4], [0, 1, 0, nan, -1])
        ax.draw_points([0, 1, 2], [0, nan, 1])
        ax.draw_fill([0, 1, 2], [1, 0.5, 1])
        ax.draw_histogram([1, 0.5], [0, 1, 2])
        ax.draw_text("hello", 2, 0)
        assert "real/real" in str(ax)

class _Recorder:

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name,) + args)
        return record

def test_decorate_line_styles():
    with plot.Plot('/dev/null', 500, 400) as pl:
        ax = pl.axes(x_lim=[0, 10], y_lim=[0, 1])
        saved, ax.parent_ctx = ax.parent_ctx, _Recorder()
        try:
            style = {
                'axis_dash_lw': 2,
                'axis_dash_col': 'red',
                'axis_border_lw': 5,
            }
            ax.decorate(style=style)
            calls = ax.parent_ctx.calls
            assert ('set_line_width', 2.0) in calls
            assert ('set_source_rgba', 1.0, 0.0, 0.0, 1.0) in calls
            assert any(c[0] == 'set_dash' for c in calls)
            assert not any(c[0] == 'rectangle' for c in calls)

            ax.parent_ctx = _Recorder()
            ax.decorate(style=dict(style, axis_dash=False))
            calls = ax.parent_ctx.calls
            assert ('set_line_width', 5.0) in calls
            assert any(c[0] == 'rectangle' for c in calls)

            # the dashed lines default to the border settings
            assert ax.get_param('axis_dash_lw') == \
                ax.get_param('axis_border_lw')
            assert ax.get_param('axis_dash_col') == \
                ax.get_param('axis_border_col')
        finally:
            ax.parent_ctx = saved
