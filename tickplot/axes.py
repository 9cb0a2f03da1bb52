# axes.py - handle coordinate axes
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

"""The Axes class
--------------

The `Axes` class implements all basic drawing operations and allows to
transform between device and data coordinates.  Once the plot is
closed, the axes draw their decorations: the axis lines (dashed so
that the dash pattern repeats evenly between ticks), tick marks, tick
labels, optional grid lines, "where" notes for axes with relative
labels, the axis labels and, if any data series was labelled, a
legend.

"""

import collections
import logging

import numpy as np
import scipy.optimize as opt

import cairocffi as cairo

from . import device
from . import num
from . import param
from . import util

LOGGER = logging.getLogger(__name__)

LegendEntry = collections.namedtuple('LegendEntry', ['label', 'sample', 'style'])


class Axes(device.Device):

    """A coordinate system on a canvas.

    This class implements coordinate systems on a canvas and,
    optionally, can draw boxes, tick marks, tick labels, and axis
    labels.

    Args:

        parent    The canvas these axes should be drawn on.
        rect      The position of the axes on the parent canvas.
        x_lim     The horizontal range of data coordinates spanned.
        y_lim     The vertical range of data coordinates spanned.
        x_kind    The kind of values on the horizontal axis, from
                  :py:mod:`num`.
        y_kind    The kind of values on the vertical axis.

    """

    def __init__(self, parent, rect, x_lim, y_lim, *, x_kind=num.REAL,
                 y_kind=num.REAL, style=None):
        # allocate a new drawing context for the viewport
        parent_ctx = parent.ctx
        surface = parent_ctx.get_target()
        ctx = cairo.Context(surface)
        ctx.set_matrix(parent_ctx.get_matrix())
        ctx.rectangle(*rect)
        ctx.clip()

        super().__init__(ctx, rect, res=parent.res, parent=parent, style=style)

        self.parent_ctx = parent_ctx
        self.x_range = x_lim
        self.y_range = y_lim
        self.x_kind = x_kind
        self.y_kind = y_kind

        # tick distributions and formatters, set by the canvas
        self.x_ticks = None
        self.y_ticks = None
        self.x_fmt = None
        self.y_fmt = None

        self.legend = []

        # The horizontal scale and offset are determined by the
        # following two equations:
        #     x_lim[0] * x_scale + x_offset = x
        #     x_lim[1] * x_scale + x_offset = x + w
        x_scale = self.rect[2] / (x_lim[1] - x_lim[0])
        x_offset = self.rect[0] - x_lim[0] * x_scale
        # The vertical coordinates are similar:
        y_scale = self.rect[3] / (y_lim[1] - y_lim[0])
        y_offset = self.rect[1] - y_lim[0] * y_scale
        self.offset = (x_offset, y_offset)
        self.scale = (x_scale, y_scale)

    def __str__(self):
        x, y, w, h = self.rect
        return (f"<Axes {w:.0f}x{h:.0f}{x:+.0f}{y:+.0f}"
                f" {self.x_kind.name}/{self.y_kind.name}>")

    def data_to_dev_x(self, x_data):
        return self.rect[0] + self.x_kind.scale(x_data, self.x_range,
                                                self.rect[2])

    def data_to_dev_y(self, y_data):
        return self.rect[1] + self.y_kind.scale(y_data, self.y_range,
                                                self.rect[3])

    def _dev_x(self, x):
        return self.offset[0] + self.scale[0] * self.x_kind.coerce_array(x)

    def _dev_y(self, y):
        return self.offset[1] + self.scale[1] * self.y_kind.coerce_array(y)

    def decorate(self, *, style=None):
        """Draw the axis lines.

        If the ``axis_dash`` parameter is set, the bottom and left edges
        are drawn with ``axis_dash_col`` and ``axis_dash_lw``, dashed where
        the tick distribution has a dash size.  Otherwise a solid box is
        drawn around the axes, using ``axis_border_col`` and
        ``axis_border_lw``.

        """
        style = param.check_keys(style)

        dashed = self._get_param('axis_dash', style)
        if dashed:
            col = self._get_param('axis_dash_col', style)
            border = self._get_param('axis_dash_lw', style)
        else:
            col = self._get_param('axis_border_col', style)
            border = self._get_param('axis_border_lw', style)

        ctx = self.parent_ctx
        if border <= 0 or col[3] <= 0:
            return
        x, y, w, h = self.rect

        ctx.save()
        ctx.set_line_width(border)
        ctx.set_source_rgba(*col)
        if not dashed:
            ctx.rectangle(*self.rect)
            ctx.set_line_join(cairo.LINE_JOIN_MITER)
            ctx.stroke()
            ctx.restore()
            return

        ctx.set_line_cap(cairo.LINE_CAP_BUTT)
        self._set_dash(ctx, self.x_ticks, 0)
        ctx.move_to(x, y)
        ctx.line_to(x + w, y)
        ctx.stroke()
        self._set_dash(ctx, self.y_ticks, 1)
        ctx.move_to(x, y)
        ctx.line_to(x, y + h)
        ctx.stroke()
        ctx.restore()

    def _set_dash(self, ctx, info, axis):
        """Set the dash pattern for a line along `axis` (0 for horizontal,
        1 for vertical), so that one dash period starts at every tick.

        """
        if info is None or info.dash_size is None:
            ctx.set_dash([])
            return
        d = info.dash_size
        first = info.ticks[0].position
        if axis == 0:
            distance_to_first = self.data_to_dev_x(first) - self.rect[0]
        else:
            distance_to_first = self.data_to_dev_y(first) - self.rect[1]
        ctx.set_dash([d / 2, d / 2], -distance_to_first)

    def _draw_grid(self, style):
        lw = self._get_param('grid_lw', style)
        col = self._get_param('grid_col', style)
        if lw <= 0 or col[3] <= 0:
            return
        x, y, w, h = self.rect

        ctx = self.ctx
        ctx.save()
        ctx.set_line_width(lw)
        ctx.set_source_rgba(*col)
        ctx.set_line_cap(cairo.LINE_CAP_BUTT)
        if self.x_ticks is not None:
            # vertical lines take the dash pattern of the y-axis
            self._set_dash(ctx, self.y_ticks, 1)
            for xt in self._dev_x(self.x_ticks.positions):
                ctx.move_to(xt, y)
                ctx.line_to(xt, y + h)
            ctx.stroke()
        if self.y_ticks is not None:
            self._set_dash(ctx, self.x_ticks, 0)
            for yt in self._dev_y(self.y_ticks.positions):
                ctx.move_to(x, yt)
                ctx.line_to(x + w, yt)
            ctx.stroke()
        ctx.restore()

    def _draw_ticks(self, info, labels, where, style):
        w_tab = {
            'b': (False, False, self.rect[1]),
            'l': (True, False, self.rect[0]),
            'r': (True, True, self.rect[0] + self.rect[2]),
            't': (False, True, self.rect[1] + self.rect[3]),
        }
        vertical, rev, pos = w_tab[where]
        ts = self._tick_style('y' if vertical else 'x', style)

        if vertical:
            values = self._dev_y(info.positions)
            points = [np.array([pos, v]) for v in values]
            d_tick = np.array([ts.length, 0])
            h_align = "left" if rev else "right"
            v_align = "center"
        else:
            values = self._dev_x(info.positions)
            points = [np.array([v, pos]) for v in values]
            d_tick = np.array([0, ts.length])
            h_align = "center"
            v_align = "bottom" if rev else "top"
        q = 1 + ts.label_dist / ts.length
        if rev:
            d_tick = -d_tick

        adjust = [0] * len(values)
        if labels and not vertical:
            ww = np.array([self.text_width(lab, ts.font_size)
                           for lab in labels])
            sep = self.text_width("m", ts.font_size)
            qq = _shift_labels(self.rect[0], values,
                               self.rect[0]+self.rect[2], ww, sep)
            adjust = (qq - .5) * ww

        ctx = self.parent_ctx
        ctx.save()
        ctx.set_line_cap(cairo.LINE_CAP_BUTT)
        ctx.set_line_width(ts.width)
        ctx.set_source_rgba(*ts.line_col)
        for i, mid in enumerate(points):
            x0, y0 = mid + d_tick
            x1, y1 = mid - d_tick
            ctx.move_to(x0, y0)
            ctx.line_to(x1, y1)
        ctx.stroke()
        if labels:
            for i, mid in enumerate(points):
                xt, yt = mid - q*d_tick
                xt -= adjust[i]
                self._draw_text(xt, yt, labels[i], ts.font_size,
                                horizontal_align=h_align,
                                col=ts.font_col,
                                vertical_align=v_align, ctx=ctx)
        ctx.restore()

    def _draw_where(self, text, axis, style):
        """Draw the note explaining relative tick labels.

        The note for the x-axis goes below the right end of the axis,
        the note for the y-axis left of the top end.

        """
        dx = self._get_param('axis_label_dist_x', style)
        dy = self._get_param('axis_label_dist_y', style)
        font_size = self._get_param('where_font_size', style)
        col = self._get_param('axis_label_col', style)

        x, y, w, h = self.rect
        if axis == 'x':
            pos = (x + w, y - dx)
            rot = 0
        else:
            pos = (x - dy, y + h)
            rot = np.pi/2
        ctx = self.parent_ctx
        ctx.save()
        self._draw_text(*pos, text, font_size, col=col,
                        horizontal_align="right", vertical_align="top",
                        rotate=rot, ctx=ctx)
        ctx.restore()

    def _draw_axis_label(self, text, where, style):
        dx = self._get_param('axis_label_dist_x', style)
        dy = self._get_param('axis_label_dist_y', style)
        label_font_size = self._get_param('axis_label_size', style)
        label_font_col = self._get_param('axis_label_col', style)

        rect = self.rect
        w_tab = {
            'b': (rect[0] + rect[2]/2, rect[1] - dx,
                  "top", 0),
            't': (rect[0] + rect[2]/2, rect[1] + rect[3] + dx,
                  "bottom", 0),
            'l': (rect[0] - dy, rect[1] + rect[3]/2,
                  "bottom", np.pi/2),
            'r': (rect[0] + rect[2] + dy, rect[1] + rect[3]/2,
                  "top", np.pi/2),
        }
        x, y, align, rot = w_tab[where]

        ctx = self.parent_ctx   # special context to avoid clipping
        ctx.save()
        self._draw_text(x, y, text, label_font_size, col=label_font_col,
                        horizontal_align="center", vertical_align=align,
                        rotate=rot, ctx=ctx)
        ctx.restore()

    def _add_legend(self, label, sample, style):
        if label:
            self.legend.append(LegendEntry(str(label), sample, dict(style)))

    def _draw_legend(self, style):
        """Draw a box listing the labelled data series.

        The box goes into the top right corner of the data area.  Each
        entry shows a short sample of the line, points or filled area,
        followed by the label.

        """
        font_size = self._get_param('legend_font_size', style)
        col = self._get_param('legend_col', style)
        bg = self._get_param('legend_bg', style)
        pad = self._get_param('legend_padding', style)
        sample_len = self._get_param('legend_sample_length', style)

        ctx = self.parent_ctx
        ctx.save()
        ctx.set_font_matrix(cairo.Matrix(font_size, 0, 0, -font_size, 0, 0))
        ascent, descent, _, _, _ = ctx.font_extents()
        row = ascent + descent
        text_w = max(self.text_width(e.label, font_size) for e in self.legend)
        w = 3*pad + sample_len + text_w
        h = 2*pad + len(self.legend) * row

        x0 = self.rect[0] + self.rect[2] - pad - w
        y1 = self.rect[1] + self.rect[3] - pad
        if bg[3] > 0:
            ctx.rectangle(x0, y1 - h, w, h)
            ctx.set_source_rgba(*bg)
            ctx.fill()

        for i, entry in enumerate(self.legend):
            y = y1 - pad - (i + .5) * row
            self._draw_sample(ctx, entry, x0 + pad, y, sample_len, row)
            self._draw_text(x0 + 2*pad + sample_len, y, entry.label,
                            font_size, col=col, vertical_align="center",
                            ctx=ctx)
        ctx.restore()

    def _draw_sample(self, ctx, entry, x, y, length, height):
        style = entry.style
        ctx.save()
        if entry.sample == 'lines':
            ctx.set_line_width(self._get_param('plot_lw', style))
            ctx.set_source_rgba(*self._get_param('plot_col', style))
            ctx.move_to(x, y)
            ctx.line_to(x + length, y)
            ctx.stroke()
        elif entry.sample == 'points':
            ctx.set_line_width(self._get_param('plot_point_size', style))
            ctx.set_source_rgba(*self._get_param('plot_point_col', style))
            ctx.move_to(x + length/2, y)
            ctx.close_path()
            ctx.stroke()
        else:
            if entry.sample == 'fill':
                fc = self._get_param('fill_col', style)
                lc = self._get_param('plot_col', style)
                lw = self._get_param('plot_lw', style)
            else:
                fc = self._get_param('hist_fill_col', style)
                lc = self._get_param('hist_col', style)
                lw = self._get_param('hist_lw', style)
            ctx.rectangle(x, y - .35*height, length, .7*height)
            ctx.set_source_rgba(*fc)
            ctx.fill_preserve()
            ctx.set_line_width(lw)
            ctx.set_source_rgba(*lc)
            ctx.stroke()
        ctx.restore()

    def draw_decorations(self, *, x_lab=None, y_lab=None, style=None):
        """Draw everything outside the data area, and the legend
        if any data series was labelled.

        This is called by the canvas when the plot is closed.

        """
        style = param.check_keys(style)
        ticks = self._get_param('axis_ticks', style)
        labels = self._get_param('axis_labels', style)

        if self._get_param('grid', style):
            self._draw_grid(style)
        self.decorate(style=style)
        for pos in 'bt':
            if pos not in ticks.lower() or self.x_ticks is None:
                continue
            x_labels = self.x_fmt.labels() if pos.upper() in ticks else None
            self._draw_ticks(self.x_ticks, x_labels, pos, style)
        for pos in 'lr':
            if pos not in ticks.lower() or self.y_ticks is None:
                continue
            y_labels = self.y_fmt.labels() if pos.upper() in ticks else None
            self._draw_ticks(self.y_ticks, y_labels, pos, style)

        for axis, fmt in (('x', self.x_fmt), ('y', self.y_fmt)):
            note = fmt.where() if fmt is not None else None
            if note:
                self._draw_where(note, axis, style)

        for pos in 'bt':
            if not x_lab or pos not in labels:
                continue
            self._draw_axis_label(x_lab, pos, style)
        for pos in 'lr':
            if not y_lab or pos not in labels:
                continue
            self._draw_axis_label(y_lab, pos, style)

        if self.legend:
            self._draw_legend(style)

    def draw_lines(self, x, y=None, *, label=None, style=None):
        """Draw polygonal line segments.

        The given vertices are connected by a chain of line segments.
        Vertices where at least one of the coordinates is a hole
        (``nan`` for real axes) are ignored and the line is interupted
        where such vertices occur.

        Args:
            x (array with ``shape=(n,)`` or ``shape=(n,2)``): The
                vertex coordinates of the line segments.  If `y` is
                given, `x` must be one-dimensional and the vertices
                are ``(x[0], y[0])``, ..., ``(x[n-1], y[n-1])``.
                Otherwise, `x` must be two-dimensional with two
                columns and the vertices are ``x[0,:]``, ...,
                ``x[n-1,:]``.
            y (array with ``shape=(n,)``, optional): See the
                description of `x`.
            label (str, optional): the legend text for this line.
            style (dict): graphics parameter values to override the
                canvas settings, setting the line thickness and color.

        """
        style = param.check_keys(style)
        self._add_legend(label, 'lines', style)
        lw = self._get_param('plot_lw', style)
        col = self._get_param('plot_col', style)

        x, y = util._check_coords(x, y)
        x = self._dev_x(x)
        y = self._dev_y(y)

        self.ctx.save()
        self.ctx.set_line_width(lw)
        self.ctx.set_source_rgba(*col)
        for i0, i1 in _segments(x, y):
            self.ctx.move_to(x[i0], y[i0])
            if i1 == i0+1:
                # only one vertex, so draw a point instead of a line
                self.ctx.line_to(x[i0], y[i0])
                continue
            for i in range(i0+1, i1):
                self.ctx.line_to(x[i], y[i])
        self.ctx.stroke()
        self.ctx.restore()

    def draw_fill(self, x, y, *, base=None, label=None, style=None):
        """Draw the region between a line and a horizontal base line.

        Holes split the region into separate parts, in the same way as
        for :py:meth:`draw_lines`.

        Args:
            x (array with ``shape=(n,)``): the horizontal coordinates.
            y (array with ``shape=(n,)``): the vertical coordinates of
                the upper (or lower) edge of the region.
            base (number, optional): the vertical position of the
                other edge.  The default is 0 if this is inside the
                vertical axis range, and the lower end of the range
                otherwise.
            label (str, optional): the legend text for this region.
            style (dict): graphics parameter values to override the
                canvas settings, setting the fill and line colors.

        """
        style = param.check_keys(style)
        self._add_legend(label, 'fill', style)
        fc = self._get_param('fill_col', style)
        lw = self._get_param('plot_lw', style)
        col = self._get_param('plot_col', style)

        if base is None:
            lo, hi = self.y_range
            base = 0 if lo <= 0 <= hi else lo
        yb = self.data_to_dev_y(base)

        x, y = util._check_coords(x, y)
        x = self._dev_x(x)
        y = self._dev_y(y)

        self.ctx.save()
        for i0, i1 in _segments(x, y):
            self.ctx.move_to(x[i0], yb)
            for i in range(i0, i1):
                self.ctx.line_to(x[i], y[i])
            self.ctx.line_to(x[i1-1], yb)
            self.ctx.close_path()
        self.ctx.set_source_rgba(*fc)
        self.ctx.fill()

        self.ctx.set_line_width(lw)
        self.ctx.set_source_rgba(*col)
        for i0, i1 in _segments(x, y):
            self.ctx.move_to(x[i0], y[i0])
            for i in range(i0+1, i1):
                self.ctx.line_to(x[i], y[i])
        self.ctx.stroke()
        self.ctx.restore()

    def draw_points(self, x, y=None, *, label=None, style=None):
        """Draw a marker at each of the given points.

        Args:
            x (array with ``shape=(n,)`` or ``shape=(n,2)``): see
                :py:meth:`draw_lines`.
            y (array with ``shape=(n,)``, optional): see
                :py:meth:`draw_lines`.
            label (str, optional): the legend text for these points.
            style (dict): graphics parameter values to override the
                canvas settings, setting the point size and color.

        """
        style = param.check_keys(style)
        self._add_legend(label, 'points', style)
        lw = self._get_param('plot_point_size', style)
        col = self._get_param('plot_point_col', style)
        separate = self._get_param('plot_point_separate', style)

        x, y = util._check_coords(x, y)
        x = self._dev_x(x)
        y = self._dev_y(y)
        keep = np.isfinite(x) & np.isfinite(y)
        x = x[keep]
        y = y[keep]

        self.ctx.save()
        self.ctx.set_line_width(lw)
        self.ctx.set_source_rgba(*col)
        if separate:
            for i in range(len(x)):
                self.ctx.move_to(x[i], y[i])
                self.ctx.close_path()
                self.ctx.stroke()
        else:
            for i in range(len(x)):
                self.ctx.move_to(x[i], y[i])
                self.ctx.close_path()
            self.ctx.stroke()
        self.ctx.restore()

    def draw_text(self, text, x, y=None, *, horizontal_align="start",
                  vertical_align="baseline", rotate=0, rotate_deg=None,
                  padding=["1pt", "3pt"], style=None):
        """Add text to a canvas.

        Args:
            text (str): The text to add to the canvas.
            x: Horizontal position of the text in data coordinates.
            y: Vertical position of the text in data coordinates.
            horizontal_align ("start", "end", "left", "right", "center" or dimension):
                Specifies which part of the text to horizontally align
                at the given `x` coordinate.
            vertical_align ("baseline", "top", "bottom", "center" or dimension):
                Specifies which part of the text to vertically align
                at the given `y` coordinate.
            rotate: rotation angle, in radians.
            rotate_deg: rotation angle in degrees.  This overrides
                `rotate`.
            padding: padding around the text background.
            style (dict): graphics parameter values to override the
                canvas settings.

        """
        style = param.check_keys(style)
        font_size = self._get_param('text_font_size', style)
        col = self._get_param('text_col', style)
        bg = self._get_param('text_bg', style)

        x, y = util._check_coord_pair(x, y)
        x = self.data_to_dev_x(x)
        y = self.data_to_dev_y(y)

        if rotate_deg is not None:
            rotate = float(rotate_deg) / 180 * np.pi

        self._draw_text(x, y, text, font_size, col=col, bg_col=bg,
                        horizontal_align=horizontal_align,
                        vertical_align=vertical_align, rotate=rotate,
                        padding=padding)

    def draw_histogram(self, hist, bin_edges, *, label=None, style=None):
        """
        Args:
            hist (array): the data to plot.
            bin_edges (array): a vector of bin edges.
            label (str, optional): the legend text for the histogram.
            style (dict): graphics parameter values to override the
                canvas settings, setting the line thickness and color.

        """
        style = param.check_keys(style)
        self._add_legend(label, 'hist', style)
        lc = self._get_param('hist_col', style)
        lw = self._get_param('hist_lw', style)
        fc = self._get_param('hist_fill_col', style)

        x = self._dev_x(bin_edges)
        y = self._dev_y(hist)
        lo, hi = self.y_range
        y0 = self.data_to_dev_y(0 if lo <= 0 <= hi else lo)

        self.ctx.save()
        for i, yi in enumerate(y):
            x0 = x[i]
            x1 = x[i+1]
            self.ctx.rectangle(x0, y0, x1 - x0, yi - y0)
        if fc is not None:
            self.ctx.set_source_rgba(*fc)
            self.ctx.fill_preserve()
        if lw and lc is not None:
            max_bin_width = np.amax(x[1:] - x[:-1])
            if lw > .25 * max_bin_width:
                lw = .25 * max_bin_width
            self.ctx.set_line_width(lw)
            self.ctx.set_source_rgba(*lc)
            self.ctx.stroke()
        self.ctx.restore()


def _segments(x, y):
    """Split a polygonal line at the non-finite vertices.

    Returns a list of index ranges ``(i0, i1)`` of the unbroken parts.

    """
    nan = np.logical_not(np.isfinite(x) & np.isfinite(y)).nonzero()[0]
    nan = [-1] + list(nan) + [len(x)]
    res = []
    for j in range(1, len(nan)):
        i0 = nan[j-1] + 1
        i1 = nan[j]
        if i0 < i1:
            res.append((i0, i1))
    return res


def _shift_labels(left, xx, right, ww, sep=10):
    """Find horizontal shifts for the tick labels at positions `xx`,
    with widths `ww`, to avoid overlaps.

    The result gives, for every label, the fraction of the label width
    which lies left of the tick.

    """
    xx = np.array(xx)
    ww = np.array(ww)

    def loss(qq):
        l = xx - qq*ww
        r = xx + (1-qq)*ww
        a = np.sum(np.square(np.maximum(r[:-1] - l[1:] + sep, 0)))
        b = np.sum(np.square(np.maximum([left - l[0], r[-1] - right], 0)))
        c = np.sum(np.square(qq - .5))
        return a + .1*b + .01*c

    n = len(xx)
    res = opt.minimize(loss, [.5]*n, bounds=[(0, 1)]*n, method='L-BFGS-B')
    LOGGER.debug("tick label shifts: %s", res.x)
    return res.x
