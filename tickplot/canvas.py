# canvas.py - implementation of the Canvas class
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

"""The Canvas class
----------------

The canvas class implements all high-level plot types supported by the
tickplot package.  Each plot type collects the data of all series,
finds the axis ranges, chooses ticks for both axes and then draws the
data into a new :py:class:`axes.Axes` object.

"""

import itertools
import logging

import numpy as np

from . import axes
from . import bounds
from . import device
from . import fmt
from . import hist as histmod
from . import num
from . import param
from . import util
from .ticks import Bound

LOGGER = logging.getLogger(__name__)


class Canvas(device.Device):
    """Representation of a page which a plot can be drawn on.

    Canvas objects are normally created using the
    :py:func:`tickplot.Plot` function.  The methods of this class
    implement the various high-level plot types.

    """

    def __init__(self, ctx, rect, *, res, style=None, parent=None):
        """Create a new canvas object.

        Args:
            ctx (Cairo drawing context): The Cairo context used to draw
                the figure.

            rect (list of length 4): The extent of the drawing area, in
               device coordinates.  The four values `x, y, w, h = rect`
               represent the horizontal and vertical position of the
               drawing area on the page, and the width and hight of the
               drawing area, respectively.

            res (number): Resolution of the device, *i.e.* the number of
                device coordinate units per inch.

            style (dict, optional): Graphics parameters to override the
               default values.

            parent (Device, optional): used internally, for graphics
               parameters with value `"inherit"`.

        """
        super().__init__(ctx, rect, res=res, style=style, parent=parent)

        # draw the background, if any
        r, g, b, a = self._get_param("bg_col", {})
        if a > 0 and ctx is not None:
            ctx.save()
            ctx.set_source_rgba(r, g, b, a)
            ctx.rectangle(*self.rect)
            ctx.fill()
            ctx.restore()

        # apply the padding
        padding_bottom = self._get_param('padding_bottom', {})
        padding_left = self._get_param('padding_left', {})
        padding_top = self._get_param('padding_top', {})
        padding_right = self._get_param('padding_right', {})
        self.rect[0] += padding_left
        self.rect[1] += padding_bottom
        self.rect[2] -= padding_left + padding_right
        self.rect[3] -= padding_bottom + padding_top

        # names for "where" notes are shared by all axes of a figure
        if parent is not None:
            self.where = parent.where
        else:
            self.where = fmt.WhereCounter()

        self._on_close = []
        if parent:
            parent._on_close.append(self.close)

    def __str__(self):
        tmpl = "<Canvas %.0fx%.0f%+.0f%+.0f>"
        x, y, w, h = self.rect
        return tmpl % (w, h, x, y)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Call the ``close()`` method of the canvas."""
        self.close()

    def close(self):
        """Finish the plot by drawing any outstanding overlays.

        This must be called once drawing is completed, either
        explicitly or by using the canvas as a context handler.

        After the plot is closed, nothing can be added any more.

        """
        while self._on_close:
            fn = self._on_close.pop()
            fn()

    def draw_title(self, text, *, style=None):
        """Draw a title centred at the top of the canvas.

        The title is placed `title_top_margin` below the top edge of
        the drawing area.  The axes do not make room for the title, so
        `margin_top` should be large enough to hold it.

        """
        style = param.check_keys(style)
        font_size = self._get_param('title_font_size', style)
        col = self._get_param('title_col', style)
        dist = self._get_param('title_top_margin', style)

        x, y, w, h = self.rect
        self._draw_text(x + w/2, y + h - dist, str(text), font_size, col=col,
                        horizontal_align="center", vertical_align="top")

    def plot(self, x, y=None, *, rect=None, x_markers=None, y_markers=None,
             x_lim=None, y_lim=None, x_lab=None, y_lab=None,
             x_options=None, y_options=None, label=None, style=None):
        """Draw a line plot.

        Args:
            x (array with ``shape=(n,)`` or ``shape=(n,2)``): The
                vertex coordinates of the lines.  If `y` is
                given, `x` must be one-dimensional and the vertices
                are ``(x[0], y[0])``, ..., ``(x[n-1], y[n-1])``.
                Otherwise, `x` must be two-dimensional with two
                columns and the vertices are ``x[0, :]``, ...,
                ``x[n-1, :]``.  ``nan`` values interrupt the line.
            y (array with ``shape=(n,)``, optional): See the
                description of `x`.
            rect (list of length 4, optional): the position of the
                axes on the canvas, in device coordinates.
            x_markers (iterable): horizontal positions which must be
                included in the x-axis range.
            y_markers (iterable): vertical positions which must be
                included in the y-axis range.
            x_lim (tuple): a pair of numbers, specifying the exact
                coordinate range for the horizontal axis.
            y_lim (tuple): a pair of numbers, specifying the exact
                coordinate range for the vertical axis.
            x_lab (str): the axis label for the horizontal axis.
            y_lab (str): the axis label for the vertical axis.
            x_options (ticks.AxisOptions): tick settings for the
                horizontal axis.
            y_options (ticks.AxisOptions): tick settings for the
                vertical axis.
            label (str): the legend text for the line.  The axes show a
                legend once at least one data series has a label.
            style (dict): graphics parameter values to override the
                canvas settings, setting the line thickness and color.

        """
        style = param.check_keys(style)
        x, y = util._check_coords(x, y)
        ax = self._add_axes(rect, [(x, y)], x_markers, y_markers, x_lim,
                            y_lim, x_options, y_options, style,
                            x_lab=x_lab, y_lab=y_lab)
        ax.draw_lines(x, y, label=label, style=style)
        return ax

    def scatter_plot(self, x, y=None, *, rect=None, x_markers=None,
                     y_markers=None, x_lim=None, y_lim=None, x_lab=None,
                     y_lab=None, x_options=None, y_options=None, label=None,
                     style=None):
        """Draw a scatter plot.

        The arguments are the same as for :py:meth:`plot`.

        """
        style = param.check_keys(style)
        x, y = util._check_coords(x, y)
        ax = self._add_axes(rect, [(x, y)], x_markers, y_markers, x_lim,
                            y_lim, x_options, y_options, style,
                            x_lab=x_lab, y_lab=y_lab)
        ax.draw_points(x, y, label=label, style=style)
        return ax

    def fill_plot(self, x, y, *, base=0, rect=None, x_markers=None,
                  y_markers=None, x_lim=None, y_lim=None, x_lab=None,
                  y_lab=None, x_options=None, y_options=None, label=None,
                  style=None):
        """Draw the region between the graph of `y` and the line ``y=base``.

        The value `base` is always included in the vertical axis
        range.  The remaining arguments are the same as for
        :py:meth:`plot`.

        """
        style = param.check_keys(style)
        x, y = util._check_coords(x, y)
        y_markers = [base] + list(y_markers or [])
        ax = self._add_axes(rect, [(x, y)], x_markers, y_markers, x_lim,
                            y_lim, x_options, y_options, style,
                            x_lab=x_lab, y_lab=y_lab)
        ax.draw_fill(x, y, base=base, label=label, style=style)
        return ax

    def histogram(self, x, *, bins=None, range=None, weights=None, density=False,
                  rect=None, x_markers=None, y_markers=None, x_lim=None,
                  y_lim=None, x_lab=None, y_lab=None, x_options=None,
                  y_options=None, label=None, style=None):
        """Draw a histogram.

        The arguments `x`, `bins`, `range`, `weights`, and `density`
        have the same meaning as for `numpy.histogram`.

        Args:
            x (array_like): Input data. The histogram is computed over
                the flattened array.
            bins (int or sequence of numbers, optional): If `bins` is
                an int, it defines the number of equal-width bins in
                the given range. If `bins` is a sequence, it defines
                the bin edges, including the rightmost edge, allowing
                for non-uniform bin widths.  If `bins` is not set,
                a heuristic is used.
            range ((float, float), optional): The lower and upper range
                of the bins. If not provided, range is simply
                ``(x.min(), x.max())``.  Values outside the range are
                ignored.
            weights (array_like, optional): An array of weights, of
                the same shape as `x`.  Each value contributes its
                associated weight towards the bin count (instead of
                1).
            density (bool, optional): If ``False``, the result will
                contain the number of samples in each bin. If
                ``True``, the result is the value of the probability
                density function at the bin, normalized such that the
                integral over the range is 1.

        The remaining arguments are the same as for :py:meth:`plot`.
        The vertical axis always includes 0.

        """
        style = param.check_keys(style)
        x = np.asarray(x, dtype=float)
        if range is None:
            # np.histogram cannot cope with nan and inf
            range = bounds.data_range(x)
        if bins is None:
            bins = histmod.guess_bins(x[np.isfinite(x)])
        counts, bin_edges = np.histogram(x, bins=bins, range=range,
                                         weights=weights, density=density)

        # corners of the bars, so that the bounds cover all bars
        xx = np.repeat(bin_edges, 2)[1:-1]
        yy = np.repeat(counts, 2)
        y_markers = [0] + list(y_markers or [])
        if x_options is None:
            # bin edges are not integers, even if the data are
            x_options = self._axis_options('x', style, kind=num.REAL)
        ax = self._add_axes(rect, [(xx, yy)], x_markers, y_markers, x_lim,
                            y_lim, x_options, y_options, style,
                            x_lab=x_lab, y_lab=y_lab)
        ax.draw_histogram(counts, bin_edges, label=label, style=style)
        return ax

    def axes(self, *, series=(), rect=None, x_markers=None, y_markers=None,
             x_lim=None, y_lim=None, x_lab=None, y_lab=None, x_options=None,
             y_options=None, style=None):
        """Draw a set of coordinate axes and return a new Axes object
        representing the data area inside the axes.

        The axis ranges and ticks are chosen to fit all given data
        series together.  The data can then be drawn using the
        ``draw_*()`` methods of the returned object.

        Args:
            series (list): a list of ``(x, y)`` pairs of coordinate
                vectors.  These are only used to determine the axis
                ranges and kinds, nothing is drawn.
            rect (list of length 4, optional): the position of the
                axes on the canvas, in device coordinates.
            x_markers, y_markers, x_lim, y_lim, x_lab, y_lab, x_options,
            y_options: see :py:meth:`plot`.
            style (dict): graphics parameter values to override the
                canvas settings.  The parameters in `style` are also
                used as the default parameters for the context
                representing the axes area.

        """
        style = param.check_keys(style)
        series = [util._check_coords(x, y) for x, y in series]
        return self._add_axes(rect, series, x_markers, y_markers, x_lim,
                              y_lim, x_options, y_options, style,
                              x_lab=x_lab, y_lab=y_lab)

    def _axis_kind(self, options, columns):
        if options.kind is not None:
            return num.get_kind(options.kind)
        return num.detect_kind(*columns)

    def _add_axes(self, rect, series, x_markers, y_markers, x_lim, y_lim,
                  x_options, y_options, style, *, x_lab=None, y_lab=None):
        rect = rect or self._get_margin_rect(style)
        _, _, w, h = rect
        if w <= 0 or h <= 0:
            raise ValueError("not enough space for the axes")

        x_opts = self._axis_options('x', style, x_options)
        y_opts = self._axis_options('y', style, y_options)
        x_kind = self._axis_kind(x_opts, [x for x, _ in series])
        y_kind = self._axis_kind(y_opts, [y for _, y in series])

        points = itertools.chain.from_iterable(zip(x, y) for x, y in series)
        xm = list(x_opts.markers) + list(x_markers or [])
        ym = list(y_opts.markers) + list(y_markers or [])
        x_bound, y_bound = bounds.find_bounds(points, xm, ym,
                                              x_kind=x_kind, y_kind=y_kind)
        if x_lim is not None:
            x_bound = _fixed_bound(x_lim, x_kind)
        if y_lim is not None:
            y_bound = _fixed_bound(y_lim, y_kind)
        LOGGER.debug("axis ranges %s (%s), %s (%s)",
                     x_bound, x_kind.name, y_bound, y_kind.name)

        x_info = x_kind.compute_ticks(x_bound, x_opts, pixel_max=w)
        y_info = y_kind.compute_ticks(y_bound, y_opts, pixel_max=h)

        ax = axes.Axes(self, rect, x_bound, y_bound, x_kind=x_kind,
                       y_kind=y_kind, style=style)
        ax.x_ticks = x_info
        ax.y_ticks = y_info
        ax.x_fmt = fmt.TickFormatter(x_info, x_opts, self.where)
        ax.y_fmt = fmt.TickFormatter(y_info, y_opts, self.where)

        style = style.copy()
        def decorate():
            ax.draw_decorations(x_lab=x_lab, y_lab=y_lab, style=style)
        self._on_close.append(decorate)

        return ax


def _fixed_bound(lim, kind):
    lo, hi = (kind.coerce(v) for v in lim)
    if not lo < hi:
        raise ValueError(f"invalid axis limits {lim!r}")
    return Bound(lo, hi)
