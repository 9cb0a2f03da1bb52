# device.py - handle tickplot graphics devices
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


"""The Device class
----------------

The `Device` class keeps track of graphics parameters and provides
support for drawing text.  It also turns the tick related graphics
parameters into the :py:class:`ticks.AxisOptions` used for tick
placement and into the :py:class:`TickStyle` used to draw the ticks.

"""

import collections

import cairocffi as cairo

from . import color
from . import errors
from . import param
from . import ticks
from . import util

TickStyle = collections.namedtuple('TickStyle', [
    'length', 'width', 'line_col', 'font_size', 'font_col', 'label_dist'])
TickStyle.__doc__ = """Graphics parameters for the tick marks and tick
labels of one axis, in device units."""


class Device:

    """A graphics device to draw a plot on.

    This class is only used as a base class for :py:class:`Canvas` and
    :py:class:`axes.Axes`.  The ``Device`` class itself is not normally
    instantiated.

    This class keeps track of the resolution and dimensions of the
    drawing area, and of the graphical style parameters.

    """

    def __init__(self, ctx, rect, *, res, style=None, parent=None):
        if parent is None:
            style = param.update(param.ROOT, style)
        else:
            style = param.update(style, parent_style=parent.style)
        self.style = style

        if ctx is not None:
            ctx.set_line_join(cairo.LINE_JOIN_ROUND)
            ctx.set_line_cap(cairo.LINE_CAP_ROUND)
        self.ctx = ctx

        self.res = res
        """Device resolution, *i.e.* the number of coordinate units per inch
        (read only).

        """

        self.rect = rect
        """The extent of the drawing area, in device coordinates (Read only).

        The four values `x, y, w, h = rect` represent the horizontal
        and vertical position of the drawing area on the page, and the
        width and hight of the drawing area, respectively.

        """

    def get_param(self, key, style=None):
        """Get the value of graphics parameter ``key``.

        If the optional argument ``style`` is given, it must be a
        dictionary, mapping parameter names to values; in this case,
        values in ``style`` override values set in the Canvas object.

        Args:
            key (string): the graphics parameter name to query.
            style (dict): graphics parameter values to override the
                canvas settings.

        """
        style = param.check_keys(style)
        return self._get_param(key, style)

    def _get_param(self, key, style):
        key, value = self._lookup(key, style)
        typ = param.DEFAULT[key][0]
        convert = _CONVERTERS.get(typ)
        if convert is None:
            raise NotImplementedError(f"parameter type '{typ}'")
        return convert(self, value)

    def _lookup(self, key, style):
        """Follow ``$name`` references until a concrete value is found.

        Returns the name of the parameter which holds the value,
        together with the value.

        """
        seen = [key]
        while True:
            value = style.get(key)
            if value is None:
                value = self.style.get(key)
            if value is None:
                raise errors.InvalidParameterName(
                    f"invalid style parameter '{key}'")
            if not (isinstance(value, str) and value.startswith('$')):
                return key, value
            key = value[1:]
            if key in seen:
                msg = ' -> '.join(seen + [key])
                raise errors.WrongUsage("infinite parameter loop: " + msg)
            seen.append(key)

    def _axis_options(self, axis, style, options=None, **kwargs):
        """Combine the tick related graphics parameters for `axis` ('x'
        or 'y') with explicitly given :py:class:`ticks.AxisOptions`.

        Explicit options win over the graphics parameters.  Keyword
        arguments which are not ``None`` override both.

        """
        if options is None:
            count = self._get_param(f'{axis}_tick_count', style)
            dash_len = self._get_param('ideal_dash_length', style)
            draw_dash = (self._get_param('axis_dash', style)
                         or self._get_param('grid', style))
            options = ticks.AxisOptions(count, ideal_dash_px=dash_len,
                                        no_dash=not draw_dash)
        changes = {key: val for key, val in kwargs.items() if val is not None}
        if changes:
            options = options.replace(**changes)
        return options

    def _tick_style(self, axis, style):
        """Collect the graphics parameters for drawing the ticks of `axis`
        ('x' or 'y').

        """
        return TickStyle(
            length=self._get_param('axis_tick_length', style),
            width=self._get_param('axis_tick_width', style),
            line_col=self._get_param('axis_tick_col', style),
            font_size=self._get_param('tick_font_size', style),
            font_col=self._get_param('tick_font_col', style),
            label_dist=self._get_param(f'tick_label_dist_{axis}', style))

    def _get_margin_rect(self, style):
        """Return the rectangle `[x, y, w, h]` defined by the margin
        graphics parameters, in device coordinates.

        """
        margin_bottom = self._get_param('margin_bottom', style)
        margin_left = self._get_param('margin_left', style)
        margin_top = self._get_param('margin_top', style)
        margin_right = self._get_param('margin_right', style)
        x = self.rect[0] + margin_left
        y = self.rect[1] + margin_bottom
        w = self.rect[2] - margin_left - margin_right
        h = self.rect[3] - margin_bottom - margin_top
        if w < 0 or h < 0:
            raise ValueError("not enough space, margins too large")
        return [x, y, w, h]

    def text_width(self, text, font_size):
        """Returns the widths of the text bounding box."""
        self.ctx.save()
        self.ctx.set_font_matrix(
            cairo.Matrix(font_size, 0, 0, -font_size, 0, 0))
        ext = self.ctx.text_extents(text)
        self.ctx.restore()
        return ext[2]

    def _draw_text(self, x, y, text, font_size, *, col=None, bg_col=None,
                   horizontal_align="start", vertical_align="baseline",
                   rotate=0, padding=["1pt", "3pt"], ctx=None):
        padding = util.check_vec(padding, 4, True)
        p_top = util.convert_dim(padding[0], self.res, self.rect[3])
        p_right = util.convert_dim(padding[1], self.res, self.rect[2])
        p_bottom = util.convert_dim(padding[2], self.res, self.rect[3])
        p_left = util.convert_dim(padding[3], self.res, self.rect[2])

        ctx = ctx or self.ctx

        ctx.save()
        ctx.set_font_matrix(
            cairo.Matrix(font_size, 0, 0, -font_size, 0, 0))

        ext = ctx.text_extents(text)
        font_ext = ctx.font_extents()
        x_offs = self._x_offset(horizontal_align, ext)
        y_offs = self._y_offset(vertical_align, font_ext)

        if bg_col is not None and bg_col[3] > 0:
            ctx.save()
            ctx.set_source_rgba(*bg_col)
            ctx.move_to(x, y)
            ctx.rotate(rotate)
            ctx.rel_move_to(ext[0] + x_offs - p_left,
                            ext[1] + y_offs - p_bottom)
            ctx.rel_line_to(ext[2] + p_left + p_right, 0)
            ctx.rel_line_to(0, ext[3] + p_bottom + p_top)
            ctx.rel_line_to(- ext[2] - p_right - p_left, 0)
            ctx.close_path()
            ctx.fill()
            ctx.restore()

        if col:
            ctx.set_source_rgba(*col)
        ctx.move_to(x, y)
        ctx.rotate(rotate)
        ctx.rel_move_to(x_offs, y_offs)
        ctx.show_text(text)
        ctx.restore()

    def _x_offset(self, align, ext):
        x_bearing, _, width, _, x_advance, _ = ext
        offsets = {
            "start": 0,
            "end": -x_advance,
            "left": -x_bearing,
            "right": -x_bearing - width,
            "center": -x_bearing - .5 * width,
        }
        if align in offsets:
            return offsets[align]
        return util.convert_dim(align, self.res, width)

    def _y_offset(self, align, font_ext):
        ascent, descent, line_height, _, _ = font_ext
        offsets = {
            "baseline": 0,
            "top": -ascent,
            "bottom": descent,
            "center": (descent - ascent) / 2,
        }
        if align in offsets:
            return offsets[align]
        return util.convert_dim(align, self.res, line_height)


_CONVERTERS = {
    'width': lambda dev, value: util.convert_dim(value, dev.res, dev.rect[2]),
    'height': lambda dev, value: util.convert_dim(value, dev.res, dev.rect[3]),
    'dim': lambda dev, value: util.convert_dim(value, dev.res),
    'col': lambda dev, value: color.get(value),
    'bool': lambda dev, value: util.parse_bool(value),
    'int': lambda dev, value: int(value),
    'str': lambda dev, value: str(value),
}
