# plot.py - implementation of the Plot class
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

"""
The Plot Class
--------------

This module provides the main entry point for the tickplot package.
"""

import logging
import os.path

import cairocffi as cairo

from . import canvas, util, param

LOGGER = logging.getLogger(__name__)

# file types which are rendered at a fixed resolution of 72 units/inch
VECTOR_TYPES = {'svg', 'pdf', 'ps', 'eps', None}


def _file_type(file_name):
    if file_name == "/dev/null":
        return None
    _, ext = os.path.splitext(file_name)
    if not ext:
        raise ValueError('file name "%s" lacks an extension' % file_name)
    return ext[1:].lower()


def _make_surface(file_type, file_name, w_dev, h_dev):
    if file_type == 'svg':
        return cairo.SVGSurface(file_name, w_dev, h_dev)
    if file_type == 'pdf':
        return cairo.PDFSurface(file_name, w_dev, h_dev)
    if file_type == 'ps':
        return cairo.PSSurface(file_name, w_dev, h_dev)
    if file_type == 'eps':
        surface = cairo.PSSurface(file_name, w_dev, h_dev)
        surface.set_eps(True)
        return surface
    if file_type == 'png':
        return cairo.ImageSurface(cairo.FORMAT_RGB24, w_dev, h_dev)
    if file_type is None:
        return cairo.RecordingSurface(cairo.CONTENT_COLOR,
                                      (0, 0, w_dev, h_dev))
    raise ValueError('unsupported file type "%s"' % file_type)


class Plot(canvas.Canvas):

    """The Plot Class represents a file containing a single figure.

    Plots are best used as context managers, so that the figure is
    completed and written when the block is left::

        with Plot("out.svg", "12cm", "8cm") as pl:
            pl.plot(x, y)

    """

    def __init__(self, file_name, width, height=None, *, res=None, style=None):
        """Create a new plot.

        Args:
            file_name (string): The name of the file the figure will be
                stored in.  Any previously existing file with this name
                will be overwritten.  The file name extension determines
                the file type.  Available file types are `.svg`, `.pdf`,
                `.ps`, `.eps` and `.png`.  The name ``/dev/null``
                gives a figure which is drawn but not stored.

            width: The figure width.  This can either be a number to give
                the width in device units (pixels), or a string including
                a length unit like "10cm".

            height: The figure height.  This can either be a number to
                give the height in device units (pixels), or a string
                including a length unit like "10cm".  If this is
                omitted, a square figure is created.

            res (number, optional): For raster image formats, `res`
                specifies the device resolution in pixels per inch.

            style (dict, optional): Default plot graphics values for the
                figure.

        """

        self.file_name = file_name
        """The output file name, as given in the ``file_name`` argument of the
        ``plot.Plot`` constructor (read only)."""

        ext = _file_type(file_name)
        style = param.check_keys(style)

        if height is None:
            height = width

        if res is None:
            res = 72 if ext in VECTOR_TYPES else 100
        base_res = 72 if ext in VECTOR_TYPES else res
        w = int(util.convert_dim(width, res) + 0.5)
        h = int(util.convert_dim(height, res) + 0.5)

        q = base_res / res
        w_dev = int(w * q + .5)
        h_dev = int(h * q + .5)
        surface = _make_surface(ext, file_name, w_dev, h_dev)
        ctx = cairo.Context(surface)
        LOGGER.debug("new %s plot %r, %dx%d", ext or "null", file_name,
                     w_dev, h_dev)

        # move the origin to the bottom left corner:
        ctx.scale(q, -q)
        ctx.translate(0, -h)

        super().__init__(ctx, [0, 0, w, h], res=res, style=style)
        self.surface = surface
        self.file_type = ext

    def __str__(self):
        _, _, w, h = self.rect
        res = self.res
        return f"<tickplot.Plot {w/res:g}in x {h/res:g}in {self.file_name!r}>"

    def close(self):
        """Close the plot and write all outstanding changes to the file.  The
        ``Plot`` object cannot be used any more after this call.

        """
        if self.surface is None:
            return
        super().close()
        if self.file_type == 'png':
            self.surface.write_to_png(self.file_name)
        else:
            self.surface.finish()
        self.surface = None
