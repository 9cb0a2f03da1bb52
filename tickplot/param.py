# param.py - default parameters for the tickplot package
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

from . import errors

# name: (type, default value, description)
DEFAULT = {
    'axis_border_col': ('col', 'inherit', 'axis border line color'),
    'axis_border_lw': ('dim', 'inherit', 'axis border line width'),
    'axis_col': ('col', 'inherit', 'default color for all parts of an axis'),
    'axis_dash': ('bool', 'inherit', 'whether to draw the bottom and left axis lines dashed, instead of a solid box'),
    'axis_dash_col': ('col', '$axis_border_col', 'color of the dashed axis lines'),
    'axis_dash_lw': ('dim', '$axis_border_lw', 'line width of the dashed axis lines'),
    'axis_label_col': ('col', 'inherit', 'color for axis labels'),
    'axis_label_dist_x': ('height', 'inherit', 'vertical distance of axis labels from x-axis'),
    'axis_label_dist_y': ('width', 'inherit', 'horizontal distance of axis labels from y-axis'),
    'axis_label_size': ('dim', 'inherit', 'font size for axis labels'),
    'axis_labels': ('str', 'inherit', 'positions of axis labels'),
    'axis_tick_col': ('col', 'inherit', 'axis tick line color'),
    'axis_tick_length': ('dim', 'inherit', 'length of axis tick marks'),
    'axis_tick_width': ('dim', 'inherit', 'line width for axis tick marks'),
    'axis_ticks': ('str', 'inherit', 'positions of axis ticks and tick labels'),
    'bg_col': ('col', 'transparent', 'background color'),
    'fg_col': ('col', 'inherit', 'default foreground color'),
    'fill_col': ('col', 'rgba(70,130,180,.35)', 'fill color for filled regions'),
    'font_size': ('dim', '10pt', 'font size'),
    'grid': ('bool', 'inherit', 'whether to draw dashed grid lines at the ticks'),
    'grid_col': ('col', '#CCC', 'grid line color'),
    'grid_lw': ('dim', '$lw_thin', 'grid line width'),
    'hist_col': ('col', '$line_col', 'line color for histogram boxes'),
    'hist_fill_col': ('col', '#CCC', 'fill color for histogram bars'),
    'hist_lw': ('dim', '$lw_thin', 'line width for histogram bars'),
    'ideal_dash_length': ('dim', '30px', 'preferred length of one dash period on axis and grid lines'),
    'legend_bg': ('col', '$text_bg', 'background color of the legend box'),
    'legend_col': ('col', '$text_col', 'text color for legend entries'),
    'legend_font_size': ('dim', '$font_size', 'font size for legend entries'),
    'legend_padding': ('dim', '1.5mm', 'space around the legend entries'),
    'legend_sample_length': ('dim', '6mm', 'length of the line samples in the legend'),
    'line_col': ('col', '$fg_col', 'line color'),
    'lw': ('dim', '$lw_medium', 'line width'),
    'lw_medium': ('dim', '.8pt', 'width for medium thick lines'),
    'lw_thick': ('dim', '1pt', 'width for thick lines'),
    'lw_thin': ('dim', '.6pt', 'width for thin lines'),
    'margin_bottom': ('height', '11mm', 'axis bottom margin'),
    'margin_left': ('width', '14mm', 'axis left margin'),
    'margin_right': ('width', '2mm', 'axis right margin'),
    'margin_top': ('height', '2mm', 'axis top margin'),
    'padding': ('dim', '2.5mm', 'viewport padding'),
    'padding_bottom': ('height', '$padding', 'viewport bottom padding'),
    'padding_left': ('width', '$padding', 'viewport left padding'),
    'padding_right': ('width', '$padding', 'viewport right padding'),
    'padding_top': ('height', '$padding', 'viewport top padding'),
    'plot_col': ('col', '$line_col', 'plot line color'),
    'plot_lw': ('dim', '$lw', 'line width for plots'),
    'plot_point_col': ('col', 'inherit', 'point color for scatter plots'),
    'plot_point_separate': ('bool', False, 'whether to draw points in a scatter plot individually'),
    'plot_point_size': ('dim', 'inherit', 'point size for scatter plots'),
    'text_bg': ('col', 'rgba(255,255,255,.8)', 'text background color'),
    'text_col': ('col', '$fg_col', 'text color'),
    'text_font_size': ('dim', '$font_size', 'text font size'),
    'tick_font_col': ('col', '$axis_col', 'color for tick labels'),
    'tick_font_size': ('dim', '$font_size', 'font size for tick labels'),
    'tick_label_dist': ('dim', '3pt', 'distance between tick labels and tick marks'),
    'tick_label_dist_x': ('dim', '$tick_label_dist', 'vertical distance between tick labels and marks, for the x-axis'),
    'tick_label_dist_y': ('dim', '$tick_label_dist', 'horizontal distance between tick labels and marks, for the y-axis'),
    'title_col': ('col', '$text_col', 'color for the plot title'),
    'title_font_size': ('dim', '$font_size', 'font size for titles'),
    'title_top_margin': ('dim', '2mm', 'distance of title to top edge of canvas'),
    'where_font_size': ('dim', '$tick_font_size', 'font size for "where j = ..." notes of relative axes'),
    'x_tick_count': ('int', 'inherit', 'ideal number of ticks on the horizontal axis'),
    'y_tick_count': ('int', 'inherit', 'ideal number of ticks on the vertical axis'),
}

VALID_KEYS = set(DEFAULT.keys())

ROOT = {
    'axis_border_col': '$axis_col',
    'axis_border_lw': '$lw_thick',
    'axis_col': '#444',
    'axis_dash': True,
    'axis_label_col': '$text_col',
    'axis_label_dist_x': '7mm',
    'axis_label_dist_y': '10mm',
    'axis_label_size': '$font_size',
    'axis_labels': 'bl',
    'axis_tick_col': '$axis_col',
    'axis_tick_length': '3pt',
    'axis_tick_width': '$lw_medium',
    'axis_ticks': 'BL',
    'bg_col': 'white',
    'fg_col': 'black',
    'grid': False,
    'plot_point_col': '$line_col',
    'plot_point_size': '2pt',
    'x_tick_count': 6,
    'y_tick_count': 5,
}

def check_keys(style):
    if style is None:
        return {}
    invalid = style.keys() - VALID_KEYS
    if invalid:
        msg = "invalid style parameter '%s'" % invalid.pop()
        raise errors.InvalidParameterName(msg)
    return style

def update(*styles, parent_style=None, **kwargs):
    """Merge a list of styles.

    Later entries override earlier ones and defaults are used where no
    values are given.

    """
    if kwargs:
        styles = styles + (kwargs,)
    styles = [dict(style) for style in styles if style is not None]

    for style in styles:
        check_keys(style)

    res = {}
    for key, (_, default, _) in DEFAULT.items():
        val = default
        for style in styles:
            if key in style:
                val = style[key]
        if val == "inherit":
            if parent_style is None:
                raise ValueError(f"no parent, cannot inherit style {key!r}")
            val = parent_style.get(key)
        if val is None or val == "inherit":
            raise AssertionError(f"style {key!r} not resolved")
        res[key] = val
    return res
