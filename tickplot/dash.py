# dash.py - dash patterns which fit evenly between axis ticks
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

"""Dash Sizes
----------

Axis and grid lines are drawn dashed, with one dash period (one "on"
and one "off" segment) of length ``one_step_px / divisor**k``.  Since
``divisor**k`` periods fill exactly one tick interval, the pattern
lines up with every tick.  The divisor matches the nice multiplier of
the tick step, so that dashes also subdivide the step in a "round" way.

"""

import logging

LOGGER = logging.getLogger(__name__)

MAX_ITERATIONS = 50


def _search(one_step_px, ideal_dash_px, divisor):
    for k in range(1, MAX_ITERATIONS + 1):
        dash = one_step_px / divisor**k
        if dash < ideal_dash_px:
            return dash, divisor, k
    raise AssertionError(
        f"no dash size below {ideal_dash_px} for step {one_step_px}"
        f" with divisor {divisor}")


def find_dash(one_step_px, ideal_dash_px, multiplier):
    """Find the dash period for one tick interval.

    Args:
        one_step_px (float): the length of one tick interval, in
            device units.
        ideal_dash_px (float): the preferred dash period.
        multiplier (int): the nice multiplier of the tick step.

    Returns:
        A tuple ``(dash, divisor, k)`` with
        ``dash * divisor**k == one_step_px`` and ``dash < ideal_dash_px``.

    """
    if not one_step_px > 0:
        raise ValueError(f"invalid tick distance {one_step_px}")
    if not ideal_dash_px > 0:
        raise ValueError(f"invalid ideal dash size {ideal_dash_px}")

    if multiplier in (1, 10):
        two = _search(one_step_px, ideal_dash_px, 2)
        five = _search(one_step_px, ideal_dash_px, 5)
        if abs(two[0] - ideal_dash_px) < abs(five[0] - ideal_dash_px):
            res = two
        else:
            res = five
    else:
        if multiplier < 2:
            raise ValueError(f"invalid step multiplier {multiplier}")
        res = _search(one_step_px, ideal_dash_px, multiplier)
    LOGGER.debug("dash %g for step %gpx (divisor %d, k=%d)",
                 res[0], one_step_px, res[1], res[2])
    return res


def dash_size(one_step_px, ideal_dash_px, multiplier):
    """Get the dash period for one tick interval of `one_step_px`."""
    dash, _, _ = find_dash(one_step_px, ideal_dash_px, multiplier)
    return dash
