# scale.py - code to generate axis ticks for numeric axes
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

import logging
import math

from . import fmt
from .ticks import Tick, TickInfo

LOGGER = logging.getLogger(__name__)

_FUDGE = 1e-9

# minimal tick step, in units in the last place of the axis range ends
_MIN_ULPS = 16


class Linear:

    """Tick placement for real-valued axes.

    Steps are of the form ``m * 10**e`` for a multiplier ``m`` from
    :py:attr:`MULTIPLIERS`.  Of the four candidate steps for the power
    of ten closest to the rough step, the one giving a tick count
    closest to the desired count is used.

    """

    MULTIPLIERS = (1, 2, 5, 10)

    def step_power(self, rough_step):
        return 10.0 ** math.floor(math.log10(rough_step))

    def count_ticks(self, a, b, step):
        """Find the first multiple of `step` in [a, b] and the number of
        multiples of `step` in this interval.

        """
        start = math.ceil(a / step - _FUDGE) * step
        if start > b + step * _FUDGE:
            return start, 0
        n = math.floor((b - start) / step + _FUDGE) + 1
        return start, n

    def finer(self, power):
        return power / 10

    def resolves(self, a, b, step):
        """Check whether floating point numbers near `a` and `b` are fine
        enough to place ticks `step` apart.

        """
        return step >= _MIN_ULPS * math.ulp(max(abs(a), abs(b)))

    def candidates(self, a, b, power):
        """Generate (multiplier, step, start, count) for all candidate steps.

        Candidates with fewer than two ticks are left out.

        """
        for m in self.MULTIPLIERS:
            step = m * power
            start, n = self.count_ticks(a, b, step)
            if n < 2:
                continue
            yield m, step, start, n

    def best_step(self, a, b, ideal_tick_count):
        """Find the candidate with tick count closest to `ideal_tick_count`.

        Ties are broken in favour of fewer ticks.  Returns ``None`` if
        no step gives at least two ticks.

        """
        power = self.step_power((b - a) / (ideal_tick_count - 1))
        # With ideal_tick_count == 2 all candidates at `power` may miss
        # the second tick; one finer power of ten always has two.
        for _ in range(2):
            best = None
            best_key = None
            for cand in self.candidates(a, b, power):
                n = cand[3]
                key = (abs(n - ideal_tick_count), n)
                if best is None or key < best_key:
                    best = cand
                    best_key = key
            if best is not None:
                return best
            power = self.finer(power)
        return None

    def compute_ticks(self, bound, ideal_tick_count):
        """Choose the ticks for the interval `bound`.

        Args:
            bound: a pair ``(min, max)`` with ``min < max``.
            ideal_tick_count (int): the number of ticks to aim for.

        Returns:
            A :py:class:`ticks.TickInfo` object without dash size.

        """
        a, b = bound
        if ideal_tick_count < 2:
            raise ValueError(
                f"ideal tick count must be at least 2, not {ideal_tick_count}")
        if not (math.isfinite(a) and math.isfinite(b)) or a >= b:
            raise ValueError(f"invalid axis range [{a}, {b}]")

        rough_step = (b - a) / (ideal_tick_count - 1)
        best = None
        if self.resolves(a, b, rough_step):
            best = self.best_step(a, b, ideal_tick_count)
        if best is not None and not self.resolves(a, b, best[1]):
            best = None
        if best is None:
            raise ValueError(
                f"axis range [{a}, {b}] is too narrow for its magnitude")
        m, step, start, n = best

        positions = [start + k * step for k in range(n)]
        base = None
        if fmt.should_fmt_offset(positions[0], positions[-1], step):
            base = positions[0]
            ticks = [Tick(x, x - base) for x in positions]
        else:
            ticks = [Tick(x, x) for x in positions]
        LOGGER.debug("[%s, %s]: %d ticks with step %s, relative=%s",
                     a, b, n, step, base is not None)
        return TickInfo(ticks, step, multiplier=m, display_relative=base)


class IntegerLinear(Linear):

    """Tick placement for integer axes.

    This uses the same search as :py:class:`Linear`, but steps are
    integers of at least 1 and all arithmetic is exact.

    """

    def step_power(self, rough_step):
        return 10 ** max(0, math.floor(math.log10(rough_step)))

    def finer(self, power):
        return max(1, power // 10)

    def resolves(self, a, b, step):
        return True

    def count_ticks(self, a, b, step):
        start = -(-a // step) * step
        if start > b:
            return start, 0
        return start, (b - start) // step + 1

    def compute_ticks(self, bound, ideal_tick_count):
        a, b = bound
        return super().compute_ticks((int(a), int(b)), ideal_tick_count)
