# hist.py - helper functions for drawing histograms
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

import numpy as np

MAX_BINS = 50


def freedman_diaconis(x):
    """Implements a variant of the Freedman-Diaconis rule.

    https://en.wikipedia.org/wiki/Freedman%E2%80%93Diaconis_rule"""
    n = x.size
    ppp = np.nanpercentile(x, [0, 25, 75, 100])
    iqr = ppp[2] - ppp[1]
    if iqr <= 0:
        return MAX_BINS
    bins = int(n**(1/3) * (ppp[3] - ppp[0]) / iqr / 10 + 0.5)
    return min(max(bins, 1), MAX_BINS)

def guess_bins(x):
    """Choose histogram bins for the data `x`.

    Integer data with few distinct values get one bin per integer,
    centred on the integer.  Otherwise the number of bins is chosen
    using :py:func:`freedman_diaconis`.

    """
    x = np.asarray(x)
    u = np.unique(x)
    if u.size < 2:
        return 1
    elif u.size < 20:
        u_int = u.astype(int)
        if np.all(u == u_int):
            a = np.min(u_int)
            b = np.max(u_int)
            return np.linspace(a-.5, b+.5, num=b-a+2)
    return freedman_diaconis(x)
