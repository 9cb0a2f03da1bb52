#! /usr/bin/env python3

import numpy as np

from . import hist


def test_guess_bins_integers():
    x = np.array([1, 2, 2, 3, 3, 3, 5])
    bins = hist.guess_bins(x)
    assert np.allclose(bins, [0.5, 1.5, 2.5, 3.5, 4.5, 5.5])

def test_guess_bins_constant():
    assert hist.guess_bins(np.ones(10)) == 1

def test_guess_bins_real():
    rng = np.random.default_rng(2)
    x = rng.normal(size=1000)
    bins = hist.guess_bins(x)
    assert 1 <= bins <= hist.MAX_BINS

def test_freedman_diaconis():
    # more than half of the values are equal, so the IQR is zero
    x = np.array([0.0] * 10 + [1.0, 2.5])
    assert hist.freedman_diaconis(x) == hist.MAX_BINS
