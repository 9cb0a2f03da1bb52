#! /usr/bin/env python3

import pytest

from . import dash


def test_strict_inequality():
    # 100/5 == 20 is not below the ideal size, so k=2 is needed
    assert dash.dash_size(100.0, 20.0, 5) == pytest.approx(4.0)
    d, divisor, k = dash.find_dash(100.0, 20.0, 5)
    assert divisor == 5 and k == 2

    assert dash.dash_size(100.0, 20.1, 5) == pytest.approx(20.0)

def test_divisor_from_multiplier():
    d, divisor, k = dash.find_dash(100.0, 30.0, 2)
    assert divisor == 2
    assert d == pytest.approx(25.0)

    # for multipliers 1 and 10, the closer of divisors 2 and 5 wins
    d, divisor, k = dash.find_dash(100.0, 30.0, 1)
    assert divisor == 2
    assert d == pytest.approx(25.0)
    d, divisor, k = dash.find_dash(100.0, 21.0, 10)
    assert divisor == 5
    assert d == pytest.approx(20.0)

def test_dash_stability():
    for one_step in [3.0, 17.5, 100.0, 250.0, 1234.5]:
        for ideal in [2.0, 10.0, 30.0, 77.0]:
            for m in [1, 2, 5, 10]:
                d, divisor, k = dash.find_dash(one_step, ideal, m)
                assert d < ideal
                assert 1 <= k <= dash.MAX_ITERATIONS
                assert d * divisor**k == pytest.approx(one_step)
                if m in (2, 5):
                    assert divisor == m
                else:
                    assert divisor in (2, 5)

def test_invalid_arguments():
    with pytest.raises(ValueError):
        dash.dash_size(0.0, 20.0, 5)
    with pytest.raises(ValueError):
        dash.dash_size(-1.0, 20.0, 5)
    with pytest.raises(ValueError):
        dash.dash_size(100.0, 0.0, 5)
    with pytest.raises(ValueError):
        dash.dash_size(100.0, 20.0, 0)

def test_search_exhausted():
    with pytest.raises(AssertionError):
        dash.dash_size(1e300, 1e-300, 2)
