#! /usr/bin/env python3

import math

import numpy as np

import pytest

from . import scale


RANGES = [
    (0.01, 4.99),
    (-0.01, 5.01),
    (0.01, 5.01),
    (0, 1),
    (-1, 1),
    (0, 3.14159265),
    (-273.15, 100),
    (1e-7, 3e-7),
    (123456, 123789),
    (-5e9, 7e9),
]


def test_integer_scenario():
    s = scale.IntegerLinear()
    info = s.compute_ticks((0, 6000), 9)
    assert info.step in (500, 1000)
    assert info.step == 1000
    assert info.multiplier == 10
    assert info.positions == [0, 1000, 2000, 3000, 4000, 5000, 6000]
    assert all(isinstance(x, int) for x in info.positions)
    assert info.display_relative is None

def test_relative_display():
    s = scale.Linear()
    start = 1_000_000_000_000.0
    info = s.compute_ticks((start, start + 10), 5)
    assert info.step == pytest.approx(2)
    assert len(info) == 6
    assert info.display_relative == start
    assert info.values == pytest.approx([0, 2, 4, 6, 8, 10])
    for tick in info:
        assert tick.position - info.display_relative == \
            pytest.approx(tick.value)

def test_no_relative_display_for_short_labels():
    s = scale.Linear()
    info = s.compute_ticks((0, 1), 6)
    assert info.display_relative is None
    assert info.step == pytest.approx(0.2)
    assert info.values == info.positions

def test_tick_properties():
    s = scale.Linear()
    for a, b in RANGES:
        for ideal in range(2, 12):
            info = s.compute_ticks((a, b), ideal)
            pos = info.positions
            eps = 1e-6 * info.step
            assert len(pos) >= 2
            assert all(x < y for x, y in zip(pos[:-1], pos[1:]))
            assert pos[0] >= a - eps and pos[-1] <= b + eps
            assert pos[0] - a < info.step + eps
            assert b - pos[-1] < info.step + eps
            for x, y in zip(pos[:-1], pos[1:]):
                assert y - x == pytest.approx(info.step)

def test_closeness():
    s = scale.Linear()
    for a, b in RANGES:
        for ideal in range(3, 12):
            info = s.compute_ticks((a, b), ideal)
            n = len(info)
            power = s.step_power((b - a) / (ideal - 1))
            for _, _, _, n_other in s.candidates(a, b, power):
                assert abs(n - ideal) <= abs(n_other - ideal)
                if abs(n - ideal) == abs(n_other - ideal):
                    assert n <= n_other

def test_tie_prefers_fewer_ticks():
    s = scale.Linear()
    # step 1 gives 4 ticks, step 2 gives 2 ticks, both one away from 3
    info = s.compute_ticks((0, 3), 3)
    assert info.step == 2
    assert info.positions == [0, 2]

def test_ideal_two():
    s = scale.Linear()
    info = s.compute_ticks((0.5, 1.5), 2)
    assert len(info) >= 2
    assert info.step == pytest.approx(0.5)
    assert info.positions == pytest.approx([0.5, 1.0, 1.5])

def test_integer_steps():
    s = scale.IntegerLinear()
    info = s.compute_ticks((4, 6), 6)
    assert info.step == 1
    assert info.positions == [4, 5, 6]

    for a, b in [(0, 1), (-3, 3), (17, 4711), (-10**12, 10**12)]:
        for ideal in range(2, 10):
            info = s.compute_ticks((a, b), ideal)
            assert isinstance(info.step, int) and info.step >= 1
            assert len(info) >= 2
            assert info.positions[0] >= a and info.positions[-1] <= b

def test_count_ticks():
    s = scale.Linear()
    assert s.count_ticks(0.5, 1.5, 1) == (1, 1)
    start, n = s.count_ticks(0, 1, 0.1)
    assert start == 0 and n == 11
    start, n = s.count_ticks(0.01, 0.02, 1)
    assert n == 0

    s = scale.IntegerLinear()
    assert s.count_ticks(-7, 7, 5) == (-5, 3)
    assert s.count_ticks(1, 4, 5) == (5, 0)

def test_step_power():
    s = scale.Linear()
    for x in np.linspace(0.1, 100, 1000):
        p = s.step_power(x)
        assert p <= x * (1 + 1e-12) and x < 10 * p * (1 + 1e-12)
    assert scale.IntegerLinear().step_power(0.3) == 1

def test_invalid_arguments():
    for s in [scale.Linear(), scale.IntegerLinear()]:
        with pytest.raises(ValueError):
            s.compute_ticks((0, 1), 1)
        with pytest.raises(ValueError):
            s.compute_ticks((1, 1), 5)
        with pytest.raises(ValueError):
            s.compute_ticks((2, 1), 5)
    with pytest.raises(ValueError):
        scale.Linear().compute_ticks((0, math.inf), 5)
    with pytest.raises(ValueError):
        scale.Linear().compute_ticks((math.nan, 1), 5)

def test_float_steps():
    s = scale.Linear()
    assert isinstance(s.step_power(20), float)
    info = s.compute_ticks((0, 100), 6)
    assert isinstance(info.step, float)
    assert all(isinstance(x, float) for x in info.positions)

def test_integer_relative_display():
    s = scale.IntegerLinear()
    start = 10**9
    info = s.compute_ticks((start, start + 100), 6)
    assert info.step == 20
    assert info.display_relative == start
    assert info.values == [0, 20, 40, 60, 80, 100]
    assert all(isinstance(x, int) for x in info.values)
    assert all(isinstance(x, int) for x in info.positions)

def test_range_below_resolution():
    s = scale.Linear()
    with pytest.raises(ValueError):
        s.compute_ticks((9824358626835.316, 9824358626835.324), 9)
    info = s.compute_ticks((9824358626835.0, 9824358626845.0), 6)
    pos = info.positions
    assert all(x < y for x, y in zip(pos[:-1], pos[1:]))
