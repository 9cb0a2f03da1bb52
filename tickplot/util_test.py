# util_test.py - unit tests for util.py
# Copyright (C) 2014 Jochen Voss <voss@seehuhn.de>
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

import pytest

import numpy as np

from . import util


def testconvert_dim():
    parent_length = 543
    for res in [72, 100, 300]:
        assert util.convert_dim(3.1415, res) == pytest.approx(3.1415)

        tests = [
            ('1in', res),
            ('-1in', -res),
            ('2.54cm', '1in'),
            ('10mm', '1cm'),
            ('72bp', '1in'),
            ('72.27pt', '1in'),
            ('1pt', res/72.27),
            ('1px', 1),
            ('12%', parent_length*12/100),
            ('100%', parent_length),
        ]
        for a, b in tests:
            da = util.convert_dim(a, res, parent_length)
            db = util.convert_dim(b, res, parent_length)
            assert da == pytest.approx(db)

def test_parse_bool():
    for val in [True, 1, 'yes', 'TRUE', ' on ', '1']:
        assert util.parse_bool(val) is True
    for val in [False, 0, None, 'no', 'False', 'off', 'none', '']:
        assert util.parse_bool(val) is False
    with pytest.raises(ValueError):
        util.parse_bool('perhaps')

def test_check_coords():
    x, y = util._check_coords([4, 5, 6], None)
    assert list(x) == [1, 2, 3]
    assert list(y) == [4, 5, 6]

    x, y = util._check_coords(np.array([[1, 2], [3, 4]]), None)
    assert list(x) == [1, 3]
    assert list(y) == [2, 4]

    x, y = util._check_coords(7, 8)
    assert list(x) == [7] and list(y) == [8]

    with pytest.raises(ValueError):
        util._check_coords([1, 2, 3], [1, 2])
    with pytest.raises(ValueError):
        util._check_coords(np.zeros((2, 3)), None)

def test_check_vec():
    assert util.check_vec([1, 2], 2) == [1, 2]
    assert util.check_vec('1pt', 4, True) == ['1pt'] * 4
    assert util.check_vec(['1pt', '3pt'], 4, True) == ['1pt', '3pt'] * 2
    with pytest.raises(TypeError):
        util.check_vec('1pt', 4)
    with pytest.raises(ValueError):
        util.check_vec([1, 2, 3], 4, True)
