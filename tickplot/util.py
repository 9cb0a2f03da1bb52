# util.py - auxiliary functions for tickplot
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

import numpy as np

UNITS = {
    'in': 1,
    'cm': 1 / 2.54,
    'mm': 1 / 25.4,
    'bp': 1 / 72,
    'pt': 1 / 72.27,
}

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', 'none', ''}


def convert_dim(dim, res, parent_length=None):
    """Convert dimensions to device coordinates.

    Args:
        dim: The dimension, either as a number (device units) or a
            dimension string including a unit (e.g. "1cm").
        res: The device resolution in units/inch.
        parent_length: The length of the surrounding element in device
            units.  If this is set, relative lengths (e.g. "50%") are
            allowed.

    Returns:
        How many device units correspond to `dim`.

    """
    if dim is None:
        return None

    unit = None

    try:
        dim = float(dim)
        unit = 1
    except (TypeError, ValueError):
        dim = str(dim).strip()

    if unit is None:
        for pfx, scale in UNITS.items():
            if dim.endswith(pfx):
                dim = dim[:-len(pfx)]
                unit = scale * res
                break

    if unit is None and dim.endswith('px'):
        if res is None:
            raise ValueError(f'pixel length {dim} in invalid context')
        dim = dim[:-2]
        unit = 1

    if unit is None and dim.endswith('%'):
        if parent_length is None:
            raise ValueError(
                'relative length %s in invalid context' % dim)
        dim = dim[:-1]
        unit = parent_length / 100

    if unit is None:
        raise ValueError(f"invalid dimension {dim!r}")

    return float(dim) * unit

def parse_bool(val):
    if isinstance(val, str):
        key = val.strip().lower()
        if key in _TRUE:
            return True
        if key in _FALSE:
            return False
        raise ValueError(f"invalid boolean value {val!r}")
    return bool(val)

def check_vec(v, n, broadcast=False):
    if isinstance(v, str):
        if not broadcast:
            raise TypeError('string "%s" used as vec%d' % (v, n))
        return [v] * n
    try:
        k = len(v)
    except TypeError:
        if not broadcast:
            tmpl = "%s used as vec%d, but does not have a length"
            raise TypeError(tmpl % (repr(v), n))
        k = 1
        v = [v]

    if broadcast and 1 <= k < n and n % k == 0:
        return list(v) * (n // k)
    if k != n:
        tmpl = "%s used as vec%d, but has length %s != %d"
        raise ValueError(tmpl % (repr(v), n, k, n))
    return v


def _as_column(v):
    v = np.asarray(v)
    if not v.shape:
        v = v.reshape((1,))
    return v


def _check_coords(x, y):
    """Bring point coordinates into the form of two one-dimensional
    arrays of equal length.

    If `y` is ``None``, `x` is either a vector of y-coordinates (and
    the x-coordinates are 1, 2, ...), or an array with two columns.

    """
    if y is None:
        x = _as_column(x)
        shape = x.shape
        if len(shape) == 1:
            return np.arange(1, shape[0]+1), x
        if len(shape) == 2 and shape[1] == 2:
            return x[:, 0], x[:, 1]
        raise ValueError('x has wrong shape %s' % repr(shape))
    x = _as_column(x)
    y = _as_column(y)
    if len(x.shape) != 1:
        raise ValueError('x has wrong shape %s' % repr(x.shape))
    if len(y.shape) != 1:
        raise ValueError('y has wrong shape %s' % repr(y.shape))
    if len(x) != len(y):
        tmpl = 'x and y have incompatible length: %d != %d'
        raise ValueError(tmpl % (len(x), len(y)))
    return x, y


def _check_coord_pair(x, y):
    if y is None:
        x, y = list(x)
    return x, y
