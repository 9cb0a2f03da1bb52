# color.py - convert color specifications to RGBA values
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

"""Colors
------

Colors in style parameters can be given in any of the following
forms:

* a hex string ``"#RGB"``, ``"#RGBA"``, ``"#RRGGBB"`` or ``"#RRGGBBAA"``,
* a CSS color name like ``"red"`` or ``"transparent"``,
* ``"rgb(r, g, b)"`` or ``"rgba(r, g, b, a)"`` with channel values in
  the range 0 to 255 and alpha between 0 and 1,
* a tuple of three or four numbers in the range [0, 1].

:py:func:`get` converts all of these into a tuple ``(r, g, b, a)`` of
floats, ready to be passed to Cairo's ``set_source_rgba()``.

"""

import re

NAMES = {
    'aqua': '#00FFFF',
    'black': '#000000',
    'blue': '#0000FF',
    'brown': '#A52A2A',
    'cyan': '#00FFFF',
    'darkblue': '#00008B',
    'darkgray': '#A9A9A9',
    'darkgreen': '#006400',
    'darkgrey': '#A9A9A9',
    'darkred': '#8B0000',
    'fuchsia': '#FF00FF',
    'gold': '#FFD700',
    'gray': '#808080',
    'green': '#008000',
    'grey': '#808080',
    'indigo': '#4B0082',
    'lightblue': '#ADD8E6',
    'lightgray': '#D3D3D3',
    'lightgreen': '#90EE90',
    'lightgrey': '#D3D3D3',
    'lime': '#00FF00',
    'magenta': '#FF00FF',
    'maroon': '#800000',
    'navy': '#000080',
    'olive': '#808000',
    'orange': '#FFA500',
    'pink': '#FFC0CB',
    'purple': '#800080',
    'red': '#FF0000',
    'silver': '#C0C0C0',
    'steelblue': '#4682B4',
    'teal': '#008080',
    'violet': '#EE82EE',
    'white': '#FFFFFF',
    'yellow': '#FFFF00',
}

_FUNC = re.compile(r'^(rgba?)\(([^)]*)\)$')


def _hex(col):
    digits = col[1:]
    if not re.fullmatch(r'[0-9a-fA-F]+', digits):
        raise ValueError(f"invalid color {col!r}")
    if len(digits) in (3, 4):
        vals = [int(c * 2, 16) for c in digits]
    elif len(digits) in (6, 8):
        vals = [int(digits[i:i+2], 16) for i in range(0, len(digits), 2)]
    else:
        raise ValueError(f"invalid color {col!r}")
    if len(vals) == 3:
        vals.append(255)
    return tuple(v / 255 for v in vals)


def _func(col, m):
    args = [a.strip() for a in m.group(2).split(',')]
    n = 4 if m.group(1) == 'rgba' else 3
    if len(args) != n:
        raise ValueError(f"invalid color {col!r}")
    try:
        vals = [float(a) for a in args]
    except ValueError:
        raise ValueError(f"invalid color {col!r}") from None
    r, g, b = (v / 255 for v in vals[:3])
    a = vals[3] if n == 4 else 1.0
    return (r, g, b, a)


def get(col):
    """Convert a color specification into an RGBA tuple."""
    if col is None:
        return None
    if isinstance(col, (tuple, list)):
        if len(col) == 3:
            return tuple(float(c) for c in col) + (1.0,)
        if len(col) == 4:
            return tuple(float(c) for c in col)
        raise ValueError(f"invalid color {col!r}")

    col = str(col).strip()
    if col.startswith('#'):
        return _hex(col)
    m = _FUNC.match(col.replace(' ', ''))
    if m:
        return _func(col, m)
    key = col.lower()
    if key == 'transparent':
        return (0.0, 0.0, 0.0, 0.0)
    if key in NAMES:
        return _hex(NAMES[key])
    raise ValueError(f"invalid color {col!r}")
