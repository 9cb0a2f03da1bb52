#! /usr/bin/env python3

import pytest

from . import errors, param


def test_update():
    style = param.update(param.ROOT)
    assert style['bg_col'] == 'white'
    assert style['x_tick_count'] == 6

    style = param.update(param.ROOT, {'bg_col': 'red'}, grid=True)
    assert style['bg_col'] == 'red'
    assert style['grid'] is True

def test_inherit():
    with pytest.raises(ValueError):
        # 'axis_col' and friends have no default value
        param.update({})

    parent = param.update(param.ROOT)
    style = param.update({}, parent_style=parent)
    assert style['bg_col'] == 'transparent'
    assert style['axis_dash'] == parent['axis_dash']

def test_check_keys():
    assert param.check_keys(None) == {}
    style = {'grid': True}
    assert param.check_keys(style) is style
    with pytest.raises(errors.InvalidParameterName):
        param.check_keys({'grid_color': 'red'})
    with pytest.raises(errors.InvalidParameterName):
        param.update(param.ROOT, {'tick_count': 5})

def test_defaults():
    for key, (typ, default, desc) in param.DEFAULT.items():
        assert typ in ('width', 'height', 'dim', 'col', 'bool', 'int', 'str')
        assert desc
        if default == 'inherit':
            assert key in param.ROOT, key
        if isinstance(default, str) and default.startswith('$'):
            assert default[1:] in param.DEFAULT, key
