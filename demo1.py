#! /usr/bin/env python3

import datetime

import numpy as np

from tickplot import AxisOptions, Plot

t0 = datetime.datetime(2020, 1, 30, tzinfo=datetime.timezone.utc)
t = [t0 + datetime.timedelta(hours=k) for k in range(24*5)]
y = 1e12 + np.cumsum(np.random.randn(len(t)))

style = {'grid': True, 'margin_top': '8mm'}
with Plot('demo1.pdf', '6in', '3.5in', style=style) as fig:
    fig.draw_title("Reservoir level")
    fig.plot(t, y, x_options=AxisOptions(7), x_lab="time", y_lab="level",
             label="gauge 1")
