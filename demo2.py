#! /usr/bin/env python3

import numpy as np

from tickplot import Plot

with Plot('demo2.pdf', '4.5in', '3in') as fig:
    fig.histogram(np.random.poisson(6, size=500))
