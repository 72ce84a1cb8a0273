# -*- coding: utf-8 -*-
"""Seedable N-dimensional fractal lattice noise."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from os.path import abspath, dirname


VERSION = (0, 1, 0, 0)
ROOT_DIR = dirname(dirname(abspath(__file__)))
BASE_PACKAGE = __name__


def get_version():
    """Return the version string."""
    return "{}{}".format(".".join([str(n) for n in VERSION[:3]]),
                         "" if VERSION[3] == 0 else ".dev{}".format(VERSION[3]))


__author__ = "Will Hutcheson"
__contact__ = "will@whutch.com"
__homepage__ = "https://github.com/whutch/fractal-noise"
__license__ = "MIT"
__docformat__ = "restructuredtext"
__version__ = get_version()
__all__ = ["create_noise", "NoiseField", "NoiseField2D", "NoiseOptions"]


from .core.noise import create_noise, NoiseField, NoiseField2D
from .core.options import NoiseOptions
