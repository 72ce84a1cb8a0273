# -*- coding: utf-8 -*-
"""Core noise generation."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)
