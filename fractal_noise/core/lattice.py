# -*- coding: utf-8 -*-
"""Lazily generated lattice values."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from .. import settings
from .logs import get_logger
from .random import RandomSource
from .utils import is_integer
from .utils.exceptions import DimensionMismatch


log = get_logger("lattice")


class LatticeStore:

    """An unbounded integer lattice of memoized random values.

    Each lattice point is given a uniform value in [0, 1) the first time it
    is looked up, and keeps that value for the life of the store.  Points
    are never evicted, so memory use grows with the number of distinct
    points touched.

    Lookups are not locked; a store shared between threads must be
    guarded by the caller.

    """

    def __init__(self, dimensions, seed=None, source=None):
        """Create a new, empty lattice store.

        :param int dimensions: The number of axes in a lattice point
        :param seed: A seed for a new random source, if `source` is None
        :param RandomSource source: An existing source of uniform values
        :returns None:
        :raises ValueError: If `dimensions` is not a positive integer

        """
        if not is_integer(dimensions) or dimensions < 1:
            raise ValueError("lattice dimensions must be an integer >= 1")
        self._dimensions = dimensions
        self._source = source if source is not None else RandomSource(seed)
        self._points = {}
        self._next_milestone = settings.LATTICE_LOG_THRESHOLD

    def __contains__(self, coords):
        return tuple(coords) in self._points

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return "LatticeStore<{}d, {} points>".format(self._dimensions,
                                                     len(self._points))

    @property
    def dimensions(self):
        """Return the number of axes in this lattice."""
        return self._dimensions

    @property
    def source(self):
        """Return the random source this lattice draws from."""
        return self._source

    def value_at(self, coords):
        """Get the value at a lattice point, generating it if needed.

        :param sequence coords: The integer coordinates of the point
        :returns float: The point's value, from 0 up to (not including) 1
        :raises DimensionMismatch: If `coords` has the wrong length

        """
        key = tuple(coords)
        value = self._points.get(key)
        if value is None:
            if len(key) != self._dimensions:
                raise DimensionMismatch(self._dimensions, len(key))
            value = self._source.random()
            self._points[key] = value
            if len(self._points) >= self._next_milestone:
                log.debug("Lattice has grown to %s points.",
                          len(self._points))
                self._next_milestone *= 2
        return value
