# -*- coding: utf-8 -*-
"""Fractal lattice noise fields."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from math import floor

from .lattice import LatticeStore
from .logs import get_logger
from .options import NoiseOptions
from .utils import class_name
from .utils.exceptions import ConfigurationError, DimensionMismatch


log = get_logger("noise")


class _BaseNoiseField:

    """Shared setup for noise fields; subclasses provide `get`."""

    def __init__(self, options=None, **kwargs):
        """Create a new noise field.

        :param options: A NoiseOptions instance, or a mapping of options
        :param kwargs: Options by name, overriding any in `options`
        :returns None:
        :raises ConfigurationError: If any option is invalid

        """
        if not isinstance(options, NoiseOptions) or kwargs:
            options = NoiseOptions(options, **kwargs)
        self._options = options
        self._lattice = LatticeStore(options.dimensions, seed=options.seed)
        self._factor = options.factor
        log.debug("Created %s with %r (seed %r).", class_name(self),
                  options, self._lattice.source.seed)

    def __repr__(self):
        return "{}<{}d, seed={!r}>".format(class_name(self),
                                           self._options.dimensions,
                                           self.seed)

    @property
    def options(self):
        """Return the options this field was created with."""
        return self._options

    @property
    def dimensions(self):
        """Return the number of dimensions of this field."""
        return self._options.dimensions

    @property
    def seed(self):
        """Return the seed in use, including a generated one."""
        return self._lattice.source.seed

    @property
    def factor(self):
        """Return the factor that scales an octave sum into range."""
        return self._factor

    @property
    def lattice(self):
        """Return this field's lattice store."""
        return self._lattice

    def _check_coords(self, coords):
        try:
            coords = tuple(coords)
        except TypeError:
            raise TypeError("coordinates must be a sequence of numbers")
        if len(coords) != self._options.dimensions:
            raise DimensionMismatch(self._options.dimensions, len(coords))
        return coords

    def get(self, coords):
        """Get the noise value at a point; subclasses must override this."""
        raise NotImplementedError


class NoiseField(_BaseNoiseField):

    """A fractal noise field over any number of dimensions."""

    def __init__(self, options=None, **kwargs):
        super().__init__(options, **kwargs)
        dims = self._options.dimensions
        # Bit j of a corner's index picks the +1 offset along axis j; this
        # has to match the axis order the interpolation passes run in.
        self._corner_offsets = [tuple(index >> axis & 1
                                      for axis in range(dims))
                                for index in range(1 << dims)]

    def _get(self, x):
        """Get the [0, 1) value of a single octave at coordinates `x`."""
        origin = [floor(n) for n in x]
        deltas = [n - o for n, o in zip(x, origin)]
        value_at = self._lattice.value_at
        values = [value_at([o + d for o, d in zip(origin, offsets)])
                  for offsets in self._corner_offsets]
        kernel = self._options.kernel
        # Collapse one axis per pass, pairing neighbors along that axis.
        for delta in deltas:
            values = [kernel(values[i], values[i + 1], delta)
                      for i in range(0, len(values), 2)]
        return values[0]

    def get(self, coords):
        """Get the noise value at a point.

        :param sequence coords: One number per dimension
        :returns float: The noise value, from min up to (not including) max
        :raises DimensionMismatch: If `coords` has the wrong length

        """
        options = self._options
        wavelength = options.wavelength
        x = [n / wavelength for n in self._check_coords(coords)]
        scale = 1 / options.octave_scale
        persistence = options.persistence
        value = 0
        frequency = 1
        amplitude = 1
        for _ in range(options.octaves):
            value += self._get([n * frequency for n in x]) * amplitude
            frequency *= scale
            amplitude *= persistence
        return value * self._factor + options.min


class NoiseField2D(_BaseNoiseField):

    """A fractal noise field specialized for two dimensions.

    This gives the same values as a two dimensional NoiseField with the
    same options, just without the general hypercube bookkeeping.

    """

    def __init__(self, options=None, **kwargs):
        super().__init__(options, **kwargs)
        if self._options.dimensions != 2:
            raise ConfigurationError("dimensions", self._options.dimensions,
                                     "must be 2 for a two dimensional field")

    def _get(self, x, y):
        """Get the [0, 1) value of a single octave at (`x`, `y`)."""
        _x = floor(x)
        _y = floor(y)
        dx = x - _x
        value_at = self._lattice.value_at
        kernel = self._options.kernel
        return kernel(
            kernel(value_at((_x, _y)), value_at((_x + 1, _y)), dx),
            kernel(value_at((_x, _y + 1)), value_at((_x + 1, _y + 1)), dx),
            y - _y)

    def get(self, coords):
        """Get the noise value at a point.

        :param sequence coords: The (x, y) coordinates of the point
        :returns float: The noise value, from min up to (not including) max
        :raises DimensionMismatch: If `coords` has the wrong length

        """
        options = self._options
        x, y = self._check_coords(coords)
        x /= options.wavelength
        y /= options.wavelength
        scale = 1 / options.octave_scale
        persistence = options.persistence
        value = 0
        frequency = 1
        amplitude = 1
        for _ in range(options.octaves):
            value += self._get(x * frequency, y * frequency) * amplitude
            frequency *= scale
            amplitude *= persistence
        return value * self._factor + options.min

    def generate_layer(self, width, height, center=(0, 0)):
        """Sample a rectangular grid of noise values at integer points.

        Rows run from the highest y down to the lowest, and each row runs
        from the lowest x to the highest, matching how maps are drawn.

        :param int width: The width of the grid
        :param int height: The height of the grid
        :param tuple(int, int) center: The center of the grid as (x, y)
        :returns list: A list of `height` rows of `width` values each

        """
        max_x = width // 2
        max_y = height // 2
        rows = []
        for y in range(center[1] + max_y,
                       center[1] - max_y - (height % 2),
                       -1):
            rows.append([self.get((x, y))
                         for x in range(center[0] - max_x,
                                        center[0] + max_x + (width % 2))])
        return rows


def create_noise(options=None, **kwargs):
    """Create a new noise field, specialized for two dimensions if possible.

    :param mapping options: The options to create the field with
    :param kwargs: Options by name, overriding any in `options`
    :returns NoiseField|NoiseField2D: The new noise field
    :raises ConfigurationError: If any option is invalid

    """
    options = NoiseOptions(options, **kwargs)
    if options.dimensions == 2:
        return NoiseField2D(options)
    return NoiseField(options)
