# -*- coding: utf-8 -*-
"""Noise field options and validation."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from math import isclose, isfinite

from .. import settings
from .interpolation import KERNELS
from .utils import class_name, is_integer, is_number, joins
from .utils.exceptions import ConfigurationError


OPTION_NAMES = ("seed", "dimensions", "min", "max", "wavelength", "octaves",
                "octave_scale", "persistence", "interpolation")


class NoiseOptions:

    """A validated, immutable set of noise field options.

    Any option not given is filled in from the `DEFAULT_*` values in
    settings at the time the options are created.

    """

    def __init__(self, options=None, **kwargs):
        """Create a new set of noise options.

        :param mapping options: Options to use, overridden by `kwargs`
        :param kwargs: Options to use, by name
        :returns None:
        :raises ConfigurationError: If any option is unknown or invalid

        """
        if isinstance(options, NoiseOptions):
            options = options.as_dict()
        given = dict(options or {})
        given.update(kwargs)
        unknown = sorted(set(given) - set(OPTION_NAMES))
        if unknown:
            raise ConfigurationError(unknown[0], given[unknown[0]],
                                     joins("unknown option, expected one of",
                                           ", ".join(OPTION_NAMES)))
        for name in OPTION_NAMES:
            if name not in given:
                given[name] = getattr(settings, "DEFAULT_" + name.upper())
        self._frozen = False
        self.seed = given["seed"]
        self.dimensions = self._check_count(given, "dimensions")
        self.octaves = self._check_count(given, "octaves")
        self.min = self._check_number(given, "min")
        self.max = self._check_number(given, "max")
        if self.max <= self.min:
            raise ConfigurationError("max", self.max,
                                     "must be greater than min ({})"
                                     .format(self.min))
        if not isfinite(self.max - self.min):
            raise ConfigurationError("max", self.max,
                                     "range from min ({}) is too wide"
                                     .format(self.min))
        self.wavelength = self._check_positive(given, "wavelength")
        self.octave_scale = self._check_positive(given, "octave_scale")
        self.persistence = self._check_positive(given, "persistence")
        self.interpolation = given["interpolation"]
        try:
            self.kernel = KERNELS.resolve(self.interpolation)
        except KeyError:
            raise ConfigurationError("interpolation", self.interpolation,
                                     "no kernel registered by that name")
        except TypeError as exc:
            raise ConfigurationError("interpolation", self.interpolation,
                                     str(exc))
        self._check_frequency(given["octaves"])
        self.factor = self._get_factor()
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError("{} is immutable".format(class_name(self)))
        super().__setattr__(name, value)

    def __repr__(self):
        return "{}({})".format(class_name(self), ", ".join(
            "{}={!r}".format(name, getattr(self, name))
            for name in OPTION_NAMES))

    def as_dict(self):
        """Return these options as a dict, suitable for making a copy."""
        return {name: getattr(self, name) for name in OPTION_NAMES}

    @staticmethod
    def _check_number(given, name):
        value = given[name]
        if not is_number(value) or not isfinite(value):
            raise ConfigurationError(name, value, "must be a finite number")
        return value

    @classmethod
    def _check_positive(cls, given, name):
        value = cls._check_number(given, name)
        if value <= 0:
            raise ConfigurationError(name, value, "must be greater than 0")
        return value

    @staticmethod
    def _check_count(given, name):
        value = given[name]
        if not is_integer(value) or value < 1:
            raise ConfigurationError(name, value, "must be an integer >= 1")
        return int(value)

    def _check_frequency(self, octaves):
        # The last octave samples at (1 / octave_scale) ** (octaves - 1).
        try:
            highest = (1 / self.octave_scale) ** (self.octaves - 1)
        except OverflowError:
            highest = None
        if highest is None or not isfinite(highest):
            raise ConfigurationError("octaves", octaves,
                                     "frequency of the last octave overflows"
                                     " with octave_scale={}"
                                     .format(self.octave_scale))

    def _get_factor(self):
        # amp = sum(per**i for i in range(oct)) = (per**oct - 1) / (per - 1)
        # val = (val / amp) * (max - min) + min = val * factor + min
        per = self.persistence
        span = self.max - self.min
        try:
            if isclose(per, 1, rel_tol=0,
                       abs_tol=settings.PERSISTENCE_TOLERANCE):
                # The series degenerates to `octaves` equal weights.
                factor = span / self.octaves
            else:
                factor = span * (per - 1) / (per ** self.octaves - 1)
        except (OverflowError, ZeroDivisionError):
            factor = None
        if not factor or not isfinite(factor):
            raise ConfigurationError("persistence", per,
                                     "normalization factor is undefined for"
                                     " {} octaves".format(self.octaves))
        return factor
