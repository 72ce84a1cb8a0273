# -*- coding: utf-8 -*-
"""Interpolation kernels and management."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from math import cos, pi

from .logs import get_logger
from .utils.exceptions import AlreadyExists


log = get_logger("interpolation")


def linear(a, b, t):
    """Blend two values linearly.

    :param float a: The value at t=0
    :param float b: The value at t=1
    :param float t: The blend parameter, from 0 to 1
    :returns float: The blended value

    """
    return (b - a) * t + a


def cosine(a, b, t):
    """Blend two values with a cosine ease.

    The derivative is zero at both ends, so neighboring lattice cells
    join without a crease.

    :param float a: The value at t=0
    :param float b: The value at t=1
    :param float t: The blend parameter, from 0 to 1
    :returns float: The blended value

    """
    return (1 - cos(pi * t)) / 2 * (b - a) + a


def smoothstep(a, b, t):
    """Blend two values with a cubic Hermite ease (3t^2 - 2t^3)."""
    return t * t * (3 - 2 * t) * (b - a) + a


def smootherstep(a, b, t):
    """Blend two values with a quintic ease (6t^5 - 15t^4 + 10t^3)."""
    return t * t * t * (t * (t * 6 - 15) + 10) * (b - a) + a


class KernelManager:

    """A manager for named interpolation kernels."""

    def __init__(self):
        """Create a new kernel manager."""
        self._kernels = {}

    def __contains__(self, name):
        return name in self._kernels

    def __getitem__(self, name):
        return self._kernels[name]

    def __iter__(self):
        return iter(self._kernels)

    def register(self, name, kernel):
        """Register an interpolation kernel by name.

        A kernel is any callable taking (a, b, t) and returning a value
        between `a` and `b` for `t` from 0 to 1.

        :param str name: The name to register the kernel under
        :param callable kernel: The kernel to register
        :returns None:
        :raises AlreadyExists: If a kernel with `name` is already registered
        :raises TypeError: If `kernel` is not callable

        """
        if name in self._kernels:
            raise AlreadyExists(name, self._kernels[name], kernel)
        if not callable(kernel):
            raise TypeError("interpolation kernel must be callable")
        log.debug("Registered interpolation kernel '%s'.", name)
        self._kernels[name] = kernel

    def resolve(self, kernel):
        """Turn a kernel name or callable into a callable kernel.

        :param kernel: The name of a registered kernel, or a callable
        :returns callable: The kernel
        :raises KeyError: If `kernel` is a name that isn't registered
        :raises TypeError: If `kernel` is neither a name nor callable

        """
        if isinstance(kernel, str):
            return self._kernels[kernel]
        if not callable(kernel):
            raise TypeError("interpolation kernel must be a name or callable")
        return kernel


KERNELS = KernelManager()
KERNELS.register("linear", linear)
KERNELS.register("cosine", cosine)
KERNELS.register("smoothstep", smoothstep)
KERNELS.register("smootherstep", smootherstep)
