# -*- coding: utf-8 -*-
"""Tests for interpolation kernels."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

import pytest

from fractal_noise.core.interpolation import (AlreadyExists, cosine,
                                              KernelManager, KERNELS, linear,
                                              smootherstep, smoothstep)


@pytest.mark.parametrize("kernel", [linear, cosine, smoothstep, smootherstep])
def test_kernel_endpoints(kernel):
    """Test that a kernel starts at `a`, ends at `b` and stays between."""
    assert kernel(2, 4, 0) == 2
    assert kernel(2, 4, 1) == pytest.approx(4)
    assert kernel(2, 4, 0.5) == pytest.approx(3)
    last = 2
    for step in range(1, 100):
        value = kernel(2, 4, step / 100)
        assert 2 <= value <= 4
        assert value >= last
        last = value


def test_kernel_linear():
    """Test that the linear kernel blends linearly."""
    assert linear(2, 4, 0.25) == 2.5
    assert linear(4, 2, 0.25) == 3.5


def test_kernel_cosine_eases():
    """Test that the cosine kernel is flat at both ends."""
    step = 1e-4
    assert cosine(0, 1, step) < linear(0, 1, step) / 100
    assert 1 - cosine(0, 1, 1 - step) < step / 100


class TestKernelManager:

    """A collection of tests for kernel managers."""

    kernels = KernelManager()

    def test_register(self):
        """Test that we can register a kernel."""
        self.kernels.register("linear", linear)
        assert "linear" in self.kernels
        assert self.kernels["linear"] is linear
        assert list(self.kernels) == ["linear"]

    def test_register_duplicate(self):
        """Test that we can't register two kernels with the same name."""
        with pytest.raises(AlreadyExists) as info:
            self.kernels.register("linear", cosine)
        assert info.value.old is linear
        assert info.value.new is cosine

    def test_register_not_callable(self):
        """Test that we can't register something that isn't callable."""
        with pytest.raises(TypeError):
            self.kernels.register("broken", 5)
        assert "broken" not in self.kernels

    def test_resolve(self):
        """Test that we can resolve kernel names and callables."""
        assert self.kernels.resolve("linear") is linear
        assert self.kernels.resolve(cosine) is cosine
        with pytest.raises(KeyError):
            self.kernels.resolve("cosine")
        with pytest.raises(TypeError):
            self.kernels.resolve(None)

    def test_builtin_kernels(self):
        """Test that the built-in kernels are registered."""
        assert KERNELS["cosine"] is cosine
        assert KERNELS["linear"] is linear
        assert KERNELS["smoothstep"] is smoothstep
        assert KERNELS["smootherstep"] is smootherstep
