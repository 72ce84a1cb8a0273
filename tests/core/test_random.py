# -*- coding: utf-8 -*-
"""Tests for random data generation."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

import random

from fractal_noise.core.random import RandomSource


def test_random_source_seeded():
    """Test that sources with the same seed give the same values."""
    first = RandomSource(42)
    second = RandomSource(42)
    assert first.seed == second.seed == 42
    assert ([first.random() for _ in range(10)] ==
            [second.random() for _ in range(10)])


def test_random_source_independent():
    """Test that a source isn't affected by the global generator."""
    expected = random.Random(1337).random()
    source = RandomSource(1337)
    random.seed(0)
    random.random()
    assert source.random() == expected


def test_random_source_range():
    """Test that a source's values are in [0, 1)."""
    source = RandomSource("a string seed")
    for _ in range(1000):
        assert 0 <= source.random() < 1


def test_random_source_unseeded():
    """Test that an unseeded source records a seed that reproduces it."""
    source = RandomSource()
    assert isinstance(source.seed, int)
    copy = RandomSource(source.seed)
    assert source.random() == copy.random()
    assert repr(source) == "RandomSource<{!r}>".format(source.seed)
