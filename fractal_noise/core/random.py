# -*- coding: utf-8 -*-
"""Random data generation."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

import random


class RandomSource:

    """A seeded source of uniform random values.

    Each source owns its own generator, so two sources built from the same
    seed produce the same sequence no matter what else is drawing random
    numbers in the process.

    """

    def __init__(self, seed=None):
        """Create a new random source.

        :param seed: The seed to use; if None, a seed will be generated
                     and kept on the source so it can be reproduced
        :returns None:

        """
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self._seed = seed
        self._rng = random.Random(seed)

    def __repr__(self):
        return "RandomSource<{!r}>".format(self._seed)

    @property
    def seed(self):
        """Return the seed this source was created from."""
        return self._seed

    def random(self):
        """Return the next uniform value in [0, 1)."""
        return self._rng.random()
