"""Pseudo random numbers for game events."""

from __future__ import annotations

import random
import time

_RND_BITS = 15


class Dice:
    """Random number source; seeded from the clock unless a seed is given."""

    def __init__(self, seed=None):
        if seed is None:
            seed = int(time.time())
        self._random = random.Random(seed)

    def rnd(self):
        """Return a random integer from 0 to 2**15 - 1."""
        return self._random.getrandbits(_RND_BITS)

    def rndrange(self, a, b):
        """Return a random integer between a and b inclusive, in either order."""
        if a > b:
            a, b = b, a
        return self.rnd() % (b - a + 1) + a