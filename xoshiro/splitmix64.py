"""
SplitMix64, a counter-based generator with a single 64-bit word of state.

Translated from the ``splitmix64.c`` reference source by Sebastiano Vigna.
It is not used on its own in this package, but serves to expand a 64-bit seed
into the larger states required by the xoshiro family.
"""

from typing import Any

import numpy

from .errors import SeedSizeError
from .helpers import UINT64, IgnoreIntegerOverflow, fill_bytes, words_from_bytes

GAMMA = numpy.uint64(0x9E3779B97F4A7C15)  # golden ratio
MIX_MULTIPLIERS = (numpy.uint64(0xBF58476D1CE4E5B9), numpy.uint64(0x94D049BB133111EB))
MIX_SHIFTS = (numpy.uint64(30), numpy.uint64(27), numpy.uint64(31))


def check_seed_u64(seed: int) -> int:
    if not 0 <= seed < 2**64:
        raise ValueError(f"The seed must be a 64-bit unsigned integer, got {seed}")
    return seed


class SplitMix64:
    """
    A SplitMix64 generator.

    :param state: the initial value of the 64-bit counter.
    """

    word_dtype = UINT64
    seed_size = 8

    def __init__(self, state: int):
        self._x = numpy.uint64(check_seed_u64(state))

    @classmethod
    def from_seed(cls, seed: bytes) -> "SplitMix64":
        """Creates a generator from 8 little-endian bytes."""
        if len(seed) != cls.seed_size:
            raise SeedSizeError(
                f"SplitMix64 requires a seed of {cls.seed_size} bytes, got {len(seed)}"
            )
        return cls(int(words_from_bytes(seed, cls.word_dtype)[0]))

    @classmethod
    def from_seed_u64(cls, seed: int) -> "SplitMix64":
        """Creates a generator from a 64-bit integer."""
        return cls(seed)

    @classmethod
    def from_rng(cls, rng: Any) -> "SplitMix64":
        """Creates a generator seeded with 8 bytes taken from another generator."""
        seed = bytearray(cls.seed_size)
        rng.fill(seed)
        return cls.from_seed(bytes(seed))

    def next_u64(self) -> int:
        with IgnoreIntegerOverflow():
            self._x += GAMMA
            z = self._x
            z = (z ^ (z >> MIX_SHIFTS[0])) * MIX_MULTIPLIERS[0]
            z = (z ^ (z >> MIX_SHIFTS[1])) * MIX_MULTIPLIERS[1]
            return int(z ^ (z >> MIX_SHIFTS[2]))

    def next_u32(self) -> int:
        return self.next_u64() & 0xFFFFFFFF

    def fill(self, buffer: Any) -> None:
        fill_bytes(buffer, self.next_u64, self.word_dtype.itemsize)

    def clone(self) -> "SplitMix64":
        return SplitMix64(int(self._x))

    def __repr__(self) -> str:
        return f"SplitMix64({int(self._x)})"
