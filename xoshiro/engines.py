"""
Generators of the xoshiro family.

Every generator is a combination of a transition function from :py:mod:`~xoshiro.kernels`
and an output function from :py:mod:`~xoshiro.scramblers`,
and exposes the same interface, defined in :py:class:`Engine`.
The algorithms are translated from the reference sources
by David Blackman and Sebastiano Vigna (http://xoshiro.di.unimi.it).
None of them is suitable for cryptographic purposes.
"""

from typing import Any

import numpy
from numpy.typing import NDArray

from . import jump as jumps
from .errors import SeedSizeError, ZeroSeedError
from .helpers import UINT32, UINT64, IgnoreIntegerOverflow, fill_bytes, words_from_bytes
from .kernels import xoroshiro_step, xoshiro_large_step, xoshiro_step
from .scramblers import plus, star, starstar
from .splitmix64 import SplitMix64


class Engine:
    """
    The base class for the generators.
    An engine owns its state exclusively and advances it in place on every call,
    so a single object must not be shared between threads.
    Use :py:meth:`clone` and :py:meth:`jump` to create independent streams.

    .. py:attribute:: name

        The identifier of the algorithm.

    .. py:attribute:: word_dtype

        The data type of the state words; its width is the native width of the output.

    .. py:attribute:: state_words

        The number of words in the state.

    .. py:attribute:: seed_size

        The number of bytes :py:meth:`from_seed` expects.

    .. py:attribute:: jump_exponent

        :py:meth:`jump` advances the state by ``2**jump_exponent`` native steps.

    :param state: a sequence of ``state_words`` integers.
        Unlike :py:meth:`from_seed`, does not check for degenerate states.
    """

    name: str
    seed_size: int
    word_dtype: numpy.dtype[Any]
    state_words: int
    jump_exponent: int

    # The published jump polynomial, if any.
    JUMP: tuple[int, ...] | None = None

    # For 64-bit generators, the position of the 32 bits ``next_u32()`` returns.
    narrowing_shift = 0

    # Whether an all-zero seed must be rejected.
    reject_zero_seed = False

    def __init__(self, state: Any):
        self._s = self._load(state)

    @classmethod
    def _load(cls, state: Any) -> NDArray[Any]:
        words = numpy.array(state, cls.word_dtype)
        if words.shape != (cls.state_words,):
            raise ValueError(
                f"{cls.__name__} requires a state of {cls.state_words} words, got {words.shape}"
            )
        return words

    def __init_subclass__(cls, **kwds: Any):
        super().__init_subclass__(**kwds)
        cls.seed_size = cls.state_words * cls.word_dtype.itemsize

    @classmethod
    def from_seed(cls, seed: bytes) -> "Engine":
        """
        Creates a generator from a little-endian byte sequence
        of length :py:attr:`seed_size`.
        Raises :py:class:`~xoshiro.errors.ZeroSeedError` if the seed is all zeros
        and the generator cannot start from a zero state.
        """
        if len(seed) != cls.seed_size:
            raise SeedSizeError(
                f"{cls.__name__} requires a seed of {cls.seed_size} bytes, got {len(seed)}"
            )
        words = words_from_bytes(seed, cls.word_dtype)
        if cls.reject_zero_seed and not words.any():
            raise ZeroSeedError(f"{cls.__name__}.from_seed() called with an all zero seed")
        return cls(words)

    @classmethod
    def from_seed_u64(cls, seed: int) -> "Engine":
        """
        Creates a generator from a 64-bit integer,
        expanding it to the full state with :py:class:`~xoshiro.splitmix64.SplitMix64`.
        """
        expander = SplitMix64.from_seed_u64(seed)
        words = numpy.array([expander.next_u64() for _ in range(cls.state_words)], UINT64)
        return cls(words.astype(cls.word_dtype))

    @classmethod
    def from_rng(cls, rng: Any) -> "Engine":
        """
        Creates a generator seeded with :py:attr:`seed_size` bytes
        taken from the ``fill()`` method of another generator.
        The same checks as in :py:meth:`from_seed` apply.
        """
        seed = bytearray(cls.seed_size)
        rng.fill(seed)
        return cls.from_seed(bytes(seed))

    @property
    def state(self) -> NDArray[Any]:
        """A copy of the current state."""
        return self._s.copy()

    def _next(self) -> int:
        """Returns the next output of the native width and advances the state."""
        raise NotImplementedError()

    def next_u32(self) -> int:
        if self.word_dtype == UINT32:
            return self._next()
        return (self._next() >> self.narrowing_shift) & 0xFFFFFFFF

    def next_u64(self) -> int:
        if self.word_dtype == UINT64:
            return self._next()
        low = self._next()
        high = self._next()
        return (high << 32) | low

    def random_raw(self, size: int) -> NDArray[Any]:
        """Returns an array of ``size`` consecutive native outputs."""
        return numpy.fromiter(
            (self._next() for _ in range(size)), dtype=self.word_dtype, count=size
        )

    def fill(self, buffer: Any) -> None:
        """
        Fills a writable bytes-like object (``bytearray``, ``memoryview``, ``numpy`` array)
        with native outputs in little-endian order.
        """
        fill_bytes(buffer, self._next, self.word_dtype.itemsize)

    @classmethod
    def jump_table(cls) -> tuple[int, ...]:
        if cls.JUMP is not None:
            return cls.JUMP
        return jumps.jump_polynomial(cls, cls.jump_exponent)

    def jump(self) -> None:
        """
        Advances the state by ``2**jump_exponent`` native steps.
        Can be used to generate non-overlapping subsequences for parallel computations:

        .. code-block:: python

            rng1 = Xoshiro256StarStar.from_seed_u64(0)
            rng2 = rng1.clone()
            rng2.jump()
            rng3 = rng2.clone()
            rng3.jump()
        """
        jumps.jump_state(self, self.jump_table())

    def jump_by(self, exponent: int) -> None:
        """Advances the state by ``2**exponent`` native steps."""
        jumps.jump_state(self, jumps.jump_polynomial(type(self), exponent))

    def clone(self) -> "Engine":
        return type(self)(self.state)

    def __copy__(self) -> "Engine":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Engine) or type(self) is not type(other):
            return False
        return bool((self.state == other.state).all())

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(hex(int(x)) for x in self.state)}])"


class Xoshiro128StarStar(Engine):
    """xoshiro128**, 128-bit state, 32-bit output."""

    name = "xoshiro128starstar"
    word_dtype = UINT32
    state_words = 4
    jump_exponent = 64
    JUMP = jumps.XOSHIRO128_JUMP

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = starstar(s[0], 5, 7, 9)
            xoshiro_step(s, 9, 11)
        return int(result)


class Xoshiro128Plus(Engine):
    """
    xoshiro128+, 128-bit state, 32-bit output.
    The lowest bits of the output have low linear complexity.
    """

    name = "xoshiro128plus"
    word_dtype = UINT32
    state_words = 4
    jump_exponent = 64
    JUMP = jumps.XOSHIRO128_JUMP

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = plus(s[0], s[3])
            xoshiro_step(s, 9, 11)
        return int(result)


class Xoshiro256StarStar(Engine):
    """xoshiro256**, 256-bit state, 64-bit output."""

    name = "xoshiro256starstar"
    word_dtype = UINT64
    state_words = 4
    jump_exponent = 128
    JUMP = jumps.XOSHIRO256_JUMP

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = starstar(s[1], 5, 7, 9)
            xoshiro_step(s, 17, 45)
        return int(result)


class Xoshiro256Plus(Engine):
    """
    xoshiro256+, 256-bit state, 64-bit output.
    The lowest bits of the output have low linear complexity.
    """

    name = "xoshiro256plus"
    word_dtype = UINT64
    state_words = 4
    jump_exponent = 128
    JUMP = jumps.XOSHIRO256_JUMP

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = plus(s[0], s[3])
            xoshiro_step(s, 17, 45)
        return int(result)


class Xoshiro512StarStar(Engine):
    """xoshiro512**, 512-bit state, 64-bit output."""

    name = "xoshiro512starstar"
    word_dtype = UINT64
    state_words = 8
    jump_exponent = 256
    JUMP = jumps.XOSHIRO512_JUMP

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = starstar(s[1], 5, 7, 9)
            xoshiro_large_step(s)
        return int(result)


class Xoshiro512Plus(Engine):
    """xoshiro512+, 512-bit state, 64-bit output."""

    name = "xoshiro512plus"
    word_dtype = UINT64
    state_words = 8
    jump_exponent = 256
    JUMP = jumps.XOSHIRO512_JUMP

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = plus(s[0], s[2])
            xoshiro_large_step(s)
        return int(result)


class Xoroshiro128StarStar(Engine):
    """xoroshiro128**, 128-bit state, 64-bit output. The seed must not be all zeros."""

    name = "xoroshiro128starstar"
    word_dtype = UINT64
    state_words = 2
    jump_exponent = 64
    JUMP = jumps.XOROSHIRO128_JUMP
    narrowing_shift = 32
    reject_zero_seed = True

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = starstar(s[0], 5, 7, 9)
            xoroshiro_step(s, 24, 16, 37)
        return int(result)


class Xoroshiro128Plus(Engine):
    """
    xoroshiro128+, 128-bit state, 64-bit output. The seed must not be all zeros.
    The lowest bits of the output have linear dependencies,
    so :py:meth:`next_u32` returns the upper half of the output.
    """

    name = "xoroshiro128plus"
    word_dtype = UINT64
    state_words = 2
    jump_exponent = 64
    JUMP = jumps.XOROSHIRO128_JUMP
    narrowing_shift = 32
    reject_zero_seed = True

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = plus(s[0], s[1])
            xoroshiro_step(s, 24, 16, 37)
        return int(result)


class Xoroshiro64StarStar(Engine):
    """
    xoroshiro64**, 64-bit state, 32-bit output. The seed must not be all zeros.
    There is no published jump polynomial, so the one for ``2**32`` steps
    is computed on the first call to :py:meth:`jump`.
    """

    name = "xoroshiro64starstar"
    word_dtype = UINT32
    state_words = 2
    jump_exponent = 32
    reject_zero_seed = True

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = starstar(s[0], 0x9E3779BB, 5, 5)
            xoroshiro_step(s, 26, 9, 13)
        return int(result)


class Xoroshiro64Star(Engine):
    """xoroshiro64*, 64-bit state, 32-bit output. The seed must not be all zeros."""

    name = "xoroshiro64star"
    word_dtype = UINT32
    state_words = 2
    jump_exponent = 32
    reject_zero_seed = True

    def _next(self) -> int:
        s = self._s
        with IgnoreIntegerOverflow():
            result = star(s[0], 0x9E3779BB)
            xoroshiro_step(s, 26, 9, 13)
        return int(result)


ENGINES = (
    Xoshiro128StarStar,
    Xoshiro128Plus,
    Xoshiro256StarStar,
    Xoshiro256Plus,
    Xoshiro512StarStar,
    Xoshiro512Plus,
    Xoroshiro128StarStar,
    Xoroshiro128Plus,
    Xoroshiro64StarStar,
    Xoroshiro64Star,
)
