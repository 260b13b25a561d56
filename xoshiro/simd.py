"""
A lane-parallel version of xoshiro128**.

The four 32-bit state words are kept in a single 4-lane register,
represented by a ``numpy`` array of signed 32-bit integers
(the way integer vector registers are typed in SSE intrinsics).
The transition is expressed with lane shuffles, xors and blends
instead of indexing individual words.
The final step, inserting the rotated last word back into the register,
needs a lane blend, which on x86 is only available starting from SSE4.1;
use :py:func:`xoshiro.discovery.supports_simd` to check for it
and :py:func:`xoshiro.discovery.xoshiro128starstar_engine` to get a scalar fallback.
"""

from typing import Any

import numpy
from numpy.typing import NDArray

from . import jump as jumps
from .engines import Engine
from .helpers import UINT32, IgnoreIntegerOverflow, rotate_left
from .scramblers import starstar

LANES = 4
LANE_DTYPE = numpy.dtype(numpy.int32)


class Lanes:
    """
    Operations on a 4-lane register.
    All reinterpretations between signed and unsigned lanes go through
    :py:meth:`as_unsigned` and :py:meth:`as_signed`, which only change the view
    and never the bit patterns.
    """

    ZERO = numpy.zeros(LANES, LANE_DTYPE)

    @staticmethod
    def as_unsigned(v: NDArray[Any]) -> NDArray[Any]:
        return v.view(numpy.uint32)

    @staticmethod
    def as_signed(v: NDArray[Any]) -> NDArray[Any]:
        return v.view(numpy.int32)

    @staticmethod
    def mask(*lanes: int) -> NDArray[numpy.bool_]:
        result = numpy.zeros(LANES, numpy.bool_)
        result[list(lanes)] = True
        return result

    @staticmethod
    def shuffle(v: NDArray[Any], order: tuple[int, int, int, int]) -> NDArray[Any]:
        """Lane ``i`` of the result is lane ``order[i]`` of ``v``."""
        return v.take(order)

    @staticmethod
    def blend(a: NDArray[Any], b: NDArray[Any], mask: NDArray[numpy.bool_]) -> NDArray[Any]:
        """Takes lanes from ``b`` where ``mask`` is set, and from ``a`` elsewhere."""
        return numpy.where(mask, b, a)

    @staticmethod
    def shift_left(v: NDArray[Any], shift: int) -> NDArray[Any]:
        return Lanes.as_signed(Lanes.as_unsigned(v) << numpy.uint32(shift))

    @staticmethod
    def rotate_left(v: NDArray[Any], shift: int) -> NDArray[Any]:
        return Lanes.as_signed(rotate_left(Lanes.as_unsigned(v), shift))


class Xoshiro128StarStarX4(Engine):
    """
    xoshiro128** with the state in a 4-lane register.
    Produces exactly the same sequence as :py:class:`~xoshiro.engines.Xoshiro128StarStar`
    for the same seed.
    """

    name = "xoshiro128starstar_x4"
    word_dtype = UINT32
    state_words = 4
    jump_exponent = 64
    JUMP = jumps.XOSHIRO128_JUMP

    # s2 ^= s0; s3 ^= s1
    _HIGH = Lanes.mask(2, 3)
    _FROM_LOW = (0, 0, 0, 1)

    # s0 ^= s3; s1 ^= s2
    _LOW = Lanes.mask(0, 1)
    _FROM_HIGH = (3, 2, 2, 3)

    # s2 ^= s1 << 9
    _THIRD = Lanes.mask(2)
    _FROM_SECOND = (1, 1, 1, 1)

    # s3 = rotate_left(s3, 11)
    _LAST = Lanes.mask(3)

    @classmethod
    def _load(cls, state: Any) -> NDArray[Any]:
        return Lanes.as_signed(super()._load(state)).copy()

    @property
    def state(self) -> NDArray[Any]:
        return Lanes.as_unsigned(self._s).copy()

    def _next(self) -> int:
        v = self._s

        with IgnoreIntegerOverflow():
            result = starstar(Lanes.as_unsigned(v)[0], 5, 7, 9)

        shifted = Lanes.shuffle(Lanes.shift_left(v, 9), self._FROM_SECOND)
        t = Lanes.blend(Lanes.ZERO, shifted, self._THIRD)

        v ^= Lanes.blend(Lanes.ZERO, Lanes.shuffle(v, self._FROM_LOW), self._HIGH)
        v ^= Lanes.blend(Lanes.ZERO, Lanes.shuffle(v, self._FROM_HIGH), self._LOW)
        v ^= t
        v[:] = Lanes.blend(v, Lanes.rotate_left(v, 11), self._LAST)

        return int(result)
