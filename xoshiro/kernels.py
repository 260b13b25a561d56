"""
State transition functions of the xoshiro family.
Each one updates a state array in place;
the word width is taken from the array's data type.
"""

from typing import Any

from numpy.typing import NDArray

from .helpers import rotate_left


def xoshiro_step(s: NDArray[Any], shift: int, rotation: int) -> None:
    """
    The transition of a 4-word xoshiro generator.

    :param s: the state, an array of 4 ``uint32`` or ``uint64`` words.
    :param shift: ``9`` for 32-bit words, ``17`` for 64-bit words.
    :param rotation: ``11`` for 32-bit words, ``45`` for 64-bit words.
    """
    t = s[1] << s.dtype.type(shift)

    s[2] ^= s[0]
    s[3] ^= s[1]
    s[1] ^= s[2]
    s[0] ^= s[3]

    s[2] ^= t

    s[3] = rotate_left(s[3], rotation)


def xoshiro_large_step(s: NDArray[Any], shift: int = 11, rotation: int = 21) -> None:
    """
    The transition of the 8-word xoshiro512 generator.
    The order of the updates follows ``xoshiro512starstar.c``
    and is not a generalization of the 4-word one.
    """
    t = s[1] << s.dtype.type(shift)

    s[2] ^= s[0]
    s[5] ^= s[1]
    s[1] ^= s[2]
    s[7] ^= s[3]
    s[3] ^= s[4]
    s[4] ^= s[5]
    s[0] ^= s[6]
    s[6] ^= s[7]

    s[6] ^= t

    s[7] = rotate_left(s[7], rotation)


def xoroshiro_step(s: NDArray[Any], a: int, b: int, c: int) -> None:
    """
    The transition of a 2-word xoroshiro generator.

    :param s: the state, an array of 2 ``uint32`` or ``uint64`` words.
    :param a: first rotation, ``26`` for 32-bit words, ``24`` for 64-bit words.
    :param b: shift, ``9`` for 32-bit words, ``16`` for 64-bit words.
    :param c: second rotation, ``13`` for 32-bit words, ``37`` for 64-bit words.
    """
    s0 = s[0]
    s1 = s[1] ^ s0
    s[0] = rotate_left(s0, a) ^ s1 ^ (s1 << s.dtype.type(b))
    s[1] = rotate_left(s1, c)
