"""
Output functions of the xoshiro family.
They map the state words *before* the transition to the output word.

All functions take numpy unsigned scalars and must be called
inside :py:class:`~xoshiro.helpers.IgnoreIntegerOverflow`,
since the arithmetic is modular by design.
"""

from typing import Any

from .helpers import rotate_left


def starstar(x: Any, multiplier: int, rotation: int, post_multiplier: int) -> Any:
    """
    The ``**`` scrambler: multiplication, rotation and another multiplication.

    :param x: the state word the output is based on.
    :param multiplier: ``5`` for most generators, ``0x9E3779BB`` for ``xoroshiro64**``.
    :param rotation: ``7`` for most generators, ``5`` for ``xoroshiro64**``.
    :param post_multiplier: ``9`` for most generators, ``5`` for ``xoroshiro64**``.
    """
    word = x.dtype.type
    return rotate_left(x * word(multiplier), rotation) * word(post_multiplier)


def star(x: Any, multiplier: int) -> Any:
    """The ``*`` scrambler: a single multiplication."""
    return x * x.dtype.type(multiplier)


def plus(x: Any, y: Any) -> Any:
    """The ``+`` scrambler: a sum of two state words."""
    return x + y
