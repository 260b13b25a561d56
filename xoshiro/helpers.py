"""Various auxiliary functions which are used throughout the library."""

from collections.abc import Callable
from typing import Any

import numpy
from numpy.typing import NDArray

UINT32 = numpy.dtype(numpy.uint32)
UINT64 = numpy.dtype(numpy.uint64)


def word_bits(dtype: numpy.dtype[Any]) -> int:
    """Returns the number of bits in a word of the given ``dtype``."""
    return dtype.itemsize * 8


def word_mask(dtype: numpy.dtype[Any]) -> int:
    """Returns the mask covering all bits of a word of the given ``dtype``."""
    return (1 << word_bits(dtype)) - 1


class IgnoreIntegerOverflow:
    """Context manager for ignoring integer overflow in numpy operations on scalars."""

    def __enter__(self) -> None:
        self._settings = numpy.seterr(over="ignore")

    def __exit__(self, *args: object, **kwds: object) -> None:
        numpy.seterr(**self._settings)


def rotate_left(x: Any, shift: int) -> Any:
    """
    Rotates the bits of a numpy unsigned scalar (or an array of them) ``shift`` positions
    to the left, in the word width of its data type.
    """
    # Cast to the word type is required by numpy coercion rules.
    word = x.dtype.type
    bits = word_bits(x.dtype)
    return (x << word(shift)) | (x >> word(bits - shift))


def words_from_bytes(seed: bytes, dtype: numpy.dtype[Any]) -> NDArray[Any]:
    """
    Decodes a little-endian byte sequence into an array of words of the given ``dtype``.
    The length of ``seed`` must be a multiple of the word size.
    """
    return numpy.frombuffer(bytes(seed), dtype=dtype.newbyteorder("<")).astype(dtype)


def fill_bytes(buffer: Any, next_word: Callable[[], int], itemsize: int) -> None:
    """
    Fills a writable bytes-like object with little-endian words produced by ``next_word``.
    If the buffer size is not a multiple of ``itemsize``,
    the last word is truncated to fit.
    """
    view = memoryview(buffer).cast("B")
    if view.readonly:
        raise TypeError("The buffer must be writable")

    size = len(view)
    for offset in range(0, size, itemsize):
        chunk = next_word().to_bytes(itemsize, "little")
        end = min(offset + itemsize, size)
        view[offset:end] = chunk[: end - offset]
