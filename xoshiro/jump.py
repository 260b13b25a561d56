"""
Jump functions.

All the generators in this package have a linear transition over GF(2),
so advancing the state by ``N`` steps is the same as evaluating the polynomial
``x**N mod P(x)`` at the transition matrix, where ``P`` is the characteristic polynomial
of the transition.
The coefficients of such *jump polynomials* are stored as words of the generator's width,
lowest coefficients first.
The tables below are taken from the reference sources at http://xoshiro.di.unimi.it;
for other distances the polynomial can be computed with :py:func:`jump_polynomial`.
"""

import functools
import logging
from typing import Any

import numpy

from .helpers import word_bits, word_mask

logger = logging.getLogger(__name__)


# Advances xoshiro128 by 2**64 steps.
XOSHIRO128_JUMP = (0x8764000B, 0xF542D2D3, 0x6FA035C3, 0x77F2DB5B)

# Advances xoshiro256 by 2**128 steps.
XOSHIRO256_JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)

# Advances xoshiro512 by 2**256 steps.
XOSHIRO512_JUMP = (
    0x33ED89B6E7A353F9,
    0x760083D7955323BE,
    0x2837F2FBB5F22FAE,
    0x4B8C5674D309511C,
    0xB11AC47A7BA28C25,
    0xF1BE7667092BCC1C,
    0x53851EFDB6DF0AAF,
    0x1EBBC8B23EAF25DB,
)

# Advances xoroshiro128 by 2**64 steps.
XOROSHIRO128_JUMP = (0xDF900294D8F554A5, 0x170865DF4B3201FC)


def jump_state(rng: Any, polynomial: tuple[int, ...]) -> None:
    """
    Replaces the state of ``rng`` with the one it would have
    after ``N`` native steps, where ``polynomial`` is the jump polynomial for ``N``.
    Takes ``len(polynomial) * word_bits`` native steps.
    """
    state = rng._s
    bits = word_bits(rng.word_dtype)
    accumulator = numpy.zeros_like(state)
    for word in polynomial:
        for b in range(bits):
            if word & (1 << b):
                accumulator ^= state
            rng._next()
    state[:] = accumulator


def berlekamp_massey(bits: list[int]) -> tuple[int, int]:
    """
    Finds the shortest linear recurrence over GF(2) generating the sequence ``bits``.
    Returns the connection polynomial ``C`` (bit ``i`` is the coefficient of ``x**i``)
    and the length ``L`` of the recurrence, so that
    ``bits[n] = sum(C_i * bits[n - i] for i in 1..L)``.
    """
    connection = 1
    previous = 1
    length = 0
    shift = 1

    # bit ``i`` of the window is ``bits[n - i]``
    window = 0

    for n, bit in enumerate(bits):
        window = (window << 1) | bit
        discrepancy = bin(connection & window).count("1") & 1
        if discrepancy == 0:
            shift += 1
            continue

        updated = connection ^ (previous << shift)
        if 2 * length <= n:
            previous = connection
            length = n + 1 - length
            shift = 1
        else:
            shift += 1
        connection = updated

    return connection, length


def reverse_polynomial(poly: int, degree: int) -> int:
    """Returns ``x**degree * poly(1/x)``."""
    result = 0
    for i in range(degree + 1):
        if poly & (1 << i):
            result |= 1 << (degree - i)
    return result


def mulmod(a: int, b: int, modulus: int, degree: int) -> int:
    """
    Multiplies two polynomials over GF(2) modulo ``modulus`` of degree ``degree``.
    ``a`` must be already reduced.
    """
    result = 0
    while b:
        if b & 1:
            result ^= a
        b >>= 1
        a <<= 1
        if a & (1 << degree):
            a ^= modulus
    return result


def characteristic_polynomial(rng_cls: Any) -> int:
    """
    Returns the characteristic polynomial of the transition of ``rng_cls``
    (bit ``i`` is the coefficient of ``x**i``).
    Uses the lowest bit of the first state word of a generator seeded with ``0``.
    """
    rng = rng_cls.from_seed_u64(0)
    state_bits = rng_cls.state_words * word_bits(rng_cls.word_dtype)

    bits = []
    for _ in range(2 * state_bits):
        bits.append(int(rng._s[0]) & 1)
        rng._next()

    connection, length = berlekamp_massey(bits)

    # The transitions have primitive characteristic polynomials,
    # so the minimal polynomial of any non-zero bit sequence coincides with them.
    if length != state_bits:
        raise RuntimeError(
            f"Expected a recurrence of length {state_bits} for {rng_cls.__name__}, got {length}"
        )

    return reverse_polynomial(connection, length)


@functools.lru_cache(maxsize=None)
def jump_polynomial(rng_cls: Any, exponent: int) -> tuple[int, ...]:
    """
    Computes the jump polynomial advancing ``rng_cls`` by ``2**exponent`` native steps,
    packed in words of its native width, suitable for :py:func:`jump_state`.
    """
    if exponent < 0:
        raise ValueError(f"The jump exponent must be non-negative, got {exponent}")

    modulus = characteristic_polynomial(rng_cls)
    degree = modulus.bit_length() - 1

    power = 2  # the polynomial ``x``
    for _ in range(exponent):
        power = mulmod(power, power, modulus, degree)

    bits = word_bits(rng_cls.word_dtype)
    mask = word_mask(rng_cls.word_dtype)
    words = tuple((power >> (i * bits)) & mask for i in range(rng_cls.state_words))

    logger.debug(
        "Computed the jump polynomial for %s and 2**%d steps (degree %d)",
        rng_cls.__name__,
        exponent,
        degree,
    )

    return words
