"""
Pseudo-random number generators of the xoshiro/xoroshiro family
by David Blackman and Sebastiano Vigna,
`ACM Trans. Math. Softw. 47 (2021) <https://doi.org/10.1145/3460772>`_,
with the reference sources at http://xoshiro.di.unimi.it.

A generator has a small state of 2, 4 or 8 words (``uint32`` or ``uint64``),
a linear transition function (xor, shift and rotate)
and a non-linear output function (the *scrambler*) applied to the state before the transition.
There are two scramblers: ``+`` (sum of two state words, fastest, but with
low linear complexity of the lowest bits) and ``**`` (multiplication, rotation, multiplication).

A generator can be seeded with a byte sequence of the size of its state
(:py:meth:`~xoshiro.engines.Engine.from_seed`), or with a single 64-bit integer,
which is expanded into the full state with :py:class:`~xoshiro.splitmix64.SplitMix64`
(:py:meth:`~xoshiro.engines.Engine.from_seed_u64`).
The generators are not suitable for cryptographic purposes.

Every generator supports :py:meth:`~xoshiro.engines.Engine.jump`, which advances the state
by a large power of 2 steps in a time proportional to the size of the state.
Applied repeatedly to clones of a single generator, it produces
non-overlapping streams for parallel workers without any coordination between them:

.. code-block:: python

    rng = Xoshiro256StarStar.from_seed_u64(123)
    streams = []
    for _ in range(workers):
        streams.append(rng.clone())
        rng.jump()
"""

from .discovery import (
    engine_names,
    get_engine,
    supported_engine_names,
    supports_engine,
    supports_simd,
    xoshiro128starstar_engine,
)
from .engines import (
    ENGINES,
    Engine,
    Xoroshiro64Star,
    Xoroshiro64StarStar,
    Xoroshiro128Plus,
    Xoroshiro128StarStar,
    Xoshiro128Plus,
    Xoshiro128StarStar,
    Xoshiro256Plus,
    Xoshiro256StarStar,
    Xoshiro512Plus,
    Xoshiro512StarStar,
)
from .errors import SeedSizeError, ZeroSeedError
from .jump import jump_polynomial
from .simd import Xoshiro128StarStarX4
from .splitmix64 import SplitMix64

VERSION = (0, 1, 0)
