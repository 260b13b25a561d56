"""
This module contains functions for engine discovery.
"""

import logging

from .engines import ENGINES, Engine, Xoshiro128StarStar
from .simd import Xoshiro128StarStarX4

logger = logging.getLogger(__name__)


# CPU features (as named by numpy) providing a lane blend instruction:
# SSE4.1 on x86, Advanced SIMD on ARM.
BLEND_FEATURES = ("SSE41", "ASIMD", "NEON")


def cpu_features() -> dict[str, bool]:
    """
    Returns the CPU feature table detected by ``numpy`` at runtime,
    or an empty dictionary if this ``numpy`` build does not provide one.
    """
    try:
        from numpy._core._multiarray_umath import __cpu_features__
    except ImportError:
        return {}
    result: dict[str, bool] = __cpu_features__
    return result


def supports_simd() -> bool:
    """
    Returns ``True`` if the lane-parallel engine
    can be backed by vector instructions on this machine.
    """
    features = cpu_features()
    available = [name for name in BLEND_FEATURES if features.get(name, False)]
    logger.debug("Lane blend features available: %s", available)
    return len(available) > 0


def engine_names() -> list[str]:
    """
    Returns a list of identifiers for all known
    (not necessarily accelerated on the current system) engines.
    """
    return [engine.name for engine in ENGINES] + [Xoshiro128StarStarX4.name]


def get_engine(name: str) -> type[Engine]:
    """Returns the engine class for the given identifier."""
    for engine in ENGINES:
        if engine.name == name:
            return engine
    if name == Xoshiro128StarStarX4.name:
        return Xoshiro128StarStarX4
    raise ValueError("Unrecognized engine: " + str(name))


def supports_engine(name: str) -> bool:
    """
    Returns ``True`` if the given engine is known
    and, for the lane-parallel one, supported by the CPU.
    """
    try:
        engine = get_engine(name)
    except ValueError:
        return False

    if engine is Xoshiro128StarStarX4:
        return supports_simd()
    return True


def supported_engine_names() -> list[str]:
    """Returns a list of identifiers of supported engines."""
    return [name for name in engine_names() if supports_engine(name)]


def xoshiro128starstar_engine(*, simd: bool | None = None) -> type[Engine]:
    """
    Returns the lane-parallel xoshiro128** engine if it is supported,
    or the scalar one otherwise.
    Both produce the same sequences.

    :param simd: ``None`` to detect automatically, ``True`` to require the lane-parallel engine
        (raises ``ValueError`` if not supported), ``False`` to use the scalar one.
    """
    if simd is None:
        simd = supports_simd()
    elif simd and not supports_simd():
        raise ValueError("The lane-parallel engine is not supported on this machine")

    if simd:
        logger.debug("Using the lane-parallel xoshiro128** engine")
        return Xoshiro128StarStarX4

    logger.debug("Falling back to the scalar xoshiro128** engine")
    return Xoshiro128StarStar
