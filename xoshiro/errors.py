class SeedSizeError(ValueError):
    """
    Thrown by ``from_seed()`` constructors
    if the seed length does not match the state size of the generator.
    """


class ZeroSeedError(ValueError):
    """
    Thrown by ``from_seed()`` constructors of two-word generators
    if the seed is all zeros (a fixed point of their transition function).
    """
