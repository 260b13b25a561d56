import numpy

from xoshiro import (
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
    supports_simd,
)


def reference_seed(engine):
    """
    The seed used to produce the reference outputs:
    the state words are ``1, 2, 3, ...`` in little-endian order.
    """
    itemsize = engine.word_dtype.itemsize
    return b"".join(
        (i + 1).to_bytes(itemsize, "little") for i in range(engine.state_words)
    )


class EngineHelper:
    """
    An engine together with the first native outputs
    of the reference implementation seeded with :py:func:`reference_seed`.
    """

    def __init__(self, engine, reference):
        self.engine = engine
        self.reference = reference
        self.name = engine.name

    @property
    def bits(self):
        return self.engine.word_dtype.itemsize * 8

    def reference_rng(self):
        return self.engine.from_seed(reference_seed(self.engine))

    def __str__(self):
        return self.name


def simd_comparison_enabled(option):
    """
    Decides whether the lane-parallel engine is compared with the scalar one,
    given the value of the ``--simd`` option.
    """
    if option == "no":
        return False
    if option == "always":
        return True
    return supports_simd()


ENGINE_HELPERS = [
    # http://xoshiro.di.unimi.it/xoshiro128starstar.c
    EngineHelper(
        Xoshiro128StarStar,
        [
            5760, 40320, 70819200, 3297914139, 2480851620,
            1792823698, 4118739149, 1251203317, 1581886583, 1721184582,
        ],
    ),
    # http://xoshiro.di.unimi.it/xoshiro128plus.c
    EngineHelper(
        Xoshiro128Plus,
        [
            5, 12295, 25178119, 27286542, 39879690,
            1140358681, 3276312097, 4110231701, 399823256, 2144435200,
        ],
    ),
    # http://xoshiro.di.unimi.it/xoshiro256starstar.c
    EngineHelper(
        Xoshiro256StarStar,
        [
            11520, 0, 1509978240, 1215971899390074240, 1216172134540287360,
            607988272756665600, 16172922978634559625, 8476171486693032832,
            10595114339597558777, 2904607092377533576,
        ],
    ),
    # http://xoshiro.di.unimi.it/xoshiro256plus.c
    EngineHelper(
        Xoshiro256Plus,
        [
            5, 211106232532999, 211106635186183, 9223759065350669058,
            9250833439874351877, 13862484359527728515, 2346507365006083650,
            1168864526675804870, 34095955243042024, 3466914240207415127,
        ],
    ),
    # http://xoshiro.di.unimi.it/xoshiro512starstar.c
    EngineHelper(
        Xoshiro512StarStar,
        [
            11520, 0, 23040, 23667840, 144955163520, 303992986974289920,
            25332796375735680, 296904390158016, 13911081092387501979,
            15304787717237593024,
        ],
    ),
    # Derived by hand from the algorithm in xoshiro512plus.c
    EngineHelper(Xoshiro512Plus, [4, 8, 4113, 25169936]),
    # Derived by hand from the algorithm in xoroshiro128starstar.c
    EngineHelper(Xoroshiro128StarStar, [5760, 97769243520, 9706862127477703552]),
    # http://xoshiro.di.unimi.it/xoroshiro128plus.c
    EngineHelper(
        Xoroshiro128Plus,
        [
            3, 412333834243, 2360170716294286339, 9295852285959843169,
            2797080929874688578, 6019711933173041966, 3076529664176959358,
            3521761819100106140, 7493067640054542992, 920801338098114767,
        ],
    ),
    # http://xoshiro.di.unimi.it/xoroshiro64starstar.c
    EngineHelper(
        Xoroshiro64StarStar,
        [
            3802928447, 813792938, 1618621494, 2955957307, 3252880261,
            1129983909, 2539651700, 1327610908, 1757650787, 2763843748,
        ],
    ),
    # Derived by hand from the algorithm in xoroshiro64star.c
    EngineHelper(Xoroshiro64Star, [2654435771, 327208753]),
]


def uniform_mean_and_std(min, max):
    return (min + max) / 2.0, (max - min) / numpy.sqrt(12)


def check_uniform(arr, bits):
    """
    Checks that the mean and the variance of ``arr``
    are compatible with a uniform distribution of ``bits``-bit integers.
    """
    arr = arr.astype(numpy.float64) / 2.0**bits
    mean, std = uniform_mean_and_std(0, 1)

    # expected mean and std of the mean of the sample array
    m_std = std / numpy.sqrt(arr.size)
    assert abs(arr.mean() - mean) < 5 * m_std  # about 1e-6 chance of fail

    # expected mean and std of the variance of the sample array;
    # for the uniform distribution the fourth central moment is 9/5 std**4
    v_std = numpy.sqrt((9.0 / 5 - 1) * std**4 / arr.size)
    assert abs(arr.var() - std**2) < 5 * v_std
