import re

import pytest

from helpers import ENGINE_HELPERS, simd_comparison_enabled
from xoshiro import Xoshiro128StarStarX4


def pytest_addoption(parser):
    parser.addoption(
        "--engine-include-mask",
        action="append",
        default=[],
        help="Run tests only for engines with names matching this regex (can be repeated)",
    )
    parser.addoption(
        "--engine-exclude-mask",
        action="append",
        default=[],
        help="Skip tests for engines with names matching this regex (can be repeated)",
    )
    parser.addoption(
        "--simd",
        action="store",
        default="supported",
        choices=["supported", "always", "no"],
        help=(
            "Compare the lane-parallel engine with the scalar one: "
            "if the CPU supports lane blends, always, or never"
        ),
    )


def name_matches_masks(name, includes, excludes):
    if len(includes) > 0 and not any(re.search(include, name) for include in includes):
        return False
    return not any(re.search(exclude, name) for exclude in excludes)


def pytest_generate_tests(metafunc):
    if "test_engine" in metafunc.fixturenames:
        includes = metafunc.config.option.engine_include_mask
        excludes = metafunc.config.option.engine_exclude_mask

        vals = [
            helper
            for helper in ENGINE_HELPERS
            if name_matches_masks(helper.name, includes, excludes)
        ]
        ids = [helper.name for helper in vals]
        metafunc.parametrize("test_engine", vals, ids=ids)


@pytest.fixture
def lane_engine(request):
    if not simd_comparison_enabled(request.config.option.simd):
        pytest.skip("Lane-parallel engine comparisons are disabled")
    return Xoshiro128StarStarX4
