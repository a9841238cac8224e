# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
import diffevo.common.typing as tp
from diffevo.common import errors
from . import corefuncs


@pytest.mark.parametrize("name", corefuncs.registry)  # type: ignore
def test_optimum(name: str) -> None:
    benchmark = corefuncs.registry[name]
    assert benchmark.name == name
    low, high = benchmark.search_range
    assert low <= benchmark.optimum < high
    value = benchmark(benchmark.optimum_position(4))
    np.testing.assert_almost_equal(value, 0.0, decimal=10)
    assert isinstance(value, float)
    # optimum is a minimum
    shifted = benchmark(benchmark.optimum_position(4) + np.array([0.1, -0.2, 0.3, 0.05]))
    assert shifted > value


@pytest.mark.parametrize(  # type: ignore
    "name,x,expected",
    [("sphere", [1, 2, 3], 14.0), ("sphere1", [1, 2, 3], 5.0), ("rastrigin", [1, 2], 5.0), ("rosenbrock", [0, 0], 1.0)],
)
def test_values(name: str, x: tp.List[float], expected: float) -> None:
    np.testing.assert_almost_equal(corefuncs.registry[name](np.array(x)), expected)


def test_registered_functions_are_unchanged() -> None:
    assert corefuncs.registry["sphere"].function is corefuncs.sphere
    assert corefuncs.sphere([3, 4]) == 25.0  # type: ignore


def test_bounds() -> None:
    benchmark = corefuncs.registry["ackley"]
    assert benchmark.bounds(3) == [(-32.768, 32.768)] * 3
    with pytest.raises(errors.DiffEvoValueError):
        benchmark.bounds(0)


def test_name_collision() -> None:
    with pytest.raises(errors.DiffEvoRuntimeError):
        corefuncs._benchmark(optimum=0.0, search_range=(-1.0, 1.0))(corefuncs.sphere)
    assert corefuncs.registry["sphere"].function is corefuncs.sphere
