# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
import diffevo.common.typing as tp
from diffevo.common import errors
from . import sampling


@pytest.mark.parametrize("seed,expected_seed", [(None, sampling.DEFAULT_SEED), (12, 12), (np.int64(7), 7)])  # type: ignore
def test_as_random_source_seeds(seed: tp.Any, expected_seed: int) -> None:
    source = sampling.as_random_source(seed)
    reference = np.random.RandomState(expected_seed)
    np.testing.assert_equal(source.uniform(0.0, 1.0), reference.uniform(0.0, 1.0))


def test_as_random_source_passthrough() -> None:
    source = np.random.RandomState(12)
    assert sampling.as_random_source(source) is source


# generators have no randint method
@pytest.mark.parametrize("seed", ["blublu", True, np.random.default_rng(12)], ids=["string", "boolean", "generator"])  # type: ignore
def test_as_random_source_errors(seed: tp.Any) -> None:
    with pytest.raises(errors.DiffEvoTypeError):
        sampling.as_random_source(seed)


def test_uniform() -> None:
    source = np.random.RandomState(12)
    sampler = sampling.Uniform(-2, 3)
    values = np.array([sampler.sample(source) for _ in range(1000)])
    assert np.all(values >= -2)
    assert np.all(values < 3)
    assert values.min() < -1.5 and values.max() > 2.5
    assert repr(sampler) == "Uniform[-2.0, 3.0)"


def test_uniform_degenerate() -> None:
    source = np.random.RandomState(12)
    sampler = sampling.Uniform(1.5, 1.5)
    assert all(sampler.sample(source) == 1.5 for _ in range(10))
    with pytest.raises(errors.DiffEvoValueError):
        sampling.Uniform(1, 0)


def test_uniform_int() -> None:
    source = np.random.RandomState(12)
    sampler = sampling.UniformInt(0, 4)
    values = {sampler.sample(source) for _ in range(200)}
    assert sorted(values) == [0, 1, 2, 3]
    assert all(isinstance(v, int) for v in values)
    with pytest.raises(errors.DiffEvoValueError):
        sampling.UniformInt(3, 3)
