# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Uniform samplers pulling from an explicitly provided random source.
None of them owns a random state: the source is passed at each call, so that
the population controls the order in which random numbers are drawn.
"""

import numpy as np
import diffevo.common.typing as tp
from diffevo.common import errors


DEFAULT_SEED = 2


def as_random_source(seed: tp.Seed = None) -> tp.RandomSource:
    """Converts a seed into a random source

    Parameters
    ----------
    seed: None, int or random source
        - None: a new deterministic source, seeded with DEFAULT_SEED
        - int: a new np.random.RandomState with this seed
        - object with "uniform" and "randint" methods (eg: np.random.RandomState): used as is
    """
    if seed is None:
        seed = DEFAULT_SEED
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        return np.random.RandomState(seed)
    if not all(callable(getattr(seed, name, None)) for name in ("uniform", "randint")):
        raise errors.DiffEvoTypeError(
            f"Random source must provide uniform and randint methods, got {type(seed).__name__}"
        )
    return seed


class Uniform:
    """Uniform sampler of real numbers in [low, high)
    Degenerate ranges (low == high) always provide low.
    """

    def __init__(self, low: float, high: float) -> None:
        if low > high:
            raise errors.DiffEvoValueError(f"Lower bound {low} must not be above upper bound {high}")
        self.low = float(low)
        self.high = float(high)

    def sample(self, random_source: tp.RandomSource) -> float:
        return float(random_source.uniform(self.low, self.high))

    def __repr__(self) -> str:
        return f"Uniform[{self.low}, {self.high})"


class UniformInt:
    """Uniform sampler of integers in [low, high)"""

    def __init__(self, low: int, high: int) -> None:
        if low >= high:
            raise errors.DiffEvoValueError(f"Empty integer range [{low}, {high})")
        self.low = int(low)
        self.high = int(high)

    def sample(self, random_source: tp.RandomSource) -> int:
        return int(random_source.randint(self.low, self.high))

    def __repr__(self) -> str:
        return f"UniformInt[{self.low}, {self.high})"
