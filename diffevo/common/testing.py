# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Helpers shared by the test modules of the package.
"""

import typing as tp
import numpy as np


class RecordingFunction:
    """Cost function wrapper keeping a copy of each evaluated position

    Parameters
    ----------
    func: callable
        the cost function to wrap
    """

    def __init__(self, func: tp.Callable[[np.ndarray], tp.Any]) -> None:
        self.func = func
        self.positions: tp.List[np.ndarray] = []

    @property
    def num_calls(self) -> int:
        return len(self.positions)

    def __call__(self, x: np.ndarray) -> tp.Any:
        self.positions.append(np.array(x, copy=True))
        return self.func(x)


def assert_in_bounds(positions: tp.Any, bounds: tp.Sequence[tp.Tuple[float, float]]) -> None:
    """Checks that each row of positions lies in the [min, max) box,
    degenerate (v, v) ranges only accepting v.
    """
    positions = np.asarray(positions, dtype=float)
    assert positions.ndim == 2 and positions.shape[1] == len(bounds), f"Wrong shape {positions.shape}"
    for d, (low, high) in enumerate(bounds):
        column = positions[:, d]
        if low == high:
            np.testing.assert_array_equal(column, low, err_msg=f"Dimension {d} left its degenerate range")
        else:
            outside = column[(column < low) | (column >= high)]
            assert not outside.size, f"Values {outside} of dimension {d} are outside [{low}, {high})"


def evaluate_generation(population: tp.Any) -> None:
    """Performs as many evaluations as the population holds individuals"""
    for _ in range(population.pop_size):
        population.eval()
