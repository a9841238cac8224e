# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import diffevo.common.typing as tp


class Individual:
    """A candidate solution, with its own control parameters.

    Parameters
    ----------
    position: np.ndarray
        the point in the search space (its size never changes)
    cost: optional
        the cost at this position, None if not evaluated (the lower, the better)
    cr: float
        crossover probability of this individual
    f: float
        differential weight of this individual
    """

    __slots__ = ("position", "cost", "cr", "f")

    def __init__(self, position: np.ndarray, cost: tp.Any = None, cr: float = 0.0, f: float = 0.0) -> None:
        self.position = position
        self.cost = cost
        self.cr = cr
        self.f = f

    @classmethod
    def empty(cls, dimension: int) -> "Individual":
        """Unevaluated individual at the origin, with null control parameters"""
        return cls(np.zeros(dimension, dtype=float))

    def __repr__(self) -> str:
        return f"Individual<cost: {self.cost}, cr: {self.cr:.3f}, f: {self.f:.3f}, position: {self.position}>"
