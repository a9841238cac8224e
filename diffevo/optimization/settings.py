# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import warnings
import numpy as np
import diffevo.common.typing as tp
from diffevo.common import errors
from . import sampling


# pylint: disable=too-many-instance-attributes
class Settings:
    """Holds all settings of the self-adaptive differential evolution.
    Default values follow "Self-Adapting Control Parameters in Differential Evolution:
    A Comparative Study on Numerical Benchmark Problems" (Brest et al., 2006).

    Settings are frozen as soon as a population is built from them.

    Parameters
    ----------
    bounds: sequence of (min, max) tuples
        one pair per dimension, the population is initialized uniformly in [min, max)
        for each dimension. Beware that this is only the initial state, the search
        does go outside of this box.
    cost_function: callable
        the function to minimize. It takes a np.ndarray position and returns its cost,
        which can be any value supporting "<" and "<=" (float in most cases).
        It should always provide the same result for the same input.
    cr_min_max: tuple of floats
        minimum and maximum value for cr, the crossover control parameter.
        (0, 1) covers the full range of usable crossover rates.
    cr_change_probability: float
        probability to redraw the cr value of an individual at each generation.
        0.05, 0.1, 0.2 and 0.3 give similar results, 0.1 is a reasonable choice.
    f_min_max: tuple of floats
        minimum and maximum value for f, the amplification factor of the difference vector.
        f is rarely greater than 1 in literature, and f=0 degenerates into crossover without
        mutation, hence (0.1, 1.0).
    f_change_probability: float
        probability to redraw the f value of an individual at each generation.
    pop_size: int
        number of individuals. 100 is common in benchmarks, reasonable choices lie between 20 and 200.
    random_state: None, int or random source
        source of all random draws (see sampling.as_random_source). None provides a
        deterministic default source.
    """

    def __init__(
        self,
        bounds: tp.Bounds,
        cost_function: tp.CostFunction,
        *,
        cr_min_max: tp.Range = (0.0, 1.0),
        cr_change_probability: float = 0.1,
        f_min_max: tp.Range = (0.1, 1.0),
        f_change_probability: float = 0.1,
        pop_size: int = 100,
        random_state: tp.Seed = None,
    ) -> None:
        self._frozen = False
        bounds = tuple(tuple(float(b) for b in pair) for pair in bounds)
        if not bounds:
            raise errors.DiffEvoValueError("Need at least one element to optimize (bounds are empty)")
        for k, pair in enumerate(bounds):
            if len(pair) != 2:
                raise errors.DiffEvoValueError(f"Bounds must be (min, max) pairs, got {pair} for dimension {k}")
            _check_range(f"bounds[{k}]", pair)
        if not callable(cost_function):
            raise errors.DiffEvoTypeError(f"Cost function must be callable, got {type(cost_function).__name__}")
        for name, value in [("cr_min_max", cr_min_max), ("f_min_max", f_min_max)]:
            _check_range(name, value)
        for name, proba in [
            ("cr_change_probability", cr_change_probability),
            ("f_change_probability", f_change_probability),
        ]:
            if not 0 <= proba <= 1:
                raise errors.DiffEvoValueError(f"{name} must be in [0, 1] (got {proba})")
        if int(pop_size) != pop_size or pop_size < 3:
            raise errors.DiffEvoValueError(
                f"pop_size must be an integer of at least 3 to sample 3 distinct individuals (got {pop_size})"
            )
        if pop_size < 4:
            warnings.warn(
                f"With pop_size={pop_size}, donors are mostly the same individuals at each generation",
                errors.InefficientSettingsWarning,
            )
        self.bounds: tp.Tuple[tp.Tuple[float, float], ...] = bounds  # type: ignore
        self.cost_function = cost_function
        self.cr_min_max = (float(cr_min_max[0]), float(cr_min_max[1]))
        self.cr_change_probability = float(cr_change_probability)
        self.f_min_max = (float(f_min_max[0]), float(f_min_max[1]))
        self.f_change_probability = float(f_change_probability)
        self.pop_size = int(pop_size)
        self.random_state = sampling.as_random_source(random_state)

    @classmethod
    def default(cls, bounds: tp.Bounds, cost_function: tp.CostFunction) -> "Settings":
        """Default settings: cr in [0, 1) and f in [0.1, 1) redrawn with probability 0.1,
        100 individuals and a deterministic random source.
        For most problems this should be a fairly good parameter set.
        """
        return cls(bounds, cost_function)

    @property
    def dimension(self) -> int:
        return len(self.bounds)

    @property
    def frozen(self) -> bool:
        """bool: whether the settings are owned by a population, and can no longer change"""
        return self._frozen

    def freeze(self) -> None:
        """Prevents the settings from changing again"""
        super().__setattr__("_frozen", True)

    def __setattr__(self, name: str, value: tp.Any) -> None:
        if getattr(self, "_frozen", False):
            raise errors.FrozenSettingsError(
                f"Cannot set {name} on frozen settings, create new settings and a new population instead"
            )
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        name = getattr(self.cost_function, "__name__", self.cost_function.__class__.__name__)
        return (
            f"{self.__class__.__name__}(dimension={self.dimension}, pop_size={self.pop_size}, "
            f"cr_min_max={self.cr_min_max}, cr_change_probability={self.cr_change_probability}, "
            f"f_min_max={self.f_min_max}, f_change_probability={self.f_change_probability}, "
            f"cost_function={name})"
        )


def _check_range(name: str, value: tp.Sequence[float]) -> None:
    low, high = value
    if not np.isfinite([low, high]).all():
        raise errors.DiffEvoValueError(f"{name} must be finite (got {tuple(value)})")
    if low > high:
        raise errors.DiffEvoValueError(f"{name} minimum must not be above its maximum (got {tuple(value)})")
