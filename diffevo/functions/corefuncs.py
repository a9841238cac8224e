# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Classical continuous cost functions, all with a minimum value of 0.
Each of them is registered by name in :code:`registry`, along with the
coordinate value at its minimum and its usual search range.
"""

from math import exp, sqrt
import numpy as np
import diffevo.common.typing as tp
from diffevo.common import errors


class BenchmarkFunction(tp.NamedTuple):
    """Cost function registered for benchmarks and examples

    Parameters
    ----------
    name: str
        name of the function
    function: callable
        the cost function itself
    optimum: float
        value of every coordinate at the minimum
    search_range: tuple of floats
        (min, max) search range commonly used for each coordinate
    """

    name: str
    function: tp.Callable[[np.ndarray], float]
    optimum: float
    search_range: tp.Range

    def __call__(self, x: tp.ArrayLike) -> float:
        return self.function(x)  # type: ignore

    def bounds(self, dimension: int) -> tp.List[tp.Range]:
        """Bounds of the search box in the given dimension"""
        if dimension < 1:
            raise errors.DiffEvoValueError(f"Dimension must be at least 1 (got {dimension})")
        return [self.search_range] * dimension

    def optimum_position(self, dimension: int) -> np.ndarray:
        return np.full(dimension, self.optimum)


registry: tp.Dict[str, BenchmarkFunction] = {}


def _benchmark(optimum: float, search_range: tp.Range) -> tp.Callable[[tp.Callable[..., float]], tp.Callable[..., float]]:
    """Registers the decorated function, which is returned unchanged"""

    def register(func: tp.Callable[..., float]) -> tp.Callable[..., float]:
        name = func.__name__
        if name in registry:
            raise errors.DiffEvoRuntimeError(f'Benchmark function "{name}" is already registered')
        registry[name] = BenchmarkFunction(name, func, float(optimum), search_range)
        return func

    return register


@_benchmark(optimum=0.0, search_range=(-5.12, 5.12))
def sphere(x: np.ndarray) -> float:
    """Sum of squares. Any optimizer should solve this one."""
    x = np.asarray(x, dtype=float)
    assert x.ndim == 1
    return float(x.dot(x))


@_benchmark(optimum=1.0, search_range=(-5.12, 5.12))
def sphere1(x: np.ndarray) -> float:
    """Sphere translated to (1, ..., 1)"""
    return sphere(np.asarray(x, dtype=float) - 1.0)


@_benchmark(optimum=0.0, search_range=(-5.12, 5.12))
def ellipsoid(x: np.ndarray) -> float:
    """Sum of squares weighted from 1 to 10^6 (ill-conditioned)"""
    x = np.asarray(x, dtype=float)
    weights = 10 ** np.linspace(0, 6, x.size)
    return float(weights.dot(x ** 2))


@_benchmark(optimum=0.0, search_range=(-5.12, 5.12))
def rastrigin(x: np.ndarray) -> float:
    """Highly multimodal, local minima lie on the integer grid"""
    x = np.asarray(x, dtype=float)
    cosines = float(np.sum(np.cos(2 * np.pi * x)))
    return float(10 * (len(x) - cosines) + sphere(x))


@_benchmark(optimum=1.0, search_range=(-2.048, 2.048))
def rosenbrock(x: np.ndarray) -> float:
    x = np.asarray(x, dtype=float)
    shifted = x[:-1] - 1
    valley = x[:-1] ** 2 - x[1:]
    return float(100 * valley.dot(valley) + shifted.dot(shifted))


@_benchmark(optimum=0.0, search_range=(-32.768, 32.768))
def ackley(x: np.ndarray) -> float:
    x = np.asarray(x, dtype=float)
    dim = x.size
    mean_cos = float(np.sum(np.cos(2 * np.pi * x))) / dim
    return float(-20.0 * exp(-0.2 * sqrt(sphere(x) / dim)) - exp(mean_cos) + 20 + exp(1))


@_benchmark(optimum=0.0, search_range=(-600.0, 600.0))
def griewank(x: np.ndarray) -> float:
    x = np.asarray(x, dtype=float)
    product = float(np.prod(np.cos(x / np.sqrt(1 + np.arange(len(x))))))
    return 1 + sphere(x) / 4000.0 - product
