# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import itertools
import numpy as np
import diffevo.common.typing as tp
from diffevo.common import errors
from . import sampling
from .individual import Individual
from .settings import Settings


logger = logging.getLogger(__name__)
_EvalCallBack = tp.Callable[["Population"], None]


class Population:  # pylint: disable=too-many-instance-attributes
    """Self-adaptive differential evolution population (DE/rand/1/bin,
    with control parameters cr and f evolving with each individual).

    The population holds two arrays of individuals with parallel indices:

    - :code:`current`: the generation being evaluated
    - :code:`best`: the best individual each slot has produced so far

    Each call to :code:`eval()` performs exactly one cost evaluation. Once all current
    individuals are evaluated, the next call updates the personal bests and breeds
    a new current generation before evaluating. This lets the caller stop at any
    point, either manually, through :code:`iter()` or through :code:`minimize`.

    Parameters
    ----------
    settings: Settings
        configuration of the algorithm. It is frozen and owned by the population
        afterwards (including its random state).

    Example
    -------
    >>> population = Population(Settings([(-10.0, 10.0)] * 5, corefuncs.sphere))
    >>> population.minimize(budget=10000)
    >>> cost, position = population.best()
    """

    def __init__(self, settings: Settings) -> None:
        if not isinstance(settings, Settings):
            raise errors.DiffEvoTypeError(f"Expected Settings instance, got {type(settings).__name__}")
        if settings.frozen:
            raise errors.DiffEvoRuntimeError(
                "Settings (and their random source) already belong to a population, create new settings instead"
            )
        settings.freeze()
        self._settings = settings
        dim = settings.dimension
        self._dim = dim  # positions never change size
        self._current = [Individual.empty(dim) for _ in range(settings.pop_size)]
        self._best = [Individual.empty(dim) for _ in range(settings.pop_size)]
        # index of the global best, which can be in current or best
        self._best_index: tp.Optional[int] = None
        self._best_cost: tp.Any = None  # cost of the global best, for quick access
        self._num_cost_evaluations = 0
        self._num_generations = 0
        self._countdown = settings.pop_size  # individuals of current still to be evaluated
        self._callbacks: tp.Dict[str, tp.List[_EvalCallBack]] = {}
        # samplers
        self._between_popsize = sampling.UniformInt(0, settings.pop_size)
        self._between_dim = sampling.UniformInt(0, dim)
        self._between_cr = sampling.Uniform(*settings.cr_min_max)
        self._between_f = sampling.Uniform(*settings.f_min_max)
        between_bounds = [sampling.Uniform(*pair) for pair in settings.bounds]
        rng = self._rng
        for indiv in self._current:
            indiv.cr = self._between_cr.sample(rng)
            indiv.f = self._between_f.sample(rng)
            for d, between in enumerate(between_bounds):
                indiv.position[d] = between.sample(rng)
        logger.debug("Initialized %s", self)

    @property
    def _rng(self) -> tp.RandomSource:
        """Random source of the settings, all draws must be pulled from it"""
        return self._settings.random_state

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def dimension(self) -> int:
        """int: Dimension of the optimization space."""
        return self._dim

    @property
    def pop_size(self) -> int:
        return self._settings.pop_size

    @property
    def num_cost_evaluations(self) -> int:
        """int: Number of times the cost function was evaluated."""
        return self._num_cost_evaluations

    @property
    def best_cost(self) -> tp.Any:
        """Cost of the best evaluation so far (None before the first evaluation)"""
        return self._best_cost

    @property
    def num_generations(self) -> int:
        """int: Number of new generations bred since initialization."""
        return self._num_generations

    def register_callback(self, name: str, callback: _EvalCallBack) -> None:
        """Add a callback method called after each evaluation, with the population as
        only argument. This can be useful for custom logging or early stopping.

        Parameters
        ----------
        name: str
            name of the method to register the callback for (only :code:`eval` for now)
        callback: callable
            a callable taking the population as argument
        """
        if name != "eval":
            raise errors.DiffEvoRuntimeError(f'Only "eval" method can have callbacks (not {name})')
        self._callbacks.setdefault(name, []).append(callback)

    def remove_all_callbacks(self) -> None:
        """Removes all registered callables"""
        self._callbacks = {}

    def update_best(self) -> None:
        """Replaces each personal best by the current individual of the same slot
        if it is at least as good.
        """
        for i, (curr, best) in enumerate(zip(self._current, self._best)):
            # "<=" so that the individual moves even if the cost stays the same.
            # Incomparable costs (eg: nan) never replace an evaluated best.
            if best.cost is None or (curr.cost is not None and curr.cost <= best.cost):
                # swapping is much faster than copying
                self._current[i], self._best[i] = best, curr

    def update_positions(self) -> None:
        """Breeds a new current generation from the personal bests (DE/rand/1/bin),
        along with self-adapted control parameters. All new individuals are unevaluated.
        """
        rng = self._rng
        settings = self._settings
        for curr, best in zip(self._current, self._best):
            # sample 3 different individuals
            id1 = self._between_popsize.sample(rng)
            id2 = self._between_popsize.sample(rng)
            while id2 == id1:
                id2 = self._between_popsize.sample(rng)
            id3 = self._between_popsize.sample(rng)
            while id3 in (id1, id2):
                id3 = self._between_popsize.sample(rng)
            # see "Self-Adapting Control Parameters in Differential Evolution:
            # A Comparative Study on Numerical Benchmark Problems"
            if rng.uniform(0.0, 1.0) < settings.cr_change_probability:
                curr.cr = self._between_cr.sample(rng)
            else:
                curr.cr = best.cr
            if rng.uniform(0.0, 1.0) < settings.f_change_probability:
                curr.f = self._between_f.sample(rng)
            else:
                curr.f = best.f
            pos1, pos2, pos3 = (self._best[k].position for k in (id1, id2, id3))
            # at least one dimension is always mutated
            forced_mutation_dim = self._between_dim.sample(rng)
            # DE/rand/1/bin, see "A Comparative Study of Differential Evolution Variants
            # for Global Optimization" (2006)
            for d in range(self._dim):
                if d == forced_mutation_dim or rng.uniform(0.0, 1.0) < curr.cr:
                    curr.position[d] = pos3[d] + curr.f * (pos1[d] - pos2[d])
                else:
                    curr.position[d] = best.position[d]
            curr.cost = None  # must be evaluated again

    def eval(self) -> None:
        """Performs a single cost evaluation, and evolves the population first
        if the whole current generation has already been evaluated.

        Note
        ----
        Exceptions raised by the cost function are not caught. Callbacks run after the
        evaluation, so an early stopping callback does not cancel it.
        """
        if not self._countdown:
            self.update_best()
            self.update_positions()
            self._countdown = self.pop_size
            self._num_generations += 1
            logger.debug("Bred generation %s, best cost is %s", self._num_generations, self._best_cost)
        # individuals are evaluated from the last one to the first one
        self._countdown -= 1
        index = self._countdown
        curr = self._current[index]
        position = curr.position.view()
        position.flags.writeable = False  # protects the population from the cost function
        curr.cost = self._settings.cost_function(position)
        self._num_cost_evaluations += 1
        if self._best_index is None or curr.cost < self._best_cost:
            self._best_cost = curr.cost
            self._best_index = index
        for callback in self._callbacks.get("eval", []):
            callback(self)

    def best(self) -> tp.Optional[tp.Tuple[tp.Any, np.ndarray]]:
        """Provides the best (cost, position) found so far, or None if nothing was evaluated yet.
        The position is a copy.
        """
        if self._best_index is None:
            return None
        curr = self._current[self._best_index]
        best = self._best[self._best_index]
        # the global best may have been moved to the best array during selection
        if curr.cost is None:
            chosen = best
        elif best.cost is None:
            chosen = curr
        else:
            chosen = curr if curr.cost < best.cost else best
        return chosen.cost, np.array(chosen.position, copy=True)

    def iter(self) -> "PopulationIterator":
        """Iterator for this population, each step performs one cost evaluation
        and provides the best cost found so far.
        """
        return PopulationIterator(self)

    def __iter__(self) -> "PopulationIterator":
        return self.iter()

    def minimize(
        self, budget: tp.Optional[int] = None, threshold: tp.Optional[tp.Any] = None
    ) -> tp.Optional[tp.Tuple[tp.Any, np.ndarray]]:
        """Evaluates until a stopping condition is reached

        Parameters
        ----------
        budget: int (optional)
            maximum total number of cost evaluations for this population (evaluations performed
            before this call are deduced)
        threshold: optional
            stops as soon as the best cost is strictly below this value. Beware that it may never happen
            and must be combined with a budget or an early stopping callback to be safe.

        Returns
        -------
        tuple or None
            the best (cost, position) found, see :code:`best()`

        Note
        ----
        Early stopping callbacks (see :code:`callbacks.EarlyStopping`) also stop the loop.
        """
        if budget is None and threshold is None:
            raise errors.DiffEvoValueError("A budget or a threshold must be specified")
        costs: tp.Iterator[tp.Any] = self.iter()
        if budget is not None:
            costs = itertools.islice(costs, max(0, budget - self._num_cost_evaluations))
        # early stopping raises a StopIteration subclass, which ends this loop
        for cost in costs:
            if threshold is not None and cost < threshold:
                break
        return self.best()

    def __repr__(self) -> str:
        return (
            f"Instance of {self.__class__.__name__}(dimension={self.dimension}, pop_size={self.pop_size}, "
            f"num_cost_evaluations={self._num_cost_evaluations}, best_cost={self.best_cost})"
        )


class PopulationIterator:
    """Infinite iterator performing one cost evaluation of the population
    at each step, and providing the best cost found so far.
    It holds no state apart from the population, so that a new iterator resumes
    where the population is.
    """

    def __init__(self, population: Population) -> None:
        self.population = population

    def __iter__(self) -> "PopulationIterator":
        return self

    def __next__(self) -> tp.Any:
        self.population.eval()
        return self.population.best_cost


def self_adaptive_de(bounds: tp.Bounds, cost_function: tp.CostFunction, **kwargs: tp.Any) -> Population:
    """Creates a fully configured self-adaptive differential evolution population.

    Parameters
    ----------
    bounds: sequence of (min, max) tuples
        initial search box, one pair per dimension
    cost_function: callable
        the function to minimize
    **kwargs:
        any other setting (see :code:`Settings`)
    """
    return Population(Settings(bounds, cost_function, **kwargs))
