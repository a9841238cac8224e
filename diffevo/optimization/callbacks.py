# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Callables to register on the "eval" method of a population, see
:code:`Population.register_callback`. They all take the population as only argument.
"""

import time
import logging
import diffevo.common.typing as tp
from diffevo.common import errors
from .population import Population

global_logger = logging.getLogger(__name__)


class OptimizationLogger:
    """Reports the best cost through logging, at most every
    :code:`log_interval_evaluations` evaluations, and at least every
    :code:`log_interval_seconds` seconds while evaluations are running.

    Parameters
    ----------
    logger: logging.Logger
        where the reports are sent (defaults to the logger of this module)
    log_level: int
        level of the reports
    log_interval_evaluations: int
        number of evaluations between two reports
    log_interval_seconds: float
        maximum duration between two reports
    """

    def __init__(
        self,
        *,
        logger: logging.Logger = global_logger,
        log_level: int = logging.INFO,
        log_interval_evaluations: int = 1,
        log_interval_seconds: float = 60.0,
    ) -> None:
        if log_interval_evaluations < 1 or log_interval_seconds <= 0:
            raise errors.DiffEvoValueError(
                "Logging intervals must be positive "
                f"(got {log_interval_evaluations} evaluations and {log_interval_seconds}s)"
            )
        self._logger = logger
        self._log_level = log_level
        self._interval = (int(log_interval_evaluations), float(log_interval_seconds))
        self._next_report = (self._interval[0], time.time() + self._interval[1])

    def __call__(self, population: Population) -> None:
        num = population.num_cost_evaluations
        next_num, next_time = self._next_report
        now = time.time()
        if num < next_num and now < next_time:
            return
        self._next_report = (num + self._interval[0], now + self._interval[1])
        self._logger.log(self._log_level, "After %s evaluations, best cost is %s", num, population.best_cost)


class BestCostRecorder:
    """Keeps the best cost known after each evaluation in :code:`costs`

    Example
    -------
    >>> recorder = BestCostRecorder()
    >>> population.register_callback("eval", recorder)
    >>> population.minimize(budget=100)
    >>> len(recorder.costs)
    100
    """

    def __init__(self) -> None:
        self.costs: tp.List[tp.Any] = []

    def __call__(self, population: Population) -> None:
        self.costs.append(population.best_cost)


class EarlyStopping:
    """Interrupts :code:`minimize` or an iteration over the population as soon
    as a criterion holds.

    Parameters
    ----------
    stopping_criterion: callable
        takes the population and returns True when evaluations must stop

    Note
    ----
    :code:`DiffEvoEarlyStopping` is raised after the evaluation which fulfilled the
    criterion. Since it is a :code:`StopIteration`, loops end silently, but a direct
    call to :code:`eval` raises it to the caller.

    Example
    -------
    >>> population.register_callback("eval", EarlyStopping(lambda pop: pop.best_cost < 1e-6))
    >>> population.minimize(budget=100000)  # may end before the budget is spent
    """

    def __init__(self, stopping_criterion: tp.Callable[[Population], bool]) -> None:
        self.stopping_criterion = stopping_criterion

    def __call__(self, population: Population) -> None:
        if self.stopping_criterion(population):
            raise errors.DiffEvoEarlyStopping(f"Stopped after {population.num_cost_evaluations} evaluations")

    @classmethod
    def timer(cls, max_duration: float) -> "EarlyStopping":
        """Stops once max_duration seconds have passed since the first evaluation seen by the callback"""
        return cls(_DurationCriterion(max_duration))

    @classmethod
    def no_improvement_stopper(cls, tolerance_window: int) -> "EarlyStopping":
        """Stops once the best cost has not strictly decreased for more than tolerance_window evaluations"""
        return cls(_StagnationCriterion(tolerance_window))


class _DurationCriterion:
    def __init__(self, max_duration: float) -> None:
        self._max_duration = max_duration
        self._deadline: tp.Optional[float] = None

    def __call__(self, population: Population) -> bool:
        if self._deadline is None:
            self._deadline = time.time() + self._max_duration
        return time.time() > self._deadline


class _StagnationCriterion:
    def __init__(self, tolerance_window: int) -> None:
        self._tolerance_window = tolerance_window
        self._reference: tp.Any = None
        self._stagnation = 0  # evaluations since the last improvement

    def __call__(self, population: Population) -> bool:
        cost = population.best_cost
        if self._reference is None or cost < self._reference:
            self._reference = cost
            self._stagnation = 0
            return False
        self._stagnation += 1
        return self._stagnation > self._tolerance_window
