# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Definitions of some convenient types.
"""
# pylint: disable=unused-import
# structures
from typing import Any as Any
from typing import Generic as Generic
from typing import Type as Type
from typing import TypeVar as TypeVar
from typing import Optional as Optional
from typing import Union as Union

# containers
from typing import Dict as Dict
from typing import Tuple as Tuple
from typing import List as List
from typing import Sequence as Sequence
from typing import NamedTuple as NamedTuple

# iterables
from typing import Iterator as Iterator
from typing import Iterable as Iterable

# others
from typing import Callable as Callable
from typing_extensions import Protocol

#
import numpy as _np


ArrayLike = Union[Tuple[float, ...], List[float], _np.ndarray]
Range = Tuple[float, float]
Bounds = Sequence[Range]
CostFunction = Callable[[_np.ndarray], Any]


# %% Protocol definitions for random sources


class RandomSource(Protocol):
    # pylint: disable=pointless-statement, unused-argument

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        ...

    def randint(self, low: int, high: int) -> int:
        ...


Seed = Union[None, int, RandomSource]
