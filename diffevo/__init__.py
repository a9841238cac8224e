# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import errors as errors
from .common import typing as typing
from .optimization import callbacks as callbacks
from .optimization.settings import Settings as Settings
from .optimization.population import Population as Population
from .optimization.population import self_adaptive_de as self_adaptive_de
from . import functions as functions


__all__ = ["Settings", "Population", "self_adaptive_de", "callbacks", "functions", "errors", "typing"]


__version__ = "0.1.0"
