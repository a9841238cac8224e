# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .settings import Settings
from .population import Population  # main class, evaluating one point at a time
from .population import self_adaptive_de
from . import callbacks
