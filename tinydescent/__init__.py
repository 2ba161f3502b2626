# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""A two-weight linear model trained by hand-written batch gradient descent."""

from __future__ import annotations

from . import functional, nn, optim
from .config import DEFAULT_CONFIG, TrainingConfig
from .errors import InvalidInputError, ShapeMismatchError, TinyDescentError
from .functional import average, average_gradients
from .nn import LinearLayer, SquaredError
from .optim import GradientDescent
from .train import EpochResult, train, train_epoch

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "EpochResult",
    "GradientDescent",
    "InvalidInputError",
    "LinearLayer",
    "ShapeMismatchError",
    "SquaredError",
    "TinyDescentError",
    "TrainingConfig",
    "average",
    "average_gradients",
    "functional",
    "nn",
    "optim",
    "train",
    "train_epoch",
]
