# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]

LEARNING_RATE = 0.01
NUM_EPOCHS = 10
DATASET: Tuple[Point, ...] = ((2.0, 3.0), (4.0, 5.0))
INITIAL_WEIGHTS: Tuple[float, float] = (-0.5, 2.5)
BIAS = 1.0


@dataclass(frozen=True)
class TrainingConfig:
    """Everything a training run needs. The defaults are the canonical run."""

    learning_rate: float = LEARNING_RATE
    epochs: int = NUM_EPOCHS
    dataset: Tuple[Point, ...] = DATASET
    initial_weights: Tuple[float, float] = INITIAL_WEIGHTS
    bias: float = BIAS


DEFAULT_CONFIG = TrainingConfig()
