# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import numpy as np


class SquaredError:
    """Stateless squared-difference loss ``(target - predicted) ** 2``."""

    def forward(self, target: float, predicted: float) -> np.float32:
        difference = np.float32(target) - np.float32(predicted)
        return difference * difference

    __call__ = forward

    def backward(self, target: float, predicted: float) -> np.float32:
        """Derivative of :meth:`forward`, taken with the same argument roles."""

        return np.float32(-2.0) * (np.float32(predicted) - np.float32(target))

    def __repr__(self) -> str:
        return "SquaredError()"
