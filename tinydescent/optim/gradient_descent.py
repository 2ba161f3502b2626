# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..errors import ShapeMismatchError
from ..nn import LinearLayer


class GradientDescent:
    """Plain gradient descent: ``w_i -= lr * grad_i``, one step per call."""

    def __init__(self, layer: LinearLayer, lr: float) -> None:
        if lr <= 0:
            raise ValueError("Learning rate must be positive.")
        self.layer = layer
        self.lr = np.float32(lr)

    def step(self, gradient: Sequence[float]) -> None:
        if len(gradient) != 2:
            raise ShapeMismatchError(
                f"expected a gradient with 2 components, got {len(gradient)}"
            )
        g0, g1 = gradient
        self.layer.apply_update(self.lr * np.float32(g0), self.lr * np.float32(g1))
