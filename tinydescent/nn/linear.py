# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Single-input linear layer with a constant bias input."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from ..config import BIAS, INITIAL_WEIGHTS
from ..errors import ShapeMismatchError


class LinearLayer:
    """Computes ``w0 * x + w1 * bias`` and its gradient w.r.t. ``(w0, w1)``.

    The layer owns its two weights. They are only changed through
    :meth:`apply_update`; :attr:`weights` hands out a read-only snapshot.
    All arithmetic is single precision.
    """

    def __init__(
        self,
        weights: Sequence[float] = INITIAL_WEIGHTS,
        bias: float = BIAS,
    ) -> None:
        if len(weights) != 2:
            raise ShapeMismatchError(
                f"LinearLayer expects exactly 2 weights, got {len(weights)}"
            )
        self._weights = np.array(weights, dtype=np.float32)
        self._bias = np.float32(bias)

    @property
    def bias(self) -> np.float32:
        return self._bias

    @property
    def weights(self) -> Tuple[np.float32, np.float32]:
        """Current ``(w0, w1)``."""

        return self._weights[0], self._weights[1]

    def parameters(self) -> List[np.float32]:
        return list(self.weights)

    def forward(self, x: float) -> np.float32:
        """Predict the output for input feature ``x``."""

        return (self._weights[0] * np.float32(x)) + (self._weights[1] * self._bias)

    __call__ = forward

    def backward(self, x: float, upstream: float) -> Tuple[np.float32, np.float32]:
        """Chain ``upstream`` (dE/dprediction) through the layer.

        ``x`` must be the input of the matching :meth:`forward` call. The
        local derivatives of the output are ``x`` for ``w0`` and ``bias`` for
        ``w1``.
        """

        upstream = np.float32(upstream)
        return upstream * np.float32(x), upstream * self._bias

    def apply_update(self, delta_w0: float, delta_w1: float) -> None:
        """Subtract ``delta_w0`` from ``w0`` and ``delta_w1`` from ``w1`` in place."""

        self._weights[0] -= np.float32(delta_w0)
        self._weights[1] -= np.float32(delta_w1)

    def __repr__(self) -> str:
        w0, w1 = self.weights
        return f"LinearLayer(weights=({w0:g}, {w1:g}), bias={self._bias:g})"
