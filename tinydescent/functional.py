# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Reductions used to turn per-point records into a batch update."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from .errors import InvalidInputError, ShapeMismatchError

__all__ = ["average", "average_gradients"]


def average(values: Iterable[float]) -> np.float32:
    """Arithmetic mean of a non-empty sequence of scalars.

    Values are accumulated one at a time, in order, in single precision.
    """

    arr = np.asarray(list(values), dtype=np.float32)
    if arr.size == 0:
        raise InvalidInputError("average requires at least one value")
    total = np.float32(0.0)
    for value in arr:
        total += value
    return total / np.float32(arr.size)


def average_gradients(
    gradients: Iterable[Sequence[float]],
) -> Tuple[np.float32, ...]:
    """Component-wise mean of equal-length gradient vectors.

    Every vector must have the length of the first one. Components are
    accumulated row by row, in order.
    """

    rows = [tuple(g) for g in gradients]
    if not rows:
        raise InvalidInputError("average_gradients requires at least one gradient")

    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ShapeMismatchError(
                f"gradient {i} has {len(row)} components, expected {width}"
            )

    totals = np.zeros(width, dtype=np.float32)
    for row in rows:
        totals += np.asarray(row, dtype=np.float32)
    return tuple(totals / np.float32(len(rows)))
