# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Batch gradient-descent training loop.

Each epoch sweeps the dataset in order, collects one loss and one gradient per
point, averages them and applies a single weight update. Every intermediate
value is written to the ``tinydescent.train`` logger so a run can be followed
line by line on the console.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, Point, TrainingConfig
from .errors import InvalidInputError
from .functional import average, average_gradients
from .nn import LinearLayer, SquaredError
from .optim import GradientDescent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EpochResult:
    epoch: int
    errors: Tuple[float, ...]
    gradients: Tuple[Tuple[float, float], ...]
    avg_error: float
    avg_gradient: Tuple[float, float]
    weights: Tuple[float, float]


def _fmt(value) -> str:
    return format(float(value), "g")


def _fmt_pair(pair) -> str:
    return "{" + _fmt(pair[0]) + "," + _fmt(pair[1]) + "}"


def train_epoch(
    layer: LinearLayer,
    criterion: SquaredError,
    optimizer: GradientDescent,
    dataset: Sequence[Point],
    epoch: int,
) -> EpochResult:
    """Run one full sweep over ``dataset`` and update ``layer`` once."""

    logger.info("----START EPOCH %d----", epoch)

    errors = []
    gradients = []
    for x, y in dataset:
        logger.info("--START ITER --")
        logger.info("x = %s y = %s", _fmt(x), _fmt(y))

        prediction = layer.forward(x)
        logger.info("prediction = %s", _fmt(prediction))

        error = criterion.forward(y, prediction)
        logger.info("error = %s", _fmt(error))

        dedl = criterion.backward(y, prediction)
        # The dedl line reports the loss value, not the derivative.
        logger.info("dedl = %s", _fmt(error))

        gradient = layer.backward(x, dedl)
        logger.info("gradient = %s", _fmt_pair(gradient))

        errors.append(error)
        gradients.append(gradient)
        logger.info("--END ITER --")

    avg_error = average(errors)
    logger.info("avgError = %s", _fmt(avg_error))

    avg_gradient = average_gradients(gradients)
    logger.info("average gradient = %s", _fmt_pair(avg_gradient))

    optimizer.step(avg_gradient)
    weights = layer.weights
    logger.info("new weights = %s", _fmt_pair(weights))

    logger.info("----END EPOCH %d----", epoch)

    return EpochResult(
        epoch=epoch,
        errors=tuple(float(e) for e in errors),
        gradients=tuple((float(g0), float(g1)) for g0, g1 in gradients),
        avg_error=float(avg_error),
        avg_gradient=(float(avg_gradient[0]), float(avg_gradient[1])),
        weights=(float(weights[0]), float(weights[1])),
    )


def train(config: Optional[TrainingConfig] = None) -> List[EpochResult]:
    """Train a fresh :class:`LinearLayer` for ``config.epochs`` epochs.

    Parameters
    ----------
    config:
        Run parameters. ``None`` selects :data:`DEFAULT_CONFIG`.

    Returns
    -------
    list[EpochResult]
        One record per epoch, in order.
    """

    config = config or DEFAULT_CONFIG
    if not config.dataset:
        raise InvalidInputError("cannot train on an empty dataset")

    layer = LinearLayer(config.initial_weights, bias=config.bias)
    criterion = SquaredError()
    optimizer = GradientDescent(layer, lr=config.learning_rate)

    return [
        train_epoch(layer, criterion, optimizer, config.dataset, epoch)
        for epoch in range(config.epochs)
    ]


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)
    train()
    return 0


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
