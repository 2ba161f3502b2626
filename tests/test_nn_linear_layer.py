# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

from tinydescent.errors import ShapeMismatchError
from tinydescent.nn import LinearLayer


def test_default_state(layer):
    assert layer.weights == (-0.5, 2.5)
    assert layer.bias == 1.0
    assert layer.parameters() == [-0.5, 2.5]


@pytest.mark.parametrize("x", [-3.0, 0.0, 2.0, 4.0, 7.5])
def test_forward_is_linear_in_x(layer, x):
    assert layer.forward(x) == pytest.approx(-0.5 * x + 2.5 * 1.0)


def test_forward_matches_dataset_points(layer):
    assert layer.forward(2.0) == 1.5
    assert layer.forward(4.0) == 0.5
    assert layer(2.0) == layer.forward(2.0)


def test_forward_returns_single_precision(layer):
    assert isinstance(layer.forward(2.0), np.float32)


@pytest.mark.parametrize(
    "x, upstream",
    [(2.0, 3.0), (4.0, 9.0), (-1.5, 0.25), (0.0, -2.0)],
)
def test_backward_scales_upstream_by_local_derivatives(layer, x, upstream):
    g0, g1 = layer.backward(x, upstream)
    assert g0 == pytest.approx(upstream * x)
    assert g1 == pytest.approx(upstream * 1.0)


def test_backward_uses_bias_for_second_weight():
    layer = LinearLayer(bias=2.0)
    assert layer.backward(3.0, 4.0) == (12.0, 8.0)


def test_backward_does_not_touch_weights(layer):
    layer.backward(2.0, 3.0)
    assert layer.weights == (-0.5, 2.5)


def test_apply_update_subtracts_in_place(layer):
    layer.apply_update(0.21, 0.06)
    w0, w1 = layer.weights
    assert w0 == pytest.approx(-0.71)
    assert w1 == pytest.approx(2.44)
    assert layer.forward(2.0) == pytest.approx(-0.71 * 2.0 + 2.44)


def test_weights_snapshot_is_read_only(layer):
    snapshot = layer.weights
    layer.apply_update(1.0, 1.0)
    assert snapshot != layer.weights
    with pytest.raises(AttributeError):
        layer.weights = (0.0, 0.0)


def test_custom_initial_weights():
    layer = LinearLayer([1.0, -1.0])
    assert layer.forward(3.0) == 2.0


@pytest.mark.parametrize("weights", [[], [1.0], [1.0, 2.0, 3.0]])
def test_wrong_number_of_weights(weights):
    with pytest.raises(ShapeMismatchError):
        LinearLayer(weights)
