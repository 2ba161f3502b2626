# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Layers and loss functions."""

from .linear import LinearLayer
from .loss import SquaredError

__all__ = ["LinearLayer", "SquaredError"]
