# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Parameter update rules."""

from .gradient_descent import GradientDescent

__all__ = ["GradientDescent"]
