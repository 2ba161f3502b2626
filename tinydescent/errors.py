# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Exception types raised by tinydescent.

Each error also derives from the builtin exception a caller would expect for
the same condition, so ``except ValueError`` keeps working.
"""


class TinyDescentError(Exception):
    """Base class for all tinydescent errors."""


class InvalidInputError(TinyDescentError, ValueError):
    """Raised when an operation receives an empty or otherwise unusable input."""


class ShapeMismatchError(TinyDescentError, ValueError):
    """Raised when vectors that must share a length do not."""
