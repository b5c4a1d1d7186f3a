# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Utils module for helper functions and utilities."""

from .helpers import (
    DEFAULT_BOUNDS,
    random_points,
    jittered_grid,
    print_progress
)

__all__ = [
    'DEFAULT_BOUNDS',
    'random_points',
    'jittered_grid',
    'print_progress',
]
