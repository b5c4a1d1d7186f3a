# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Utility functions and helpers.

This module contains point generators used by the example scripts and tests,
and a simple progress printer.
"""

import numpy as np
from typing import Optional, Tuple


# Default sampling window (min_x, max_x, min_y, max_y)
DEFAULT_BOUNDS = (0.0, 1.0, 0.0, 1.0)


def random_points(n: int,
                  bounds: Tuple[float, float, float, float] = DEFAULT_BOUNDS,
                  seed: Optional[int] = None) -> np.ndarray:
    """
    Generate uniformly distributed random points.

    :param n: Number of points.
    :type n: int
    :param bounds: Sampling window as (min_x, max_x, min_y, max_y).
    :type bounds: Tuple[float, float, float, float]
    :param seed: Random seed for reproducibility.
    :type seed: Optional[int]
    :return: (n, 2) array of point coordinates.
    :rtype: np.ndarray
    """
    if n < 0:
        raise ValueError(f"Number of points must be non-negative, got {n}")
    min_x, max_x, min_y, max_y = bounds
    rng = np.random.default_rng(seed)
    x = rng.uniform(min_x, max_x, n)
    y = rng.uniform(min_y, max_y, n)
    return np.column_stack([x, y])


def jittered_grid(num_x: int, num_y: int,
                  spacing: float = 1.0,
                  jitter: float = 0.25,
                  seed: Optional[int] = None) -> np.ndarray:
    """
    Generate a square grid with randomized positions.

    Jitter breaks the co-circular quadruples of a perfect grid.

    :param num_x: Number of columns.
    :type num_x: int
    :param num_y: Number of rows.
    :type num_y: int
    :param spacing: Grid spacing.
    :type spacing: float
    :param jitter: Maximum displacement as a fraction of spacing (< 0.5 keeps points distinct).
    :type jitter: float
    :param seed: Random seed for reproducibility.
    :type seed: Optional[int]
    :return: (num_x * num_y, 2) array of point coordinates.
    :rtype: np.ndarray
    """
    rng = np.random.default_rng(seed)
    gx, gy = np.meshgrid(np.arange(num_x, dtype=float), np.arange(num_y, dtype=float))
    points = np.column_stack([gx.ravel(), gy.ravel()]) * spacing
    offsets = rng.uniform(-jitter, jitter, points.shape) * spacing
    return points + offsets


def print_progress(current: int, total: int, prefix: str = 'Progress') -> None:
    """
    Print a simple progress indicator.

    :param current: Current iteration (0-based or 1-based).
    :type current: int
    :param total: Total number of iterations.
    :type total: int
    :param prefix: Prefix text for progress message.
    :type prefix: str
    """
    percentage = (current / total) * 100 if total > 0 else 0
    print(f"{prefix}: {current}/{total} ({percentage:.1f}%)")
