# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Geometry module with the planar primitives used by the triangulation."""

from .points import (
    Point2D,
    Direction2D,
    Axis2D,
    as_point,
    circumcenter
)

from .shapes import (
    Circle2D,
    Triangle2D,
    BoundingBox2D,
    make_polygon,
    make_polyline
)

__all__ = [
    # Points
    'Point2D',
    'Direction2D',
    'Axis2D',
    'as_point',
    'circumcenter',
    # Shapes
    'Circle2D',
    'Triangle2D',
    'BoundingBox2D',
    'make_polygon',
    'make_polyline',
]
