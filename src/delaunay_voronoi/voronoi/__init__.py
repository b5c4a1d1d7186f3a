# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Voronoi module: regions dual to the triangulation and box clipping."""

from .regions import (
    BoundedRegion,
    UnboundedRegion,
    VoronoiRegions,
    pseudo_angle,
    extract_regions
)

from .diagram import (
    VoronoiDiagram,
    clip_bounded_region,
    clip_unbounded_region
)

__all__ = [
    # Regions
    'BoundedRegion',
    'UnboundedRegion',
    'VoronoiRegions',
    'pseudo_angle',
    'extract_regions',
    # Diagram
    'VoronoiDiagram',
    'clip_bounded_region',
    'clip_unbounded_region',
]
