# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Analysis module for adjacency, length scales and spatial queries."""

from .tessellation import (
    delaunay_edges,
    delaunay_adjacency,
    edge_lengths,
    estimate_edge_length_scale,
    filter_triangles_by_circumradius
)

from .spatial import (
    build_vertex_tree,
    nearest_vertices,
    region_areas,
    region_centroids
)

__all__ = [
    # Tessellation
    'delaunay_edges',
    'delaunay_adjacency',
    'edge_lengths',
    'estimate_edge_length_scale',
    'filter_triangles_by_circumradius',
    # Spatial
    'build_vertex_tree',
    'nearest_vertices',
    'region_areas',
    'region_centroids',
]
