# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Triangulation module: vertices, faces and incremental Delaunay insertion."""

from .vertices import (
    CoincidentVerticesError,
    Vertex,
    VertexRegistry
)

from .faces import (
    VIRTUAL_IDS,
    Face,
    InteriorFace,
    EdgeFace,
    CornerFace,
    initial_faces
)

from .insertion import (
    edge_key,
    split_cavity,
    cavity_boundary,
    join_edge,
    insert_vertex
)

from .delaunay import DelaunayTriangulation

__all__ = [
    # Vertices
    'CoincidentVerticesError',
    'Vertex',
    'VertexRegistry',
    # Faces
    'VIRTUAL_IDS',
    'Face',
    'InteriorFace',
    'EdgeFace',
    'CornerFace',
    'initial_faces',
    # Insertion
    'edge_key',
    'split_cavity',
    'cavity_boundary',
    'join_edge',
    'insert_vertex',
    # Aggregate
    'DelaunayTriangulation',
]
