# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Delaunay / Voronoi Package

An incremental Delaunay triangulation of 2D point-like values, with the dual
Voronoi diagram derived on demand (including unbounded cells of hull
vertices).

Modules:
--------
- geometry: Points, directions, axes, circles, triangles, bounding boxes
- triangulation: Vertex registry, face model, incremental insertion
- voronoi: Voronoi regions and bounding-box clipping
- analysis: Adjacency graph, length scales and nearest-vertex queries
- utils: Point generators and helper functions

Example Usage:
--------------
    import delaunay_voronoi as dv

    # Build a triangulation
    tri = dv.DelaunayTriangulation.from_points([(0, 0), (1, 0), (0, 1)])
    tri = tri.insert_point((1, 1))
    triangles = tri.triangles()

    # Voronoi cells clipped to a box
    diagram = dv.VoronoiDiagram.from_triangulation(tri)
    cells = diagram.polygons(dv.geometry.BoundingBox2D(-1, 2, -1, 2))
"""

__version__ = '0.1.0'
__author__ = 'Rami Ardati'

from . import geometry
from . import triangulation
from . import voronoi
from . import analysis
from . import utils

from .triangulation import CoincidentVerticesError, DelaunayTriangulation
from .voronoi import VoronoiDiagram, extract_regions

__all__ = [
    'geometry',
    'triangulation',
    'voronoi',
    'analysis',
    'utils',
    'CoincidentVerticesError',
    'DelaunayTriangulation',
    'VoronoiDiagram',
    'extract_regions',
]
