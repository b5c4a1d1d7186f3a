"""
Spatial queries over triangulation vertices and Voronoi cells.

This module provides nearest-vertex lookups using KDTree (the nearest vertex
of a query point is the owner of the Voronoi region containing it) and
per-vertex area/centroid summaries of clipped Voronoi cells.
"""

import numpy as np
from scipy.spatial import KDTree
from typing import Tuple, Union

from ..geometry import BoundingBox2D
from ..triangulation import DelaunayTriangulation
from ..voronoi import VoronoiDiagram


def build_vertex_tree(triangulation: DelaunayTriangulation) -> KDTree:
    """
    Build a KDTree from the vertex positions for fast spatial queries.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :return: KDTree object; tree indices are vertex identities.
    :rtype: KDTree
    :raises ValueError: If the triangulation is empty.
    """
    if triangulation.is_empty():
        raise ValueError("Cannot build a KDTree of an empty triangulation.")
    return KDTree(triangulation.positions())


def nearest_vertices(triangulation: DelaunayTriangulation,
                     query_points: np.ndarray,
                     k: int = 1) -> Tuple[np.ndarray, np.ndarray]:
    """
    Find the k nearest vertices of each query point.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :param query_points: (M, 2) array of query coordinates.
    :type query_points: np.ndarray
    :param k: Number of nearest vertices to find.
    :type k: int
    :return: Tuple of (distances, identities) arrays.
    :rtype: Tuple[np.ndarray, np.ndarray]
    """
    tree = build_vertex_tree(triangulation)
    distances, indices = tree.query(np.asarray(query_points, dtype=float), k=k)
    return distances, indices


def _diagram(source: Union[DelaunayTriangulation, VoronoiDiagram]) -> VoronoiDiagram:
    if isinstance(source, VoronoiDiagram):
        return source
    return VoronoiDiagram.from_triangulation(source)


def region_areas(source: Union[DelaunayTriangulation, VoronoiDiagram],
                 bounding_box: BoundingBox2D) -> np.ndarray:
    """
    Area of each vertex's Voronoi cell clipped to a bounding box.

    :param source: Triangulation or Voronoi diagram.
    :type source: Union[DelaunayTriangulation, VoronoiDiagram]
    :param bounding_box: Clipping box.
    :type bounding_box: BoundingBox2D
    :return: (N,) array indexed by vertex identity. NaN if the cell is missing.
    :rtype: np.ndarray
    """
    diagram = _diagram(source)
    areas = np.full(len(diagram), np.nan, dtype=float)

    for region, polygon in diagram.clipped_regions(bounding_box):
        areas[region.vertex.identity] = polygon.area

    return areas


def region_centroids(source: Union[DelaunayTriangulation, VoronoiDiagram],
                     bounding_box: BoundingBox2D) -> np.ndarray:
    """
    Centroid of each vertex's Voronoi cell clipped to a bounding box.

    :param source: Triangulation or Voronoi diagram.
    :type source: Union[DelaunayTriangulation, VoronoiDiagram]
    :param bounding_box: Clipping box.
    :type bounding_box: BoundingBox2D
    :return: (N, 2) array of centroids. NaN if the cell is missing.
    :rtype: np.ndarray
    """
    diagram = _diagram(source)
    centroids = np.full((len(diagram), 2), np.nan, dtype=float)

    for region, polygon in diagram.clipped_regions(bounding_box):
        c = polygon.centroid
        centroids[region.vertex.identity, 0] = c.x
        centroids[region.vertex.identity, 1] = c.y

    return centroids
