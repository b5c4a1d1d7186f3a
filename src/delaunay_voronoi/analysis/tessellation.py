"""
Adjacency graph and edge statistics of a Delaunay triangulation.

This module provides functions for building vertex adjacency graphs and
characteristic length scales from a triangulation's faces.
"""

import numpy as np
from typing import List, Set, Tuple

from ..geometry import Triangle2D
from ..triangulation import DelaunayTriangulation, EdgeFace, InteriorFace


def delaunay_edges(triangulation: DelaunayTriangulation) -> List[Tuple[int, int]]:
    """
    Unique Delaunay edges as sorted identity pairs.

    Hull edges are included, so inputs lying on a single line still yield
    their chain of edges.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :return: List of (i, j) pairs with i < j.
    :rtype: List[Tuple[int, int]]
    """
    edges = set()
    for face in triangulation.faces():
        if isinstance(face, InteriorFace):
            a, b, c = (v.identity for v in face.vertices())
            edges.update([(min(a, b), max(a, b)),
                          (min(b, c), max(b, c)),
                          (min(c, a), max(c, a))])
        elif isinstance(face, EdgeFace):
            a, b = face.first.identity, face.second.identity
            edges.add((min(a, b), max(a, b)))
    return sorted(edges)


def delaunay_adjacency(triangulation: DelaunayTriangulation) -> List[Set[int]]:
    """
    Build adjacency graph from Delaunay triangulation.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :return: List of neighbor sets, one per vertex identity.
    :rtype: List[Set[int]]
    """
    n = len(triangulation)
    neighbors = [set() for _ in range(n)]

    for a, b in delaunay_edges(triangulation):
        neighbors[a].add(b)
        neighbors[b].add(a)

    return neighbors


def edge_lengths(triangulation: DelaunayTriangulation) -> np.ndarray:
    """
    Lengths of all unique Delaunay edges.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :return: 1D array of edge lengths.
    :rtype: np.ndarray
    """
    edges = delaunay_edges(triangulation)
    if not edges:
        return np.array([], dtype=float)
    points = triangulation.positions()
    idx = np.array(edges, dtype=int)
    return np.linalg.norm(points[idx[:, 0]] - points[idx[:, 1]], axis=1)


def estimate_edge_length_scale(triangulation: DelaunayTriangulation) -> float:
    """
    Estimate characteristic edge length from triangulation.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :return: Median edge length.
    :rtype: float
    :raises ValueError: If the triangulation has no edges.
    """
    lengths = edge_lengths(triangulation)
    if lengths.size == 0:
        raise ValueError("Triangulation has no edges; need at least 2 vertices.")
    return float(np.median(lengths))


def filter_triangles_by_circumradius(triangulation: DelaunayTriangulation,
                                     scale: float = 15.0) -> List[Triangle2D]:
    """
    Filter Delaunay triangles by circumradius threshold.

    Keeps triangles with circumradius R <= scale * median_edge_length / sqrt(3).
    This removes large "bridging" triangles along a concave outline.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :param scale: Scaling factor for threshold (larger = more triangles kept).
    :type scale: float
    :return: Kept triangles.
    :rtype: List[Triangle2D]
    """
    faces = triangulation.interior_faces()
    if not faces:
        return []

    L = estimate_edge_length_scale(triangulation)
    R_thresh = (scale * L) / np.sqrt(3)

    kept_triangles = []
    for face in faces:
        if face.circumcircle.radius <= R_thresh:
            kept_triangles.append(
                Triangle2D(face.first.position, face.second.position, face.third.position)
            )

    return kept_triangles
