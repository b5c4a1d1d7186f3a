# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Incremental (Bowyer-Watson) vertex insertion.

Inserting a vertex removes every face whose region contains the new point
(the cavity), and joins the new vertex to each edge on the cavity boundary.
Because the exterior is tiled by faces with virtual corners, the same steps
handle points inside and outside the current convex hull.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..geometry import Circle2D, Direction2D, Point2D
from .faces import (
    CORNER_DIRECTIONS,
    CornerFace,
    EdgeFace,
    Endpoint,
    Face,
    InteriorFace,
    endpoint_id,
    initial_faces
)
from .vertices import Vertex


def edge_key(start: Endpoint, end: Endpoint) -> Tuple[int, int]:
    """
    Order-independent key of an edge, larger endpoint id first.

    :param start: First endpoint (vertex or virtual id).
    :type start: Endpoint
    :param end: Second endpoint (vertex or virtual id).
    :type end: Endpoint
    :return: Tuple (larger id, smaller id).
    :rtype: Tuple[int, int]
    """
    i = endpoint_id(start)
    j = endpoint_id(end)
    return (i, j) if i > j else (j, i)


def split_cavity(point: Point2D,
                 faces: Sequence[Face]) -> Tuple[List[Face], List[Face]]:
    """
    Partition faces into those whose region contains the point and the rest.

    :param point: Position of the vertex being inserted.
    :type point: Point2D
    :param faces: Current faces.
    :type faces: Sequence[Face]
    :return: Tuple of (cavity faces, retained faces).
    :rtype: Tuple[List[Face], List[Face]]
    """
    cavity = []
    retained = []
    for face in faces:
        if face.in_region(point):
            cavity.append(face)
        else:
            retained.append(face)
    return cavity, retained


def cavity_boundary(cavity: Sequence[Face]) -> List[Tuple[Endpoint, Endpoint]]:
    """
    Directed edges on the boundary of a cavity.

    An edge shared by two cavity faces appears once from each side; the
    second occurrence cancels the first, so only boundary edges survive.
    Surviving edges keep the counterclockwise orientation of their face.

    :param cavity: Faces removed by the insertion.
    :type cavity: Sequence[Face]
    :return: List of (start, end) endpoint pairs.
    :rtype: List[Tuple[Endpoint, Endpoint]]
    """
    boundary: Dict[Tuple[int, int], Tuple[Endpoint, Endpoint]] = {}
    for face in cavity:
        for start, end in face.edges():
            key = edge_key(start, end)
            if key in boundary:
                del boundary[key]
            else:
                boundary[key] = (start, end)
    return list(boundary.values())


def join_edge(vertex: Vertex, start: Endpoint, end: Endpoint) -> Optional[Face]:
    """
    Build the face (start, end, vertex) of the re-triangulated cavity.

    :param vertex: Newly inserted vertex.
    :type vertex: Vertex
    :param start: Start of a boundary edge.
    :type start: Endpoint
    :param end: End of a boundary edge.
    :type end: Endpoint
    :return: New face, or None if the three points are exactly collinear.
    :rtype: Optional[Face]
    """
    start_is_real = isinstance(start, Vertex)
    end_is_real = isinstance(end, Vertex)

    if start_is_real and end_is_real:
        circle = Circle2D.through_points(start.position, end.position, vertex.position)
        if circle is None:
            return None
        return InteriorFace(start, end, vertex, circle)

    if start_is_real:
        # (start, virtual, new) rotated so the real corners come first
        return EdgeFace(vertex, start, end,
                        Direction2D.from_points(vertex.position, start.position))

    if end_is_real:
        # (virtual, end, new) rotated so the real corners come first
        return EdgeFace(end, vertex, start,
                        Direction2D.from_points(end.position, vertex.position))

    return CornerFace(vertex, start, end, CORNER_DIRECTIONS[(start, end)])


def insert_vertex(vertex: Vertex, faces: Sequence[Face]) -> Tuple[Face, ...]:
    """
    Insert one vertex into a face set.

    The caller guarantees that no existing vertex shares the new vertex's
    position. The input sequence is not modified.

    :param vertex: Vertex to insert.
    :type vertex: Vertex
    :param faces: Faces of the current triangulation (empty for a new one).
    :type faces: Sequence[Face]
    :return: Faces of the updated triangulation.
    :rtype: Tuple[Face, ...]
    """
    if not faces:
        return initial_faces(vertex)

    cavity, retained = split_cavity(vertex.position, faces)

    new_faces = []
    for start, end in cavity_boundary(cavity):
        face = join_edge(vertex, start, end)
        if face is not None:
            new_faces.append(face)

    return tuple(retained) + tuple(new_faces)
