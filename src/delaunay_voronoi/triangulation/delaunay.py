# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Delaunay triangulation aggregate.

`DelaunayTriangulation` is a persistent value: inserting a vertex returns a
new triangulation and leaves the original untouched, so older snapshots stay
valid and can be kept as a history of the construction.
"""

from typing import Any, Callable, Iterable, List, Optional, Tuple

import numpy as np

from ..geometry import Circle2D, Point2D, Triangle2D, as_point
from .faces import Face, InteriorFace
from .insertion import insert_vertex
from .vertices import CoincidentVerticesError, Vertex, VertexRegistry


def _lexicographic_key(vertex: Vertex) -> Tuple[float, float]:
    return (vertex.position.x, vertex.position.y)


class DelaunayTriangulation:
    """
    Incrementally built Delaunay triangulation of user values.

    Values are projected to the plane with `position_of`; plain points use the
    default identity projection.
    """

    def __init__(self, registry: VertexRegistry, faces: Tuple[Face, ...],
                 position_of: Optional[Callable[[Any], Any]] = None):
        """
        Initialize from an existing registry and face set.

        Use `empty`, `from_values` or `from_points` rather than calling this
        directly.

        :param registry: Registered vertices.
        :type registry: VertexRegistry
        :param faces: Faces tiling the plane.
        :type faces: Tuple[Face, ...]
        :param position_of: Projection from user value to a 2D point.
        :type position_of: Optional[Callable[[Any], Any]]
        """
        self._registry = registry
        self._faces = tuple(faces)
        self._position_of = position_of

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls, position_of: Optional[Callable[[Any], Any]] = None) -> 'DelaunayTriangulation':
        """
        Triangulation with no vertices.

        :param position_of: Projection from user value to a 2D point
                            (default: the value itself is the point).
        :type position_of: Optional[Callable[[Any], Any]]
        :return: Empty triangulation.
        :rtype: DelaunayTriangulation
        """
        return cls(VertexRegistry(), (), position_of)

    @classmethod
    def from_values(cls, values: Iterable[Any],
                    position_of: Optional[Callable[[Any], Any]] = None) -> 'DelaunayTriangulation':
        """
        Build a triangulation from a batch of values.

        Vertices are inserted in lexicographic order of position (stable, so
        the result does not depend on input order). Identities and
        `vertices()` follow input order.

        :param values: User values.
        :type values: Iterable[Any]
        :param position_of: Projection from user value to a 2D point.
        :type position_of: Optional[Callable[[Any], Any]]
        :return: Triangulation of all values.
        :rtype: DelaunayTriangulation
        :raises CoincidentVerticesError: If two values share a position; no
                                         triangulation is produced.
        """
        empty = cls.empty(position_of)
        vertices = [
            Vertex(value, empty._project(value), identity)
            for identity, value in enumerate(values)
        ]

        ordered = sorted(vertices, key=_lexicographic_key)
        for previous, current in zip(ordered, ordered[1:]):
            if previous.position == current.position:
                raise CoincidentVerticesError(previous.value, current.value)

        faces: Tuple[Face, ...] = ()
        for vertex in ordered:
            faces = insert_vertex(vertex, faces)

        return cls(VertexRegistry.from_vertices(vertices), faces, position_of)

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> 'DelaunayTriangulation':
        """
        Build a triangulation of plain points.

        :param points: Point2D objects, (x, y) tuples or an (N, 2) array.
        :type points: Iterable[Any]
        :return: Triangulation whose values are the given points as Point2D.
        :rtype: DelaunayTriangulation
        :raises CoincidentVerticesError: If two points are equal.
        """
        return cls.from_values([as_point(p) for p in points])

    def _project(self, value: Any) -> Point2D:
        if self._position_of is None:
            return as_point(value)
        return as_point(self._position_of(value))

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert(self, value: Any) -> 'DelaunayTriangulation':
        """
        Insert one value, returning a new triangulation.

        :param value: User value.
        :type value: Any
        :return: New triangulation containing the previous values plus `value`.
        :rtype: DelaunayTriangulation
        :raises CoincidentVerticesError: If the value's position is already
                                         present; this triangulation is unchanged.
        """
        registry, vertex = self._registry.register(value, self._project(value))
        faces = insert_vertex(vertex, self._faces)
        return DelaunayTriangulation(registry, faces, self._position_of)

    def insert_point(self, point: Any) -> 'DelaunayTriangulation':
        """Insert a plain point into a triangulation that uses the identity projection."""
        if self._position_of is not None:
            raise ValueError("insert_point requires a triangulation built from plain points")
        return self.insert(as_point(point))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return (f"DelaunayTriangulation(vertices={len(self._registry)}, "
                f"faces={len(self._faces)})")

    def is_empty(self) -> bool:
        return len(self._registry) == 0

    @property
    def position_of(self) -> Optional[Callable[[Any], Any]]:
        return self._position_of

    def faces(self) -> Tuple[Face, ...]:
        """All faces, including the ones with virtual corners."""
        return self._faces

    def interior_faces(self) -> List[InteriorFace]:
        return [face for face in self._faces if isinstance(face, InteriorFace)]

    def vertices(self) -> List[Any]:
        """
        Registered user values.

        :return: Values in identity order (input order, then insertion order).
        :rtype: List[Any]
        """
        return [vertex.value for vertex in self._registry]

    def triangles(self) -> List[Triangle2D]:
        """
        Geometric triangles of the interior faces, counterclockwise.

        :return: List of triangles.
        :rtype: List[Triangle2D]
        """
        return [
            Triangle2D(face.first.position, face.second.position, face.third.position)
            for face in self.interior_faces()
        ]

    def circumcircles(self) -> List[Circle2D]:
        return [face.circumcircle for face in self.interior_faces()]

    def positions(self) -> np.ndarray:
        """
        Vertex positions as an array.

        :return: (N, 2) array, row i is the position of identity i.
        :rtype: np.ndarray
        """
        if len(self._registry) == 0:
            return np.empty((0, 2), dtype=float)
        return np.array([[v.position.x, v.position.y] for v in self._registry], dtype=float)

    def to_mesh(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Export the interior faces as an indexed triangle mesh.

        :return: Tuple of (positions, simplices); positions is (N, 2), simplices
                 is (M, 3) with counterclockwise vertex identities per triangle.
        :rtype: Tuple[np.ndarray, np.ndarray]
        """
        simplices = [
            [face.first.identity, face.second.identity, face.third.identity]
            for face in self.interior_faces()
        ]
        if not simplices:
            return self.positions(), np.empty((0, 3), dtype=int)
        return self.positions(), np.array(simplices, dtype=int)
