# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Vertex records and the vertex registry.

Each user value inserted into a triangulation is paired with its 2D position
and a dense integer identity. The identity is only a stable key (used to match
shared edges between faces); it says nothing about storage order.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from ..geometry import Point2D


class CoincidentVerticesError(ValueError):
    """
    Raised when two vertices would share exactly the same position.

    :ivar first: The value already present (or first in sorted order).
    :ivar second: The value that was offered afterwards.
    """

    def __init__(self, first: Any, second: Any):
        super().__init__(f"Coincident vertices: {first!r} and {second!r}")
        self.first = first
        self.second = second


@dataclass(frozen=True)
class Vertex:
    """A user value with its projected position and identity."""
    value: Any
    position: Point2D
    identity: int


class VertexRegistry:
    """
    Persistent collection of registered vertices.

    `register` never modifies the registry it is called on; it returns a new
    registry holding one more vertex.
    """

    def __init__(self, vertices: Tuple[Vertex, ...] = (),
                 by_position: Optional[Dict[Point2D, Vertex]] = None):
        self._vertices = tuple(vertices)
        if by_position is None:
            by_position = {v.position: v for v in self._vertices}
        self._by_position = by_position

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> 'VertexRegistry':
        """
        Build a registry from already-stamped vertices.

        :param vertices: Vertices with distinct positions.
        :type vertices: Iterable[Vertex]
        :return: Registry.
        :rtype: VertexRegistry
        :raises CoincidentVerticesError: If two vertices share a position.
        """
        by_position: Dict[Point2D, Vertex] = {}
        ordered = []
        for vertex in vertices:
            existing = by_position.get(vertex.position)
            if existing is not None:
                raise CoincidentVerticesError(existing.value, vertex.value)
            by_position[vertex.position] = vertex
            ordered.append(vertex)
        return cls(tuple(ordered), by_position)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    def __getitem__(self, identity: int) -> Vertex:
        return self._vertices[identity]

    def lookup(self, position: Point2D) -> Optional[Vertex]:
        return self._by_position.get(position)

    def register(self, value: Any, position: Point2D) -> Tuple['VertexRegistry', Vertex]:
        """
        Stamp a new value with the next free identity.

        :param value: User value.
        :type value: Any
        :param position: Position of the value.
        :type position: Point2D
        :return: Tuple of (new registry, new vertex).
        :rtype: Tuple[VertexRegistry, Vertex]
        :raises CoincidentVerticesError: If the position is already registered.
        """
        existing = self._by_position.get(position)
        if existing is not None:
            raise CoincidentVerticesError(existing.value, value)

        vertex = Vertex(value, position, len(self._vertices))
        by_position = dict(self._by_position)
        by_position[position] = vertex
        return VertexRegistry(self._vertices + (vertex,), by_position), vertex
