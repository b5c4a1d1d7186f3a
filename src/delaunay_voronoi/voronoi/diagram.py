# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Voronoi diagram built on an incremental Delaunay triangulation.

`VoronoiDiagram` mirrors the persistent interface of `DelaunayTriangulation`
and adds clipping of the (possibly unbounded) regions to a bounding box,
producing finite shapely polygons.
"""

from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from shapely.geometry import Polygon

from ..geometry import BoundingBox2D, Direction2D, Point2D
from ..triangulation import DelaunayTriangulation
from .regions import BoundedRegion, Region, UnboundedRegion, VoronoiRegions, extract_regions


def _left_half_plane(origin: Point2D, direction: Direction2D, reach: float) -> Polygon:
    # Rectangle standing in for the half-plane left of the directed line
    left = direction.rotate_counterclockwise()
    back = origin.translate_by(direction, -reach)
    front = origin.translate_by(direction, reach)
    return Polygon([
        (back.x, back.y),
        (front.x, front.y),
        (front.x + reach * left.x, front.y + reach * left.y),
        (back.x + reach * left.x, back.y + reach * left.y),
    ])


def _boundary_lines(region: UnboundedRegion) -> List[Tuple[Point2D, Direction2D]]:
    lines = [(region.start_axis.origin, region.start_axis.direction.reverse())]
    for p, q in zip(region.points, region.points[1:]):
        direction = Direction2D.from_points(p, q)
        if direction is not None:
            lines.append((p, direction))
    lines.append((region.end_axis.origin, region.end_axis.direction))
    return lines


def clip_unbounded_region(region: UnboundedRegion, bounding_box: BoundingBox2D) -> Polygon:
    """
    Intersect an unbounded Voronoi region with a bounding box.

    The region is convex and lies to the left of its boundary path, so it is
    clipped as the intersection of the left half-planes of every boundary
    line, starting from a working box that encloses both the bounding box and
    the region's finite points.

    :param region: Unbounded region.
    :type region: UnboundedRegion
    :param bounding_box: Clipping box.
    :type bounding_box: BoundingBox2D
    :return: Clipped polygon (possibly empty).
    :rtype: Polygon
    """
    anchors = list(region.points) + [region.start_axis.origin, region.end_axis.origin]
    working = bounding_box.union(BoundingBox2D.from_points(anchors)).expand_by(1.0)
    reach = 2.0 * working.diagonal()

    clipped = working.to_polygon()
    for origin, direction in _boundary_lines(region):
        clipped = clipped.intersection(_left_half_plane(origin, direction, reach))
        if clipped.is_empty:
            return Polygon()
    return clipped.intersection(bounding_box.to_polygon())


def clip_bounded_region(region: BoundedRegion, bounding_box: BoundingBox2D) -> Polygon:
    return region.to_polygon().intersection(bounding_box.to_polygon())


class VoronoiDiagram:
    """
    Voronoi diagram of a set of user values.

    Every update returns a new diagram; regions are computed on first use and
    cached on the (immutable) diagram.
    """

    def __init__(self, triangulation: DelaunayTriangulation):
        self._triangulation = triangulation
        self._regions: Optional[VoronoiRegions] = None

    @classmethod
    def empty(cls, position_of: Optional[Callable[[Any], Any]] = None) -> 'VoronoiDiagram':
        return cls(DelaunayTriangulation.empty(position_of))

    @classmethod
    def from_values(cls, values: Iterable[Any],
                    position_of: Optional[Callable[[Any], Any]] = None) -> 'VoronoiDiagram':
        """
        Build a diagram from a batch of values.

        :param values: User values.
        :type values: Iterable[Any]
        :param position_of: Projection from user value to a 2D point.
        :type position_of: Optional[Callable[[Any], Any]]
        :return: Voronoi diagram.
        :rtype: VoronoiDiagram
        :raises CoincidentVerticesError: If two values share a position.
        """
        return cls(DelaunayTriangulation.from_values(values, position_of))

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> 'VoronoiDiagram':
        return cls(DelaunayTriangulation.from_points(points))

    @classmethod
    def from_triangulation(cls, triangulation: DelaunayTriangulation) -> 'VoronoiDiagram':
        return cls(triangulation)

    def to_triangulation(self) -> DelaunayTriangulation:
        return self._triangulation

    def insert(self, value: Any) -> 'VoronoiDiagram':
        """
        Insert one value, returning a new diagram.

        :raises CoincidentVerticesError: If the value's position is already present.
        """
        return VoronoiDiagram(self._triangulation.insert(value))

    def insert_point(self, point: Any) -> 'VoronoiDiagram':
        return VoronoiDiagram(self._triangulation.insert_point(point))

    def __len__(self) -> int:
        return len(self._triangulation)

    def vertices(self) -> List[Any]:
        return self._triangulation.vertices()

    def regions(self) -> VoronoiRegions:
        if self._regions is None:
            self._regions = extract_regions(self._triangulation)
        return self._regions

    def clipped_regions(self, bounding_box: Union[BoundingBox2D, Tuple[float, float, float, float]]
                        ) -> List[Tuple[Region, Polygon]]:
        """
        Voronoi regions paired with their intersection with a bounding box.

        :param bounding_box: Clipping box, or (min_x, max_x, min_y, max_y).
        :type bounding_box: Union[BoundingBox2D, Tuple[float, float, float, float]]
        :return: List of (region, polygon) in vertex identity order; regions
                 that miss the box are omitted.
        :rtype: List[Tuple[Region, Polygon]]
        """
        if not isinstance(bounding_box, BoundingBox2D):
            bounding_box = BoundingBox2D.from_extrema(*bounding_box)

        result = []
        for region in self.regions().all():
            if isinstance(region, BoundedRegion):
                clipped = clip_bounded_region(region, bounding_box)
            else:
                clipped = clip_unbounded_region(region, bounding_box)
            if clipped.is_empty or clipped.area == 0.0:
                continue
            result.append((region, clipped))
        return result

    def polygons(self, bounding_box: Union[BoundingBox2D, Tuple[float, float, float, float]]
                 ) -> List[Tuple[Any, Polygon]]:
        """
        Voronoi regions clipped to a bounding box, keyed by user value.

        :param bounding_box: Clipping box, or (min_x, max_x, min_y, max_y).
        :type bounding_box: Union[BoundingBox2D, Tuple[float, float, float, float]]
        :return: List of (value, polygon) in vertex identity order.
        :rtype: List[Tuple[Any, Polygon]]
        """
        return [(region.value, polygon)
                for region, polygon in self.clipped_regions(bounding_box)]
