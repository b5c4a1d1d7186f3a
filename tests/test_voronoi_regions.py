# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import math

import numpy as np
import pytest

from delaunay_voronoi.geometry import Circle2D, Point2D
from delaunay_voronoi.triangulation import (
    DelaunayTriangulation,
    InteriorFace,
    Vertex,
    VertexRegistry,
)
from delaunay_voronoi.utils import random_points
from delaunay_voronoi.voronoi import (
    BoundedRegion,
    UnboundedRegion,
    extract_regions,
    pseudo_angle,
)


def close_points(actual, expected):
    if len(actual) != len(expected):
        return False
    return all(np.isclose(a.x, e[0]) and np.isclose(a.y, e[1])
               for a, e in zip(actual, expected))


def test_pseudo_angle_is_monotonic_in_angle():
    center = Point2D(1.0, -2.0)
    values = []
    for degrees in range(0, 360, 5):
        angle = math.radians(degrees)
        p = Point2D(center.x + 3.0 * math.cos(angle), center.y + 3.0 * math.sin(angle))
        values.append(pseudo_angle(center, p))
    assert all(0.0 <= v < 4.0 for v in values)
    assert values == sorted(values)


def test_three_points_give_three_unbounded_regions():
    tri = DelaunayTriangulation.from_points([(0, 0), (1, 0), (0, 1)])
    regions = extract_regions(tri)
    assert regions.bounded == []
    assert len(regions.unbounded) == 3

    origin = regions.region_for(Point2D(0.0, 0.0))
    assert isinstance(origin, UnboundedRegion)
    assert close_points(origin.points, [(0.5, 0.5)])
    assert np.isclose(origin.start_axis.direction.x, 0.0)
    assert np.isclose(origin.start_axis.direction.y, -1.0)
    assert np.isclose(origin.end_axis.direction.x, -1.0)
    assert np.isclose(origin.end_axis.direction.y, 0.0)


def test_unbounded_points_run_from_start_ray_to_end_ray():
    tri = DelaunayTriangulation.from_points([(0, 0), (4, 0), (3, 3), (0, 4)])
    region = extract_regions(tri).region_for(Point2D(0.0, 0.0))
    assert isinstance(region, UnboundedRegion)
    assert close_points(region.points, [(2.0, 1.0), (1.0, 2.0)])
    assert close_points([region.start_axis.origin], [(2.0, 1.0)])
    assert close_points([region.end_axis.origin], [(1.0, 2.0)])
    assert np.isclose(region.start_axis.direction.y, -1.0)
    assert np.isclose(region.end_axis.direction.x, -1.0)
    assert np.isclose(region.to_polyline().length, 2.0 + math.sqrt(2.0))


def test_center_of_square_has_bounded_diamond():
    tri = DelaunayTriangulation.from_points([(0, 0), (2, 0), (0, 2), (2, 2), (1, 1)])
    regions = extract_regions(tri)
    assert len(regions.bounded) == 1
    assert len(regions.unbounded) == 4
    assert regions.region_count() == 5

    center = regions.bounded[0]
    assert isinstance(center, BoundedRegion)
    assert center.value == (1.0, 1.0)
    assert close_points(center.points, [(2, 1), (1, 2), (0, 1), (1, 0)])
    assert np.isclose(center.to_polygon().area, 2.0)


def test_every_circumcenter_belongs_to_its_vertices():
    tri = DelaunayTriangulation.from_points(random_points(25, seed=21))
    regions = extract_regions(tri)
    by_identity = {region.vertex.identity: region for region in regions.all()}
    assert len(by_identity) == 25

    for face in tri.interior_faces():
        for vertex in face.vertices():
            assert face.circumcircle.center in by_identity[vertex.identity].points


def test_bounded_points_are_sorted_around_vertex():
    tri = DelaunayTriangulation.from_points(random_points(40, seed=22))
    regions = extract_regions(tri)
    assert len(regions.bounded) > 0
    for region in regions.bounded:
        angles = [pseudo_angle(region.vertex.position, p) for p in region.points]
        assert angles == sorted(angles)
        assert region.to_polygon().is_valid


def test_two_points_split_the_plane():
    tri = DelaunayTriangulation.from_points([(0, 0), (1, 0)])
    regions = extract_regions(tri)
    assert regions.bounded == []
    assert len(regions.unbounded) == 2
    for region in regions.unbounded:
        assert region.points == ()
        start = region.start_axis.direction
        end = region.end_axis.direction
        assert np.isclose(start.x + end.x, 0.0)
        assert np.isclose(start.y + end.y, 0.0)


def test_collinear_middle_vertex_is_left_out():
    tri = DelaunayTriangulation.from_points([(0, 0), (1, 0), (2, 0)])
    regions = extract_regions(tri)
    assert regions.bounded == []
    assert sorted(r.vertex.identity for r in regions.unbounded) == [0, 2]


def test_empty_and_single_vertex_have_no_regions():
    assert extract_regions(DelaunayTriangulation.empty()).region_count() == 0
    single = DelaunayTriangulation.from_points([(1, 1)])
    assert extract_regions(single).all() == []


def test_polyline_of_single_circumcenter_region():
    tri = DelaunayTriangulation.from_points([(0, 0), (1, 0), (0, 1)])
    regions = extract_regions(tri)
    for region in regions.unbounded:
        line = region.to_polyline()
        assert len(line.coords) == 3
        assert np.isclose(line.length, 2.0)

    origin = regions.region_for(Point2D(0.0, 0.0))
    coords = list(origin.to_polyline().coords)
    assert np.allclose(coords, [(0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)])


def test_polyline_of_region_without_circumcenters():
    tri = DelaunayTriangulation.from_points([(0, 0), (1, 0)])
    region = extract_regions(tri).region_for(Point2D(0.0, 0.0))
    line = region.to_polyline(ray_length=3.0)
    assert np.isclose(line.length, 6.0)
    assert np.allclose(line.coords[1], (0.5, 0.0))
    assert np.allclose([line.coords[0][0], line.coords[-1][0]], [0.5, 0.5])


def test_polyline_needs_positive_ray_length():
    tri = DelaunayTriangulation.from_points([(0, 0), (1, 0)])
    region = extract_regions(tri).unbounded[0]
    with pytest.raises(ValueError):
        region.to_polyline(ray_length=0.0)


def test_vertex_with_too_few_circumcenters_is_left_out():
    # A lone interior face gives each vertex one circumcenter and no rays
    a, b, c = (Vertex(Point2D(x, y), Point2D(x, y), i)
               for i, (x, y) in enumerate([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]))
    face = InteriorFace(a, b, c, Circle2D.through_points(a.position, b.position, c.position))
    tri = DelaunayTriangulation(VertexRegistry.from_vertices([a, b, c]), (face,))
    regions = extract_regions(tri)
    assert regions.bounded == []
    assert regions.unbounded == []
