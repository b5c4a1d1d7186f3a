# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np

from delaunay_voronoi.geometry import Circle2D, Point2D
from delaunay_voronoi.triangulation import (
    CornerFace,
    DelaunayTriangulation,
    EdgeFace,
    InteriorFace,
    Vertex,
    cavity_boundary,
    edge_key,
    initial_faces,
    insert_vertex,
    join_edge,
    split_cavity,
)
from delaunay_voronoi.triangulation.faces import CORNER_DIRECTIONS, VIRTUAL_DIRECTIONS
from delaunay_voronoi.utils import random_points


def make_vertex(x, y, identity):
    p = Point2D(float(x), float(y))
    return Vertex(p, p, identity)


def cross(ox, oy, ax, ay, px, py):
    # z of (a - o) x (p - o)
    return (ax - ox) * (py - oy) - (ay - oy) * (px - ox)


def face_covers(face, p):
    """Geometric (limit) region of a face: triangle, strip or wedge."""
    if isinstance(face, InteriorFace):
        a, b, c = (v.position for v in face.vertices())
        return (cross(a.x, a.y, b.x, b.y, p.x, p.y) > 0
                and cross(b.x, b.y, c.x, c.y, p.x, p.y) > 0
                and cross(c.x, c.y, a.x, a.y, p.x, p.y) > 0)
    if isinstance(face, EdgeFace):
        a = face.first.position
        b = face.second.position
        d = VIRTUAL_DIRECTIONS[face.outer_id]
        return (cross(a.x, a.y, b.x, b.y, p.x, p.y) > 0
                and d.cross(p.x - b.x, p.y - b.y) > 0
                and -d.cross(p.x - a.x, p.y - a.y) > 0)
    v = face.vertex.position
    d1 = VIRTUAL_DIRECTIONS[face.outer_id1]
    d2 = VIRTUAL_DIRECTIONS[face.outer_id2]
    return d1.cross(p.x - v.x, p.y - v.y) > 0 and -d2.cross(p.x - v.x, p.y - v.y) > 0


def test_edge_key_is_symmetric():
    v = make_vertex(0, 0, 3)
    assert edge_key(v, -1) == edge_key(-1, v) == (3, -1)
    w = make_vertex(1, 0, 5)
    assert edge_key(v, w) == edge_key(w, v) == (5, 3)
    assert edge_key(-2, -3) == (-2, -3)


def test_cavity_boundary_cancels_shared_edge():
    a = make_vertex(0, 0, 0)
    b = make_vertex(1, 0, 1)
    c = make_vertex(1, 1, 2)
    d = make_vertex(0, 1, 3)
    f1 = InteriorFace(a, b, c, Circle2D.through_points(a.position, b.position, c.position))
    f2 = InteriorFace(a, c, d, Circle2D.through_points(a.position, c.position, d.position))

    boundary = cavity_boundary([f1, f2])
    assert len(boundary) == 4
    assert set((s.identity, e.identity) for s, e in boundary) == {(0, 1), (1, 2), (2, 3), (3, 0)}


def test_cavity_boundary_of_initial_corners():
    a = make_vertex(0, 0, 0)
    corners = initial_faces(a)
    # Two corners share the edge (a, -1)
    boundary = cavity_boundary([corners[0], corners[2]])
    keys = set(edge_key(s, e) for s, e in boundary)
    assert keys == {(-1, -2), (0, -2), (0, -3), (-1, -3)}


def test_split_cavity_partitions_faces():
    a = make_vertex(0, 0, 0)
    faces = initial_faces(a)
    cavity, retained = split_cavity(Point2D(1.0, 0.0), faces)
    assert len(cavity) == 1
    assert len(retained) == 2
    assert (cavity[0].outer_id1, cavity[0].outer_id2) == (-3, -1)


def test_join_edge_builds_each_face_kind():
    new = make_vertex(0, 0, 2)
    start = make_vertex(1, 0, 0)
    end = make_vertex(0, 1, 1)

    interior = join_edge(new, start, end)
    assert isinstance(interior, InteriorFace)
    assert (interior.first, interior.second, interior.third) == (start, end, new)

    real_then_virtual = join_edge(new, start, -1)
    assert isinstance(real_then_virtual, EdgeFace)
    assert (real_then_virtual.first, real_then_virtual.second) == (new, start)
    assert np.isclose(real_then_virtual.direction.x, 1.0)

    virtual_then_real = join_edge(new, -2, end)
    assert isinstance(virtual_then_real, EdgeFace)
    assert (virtual_then_real.first, virtual_then_real.second) == (end, new)
    assert virtual_then_real.outer_id == -2
    assert np.isclose(virtual_then_real.direction.y, -1.0)

    corner = join_edge(new, -1, -2)
    assert isinstance(corner, CornerFace)
    assert corner.direction == CORNER_DIRECTIONS[(-1, -2)]


def test_join_edge_drops_collinear_triangle():
    new = make_vertex(2, 0, 2)
    assert join_edge(new, make_vertex(0, 0, 0), make_vertex(1, 0, 1)) is None


def test_insert_into_empty_face_set_gives_corners():
    v = make_vertex(3, 4, 0)
    faces = insert_vertex(v, ())
    assert len(faces) == 3
    assert all(isinstance(f, CornerFace) for f in faces)


def test_insert_vertex_does_not_modify_input():
    a = make_vertex(0, 0, 0)
    faces = initial_faces(a)
    before = tuple(faces)
    insert_vertex(make_vertex(1, 0, 1), faces)
    assert faces == before


def test_faces_tile_the_plane():
    points = random_points(15, seed=11)
    tri = DelaunayTriangulation.from_points(points)
    samples = random_points(300, bounds=(-3.0, 4.0, -3.0, 4.0), seed=12)

    for x, y in samples:
        p = Point2D(float(x), float(y))
        covering = [f for f in tri.faces() if face_covers(f, p)]
        assert len(covering) == 1


def test_face_counts_match_hull():
    # Every hull edge has one edge face, and there are always three corners
    tri = DelaunayTriangulation.from_points(random_points(25, seed=5))
    corners = [f for f in tri.faces() if isinstance(f, CornerFace)]
    edges = [f for f in tri.faces() if isinstance(f, EdgeFace)]
    assert len(corners) == 3
    hull_vertices = set(f.first.identity for f in edges)
    assert len(hull_vertices) == len(edges)
    assert len(tri.interior_faces()) == 2 * len(tri) - 2 - len(edges)
