#!/usr/bin/env python3
"""
Incremental triangulation script.

This script inserts random points one at a time into a persistent Delaunay
triangulation, reporting progress, and then prints a summary of the mesh and
its dual Voronoi cells.
"""

import argparse
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import delaunay_voronoi as dv


def main():
    """Main entry point for incremental triangulation."""
    parser = argparse.ArgumentParser(
        description='Incremental Delaunay triangulation of random points'
    )
    parser.add_argument(
        '--num-points',
        type=int,
        default=500,
        help='Number of random points to insert (default: 500)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=0,
        help='Random seed (default: 0)'
    )
    parser.add_argument(
        '--width',
        type=float,
        default=1.0,
        help='Width of the sampling window (default: 1.0)'
    )
    parser.add_argument(
        '--height',
        type=float,
        default=1.0,
        help='Height of the sampling window (default: 1.0)'
    )
    parser.add_argument(
        '--progress-every',
        type=int,
        default=100,
        help='Report progress every N insertions (default: 100)'
    )
    parser.add_argument(
        '--scale',
        type=float,
        default=15.0,
        help='Circumradius filter scale (default: 15.0)'
    )

    args = parser.parse_args()

    bounds = (0.0, args.width, 0.0, args.height)
    print(f"Sampling {args.num_points} points in {args.width} x {args.height} (seed={args.seed})")
    points = dv.utils.random_points(args.num_points, bounds=bounds, seed=args.seed)

    # Insert one point at a time; every intermediate triangulation stays valid
    tri = dv.DelaunayTriangulation.empty()
    for i, p in enumerate(points):
        tri = tri.insert_point(p)
        if (i + 1) % args.progress_every == 0:
            dv.utils.print_progress(i + 1, len(points), "Points inserted")

    print(f"Built {tri!r}")

    triangles = tri.triangles()
    edges = dv.analysis.delaunay_edges(tri)
    print(f"Triangles: {len(triangles)}")
    print(f"Edges: {len(edges)}")

    if edges:
        scale = dv.analysis.estimate_edge_length_scale(tri)
        kept = dv.analysis.filter_triangles_by_circumradius(tri, scale=args.scale)
        print(f"Median edge length: {scale:.4f}")
        print(f"Triangles kept by circumradius filter: {len(kept)}/{len(triangles)}")

    adjacency = dv.analysis.delaunay_adjacency(tri)
    if adjacency:
        degrees = np.array([len(n) for n in adjacency])
        print(f"Mean vertex degree: {degrees.mean():.3f} (max {degrees.max()})")

    bbox = dv.geometry.BoundingBox2D.from_extrema(*bounds)
    areas = dv.analysis.region_areas(tri, bbox)
    covered = np.nansum(areas)
    print(f"Voronoi cells clipped to window: {np.count_nonzero(~np.isnan(areas))}")
    print(f"Total cell area: {covered:.6f} (window area {bbox.area():.6f})")

    print("\nTriangulation complete!")


if __name__ == '__main__':
    main()
