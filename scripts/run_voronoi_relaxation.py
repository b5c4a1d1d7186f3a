#!/usr/bin/env python3
"""
Voronoi relaxation script.

This script builds the Voronoi diagram of a jittered grid, clips its cells to
the grid window, and repeatedly moves every point to the centroid of its cell
(Lloyd iterations), reporting how uniform the cell areas become.
"""

import argparse
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import delaunay_voronoi as dv


def summarize(areas):
    """Coefficient of variation of the finite cell areas."""
    finite = areas[~np.isnan(areas)]
    if finite.size == 0:
        return float('nan')
    return float(np.std(finite) / np.mean(finite))


def main():
    """Main entry point for Voronoi relaxation."""
    parser = argparse.ArgumentParser(
        description='Lloyd relaxation of Voronoi cells of a jittered grid'
    )
    parser.add_argument(
        '--grid-x',
        type=int,
        default=12,
        help='Grid columns (default: 12)'
    )
    parser.add_argument(
        '--grid-y',
        type=int,
        default=8,
        help='Grid rows (default: 8)'
    )
    parser.add_argument(
        '--jitter',
        type=float,
        default=0.4,
        help='Maximum displacement as a fraction of spacing (default: 0.4)'
    )
    parser.add_argument(
        '--iterations',
        type=int,
        default=10,
        help='Number of relaxation steps (default: 10)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=0,
        help='Random seed (default: 0)'
    )

    args = parser.parse_args()

    points = dv.utils.jittered_grid(args.grid_x, args.grid_y, jitter=args.jitter, seed=args.seed)
    bbox = dv.geometry.BoundingBox2D.from_extrema(
        -0.5, args.grid_x - 0.5, -0.5, args.grid_y - 0.5
    )
    print(f"Relaxing {len(points)} points in window {tuple(bbox)}")

    diagram = dv.VoronoiDiagram.from_points(points)
    print(f"Initial area variation: {summarize(dv.analysis.region_areas(diagram, bbox)):.4f}")

    for step in range(args.iterations):
        centroids = dv.analysis.region_centroids(diagram, bbox)
        # Cells that could not be clipped keep their point
        missing = np.isnan(centroids[:, 0])
        centroids[missing] = points[missing]
        points = centroids

        try:
            diagram = dv.VoronoiDiagram.from_points(points)
        except dv.CoincidentVerticesError as e:
            print(f"Stopping: {e}")
            break

        dv.utils.print_progress(step + 1, args.iterations, "Iterations")

    areas = dv.analysis.region_areas(diagram, bbox)
    print(f"Final area variation: {summarize(areas):.4f}")
    print(f"Total cell area: {np.nansum(areas):.6f} (window area {bbox.area():.6f})")

    print("\nRelaxation complete!")


if __name__ == '__main__':
    main()
