#!/usr/bin/env python3
"""
Benchmark quadtree range queries against a numpy brute-force scan.

Usage:
    uv run python scripts/benchmark_query.py [--points N] [--queries Q] [--capacity C]

Examples:
    uv run python scripts/benchmark_query.py
    uv run python scripts/benchmark_query.py --points 200000 --capacity 16
"""

from __future__ import annotations

import argparse
import time
from typing import Any

import numpy as np

from quadtree_index import Bounds, QuadTree


def brute_force(coords: np.ndarray, region: Bounds) -> np.ndarray:
    """Edge-inclusive containment mask over all points."""
    x, y = coords[:, 0], coords[:, 1]
    mask = (
        (x >= region.x)
        & (x <= region.x + region.width)
        & (y >= region.y)
        & (y <= region.y + region.height)
    )
    return coords[mask]


def run_benchmark(n_points: int, n_queries: int, capacity: int, seed: int) -> dict[str, Any]:
    """
    Build a tree and time queries against a linear scan.

    Returns:
        Dict with timing and result info
    """
    rng = np.random.default_rng(seed)
    coords = rng.uniform(0, 1000, size=(n_points, 2))

    start = time.perf_counter()
    tree = QuadTree.from_points(coords, capacity=capacity)
    build_time = time.perf_counter() - start

    origins = rng.uniform(0, 950, size=(n_queries, 2))
    sizes = rng.uniform(5, 50, size=(n_queries, 2))
    regions = [Bounds(ox, oy, w, h) for (ox, oy), (w, h) in zip(origins, sizes)]

    start = time.perf_counter()
    tree_hits = sum(len(tree.query(region)) for region in regions)
    tree_time = time.perf_counter() - start

    start = time.perf_counter()
    scan_hits = sum(len(brute_force(coords, region)) for region in regions)
    scan_time = time.perf_counter() - start

    return {
        "points": n_points,
        "queries": n_queries,
        "capacity": capacity,
        "depth": tree.get_depth(),
        "build_s": build_time,
        "tree_s": tree_time,
        "scan_s": scan_time,
        "hits_match": tree_hits == scan_hits,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[1])
    parser.add_argument("--points", type=int, default=50_000)
    parser.add_argument("--queries", type=int, default=500)
    parser.add_argument("--capacity", type=int, default=8)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    result = run_benchmark(args.points, args.queries, args.capacity, args.seed)

    print(f"{'metric':<12} {'value':>14}")
    print("-" * 27)
    for key, value in result.items():
        if isinstance(value, float):
            print(f"{key:<12} {value:>14.4f}")
        else:
            print(f"{key:<12} {value!s:>14}")


if __name__ == "__main__":
    main()
