#!/usr/bin/env python3
"""
Visualization script for the quadtree index.

Draws the quadtree partition of a random point set, highlighting the
result of a range query, into ./build/

Usage:
    uv run python scripts/visualize.py
"""

import random
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from quadtree_index import Bounds, Point, QuadTree

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def clustered_points(n, clusters=5, spread=6.0, extent=100.0, seed=42):
    """Generate points grouped around a few random centers."""
    rng = random.Random(seed)
    centers = [(rng.uniform(10, extent - 10), rng.uniform(10, extent - 10)) for _ in range(clusters)]
    points = []
    for i in range(n):
        cx, cy = centers[i % clusters]
        x = min(max(rng.gauss(cx, spread), 0.0), extent)
        y = min(max(rng.gauss(cy, spread), 0.0), extent)
        points.append(Point(x, y))
    return points


def visualize(tree, region=None, title="Quadtree", ax=None):
    """Draw node rectangles, stored points and an optional query region."""
    for node in tree.nodes():
        b = node.bounds
        ax.add_patch(
            Rectangle(
                (b.x, b.y), b.width, b.height, fill=False, edgecolor="gray", linewidth=0.5
            )
        )

    points = list(tree)
    ax.scatter([p.x for p in points], [p.y for p in points], s=6, c="steelblue", zorder=5)

    if region is not None:
        found = tree.query_array(region)
        ax.add_patch(
            Rectangle(
                (region.x, region.y),
                region.width,
                region.height,
                fill=False,
                edgecolor="crimson",
                linewidth=2,
                zorder=6,
            )
        )
        ax.scatter(found[:, 0], found[:, 1], s=10, c="crimson", zorder=7)
        title = f"{title} ({len(found)} in query)"

    b = tree.bounds
    ax.set_xlim(b.x, b.x + b.width)
    ax.set_ylim(b.y + b.height, b.y)  # y grows downward, NW at top-left
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_aspect("equal")
    ax.axis("off")


def main():
    ensure_build_dir()

    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    for ax, capacity in zip(axes, (1, 8)):
        tree = QuadTree(Bounds(0, 0, 100, 100), capacity=capacity)
        tree.insert_many(clustered_points(400))
        visualize(
            tree,
            region=Bounds(20, 30, 35, 25),
            title=f"capacity={capacity}, depth={tree.get_depth()}",
            ax=ax,
        )

    fig.tight_layout()
    output = BUILD_DIR / "quadtree.png"
    fig.savefig(output, dpi=150)
    plt.close(fig)
    print(f"Saved {output}")


if __name__ == "__main__":
    main()
