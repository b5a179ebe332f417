"""
Input point clouds for the t-SNE optimizer.

All generators take the shared random source so a seed reproduces the input.
"""

import math

from ..core.point import Point


def setup_points_stripes(rnd, groups=5, n=100, sd=0.0):
    """
    Parallel horizontal stripes: `groups` rows of `n` evenly spaced points.

    Args:
        rnd: random source exposing r_norm(mean, sd)
        groups (int): number of stripes
        n (int): points per stripe
        sd (float): Gaussian jitter added to both coordinates

    Returns:
        list: groups * n Point objects, stripe by stripe
    """
    points = []
    for i in range(groups):
        for j in range(n):
            points.append(Point(10 * j / n + rnd.r_norm(0, sd), i + rnd.r_norm(0, sd)))
    return points


def setup_points_spiral(rnd, groups=5, n=100, sd=.015, alpha=2.5, start=3, stop=5):
    """
    Interleaved spiral arms, one per group, rotated evenly around the origin.

    Each arm follows r = t^alpha for t in [pi * start, pi * stop], scaled so
    the outermost radius is 1.
    """
    if n < 2:
        raise ValueError("spiral arms need at least two points")
    points = []
    C = math.pow(math.pi * stop, alpha)  # max(t^alpha)
    for i in range(groups):
        angle = 2 * math.pi * (i / groups)
        for j in range(n):
            t = math.pi * (start + (j / (n - 1)) * (stop - start))
            r = math.pow(t, alpha) / C
            x = r * math.sin(t + angle) + rnd.r_norm(0, sd)
            y = r * math.cos(t + angle) + rnd.r_norm(0, sd)
            points.append(Point(x, y))
    return points


def gaussian_clusters(rnd, centers, n, sd):
    """n points drawn around each (x, y) center with standard deviation sd."""
    points = []
    for cx, cy in centers:
        for _ in range(n):
            points.append(Point(cx + rnd.r_norm(0, sd), cy + rnd.r_norm(0, sd)))
    return points
