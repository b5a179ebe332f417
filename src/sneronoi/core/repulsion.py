"""
Repulsive forces of the t-SNE gradient.

Both strategies return the normalized repulsive term
    F_rep[i] = -sum_j (q_ij Z)^2 (y_i - y_j) / Z,    q_ij Z = 1 / (1 + d_ij)
where d_ij is the squared distance in the current solution. Pairs at exactly
zero distance are skipped and contribute neither force nor normalization.
"""

import math

import numpy as np

from .point import Point
from .quadtree import EMPTY, LEAF, build_quadtree
from .. import config


class RepulsiveForce:
    """Interface: compute(solution) maps an (N, 2) array to (N, 2) forces."""

    name = None

    def compute(self, solution):
        raise NotImplementedError


class QuadraticRepulsion(RepulsiveForce):
    """Exact O(N^2) computation over all ordered pairs."""

    name = 'quadratic'

    def compute(self, solution):
        Y = np.asarray(solution, dtype=float)
        diff = Y[:, None, :] - Y[None, :, :]   # (y_i - y_j), NxNx2
        d = np.sum(diff * diff, axis=2)
        mask = d > 0
        num = np.zeros_like(d)
        num[mask] = 1. / (1. + d[mask])
        Z = np.sum(num)
        if Z == 0:
            return np.zeros_like(Y)
        F = -np.sum(diff * (num * num)[:, :, None], axis=1)
        return F / Z


class BarnesHutRepulsion(RepulsiveForce):
    """
    Barnes-Hut approximation on a quadtree rebuilt for every call.

    A node is summarized by its centroid when 2 * half_dimension is smaller
    than theta * sqrt(d). The summary counts as a single unit-weight
    interaction, not weighted by the number of points it stands in for.
    theta = 0 never summarizes and reproduces the quadratic result.
    """

    name = 'barnes_hut'

    def __init__(self, theta=config.DEFAULT_THETA):
        self.theta = theta

    def compute(self, solution):
        Y = np.asarray(solution, dtype=float)
        points = [Point(float(x), float(y)) for x, y in Y]
        qt = build_quadtree(points)

        F = np.zeros_like(Y)
        Z = 0.0
        for i, p in enumerate(points):
            result = [0.0, 0.0, 0.0]  # force x, force y, Z
            self._recurse(qt, p, result)
            F[i, 0] = result[0]
            F[i, 1] = result[1]
            Z += result[2]
        if Z == 0:
            return np.zeros_like(Y)
        return F / Z

    def _recurse(self, qt, p, result):
        kind = qt.kind
        if kind == EMPTY:
            return
        if kind == LEAF:
            _interact(p, qt.point, result)
            return

        center = qt.centroid()
        d = p.distance_to_point(center)
        if 2 * qt.half_dimension < self.theta * math.sqrt(d):
            _interact(p, center, result)
            return

        # residual duplicates held next to the children
        if qt.point is not None:
            _interact(p, qt.point, result, qt.multiplicity)
        for child in qt.children():
            self._recurse(child, p, result)


def _interact(p, q, result, copies=1):
    d = p.distance_to_point(q)
    if d > 0:  # d == 0 means p is being compared against itself (or a duplicate)
        w = 1. / (1. + d)
        result[0] -= copies * (p.x - q.x) * w * w
        result[1] -= copies * (p.y - q.y) * w * w
        result[2] += copies * w


def select_repulsion(n, theta=config.DEFAULT_THETA, barnes_hut_cutoff=config.DEFAULT_BARNES_HUT_CUTOFF):
    """Quadratic up to the cutoff, Barnes-Hut above it."""
    if n > barnes_hut_cutoff:
        return BarnesHutRepulsion(theta)
    return QuadraticRepulsion()
