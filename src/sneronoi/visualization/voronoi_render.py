"""
Voronoi rendering of a t-SNE solution.

The solution is rescaled to [-1, 1] on both axes and every point is drawn as
its Voronoi cell, filled with the point's color, on a square canvas.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import PolyCollection
from scipy.spatial import Voronoi

from .. import config


def scale_coords(solution):
    """
    Rescale each axis independently to [-1, 1].

    Args:
        solution: array-like of shape (N, 2), or a list of Point objects

    Returns:
        np.ndarray: scaled coordinates, shape (N, 2). An axis with zero
        range maps to 0.
    """
    coords = np.array([tuple(p) for p in solution], dtype=float).reshape(-1, 2)
    if len(coords) == 0:
        return coords
    mins = coords.min(axis=0)
    ranges = coords.max(axis=0) - mins
    scaled = np.zeros_like(coords)
    nonzero = ranges > 0
    scaled[:, nonzero] = 2 * (coords[:, nonzero] - mins[nonzero]) / ranges[nonzero] - 1
    return scaled


def _guard_points(distance):
    g = distance
    return np.array([[-g, -g], [0, -g], [g, -g], [-g, 0], [g, 0], [-g, g], [0, g], [g, g]], dtype=float)


def voronoi_cells(coords, guard_distance=config.VORONOI_GUARD_DISTANCE):
    """
    Voronoi cell polygon of every point.

    Guard points far outside the unit square make every real cell finite.
    Exact duplicates share one cell. A cell that still cannot be resolved
    becomes a degenerate polygon at the point so the output stays aligned
    with the input.

    Returns:
        list: one (k, 2) vertex array per input point
    """
    coords = np.asarray(coords, dtype=float).reshape(-1, 2)
    if len(coords) == 0:
        return []
    unique, inverse = np.unique(coords, axis=0, return_inverse=True)
    inverse = np.asarray(inverse).reshape(-1)
    vor = Voronoi(np.vstack([unique, _guard_points(guard_distance)]))

    unique_cells = []
    for k in range(len(unique)):
        region = vor.regions[vor.point_region[k]]
        if not region or -1 in region:
            unique_cells.append(np.repeat(unique[k:k + 1], 3, axis=0))
        else:
            unique_cells.append(_counterclockwise(vor.vertices[region]))
    return [unique_cells[k] for k in inverse]


def _counterclockwise(vertices):
    # cells are convex, so ordering by angle around the vertex mean is enough
    center = vertices.mean(axis=0)
    angles = np.arctan2(vertices[:, 1] - center[1], vertices[:, 0] - center[0])
    return vertices[np.argsort(angles)]


def make_figure(size=config.CANVAS_SIZE, background=None, dpi=config.DPI):
    """Square figure with a single borderless axes covering [-1, 1]^2."""
    fig = plt.figure(figsize=(size, size), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    if background is not None:
        fig.patch.set_facecolor(background)
        ax.set_facecolor(background)
    ax.set_xlim(-1, 1)
    # screen convention: y grows downward
    ax.set_ylim(1, -1)
    ax.set_aspect('equal')
    ax.set_axis_off()
    return fig, ax


def render_voronoi(ax, coords, colors, linewidth=config.CELL_LINEWIDTH):
    """
    Draw the Voronoi cells of already scaled coordinates.

    Args:
        ax: matplotlib axes
        coords (np.ndarray): scaled coordinates, shape (N, 2)
        colors (list): one color per point, used for fill and stroke

    Returns:
        PolyCollection: the drawn cells (pass to update_voronoi for new frames)
    """
    cells = PolyCollection(voronoi_cells(coords), facecolors=colors, edgecolors=colors,
                           linewidths=linewidth, closed=True)
    # the axes rectangle doubles as the clip frame
    cells.set_clip_on(True)
    ax.add_collection(cells)
    return cells


def update_voronoi(cells, coords):
    """Replace the cell geometry of an existing PolyCollection."""
    cells.set_verts(voronoi_cells(coords))
    return cells


def draw_solution(solution, colors, fig_ax=None):
    """Scale a solution and draw it; returns (fig, ax, cells)."""
    fig, ax = fig_ax if fig_ax is not None else make_figure()
    cells = render_voronoi(ax, scale_coords(solution), colors)
    return fig, ax, cells


def save_svg(fig, path):
    """Save the figure as SVG."""
    fig.savefig(path, format='svg')


def save_png(fig, path, size_px=config.PNG_SIZE_PX):
    """Save the figure as a square PNG of size_px pixels per side."""
    width_in = fig.get_size_inches()[0]
    fig.savefig(path, format='png', dpi=size_px / width_in)
