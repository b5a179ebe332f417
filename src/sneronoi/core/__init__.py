"""
Core computation modules for sneronoi.

This module contains the t-SNE optimizer and the data structures it relies on:
points, nearest-neighbor search, the quadtree and the repulsive-force strategies.
"""

__all__ = ['point', 'nearest_neighbors', 'quadtree', 'perplexity', 'repulsion', 'tsne', 'rng']
