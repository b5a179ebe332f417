"""
sneronoi: t-SNE embeddings of 2D point clouds, drawn as Voronoi cells.

This package provides a Barnes-Hut capable t-SNE optimizer, generators for
its input point clouds, and a matplotlib renderer for the resulting layout.
"""

from .core.point import Point
from .core.rng import SeededRandom
from .core.tsne import TSNE

__version__ = "0.1.0"

__all__ = ['Point', 'SeededRandom', 'TSNE']
