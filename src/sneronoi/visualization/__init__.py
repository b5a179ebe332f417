"""
Visualization components for sneronoi.

This module contains the color palettes and the Voronoi rendering of t-SNE solutions.
"""

__all__ = ['color_system', 'voronoi_render']
