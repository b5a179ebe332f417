"""
Input data for sneronoi.

This module contains the point-cloud generators and the scene presets that choose between them.
"""

__all__ = ['point_clouds', 'scene']
