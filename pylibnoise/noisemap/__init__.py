"""
2D map projection of module graphs.

Provides NoiseMap2D, which samples a module graph into a heightmap-like
buffer through planar, spherical or cylindrical projections, and the default
bounds of each projection.
"""

from ..constants import (
    ANGLE_MAX,
    ANGLE_MIN,
    BOTTOM,
    EAST,
    LEFT,
    NORTH,
    RIGHT,
    SOUTH,
    TOP,
    WEST,
)
from .noise_map import NoiseMap2D, cell_coordinates

__all__ = [
    "NoiseMap2D",
    "cell_coordinates",
    "SOUTH",
    "NORTH",
    "WEST",
    "EAST",
    "ANGLE_MIN",
    "ANGLE_MAX",
    "LEFT",
    "RIGHT",
    "TOP",
    "BOTTOM",
]
