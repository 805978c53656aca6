"""
Generator modules of pylibnoise.

Generators have no source modules; they synthesise a field from their own
parameters.

Available Generators:
- Const: the same value everywhere
- Checker: unit-cube checkerboard of +1/-1
- Perlin: fractal sum of coherent gradient noise octaves
- RidgedMultifractal: ridged fractal noise for mountain ranges
- Spheres: concentric shells around the origin
- Voronoi: cells around jittered lattice seed points
"""

from .checker import Checker
from .const import Const
from .perlin import Perlin, clamp_octave_count
from .ridged_multifractal import RidgedMultifractal, RiggedMultifractal, spectral_weights
from .spheres import Spheres
from .voronoi import Voronoi

__all__ = [
    "Checker",
    "Const",
    "Perlin",
    "RidgedMultifractal",
    "RiggedMultifractal",
    "Spheres",
    "Voronoi",
    "clamp_octave_count",
    "spectral_weights",
]
