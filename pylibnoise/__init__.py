"""
pylibnoise: coherent noise generation for procedural content.

Noise is produced by graphs of modules. Generators synthesise a field from
their parameters (Perlin, RidgedMultifractal, Voronoi, ...), operators
transform the output or the input coordinates of their sources (Select,
Turbulence, Rotate, ...). Any module evaluates at 3D points, with scalars or
NumPy arrays, and a NoiseMap2D samples a graph into a 2D buffer through a
planar, spherical or cylindrical projection.

Submodules:
- noise: numeric kernel (hashing, gradient and value noise, interpolation)
- core: ModuleBase and QualityMode
- generator: source-less modules
- operator: modules transforming one or more sources
- noisemap: NoiseMap2D projector
- render: colour gradients, textures and normal maps
- cli: pln-render command line tool

Usage:
    import pylibnoise as pln

    mountains = pln.RidgedMultifractal(frequency=2.0, seed=3)
    warped = pln.Turbulence(mountains, power=0.125, frequency=4.0)

    nmap = pln.NoiseMap2D(512, 256, generator=warped)
    nmap.generate_spherical(pln.SOUTH, pln.NORTH, pln.WEST, pln.EAST)
    pln.render.to_image(nmap, pln.render.Gradient.terrain()).save("planet.png")
"""

__version__ = "0.1.0"

from . import constants, core, generator, noise, noisemap, operator, render
from .constants import (
    ANGLE_MAX,
    ANGLE_MIN,
    BOTTOM,
    EAST,
    LEFT,
    NORTH,
    OCTAVES_MAXIMUM,
    RIGHT,
    SOUTH,
    TOP,
    WEST,
)
from .core import ModuleBase, QualityMode
from .generator import (
    Checker,
    Const,
    Perlin,
    RidgedMultifractal,
    RiggedMultifractal,
    Spheres,
    Voronoi,
)
from .noisemap import NoiseMap2D
from .operator import Curve, Exponent, Max, Rotate, Select, Translate, Turbulence

__all__ = [
    "constants",
    "core",
    "generator",
    "noise",
    "noisemap",
    "operator",
    "render",
    "ModuleBase",
    "QualityMode",
    "Checker",
    "Const",
    "Perlin",
    "RidgedMultifractal",
    "RiggedMultifractal",
    "Spheres",
    "Voronoi",
    "Curve",
    "Exponent",
    "Max",
    "Rotate",
    "Select",
    "Translate",
    "Turbulence",
    "NoiseMap2D",
    "OCTAVES_MAXIMUM",
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
