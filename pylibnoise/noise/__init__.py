"""
Numeric kernel of pylibnoise.

Deterministic primitives every noise module is built from. All functions are
pure and accept either scalars (returning Python numbers) or NumPy arrays
(evaluated element-wise).

Contents:
- Coherent gradient noise: smooth seed-dependent noise on the integer lattice
- Value noise: uncorrelated per-lattice-point pseudo-random values
- Interpolation: linear and four-point cubic interpolation, cubic and quintic
  S-curves
- Range reduction: folding of large coordinates into the 32-bit lattice range

Usage:
    import pylibnoise as pln

    n = pln.noise.gradient_coherent_noise_3d(0.3, 1.7, -2.2, seed=7)
    v = pln.noise.value_noise_3d(4, -2, 9, seed=1)
"""

from .gradient_noise import (
    build_gradient_table,
    gradient_coherent_noise_3d,
    gradient_noise_3d,
    lattice_coordinate,
)
from .interpolation import (
    interpolate_cubic,
    interpolate_linear,
    make_int32_range,
    map_cubic_s_curve,
    map_quintic_s_curve,
)
from .quality import QualityMode
from .value_noise import value_noise_3d, value_noise_3d_int

__all__ = [
    "QualityMode",
    "build_gradient_table",
    "gradient_coherent_noise_3d",
    "gradient_noise_3d",
    "lattice_coordinate",
    "interpolate_cubic",
    "interpolate_linear",
    "make_int32_range",
    "map_cubic_s_curve",
    "map_quintic_s_curve",
    "value_noise_3d",
    "value_noise_3d_int",
]
