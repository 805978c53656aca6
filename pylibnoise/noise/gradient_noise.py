"""
Coherent gradient noise for pylibnoise.

Provides the lattice gradient hash and the 3D coherent noise function every
fractal generator is built on. A fixed table of 256 unit gradient vectors is
drawn once at import time from a fixed-seed legacy NumPy RandomState, so the
table (and therefore every field) is identical across processes and machines.
The table is not libnoise's literal random-vector table, so fields are not
bit-compatible with libnoise: same structure and statistics, different values.

Coherent noise at a point is computed by:
1. Locating the eight lattice points around the sample
2. Hashing each lattice point with the seed into a gradient vector
3. Dotting each gradient with the offset from its lattice point
4. Blending the eight values along x, then y, then z using the curve selected
   by the quality mode

Inputs may be scalars or NumPy arrays of any broadcastable shape.
"""

import numpy as np

from ..constants import (
    GRADIENT_NOISE_SCALE,
    GRADIENT_TABLE_SEED,
    GRADIENT_TABLE_SIZE,
    SEED_NOISE_GEN,
    SHIFT_NOISE_GEN,
    X_NOISE_GEN,
    Y_NOISE_GEN,
    Z_NOISE_GEN,
)
from ._array import finish
from .interpolation import interpolate_linear, map_cubic_s_curve, map_quintic_s_curve
from .quality import QualityMode


def build_gradient_table(seed: int = GRADIENT_TABLE_SEED, size: int = GRADIENT_TABLE_SIZE) -> np.ndarray:
    """
    Draw a table of unit gradient vectors.

    Args:
        seed: Seed of the legacy RandomState stream
        size: Number of vectors

    Returns:
        numpy.ndarray of shape (size, 3), every row of unit length
    """
    rng = np.random.RandomState(seed)
    vectors = rng.normal(size=(size, 3))
    vectors /= np.sqrt(np.sum(vectors * vectors, axis=1, keepdims=True))
    return vectors


_GRADIENTS = build_gradient_table()
_GRADIENTS_X = np.ascontiguousarray(_GRADIENTS[:, 0])
_GRADIENTS_Y = np.ascontiguousarray(_GRADIENTS[:, 1])
_GRADIENTS_Z = np.ascontiguousarray(_GRADIENTS[:, 2])


def lattice_coordinate(value):
    """
    Integer lattice coordinate at or below a sample coordinate.

    Truncates toward zero for positive values and subtracts one otherwise, so
    an exact non-positive integer maps to the cell below it (0 -> -1).
    """
    v = np.asarray(value, dtype=np.float64)
    truncated = np.trunc(v).astype(np.int64)
    return np.where(v > 0.0, truncated, truncated - 1)


def gradient_noise_3d(fx, fy, fz, ix, iy, iz, seed=0):
    """
    Gradient contribution of one lattice point to a sample.

    Args:
        fx, fy, fz: Sample coordinates
        ix, iy, iz: Integer lattice point coordinates
        seed: Integer seed

    Returns:
        Scaled dot product of the lattice gradient with the offset vector
    """
    ix = np.asarray(ix, dtype=np.int64)
    iy = np.asarray(iy, dtype=np.int64)
    iz = np.asarray(iz, dtype=np.int64)
    s = int(seed) & 0xFFFFFFFF

    index = (X_NOISE_GEN * ix + Y_NOISE_GEN * iy + Z_NOISE_GEN * iz + SEED_NOISE_GEN * s) & 0xFFFFFFFF
    index = (index ^ (index >> SHIFT_NOISE_GEN)) & 0xFF

    xv = _GRADIENTS_X[index]
    yv = _GRADIENTS_Y[index]
    zv = _GRADIENTS_Z[index]

    dot = xv * (fx - ix) + yv * (fy - iy) + zv * (fz - iz)
    return finish(dot * GRADIENT_NOISE_SCALE)


def _map_fraction(t, quality):
    if quality == QualityMode.FAST:
        return t
    if quality == QualityMode.BEST:
        return map_quintic_s_curve(t)
    return map_cubic_s_curve(t)


def gradient_coherent_noise_3d(x, y, z, seed=0, quality=QualityMode.STANDARD):
    """
    Smooth, seed-dependent noise at (x, y, z).

    Args:
        x, y, z: Sample coordinates (scalars or arrays), expected inside the
            range produced by make_int32_range()
        seed: Integer seed; different seeds give decorrelated fields
        quality: QualityMode selecting the interpolation curve

    Returns:
        float or numpy.ndarray, roughly in [-1, 1]; exactly 0 on lattice points
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    x0 = lattice_coordinate(x)
    y0 = lattice_coordinate(y)
    z0 = lattice_coordinate(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = _map_fraction(x - x0, quality)
    ys = _map_fraction(y - y0, quality)
    zs = _map_fraction(z - z0, quality)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z0, seed)
    ix0 = interpolate_linear(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z0, seed)
    ix1 = interpolate_linear(n0, n1, xs)
    iy0 = interpolate_linear(ix0, ix1, ys)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z1, seed)
    ix0 = interpolate_linear(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z1, seed)
    ix1 = interpolate_linear(n0, n1, xs)
    iy1 = interpolate_linear(ix0, ix1, ys)

    return finish(interpolate_linear(iy0, iy1, zs))
