"""
Integer lattice value noise for pylibnoise.

Hashes integer lattice coordinates and a seed into an uncorrelated
pseudo-random value. Used where only a jitter per lattice point is needed
(Voronoi seed points and cell values). All arithmetic reproduces 32-bit
wrap-around integer semantics on int64/uint64 arrays so results are
identical for scalar and vectorised calls.
"""

import numpy as np

from ..constants import (
    INT32_RANGE_LIMIT,
    SEED_NOISE_GEN,
    X_NOISE_GEN,
    Y_NOISE_GEN,
    Z_NOISE_GEN,
)
from ._array import finish, finish_int

_MASK31 = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF

# uint64 operands keep the unsigned stage in uint64 for scalars as well
_U_MASK31 = np.uint64(_MASK31)
_U_MASK32 = np.uint64(_MASK32)
_U_60493 = np.uint64(60493)
_U_19990303 = np.uint64(19990303)
_U_1376312589 = np.uint64(1376312589)


def value_noise_3d_int(ix, iy, iz, seed=0):
    """
    Hash an integer lattice point into an integer in [0, 2^31 - 1].

    Args:
        ix, iy, iz: Integer lattice coordinates (scalars or arrays)
        seed: Integer seed

    Returns:
        int or numpy.ndarray of int64 values
    """
    ix = np.asarray(ix, dtype=np.int64)
    iy = np.asarray(iy, dtype=np.int64)
    iz = np.asarray(iz, dtype=np.int64)
    s = int(seed) & _MASK32

    n = (X_NOISE_GEN * ix + Y_NOISE_GEN * iy + Z_NOISE_GEN * iz + SEED_NOISE_GEN * s) & _MASK31
    n = ((n >> 13) ^ n).astype(np.uint64)

    # n < 2^31, so every product below stays under 2^64
    t = (n * n) & _U_MASK32
    t = (t * _U_60493 + _U_19990303) & _U_MASK32
    n = (n * t + _U_1376312589) & _U_MASK31
    return finish_int(n.astype(np.int64))


def value_noise_3d(ix, iy, iz, seed=0):
    """Value noise of an integer lattice point, in [-1, 1]."""
    n = np.asarray(value_noise_3d_int(ix, iy, iz, seed), dtype=np.float64)
    return finish(1.0 - n / INT32_RANGE_LIMIT)
