"""
Interpolation and curve-mapping primitives for pylibnoise.

Plain arithmetic, so every function works on Python floats and NumPy arrays
alike. None of them clamp their parameter; callers are expected to pass t in
[0, 1] when that matters.
"""

import numpy as np

from ..constants import INT32_RANGE_LIMIT
from ._array import finish


def interpolate_linear(a, b, t):
    """Linear interpolation between a (t = 0) and b (t = 1)."""
    return (1.0 - t) * a + t * b


def interpolate_cubic(a, b, c, d, t):
    """
    Four-point cubic interpolation between b (t = 0) and c (t = 1).

    Args:
        a: Value before b
        b: Value at the start of the segment
        c: Value at the end of the segment
        d: Value after c
        t: Position inside the segment

    Returns:
        Interpolated value passing through b and c
    """
    p = (d - c) - (a - b)
    q = (a - b) - p
    r = c - a
    s = b
    return p * t * t * t + q * t * t + r * t + s


def map_cubic_s_curve(t):
    """Cubic S-curve: 3t^2 - 2t^3"""
    return t * t * (3.0 - 2.0 * t)


def map_quintic_s_curve(t):
    """Quintic S-curve: 6t^5 - 15t^4 + 10t^3"""
    t3 = t * t * t
    t4 = t3 * t
    t5 = t4 * t
    return 6.0 * t5 - 15.0 * t4 + 10.0 * t3


def make_int32_range(value):
    """
    Fold a coordinate into (-2^30, 2^30) so lattice indices fit a 32-bit int.

    Values already inside the range are returned unchanged, which keeps the
    noise continuous over any realistic sampling domain.
    """
    v = np.asarray(value, dtype=np.float64)
    lim = INT32_RANGE_LIMIT
    folded = np.where(
        v >= lim,
        2.0 * np.fmod(v, lim) - lim,
        np.where(v <= -lim, 2.0 * np.fmod(v, lim) + lim, v),
    )
    return finish(folded)
