"""Interpolation quality of coherent noise."""

import enum


class QualityMode(enum.IntEnum):
    """
    Smoothing curve applied to the lattice fractions of coherent noise.

    FAST uses the raw fraction (linear blend, visible creases at lattice
    planes), STANDARD the cubic S-curve 3t^2 - 2t^3 and BEST the quintic
    S-curve 6t^5 - 15t^4 + 10t^3, whose second derivative is also continuous.
    """

    FAST = 0
    STANDARD = 1
    BEST = 2
