"""Checkerboard generator."""

import numpy as np

from ..core.module_base import ModuleBase
from ..noise import make_int32_range


class Checker(ModuleBase):
    """
    Outputs a 3D checkerboard of unit cubes.

    A cell is +1 when the parity of floor(x), floor(y) and floor(z) XORs to
    zero and -1 otherwise, so the origin cell is +1.
    """

    def __init__(self):
        super().__init__(0)

    def _get_value(self, x, y, z):
        ix = np.floor(make_int32_range(x)).astype(np.int64)
        iy = np.floor(make_int32_range(y)).astype(np.int64)
        iz = np.floor(make_int32_range(z)).astype(np.int64)
        odd = (ix & 1) ^ (iy & 1) ^ (iz & 1)
        return np.where(odd != 0, -1.0, 1.0)
