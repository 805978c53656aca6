"""Concentric spheres generator."""

import numpy as np

from ..constants import DEFAULT_FREQUENCY
from ..core.module_base import ModuleBase


class Spheres(ModuleBase):
    """
    Outputs concentric shells centred on the origin.

    The value is 1 on every shell of integer radius (in frequency-scaled
    units) and falls linearly to -1 halfway between two shells.
    """

    def __init__(self, frequency=DEFAULT_FREQUENCY):
        super().__init__(0)
        self.frequency = frequency

    @property
    def frequency(self):
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        self._frequency = float(value)

    def _get_value(self, x, y, z):
        x = x * self._frequency
        y = y * self._frequency
        z = z * self._frequency
        dfc = np.sqrt(x * x + y * y + z * z)
        dfss = dfc - np.floor(dfc)
        dfls = 1.0 - dfss
        nd = np.minimum(dfss, dfls)
        return 1.0 - nd * 4.0
