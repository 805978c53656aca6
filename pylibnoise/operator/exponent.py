"""Exponent operator."""

import numpy as np

from ..constants import DEFAULT_EXPONENT
from ..core.module_base import ModuleBase


class Exponent(ModuleBase):
    """
    Applies an exponential curve to the source output.

    The source value is mapped from [-1, 1] to [0, 1], raised to the
    exponent and mapped back, so -1 and 1 are fixed points.
    """

    def __init__(self, source=None, exponent=DEFAULT_EXPONENT):
        super().__init__(1)
        if source is not None:
            self[0] = source
        self.exponent = exponent

    @property
    def exponent(self):
        return self._exponent

    @exponent.setter
    def exponent(self, value):
        self._exponent = float(value)

    def _get_value(self, x, y, z):
        v = self._sources[0].get_value(x, y, z)
        return np.power(np.abs((v + 1.0) / 2.0), self._exponent) * 2.0 - 1.0
