"""Constant-valued generator."""

import numpy as np

from ..core.module_base import ModuleBase


class Const(ModuleBase):
    """Outputs the same value everywhere."""

    def __init__(self, value=0.0):
        super().__init__(0)
        self.value = value

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = float(value)

    def _get_value(self, x, y, z):
        return np.full(np.shape(x), self._value)
