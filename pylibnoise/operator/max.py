"""Maximum operator."""

import numpy as np

from ..core.module_base import ModuleBase


class Max(ModuleBase):
    """Outputs the larger of its two sources."""

    def __init__(self, lhs=None, rhs=None):
        super().__init__(2)
        if lhs is not None:
            self[0] = lhs
        if rhs is not None:
            self[1] = rhs

    def _get_value(self, x, y, z):
        a = self._sources[0].get_value(x, y, z)
        b = self._sources[1].get_value(x, y, z)
        return np.maximum(a, b)
