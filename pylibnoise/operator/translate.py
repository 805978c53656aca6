"""Translate operator."""

from ..constants import DEFAULT_TRANSLATION
from ..core.module_base import ModuleBase


class Translate(ModuleBase):
    """
    Shifts the input coordinates of its source.

    Args:
        source (ModuleBase, optional): Source module
        x, y, z (float): Offsets added to each input coordinate (default: 1.0)
    """

    def __init__(self, source=None, x=DEFAULT_TRANSLATION, y=DEFAULT_TRANSLATION, z=DEFAULT_TRANSLATION):
        super().__init__(1)
        if source is not None:
            self[0] = source
        self.x = x
        self.y = y
        self.z = z

    @property
    def x(self):
        return self._x

    @x.setter
    def x(self, value):
        self._x = float(value)

    @property
    def y(self):
        return self._y

    @y.setter
    def y(self, value):
        self._y = float(value)

    @property
    def z(self):
        return self._z

    @z.setter
    def z(self, value):
        self._z = float(value)

    def _get_value(self, x, y, z):
        return self._sources[0].get_value(x + self._x, y + self._y, z + self._z)
