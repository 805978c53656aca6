"""
Rotate operator.

Rotates the input coordinates around the origin before evaluating the
source, which turns the whole source field. Angles are in degrees and are
applied as Euler rotations; the rotation matrix is rebuilt on every angle
change.
"""

import math

from ..core.module_base import ModuleBase
from ..constants import DEG_TO_RAD


def rotation_matrix(x_angle, y_angle, z_angle):
    """
    Rotation matrix for Euler angles in degrees.

    Returns:
        Tuple of three row tuples
    """
    xc = math.cos(x_angle * DEG_TO_RAD)
    yc = math.cos(y_angle * DEG_TO_RAD)
    zc = math.cos(z_angle * DEG_TO_RAD)
    xs = math.sin(x_angle * DEG_TO_RAD)
    ys = math.sin(y_angle * DEG_TO_RAD)
    zs = math.sin(z_angle * DEG_TO_RAD)
    return (
        (ys * xs * zs + yc * zc, xc * zs, ys * zc - yc * xs * zs),
        (ys * xs * zc - yc * zs, xc * zc, -yc * xs * zc - ys * zs),
        (-ys * xc, xs, yc * xc),
    )


class Rotate(ModuleBase):
    """
    Rotates the input coordinates of its source.

    Args:
        source (ModuleBase, optional): Source module
        x, y, z (float): Rotation angles in degrees around each axis
    """

    def __init__(self, source=None, x=0.0, y=0.0, z=0.0):
        super().__init__(1)
        if source is not None:
            self[0] = source
        self.set_angles(x, y, z)

    def set_angles(self, x, y, z):
        """Set all three angles and rebuild the rotation matrix."""
        angles = (float(x), float(y), float(z))
        self._rotation = (angles, rotation_matrix(*angles))

    @property
    def angles(self):
        return self._rotation[0]

    @property
    def matrix(self):
        return self._rotation[1]

    @property
    def x(self):
        return self._rotation[0][0]

    @x.setter
    def x(self, value):
        _, y, z = self._rotation[0]
        self.set_angles(value, y, z)

    @property
    def y(self):
        return self._rotation[0][1]

    @y.setter
    def y(self, value):
        x, _, z = self._rotation[0]
        self.set_angles(x, value, z)

    @property
    def z(self):
        return self._rotation[0][2]

    @z.setter
    def z(self, value):
        x, y, _ = self._rotation[0]
        self.set_angles(x, y, value)

    def _get_value(self, x, y, z):
        (r1, r2, r3) = self._rotation[1]
        nx = r1[0] * x + r1[1] * y + r1[2] * z
        ny = r2[0] * x + r2[1] * y + r2[2] * z
        nz = r3[0] * x + r3[1] * y + r3[2] * z
        return self._sources[0].get_value(nx, ny, nz)
