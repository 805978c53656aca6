"""
Curve operator.

Remaps the output of its source through a user-defined curve. The curve is
a list of (input, output) control points kept sorted by input; values are
interpolated with a four-point cubic through the two control points on each
side of the source value.
"""

import numpy as np

from ..constants import CURVE_MIN_CONTROL_POINTS
from ..core.module_base import ModuleBase
from ..noise import interpolate_cubic


class Curve(ModuleBase):
    """
    Maps source values through a cubic spline of control points.

    Args:
        source (ModuleBase, optional): Source module
        control_points (iterable, optional): (input, output) pairs

    At least four control points are required before evaluation. Adding a
    point whose input already exists replaces that point's output.
    """

    def __init__(self, source=None, control_points=None):
        super().__init__(1)
        if source is not None:
            self[0] = source
        self._points = ()
        for point_in, point_out in control_points or ():
            self.add(point_in, point_out)

    @property
    def control_points(self):
        """Sorted list of (input, output) tuples."""
        return list(self._points)

    @property
    def control_point_count(self):
        return len(self._points)

    def add(self, input_value, output_value):
        """Insert a control point, replacing any point with the same input."""
        input_value = float(input_value)
        points = {p_in: p_out for p_in, p_out in self._points}
        points[input_value] = float(output_value)
        self._points = tuple(sorted(points.items()))

    def clear(self):
        self._points = ()

    def _check_configuration(self):
        if len(self._points) < CURVE_MIN_CONTROL_POINTS:
            raise RuntimeError(
                f"Curve needs at least {CURVE_MIN_CONTROL_POINTS} control points, "
                f"has {len(self._points)}"
            )

    def _get_value(self, x, y, z):
        points = self._points
        keys = np.array([p[0] for p in points])
        values = np.array([p[1] for p in points])
        last = len(points) - 1

        smv = self._sources[0].get_value(x, y, z)

        # Index of the first control point whose input is above the value
        ip = np.searchsorted(keys, smv, side="right")
        i0 = np.clip(ip - 2, 0, last)
        i1 = np.clip(ip - 1, 0, last)
        i2 = np.clip(ip, 0, last)
        i3 = np.clip(ip + 1, 0, last)

        same = i1 == i2
        k1 = keys[i1]
        k2 = keys[i2]
        span = np.where(same, 1.0, k2 - k1)
        a = (smv - k1) / span
        out = interpolate_cubic(values[i0], values[i1], values[i2], values[i3], a)
        return np.where(same, values[i1], out)
