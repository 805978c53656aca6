"""
Select operator.

Chooses between two sources according to the value of a third, the
controller. Inside the selection range [minimum, maximum] the output is the
second source, outside it the first. A non-zero fall-off blends the two
sources with an S-curve over a band of that half-width around each bound.
"""

import numpy as np

from ..constants import DEFAULT_SELECT_FALL_OFF, DEFAULT_SELECT_MAX, DEFAULT_SELECT_MIN
from ..core.module_base import ModuleBase
from ..noise import interpolate_linear, map_cubic_s_curve


class Select(ModuleBase):
    """
    Threshold selection between input1 and input2 driven by a controller.

    Args:
        input1 (ModuleBase, optional): Output outside the selection range
        input2 (ModuleBase, optional): Output inside the selection range
        controller (ModuleBase, optional): Module compared against the range
        minimum (float): Lower bound of the selection range (default: -1.0)
        maximum (float): Upper bound of the selection range (default: 1.0)
        fall_off (float): Half-width of the blend band at each bound
            (default: 0.0), silently clamped to half the range width

    The requested fall-off is remembered, so widening the range later lets
    it grow back up to the requested value.
    """

    def __init__(
        self,
        input1=None,
        input2=None,
        controller=None,
        minimum=DEFAULT_SELECT_MIN,
        maximum=DEFAULT_SELECT_MAX,
        fall_off=DEFAULT_SELECT_FALL_OFF,
    ):
        super().__init__(3)
        if input1 is not None:
            self[0] = input1
        if input2 is not None:
            self[1] = input2
        if controller is not None:
            self[2] = controller
        self._raw_fall_off = float(fall_off)
        self._apply(float(minimum), float(maximum), self._raw_fall_off)

    def _apply(self, minimum, maximum, raw_fall_off):
        half = (maximum - minimum) / 2.0
        fall_off = half if raw_fall_off > half else raw_fall_off
        self._raw_fall_off = raw_fall_off
        self._config = (minimum, maximum, fall_off)

    @property
    def input1(self):
        return self._sources[0]

    @input1.setter
    def input1(self, module):
        self[0] = module

    @property
    def input2(self):
        return self._sources[1]

    @input2.setter
    def input2(self, module):
        self[1] = module

    @property
    def controller(self):
        return self._sources[2]

    @controller.setter
    def controller(self, module):
        self[2] = module

    @property
    def minimum(self):
        return self._config[0]

    @minimum.setter
    def minimum(self, value):
        self._apply(float(value), self._config[1], self._raw_fall_off)

    @property
    def maximum(self):
        return self._config[1]

    @maximum.setter
    def maximum(self, value):
        self._apply(self._config[0], float(value), self._raw_fall_off)

    @property
    def fall_off(self):
        """Effective (clamped) fall-off."""
        return self._config[2]

    @fall_off.setter
    def fall_off(self, value):
        self._apply(self._config[0], self._config[1], float(value))

    def set_bounds(self, minimum, maximum):
        """
        Set both bounds of the selection range at once.

        Raises:
            ValueError: If minimum is not below maximum
        """
        if not minimum < maximum:
            raise ValueError(f"minimum must be below maximum, got [{minimum}, {maximum}]")
        self._apply(float(minimum), float(maximum), self._raw_fall_off)

    def _get_value(self, x, y, z):
        lo, hi, fall_off = self._config
        cv = self._sources[2].get_value(x, y, z)
        a = self._sources[0].get_value(x, y, z)
        b = self._sources[1].get_value(x, y, z)

        if fall_off > 0.0:
            lower_lc = lo - fall_off
            lower_uc = lo + fall_off
            upper_lc = hi - fall_off
            upper_uc = hi + fall_off
            blend_lower = interpolate_linear(
                a, b, map_cubic_s_curve((cv - lower_lc) / (lower_uc - lower_lc))
            )
            blend_upper = interpolate_linear(
                b, a, map_cubic_s_curve((cv - upper_lc) / (upper_uc - upper_lc))
            )
            return np.select(
                [cv < lower_lc, cv < lower_uc, cv < upper_lc, cv < upper_uc],
                [a, blend_lower, b, blend_upper],
                default=a,
            )

        outside = (cv < lo) | (cv > hi)
        return np.where(outside, a, b)
