"""
Turbulence operator.

Randomly displaces the input coordinates before evaluating the source
(domain warping). Each axis is displaced by its own Perlin field, sampled at
a distinct fixed offset and with its own seed so the three displacements are
uncorrelated.
"""

from ..constants import DEFAULT_SEED, DEFAULT_TURBULENCE_POWER, TURBULENCE_OFFSETS
from ..core.module_base import ModuleBase
from ..generator.perlin import Perlin


class Turbulence(ModuleBase):
    """
    Warps the input coordinates of its source with Perlin noise.

    Args:
        source (ModuleBase, optional): Source module
        power (float): Scale of the displacement (default: 1.0)
        seed (int, optional): Seed of the x field; y and z use seed + 1 and
            seed + 2. When omitted, supplied fields keep their own seeds and
            fields created here count on from the x field's seed (0 if the
            x field is created here too).
        frequency (float, optional): Frequency of all three fields
        roughness (int, optional): Octave count of all three fields
        x_distort, y_distort, z_distort (Perlin, optional): Displacement
            fields to use instead of fresh Perlin instances
    """

    def __init__(
        self,
        source=None,
        power=DEFAULT_TURBULENCE_POWER,
        seed=None,
        frequency=None,
        roughness=None,
        x_distort=None,
        y_distort=None,
        z_distort=None,
    ):
        super().__init__(1)
        if source is not None:
            self[0] = source
        if seed is not None:
            base = int(seed)
        elif x_distort is not None:
            base = x_distort.seed
        else:
            base = DEFAULT_SEED
        # fields created here continue from the x field seed
        distorts = []
        for offset, distort in enumerate((x_distort, y_distort, z_distort)):
            distorts.append(distort if distort is not None else Perlin(seed=base + offset))
        self._x_distort, self._y_distort, self._z_distort = distorts
        self.power = power
        if seed is not None:
            self.seed = seed
        if frequency is not None:
            self.frequency = frequency
        if roughness is not None:
            self.roughness = roughness

    @property
    def distortions(self):
        """The (x, y, z) displacement Perlin modules."""
        return (self._x_distort, self._y_distort, self._z_distort)

    @property
    def power(self):
        return self._power

    @power.setter
    def power(self, value):
        self._power = float(value)

    @property
    def frequency(self):
        return self._x_distort.frequency

    @frequency.setter
    def frequency(self, value):
        for distort in self.distortions:
            distort.frequency = value

    @property
    def roughness(self):
        return self._x_distort.octave_count

    @roughness.setter
    def roughness(self, value):
        for distort in self.distortions:
            distort.octave_count = value

    @property
    def seed(self):
        return self._x_distort.seed

    @seed.setter
    def seed(self, value):
        value = int(value)
        self._x_distort.seed = value
        self._y_distort.seed = value + 1
        self._z_distort.seed = value + 2

    def _get_value(self, x, y, z):
        (x0, y0, z0), (x1, y1, z1), (x2, y2, z2) = TURBULENCE_OFFSETS
        power = self._power
        xd = x + self._x_distort.get_value(x + x0, y + y0, z + z0) * power
        yd = y + self._y_distort.get_value(x + x1, y + y1, z + z1) * power
        zd = z + self._z_distort.get_value(x + x2, y + y2, z + z2) * power
        return self._sources[0].get_value(xd, yd, zd)
