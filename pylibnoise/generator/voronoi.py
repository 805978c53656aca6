"""
Voronoi cell generator.

Every unit lattice cube holds one seed point, jittered inside the cube by
value noise. A sample takes the value of its nearest seed point, searched in
the 5x5x5 block of cubes around it. Optionally the distance to that point is
added, which shades each cell from its centre outward.
"""

import numpy as np

from ..constants import DEFAULT_FREQUENCY, DEFAULT_SEED, DEFAULT_VORONOI_DISPLACEMENT, SQRT3
from ..core.module_base import ModuleBase
from ..noise import lattice_coordinate, value_noise_3d

# Search radius in lattice cells around the sample cell
_SEARCH = range(-2, 3)


class Voronoi(ModuleBase):
    """
    Three-dimensional Voronoi cells.

    Args:
        frequency (float): Seed point density (default: 1.0)
        displacement (float): Scale of the per-cell random value (default: 1.0)
        seed (int): Seed of the point jitter (default: 0)
        use_distance (bool): Add the scaled distance to the nearest seed
            point (default: False)
    """

    def __init__(
        self,
        frequency=DEFAULT_FREQUENCY,
        displacement=DEFAULT_VORONOI_DISPLACEMENT,
        seed=DEFAULT_SEED,
        use_distance=False,
    ):
        super().__init__(0)
        self.frequency = frequency
        self.displacement = displacement
        self.seed = seed
        self.use_distance = use_distance

    @property
    def frequency(self):
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        self._frequency = float(value)

    @property
    def displacement(self):
        return self._displacement

    @displacement.setter
    def displacement(self, value):
        self._displacement = float(value)

    @property
    def seed(self):
        return self._seed

    @seed.setter
    def seed(self, value):
        self._seed = int(value)

    @property
    def use_distance(self):
        return self._use_distance

    @use_distance.setter
    def use_distance(self, value):
        self._use_distance = bool(value)

    def _get_value(self, x, y, z):
        x = x * self._frequency
        y = y * self._frequency
        z = z * self._frequency
        xi = lattice_coordinate(x)
        yi = lattice_coordinate(y)
        zi = lattice_coordinate(z)

        md = np.full(np.shape(x), 2147483647.0)
        xc = np.zeros(np.shape(x))
        yc = np.zeros(np.shape(x))
        zc = np.zeros(np.shape(x))

        # z outermost, x innermost; strict comparison keeps the first hit on ties
        for dz in _SEARCH:
            zcu = zi + dz
            for dy in _SEARCH:
                ycu = yi + dy
                for dx in _SEARCH:
                    xcu = xi + dx
                    xp = xcu + value_noise_3d(xcu, ycu, zcu, self._seed)
                    yp = ycu + value_noise_3d(xcu, ycu, zcu, self._seed + 1)
                    zp = zcu + value_noise_3d(xcu, ycu, zcu, self._seed + 2)
                    xd = xp - x
                    yd = yp - y
                    zd = zp - z
                    d = xd * xd + yd * yd + zd * zd
                    closer = d < md
                    md = np.where(closer, d, md)
                    xc = np.where(closer, xp, xc)
                    yc = np.where(closer, yp, yc)
                    zc = np.where(closer, zp, zc)

        if self._use_distance:
            xd = xc - x
            yd = yc - y
            zd = zc - z
            v = np.sqrt(xd * xd + yd * yd + zd * zd) * SQRT3 - 1.0
        else:
            v = 0.0

        cell = value_noise_3d(
            np.floor(xc).astype(np.int64),
            np.floor(yc).astype(np.int64),
            np.floor(zc).astype(np.int64),
            0,
        )
        return v + self._displacement * cell
