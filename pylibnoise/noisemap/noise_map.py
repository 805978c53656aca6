"""
Two-dimensional noise map.

Samples a module graph over a regular grid through one of three projections
and stores the result in a float64 buffer of shape (height, width):

- planar: the xz-plane at y = 0, optionally blended into a seamless tile
- spherical: latitude/longitude in degrees mapped onto the unit sphere
- cylindrical: angle in degrees and height mapped onto the unit cylinder

Cells are sampled at their lower corner, c_i = min + i * (max - min) / n, so
the maximum bound itself is never sampled. The whole grid is evaluated in a
single vectorized call of the generator.

Usage:
    import pylibnoise as pln

    nmap = pln.NoiseMap2D(256, generator=pln.Perlin(frequency=2.0))
    nmap.generate_planar(pln.LEFT, pln.RIGHT, pln.TOP, pln.BOTTOM, seamless=True)
    heights = nmap.get_data()
"""

import logging
import math
import time

import numpy as np

from ..constants import DEG_TO_RAD
from ..core.module_base import ModuleBase
from ..noise import interpolate_linear

logger = logging.getLogger(__name__)


def cell_coordinates(minimum, maximum, count):
    """
    Lower-corner sample coordinates of count cells spanning [minimum, maximum).

    Returns:
        numpy.ndarray: float64 array of length count
    """
    step = (maximum - minimum) / count
    return minimum + np.arange(count, dtype=np.float64) * step


class NoiseMap2D:
    """
    Rectangular buffer of noise values filled by projecting a module graph.

    Args:
        width (int): Number of columns, >= 1
        height (int, optional): Number of rows, >= 1 (default: width)
        generator (ModuleBase, optional): Root module of the graph to sample

    Raises:
        ValueError: If a dimension is not a positive integer
    """

    def __init__(self, width, height=None, generator=None):
        if height is None:
            height = width
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or int(value) != value or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        self._width = int(width)
        self._height = int(height)
        self._data = np.zeros((self._height, self._width), dtype=np.float64)
        self._border = math.nan
        self._generator = None
        self.generator = generator

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def shape(self):
        """Buffer shape, (height, width)."""
        return self._data.shape

    @property
    def generator(self):
        return self._generator

    @generator.setter
    def generator(self, module):
        if module is not None and not isinstance(module, ModuleBase):
            raise TypeError(f"generator must be a ModuleBase, got {type(module).__name__}")
        self._generator = module

    @property
    def border(self):
        """Value substituted on edge cells by with_border(); NaN disables it."""
        return self._border

    @border.setter
    def border(self, value):
        self._border = float(value)

    @property
    def data(self):
        """Read-only view of the buffer, indexed data[y, x]."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    # ------------------------------------------------------------------
    # Buffer access
    # ------------------------------------------------------------------

    def _check_cell(self, key):
        try:
            x, y = key
        except (TypeError, ValueError):
            raise TypeError("NoiseMap2D indices must be an (x, y) pair") from None
        for v in (x, y):
            if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
                raise TypeError(f"NoiseMap2D indices must be integers, got {v!r}")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Cell ({x}, {y}) outside a {self._width}x{self._height} map")
        return int(y), int(x)

    def __getitem__(self, key):
        return float(self._data[self._check_cell(key)])

    def __setitem__(self, key, value):
        self._data[self._check_cell(key)] = value

    def clear(self, value=0.0):
        """Fill every cell with value."""
        self._data.fill(value)

    def get_data(self, return_field=False):
        """
        Copy of the buffer.

        Args:
            return_field (bool): If True, return a Taichi field; if False,
                return a numpy array (default: False)

        Returns:
            numpy.ndarray of shape (height, width), or a ti.f32 Taichi field
            of that shape. Taichi must be installed and initialised (ti.init)
            by the caller for return_field=True.
        """
        if return_field:
            import taichi as ti

            field = ti.field(ti.f32, shape=self._data.shape)
            field.from_numpy(self._data.astype(np.float32))
            return field
        return self._data.copy()

    def border_mask(self):
        """
        Boolean mask of the cells that receive the border value.

        Returns:
            numpy.ndarray: True on the outermost rows and columns when a
            border value is set, all False otherwise
        """
        mask = np.zeros(self._data.shape, dtype=bool)
        if not math.isnan(self._border):
            mask[0, :] = True
            mask[-1, :] = True
            mask[:, 0] = True
            mask[:, -1] = True
        return mask

    def with_border(self):
        """Copy of the buffer with the border value applied to edge cells."""
        out = self._data.copy()
        out[self.border_mask()] = self._border
        return out

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def _prepare(self, projection, x_bounds, y_bounds):
        for lo, hi in (x_bounds, y_bounds):
            if not hi > lo:
                raise ValueError(f"{projection} projection needs max > min, got [{lo}, {hi}]")
        if self._generator is None:
            raise RuntimeError(f"No generator attached for {projection} projection")
        self._generator.validate()
        xs = cell_coordinates(x_bounds[0], x_bounds[1], self._width)
        ys = cell_coordinates(y_bounds[0], y_bounds[1], self._height)
        return np.meshgrid(xs, ys)

    def _store(self, projection, values, start):
        self._data[...] = values
        logger.debug(
            "%s projection %dx%d generated in %.3f s",
            projection,
            self._width,
            self._height,
            time.perf_counter() - start,
        )

    def generate_planar(self, left, right, top, bottom, seamless=False):
        """
        Sample the xz-plane at y = 0.

        Args:
            left, right (float): x range, columns
            top, bottom (float): z range, rows
            seamless (bool): Blend each sample with its copies one period to
                the right and below so opposite edges of the map tile

        Raises:
            ValueError: If right <= left or bottom <= top
            RuntimeError: If no generator is attached or the graph is invalid
        """
        start = time.perf_counter()
        xc, zc = self._prepare("planar", (left, right), (top, bottom))
        f = self._generator.get_value
        zero = np.zeros_like(xc)
        if not seamless:
            values = f(xc, zero, zc)
        else:
            xe = right - left
            ze = bottom - top
            swv = f(xc, zero, zc)
            sev = f(xc + xe, zero, zc)
            nwv = f(xc, zero, zc + ze)
            nev = f(xc + xe, zero, zc + ze)
            xb = 1.0 - (xc - left) / xe
            zb = 1.0 - (zc - top) / ze
            z0 = interpolate_linear(swv, sev, xb)
            z1 = interpolate_linear(nwv, nev, xb)
            values = interpolate_linear(z0, z1, zb)
        self._store("planar", values, start)

    def generate_spherical(self, south, north, west, east):
        """
        Sample the unit sphere; latitude along rows, longitude along columns.

        Args:
            south, north (float): Latitude range in degrees
            west, east (float): Longitude range in degrees

        Raises:
            ValueError: If north <= south or east <= west
            RuntimeError: If no generator is attached or the graph is invalid
        """
        start = time.perf_counter()
        lon, lat = self._prepare("spherical", (west, east), (south, north))
        r = np.cos(lat * DEG_TO_RAD)
        values = self._generator.get_value(
            r * np.cos(lon * DEG_TO_RAD),
            np.sin(lat * DEG_TO_RAD),
            r * np.sin(lon * DEG_TO_RAD),
        )
        self._store("spherical", values, start)

    def generate_cylindrical(self, angle_min, angle_max, height_min, height_max):
        """
        Sample the unit cylinder around the y axis.

        Args:
            angle_min, angle_max (float): Angle range in degrees, columns
            height_min, height_max (float): Height range, rows

        Raises:
            ValueError: If angle_max <= angle_min or height_max <= height_min
            RuntimeError: If no generator is attached or the graph is invalid
        """
        start = time.perf_counter()
        angle, height = self._prepare(
            "cylindrical", (angle_min, angle_max), (height_min, height_max)
        )
        values = self._generator.get_value(
            np.cos(angle * DEG_TO_RAD), height, np.sin(angle * DEG_TO_RAD)
        )
        self._store("cylindrical", values, start)

    def __repr__(self):
        return f"NoiseMap2D(width={self._width}, height={self._height}, generator={self._generator!r})"
