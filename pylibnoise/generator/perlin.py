"""
Fractal Perlin noise generator.

Sums octave_count layers of coherent gradient noise. Each octave samples the
noise at coordinates scaled by lacunarity relative to the previous one, with
a fresh seed (seed + octave) and an amplitude scaled by persistence.
"""

import numpy as np

from ..constants import (
    DEFAULT_FREQUENCY,
    DEFAULT_LACUNARITY,
    DEFAULT_OCTAVE_COUNT,
    DEFAULT_PERSISTENCE,
    DEFAULT_SEED,
    OCTAVES_MAXIMUM,
)
from ..core.module_base import ModuleBase
from ..noise import QualityMode, gradient_coherent_noise_3d, make_int32_range


def clamp_octave_count(value):
    """Clamp an octave count to [1, OCTAVES_MAXIMUM]."""
    return int(min(max(int(value), 1), OCTAVES_MAXIMUM))


class Perlin(ModuleBase):
    """
    Three-dimensional fractal Perlin noise.

    Args:
        frequency (float): Frequency of the first octave (default: 1.0)
        lacunarity (float): Frequency multiplier between octaves (default: 2.0)
        persistence (float): Amplitude multiplier between octaves (default: 0.5)
        octave_count (int): Number of octaves, clamped to [1, OCTAVES_MAXIMUM]
            (default: 6)
        seed (int): Seed of the first octave (default: 0)
        quality (QualityMode): Interpolation quality (default: STANDARD)

    Output is the weighted octave sum; with persistence 0.5 it stays within
    roughly [-1, 1] but is not clamped.
    """

    def __init__(
        self,
        frequency=DEFAULT_FREQUENCY,
        lacunarity=DEFAULT_LACUNARITY,
        persistence=DEFAULT_PERSISTENCE,
        octave_count=DEFAULT_OCTAVE_COUNT,
        seed=DEFAULT_SEED,
        quality=QualityMode.STANDARD,
    ):
        super().__init__(0)
        self.frequency = frequency
        self.lacunarity = lacunarity
        self.persistence = persistence
        self.octave_count = octave_count
        self.seed = seed
        self.quality = quality

    @property
    def frequency(self):
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        self._frequency = float(value)

    @property
    def lacunarity(self):
        return self._lacunarity

    @lacunarity.setter
    def lacunarity(self, value):
        self._lacunarity = float(value)

    @property
    def persistence(self):
        return self._persistence

    @persistence.setter
    def persistence(self, value):
        self._persistence = float(value)

    @property
    def octave_count(self):
        return self._octave_count

    @octave_count.setter
    def octave_count(self, value):
        self._octave_count = clamp_octave_count(value)

    @property
    def seed(self):
        return self._seed

    @seed.setter
    def seed(self, value):
        self._seed = int(value)

    @property
    def quality(self):
        return self._quality

    @quality.setter
    def quality(self, value):
        self._quality = QualityMode(value)

    def _get_value(self, x, y, z):
        x = x * self._frequency
        y = y * self._frequency
        z = z * self._frequency
        value = np.zeros(np.shape(x))
        amplitude = 1.0
        for i in range(self._octave_count):
            nx = make_int32_range(x)
            ny = make_int32_range(y)
            nz = make_int32_range(z)
            seed = (self._seed + i) & 0xFFFFFFFF
            signal = gradient_coherent_noise_3d(nx, ny, nz, seed, self._quality)
            value = value + signal * amplitude
            x = x * self._lacunarity
            y = y * self._lacunarity
            z = z * self._lacunarity
            amplitude *= self._persistence
        return value
