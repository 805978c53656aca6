"""
Ridged-multifractal noise generator.

Each octave folds coherent noise into a ridge (1 - |n|, squared) and weights
it by the previous octave's signal, so ridges sharpen where earlier octaves
already produced ridges and stay smooth in the valleys. Octave amplitudes
come from a spectral weight table, lacunarity^-i, rebuilt whenever the
lacunarity changes.
"""

import numpy as np

from ..constants import (
    DEFAULT_FREQUENCY,
    DEFAULT_LACUNARITY,
    DEFAULT_OCTAVE_COUNT,
    DEFAULT_SEED,
    OCTAVES_MAXIMUM,
    RIDGED_BIAS,
    RIDGED_GAIN,
    RIDGED_OFFSET,
    RIDGED_SCALE,
)
from ..core.module_base import ModuleBase
from ..noise import QualityMode, gradient_coherent_noise_3d, make_int32_range
from .perlin import clamp_octave_count


def spectral_weights(lacunarity, count=OCTAVES_MAXIMUM):
    """Per-octave weights lacunarity^-i for i in [0, count)."""
    weights = np.empty(count)
    f = 1.0
    for i in range(count):
        weights[i] = f ** -1.0
        f *= lacunarity
    return weights


class RidgedMultifractal(ModuleBase):
    """
    Three-dimensional ridged-multifractal noise.

    Args:
        frequency (float): Frequency of the first octave (default: 1.0)
        lacunarity (float): Frequency multiplier between octaves (default: 2.0)
        octave_count (int): Number of octaves, clamped to [1, OCTAVES_MAXIMUM]
            (default: 6)
        seed (int): Seed of the first octave (default: 0)
        quality (QualityMode): Interpolation quality (default: STANDARD)

    Output is clamped to [-1, 1].
    """

    def __init__(
        self,
        frequency=DEFAULT_FREQUENCY,
        lacunarity=DEFAULT_LACUNARITY,
        octave_count=DEFAULT_OCTAVE_COUNT,
        seed=DEFAULT_SEED,
        quality=QualityMode.STANDARD,
    ):
        super().__init__(0)
        self.frequency = frequency
        self.lacunarity = lacunarity
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
        return self._spectrum[0]

    @lacunarity.setter
    def lacunarity(self, value):
        value = float(value)
        weights = spectral_weights(value)
        weights.flags.writeable = False
        # Published together so an evaluation never mixes old and new
        self._spectrum = (value, weights)

    @property
    def weights(self):
        """Read-only spectral weight table (OCTAVES_MAXIMUM entries)."""
        return self._spectrum[1]

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
        lacunarity, weights = self._spectrum
        x = x * self._frequency
        y = y * self._frequency
        z = z * self._frequency
        value = np.zeros(np.shape(x))
        weight = np.ones(np.shape(x))
        for i in range(self._octave_count):
            nx = make_int32_range(x)
            ny = make_int32_range(y)
            nz = make_int32_range(z)
            seed = (self._seed + i) & 0x7FFFFFFF
            signal = gradient_coherent_noise_3d(nx, ny, nz, seed, self._quality)
            signal = RIDGED_OFFSET - np.abs(signal)
            signal = signal * signal
            signal = signal * weight
            weight = np.clip(signal * RIDGED_GAIN, 0.0, 1.0)
            value = value + signal * weights[i]
            x = x * lacunarity
            y = y * lacunarity
            z = z * lacunarity
        return np.clip(value * RIDGED_SCALE + RIDGED_BIAS, -1.0, 1.0)


# Historical spelling
RiggedMultifractal = RidgedMultifractal
