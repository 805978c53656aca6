"""Unit tests for generator modules."""

import numpy as np
import pytest

import pylibnoise as pln
from pylibnoise.generator import clamp_octave_count, spectral_weights
from pylibnoise.noise import value_noise_3d


class TestConstAndChecker:
    """Trivial generators."""

    @pytest.mark.unit
    def test_const(self, small_grid):
        """Const returns its value everywhere, shaped like the input."""
        const = pln.Const(0.75)
        assert const.get_value(5.0, -3.0, 2.0) == 0.75
        out = const.get_value(*small_grid)
        assert out.shape == small_grid[0].shape
        assert np.all(out == 0.75)

    @pytest.mark.unit
    def test_const_default(self):
        """Const defaults to zero."""
        assert pln.Const().value == 0.0

    @pytest.mark.unit
    def test_checker_parity(self):
        """Checker is +1 on even lattice parity and -1 on odd."""
        checker = pln.Checker()
        assert checker.get_value(0.0, 0.0, 0.0) == 1.0
        assert checker.get_value(1.0, 0.0, 0.0) == -1.0
        assert checker.get_value(1.0, 1.0, 0.0) == 1.0
        assert checker.get_value(1.5, 1.5, 1.5) == -1.0
        assert checker.get_value(-0.5, 0.5, 0.5) == -1.0

    @pytest.mark.unit
    def test_checker_values(self, random_points):
        """Checker only ever returns -1 or +1."""
        out = pln.Checker().get_value(*random_points)
        assert set(np.unique(out)) == {-1.0, 1.0}


class TestSpheres:
    """Concentric shells."""

    @pytest.mark.unit
    def test_shell_values(self):
        """Shells peak at integer radii and dip halfway between."""
        spheres = pln.Spheres()
        assert spheres.get_value(0.0, 0.0, 0.0) == 1.0
        assert spheres.get_value(1.0, 0.0, 0.0) == pytest.approx(1.0)
        assert spheres.get_value(0.5, 0.0, 0.0) == pytest.approx(-1.0)
        assert spheres.get_value(0.0, 0.25, 0.0) == pytest.approx(0.0)

    @pytest.mark.unit
    def test_frequency(self):
        """Frequency scales the shell spacing."""
        assert pln.Spheres(frequency=2.0).get_value(0.25, 0.0, 0.0) == pytest.approx(-1.0)

    @pytest.mark.unit
    def test_radial_symmetry(self):
        """Points at equal radius give equal values."""
        spheres = pln.Spheres(frequency=1.3)
        assert spheres.get_value(0.3, 0.4, 0.0) == pytest.approx(spheres.get_value(0.0, 0.0, 0.5))


class TestPerlin:
    """Fractal Perlin noise."""

    @pytest.mark.unit
    def test_defaults(self):
        """Constructor defaults match the documented values."""
        perlin = pln.Perlin()
        assert perlin.frequency == 1.0
        assert perlin.lacunarity == 2.0
        assert perlin.persistence == 0.5
        assert perlin.octave_count == 6
        assert perlin.seed == 0
        assert perlin.quality == pln.QualityMode.STANDARD

    @pytest.mark.unit
    def test_octave_clamp(self):
        """Octave counts are clamped to [1, OCTAVES_MAXIMUM]."""
        assert pln.Perlin(octave_count=0).octave_count == 1
        assert pln.Perlin(octave_count=1000).octave_count == pln.OCTAVES_MAXIMUM
        perlin = pln.Perlin()
        perlin.octave_count = -5
        assert perlin.octave_count == 1
        assert clamp_octave_count(12) == 12

    @pytest.mark.unit
    def test_determinism(self, random_points):
        """Equal parameters give identical fields."""
        a = pln.Perlin(seed=12, octave_count=4).get_value(*random_points)
        b = pln.Perlin(seed=12, octave_count=4).get_value(*random_points)
        np.testing.assert_array_equal(a, b)

    @pytest.mark.unit
    def test_seed_changes_output(self, random_points):
        """Different seeds give different fields."""
        x, y, z = (c[:500] for c in random_points)
        a = pln.Perlin(seed=1).get_value(x, y, z)
        b = pln.Perlin(seed=2).get_value(x, y, z)
        assert not np.allclose(a, b)

    @pytest.mark.unit
    def test_single_octave_is_coherent_noise(self):
        """One octave is plain coherent gradient noise."""
        from pylibnoise.noise import gradient_coherent_noise_3d

        perlin = pln.Perlin(frequency=1.0, octave_count=1, seed=3)
        assert perlin.get_value(0.3, 0.7, -1.2) == gradient_coherent_noise_3d(0.3, 0.7, -1.2, seed=3)

    @pytest.mark.unit
    def test_roughly_bounded(self, random_points):
        """Default Perlin stays near the unit range and varies."""
        out = pln.Perlin(seed=5).get_value(*random_points)
        assert np.all(np.abs(out) < 2.5)
        assert out.std() > 0.05

    @pytest.mark.unit
    def test_quality_setter_accepts_int(self):
        """Quality accepts plain integers."""
        perlin = pln.Perlin()
        perlin.quality = 2
        assert perlin.quality is pln.QualityMode.BEST


class TestRidgedMultifractal:
    """Ridged multifractal noise."""

    @pytest.mark.unit
    def test_spectral_weights(self):
        """Weights are lacunarity raised to minus the octave index."""
        weights = spectral_weights(2.0, 4)
        np.testing.assert_allclose(weights, [1.0, 0.5, 0.25, 0.125])

    @pytest.mark.unit
    def test_weights_follow_lacunarity(self):
        """Changing lacunarity rebuilds the weight table."""
        ridged = pln.RidgedMultifractal(lacunarity=3.0)
        assert ridged.weights[1] == pytest.approx(1.0 / 3.0)
        ridged.lacunarity = 2.0
        assert ridged.lacunarity == 2.0
        assert ridged.weights[1] == pytest.approx(0.5)
        assert len(ridged.weights) == pln.OCTAVES_MAXIMUM

    @pytest.mark.unit
    def test_weights_read_only(self):
        """The published weight table cannot be written."""
        ridged = pln.RidgedMultifractal()
        with pytest.raises(ValueError):
            ridged.weights[0] = 5.0

    @pytest.mark.unit
    def test_octave_clamp(self):
        """Octave counts are clamped to [1, OCTAVES_MAXIMUM]."""
        assert pln.RidgedMultifractal(octave_count=0).octave_count == 1
        assert pln.RidgedMultifractal(octave_count=99).octave_count == 30

    @pytest.mark.unit
    def test_determinism(self, random_points):
        """Equal parameters give identical fields."""
        a = pln.RidgedMultifractal(seed=3).get_value(*random_points)
        b = pln.RidgedMultifractal(seed=3).get_value(*random_points)
        np.testing.assert_array_equal(a, b)

    @pytest.mark.unit
    @pytest.mark.slow
    def test_bounded_range_all_octave_counts(self, random_points):
        """Output stays in [-1, 1] for every octave count."""
        for octaves in range(1, pln.OCTAVES_MAXIMUM + 1):
            out = pln.RidgedMultifractal(octave_count=octaves, seed=octaves).get_value(*random_points)
            assert np.all(out >= -1.0), octaves
            assert np.all(out <= 1.0), octaves

    @pytest.mark.unit
    def test_lattice_points_clipped_to_one(self):
        """Lattice points, where every octave is a full ridge, clip to 1."""
        ridged = pln.RidgedMultifractal()
        assert ridged.get_value(0.0, 0.0, 0.0) == 1.0
        assert ridged.get_value(2.0, 1.0, 3.0) == 1.0

    @pytest.mark.unit
    def test_alias(self):
        """The historical misspelt name refers to the same class."""
        assert pln.RiggedMultifractal is pln.RidgedMultifractal


class TestVoronoi:
    """Voronoi cells."""

    @pytest.mark.unit
    def test_defaults(self):
        """Constructor defaults match the documented values."""
        voronoi = pln.Voronoi()
        assert voronoi.frequency == 1.0
        assert voronoi.displacement == 1.0
        assert voronoi.seed == 0
        assert voronoi.use_distance is False

    @pytest.mark.unit
    def test_piecewise_constant_cells(self):
        """Without distance the field is constant within each cell."""
        x = np.linspace(-2.0, 2.0, 2001)
        out = pln.Voronoi(seed=1).get_value(x, 0.3, 0.7)
        # A handful of cells across four lattice units
        assert 1 < len(np.unique(out)) < 40
        assert np.all(np.abs(out) <= 1.0)

    @pytest.mark.unit
    def test_zero_displacement_without_distance(self, small_grid):
        """Zero displacement without distance gives zero everywhere."""
        out = pln.Voronoi(displacement=0.0).get_value(*small_grid)
        assert np.all(out == 0.0)

    @pytest.mark.unit
    def test_value_at_seed_point(self):
        """At a seed point the distance term is -1."""
        seed = 9
        xp = 0 + value_noise_3d(0, 0, 0, seed)
        yp = 0 + value_noise_3d(0, 0, 0, seed + 1)
        zp = 0 + value_noise_3d(0, 0, 0, seed + 2)
        cell = value_noise_3d(int(np.floor(xp)), int(np.floor(yp)), int(np.floor(zp)), 0)
        voronoi = pln.Voronoi(seed=seed, use_distance=True)
        assert voronoi.get_value(xp, yp, zp) == pytest.approx(-1.0 + cell)

    @pytest.mark.unit
    def test_distance_mode_differs(self, small_grid):
        """Distance shading adds a term of at least -1."""
        flat = pln.Voronoi(seed=2).get_value(*small_grid)
        shaded = pln.Voronoi(seed=2, use_distance=True).get_value(*small_grid)
        assert not np.allclose(flat, shaded)
        assert np.all(shaded >= flat - 1.0 - 1e-12)
