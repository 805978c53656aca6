"""Unit tests for the numeric noise kernel."""

import numpy as np
import pytest

from pylibnoise.noise import (
    QualityMode,
    build_gradient_table,
    gradient_coherent_noise_3d,
    gradient_noise_3d,
    interpolate_cubic,
    interpolate_linear,
    lattice_coordinate,
    make_int32_range,
    map_cubic_s_curve,
    map_quintic_s_curve,
    value_noise_3d,
    value_noise_3d_int,
)


class TestInterpolation:
    """Interpolation helpers and S-curves."""

    @pytest.mark.unit
    def test_linear_endpoints(self):
        """Linear interpolation hits both ends and blends between them."""
        assert interpolate_linear(2.0, 6.0, 0.0) == 2.0
        assert interpolate_linear(2.0, 6.0, 1.0) == 6.0
        assert interpolate_linear(2.0, 6.0, 0.25) == pytest.approx(3.0)

    @pytest.mark.unit
    def test_cubic_passes_through_inner_points(self):
        """Cubic interpolation passes through the two inner points."""
        assert interpolate_cubic(-3.0, 1.0, 2.0, 7.0, 0.0) == pytest.approx(1.0)
        assert interpolate_cubic(-3.0, 1.0, 2.0, 7.0, 1.0) == pytest.approx(2.0)

    @pytest.mark.unit
    def test_cubic_on_collinear_points_is_linear(self):
        """Collinear points give a straight line."""
        assert interpolate_cubic(0.0, 1.0, 2.0, 3.0, 0.5) == pytest.approx(1.5)

    @pytest.mark.unit
    @pytest.mark.parametrize("curve", [map_cubic_s_curve, map_quintic_s_curve])
    def test_s_curves_fix_endpoints_and_midpoint(self, curve):
        """S-curves map 0, 0.5 and 1 to themselves."""
        assert curve(0.0) == 0.0
        assert curve(1.0) == pytest.approx(1.0)
        assert curve(0.5) == pytest.approx(0.5)

    @pytest.mark.unit
    def test_s_curve_values(self):
        """S-curves follow their cubic and quintic polynomials."""
        assert map_cubic_s_curve(0.25) == pytest.approx(3 * 0.0625 - 2 * 0.015625)
        t = 0.25
        assert map_quintic_s_curve(t) == pytest.approx(6 * t**5 - 15 * t**4 + 10 * t**3)

    @pytest.mark.unit
    def test_functions_accept_arrays(self):
        """Interpolation works element-wise on arrays."""
        t = np.linspace(0.0, 1.0, 5)
        out = interpolate_linear(np.zeros(5), np.ones(5), map_cubic_s_curve(t))
        assert out.shape == (5,)
        assert np.all(np.diff(out) > 0)


class TestInt32Range:
    """Range reduction of large coordinates."""

    @pytest.mark.unit
    def test_small_values_unchanged(self):
        """Values inside the 32-bit range pass through unchanged."""
        assert make_int32_range(12345.678) == 12345.678
        assert make_int32_range(-0.5) == -0.5

    @pytest.mark.unit
    def test_large_values_folded(self):
        """Values beyond 2^30 fold back into the range."""
        lim = 1073741824.0
        big = make_int32_range(lim + 10.0)
        assert -lim < big < lim
        assert big == pytest.approx(2.0 * 10.0 - lim)
        small = make_int32_range(-lim - 10.0)
        assert -lim < small < lim

    @pytest.mark.unit
    def test_returns_float_for_scalar(self):
        """A scalar in gives a Python float out."""
        assert isinstance(make_int32_range(3.0), float)


class TestLattice:
    """Lattice coordinate rule."""

    @pytest.mark.unit
    def test_positive_values_truncate(self):
        """Positive coordinates truncate toward zero."""
        assert lattice_coordinate(1.7) == 1
        assert lattice_coordinate(3.0) == 3

    @pytest.mark.unit
    def test_non_positive_values_step_down(self):
        """Non-positive coordinates step one cell down."""
        assert lattice_coordinate(0.0) == -1
        assert lattice_coordinate(-0.3) == -1
        assert lattice_coordinate(-2.0) == -3

    @pytest.mark.unit
    def test_array_input(self):
        """The lattice rule applies element-wise."""
        out = lattice_coordinate(np.array([2.5, 0.0, -1.5]))
        np.testing.assert_array_equal(out, [2, -1, -2])


class TestValueNoise:
    """Integer lattice hashing."""

    @pytest.mark.unit
    def test_integer_hash_range(self):
        """The integer hash stays within 31 bits."""
        ix = np.arange(-50, 50)
        out = value_noise_3d_int(ix, ix * 3, -ix, seed=7)
        assert out.dtype == np.int64
        assert np.all(out >= 0)
        assert np.all(out <= 0x7FFFFFFF)

    @pytest.mark.unit
    def test_value_noise_range(self):
        """Value noise stays within [-1, 1]."""
        ix = np.arange(-200, 200)
        out = value_noise_3d(ix, -ix, ix // 2, seed=3)
        assert np.all(out >= -1.0)
        assert np.all(out <= 1.0)

    @pytest.mark.unit
    def test_deterministic(self):
        """Equal arguments give equal hashes."""
        assert value_noise_3d(4, -2, 9, seed=1) == value_noise_3d(4, -2, 9, seed=1)
        assert value_noise_3d_int(4, -2, 9, seed=1) == value_noise_3d_int(4, -2, 9, seed=1)

    @pytest.mark.unit
    def test_seed_changes_value(self):
        """The seed changes the hashed values."""
        a = value_noise_3d(np.arange(20), 0, 0, seed=0)
        b = value_noise_3d(np.arange(20), 0, 0, seed=1)
        assert not np.array_equal(a, b)

    @pytest.mark.unit
    def test_scalar_matches_array(self):
        """Scalar and array hashing agree."""
        arr = value_noise_3d_int(np.array([5, -8]), np.array([1, 2]), np.array([0, 3]), seed=11)
        assert value_noise_3d_int(5, 1, 0, seed=11) == arr[0]
        assert value_noise_3d_int(-8, 2, 3, seed=11) == arr[1]
        assert isinstance(value_noise_3d_int(5, 1, 0, seed=11), int)

    @pytest.mark.unit
    def test_large_seed_accepted(self):
        """Seeds beyond 32 bits wrap instead of overflowing."""
        value = value_noise_3d(1, 2, 3, seed=2**40 + 5)
        assert -1.0 <= value <= 1.0


class TestGradientNoise:
    """Gradient table, lattice gradients and coherent noise."""

    @pytest.mark.unit
    def test_gradient_table_unit_vectors(self):
        """The gradient table holds 256 unit vectors."""
        table = build_gradient_table()
        assert table.shape == (256, 3)
        np.testing.assert_allclose(np.linalg.norm(table, axis=1), 1.0)

    @pytest.mark.unit
    def test_gradient_table_reproducible(self):
        """The gradient table is the same on every build."""
        np.testing.assert_array_equal(build_gradient_table(), build_gradient_table())

    @pytest.mark.unit
    def test_gradient_noise_zero_at_lattice_point(self):
        """Gradient noise vanishes at its own lattice point."""
        assert gradient_noise_3d(3.0, -2.0, 5.0, 3, -2, 5, seed=4) == 0.0

    @pytest.mark.unit
    def test_gradient_noise_bounded(self):
        """Gradient noise is bounded inside a unit cell."""
        # |g . d| <= |d| <= sqrt(3) inside a unit cell
        rng = np.random.default_rng(0)
        f = rng.uniform(0.0, 1.0, size=(3, 500))
        out = gradient_noise_3d(f[0], f[1], f[2], 0, 0, 0, seed=9)
        assert np.all(np.abs(out) <= 2.12 * np.sqrt(3.0) + 1e-12)

    @pytest.mark.unit
    def test_coherent_noise_zero_on_lattice(self):
        """Coherent noise is zero on integer lattice points."""
        assert gradient_coherent_noise_3d(1.0, 2.0, 3.0, seed=0) == 0.0
        assert gradient_coherent_noise_3d(0.0, 0.0, 0.0, seed=5) == 0.0

    @pytest.mark.unit
    def test_coherent_noise_deterministic(self):
        """Coherent noise is repeatable and returns a float for scalars."""
        a = gradient_coherent_noise_3d(0.3, 1.7, -2.2, seed=7)
        b = gradient_coherent_noise_3d(0.3, 1.7, -2.2, seed=7)
        assert a == b
        assert isinstance(a, float)

    @pytest.mark.unit
    def test_coherent_noise_scalar_matches_array(self, small_grid):
        """Scalar and array evaluation agree."""
        x, y, z = small_grid
        arr = gradient_coherent_noise_3d(x + 0.1, y + 0.2, z + 0.3, seed=2)
        assert arr.shape == x.shape
        assert arr[3, 4] == gradient_coherent_noise_3d(
            x[3, 4] + 0.1, y[3, 4] + 0.2, z[3, 4] + 0.3, seed=2
        )

    @pytest.mark.unit
    def test_coherent_noise_is_continuous(self):
        """Small steps give small changes."""
        x = np.linspace(0.1, 0.9, 801)
        out = gradient_coherent_noise_3d(x, 0.37, 0.61, seed=1)
        assert np.max(np.abs(np.diff(out))) < 0.05

    @pytest.mark.unit
    @pytest.mark.parametrize("quality", list(QualityMode))
    def test_quality_mode_zero_on_lattice(self, quality):
        """Every quality mode is zero on the lattice and finite elsewhere."""
        assert gradient_coherent_noise_3d(2.0, 1.0, 4.0, seed=0, quality=quality) == 0.0
        value = gradient_coherent_noise_3d(0.3, 0.6, 0.2, seed=0, quality=quality)
        assert np.isfinite(value)

    @pytest.mark.unit
    def test_quality_modes_differ(self):
        """The three quality modes interpolate differently."""
        pts = (0.31, 0.62, 0.17)
        fast = gradient_coherent_noise_3d(*pts, quality=QualityMode.FAST)
        std = gradient_coherent_noise_3d(*pts, quality=QualityMode.STANDARD)
        best = gradient_coherent_noise_3d(*pts, quality=QualityMode.BEST)
        assert len({fast, std, best}) == 3

    @pytest.mark.unit
    def test_seed_decorrelates(self, random_points):
        """Different seeds give different noise."""
        x, y, z = random_points
        a = gradient_coherent_noise_3d(x[:200], y[:200], z[:200], seed=0)
        b = gradient_coherent_noise_3d(x[:200], y[:200], z[:200], seed=1)
        assert not np.allclose(a, b)
