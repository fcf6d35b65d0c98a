"""Tests for statfunc.normal.

    - pnorm: standard normal CDF, both tails, all three approximation regions
"""

import math

import pytest
import numpy as np

from statfunc.normal import pnorm, swap_tail, do_del, SPLIT, M_SQRT_32, LOWER_CUTOFF, UPPER_CUTOFF


# =============================================================================
# Test Reference Values
# =============================================================================

class TestPnormReference:
	"""Known values."""

	def test_central(self):
		np.testing.assert_allclose(pnorm(0.25, True), 0.5987063256829237, rtol=0, atol=1e-12)

	def test_central_negative(self):
		np.testing.assert_allclose(pnorm(-0.125, True), 0.45026177516988714, rtol=0, atol=1e-12)

	def test_central_negative_upper(self):
		np.testing.assert_allclose(pnorm(-0.125, False), 0.5497382248301129, rtol=0, atol=1e-12)

	def test_intermediate(self):
		np.testing.assert_allclose(pnorm(1.96, True), 0.9750021048517796, rtol=0, atol=1e-12)

	def test_intermediate_upper(self):
		np.testing.assert_allclose(pnorm(-3.0, False), 0.9986501019683699, rtol=0, atol=1e-12)

	def test_far_lower_tail(self):
		p = pnorm(-25.0, True)
		np.testing.assert_allclose(math.log(p), -3.1663940800802027e2, rtol=0, atol=1e-12)

	def test_far_upper_tail(self):
		p = pnorm(25.0, False)
		np.testing.assert_allclose(math.log(p), -3.1663940800802027e2, rtol=0, atol=1e-12)

	def test_far_complement(self):
		assert 1.0 - pnorm(25.0, True) < 1e-12

	def test_default_is_lower_tail(self):
		assert pnorm(1.96) == pnorm(1.96, True)

	def test_zero(self):
		assert pnorm(0.0) == 0.5
		assert pnorm(0.0, False) == 0.5
		assert pnorm(1e-300) == 0.5


# =============================================================================
# Test Special Values
# =============================================================================

class TestPnormSpecial:
	"""Infinities, NaN and underflow."""

	def test_infinities(self):
		assert pnorm(-math.inf, True) == 0.0
		assert pnorm(-math.inf, False) == 1.0
		assert pnorm(math.inf, True) == 1.0
		assert pnorm(math.inf, False) == 0.0

	def test_nan(self):
		assert math.isnan(pnorm(math.nan, True))
		assert math.isnan(pnorm(math.nan, False))

	def test_beyond_range(self):
		assert pnorm(-40.0, True) == 0.0
		assert pnorm(-40.0, False) == 1.0
		assert pnorm(40.0, True) == 1.0
		assert pnorm(40.0, False) == 0.0

	def test_asymptotic_window_endpoints(self):
		"""The far-tail window is half open: [-37.5193, 8.2924) lower, [-8.2924, 37.5193) upper."""
		assert pnorm(UPPER_CUTOFF, True) == 1.0
		inside = pnorm(-UPPER_CUTOFF, True)
		assert 0.0 < inside < 1e-15
		assert pnorm(UPPER_CUTOFF, False) == inside

		assert pnorm(LOWER_CUTOFF, True) > 0.0
		assert pnorm(np.nextafter(LOWER_CUTOFF, -np.inf), True) == 0.0
		assert pnorm(-LOWER_CUTOFF, False) == 0.0
		assert pnorm(np.nextafter(-LOWER_CUTOFF, 0.0), False) > 0.0

	def test_lower_tail_saturates(self):
		"""Past 8.2924 the lower tail is exactly one."""
		assert pnorm(9.0, True) == 1.0
		assert pnorm(-9.0, False) == 1.0

	def test_deep_tail_positive(self):
		for z in [6.0, 10.0, 20.0, 37.0]:
			p = pnorm(-z)
			assert 0.0 < p < 1e-8

	def test_accepts_ints(self):
		assert pnorm(0) == 0.5
		assert isinstance(pnorm(np.float64(1.0)), float)


# =============================================================================
# Test Properties
# =============================================================================

class TestPnormProperties:
	"""Symmetry, monotonicity and agreement with scipy."""

	def test_symmetry(self):
		for z in np.linspace(-39.9, 39.9, 533):
			np.testing.assert_allclose(pnorm(-z, True), pnorm(z, False), rtol=1e-15, atol=0,
				err_msg=f"pnorm({-z})")

	def test_complement(self):
		for z in np.linspace(-8.0, 8.0, 161):
			np.testing.assert_allclose(pnorm(z, True) + pnorm(z, False), 1.0, rtol=0, atol=1e-15)

	def test_monotone(self):
		z = np.linspace(-40.0, 40.0, 4001)
		p = np.array([pnorm(zi) for zi in z])
		assert np.all(np.diff(p) >= -1e-15)

	def test_region_boundaries_continuous(self):
		for edge in [SPLIT, M_SQRT_32]:
			for sign in [-1.0, 1.0]:
				below = pnorm(sign*np.nextafter(edge, 0.0))
				above = pnorm(sign*np.nextafter(edge, np.inf))
				np.testing.assert_allclose(below, above, rtol=1e-13)

	def test_matches_scipy(self):
		stats = pytest.importorskip("scipy.stats")
		for z in np.linspace(-37.0, 8.0, 181):
			np.testing.assert_allclose(pnorm(z), stats.norm.cdf(z), rtol=1e-11, atol=0,
				err_msg=f"pnorm({z})")
			np.testing.assert_allclose(pnorm(-z, False), stats.norm.sf(-z), rtol=1e-11, atol=0,
				err_msg=f"pnorm({-z}, upper)")


# =============================================================================
# Test Helpers
# =============================================================================

class TestHelpers:
	"""swap_tail quadrants and the cancellation-avoidance split."""

	def test_swap_tail(self):
		assert swap_tail(-1.0, 0.25, True) == 0.25
		assert swap_tail(-1.0, 0.25, False) == 0.75
		assert swap_tail(1.0, 0.25, True) == 0.75
		assert swap_tail(1.0, 0.25, False) == 0.25
		assert swap_tail(0.0, 0.25, False) == 0.25

	def test_do_del_matches_exp(self):
		for x in [0.7, 1.3, 3.14159, 5.5, -7.25]:
			np.testing.assert_allclose(do_del(x, 1.0), math.exp(-x*x/2.0), rtol=1e-14)

	def test_do_del_scales(self):
		assert do_del(2.0, 3.0) == 3.0*do_del(2.0, 1.0)
