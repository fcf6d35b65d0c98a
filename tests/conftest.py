"""Pytest configuration for statfunc tests."""

import sys
import os

# Add the repository root to the path so statfunc can be imported uninstalled
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if _root not in sys.path:
	sys.path.insert(0, _root)

import pytest
import numpy as np


def pytest_configure(config):
	config.addinivalue_line("markers", "scipy: tests cross-checked against scipy")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def beta_params():
	"""(p, q) pairs spanning small, unit, unequal and large shapes."""
	return [
		(0.5, 0.5),
		(1.0, 1.0),
		(2.0, 3.0),
		(4.0, 5.0),
		(20.0, 5.0),
		(1.5, 7.0),
		(0.3, 12.0),
	]


@pytest.fixture
def dofs():
	"""Degrees of freedom for Student's t tests."""
	return [0.5, 1.0, 2.8, 4.0, 10.0, 30.0, 200.0]


@pytest.fixture
def grid():
	"""Interior points of [0, 1]."""
	return np.linspace(0.0, 1.0, 101)[1:-1]
