"""
Pytest Configuration - Shared Fixtures

This file contains shared fixtures used across all test modules.
"""

import pytest
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def step_input():
    """Constant 1.0 input, long enough for a one-pole at fc = fs/10 to settle."""
    return [1.0] * 200


@pytest.fixture
def tilted_rotation():
    """90 degree rotation about Z."""
    import math
    import quaternion
    half = math.pi / 4.0
    return quaternion.quaternion(math.cos(half), 0.0, 0.0, math.sin(half))


@pytest.fixture
def scalar_csv(tmp_path):
    """Small scalar recording with a header row."""
    path = tmp_path / "scalar.csv"
    path.write_text("value\n0.0\n1.0\n1.0\n1.0\n")
    return path
