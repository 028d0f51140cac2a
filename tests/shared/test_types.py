"""
Unit Tests for Value Types

Test Design Techniques Used:
    - Equivalence partitioning (scalar / vector3 / quaternion)
    - Boundary value analysis (slerp at t=0, t=1, antipodal inputs)

Run: pytest tests/shared/test_types.py -v
"""

import math

import numpy as np
import pytest
import quaternion


# =============================================================================
# IDENTITY / COERCION TESTS
# =============================================================================

class TestValueTypes:
    """Tests for the ValueType registry."""

    def test_identities(self):
        """Test each type's identity element."""
        from lowpass.shared.types import QUATERNION, SCALAR, VECTOR3
        assert SCALAR.identity() == 0.0
        np.testing.assert_array_equal(VECTOR3.identity(), [0.0, 0.0, 0.0])
        assert QUATERNION.identity() == quaternion.quaternion(1.0, 0.0, 0.0, 0.0)

    def test_identity_is_fresh(self):
        """Test vector identities are independent arrays."""
        from lowpass.shared.types import VECTOR3
        assert VECTOR3.identity() is not VECTOR3.identity()

    def test_coerce_vector_copies(self):
        """Test coercion does not alias the caller's array."""
        from lowpass.shared.types import VECTOR3
        src = np.array([1.0, 2.0, 3.0])
        out = VECTOR3.coerce(src)
        src[0] = 99.0
        assert out[0] == 1.0

    def test_coerce_quaternion_rejects_bad_length(self):
        """Test a 3-sequence is not a quaternion."""
        from lowpass.shared.types import QUATERNION
        with pytest.raises(ValueError):
            QUATERNION.coerce([1.0, 0.0, 0.0])

    def test_only_quaternion_is_rotational(self):
        """Test the rotational flag."""
        from lowpass.shared.types import QUATERNION, SCALAR, VECTOR3
        assert QUATERNION.rotational
        assert not SCALAR.rotational
        assert not VECTOR3.rotational

    def test_lookup_by_name(self):
        """Test registry lookup and unknown names."""
        from lowpass.shared.types import VECTOR3, value_type_by_name
        assert value_type_by_name("vector3") is VECTOR3
        with pytest.raises(ValueError, match="Unknown value type"):
            value_type_by_name("matrix")


# =============================================================================
# BLEND TESTS
# =============================================================================

class TestBlend:
    """Tests for LinearBlend / SphericalBlend / slerp."""

    def test_linear_step(self):
        """Test the linear step is a0*x + b1*y."""
        from lowpass.shared.types import LinearBlend
        assert LinearBlend().step(0.25, 0.75, 4.0, 8.0) == pytest.approx(5.0)

    def test_slerp_endpoints(self):
        """Test t=0 gives start and t=1 gives end."""
        from lowpass.shared.types import slerp
        start = quaternion.quaternion(1.0, 0.0, 0.0, 0.0)
        end = quaternion.quaternion(math.cos(0.5), math.sin(0.5), 0.0, 0.0)
        np.testing.assert_allclose(quaternion.as_float_array(slerp(0.0, start, end)),
                                   quaternion.as_float_array(start), atol=1e-12)
        np.testing.assert_allclose(quaternion.as_float_array(slerp(1.0, start, end)),
                                   quaternion.as_float_array(end), atol=1e-12)

    def test_slerp_halfway_angle(self):
        """Test t=0.5 gives half the rotation angle."""
        from lowpass.shared.types import slerp
        start = quaternion.quaternion(1.0, 0.0, 0.0, 0.0)
        end = quaternion.quaternion(math.cos(0.6), 0.0, math.sin(0.6), 0.0)
        mid = slerp(0.5, start, end)
        assert mid.w == pytest.approx(math.cos(0.3))
        assert mid.y == pytest.approx(math.sin(0.3))

    def test_slerp_shorter_arc(self):
        """Test an end in the opposite hemisphere is flipped."""
        from lowpass.shared.types import slerp
        start = quaternion.quaternion(1.0, 0.0, 0.0, 0.0)
        end = quaternion.quaternion(-math.cos(0.6), 0.0, 0.0, -math.sin(0.6))
        mid = slerp(0.5, start, end)
        assert mid.w > 0.0
        assert mid.w == pytest.approx(math.cos(0.3))

    def test_spherical_step_ignores_feedback_gain(self):
        """Test the spherical step only uses a0."""
        from lowpass.shared.types import SphericalBlend
        start = quaternion.quaternion(1.0, 0.0, 0.0, 0.0)
        end = quaternion.quaternion(0.0, 0.0, 0.0, 1.0)
        a = SphericalBlend().step(0.3, 0.7, start, end)
        b = SphericalBlend().step(0.3, 123.0, start, end)
        assert a == b
        assert abs(a) == pytest.approx(1.0)
