"""
Value types understood by the filters.

A filter never touches the arithmetic of its samples directly. It works
through a ValueType, which knows how to build the identity element of the
type, how to coerce caller input into it, and how the one-pole update
blends a new sample into the previous output.

    scalar      float
    vector3     numpy array, shape (3,)
    quaternion  quaternion.quaternion (w, x, y, z), numpy-quaternion

Usage:
    from lowpass.shared.types import VECTOR3, vector3

    VECTOR3.identity()          # array([0., 0., 0.])
    VECTOR3.coerce((1, 2, 3))   # array([1., 2., 3.])
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict

import numpy as np
import quaternion


class Blend(ABC):
    """How a one-pole filter moves its output toward a new sample."""

    @abstractmethod
    def step(self, a0: float, b1: float, previous: Any, sample: Any) -> Any:
        """Return the next output given the gains, the last output and the input."""


class LinearBlend(Blend):
    """y0 = a0*x + b1*y0 using the type's own + and scalar *."""

    def step(self, a0: float, b1: float, previous: Any, sample: Any) -> Any:
        return a0 * sample + b1 * previous


class SphericalBlend(Blend):
    """
    y0 = slerp(a0, y0, x).

    Only the input gain a0 is used.
    """

    def step(self, a0: float, b1: float, previous: Any, sample: Any) -> Any:
        return slerp(a0, previous, sample)


def vector3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a float64 3-vector."""
    return np.array([x, y, z], dtype=float)


def identity_rotation() -> quaternion.quaternion:
    return quaternion.quaternion(1.0, 0.0, 0.0, 0.0)


def slerp(t: float, start: quaternion.quaternion,
          end: quaternion.quaternion) -> quaternion.quaternion:
    """
    Spherical interpolation from start (t=0) toward end (t=1).

    Takes the shorter arc: q and -q are the same rotation, so end is
    flipped into the hemisphere of start before interpolating.
    """
    dot = float(np.dot(quaternion.as_float_array(start),
                       quaternion.as_float_array(end)))
    if dot < 0.0:
        end = -end
    result = quaternion.slerp_evaluate(start, end, t)
    return result.normalized()


def _coerce_scalar(value: Any) -> float:
    return float(value)


def _coerce_vector3(value: Any) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {arr.shape}")
    return arr


def _copy_vector3(value: np.ndarray) -> np.ndarray:
    return np.array(value, dtype=float, copy=True)


def _same(value: Any) -> Any:
    return value


def _coerce_quaternion(value: Any) -> quaternion.quaternion:
    if isinstance(value, quaternion.quaternion):
        return value
    arr = np.array(value, dtype=float)
    if arr.shape != (4,):
        raise ValueError(f"Expected a quaternion (w, x, y, z), got shape {arr.shape}")
    return quaternion.quaternion(*arr)


@dataclass(frozen=True)
class ValueType:
    """
    Traits of a filterable value type.

    Attributes:
        name: Registry name ("scalar", "vector3", "quaternion")
        identity: Factory for the zero/identity element
        coerce: Converts caller input into the concrete type
        blend: One-pole update strategy
        rotational: True when the values are rotations
        copy: Independent copy of a value; immutable types return it as is
    """

    name: str
    identity: Callable[[], Any]
    coerce: Callable[[Any], Any]
    blend: Blend
    rotational: bool = False
    copy: Callable[[Any], Any] = _same

    def __str__(self):
        return self.name


SCALAR = ValueType("scalar", float, _coerce_scalar, LinearBlend())
VECTOR3 = ValueType("vector3", vector3, _coerce_vector3, LinearBlend(),
                    copy=_copy_vector3)
QUATERNION = ValueType("quaternion", identity_rotation, _coerce_quaternion,
                       SphericalBlend(), rotational=True)

VALUE_TYPES: Dict[str, ValueType] = {
    vt.name: vt for vt in (SCALAR, VECTOR3, QUATERNION)
}


def value_type_by_name(name: str) -> ValueType:
    """Look up a value type by its registry name."""
    try:
        return VALUE_TYPES[name]
    except KeyError:
        raise ValueError(
            f"Unknown value type: {name} (expected one of {', '.join(VALUE_TYPES)})"
        ) from None
