"""
One-pole low-pass filter (exponential moving average).

    b1 = exp(-2*pi*fc/fs)
    a0 = 1 - b1
    y0 = a0*x + b1*y0

a0 + b1 == 1 and both are non-negative for a valid band, so each output is
a convex combination of the new sample and the previous output.

See http://www.earlevel.com/main/2012/12/15/a-one-pole-filter/

Usage:
    from lowpass.filters.one_pole import OnePole, one_pole_quaternion

    lpf = OnePole(cutoff_hz=1.0, sample_rate=100.0)
    smoothed = lpf.process(raw)

    attitude = one_pole_quaternion(cutoff_hz=2.0, sample_rate=60.0)
    q = attitude.process(measured_q)
"""

import logging
from typing import Any, Optional

import numpy as np

from lowpass.filters.base import Filter, check_band
from lowpass.shared.types import QUATERNION, SCALAR, VECTOR3, ValueType

logger = logging.getLogger(__name__)


class OnePole(Filter):
    """
    First-order low-pass filter over any value type.

    The value type's blend strategy decides how a sample is mixed into the
    output: linearly for scalars and vectors, by slerp for rotations.
    """

    def __init__(self, cutoff_hz: Optional[float] = None,
                 sample_rate: Optional[float] = None,
                 value_type: ValueType = SCALAR):
        super().__init__(value_type)
        self.a0 = 0.0   # input gain
        self.b1 = 0.0   # feedback gain
        self._init_band(cutoff_hz, sample_rate)

    def set_fc(self, cutoff_hz: float, sample_rate: float):
        check_band(cutoff_hz, sample_rate)
        with np.errstate(all="ignore"):
            self.b1 = float(np.exp(-2.0 * np.pi * cutoff_hz / sample_rate))
        self.a0 = 1.0 - self.b1
        self.configured = True
        logger.debug(f"OnePole fc={cutoff_hz} fs={sample_rate}: a0={self.a0:.6f} b1={self.b1:.6f}")

    def process(self, x: Any) -> Any:
        x = self.value_type.coerce(x)
        self.y0 = self.value_type.blend.step(self.a0, self.b1, self.y0, x)
        return self.get_value()


def one_pole_vector3(cutoff_hz: Optional[float] = None,
                     sample_rate: Optional[float] = None) -> OnePole:
    """One-pole filter for 3-vectors, starting at (0, 0, 0)."""
    return OnePole(cutoff_hz, sample_rate, value_type=VECTOR3)


def one_pole_quaternion(cutoff_hz: Optional[float] = None,
                        sample_rate: Optional[float] = None) -> OnePole:
    """One-pole filter for unit quaternions, starting at the identity rotation."""
    return OnePole(cutoff_hz, sample_rate, value_type=QUATERNION)
