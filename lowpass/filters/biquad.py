"""
Bi-quad low-pass filter.

Second-order IIR from the bilinear transform of an analog low-pass with
quality factor Q:

    k     = tan(pi*fc/fs)
    denom = k^2 + k/Q + 1
    a0 = k^2/denom,  a1 = 2*a0,  a2 = a0
    b0 = 1
    b1 = 2*(k^2 - 1)/denom
    b2 = (k^2 - k/Q + 1)/denom

Direct form I:

    y0 = a0*x + a1*x1 + a2*x2 - b1*y1 - b2*y2

The default Q = 0.5 is critically damped (no resonant peak).

See http://www.earlevel.com/main/2003/03/02/the-bilinear-z-transform/

Usage:
    from lowpass.filters.biquad import BiQuad, biquad_vector3

    lpf = BiQuad(cutoff_hz=5.0, sample_rate=100.0)
    smoothed = lpf.process(raw)
"""

import logging
from typing import Any, Optional

import numpy as np

from lowpass.filters.base import Filter, check_band
from lowpass.shared.types import SCALAR, VECTOR3, ValueType

logger = logging.getLogger(__name__)

DEFAULT_Q = 0.5


class BiQuad(Filter):
    """
    Second-order low-pass filter over any linear value type.

    Only +, - and scalar * of the value type are used. There is no
    rotation-aware variant; over quaternions this blends components.
    """

    def __init__(self, cutoff_hz: Optional[float] = None,
                 sample_rate: Optional[float] = None,
                 q: float = DEFAULT_Q,
                 value_type: ValueType = SCALAR):
        super().__init__(value_type)
        if value_type.rotational:
            logger.warning(
                f"BiQuad over {value_type} uses componentwise arithmetic, "
                f"output is not a valid rotation blend"
            )

        self.a0 = self.a1 = self.a2 = 0.0
        self.b0 = self.b1 = self.b2 = 0.0
        self.q = q

        self._fill_history(self.y0)

        self._init_band(cutoff_hz, sample_rate, q=q)

    def set_fc(self, cutoff_hz: float, sample_rate: float, q: float = DEFAULT_Q):
        """
        Set the cutoff frequency, sample rate and Q.

        Args:
            cutoff_hz: Cutoff frequency (Hz)
            sample_rate: Sample rate (Hz)
            q: Quality factor, lower is more damped
        """
        check_band(cutoff_hz, sample_rate, q)

        # float64 arithmetic: a degenerate band yields inf/NaN, not an exception
        with np.errstate(all="ignore"):
            k = np.tan(np.pi * cutoff_hz / sample_rate)
            k_q = k / np.float64(q)
            denom = k * k + k_q + 1.0
            a0 = k * k / denom
            b1 = 2.0 * (k * k - 1.0) / denom
            b2 = (k * k - k_q + 1.0) / denom

        self.a0 = float(a0)
        self.a1 = 2.0 * self.a0
        self.a2 = self.a0
        self.b0 = 1.0
        self.b1 = float(b1)
        self.b2 = float(b2)
        self.q = q
        self.configured = True
        logger.debug(
            f"BiQuad fc={cutoff_hz} fs={sample_rate} q={q}: "
            f"a=({self.a0:.6f}, {self.a1:.6f}, {self.a2:.6f}) "
            f"b=({self.b1:.6f}, {self.b2:.6f})"
        )

    def set_value(self, value: Any):
        """Force the output and all history to value."""
        super().set_value(value)
        self._fill_history(self.y0)

    def process(self, x: Any) -> Any:
        x = self.value_type.coerce(x)
        y = (self.a0 * x + self.a1 * self.x1 + self.a2 * self.x2
             - self.b1 * self.y1 - self.b2 * self.y2)
        self.x2, self.x1 = self.x1, x
        self.y2, self.y1 = self.y1, y
        self.y0 = self.value_type.copy(y)
        return self.get_value()

    def _fill_history(self, value: Any):
        copy = self.value_type.copy
        self.x1, self.x2 = copy(value), copy(value)
        self.y1, self.y2 = copy(value), copy(value)


def biquad_vector3(cutoff_hz: Optional[float] = None,
                   sample_rate: Optional[float] = None,
                   q: float = DEFAULT_Q) -> BiQuad:
    """Bi-quad filter for 3-vectors, output and history starting at (0, 0, 0)."""
    return BiQuad(cutoff_hz, sample_rate, q, value_type=VECTOR3)
