"""
Filter base class.

Every filter owns a single current output y0 of its value type and can be
reconfigured (cutoff, sample rate) or forced to a value at any time between
process() calls. Changes take effect on the next sample.

Filters are not thread-safe; one owner per instance.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from lowpass.shared.types import SCALAR, ValueType

logger = logging.getLogger(__name__)


def check_band(cutoff_hz: float, sample_rate: float, q: Optional[float] = None):
    """
    Check filter design parameters.

    Raises:
        ValueError: sample_rate == 0

    Anything else out of range (negative or non-finite sample rate, cutoff
    outside (0, sample_rate/2), q <= 0) is only logged. The coefficients are
    still derived and inf/NaN propagate into the output.
    """
    if sample_rate == 0.0:
        raise ValueError("Sample rate must be non-zero")

    if not math.isfinite(sample_rate) or sample_rate < 0.0:
        logger.warning(f"Sample rate {sample_rate} Hz is not a positive finite rate")
    nyquist = sample_rate / 2.0
    if not 0.0 < cutoff_hz < nyquist:
        logger.warning(
            f"Cutoff {cutoff_hz} Hz outside (0, {nyquist}) Hz "
            f"for sample rate {sample_rate} Hz"
        )
    if q is not None and not q > 0.0:
        logger.warning(f"Q {q} is not positive")


class Filter(ABC):
    """Base class for all filters."""

    def __init__(self, value_type: ValueType = SCALAR):
        self.value_type = value_type
        self.y0 = value_type.identity()
        self.configured = False

    def set_value(self, value: Any):
        """Force the filter output to value."""
        self.y0 = self.value_type.coerce(value)

    @abstractmethod
    def set_fc(self, cutoff_hz: float, sample_rate: float):
        """
        Set the cutoff frequency and sample rate.

        Args:
            cutoff_hz: Cutoff frequency (Hz)
            sample_rate: Rate at which samples arrive (Hz)
        """

    @abstractmethod
    def process(self, x: Any) -> Any:
        """Feed one sample, return the new output."""

    def get_value(self) -> Any:
        """Current filter output, a copy the caller may modify."""
        return self.value_type.copy(self.y0)

    @property
    def value(self) -> Any:
        return self.get_value()

    def reset(self):
        """Return the output (and any history) to the identity element."""
        self.set_value(self.value_type.identity())

    def process_many(self, samples: Iterable[Any]) -> List[Any]:
        """Run every sample through process(), in order."""
        return [self.process(x) for x in samples]

    def _init_band(self, cutoff_hz: Optional[float], sample_rate: Optional[float], **kwargs):
        if cutoff_hz is None and sample_rate is None:
            return
        if cutoff_hz is None or sample_rate is None:
            raise ValueError("cutoff_hz and sample_rate must be given together")
        self.set_fc(cutoff_hz, sample_rate, **kwargs)

    def __repr__(self):
        return f"{type(self).__name__}(value_type={self.value_type})"
