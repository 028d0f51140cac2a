"""
Build filters from configuration dictionaries.

    filter:
      type: biquad          # one_pole | biquad
      value_type: vector3   # scalar | vector3 | quaternion
      cutoff_hz: 5.0
      sample_rate: 100.0
      q: 0.5                # biquad only
"""

import logging
from typing import Any, Dict

from lowpass.filters.base import Filter
from lowpass.filters.biquad import DEFAULT_Q, BiQuad
from lowpass.filters.one_pole import OnePole
from lowpass.shared.types import value_type_by_name

logger = logging.getLogger(__name__)

FILTER_TYPES = ("one_pole", "biquad")


def create_filter(config: Dict[str, Any]) -> Filter:
    """
    Create a configured filter.

    Args:
        config: Filter section of the configuration

    Returns:
        OnePole or BiQuad instance

    Raises:
        ValueError: Unknown filter or value type, bad band parameters
    """
    filter_type = config.get("type", "one_pole")
    value_type = value_type_by_name(config.get("value_type", "scalar"))
    cutoff_hz = config.get("cutoff_hz")
    sample_rate = config.get("sample_rate")

    if filter_type == "one_pole":
        flt = OnePole(cutoff_hz, sample_rate, value_type=value_type)
    elif filter_type == "biquad":
        q = config.get("q")
        if q is None:
            q = DEFAULT_Q
        flt = BiQuad(cutoff_hz, sample_rate, q=q, value_type=value_type)
    else:
        raise ValueError(f"Unknown filter type: {filter_type}")

    logger.info(f"Created {filter_type} filter over {value_type} (fc={cutoff_hz} Hz, fs={sample_rate} Hz)")
    return flt
