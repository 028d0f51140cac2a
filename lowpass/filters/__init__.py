from lowpass.filters.base import Filter
from lowpass.filters.biquad import DEFAULT_Q, BiQuad, biquad_vector3
from lowpass.filters.factory import create_filter
from lowpass.filters.one_pole import OnePole, one_pole_quaternion, one_pole_vector3

__all__ = [
    "Filter",
    "OnePole",
    "BiQuad",
    "DEFAULT_Q",
    "one_pole_vector3",
    "one_pole_quaternion",
    "biquad_vector3",
    "create_filter",
]
