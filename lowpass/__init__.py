"""
lowpass

Real-time low-pass filters (one-pole smoother and bi-quad) for scalar,
3D vector and unit quaternion signals.
"""

__version__ = "0.1.0"
__author__ = "lowpass maintainers"
