"""Frame convention conversions for flight-controller / robotics bridging.

This package re-expresses orientations, vectors and covariances in a
consistent frame convention:
- coords: Frame definitions, quaternion algebra, static and arbitrary
  rotation of orientations, vectors and covariances
- utils: Flat covariance storage helpers
"""

from frameconv.coords import (
    StaticTF,
    transform_frame,
    transform_frame_covariance,
    transform_orientation,
    transform_static_frame,
    transform_static_frame_covariance,
)

__version__ = "0.1.0"

__all__ = [
    "StaticTF",
    "transform_orientation",
    "transform_static_frame",
    "transform_frame",
    "transform_static_frame_covariance",
    "transform_frame_covariance",
]
