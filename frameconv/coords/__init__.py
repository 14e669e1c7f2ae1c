"""Coordinate frames and frame-convention transformations.

This module provides functions and classes for re-expressing quantities
in the frame conventions exchanged by flight controllers and robotics
middleware:
- NED (North-East-Down) <-> ENU (East-North-Up) world frames
- Aircraft (forward-right-down) <-> base_link (forward-left-up) body frames
- Arbitrary rotation by an orientation quaternion
- ECEF <-> local ENU rotation at a map origin
- Quaternion algebra (products, Euler angles, rotation matrices)
"""

from frameconv.coords.covariance import (
    block_diagonal_rotation,
    transform_frame_covariance,
    transform_static_frame_covariance,
)
from frameconv.coords.frames import Frame, FramePair, FrameType, StaticTF
from frameconv.coords.rotations import (
    axis_angle_to_quat,
    quat_conjugate,
    quat_multiply,
    quat_normalize,
    quat_to_rotation_matrix,
    quaternion_from_rpy,
    quaternion_get_yaw,
    quaternion_to_rpy,
    rotate_vector,
)
from frameconv.coords.static_rotations import (
    AIRCRAFT_BASELINK_Q,
    AIRCRAFT_BASELINK_R,
    NED_ENU_Q,
    NED_ENU_R,
    STATIC_ROTATIONS,
    RotationTable,
    build_rotation_table,
)
from frameconv.coords.transforms import (
    ecef_enu_rotation_matrix,
    transform_frame,
    transform_frame_aircraft_baselink,
    transform_frame_aircraft_enu,
    transform_frame_aircraft_ned,
    transform_frame_baselink_aircraft,
    transform_frame_ecef_enu,
    transform_frame_enu_aircraft,
    transform_frame_enu_ecef,
    transform_frame_enu_ned,
    transform_frame_ned_aircraft,
    transform_frame_ned_enu,
    transform_orientation,
    transform_orientation_aircraft_baselink,
    transform_orientation_baselink_aircraft,
    transform_orientation_enu_ned,
    transform_orientation_ned_enu,
    transform_static_frame,
)

__all__ = [
    # Frames
    "Frame",
    "FramePair",
    "FrameType",
    "StaticTF",
    # Static rotations
    "RotationTable",
    "build_rotation_table",
    "STATIC_ROTATIONS",
    "NED_ENU_Q",
    "NED_ENU_R",
    "AIRCRAFT_BASELINK_Q",
    "AIRCRAFT_BASELINK_R",
    # Orientations and vectors
    "transform_orientation",
    "transform_static_frame",
    "transform_frame",
    "transform_orientation_ned_enu",
    "transform_orientation_enu_ned",
    "transform_orientation_aircraft_baselink",
    "transform_orientation_baselink_aircraft",
    "transform_frame_ned_enu",
    "transform_frame_enu_ned",
    "transform_frame_aircraft_baselink",
    "transform_frame_baselink_aircraft",
    "transform_frame_aircraft_ned",
    "transform_frame_ned_aircraft",
    "transform_frame_aircraft_enu",
    "transform_frame_enu_aircraft",
    "ecef_enu_rotation_matrix",
    "transform_frame_ecef_enu",
    "transform_frame_enu_ecef",
    # Covariances
    "block_diagonal_rotation",
    "transform_static_frame_covariance",
    "transform_frame_covariance",
    # Rotations
    "axis_angle_to_quat",
    "quat_conjugate",
    "quat_multiply",
    "quat_normalize",
    "quat_to_rotation_matrix",
    "quaternion_from_rpy",
    "quaternion_get_yaw",
    "quaternion_to_rpy",
    "rotate_vector",
]
