"""Orientation and vector transformations between frame conventions.

This module re-expresses orientations and 3-D vectors (position, velocity,
acceleration) in another frame convention:

- Static conversions between NED and ENU (world) and between aircraft and
  base_link (body), selected by a StaticTF tag.
- Arbitrary rotation by an orientation quaternion computed per sample.
- Rotation between ECEF and the local ENU tangent frame at a map origin.

Only rotations are applied; no translation is involved.
"""

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from frameconv.coords.frames import StaticTF
from frameconv.coords.rotations import apply_rotation, quat_multiply, rotate_vector
from frameconv.coords.static_rotations import STATIC_ROTATIONS, RotationTable


def transform_orientation(
    q: ArrayLike,
    tag: StaticTF,
    *,
    table: RotationTable = STATIC_ROTATIONS,
) -> NDArray[np.float64]:
    """Transform an orientation quaternion between frame conventions.

    A world-frame relabeling (NED <-> ENU) acts in the reference frame and
    premultiplies: q' = NED_ENU_Q ⊗ q. A body-frame relabeling
    (aircraft <-> base_link) acts in the body frame and postmultiplies:
    q' = q ⊗ AIRCRAFT_BASELINK_Q.

    The result is not renormalized.

    Args:
        q: Orientation quaternion [qw, qx, qy, qz].
        tag: Static conversion, as a StaticTF or its string value.
        table: Rotation table to read the static quaternion from.

    Returns:
        Transformed quaternion [qw, qx, qy, qz].

    Raises:
        ValueError: If ``tag`` is unknown or ``q`` is not a 4-element array.

    Example:
        >>> q_ned = np.array([1.0, 0.0, 0.0, 0.0])  # level, facing North
        >>> q_enu = transform_orientation(q_ned, StaticTF.NED_TO_ENU)
    """
    tag = StaticTF.coerce(tag)
    q_static = table.quaternion(tag)

    if tag.frame_pair.premultiplies:
        return quat_multiply(q_static, q)
    return quat_multiply(q, q_static)


def transform_static_frame(
    v: ArrayLike,
    tag: StaticTF,
    *,
    table: RotationTable = STATIC_ROTATIONS,
) -> NDArray[np.float64]:
    """Transform a vector between frame conventions.

    Both directions of a pair apply the same rotation, since each static
    rotation is its own inverse.

    Args:
        v: Vector of shape (3,) or stack of shape (N, 3).
        tag: Static conversion, as a StaticTF or its string value.
        table: Rotation table to read the static rotation from.

    Returns:
        Rotated vector(s) with the same shape as v.

    Raises:
        ValueError: If ``tag`` is unknown or ``v`` has the wrong shape.

    Example:
        >>> v_ned = np.array([1.0, 2.0, 3.0])  # 1 m North, 2 m East, 3 m Down
        >>> transform_static_frame(v_ned, StaticTF.NED_TO_ENU)  # -> [2, 1, -3]
    """
    tag = StaticTF.coerce(tag)
    return apply_rotation(table.rotation_matrix(tag), v)


def transform_frame(v: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector by an arbitrary orientation quaternion.

    Used when the rotation is computed per sample, e.g. a body-frame
    velocity rotated into the world frame by the current attitude.

    Args:
        v: Vector of shape (3,) or stack of shape (N, 3).
        q: Rotation quaternion [qw, qx, qy, qz]; normalized before use.

    Returns:
        Rotated vector(s) with the same shape as v.
    """
    return rotate_vector(v, q)


# Named conversions


def transform_orientation_ned_enu(q: ArrayLike) -> NDArray[np.float64]:
    """Convert an orientation from the NED world frame to ENU."""
    return transform_orientation(q, StaticTF.NED_TO_ENU)


def transform_orientation_enu_ned(q: ArrayLike) -> NDArray[np.float64]:
    """Convert an orientation from the ENU world frame to NED."""
    return transform_orientation(q, StaticTF.ENU_TO_NED)


def transform_orientation_aircraft_baselink(q: ArrayLike) -> NDArray[np.float64]:
    """Convert an orientation from the aircraft body frame to base_link."""
    return transform_orientation(q, StaticTF.AIRCRAFT_TO_BASELINK)


def transform_orientation_baselink_aircraft(q: ArrayLike) -> NDArray[np.float64]:
    """Convert an orientation from the base_link body frame to aircraft."""
    return transform_orientation(q, StaticTF.BASELINK_TO_AIRCRAFT)


def transform_frame_ned_enu(v: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from NED to ENU."""
    return transform_static_frame(v, StaticTF.NED_TO_ENU)


def transform_frame_enu_ned(v: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from ENU to NED."""
    return transform_static_frame(v, StaticTF.ENU_TO_NED)


def transform_frame_aircraft_baselink(v: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from the aircraft body frame to base_link."""
    return transform_static_frame(v, StaticTF.AIRCRAFT_TO_BASELINK)


def transform_frame_baselink_aircraft(v: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from the base_link body frame to aircraft."""
    return transform_static_frame(v, StaticTF.BASELINK_TO_AIRCRAFT)


# The caller supplies the attitude that rotates the source frame into the
# target frame; the name only documents the direction.


def transform_frame_aircraft_ned(v: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from the aircraft body frame to NED by the attitude q."""
    return transform_frame(v, q)


def transform_frame_ned_aircraft(v: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from NED to the aircraft body frame by q."""
    return transform_frame(v, q)


def transform_frame_aircraft_enu(v: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from the aircraft body frame to ENU by the attitude q."""
    return transform_frame(v, q)


def transform_frame_enu_aircraft(v: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Rotate a vector from ENU to the aircraft body frame by q."""
    return transform_frame(v, q)


def ecef_enu_rotation_matrix(lat: float, lon: float) -> NDArray[np.float64]:
    """Rotation matrix from ECEF to the local ENU frame.

    Args:
        lat: Latitude of the ENU origin in radians (positive north).
        lon: Longitude of the ENU origin in radians (positive east).

    Returns:
        3x3 matrix R such that v_enu = R @ v_ecef. Its transpose maps ENU
        back to ECEF.
    """
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    R = np.array(
        [
            [-sin_lon, cos_lon, 0.0],
            [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
            [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
        ],
        dtype=np.float64,
    )

    return R


def transform_frame_ecef_enu(
    v: ArrayLike,
    map_origin: Sequence[float],
) -> NDArray[np.float64]:
    """Rotate a vector from ECEF into the ENU frame at a map origin.

    Args:
        v: ECEF vector of shape (3,) or stack of shape (N, 3).
        map_origin: Geodetic origin (latitude deg, longitude deg, altitude m).
            The altitude does not affect the rotation.

    Returns:
        ENU vector(s) with the same shape as v.

    Example:
        >>> # At 0°N 0°E, ECEF +x points Up
        >>> transform_frame_ecef_enu([1.0, 0.0, 0.0], (0.0, 0.0, 0.0))
    """
    lat, lon = np.deg2rad(map_origin[0]), np.deg2rad(map_origin[1])
    return apply_rotation(ecef_enu_rotation_matrix(lat, lon), v)


def transform_frame_enu_ecef(
    v: ArrayLike,
    map_origin: Sequence[float],
) -> NDArray[np.float64]:
    """Rotate a vector from the ENU frame at a map origin into ECEF.

    Args:
        v: ENU vector of shape (3,) or stack of shape (N, 3).
        map_origin: Geodetic origin (latitude deg, longitude deg, altitude m).

    Returns:
        ECEF vector(s) with the same shape as v.
    """
    lat, lon = np.deg2rad(map_origin[0]), np.deg2rad(map_origin[1])
    return apply_rotation(ecef_enu_rotation_matrix(lat, lon).T, v)
