"""Quaternion algebra and rotation conversions.

This module provides the quaternion operations the frame conversions are
built on:
- Quaternions (unit quaternions, q = [qw, qx, qy, qz])
- Rotation matrices (3x3 orthogonal matrices, SO(3))
- Euler angles (roll-pitch-yaw, ZYX convention)

Conventions:
- Quaternions: [qw, qx, qy, qz] where qw is the scalar part
- Products are Hamilton products, so R(p ⊗ q) = R(p) @ R(q)
- Euler angles: [roll, pitch, yaw] in radians (ZYX/3-2-1 convention)
  - Roll: rotation about x-axis (φ)
  - Pitch: rotation about y-axis (θ)
  - Yaw: rotation about z-axis (ψ)
- Rotation matrices: 3x3 numpy arrays with v_out = R @ v_in
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _as_quat(q: ArrayLike) -> NDArray[np.float64]:
    q = np.asarray(q, dtype=np.float64)
    if q.shape != (4,):
        raise ValueError(f"Expected 4-element quaternion, got shape {q.shape}")
    return q


def euler_to_quat(
    roll: float,
    pitch: float,
    yaw: float,
) -> NDArray[np.float64]:
    """Convert Euler angles to quaternion.

    Converts roll-pitch-yaw Euler angles (ZYX convention) to a unit
    quaternion, equal to q_z(yaw) ⊗ q_y(pitch) ⊗ q_x(roll).

    Args:
        roll: Roll angle φ in radians (rotation about x-axis).
        pitch: Pitch angle θ in radians (rotation about y-axis).
        yaw: Yaw angle ψ in radians (rotation about z-axis).

    Returns:
        Unit quaternion as numpy array [qw, qx, qy, qz].

    Example:
        >>> q = euler_to_quat(0.0, 0.0, np.pi/2)  # 90° yaw
        >>> print(f"Norm (should be 1.0): {np.linalg.norm(q):.6f}")
    """
    cr = np.cos(roll / 2.0)
    sr = np.sin(roll / 2.0)
    cp = np.cos(pitch / 2.0)
    sp = np.sin(pitch / 2.0)
    cy = np.cos(yaw / 2.0)
    sy = np.sin(yaw / 2.0)

    qw = cr * cp * cy + sr * sp * sy
    qx = sr * cp * cy - cr * sp * sy
    qy = cr * sp * cy + sr * cp * sy
    qz = cr * cp * sy - sr * sp * cy

    return np.array([qw, qx, qy, qz], dtype=np.float64)


def quat_to_euler(q: ArrayLike) -> NDArray[np.float64]:
    """Convert quaternion to Euler angles.

    Extracts roll-pitch-yaw Euler angles (ZYX convention) from a
    unit quaternion. Pitch is clamped at ±90° (gimbal lock).

    Args:
        q: Unit quaternion as array [qw, qx, qy, qz].

    Returns:
        Euler angles as numpy array [roll, pitch, yaw] in radians.

    Raises:
        ValueError: If q is not a 4-element array.
    """
    qw, qx, qy, qz = _as_quat(q)

    sin_roll_cos_pitch = 2.0 * (qw * qx + qy * qz)
    cos_roll_cos_pitch = 1.0 - 2.0 * (qx * qx + qy * qy)
    roll = np.arctan2(sin_roll_cos_pitch, cos_roll_cos_pitch)

    # Clamp to avoid numerical issues with arcsin
    sin_pitch = np.clip(2.0 * (qw * qy - qz * qx), -1.0, 1.0)
    pitch = np.arcsin(sin_pitch)

    sin_yaw_cos_pitch = 2.0 * (qw * qz + qx * qy)
    cos_yaw_cos_pitch = 1.0 - 2.0 * (qy * qy + qz * qz)
    yaw = np.arctan2(sin_yaw_cos_pitch, cos_yaw_cos_pitch)

    return np.array([roll, pitch, yaw], dtype=np.float64)


# Names used throughout the bridging layer
quaternion_from_rpy = euler_to_quat
quaternion_to_rpy = quat_to_euler


def quaternion_get_yaw(q: ArrayLike) -> float:
    """Return the yaw angle (radians, in [-π, π]) of a unit quaternion."""
    qw, qx, qy, qz = _as_quat(q)
    return float(
        np.arctan2(2.0 * (qw * qz + qx * qy), 1.0 - 2.0 * (qy * qy + qz * qz))
    )


def axis_angle_to_quat(axis: ArrayLike, angle: float) -> NDArray[np.float64]:
    """Convert an axis-angle rotation to a unit quaternion.

    Args:
        axis: Rotation axis, 3 elements. Normalized internally.
        angle: Rotation angle in radians (right-hand rule).

    Returns:
        Unit quaternion as numpy array [qw, qx, qy, qz].

    Raises:
        ValueError: If axis is not a 3-element array or has zero length.
    """
    axis = np.asarray(axis, dtype=np.float64)
    if axis.shape != (3,):
        raise ValueError(f"Expected 3-element axis, got shape {axis.shape}")

    norm = np.linalg.norm(axis)
    if norm == 0.0:
        raise ValueError("Rotation axis must have non-zero length")

    half = angle / 2.0
    xyz = np.sin(half) * axis / norm

    return np.array([np.cos(half), *xyz], dtype=np.float64)


def quat_multiply(p: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Hamilton product p ⊗ q.

    The result rotates by q first, then by p.

    Args:
        p: Left quaternion [pw, px, py, pz].
        q: Right quaternion [qw, qx, qy, qz].

    Returns:
        Product quaternion as numpy array [w, x, y, z].

    Raises:
        ValueError: If either argument is not a 4-element array.
    """
    pw, px, py, pz = _as_quat(p)
    qw, qx, qy, qz = _as_quat(q)

    return np.array(
        [
            pw * qw - px * qx - py * qy - pz * qz,
            pw * qx + px * qw + py * qz - pz * qy,
            pw * qy - px * qz + py * qw + pz * qx,
            pw * qz + px * qy - py * qx + pz * qw,
        ],
        dtype=np.float64,
    )


def quat_conjugate(q: ArrayLike) -> NDArray[np.float64]:
    """Return the conjugate [qw, -qx, -qy, -qz] (the inverse of a unit quaternion)."""
    q = _as_quat(q)
    return np.array([q[0], -q[1], -q[2], -q[3]], dtype=np.float64)


def quat_normalize(q: ArrayLike) -> NDArray[np.float64]:
    """Return q scaled to unit norm.

    A zero quaternion has no direction and yields NaNs; callers are
    expected to pass a non-degenerate rotation.
    """
    q = _as_quat(q)
    return q / np.linalg.norm(q)


def quat_to_rotation_matrix(q: ArrayLike) -> NDArray[np.float64]:
    """Convert quaternion to rotation matrix.

    Converts a unit quaternion to a 3x3 rotation matrix. The quaternion is
    used as given; normalize it first if it may have drifted.

    Args:
        q: Unit quaternion as array [qw, qx, qy, qz].

    Returns:
        3x3 rotation matrix R such that v_out = R @ v_in.

    Raises:
        ValueError: If q is not a 4-element array.

    Example:
        >>> q = np.array([1.0, 0.0, 0.0, 0.0])  # Identity rotation
        >>> R = quat_to_rotation_matrix(q)
        >>> print(f"Rotation matrix:\\n{R}")  # Should be identity
    """
    qw, qx, qy, qz = _as_quat(q)

    R = np.array(
        [
            [
                1.0 - 2.0 * (qy * qy + qz * qz),
                2.0 * (qx * qy - qw * qz),
                2.0 * (qx * qz + qw * qy),
            ],
            [
                2.0 * (qx * qy + qw * qz),
                1.0 - 2.0 * (qx * qx + qz * qz),
                2.0 * (qy * qz - qw * qx),
            ],
            [
                2.0 * (qx * qz - qw * qy),
                2.0 * (qy * qz + qw * qx),
                1.0 - 2.0 * (qx * qx + qy * qy),
            ],
        ],
        dtype=np.float64,
    )

    return R


def rotate_vector(v: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Rotate one vector, or a stack of vectors, by a quaternion.

    The quaternion is normalized before use.

    Args:
        v: Vector of shape (3,) or stack of shape (N, 3).
        q: Rotation quaternion [qw, qx, qy, qz].

    Returns:
        Rotated vector(s) with the same shape as v.

    Raises:
        ValueError: If v does not end in a dimension of 3 or q is not
            a 4-element array.
    """
    return apply_rotation(quat_to_rotation_matrix(quat_normalize(q)), v)


def apply_rotation(R: NDArray[np.float64], v: ArrayLike) -> NDArray[np.float64]:
    """Apply a 3x3 rotation to a vector (3,) or a stack of vectors (N, 3)."""
    v = np.asarray(v, dtype=np.float64)
    if v.ndim not in (1, 2) or v.shape[-1] != 3:
        raise ValueError(f"Expected vector of shape (3,) or (N, 3), got shape {v.shape}")

    # Row vectors: (R @ v.T).T == v @ R.T
    return v @ R.T
