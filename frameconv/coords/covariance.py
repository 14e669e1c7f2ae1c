"""Covariance transformations between frame conventions.

A covariance C of stacked 3-D quantities (position; position + velocity;
position + velocity + acceleration, or attitude + rates) is re-expressed
under a rotation R by the congruence

    C' = R_blk @ C @ R_blk^T,    R_blk = diag(R, ..., R)

with order / 3 copies of R on the diagonal and zero off-diagonal blocks:
every stacked quantity turns by the same rotation, independently. R_blk is
orthonormal, so symmetry and eigenvalues of C carry over to C'.

Covariances are stored as flat row-major arrays of 9, 36 or 81 elements;
square (n, n) arrays are accepted too and the output keeps the input's
shape.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import block_diag

from frameconv.coords.frames import StaticTF
from frameconv.coords.rotations import quat_normalize, quat_to_rotation_matrix
from frameconv.coords.static_rotations import STATIC_ROTATIONS, RotationTable
from frameconv.utils.matrix_views import as_square_matrix, covariance_order


def block_diagonal_rotation(R: ArrayLike, order: int) -> NDArray[np.float64]:
    """Build the block-diagonal rotation for a covariance of given order.

    Args:
        R: 3x3 rotation matrix.
        order: Covariance order (3, 6 or 9).

    Returns:
        order x order matrix with order / 3 copies of R on the diagonal.

    Raises:
        ValueError: If R is not 3x3 or order is not a multiple of 3.

    Example:
        >>> block_diagonal_rotation(np.eye(3), 6).shape
        (6, 6)
    """
    R = np.asarray(R, dtype=np.float64)
    if R.shape != (3, 3):
        raise ValueError(f"Expected 3x3 matrix, got shape {R.shape}")
    if order <= 0 or order % 3 != 0:
        raise ValueError(f"Covariance order must be a positive multiple of 3, got {order}")

    return block_diag(*([R] * (order // 3)))


def _congruence(cov: ArrayLike, R: NDArray[np.float64]) -> NDArray[np.float64]:
    cov = np.asarray(cov, dtype=np.float64)
    order = covariance_order(cov)

    C = as_square_matrix(cov)
    R_blk = block_diagonal_rotation(R, order)

    return (R_blk @ C @ R_blk.T).reshape(cov.shape)


def transform_static_frame_covariance(
    cov: ArrayLike,
    tag: StaticTF,
    *,
    table: RotationTable = STATIC_ROTATIONS,
) -> NDArray[np.float64]:
    """Transform a covariance between the fixed frame conventions.

    Both directions of a pair apply the same rotation, since each static
    rotation is its own inverse.

    Args:
        cov: Covariance of order 3, 6 or 9 (9, 36 or 81 elements).
        tag: Static conversion, as a StaticTF or its string value.
        table: Rotation table to read the static rotation from.

    Returns:
        Transformed covariance with the shape of ``cov``.

    Raises:
        ValueError: If ``tag`` is unknown or ``cov`` has an unsupported size.

    Example:
        >>> cov = np.diag([1.0, 2.0, 3.0]).ravel()
        >>> transform_static_frame_covariance(cov, StaticTF.NED_TO_ENU)  # -> diag(2, 1, 3)
    """
    tag = StaticTF.coerce(tag)
    return _congruence(cov, table.rotation_matrix(tag))


def transform_frame_covariance(cov: ArrayLike, q: ArrayLike) -> NDArray[np.float64]:
    """Rotate a covariance by an arbitrary orientation quaternion.

    Args:
        cov: Covariance of order 3, 6 or 9 (9, 36 or 81 elements).
        q: Rotation quaternion [qw, qx, qy, qz]; normalized before use.

    Returns:
        Transformed covariance with the shape of ``cov``.

    Raises:
        ValueError: If ``q`` is not a 4-element array or ``cov`` has an
            unsupported size.
    """
    R = quat_to_rotation_matrix(quat_normalize(q))
    return _congruence(cov, R)
