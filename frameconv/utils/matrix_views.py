"""
Flat covariance storage helpers.

Flight-controller messages and middleware messages both carry covariances
as flat row-major arrays. These helpers interpret such arrays as square
matrices and pack/unpack the upper-right-triangle (URT) form used when
only the independent elements are sent.

Supported orders:
- 3: one 3-D quantity (9 elements, URT of 6)
- 6: two stacked 3-D quantities (36 elements, URT of 21)
- 9: three stacked 3-D quantities (81 elements, URT of 45)
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

COVARIANCE_ORDERS = (3, 6, 9)

_ORDER_BY_SIZE = {n * n: n for n in COVARIANCE_ORDERS}
_ORDER_BY_URT_SIZE = {n * (n + 1) // 2: n for n in COVARIANCE_ORDERS}


def covariance_order(cov: ArrayLike) -> int:
    """
    Return the matrix order of a flat or square covariance.

    Args:
        cov: Covariance with 9, 36 or 81 elements, flat or square.

    Returns:
        Matrix order (3, 6 or 9).

    Raises:
        ValueError: If the element count or shape does not describe a
            supported square matrix.
    """
    cov = np.asarray(cov)
    order = _ORDER_BY_SIZE.get(cov.size)
    if order is None or cov.shape not in ((cov.size,), (order, order)):
        raise ValueError(
            f"Expected covariance of 9, 36 or 81 elements (flat or square), "
            f"got shape {cov.shape}"
        )
    return order


def as_square_matrix(cov: ArrayLike) -> NDArray[np.float64]:
    """
    View a flat row-major covariance as a square matrix.

    No copy is made when ``cov`` is already a C-contiguous float64 array,
    so writes through the view reach the caller's storage.

    Raises:
        ValueError: If ``cov`` is not a supported covariance.
    """
    cov = np.asarray(cov, dtype=np.float64)
    order = covariance_order(cov)
    return cov.reshape(order, order)


def covariance_to_urt(cov: ArrayLike) -> NDArray[np.float64]:
    """
    Pack the upper-right triangle of a covariance, row by row.

    Example:
        >>> covariance_to_urt(np.arange(9.0))
        array([0., 1., 2., 4., 5., 8.])
    """
    matrix = as_square_matrix(cov)
    rows, cols = np.triu_indices(matrix.shape[0])
    return matrix[rows, cols]


def urt_to_covariance(urt: ArrayLike) -> NDArray[np.float64]:
    """
    Unpack an upper-right triangle into a flat symmetric covariance.

    Args:
        urt: 6, 21 or 45 elements, row-major upper triangle.

    Returns:
        Flat row-major covariance of 9, 36 or 81 elements.

    Raises:
        ValueError: If the element count does not match a supported order.
    """
    urt = np.asarray(urt, dtype=np.float64)
    order = _ORDER_BY_URT_SIZE.get(urt.size)
    if order is None or urt.ndim != 1:
        raise ValueError(
            f"Expected flat upper triangle of 6, 21 or 45 elements, "
            f"got shape {urt.shape}"
        )

    matrix = np.zeros((order, order), dtype=np.float64)
    rows, cols = np.triu_indices(order)
    matrix[rows, cols] = urt
    matrix[cols, rows] = urt

    return matrix.reshape(-1)
