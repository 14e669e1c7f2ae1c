"""
Utility functions for frame conversions.

This module provides helpers for interpreting flat covariance storage
as square matrices and for the packed upper-triangle form.
"""

from .matrix_views import (
    COVARIANCE_ORDERS,
    as_square_matrix,
    covariance_order,
    covariance_to_urt,
    urt_to_covariance,
)

__all__ = [
    'COVARIANCE_ORDERS',
    'as_square_matrix',
    'covariance_order',
    'covariance_to_urt',
    'urt_to_covariance',
]
