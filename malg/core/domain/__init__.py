"""
Domain models and value objects.

Contains the dense Matrix container, the AugmentedMatrix composition and
the MatrixShape value object.
"""

from malg.core.domain.augmented import AugmentedMatrix
from malg.core.domain.matrix import Matrix
from malg.core.domain.shape import (
    DimensionMismatchError,
    MatrixShape,
    infer_shape,
    require_same_rows,
    require_same_shape,
    require_square,
)

__all__ = [
    # Shape module
    "MatrixShape",
    "DimensionMismatchError",
    "infer_shape",
    "require_same_shape",
    "require_same_rows",
    "require_square",
    # Matrix model
    "Matrix",
    # Augmented model
    "AugmentedMatrix",
]
