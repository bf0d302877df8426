"""
Mathematical Infrastructure Module

This module provides the exact linear algebra of the fieldmatrix package:
- The Field interface and the rational, prime and binary extension fields
- The Matrix container with row operations and Gauss-Jordan reduction
- Gaussian elimination helpers (rank, nullspace, inverse, linear systems)

No floating-point arithmetic is involved; every comparison uses the field's
exact equality.
"""

from .field import Field
from .rational_field import RationalField
from .prime_field import PrimeField
from .binary_field import BinaryField
from .matrix import Matrix, UNSET
from .gauss import Gauss

__all__ = [
    'Field',
    'RationalField',
    'PrimeField',
    'BinaryField',
    'Matrix',
    'UNSET',
    'Gauss',
]
