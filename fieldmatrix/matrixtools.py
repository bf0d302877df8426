#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Functions for building fields and converting matrices from and to numpy, scipy and sympy"""

import logging
from typing import Any

import numpy as np
import sympy
from scipy import sparse

from .names import *
from .exceptions import InvalidDimensions, MissingArgument
from .math import Field, RationalField, PrimeField, BinaryField, Matrix

LOG = logging.getLogger(__name__)

__all__ = [
    'create_field',
    'matrix_from_numpy',
    'matrix_to_numpy',
    'matrix_from_sparse',
    'matrix_from_sympy',
    'matrix_to_sympy',
]


def create_field(kind: str, **kwargs) -> Field:
    """Build a field from its name

    Example:
        field = create_field('prime', characteristic=7)

    Args:
        kind (str):
            One of 'rational', 'prime', 'binary' or 'gf256'.

        characteristic (int):
            (Default: None) The prime p of the field GF(p). Required for kind='prime'.

        modulus (int):
            (Default: None) The irreducible polynomial over GF(2) defining GF(2^k), bit i
            being the coefficient of x^i. Required for kind='binary'.

    Returns:
        (Field):
        A field instance.
    """
    kind = kind.lower()
    if kind == RATIONAL:
        return RationalField()
    elif kind == PRIME:
        if kwargs.get(CHARACTERISTIC) is None:
            raise MissingArgument(f"Field kind '{PRIME}' requires the '{CHARACTERISTIC}' argument.")
        return PrimeField(kwargs[CHARACTERISTIC])
    elif kind == BINARY:
        if kwargs.get(MODULUS) is None:
            raise MissingArgument(f"Field kind '{BINARY}' requires the '{MODULUS}' argument.")
        return BinaryField(kwargs[MODULUS])
    elif kind == GF256:
        return BinaryField.gf256()
    else:
        raise ValueError(f"Unknown field kind '{kind}'. Choose one of {', '.join(FIELD_KINDS)}.")


def matrix_from_numpy(array: Any, field: Field) -> Matrix:
    """Build a matrix from a two-dimensional numpy array (or nested list)

    Every entry is converted with field.value_of(). Float entries are only
    accepted by the rational field, which approximates them with a bounded
    denominator.

    Args:
        array (numpy.ndarray):
            A two-dimensional array.

        field (Field):
            The field of the new matrix.

    Returns:
        (Matrix):
        A fully set matrix with the shape of the array.
    """
    if array is None:
        raise MissingArgument("array must not be None")
    array = np.asarray(array, dtype=object) if isinstance(array, list) else np.asarray(array)
    if array.ndim != 2:
        raise InvalidDimensions(f"Expected a two-dimensional array, got {array.ndim} dimensions.")
    if np.issubdtype(array.dtype, np.floating):
        LOG.info(f"Converting float array of shape {array.shape} to exact field elements.")
    return Matrix.from_rows(array.tolist(), field)


def matrix_to_numpy(matrix: Matrix) -> np.ndarray:
    """Copy the cells of a matrix into a numpy object array

    Unset cells are copied as the UNSET marker.
    """
    result = np.empty(matrix.shape, dtype=object)
    for i, row in enumerate(matrix.to_rows()):
        for j, value in enumerate(row):
            result[i, j] = value
    return result


def matrix_from_sparse(sparse_matrix: Any, field: Field) -> Matrix:
    """Build a dense matrix from a scipy sparse matrix

    Entries not stored in the sparse matrix are set to the field's zero and
    duplicate entries are summed by scipy before conversion. Most scipy
    constructors store float64 data; for fields other than the rationals,
    integer-valued floats are converted to ints and any other float is
    rejected by the field.

    Args:
        sparse_matrix (scipy.sparse.spmatrix):
            A sparse matrix or sparse array.

        field (Field):
            The field of the new matrix.

    Returns:
        (Matrix):
        A fully set matrix.
    """
    if sparse_matrix is None:
        raise MissingArgument("sparse_matrix must not be None")
    if not sparse.issparse(sparse_matrix):
        raise TypeError(f"Expected a scipy sparse matrix, got {type(sparse_matrix)}")
    rows, cols = sparse_matrix.shape
    matrix = Matrix.zeros(rows, cols, field)
    coo = sparse.csr_matrix(sparse_matrix).tocoo()
    integral = not isinstance(field, RationalField) and np.issubdtype(coo.data.dtype, np.floating)
    for i, j, v in zip(coo.row, coo.col, coo.data):
        if integral and float(v).is_integer():
            v = int(v)
        matrix.set(int(i), int(j), field.value_of(v))
    return matrix


def matrix_from_sympy(sympy_matrix: sympy.MatrixBase, field: Field) -> Matrix:
    """Build a matrix from a sympy matrix of integers or rationals"""
    if sympy_matrix is None:
        raise MissingArgument("sympy_matrix must not be None")
    return Matrix.from_rows(sympy_matrix.tolist(), field)


def matrix_to_sympy(matrix: Matrix) -> sympy.Matrix:
    """Convert a fully set matrix to a sympy Matrix

    Rational elements become sympy Rationals, integer elements of finite fields
    become sympy Integers.
    """
    matrix.check_fully_set()
    return sympy.Matrix([[sympy.sympify(value) for value in row] for row in matrix.to_rows()])
