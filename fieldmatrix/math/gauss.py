"""
Gauss operations on field matrices.

This module provides the linear algebra read off a reduced row echelon form:
rank, nullity, nullspace, inversion, the solution of linear systems and the
determinant. Every operation works on a clone, the argument is never modified.
"""

import logging
from typing import Any, List, Optional, Sequence, Union

from .field import E
from .matrix import Matrix
from ..exceptions import IncompatibleDimensions, MissingArgument, SingularMatrixError, InconsistentSystemError

LOG = logging.getLogger(__name__)


class Gauss:
    """
    Matrix operations based on Gauss-Jordan elimination.

    The class holds no state; use Gauss.instance() to get the shared instance.
    """

    _instance = None

    @classmethod
    def instance(cls) -> 'Gauss':
        """Get the singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @staticmethod
    def _require(matrix: Matrix) -> None:
        if matrix is None:
            raise MissingArgument("matrix must not be None")

    # Core operations
    def reduce(self, matrix: Matrix[E]) -> Matrix[E]:
        """Return the reduced row echelon form of matrix as a new matrix"""
        self._require(matrix)
        reduced = matrix.clone()
        reduced.reduced_row_echelon_form()
        return reduced

    def pivot_columns(self, reduced: Matrix[E]) -> List[int]:
        """
        List the pivot column of each non-zero row of an already reduced matrix.

        Args:
            reduced: Matrix in reduced row echelon form

        Returns:
            Pivot columns in row order; its length is the rank
        """
        self._require(reduced)
        f = reduced.field
        pivots = []
        for i in range(reduced.row_count()):
            for j in range(reduced.column_count()):
                if not f.is_zero(reduced.get(i, j)):
                    pivots.append(j)
                    break
            else:
                # Zero rows are sorted to the bottom
                break
        return pivots

    def rank(self, matrix: Matrix[E]) -> int:
        """
        Compute the rank of the given matrix using Gaussian elimination.

        Args:
            matrix: Input matrix, every cell set

        Returns:
            The rank of the matrix
        """
        rank = len(self.pivot_columns(self.reduce(matrix)))
        LOG.debug(f"Rank of {matrix.row_count()}x{matrix.column_count()} matrix: {rank}")
        return rank

    def nullity(self, matrix: Matrix[E]) -> int:
        """
        Compute the nullity of the given matrix (dimension of nullspace).
        By the rank-nullity theorem: rank + nullity = number of columns.
        """
        return matrix.column_count() - self.rank(matrix)

    def nullspace(self, matrix: Matrix[E]) -> Optional[Matrix[E]]:
        """
        Compute a basis for the right nullspace.

        The algorithm:
        1. Compute the reduced row echelon form R and its pivot columns
        2. For each free (non-pivot) column c, the basis vector has a one at
           position c, -R[i][c] at the pivot column of each row i, zero elsewhere

        Args:
            matrix: Input matrix, every cell set

        Returns:
            cols x nullity matrix whose columns form a basis of the nullspace,
            or None if the nullspace is trivial
        """
        reduced = self.reduce(matrix)
        f = reduced.field
        cols = reduced.column_count()
        pivots = self.pivot_columns(reduced)
        pivot_set = set(pivots)
        free_cols = [j for j in range(cols) if j not in pivot_set]
        if not free_cols:
            return None

        kernel = Matrix.zeros(cols, len(free_cols), f)
        for k, free_col in enumerate(free_cols):
            kernel.set(free_col, k, f.one())
            for i, pivot_col in enumerate(pivots):
                kernel.set(pivot_col, k, f.negate(reduced.get(i, free_col)))
        return kernel

    def invert(self, matrix: Matrix[E]) -> Matrix[E]:
        """
        Compute the inverse of a square matrix.

        The method computes the reduced row-echelon form of [A | I] to get [I | A^-1].

        Args:
            matrix: Square matrix to invert

        Returns:
            The inverse matrix

        Raises:
            IncompatibleDimensions: If matrix is not square
            SingularMatrixError: If matrix is singular (not invertible)
        """
        self._require(matrix)
        n = matrix.row_count()
        if n != matrix.column_count():
            raise IncompatibleDimensions(f"Matrix must be square for inversion: {n}x{matrix.column_count()}")

        augmented = matrix.augment(Matrix.identity(n, matrix.field))
        augmented.reduced_row_echelon_form()
        pivots = self.pivot_columns(augmented)
        if pivots[:n] != list(range(n)):
            rank = sum(1 for p in pivots if p < n)
            raise SingularMatrixError(f"Matrix is singular (rank {rank} < {n})")
        return augmented.submatrix(0, n, n, 2 * n)

    def is_invertible(self, matrix: Matrix[E]) -> bool:
        """Check whether matrix is square and has full rank"""
        return matrix.row_count() == matrix.column_count() and self.rank(matrix) == matrix.row_count()

    def solve(self, matrix: Matrix[E], rhs: Union[Matrix[E], Sequence[Any]]) -> List[E]:
        """
        Solve the linear system A x = b.

        When the system is underdetermined, the free variables are set to zero.

        Args:
            matrix: Coefficient matrix A
            rhs: Right-hand side b, either a column matrix or a sequence of
                 values converted with the field's value_of()

        Returns:
            One solution x as a list of column_count() field elements

        Raises:
            IncompatibleDimensions: If b does not have one value per row of A
            InconsistentSystemError: If the system has no solution
        """
        self._require(matrix)
        if rhs is None:
            raise MissingArgument("rhs must not be None")
        f = matrix.field
        rows = matrix.row_count()
        cols = matrix.column_count()
        if not isinstance(rhs, Matrix):
            if len(rhs) != rows:
                raise IncompatibleDimensions(f"Expected {rows} right-hand side values, got {len(rhs)}")
            rhs = Matrix.from_rows([[value] for value in rhs], f)
        elif rhs.column_count() != 1:
            raise IncompatibleDimensions(f"Right-hand side must be a single column, got {rhs.column_count()}")

        augmented = matrix.augment(rhs)
        augmented.reduced_row_echelon_form()
        pivots = self.pivot_columns(augmented)
        if pivots and pivots[-1] == cols:
            LOG.debug(f"Inconsistent {rows}x{cols} system (rank {len(pivots) - 1})")
            raise InconsistentSystemError("Linear system has no solution")

        solution = [f.zero()] * cols
        for i, pivot_col in enumerate(pivots):
            solution[pivot_col] = augmented.get(i, cols)
        LOG.debug(f"Solved {rows}x{cols} system with {cols - len(pivots)} free variables")
        return solution

    def determinant(self, matrix: Matrix[E]) -> E:
        """
        Compute the determinant of a square matrix by forward elimination.

        Each row swap negates the determinant and each pivot normalisation
        scales it by the pivot value.

        Raises:
            IncompatibleDimensions: If matrix is not square
        """
        self._require(matrix)
        n = matrix.row_count()
        if n != matrix.column_count():
            raise IncompatibleDimensions(f"Matrix must be square for the determinant: {n}x{matrix.column_count()}")
        f = matrix.field
        matrix.check_fully_set()
        work = matrix.clone()
        det = f.one()
        for j in range(n):
            pivot_row = j
            while pivot_row < n and f.is_zero(work.get(pivot_row, j)):
                pivot_row += 1
            if pivot_row == n:
                return f.zero()
            if pivot_row != j:
                work.swap_rows(j, pivot_row)
                det = f.negate(det)
            pivot = work.get(j, j)
            det = f.multiply(det, pivot)
            work.multiply_row(j, f.reciprocal(pivot))
            for i in range(j + 1, n):
                work.add_rows(j, i, f.negate(work.get(i, j)))
        return det
