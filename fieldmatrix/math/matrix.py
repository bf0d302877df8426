"""
Matrix of field elements with exact row operations and Gauss-Jordan reduction.

The matrix is stored as a list of rows in row-major order. Each cell holds
either an element of the matrix's field or the UNSET marker; a newly created
matrix is entirely unset. All arithmetic goes through the field, so the same
code works over the rationals, over GF(p) and over GF(2^k).

A Matrix is not thread-safe. Independent matrices may share one field.
"""

import logging
import operator
from typing import Any, Generic, List, Sequence

from .field import Field, E
from ..exceptions import (InvalidDimensions, IndexOutOfRange, IncompatibleDimensions, MissingArgument,
                          UnsetElementError)
from ..names import UNSET_REPR

LOG = logging.getLogger(__name__)


class _Unset:
    """Marker type for a matrix cell that holds no value"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_Unset, cls).__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return UNSET_REPR

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()


class Matrix(Generic[E]):
    """
    Mutable rows x cols matrix over a field.

    The dimensions are fixed at construction. Row and column indices are
    0-based and validated on every access; negative indices are rejected rather
    than counted from the end.
    """

    def __init__(self, rows: int, cols: int, field: Field[E]):
        """
        Create a matrix with every cell unset.

        Args:
            rows: Number of rows, positive
            cols: Number of columns, positive
            field: Field used for all arithmetic on the cells

        Raises:
            InvalidDimensions: If rows <= 0 or cols <= 0
            MissingArgument: If field is None
        """
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(f"Invalid number of rows or columns: {rows}x{cols}")
        if field is None:
            raise MissingArgument("field must not be None")
        self._values = [[UNSET] * cols for _ in range(rows)]
        self._field = field

    # Factory methods
    @classmethod
    def from_rows(cls, data: Sequence[Sequence[Any]], field: Field[E]) -> 'Matrix[E]':
        """
        Create a matrix from a 2D sequence, converting each value with field.value_of().

        UNSET entries are kept as unset cells.

        Args:
            data: Sequence of rows, all of the same length
            field: Field of the new matrix

        Returns:
            New matrix holding the converted values
        """
        if data is None:
            raise MissingArgument("data must not be None")
        rows = len(data)
        cols = len(data[0]) if rows > 0 else 0
        result = cls(rows, cols, field)
        for i, row in enumerate(data):
            if len(row) != cols:
                raise InvalidDimensions(f"Row {i} has {len(row)} values, expected {cols}")
            for j, value in enumerate(row):
                result._values[i][j] = value if value is UNSET else field.value_of(value)
        return result

    @classmethod
    def zeros(cls, rows: int, cols: int, field: Field[E]) -> 'Matrix[E]':
        """Create a matrix with every cell set to the field's zero"""
        result = cls(rows, cols, field)
        zero = field.zero()
        result._values = [[zero] * cols for _ in range(rows)]
        return result

    @classmethod
    def identity(cls, n: int, field: Field[E]) -> 'Matrix[E]':
        """Create the n x n identity matrix"""
        result = cls.zeros(n, n, field)
        one = field.one()
        for i in range(n):
            result._values[i][i] = one
        return result

    # Basic matrix methods
    @property
    def field(self) -> Field[E]:
        """The field used to operate on the values in this matrix"""
        return self._field

    def row_count(self) -> int:
        """Get number of rows"""
        return len(self._values)

    def column_count(self) -> int:
        """Get number of columns"""
        return len(self._values[0])

    @property
    def shape(self):
        return self.row_count(), self.column_count()

    def _check_row(self, row: int) -> int:
        try:
            row = operator.index(row)
        except TypeError:
            raise IndexOutOfRange(f"Row index must be an integer: {row!r}") from None
        if not 0 <= row < len(self._values):
            raise IndexOutOfRange(f"Row index out of bounds: {row}")
        return row

    def _check_col(self, col: int) -> int:
        try:
            col = operator.index(col)
        except TypeError:
            raise IndexOutOfRange(f"Column index must be an integer: {col!r}") from None
        if not 0 <= col < len(self._values[0]):
            raise IndexOutOfRange(f"Column index out of bounds: {col}")
        return col

    def get(self, row: int, col: int) -> Any:
        """
        Get the value at (row, col), which may be UNSET.

        Raises:
            IndexOutOfRange: If row or col exceeds the bounds of the matrix
        """
        return self._values[self._check_row(row)][self._check_col(col)]

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Store a field element, or UNSET to clear the cell, at (row, col).

        Raises:
            IndexOutOfRange: If row or col exceeds the bounds of the matrix
        """
        self._values[self._check_row(row)][self._check_col(col)] = value

    def is_set(self, row: int, col: int) -> bool:
        """Check whether the cell at (row, col) holds a value"""
        return self.get(row, col) is not UNSET

    def is_fully_set(self) -> bool:
        """Check whether every cell holds a value"""
        return all(value is not UNSET for row in self._values for value in row)

    def __getitem__(self, key):
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key, value):
        row, col = key
        self.set(row, col, value)

    def _read(self, row: int, col: int) -> E:
        """Value at (row, col) for arithmetic use; indices must already be valid"""
        value = self._values[row][col]
        if value is UNSET:
            raise UnsetElementError(row, col)
        return value

    def _read_row(self, row: int) -> List[E]:
        return [self._read(row, j) for j in range(len(self._values[row]))]

    def check_fully_set(self) -> None:
        """Raise UnsetElementError for the first unset cell in row-major order"""
        for i, row in enumerate(self._values):
            for j, value in enumerate(row):
                if value is UNSET:
                    raise UnsetElementError(i, j)

    def clone(self) -> 'Matrix[E]':
        """
        Create a copy with its own cell grid.

        The field and the elements are shared with this matrix since both are
        immutable. Unset cells stay unset in the copy.
        """
        result = Matrix.__new__(type(self))
        result._field = self._field
        result._values = [list(row) for row in self._values]
        return result

    def __copy__(self) -> 'Matrix[E]':
        return self.clone()

    def to_rows(self) -> List[List[Any]]:
        """Get all rows as a new 2D list (cells may be UNSET)"""
        return [list(row) for row in self._values]

    def transpose(self) -> 'Matrix[E]':
        """Return the transposed matrix"""
        rows, cols = self.shape
        result = Matrix(cols, rows, self._field)
        for i in range(rows):
            for j in range(cols):
                result._values[j][i] = self._values[i][j]
        return result

    def submatrix(self, row_start: int, row_end: int, col_start: int, col_end: int) -> 'Matrix[E]':
        """
        Extract the block of rows [row_start, row_end) and columns [col_start, col_end).

        Raises:
            IndexOutOfRange: If a bound lies outside the matrix
            InvalidDimensions: If the block would be empty
        """
        rows, cols = self.shape
        if not 0 <= row_start <= row_end <= rows:
            raise IndexOutOfRange(f"Invalid row range [{row_start}, {row_end}) for {rows} rows")
        if not 0 <= col_start <= col_end <= cols:
            raise IndexOutOfRange(f"Invalid column range [{col_start}, {col_end}) for {cols} columns")
        result = Matrix(row_end - row_start, col_end - col_start, self._field)
        result._values = [list(row[col_start:col_end]) for row in self._values[row_start:row_end]]
        return result

    def augment(self, other: 'Matrix[E]') -> 'Matrix[E]':
        """
        Return [self | other], the columns of other appended to the right of this matrix.

        Raises:
            MissingArgument: If other is None
            IncompatibleDimensions: If the row counts differ
            ValueError: If the matrices are defined over different fields
        """
        if other is None:
            raise MissingArgument("other must not be None")
        if self.row_count() != other.row_count():
            raise IncompatibleDimensions(f"Cannot augment {self.row_count()} rows with {other.row_count()} rows")
        if self._field != other._field:
            raise ValueError(f"Matrices are over different fields: {self._field!r} and {other._field!r}")
        result = Matrix(self.row_count(), self.column_count() + other.column_count(), self._field)
        result._values = [list(a) + list(b) for a, b in zip(self._values, other._values)]
        return result

    def __eq__(self, other) -> bool:
        """Same shape, same field and equal cells under the field's equals()"""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape or self._field != other._field:
            return False
        for row_a, row_b in zip(self._values, other._values):
            for a, b in zip(row_a, row_b):
                if a is UNSET or b is UNSET:
                    if a is not b:
                        return False
                elif not self._field.equals(a, b):
                    return False
        return True

    __hash__ = None

    # String representation
    def __str__(self) -> str:
        return "[" + ",\n ".join("[" + ", ".join(str(value) for value in row) + "]" for row in self._values) + "]"

    def __repr__(self) -> str:
        return f"Matrix({self.row_count()}x{self.column_count()}, {self._field!r})"

    def to_multiline_string(self) -> str:
        """Multi-line string representation with right-aligned columns"""
        cells = [[str(value) for value in row] for row in self._values]
        width = max(len(cell) for row in cells for cell in row)
        lines = [" ".join(cell.rjust(width) for cell in row) for row in cells]
        return f"{self.row_count()}x{self.column_count()}\n" + "\n".join(lines)

    # Simple matrix row operations
    def swap_rows(self, row0: int, row1: int) -> None:
        """
        Swap two rows. A no-op if both indices are equal; unset cells are allowed.

        Raises:
            IndexOutOfRange: If a row index exceeds the bounds of the matrix
        """
        row0 = self._check_row(row0)
        row1 = self._check_row(row1)
        if row0 != row1:
            self._values[row0], self._values[row1] = self._values[row1], self._values[row0]

    def multiply_row(self, row: int, factor: E) -> None:
        """
        Multiply a row by a factor, row *= factor.

        Raises:
            IndexOutOfRange: If the row index exceeds the bounds of the matrix
            UnsetElementError: If the row has an unset cell; the row is left unchanged
        """
        row = self._check_row(row)
        f = self._field
        self._values[row] = [f.multiply(value, factor) for value in self._read_row(row)]

    def add_rows(self, src_row: int, dest_row: int, factor: E) -> None:
        """
        Add a multiple of one row to another, dest_row += src_row * factor.

        Raises:
            IndexOutOfRange: If a row index exceeds the bounds of the matrix
            UnsetElementError: If either row has an unset cell; nothing is changed
        """
        src_row = self._check_row(src_row)
        dest_row = self._check_row(dest_row)
        f = self._field
        src = self._read_row(src_row)
        dest = self._read_row(dest_row)
        self._values[dest_row] = [f.add(d, f.multiply(s, factor)) for s, d in zip(src, dest)]

    # Matrix multiplication
    def multiply(self, other: 'Matrix[E]') -> 'Matrix[E]':
        """
        Return the product of this matrix with other.

        Requires this.column_count() == other.row_count(). Each cell of the
        result is a field sum of rows x cols products, so the cost is
        O(self.rows * self.cols * other.cols) field operations.

        Raises:
            MissingArgument: If other is None
            IncompatibleDimensions: If the shared dimension does not match
            ValueError: If the matrices are defined over different fields
            UnsetElementError: If a cell of either operand is unset
        """
        if other is None:
            raise MissingArgument("other must not be None")
        if self.column_count() != other.row_count():
            raise IncompatibleDimensions(
                f"Incompatible matrix sizes for multiplication: {self.row_count()}x{self.column_count()} "
                f"and {other.row_count()}x{other.column_count()}")
        if self._field != other._field:
            raise ValueError(f"Matrices are over different fields: {self._field!r} and {other._field!r}")

        f = self._field
        rows = self.row_count()
        cols = other.column_count()
        cells = self.column_count()
        result = Matrix(rows, cols, f)
        for i in range(rows):
            for j in range(cols):
                total = f.zero()
                for k in range(cells):
                    total = f.add(f.multiply(self._read(i, k), other._read(k, j)), total)
                result._values[i][j] = total
        return result

    def __matmul__(self, other: 'Matrix[E]') -> 'Matrix[E]':
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # Advanced matrix operations
    def reduced_row_echelon_form(self) -> None:
        """
        Convert this matrix in place to reduced row echelon form (RREF) by Gauss-Jordan elimination.

        A pivot is the first row, scanning downwards, whose entry in the current
        column is not exactly the field's zero; no magnitude is ever compared.
        Afterwards every pivot equals one and is the only non-zero entry in its
        column, and rows without a pivot are all zero and sit at the bottom.
        Runs in O(rows * cols * min(rows, cols)) field operations.

        Raises:
            UnsetElementError: If any cell is unset; the matrix is left unchanged
        """
        self.check_fully_set()
        f = self._field
        rows = self.row_count()
        cols = self.column_count()
        LOG.debug(f"Reducing {rows}x{cols} matrix over {f!r}")

        # Compute row echelon form (REF)
        num_pivots = 0
        for j in range(cols):
            if num_pivots >= rows:
                break
            # Find a pivot row for this column
            pivot_row = num_pivots
            while pivot_row < rows and f.equals(self._values[pivot_row][j], f.zero()):
                pivot_row += 1
            if pivot_row == rows:
                continue  # Cannot eliminate on this column
            self.swap_rows(num_pivots, pivot_row)
            pivot_row = num_pivots
            num_pivots += 1

            # Simplify the pivot row
            self.multiply_row(pivot_row, f.reciprocal(self._values[pivot_row][j]))

            # Eliminate rows below
            for i in range(pivot_row + 1, rows):
                self.add_rows(pivot_row, i, f.negate(self._values[i][j]))

        # Compute reduced row echelon form (RREF)
        for i in range(num_pivots - 1, -1, -1):
            # Find pivot
            pivot_col = 0
            while pivot_col < cols and f.equals(self._values[i][pivot_col], f.zero()):
                pivot_col += 1
            if pivot_col == cols:
                continue  # Skip this all-zero row

            # Eliminate rows above
            for k in range(i - 1, -1, -1):
                self.add_rows(i, k, f.negate(self._values[k][pivot_col]))

        LOG.debug(f"Reduced {rows}x{cols} matrix has {num_pivots} pivots")
