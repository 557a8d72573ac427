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
"""
Dense matrix of exact rational numbers.

RationalMatrix stores its entries row-major as lists of RationalNumber and
keeps all rows the same length. Row and column counts are always derived
from the stored rows. Shape violations on construction are fatal
(NonRectangularGridError), while failed mutations raise the recoverable
RowDismatch, ColDismatch or InvalidIndex and leave the matrix unchanged.
"""

import logging
import operator
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy import sparse
from sympy import Matrix, Rational

from .names import ENTRY_SEPARATOR
from .exceptions import ColDismatch, InvalidIndex, NonRectangularGridError, RowDismatch
from .rational_math import RationalMath
from .rational_number import RationalNumber, _coerce


def _check_rectangular(rows: Sequence[Sequence]) -> None:
    if not rows:
        return
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise NonRectangularGridError(f"Row {i} has length {len(row)}, but row 0 has length {width}.")


def _check_entries(values: Iterable) -> None:
    for value in values:
        if not isinstance(value, RationalNumber):
            raise TypeError(f"Matrix entries must be RationalNumber, got {type(value).__name__}.")


class RationalMatrix:
    """
    Matrix with RationalNumber entries.

    The matrix owns its rows: input rows are copied and accessors return
    copies, so a matrix only changes through its own mutators.

    Example:
        mx = RationalMatrix.from_grid([[(1, 2), (3, 4)], [(-5, 6), (7, -8)]])
        mx.swap_rows(0, 1)

    Args:
        rows (iterable of iterables of RationalNumber): Initial rows (default: no rows)

    Raises:
        NonRectangularGridError: If the rows differ in length
        TypeError: If an entry is not a RationalNumber
    """
    __hash__ = None

    def __init__(self, rows: Optional[Iterable[Iterable[RationalNumber]]] = None):
        self._rows: List[List[RationalNumber]] = []
        if rows is None:
            return
        rows = [list(row) for row in rows]
        _check_rectangular(rows)
        for row in rows:
            _check_entries(row)
        self._rows = rows

    @classmethod
    def new_empty(cls) -> 'RationalMatrix':
        """Matrix with zero rows and zero columns"""
        return cls()

    @classmethod
    def from_grid(cls, grid: Iterable[Iterable[Tuple[int, int]]]) -> 'RationalMatrix':
        """
        Create a RationalMatrix from rows of (numerator, denominator) pairs.

        Example:
            RationalMatrix.from_grid([[(1, -2), (-3, 4)], [(-5, 6), (7, -8)]])

        Args:
            grid: Rows of integer pairs, all rows of the same length

        Returns:
            RationalMatrix with the reduced values

        Raises:
            NonRectangularGridError: If any row length differs from the first row's length
            ZeroDenominatorError: If any pair has a zero denominator
        """
        rows = [list(row) for row in grid]
        _check_rectangular(rows)
        matrix = cls()
        matrix._rows = [[RationalNumber(numerator, denominator) for numerator, denominator in row] for row in rows]
        logging.debug(f'Built {matrix.get_row_count()}x{matrix.get_column_count()} rational matrix from grid.')
        return matrix

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'RationalMatrix':
        """
        Create a RationalMatrix from a 2-D numpy array of exact values.

        Args:
            array: Integer array, or object array of ints, Fractions, sympy Rationals or RationalNumbers

        Returns:
            RationalMatrix with the same values
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got {array.ndim} dimensions.")
        values = RationalMath.array_to_rationals(array)
        return cls(values.tolist())

    @classmethod
    def from_sparse(cls, sparse_matrix) -> 'RationalMatrix':
        """
        Create a RationalMatrix from an integer or bool scipy sparse matrix.

        Args:
            sparse_matrix: Scipy sparse matrix or array with integer or bool dtype

        Returns:
            RationalMatrix with the same values
        """
        if not sparse.issparse(sparse_matrix):
            raise TypeError(f"Expected a scipy sparse matrix, got {type(sparse_matrix).__name__}.")
        if not np.issubdtype(sparse_matrix.dtype, np.integer) and sparse_matrix.dtype != np.bool_:
            raise TypeError(f"Cannot convert sparse matrix of dtype {sparse_matrix.dtype} to rationals without loss")
        rows, cols = sparse_matrix.shape
        values = [[RationalNumber.zero() for _ in range(cols)] for _ in range(rows)]
        # Convert to COO format for easy iteration
        coo = sparse_matrix.tocoo()
        for i, j, v in zip(coo.row, coo.col, coo.data):
            # duplicate COO entries are summed
            values[i][j] = values[i][j].add(int(v))
        return cls(values)

    @classmethod
    def from_sympy(cls, matrix: Matrix) -> 'RationalMatrix':
        """Create a RationalMatrix from a sympy Matrix with rational entries."""
        rows, cols = matrix.shape
        values = []
        for i in range(rows):
            row = []
            for j in range(cols):
                value = matrix[i, j]
                if not isinstance(value, Rational):
                    raise TypeError(f"Entry ({i}, {j}) = {value} is not a sympy Rational.")
                row.append(RationalMath.to_rational(value))
            values.append(row)
        return cls(values)

    # dimensions
    def get_row_count(self) -> int:
        """Get number of rows."""
        return len(self._rows)

    def get_column_count(self) -> int:
        """Get number of columns, 0 for a matrix without rows."""
        if not self._rows:
            return 0
        return len(self._rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.get_row_count(), self.get_column_count()

    def is_empty(self) -> bool:
        return not self._rows

    def _check_index(self, index, size: int, axis: str) -> int:
        index = operator.index(index)
        if not 0 <= index < size:
            logging.debug(f'{axis.capitalize()} index {index} out of range for {size} {axis}s.')
            raise InvalidIndex(index, size, axis)
        return index

    # access
    def get_value_at(self, row: int, col: int) -> RationalNumber:
        """
        Get value at position (row, col).

        Raises:
            InvalidIndex: If row or col is out of range
        """
        row = self._check_index(row, self.get_row_count(), 'row')
        col = self._check_index(col, self.get_column_count(), 'column')
        return self._rows[row][col]

    def get_signum_at(self, row: int, col: int) -> int:
        """Get sign (-1, 0, 1) of value at position."""
        return self.get_value_at(row, col).signum()

    def get_row(self, row: int) -> List[RationalNumber]:
        """Get a row as a list of RationalNumbers."""
        row = self._check_index(row, self.get_row_count(), 'row')
        return list(self._rows[row])

    def get_column(self, col: int) -> List[RationalNumber]:
        """Get a column as a list of RationalNumbers."""
        col = self._check_index(col, self.get_column_count(), 'column')
        return [row[col] for row in self._rows]

    def get_rows(self) -> List[List[RationalNumber]]:
        return [list(row) for row in self._rows]

    def to_grid(self) -> List[List[Tuple[int, int]]]:
        """Rows of (signed numerator, denominator) pairs, the inverse of from_grid"""
        return [[(value.signed_numerator, value.denominator) for value in row] for row in self._rows]

    # mutation
    def append_row(self, row: Iterable[RationalNumber]) -> None:
        """
        Append a row at the bottom of the matrix.

        Raises:
            RowDismatch: If the matrix has rows and the new row length differs from the column count
        """
        row = list(row)
        _check_entries(row)
        if self._rows and len(row) != self.get_column_count():
            logging.debug(f'Cannot append row of length {len(row)} to {self.get_row_count()}x'
                          f'{self.get_column_count()} matrix.')
            raise RowDismatch(self.get_column_count(), len(row))
        self._rows.append(row)

    def append_column(self, col: Iterable[RationalNumber]) -> None:
        """
        Append a column at the right of the matrix.

        A matrix without rows gets one single-entry row per element of col.

        Raises:
            ColDismatch: If the matrix has rows and the column length differs from the row count
        """
        col = list(col)
        _check_entries(col)
        if not self._rows:
            self._rows = [[value] for value in col]
            return
        if len(col) != self.get_row_count():
            logging.debug(f'Cannot append column of length {len(col)} to {self.get_row_count()}x'
                          f'{self.get_column_count()} matrix.')
            raise ColDismatch(self.get_row_count(), len(col))
        for row, value in zip(self._rows, col):
            row.append(value)

    def swap_rows(self, row1: int, row2: int) -> None:
        """
        Swap two rows.

        Raises:
            InvalidIndex: If either index is out of range
        """
        row1 = self._check_index(row1, self.get_row_count(), 'row')
        row2 = self._check_index(row2, self.get_row_count(), 'row')
        if row1 == row2:
            return
        self._rows[row1], self._rows[row2] = self._rows[row2], self._rows[row1]

    def scale_row(self, factor: RationalNumber, row: int) -> None:
        """
        Multiply every entry of a row by factor, in place.

        Args:
            factor: Scalar multiplier
            row: Row index

        Raises:
            InvalidIndex: If row is out of range
        """
        row = self._check_index(row, self.get_row_count(), 'row')
        factor = _coerce(factor)
        target = self._rows[row]
        # all products are computed before the row is touched
        target[:] = [value.multiply(factor) for value in target]

    # shape checks
    def is_multiplication_compatible(self, other: 'RationalMatrix') -> bool:
        """
        Check if self * other is defined.

        True if both matrices have no rows, or if the column count of this
        matrix equals the row count of other (m x n times n x p). The check
        is directional: a 2x2 matrix accepts a 2x1 matrix as right operand,
        while a 2x1 matrix does not accept a 2x2 one.
        """
        if not isinstance(other, RationalMatrix):
            return False
        if self.is_empty() and other.is_empty():
            return True
        return self.get_column_count() == other.get_row_count()

    # copies
    def copy(self) -> 'RationalMatrix':
        """Create a copy of the matrix."""
        result = RationalMatrix()
        result._rows = self.get_rows()
        return result

    def transpose(self) -> 'RationalMatrix':
        """
        Return transposed matrix.

        A matrix with rows but no columns transposes to the empty matrix.
        """
        result = RationalMatrix()
        result._rows = [list(col) for col in zip(*self._rows)]
        return result

    # conversion
    def to_numpy(self) -> np.ndarray:
        """Object array of RationalNumbers with shape (rows, cols)"""
        result = np.empty(self.shape, dtype=object)
        for i, row in enumerate(self._rows):
            for j, value in enumerate(row):
                result[i, j] = value
        return result

    def to_fractions(self) -> np.ndarray:
        """Object array of fractions.Fraction with shape (rows, cols)"""
        return RationalMath.rationals_to_fractions(self.to_numpy())

    def to_sympy(self) -> Matrix:
        rows, cols = self.shape
        return Matrix(rows, cols, [value.to_sympy() for row in self._rows for value in row])

    # comparison and output
    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        row_count = self.get_row_count()
        if row_count != other.get_row_count():
            return False
        if row_count == 0:
            return True
        if self.get_column_count() != other.get_column_count():
            return False
        return all(a == b for row, other_row in zip(self._rows, other._rows) for a, b in zip(row, other_row))

    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", "", "", "", ENTRY_SEPARATOR)

    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        return self._matrix_to_string("{\n", "}\n", " [", "]\n", "", " ", " ", ",")

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str, row_postfix: str, row_separator: str,
                          col_prefix: str, col_postfix: str, col_separator: str) -> str:
        result = [prefix]
        for i, row in enumerate(self._rows):
            if i > 0:
                result.append(row_separator)
            result.append(row_prefix)
            for j, value in enumerate(row):
                if j > 0:
                    result.append(col_separator)
                result.append(col_prefix)
                result.append(str(value))
                result.append(col_postfix)
            result.append(row_postfix)
        result.append(postfix)
        return ''.join(result)

    def __repr__(self) -> str:
        return f"RationalMatrix.from_grid({self.to_grid()})"
