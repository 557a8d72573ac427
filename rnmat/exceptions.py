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
"""Exceptions raised by rational numbers and rational matrices

Two tiers of failures exist. Fatal errors indicate a violated precondition
(zero denominator, magnitude overflow, ragged grid) and are not meant to be
caught and retried. Matrix mutation errors are recoverable: the matrix is left
unchanged and the caller may retry with corrected input.
"""

from .names import ROW_DISMATCH, COL_DISMATCH, INVALID_INDEX

# Fatal


class ZeroDenominatorError(ZeroDivisionError):
    """A rational number would end up with a zero denominator"""


class MagnitudeOverflowError(OverflowError):
    """A numerator or denominator exceeds the configured magnitude bound"""

    def __init__(self, value, limit, operation=''):
        self.value = value
        self.limit = limit
        self.operation = operation
        where = f" in {operation}" if operation else ''
        super().__init__(f"Magnitude {value} exceeds the bound {limit}{where}.")


class NonRectangularGridError(ValueError):
    """Rows of different lengths were given to a matrix constructor"""


# Recoverable


class MatrixMutationError(Exception):
    """Base class of recoverable matrix mutation errors.

    The attribute ``kind`` holds one of the tags ROW_DISMATCH, COL_DISMATCH
    or INVALID_INDEX from rnmat.names.
    """
    kind = None


class RowDismatch(MatrixMutationError):
    """Appended row length differs from the column count"""
    kind = ROW_DISMATCH

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(f"Row of length {found} does not fit a matrix with {expected} columns.")


class ColDismatch(MatrixMutationError):
    """Appended column length differs from the row count"""
    kind = COL_DISMATCH

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(f"Column of length {found} does not fit a matrix with {expected} rows.")


class InvalidIndex(MatrixMutationError, IndexError):
    """Row or column index outside the matrix"""
    kind = INVALID_INDEX

    def __init__(self, index, size, axis='row'):
        self.index = index
        self.size = size
        self.axis = axis
        super().__init__(f"{axis.capitalize()} index {index} out of range for {size} {axis}s.")
