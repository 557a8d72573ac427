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
Exact conversions between RationalNumber and other number types.

Converts single values and numpy arrays between RationalNumber,
fractions.Fraction and sympy.Rational. Only exact inputs are accepted:
Python and numpy integers, Fractions, sympy Rationals and Integers. Floats
raise TypeError since their binary value is rarely the intended fraction.
"""

from fractions import Fraction
import numbers
from typing import Union

import numpy as np
from sympy import Rational

from .rational_number import RationalNumber

# Type alias for exact values that can be converted to RationalNumber
Exact = Union[RationalNumber, int, Fraction, Rational]


class RationalMath:
    """Utility class for conversions of exact rational values."""

    @staticmethod
    def is_exact(value) -> bool:
        """
        Check if a value can be converted to a RationalNumber without loss.

        Args:
            value: Value to check

        Returns:
            True for RationalNumber, integers, Fraction and sympy.Rational
        """
        return isinstance(value, (RationalNumber, Fraction, Rational, numbers.Integral))

    @staticmethod
    def to_rational(value: Exact) -> RationalNumber:
        """
        Convert an exact numeric value to a RationalNumber.

        Args:
            value: A RationalNumber, int, Fraction, or sympy.Rational

        Returns:
            RationalNumber representation of the value
        """
        if not RationalMath.is_exact(value):
            raise TypeError(f"Cannot convert {type(value).__name__} to RationalNumber without loss")
        return RationalNumber.value_of(value)

    @staticmethod
    def to_fraction(value: Exact) -> Fraction:
        """Convert an exact value to a Fraction."""
        return RationalMath.to_rational(value).to_fraction()

    @staticmethod
    def to_sympy_rational(value: Exact) -> Rational:
        """Convert an exact value to a sympy Rational."""
        if isinstance(value, Rational):
            return value
        return RationalMath.to_rational(value).to_sympy()

    @staticmethod
    def _check_exact_dtype(arr: np.ndarray) -> None:
        if arr.dtype != object and not np.issubdtype(arr.dtype, np.integer) and arr.dtype != np.bool_:
            raise TypeError(f"Cannot convert array of dtype {arr.dtype} to rationals without loss")

    @staticmethod
    def array_to_rationals(arr: np.ndarray) -> np.ndarray:
        """
        Convert a numpy array of exact values to an array of RationalNumbers.

        Args:
            arr: Integer or object array

        Returns:
            Object array containing RationalNumber objects
        """
        arr = np.asarray(arr)
        RationalMath._check_exact_dtype(arr)
        result = np.empty(arr.shape, dtype=object)
        flat_result = result.flat
        for i, val in enumerate(arr.flat):
            if isinstance(val, np.bool_):
                val = int(val)
            flat_result[i] = RationalMath.to_rational(val)
        return result

    @staticmethod
    def rationals_to_fractions(arr: np.ndarray) -> np.ndarray:
        """
        Convert an array of RationalNumbers to Fractions.

        Args:
            arr: Object array containing RationalNumbers

        Returns:
            Object array containing Fraction objects
        """
        result = np.empty(arr.shape, dtype=object)
        flat_result = result.flat
        for i, val in enumerate(arr.flat):
            flat_result[i] = RationalMath.to_fraction(val)
        return result

    @staticmethod
    def rationals_to_sympy(arr: np.ndarray) -> np.ndarray:
        """Convert an array of RationalNumbers to sympy Rationals."""
        result = np.empty(arr.shape, dtype=object)
        flat_result = result.flat
        for i, val in enumerate(arr.flat):
            flat_result[i] = RationalMath.to_sympy_rational(val)
        return result
