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
"""Exact rational numbers in lowest terms

A RationalNumber keeps its sign apart from an unsigned pair of magnitudes
(numerator, denominator). Instances are immutable and always canonical: the
magnitudes are coprime, the denominator is positive and zero is stored as
(False, 0, 1). Every arithmetic operation computes raw magnitudes, checks
them against the magnitude bound (see rnmat.utils) and reduces the result.
"""

import numbers
import operator
from fractions import Fraction
from typing import Optional, Tuple, Union

from sympy import Rational

from .names import FRACTION_SEPARATOR
from .exceptions import ZeroDenominatorError
from .utils import check_magnitude, gcd

# Values accepted wherever a RationalNumber operand is expected
Operand = Union['RationalNumber', int]


def _as_int(value, name='value') -> int:
    """Python int from an integral value. Floats are rejected."""
    if isinstance(value, float):
        raise TypeError(f"Rational numbers are built from integers, got float {name} {value!r}.")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"Rational numbers are built from integers, got {type(value).__name__} {name}.") from None


def _is_operand(value) -> bool:
    return isinstance(value, (RationalNumber, numbers.Integral))


def _coerce(value) -> 'RationalNumber':
    if isinstance(value, RationalNumber):
        return value
    if isinstance(value, numbers.Integral):
        return RationalNumber(int(value))
    raise TypeError(f"Cannot use {type(value).__name__} as a rational operand.")


def _signed_pair(value) -> Tuple[int, int]:
    if isinstance(value, RationalNumber):
        return value.signed_numerator, value._denominator
    return int(value), 1


class RationalNumber:
    """
    Exact fraction with a separate sign flag and unsigned magnitudes.

    Example:
        RationalNumber(1, -2) + RationalNumber(3, 4)  # RationalNumber(1, 4)

    Args:
        numerator (int): Signed numerator
        denominator (int): Signed denominator, must not be zero (default 1)

    Raises:
        ZeroDenominatorError: If the denominator is zero
        MagnitudeOverflowError: If a magnitude exceeds the configured bound
        TypeError: If an argument is not an integer
    """
    __slots__ = ('_sign', '_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int = 1):
        numerator = _as_int(numerator, 'numerator')
        denominator = _as_int(denominator, 'denominator')
        if denominator == 0:
            raise ZeroDenominatorError("Denominator is zero.")
        sign = (numerator < 0) != (denominator < 0)
        self._assign(sign, check_magnitude(abs(numerator)), check_magnitude(abs(denominator)))

    def _assign(self, sign: bool, numerator: int, denominator: int) -> None:
        """Reduce the magnitudes and store the canonical form"""
        if denominator == 0:
            raise ZeroDenominatorError("Denominator is zero.")
        if numerator == 0:
            sign = False
            denominator = 1
        else:
            g = gcd(denominator, numerator)
            if g > 1:
                numerator //= g
                denominator //= g
        object.__setattr__(self, '_sign', sign)
        object.__setattr__(self, '_numerator', numerator)
        object.__setattr__(self, '_denominator', denominator)

    @classmethod
    def _from_magnitudes(cls, sign: bool, numerator: int, denominator: int) -> 'RationalNumber':
        result = cls.__new__(cls)
        result._assign(sign, numerator, denominator)
        return result

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __reduce__(self):
        return (type(self), (self.signed_numerator, self._denominator))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # construction helpers
    @classmethod
    def try_create(cls, numerator: int, denominator: int = 1) -> Optional['RationalNumber']:
        """Like the constructor, but returns None instead of raising for a zero denominator"""
        if _as_int(denominator, 'denominator') == 0:
            return None
        return cls(numerator, denominator)

    @classmethod
    def zero(cls) -> 'RationalNumber':
        """Canonical zero (a new instance on every call)"""
        return cls(0, 1)

    @classmethod
    def one(cls) -> 'RationalNumber':
        return cls(1, 1)

    @classmethod
    def value_of(cls, value) -> 'RationalNumber':
        """
        Create a RationalNumber from various exact types.

        Accepted are RationalNumber, int, fractions.Fraction, sympy.Rational and
        strings of the form "n/d" or "n". Floats are rejected.
        """
        if isinstance(value, RationalNumber):
            return value
        if isinstance(value, Rational):
            return cls(int(value.p), int(value.q))
        if isinstance(value, Fraction):
            return cls(value.numerator, value.denominator)
        if isinstance(value, str):
            parts = value.strip().split(FRACTION_SEPARATOR)
            if len(parts) > 2:
                raise ValueError(f"Invalid fraction format: {value}")
            try:
                numerator = int(parts[0])
                denominator = int(parts[1]) if len(parts) == 2 else 1
            except ValueError:
                raise ValueError(f"Invalid fraction format: {value}") from None
            return cls(numerator, denominator)
        if isinstance(value, numbers.Integral):
            return cls(int(value))
        raise TypeError(f"Cannot convert {type(value).__name__} to RationalNumber")

    # fields
    @property
    def sign(self) -> bool:
        """True if the number is negative"""
        return self._sign

    @property
    def numerator(self) -> int:
        """Numerator magnitude"""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator magnitude"""
        return self._denominator

    @property
    def signed_numerator(self) -> int:
        return -self._numerator if self._sign else self._numerator

    # predicates
    def is_negative(self) -> bool:
        return self._sign and self._numerator != 0

    def is_positive(self) -> bool:
        return not self._sign and self._numerator != 0

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return not self._sign and self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._numerator == 0:
            return 0
        return -1 if self._sign else 1

    # arithmetic
    def _combine(self, other: 'RationalNumber', other_sign: bool, operation: str) -> 'RationalNumber':
        """Sum of self and a term with the magnitudes of other and the sign other_sign"""
        denominator = check_magnitude(self._denominator * other._denominator, operation)
        left = check_magnitude(self._numerator * other._denominator, operation)
        right = check_magnitude(other._numerator * self._denominator, operation)
        if self._sign == other_sign:
            numerator = check_magnitude(left + right, operation)
            sign = self._sign
        elif left >= right:
            numerator = left - right
            sign = self._sign
        else:
            numerator = right - left
            sign = other_sign
        return self._from_magnitudes(sign, numerator, denominator)

    def add(self, other: Operand) -> 'RationalNumber':
        """Add two rational numbers"""
        other = _coerce(other)
        return self._combine(other, other._sign, 'add')

    def subtract(self, other: Operand) -> 'RationalNumber':
        """Subtract other from this rational number"""
        other = _coerce(other)
        return self._combine(other, not other._sign, 'subtract')

    def multiply(self, other: Operand) -> 'RationalNumber':
        """Multiply two rational numbers"""
        other = _coerce(other)
        numerator = check_magnitude(self._numerator * other._numerator, 'multiply')
        denominator = check_magnitude(self._denominator * other._denominator, 'multiply')
        return self._from_magnitudes(self._sign != other._sign, numerator, denominator)

    def divide(self, other: Operand) -> 'RationalNumber':
        """
        Divide this rational number by other.

        Raises:
            ZeroDenominatorError: If other is zero
        """
        other = _coerce(other)
        if other.is_zero():
            raise ZeroDenominatorError("Division by zero")
        numerator = check_magnitude(self._numerator * other._denominator, 'divide')
        denominator = check_magnitude(self._denominator * other._numerator, 'divide')
        return self._from_magnitudes(self._sign != other._sign, numerator, denominator)

    def negate(self) -> 'RationalNumber':
        """Return negation, zero stays non-negative"""
        return self._from_magnitudes(not self._sign, self._numerator, self._denominator)

    def abs(self) -> 'RationalNumber':
        return self._from_magnitudes(False, self._numerator, self._denominator)

    def invert(self) -> 'RationalNumber':
        """
        Return multiplicative inverse (1/this).

        Raises:
            ZeroDenominatorError: If this number is zero
        """
        if self.is_zero():
            raise ZeroDenominatorError("Division by zero")
        return self._from_magnitudes(self._sign, self._denominator, self._numerator)

    def pow(self, exponent: int) -> 'RationalNumber':
        """Return this^exponent for an integer exponent"""
        exponent = _as_int(exponent, 'exponent')
        base = self
        if exponent < 0:
            base = self.invert()
            exponent = -exponent
        if exponent == 0:
            return self.one()
        if base._numerator <= 1 and base._denominator == 1:
            # 0, 1 and -1 never grow
            return self._from_magnitudes(base._sign and exponent % 2 == 1, base._numerator, 1)
        # square-and-multiply, base is never squared past the highest exponent bit
        result = self.one()
        while True:
            if exponent & 1:
                result = result.multiply(base)
            exponent >>= 1
            if not exponent:
                return result
            base = base.multiply(base)

    def compare_to(self, other: Operand) -> int:
        """Compare to another rational number: -1 if less, 0 if equal, 1 if greater"""
        if not _is_operand(other):
            raise TypeError(f"Cannot compare RationalNumber with {type(other).__name__}")
        sn, sd = _signed_pair(self)
        on, od = _signed_pair(other)
        left, right = sn * od, on * sd
        return (left > right) - (left < right)

    # conversion
    def to_fraction(self) -> Fraction:
        return Fraction(self.signed_numerator, self._denominator)

    def to_sympy(self) -> Rational:
        return Rational(self.signed_numerator, self._denominator)

    # Python protocol
    def __eq__(self, other) -> bool:
        if isinstance(other, RationalNumber):
            if self._numerator == 0 and other._numerator == 0:
                return True
            return (self._sign == other._sign and self._numerator == other._numerator
                    and self._denominator == other._denominator)
        if isinstance(other, numbers.Integral):
            return self._denominator == 1 and self.signed_numerator == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self.signed_numerator)
        return hash((self._sign, self._numerator, self._denominator))

    def __lt__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _coerce(other).divide(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __str__(self) -> str:
        if self._denominator == 1:
            text = str(self._numerator)
        else:
            text = f"{self._numerator}{FRACTION_SEPARATOR}{self._denominator}"
        return '-' + text if self._sign else text

    def __repr__(self) -> str:
        return f"RationalNumber({self.signed_numerator}, {self._denominator})"
