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
"""Integer helpers for rational arithmetic

Contains the greatest common divisor used for reduction to lowest terms and
the magnitude bound applied to numerators and denominators.

Magnitudes are unsigned integers limited to MAGNITUDE_BITS bits by default.
Every raw product or sum is checked against the bound before it is reduced
and MagnitudeOverflowError is raised if it does not fit. The bound can be
changed or lifted with set_magnitude_bits().
"""

import logging
from typing import Optional, Tuple

from .names import MAGNITUDE_BITS
from .exceptions import MagnitudeOverflowError, ZeroDenominatorError

_magnitude_limit = (1 << MAGNITUDE_BITS) - 1


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two magnitudes

    Uses iterative remainder reduction after ordering the arguments so that
    the first one is not smaller than the second. gcd(a, 0) is a, and
    gcd(0, 0) is 0.

    Example:
        gcd(10, 4)  # 2

    Args:
        a (int): First non-negative integer
        b (int): Second non-negative integer

    Returns:
        (int): The greatest common divisor of a and b
    """
    if a < 0 or b < 0:
        raise ValueError(f"Magnitudes must be non-negative, got {a} and {b}.")
    if a < b:
        a, b = b, a
    if b == 1:
        return 1
    if a == b or b == 0:
        return a
    r = a % b
    while r > 0:
        a = b
        b = r
        r = a % b
    return b


def reduced_pair(numerator: int, denominator: int) -> Tuple[int, int]:
    """Divide a magnitude pair by its greatest common divisor

    A zero numerator reduces to (0, 1).
    """
    if denominator == 0:
        raise ZeroDenominatorError("Denominator is zero.")
    if numerator == 0:
        return 0, 1
    g = gcd(numerator, denominator)
    return numerator // g, denominator // g


def set_magnitude_bits(bits: Optional[int]) -> None:
    """Set the bit width of numerator and denominator magnitudes

    Args:
        bits (int or None): Number of bits of the unsigned magnitude. None lifts the
            bound and lets magnitudes grow without limit.
    """
    global _magnitude_limit
    if bits is None:
        _magnitude_limit = None
        logging.info('  Rational magnitudes are unbounded.')
        return
    if isinstance(bits, bool) or not isinstance(bits, int) or bits < 1:
        raise ValueError(f"Magnitude bits must be a positive integer or None, got {bits!r}.")
    _magnitude_limit = (1 << bits) - 1
    logging.info(f'  Rational magnitudes are bounded to {bits} bits.')


def get_magnitude_limit() -> Optional[int]:
    """Largest magnitude allowed, or None if magnitudes are unbounded"""
    return _magnitude_limit


def check_magnitude(value: int, operation: str = '') -> int:
    """Return value unchanged if it fits the magnitude bound, raise otherwise"""
    if _magnitude_limit is not None and value > _magnitude_limit:
        logging.debug(f'Magnitude overflow in {operation or "construction"}: {value}')
        raise MagnitudeOverflowError(value, _magnitude_limit, operation)
    return value
