import pytest
from rnmat import MAGNITUDE_BITS, RationalNumber, RationalMatrix, set_magnitude_bits


@pytest.fixture(autouse=True)
def default_magnitude_bits():
    """Restore the default magnitude bound after every test."""
    set_magnitude_bits(MAGNITUDE_BITS)
    yield
    set_magnitude_bits(MAGNITUDE_BITS)


@pytest.fixture
def mx_2x2() -> RationalMatrix:
    return RationalMatrix.from_grid([[(1, -2), (-3, 4)], [(-5, 6), (7, -8)]])


@pytest.fixture
def row_pair():
    return [RationalNumber(1, 2), RationalNumber(3, 4)]
