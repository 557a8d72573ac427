"""Rational number tests: canonical form, arithmetic, overflow handling and conversions."""
import copy
import pickle
import random
import pytest
from fractions import Fraction
from sympy import Rational as SympyRational, Integer as SympyInteger
from rnmat import RationalNumber, ZeroDenominatorError, MagnitudeOverflowError, gcd, set_magnitude_bits

# =============================================================================
# Samples: numerators and denominators in [-20, 20], no zero denominators
# =============================================================================

_rng = random.Random(20221)
_denominators = [d for d in range(-20, 21) if d != 0]
pair_samples = [(_rng.randint(-20, 20), _rng.choice(_denominators)) for _ in range(60)]
nonzero_samples = [p for p in pair_samples if p[0] != 0]
two_samples = [(_rng.choice(pair_samples), _rng.choice(pair_samples)) for _ in range(60)]
three_samples = [(_rng.choice(pair_samples), _rng.choice(pair_samples), _rng.choice(pair_samples)) for _ in range(60)]


def R(n, d=1):
    return RationalNumber(n, d)


# =============================================================================
# Construction
# =============================================================================


def test_eq():
    assert R(1, 2) == R(-1, -2)
    assert R(0, 1) == R(0, 3)
    assert R(4, 2) == R(2, 1)
    assert R(1, 2) != R(-1, 2)


def test_fields_are_canonical():
    value = R(6, -8)
    assert (value.sign, value.numerator, value.denominator) == (True, 3, 4)
    assert value.signed_numerator == -3
    zero = R(0, -7)
    assert (zero.sign, zero.numerator, zero.denominator) == (False, 0, 1)


def test_negative():
    assert R(1, -2).is_negative()
    assert not R(1, 2).is_negative()
    assert R(-1, 2).is_negative()
    assert not R(-1, -2).is_negative()
    assert R(-1, -2).is_positive()


def test_zero():
    assert R(0, 100).is_zero()
    assert not R(1, 2).is_zero()
    assert not R(0, -3).is_negative()
    assert not R(0, -3).is_positive()
    assert RationalNumber.zero() == R(0, 5)
    assert RationalNumber.zero() is not RationalNumber.zero()


def test_zero_denominator():
    with pytest.raises(ZeroDenominatorError):
        R(1, 0)
    with pytest.raises(ZeroDivisionError):
        R(0, 0)


def test_try_create():
    assert RationalNumber.try_create(0, 0) is None
    assert RationalNumber.try_create(1, 0) is None
    assert RationalNumber.try_create(2, 4) == R(1, 2)


@pytest.mark.parametrize('args', [(0.5, 1), (1, 2.0), ('1', 2), (None, 1)])
def test_construction_needs_integers(args):
    with pytest.raises(TypeError):
        RationalNumber(*args)


def test_other_predicates():
    assert R(3, 3).is_one()
    assert not R(-1).is_one()
    assert R(4, 2).is_integer()
    assert not R(1, 2).is_integer()
    assert [R(-1, 2).signum(), R(0).signum(), R(5, 3).signum()] == [-1, 0, 1]
    assert bool(R(1, 9))
    assert not bool(R(0, 9))


# =============================================================================
# Arithmetic
# =============================================================================


def test_add():
    assert R(1, 4) + R(1, 4) == R(1, 2)
    assert R(1, 2) + R(1, -2) == R(0, 2)
    assert R(-1, 2) + R(-1, 2) == R(-1)
    assert R(-1, 3) + R(1, 2) == R(1, 6)
    assert R(1, 3) + R(-1, 2) == R(-1, 6)
    assert R(1, 2).add(1) == R(3, 2)


def test_sub():
    assert R(1, 4) - R(-1, 4) == R(1, 2)
    assert R(1, 2) - R(1, 2) == R(0, 2)
    assert R(-1, 2) - R(1, 2) == R(-1)
    assert R(1, 3) - R(1, 2) == R(-1, 6)
    assert R(1, 3).subtract(R(-2, 3)) == R(1)


def test_mul():
    assert R(1, 2) * R(1, 2) == R(1, 4)
    assert R(1, 2) * R(3, 4) == R(3, 8)
    assert R(1, -2) * R(1, 2) == R(-1, 4)
    assert R(-1, 2) * R(-2, 3) == R(1, 3)
    assert RationalNumber.zero() == R(0, 10) * R(1, 2)


def test_div():
    assert R(1, 2) / R(1, 2) == R(1, 1)
    assert R(1, -2) / R(1, 2) == R(-1, 1)
    assert RationalNumber.zero() == R(0, 10) / R(1, 2)
    assert R(3, 4).divide(R(-3, 8)) == R(-2)


def test_div_zero():
    with pytest.raises(ZeroDenominatorError):
        R(1, 2) / R(0, 1)
    with pytest.raises(ZeroDenominatorError):
        R(0, 1).divide(RationalNumber.zero())


def test_neg():
    assert -R(0, 1) == R(0, 1)
    assert not (-R(0, 1)).sign
    assert -R(-1, 2) == R(1, 2)
    assert R(1, 2).negate() == R(-1, 2)


def test_integer_operands():
    assert 1 - R(1, 4) == R(3, 4)
    assert 2 * R(1, 4) == R(1, 2)
    assert 1 / R(1, 4) == R(4)
    assert R(1, 4) + 1 == R(5, 4)
    assert R(2) == 2
    assert R(1, 2) != 1


def test_float_operands_rejected():
    with pytest.raises(TypeError):
        R(1, 2) + 0.5
    with pytest.raises(TypeError):
        0.5 * R(1, 2)
    assert R(1, 2) != 0.5


def test_abs_invert_pow():
    assert abs(R(-3, 4)) == R(3, 4)
    assert +R(-3, 4) == R(-3, 4)
    assert R(-3, 4).invert() == R(-4, 3)
    with pytest.raises(ZeroDenominatorError):
        RationalNumber.zero().invert()
    assert R(2, 3) ** 3 == R(8, 27)
    assert R(2, 3) ** -2 == R(9, 4)
    assert R(-1) ** 3 == R(-1)
    assert R(-1).pow(4) == R(1)
    assert R(0) ** 0 == R(1)
    assert R(0) ** 5 == R(0)
    with pytest.raises(ZeroDenominatorError):
        R(0) ** -1


def test_ordering():
    assert R(1, 3) < R(1, 2)
    assert R(-1, 2) < 0
    assert R(3) >= 3
    assert R(-2, 3) <= R(-4, 6)
    assert R(5, 4) > R(6, 5)
    assert R(1, 2).compare_to(R(2, 4)) == 0
    assert R(-1, 2).compare_to(R(1, 3)) == -1
    assert sorted([R(1, 2), R(-3), R(1, 3)]) == [R(-3), R(1, 3), R(1, 2)]
    with pytest.raises(TypeError):
        R(1, 2) < 0.4


# =============================================================================
# Properties over small samples
# =============================================================================


@pytest.mark.parametrize('pair', pair_samples)
def test_lowest_terms(pair):
    value = R(*pair)
    assert value.numerator == 0 or gcd(value.numerator, value.denominator) == 1
    assert value.denominator > 0


@pytest.mark.parametrize('pair', pair_samples)
def test_sign_cancels(pair):
    n, d = pair
    assert R(n, d) == R(-n, -d)


@pytest.mark.parametrize('d1, d2', [(1, 7), (-3, 5), (20, -20)])
def test_canonical_zero(d1, d2):
    assert R(0, d1) == R(0, d2)
    assert hash(R(0, d1)) == hash(R(0, d2))


@pytest.mark.parametrize('pair', pair_samples)
def test_identities(pair):
    a = R(*pair)
    zero = RationalNumber.zero()
    assert a + zero == a
    assert a * zero == zero
    assert a - a == zero
    assert -(-a) == a
    assert a.to_fraction() == Fraction(*pair)


@pytest.mark.parametrize('pair', nonzero_samples)
def test_self_division(pair):
    a = R(*pair)
    assert a / a == R(1, 1)


@pytest.mark.parametrize('pair', pair_samples)
def test_division_by_zero_fails(pair):
    with pytest.raises(ZeroDenominatorError):
        R(*pair) / RationalNumber.zero()


@pytest.mark.parametrize('p, q', two_samples)
def test_commutativity(p, q):
    a, b = R(*p), R(*q)
    assert a + b == b + a
    assert a * b == b * a


@pytest.mark.timeout(15)
@pytest.mark.parametrize('p, q', two_samples)
def test_matches_fraction(p, q):
    a, b = R(*p), R(*q)
    fa, fb = Fraction(*p), Fraction(*q)
    assert (a + b).to_fraction() == fa + fb
    assert (a - b).to_fraction() == fa - fb
    assert (a * b).to_fraction() == fa * fb
    if fb != 0:
        assert (a / b).to_fraction() == fa / fb
    assert (a < b) == (fa < fb)


@pytest.mark.timeout(15)
@pytest.mark.parametrize('p, q, r', three_samples)
def test_associativity(p, q, r):
    a, b, c = R(*p), R(*q), R(*r)
    assert (a + b) + c == a + (b + c)
    assert (a * b) * c == a * (b * c)


# =============================================================================
# Magnitude bound
# =============================================================================


def test_construction_overflow():
    assert R(-(2**32 - 1)).numerator == 2**32 - 1
    with pytest.raises(MagnitudeOverflowError):
        R(2**32)
    with pytest.raises(OverflowError):
        R(1, -(2**32))


def test_arithmetic_overflow():
    big = R(2**32 - 1)
    with pytest.raises(MagnitudeOverflowError):
        big * 2
    with pytest.raises(MagnitudeOverflowError):
        big + 1
    # differences of large magnitudes still fit
    assert big - big == RationalNumber.zero()


def test_raw_denominator_product_is_checked():
    set_magnitude_bits(8)
    with pytest.raises(MagnitudeOverflowError) as info:
        R(1, 200) + R(1, 200)
    assert info.value.operation == 'add'
    assert R(200) + R(55) == R(255)
    with pytest.raises(MagnitudeOverflowError):
        R(200) + R(100)


def test_unbounded_magnitudes():
    set_magnitude_bits(None)
    big = R(2**64, 3)
    assert (big * big).numerator == 2**128
    assert R(1, 2**40) + R(1, 2**40) == R(1, 2**39)


def test_pow_large_exponents():
    assert R(2) ** 31 == R(2**31)
    assert R(-1, 2) ** 31 == R(-1, 2**31)
    with pytest.raises(MagnitudeOverflowError):
        R(2) ** 32
    with pytest.raises(MagnitudeOverflowError):
        R(3, 2) ** -21
    set_magnitude_bits(None)
    assert R(1, 2) ** 1000 == R(1, 2**1000)
    assert (R(-2, 3) ** 1001).denominator == 3**1001
    assert R(-2, 3) ** 1001 < 0
    assert R(-1) ** 10**9 == R(1)


# =============================================================================
# Conversion and Python protocol
# =============================================================================


def test_value_of():
    assert RationalNumber.value_of("3/-6") == R(-1, 2)
    assert RationalNumber.value_of(" 5 ") == R(5)
    assert RationalNumber.value_of(Fraction(6, -8)) == R(-3, 4)
    assert RationalNumber.value_of(SympyRational(2, 6)) == R(1, 3)
    assert RationalNumber.value_of(SympyInteger(4)) == R(4)
    assert RationalNumber.value_of(7) == R(7)
    value = R(1, 2)
    assert RationalNumber.value_of(value) is value
    with pytest.raises(ValueError):
        RationalNumber.value_of("1/2/3")
    with pytest.raises(ValueError):
        RationalNumber.value_of("1.5")
    with pytest.raises(ZeroDenominatorError):
        RationalNumber.value_of("1/0")
    with pytest.raises(TypeError):
        RationalNumber.value_of(0.5)


def test_to_sympy():
    assert R(-3, 4).to_sympy() == SympyRational(-3, 4)
    assert R(0, 4).to_sympy() == 0


def test_str_and_repr():
    assert str(R(3, -4)) == "-3/4"
    assert str(R(4, 2)) == "2"
    assert str(R(-4, 2)) == "-2"
    assert str(R(0, -5)) == "0"
    assert repr(R(3, -4)) == "RationalNumber(-3, 4)"


def test_hash():
    assert hash(R(2)) == hash(2)
    assert len({R(1, 2), R(2, 4), R(-1, -2)}) == 1
    assert len({R(1, 2), R(-1, 2)}) == 2


def test_immutable():
    value = R(1, 2)
    with pytest.raises(AttributeError):
        value.numerator = 3
    with pytest.raises(AttributeError):
        value._numerator = 3
    assert value == R(1, 2)


def test_copy_and_pickle():
    value = R(-3, 4)
    assert copy.copy(value) is value
    assert copy.deepcopy(value) is value
    restored = pickle.loads(pickle.dumps(value))
    assert restored == value
    assert restored.sign
