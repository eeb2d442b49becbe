# Tests for the commutative base rings in rings/

from fractions import Fraction

import galois
import pytest
from rings import ZZ, QQ, GF, FiniteField, IntegerRing, RationalField, is_untyped_scalar


class TestIntegers:
    def test_identities(self):
        assert ZZ.zero() == 0
        assert ZZ.one() == 1

    def test_coerce_integral_rational(self):
        assert ZZ(Fraction(6, 2)) == 3
        assert type(ZZ(Fraction(6, 2))) is int

    def test_coerce_rejects_fraction(self):
        with pytest.raises(ValueError, match="not an integer"):
            ZZ(Fraction(1, 2))

    def test_coerce_rejects_float(self):
        with pytest.raises(TypeError):
            ZZ(1.5)

    def test_structural_equality(self):
        assert IntegerRing() == ZZ
        assert hash(IntegerRing()) == hash(ZZ)
        assert ZZ != QQ

    def test_flags(self):
        assert not ZZ.is_field
        assert ZZ.is_commutative and ZZ.is_exact and ZZ.is_domain

    def test_compact(self):
        assert ZZ.compact() == "Integers"
        assert str(ZZ) == "Integers"


class TestRationals:
    def test_is_field(self):
        assert QQ.is_field

    def test_coerce(self):
        assert QQ(3) == Fraction(3)
        assert isinstance(QQ(3), Fraction)
        with pytest.raises(TypeError):
            QQ("1/2")

    def test_render(self):
        assert QQ.render(Fraction(1, 2)) == "1/2"
        assert QQ.render(Fraction(4, 2)) == "2"

    def test_equality(self):
        assert RationalField() == QQ


class TestFiniteField:
    def test_instances_are_cached(self):
        assert GF(7) is GF(7)
        assert FiniteField(7) is GF(7)
        assert GF(7) != GF(5)

    @pytest.mark.parametrize("order", [0, 1, 4, 9, -7])
    def test_rejects_non_prime(self, order):
        with pytest.raises(ValueError, match="prime"):
            GF(order)

    def test_arithmetic_mod_p(self):
        F = GF(7)
        a, b = F(5), F(4)
        assert a + b == F(2)
        assert a - b == F(1)
        assert b - a == F(6)
        assert a * b == F(6)
        assert -a == F(2)
        assert a * 3 == F(1)
        assert 3 * a == F(1)

    def test_inverse(self):
        F = GF(11)
        for x in range(1, 11):
            assert F(x) * F(x).inverse() == F.one()
        with pytest.raises(ZeroDivisionError):
            F(0).inverse()

    def test_coerce_rational(self):
        F = GF(7)
        half = F(Fraction(1, 2))
        assert half * 2 == F.one()
        with pytest.raises(ValueError, match="not invertible"):
            F(Fraction(1, 7))

    def test_mixed_fields_rejected(self):
        with pytest.raises(TypeError):
            GF(7)(1) + GF(5)(1)
        with pytest.raises(TypeError):
            GF(7)(GF(5)(1))

    def test_backed_by_galois(self):
        F = GF(7)
        assert issubclass(F.gf, galois.FieldArray)
        assert F.gf.order == 7
        x = F(3)
        assert isinstance(x.value, galois.FieldArray)
        assert int(x) == 3

    def test_not_equal_to_plain_ints(self):
        """Field elements compare only with field elements, keeping hash consistent."""
        F = GF(7)
        assert F(3) != 3
        assert F(3) != 10
        assert F(3) == F(10)
        assert hash(F(3)) == hash(F(10))
        assert len({F(3), F(10), F(4)}) == 2

    def test_parent_and_render(self):
        F = GF(13)
        x = F(-1)
        assert x.parent() is F
        assert F.render(x) == "12"
        assert F.compact() == "Finite field F_13"
        assert F.contains(x)
        assert not F.contains(12)


def test_untyped_scalars():
    assert is_untyped_scalar(3)
    assert is_untyped_scalar(Fraction(1, 3))
    assert not is_untyped_scalar(1.5)
    assert not is_untyped_scalar(GF(3)(1))
