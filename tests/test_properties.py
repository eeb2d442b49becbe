# Algebraic laws of free modules, checked over several base rings

import random
from fractions import Fraction

import pytest
from rings import ZZ, QQ, GF, CliffordAlgebra
from freemodule import FreeModule


def _random_coords(ring, rank, rng):
    if ring is QQ:
        return [Fraction(rng.randint(-9, 9), rng.randint(1, 9)) for _ in range(rank)]
    if isinstance(ring, CliffordAlgebra):
        return [ring([float(rng.randint(-5, 5)) for _ in range(ring.dim)])
                for _ in range(rank)]
    return [rng.randint(-50, 50) for _ in range(rank)]


RINGS = [ZZ, QQ, GF(11), CliffordAlgebra(2, 0)]


@pytest.fixture(params=RINGS, ids=lambda R: R.compact())
def module(request):
    return FreeModule(request.param, 3)


@pytest.fixture
def rng():
    return random.Random(1234)


class TestModuleLaws:
    def test_addition_associative(self, module, rng):
        R = module.base_ring()
        for _ in range(5):
            a, b, c = (module(_random_coords(R, 3, rng)) for _ in range(3))
            assert (a + b) + c == a + (b + c)

    def test_additive_inverse(self, module, rng):
        R = module.base_ring()
        a = module(_random_coords(R, 3, rng))
        assert a + (-a) == module.zero()

    def test_subtraction_is_adding_negative(self, module, rng):
        R = module.base_ring()
        a = module(_random_coords(R, 3, rng))
        b = module(_random_coords(R, 3, rng))
        assert a - b == a + (-b)

    def test_commutative_addition(self, module, rng):
        R = module.base_ring()
        a = module(_random_coords(R, 3, rng))
        b = module(_random_coords(R, 3, rng))
        assert a + b == b + a

    def test_scalar_distributes(self, module, rng):
        R = module.base_ring()
        a = module(_random_coords(R, 3, rng))
        b = module(_random_coords(R, 3, rng))
        assert 3 * (a + b) == 3 * a + 3 * b
        assert (a + b) * 3 == a * 3 + b * 3

    def test_generators_span(self, module, rng):
        R = module.base_ring()
        coords = _random_coords(R, 3, rng)
        total = module.zero()
        for c, g in zip(coords, module.generators()):
            total = total + R(c) * g
        assert total == module(coords)


def test_round_trip_coordinates(rng):
    for R in (ZZ, QQ):
        M = FreeModule(R, 4)
        coords = tuple(R(c) for c in _random_coords(R, 4, rng))
        assert M(coords).coordinates == coords
