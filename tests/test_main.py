# Tests for the config-driven entry point in main.py

from fractions import Fraction

import pytest
from omegaconf import OmegaConf

from main import build_ring, run
from rings import ZZ, QQ, GF, CliffordAlgebra


def _cfg(**overrides):
    base = {
        'ring': {'name': 'integers', 'order': 7, 'p': 2, 'q': 0, 'r': 0},
        'rank': 3,
        'cached': True,
        'vectors': [[1, 2, 3], [4, 5, 6]],
        'scalar': 2,
    }
    base.update(overrides)
    return OmegaConf.create(base)


class TestBuildRing:
    @pytest.mark.parametrize("name, expected", [
        ('integers', ZZ),
        ('rationals', QQ),
        ('finite_field', GF(7)),
        ('clifford', CliffordAlgebra(2, 0)),
    ])
    def test_known_rings(self, name, expected):
        cfg = _cfg(ring={'name': name, 'order': 7, 'p': 2, 'q': 0, 'r': 0})
        assert build_ring(cfg) == expected

    def test_unknown_ring(self):
        cfg = _cfg(ring={'name': 'octonions'})
        with pytest.raises(ValueError, match="Unknown ring"):
            build_ring(cfg)


class TestRun:
    def test_integer_demo(self):
        out = run(_cfg())
        M = out['module']
        assert M.describe() == "Free module of rank 3 over Integers"
        assert out['sum'] == M([5, 7, 9])
        assert out['scaled'] == M([2, 4, 6])
        assert len(out['generators']) == 3

    def test_rational_scalar_string(self):
        cfg = _cfg(ring={'name': 'rationals'}, vectors=[[2, 4, 6]], scalar="1/2")
        out = run(cfg)
        assert out['scaled'].coordinates == (Fraction(1), Fraction(2), Fraction(3))

    def test_no_vectors(self):
        out = run(_cfg(vectors=[], rank=0))
        assert out['sum'] is None
        assert out['scaled'] is None
        assert out['generators'] == []

    def test_uncached(self):
        out = run(_cfg(cached=False))
        assert out['module'] is not run(_cfg(cached=False))['module']

    def test_logs_description(self, caplog):
        with caplog.at_level("INFO", logger="freemodule"):
            run(_cfg(ring={'name': 'finite_field', 'order': 5}, rank=2, vectors=[[1, 2]]))
        assert "Vector space of dimension 2 over Finite field F_5" in caplog.text
