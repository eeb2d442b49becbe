# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""FreeModule CLI Entry Point.

Builds a free module from the config and walks through its basic operations.
"""

from fractions import Fraction

import hydra
from omegaconf import DictConfig

from log import get_logger
from rings import QQ, ZZ, CliffordAlgebra, GF, Ring
from freemodule import FreeModule

logger = get_logger(__name__)

RING_NAMES = ('integers', 'rationals', 'finite_field', 'clifford')


def build_ring(cfg: DictConfig) -> Ring:
    """Instantiate the base ring named by ``cfg.ring.name``."""
    name = cfg.ring.name
    if name == 'integers':
        return ZZ
    if name == 'rationals':
        return QQ
    if name == 'finite_field':
        return GF(int(cfg.ring.order))
    if name == 'clifford':
        return CliffordAlgebra(int(cfg.ring.p), int(cfg.ring.q), int(cfg.ring.r))
    raise ValueError(f"Unknown ring: {name}. Available: {list(RING_NAMES)}")


def _parse_scalar(value):
    # YAML gives ints; "1/2" strings become rationals
    if isinstance(value, str):
        return Fraction(value)
    return value


def run(cfg: DictConfig) -> dict:
    """Build the module and elements described by ``cfg``.

    Returns:
        dict: ``module``, ``generators``, ``vectors``, ``sum`` and ``scaled``
        (the latter two are None when ``vectors`` is empty).
    """
    R = build_ring(cfg)
    M = FreeModule(R, int(cfg.rank), cached=bool(cfg.cached))
    logger.info("%s", M.describe())

    gens = M.generators()
    for i, g in enumerate(gens, start=1):
        logger.info("gen(%d) = %s", i, g)

    vectors = [M([_parse_scalar(c) for c in row]) for row in cfg.vectors]
    total = None
    scaled = None
    if vectors:
        total = vectors[0]
        for v in vectors[1:]:
            total = total + v
        scaled = vectors[0] * _parse_scalar(cfg.scalar)
        logger.info("sum = %s", total)
        logger.info("%s * %s = %s", vectors[0], cfg.scalar, scaled)

    return {
        'module': M,
        'generators': gens,
        'vectors': vectors,
        'sum': total,
        'scaled': scaled,
    }


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    run(cfg)


if __name__ == "__main__":
    main()
