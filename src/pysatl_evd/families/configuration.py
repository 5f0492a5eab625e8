"""
Distribution Families Configuration
====================================

This module registers the built-in extreme value families in the global
:class:`~pysatl_evd.families.registry.FamilyRegister`:

- :class:`Gumbel`: type I, whole real line.
- :class:`Frechet`: type II, bounded below.
- :class:`Weibull`: type III (inverse Weibull), bounded above.
- :class:`GEV`: generalized extreme value, unifying the three.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import TYPE_CHECKING

from pysatl_evd.families.builtins import GEV, Frechet, Gumbel, Weibull
from pysatl_evd.families.registry import FamilyRegister

if TYPE_CHECKING:
    from typing import Any

    from pysatl_evd.distributions.distribution import ExtremeValueDistribution
    from pysatl_evd.types import FamilyName


@lru_cache(maxsize=1)
def configure_families_register() -> FamilyRegister:
    """
    Register all built-in families in the global registry.

    Returns
    -------
    FamilyRegister
        The global registry of families.
    """
    for family_class in (Gumbel, Frechet, Weibull, GEV):
        if not FamilyRegister.contains(family_class.__family_name__):
            FamilyRegister.register(family_class)
    return FamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    FamilyRegister._reset()


def create_distribution(name: FamilyName | str, **parameters: Any) -> ExtremeValueDistribution:
    """
    Construct a distribution by family name.

    Examples
    --------
    >>> create_distribution("GEV", mu=0.0, sigma=1.0, zeta=0.1).cdf(0.0)
    0.36787944117144233
    """
    return configure_families_register().create(name, **parameters)
