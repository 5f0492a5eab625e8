"""
Extreme value distribution families.

This package provides the Gumbel, Fréchet, inverse Weibull and GEV families,
the constraint machinery validating their parameters and a register for
construction by name.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import GEV, Frechet, Gumbel, Weibull
from .configuration import (
    configure_families_register,
    create_distribution,
    reset_families_register,
)
from .parametrizations import ParametrizationConstraint, constraint, family
from .registry import FamilyRegister

__all__ = [
    "FamilyRegister",
    "ParametrizationConstraint",
    "constraint",
    "family",
    "Gumbel",
    "Frechet",
    "Weibull",
    "GEV",
    "configure_families_register",
    "create_distribution",
    "reset_families_register",
]
