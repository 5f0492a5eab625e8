"""
Built-in extreme value distribution families.

This package contains the Gumbel, Fréchet, inverse Weibull and generalized
extreme value families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_evd.families.builtins.frechet import Frechet
from pysatl_evd.families.builtins.gev import GEV
from pysatl_evd.families.builtins.gumbel import Gumbel
from pysatl_evd.families.builtins.weibull import Weibull

__all__ = [
    "Gumbel",
    "Frechet",
    "Weibull",
    "GEV",
]
