"""
Gumbel distribution family implementation.

Contains the Gumbel (type I extreme value) family with location and scale
parameters.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_evd.distributions.distribution import ExtremeValueDistribution
from pysatl_evd.distributions.support import ContinuousSupport
from pysatl_evd.families.parametrizations import constraint, family
from pysatl_evd.types import FamilyName

if TYPE_CHECKING:
    from pysatl_evd.families.builtins.gev import GEV
    from pysatl_evd.types import NumericArray


@family(name=FamilyName.GUMBEL)
class Gumbel(ExtremeValueDistribution):
    """
    Gumbel distribution.

    The Gumbel distribution is the limit law of maxima of samples with
    exponentially decaying tails. It is defined on the whole real line by a
    location (μ) and a scale (σ).

    Cumulative distribution function:
        F(x) = exp(-exp(-(x-μ)/σ))

    Probability density function:
        f(x) = 1/σ * exp(-z - exp(-z)),  z = (x-μ)/σ

    Parameters
    ----------
    mu : float
        Location of the distribution
    sigma : float
        Scale of the distribution, must be positive
    """

    mu: float
    sigma: float

    @constraint(description="mu is finite")
    def check_mu_finite(self) -> bool:
        """Check that location is a finite number."""
        return math.isfinite(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that scale is positive."""
        return self.sigma > 0 and math.isfinite(self.sigma)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def _t(self, x: NumericArray) -> NumericArray:
        return np.exp(-self._standardize(x))

    def _logpdf(self, x: NumericArray) -> NumericArray:
        z = self._standardize(x)
        # exp(-z) overflows to inf for large negative z, which still gives -inf
        return np.where(np.isinf(z), -np.inf, -math.log(self.sigma) - z - np.exp(-z))

    def _ppf(self, p: NumericArray) -> NumericArray:
        return self.mu - self.sigma * np.log(-np.log(p))

    def mean(self) -> float:
        """Mean of Gumbel distribution: μ + σγ."""
        return self.mu + self.sigma * np.euler_gamma

    def var(self) -> float:
        """Variance of Gumbel distribution: (πσ)²/6."""
        return (math.pi * self.sigma) ** 2 / 6

    def to_gev(self) -> GEV:
        """Equivalent GEV distribution with zero shape."""
        from pysatl_evd.families.builtins.gev import GEV

        return GEV(mu=self.mu, sigma=self.sigma, zeta=0.0)
