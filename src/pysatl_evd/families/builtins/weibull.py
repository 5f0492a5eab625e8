"""
Inverse (reversed) Weibull distribution family implementation.

Contains the type III extreme value family, bounded above by its location
parameter.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import gamma

from pysatl_evd.distributions.distribution import ExtremeValueDistribution
from pysatl_evd.distributions.support import ContinuousSupport
from pysatl_evd.families.parametrizations import constraint, family
from pysatl_evd.types import FamilyName

if TYPE_CHECKING:
    from pysatl_evd.families.builtins.gev import GEV
    from pysatl_evd.types import NumericArray


@family(name=FamilyName.WEIBULL)
class Weibull(ExtremeValueDistribution):
    """
    Inverse Weibull distribution (type III extreme value law).

    Light-tailed extreme value law supported on (-∞, μ). It is the mirror
    image of the usual Weibull distribution, which is why the sign convention
    calls it inverse (or reversed) Weibull.

    Cumulative distribution function:
        F(x) = exp(-(-(x-μ)/σ)^ζ)                              for x < μ

    Probability density function:
        f(x) = ζ/σ * (-(x-μ)/σ)^(ζ-1) * exp(-(-(x-μ)/σ)^ζ)     for x < μ

    For x >= μ the CDF is 1 and the PDF is 0.

    Parameters
    ----------
    mu : float
        Location (upper bound of the support)
    sigma : float
        Scale, must be positive
    zeta : float
        Shape, must be positive
    """

    mu: float
    sigma: float
    zeta: float

    @constraint(description="mu is finite")
    def check_mu_finite(self) -> bool:
        """Check that location is a finite number."""
        return math.isfinite(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that scale is positive."""
        return self.sigma > 0 and math.isfinite(self.sigma)

    @constraint(description="zeta > 0")
    def check_zeta_positive(self) -> bool:
        """Check that shape is positive."""
        return self.zeta > 0 and math.isfinite(self.zeta)

    @property
    def shape(self) -> float:
        """Shape parameter."""
        return self.zeta

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport.below(self.mu)

    def _t(self, x: NumericArray) -> NumericArray:
        w = -self._standardize(x)
        inside = w > 0
        return np.where(inside, np.where(inside, w, 1.0) ** self.zeta, 0.0)

    def _logpdf(self, x: NumericArray) -> NumericArray:
        w = -self._standardize(x)
        inside = (w > 0) & np.isfinite(w)
        log_w = np.log(np.where(inside, w, 1.0))
        log_t = self.zeta * log_w
        log_norm = math.log(self.zeta) - math.log(self.sigma)
        logpdf = log_norm + log_t - log_w - np.exp(log_t)
        return np.where(inside, logpdf, -np.inf)

    def _ppf(self, p: NumericArray) -> NumericArray:
        return self.mu - self.sigma * (-np.log(p)) ** (1 / self.zeta)

    def mean(self) -> float:
        """Mean μ - σΓ(1 + 1/ζ)."""
        return self.mu - self.sigma * float(gamma(1 + 1 / self.zeta))

    def var(self) -> float:
        """Variance σ²(Γ(1 + 2/ζ) - Γ(1 + 1/ζ)²)."""
        g1 = float(gamma(1 + 1 / self.zeta))
        g2 = float(gamma(1 + 2 / self.zeta))
        return self.sigma**2 * (g2 - g1**2)

    def to_gev(self) -> GEV:
        """Equivalent GEV distribution, with shape -1/ζ."""
        from pysatl_evd.families.builtins.gev import GEV

        return GEV(mu=self.mu - self.sigma, sigma=self.sigma / self.zeta, zeta=-1 / self.zeta)
