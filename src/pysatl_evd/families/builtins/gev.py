"""
Generalized Extreme Value (GEV) distribution family implementation.

Contains the GEV family, which unifies the Gumbel (ζ = 0), Fréchet (ζ > 0) and
inverse Weibull (ζ < 0) laws.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
from scipy.special import exprel, gamma

from pysatl_evd.distributions.distribution import ExtremeValueDistribution
from pysatl_evd.distributions.support import ContinuousSupport
from pysatl_evd.families.builtins.frechet import Frechet
from pysatl_evd.families.builtins.gumbel import Gumbel
from pysatl_evd.families.builtins.weibull import Weibull
from pysatl_evd.families.parametrizations import constraint, family
from pysatl_evd.types import FamilyName, NumericArray


@family(name=FamilyName.GEV)
class GEV(ExtremeValueDistribution):
    """
    Generalized extreme value distribution.

    With y = (x-μ)/σ and

        t(x) = (1 + ζy)^(-1/ζ)    if ζ != 0
        t(x) = exp(-y)            if ζ == 0

    the distribution is given by

        F(x) = exp(-t(x))
        f(x) = 1/σ * t(x)^(ζ+1) * exp(-t(x))

    on the domain 1 + ζy > 0. The domain is bounded below when ζ > 0 and
    above when ζ < 0; it is the whole real line when ζ == 0.

    Outside the domain (the boundary point included) the CDF takes its
    limiting value, 0 below a lower bound and 1 above an upper bound, and the
    PDF is 0. No error is raised.

    Parameters
    ----------
    mu : float
        Location
    sigma : float
        Scale, must be positive
    zeta : float
        Shape, any real number

    Notes
    -----
    ζ == 0 is an exact branch reproducing the Gumbel formulas. For ζ != 0,
    log t(x) is evaluated as -y * log1p(ζy)/(ζy) and the quantile as
    μ - σL * exprel(-ζL) with L = log(-log p). Both ratios tend to 1 as ζ -> 0
    and are taken as exactly 1 once ζy (or ζL) underflows, so subnormal shapes
    reproduce the Gumbel values and no epsilon band around zero is used.

    When σ/ζ or 1/ζ overflows, the Fréchet or Weibull equivalent of
    :meth:`specialize` cannot be represented; the shape is then
    indistinguishable from zero and the Gumbel equivalent is returned.
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

    @constraint(description="zeta is finite")
    def check_zeta_finite(self) -> bool:
        """Check that shape is a finite number."""
        return math.isfinite(self.zeta)

    @property
    def shape(self) -> float:
        """Shape parameter."""
        return self.zeta

    @property
    def support(self) -> ContinuousSupport:
        if self.zeta > 0:
            return ContinuousSupport.above(self.mu - self.sigma / self.zeta)
        if self.zeta < 0:
            return ContinuousSupport.below(self.mu - self.sigma / self.zeta)
        return ContinuousSupport()

    def _log_t(self, y: NumericArray) -> tuple[NumericArray, NumericArray]:
        """Return ``log t`` and the mask of points inside the domain (ζ != 0)."""
        s = self.zeta * y
        inside = s > -1.0
        s = np.where(inside, s, 0.0)
        # log1p(s)/s -> 1, also when ζy underflows to zero or a subnormal
        nonzero = s != 0.0
        ratio = np.where(nonzero, np.log1p(s) / np.where(nonzero, s, 1.0), 1.0)
        log_t = np.where(np.isinf(s), -np.log1p(s) / self.zeta, -y * ratio)
        return log_t, inside

    def _t(self, x: NumericArray) -> NumericArray:
        y = self._standardize(x)
        if self.zeta == 0.0:
            return np.exp(-y)

        log_t, inside = self._log_t(y)
        boundary = np.inf if self.zeta > 0 else 0.0
        return np.where(inside, np.exp(log_t), boundary)

    def _logpdf(self, x: NumericArray) -> NumericArray:
        y = self._standardize(x)
        if self.zeta == 0.0:
            return np.where(np.isinf(y), -np.inf, -math.log(self.sigma) - y - np.exp(-y))

        log_t, inside = self._log_t(y)
        # t -> 0 or t -> inf both send the density to 0
        inside &= np.isfinite(log_t)
        logpdf = -math.log(self.sigma) + (self.zeta + 1) * log_t - np.exp(log_t)
        return np.where(inside, logpdf, -np.inf)

    def _ppf(self, p: NumericArray) -> NumericArray:
        log_neg_log_p = np.log(-np.log(p))
        if self.zeta == 0.0:
            return self.mu - self.sigma * log_neg_log_p
        # expm1(-ζL)/ζ == -L * exprel(-ζL)
        return self.mu - self.sigma * log_neg_log_p * exprel(-self.zeta * log_neg_log_p)

    def mean(self) -> float:
        """Mean μ + σ(Γ(1 - ζ) - 1)/ζ, μ + σγ for ζ == 0, infinite for ζ >= 1."""
        if self.zeta == 0.0:
            return self.mu + self.sigma * np.euler_gamma
        if self.zeta >= 1:
            return math.inf
        return self.mu + self.sigma * (float(gamma(1 - self.zeta)) - 1) / self.zeta

    def var(self) -> float:
        """Variance σ²(Γ(1 - 2ζ) - Γ(1 - ζ)²)/ζ², (πσ)²/6 at ζ == 0, infinite for ζ >= 1/2."""
        if self.zeta == 0.0:
            return (math.pi * self.sigma) ** 2 / 6
        if self.zeta >= 0.5:
            return math.inf
        g1 = float(gamma(1 - self.zeta))
        g2 = float(gamma(1 - 2 * self.zeta))
        return self.sigma**2 * (g2 - g1**2) / self.zeta**2

    def specialize(self) -> Gumbel | Frechet | Weibull:
        """
        Express this distribution as the matching special family.

        Returns
        -------
        Gumbel or Frechet or Weibull
            Gumbel for ζ == 0, Fréchet with shape 1/ζ for ζ > 0 and inverse
            Weibull with shape -1/ζ for ζ < 0. Gumbel as well when ζ is so
            close to zero that σ/ζ or 1/ζ overflows.
        """
        scale = abs(self.sigma / self.zeta) if self.zeta != 0.0 else math.inf
        shape = abs(1 / self.zeta) if self.zeta != 0.0 else math.inf
        bound = self.mu - math.copysign(scale, self.zeta)
        if not (math.isfinite(scale) and math.isfinite(shape) and math.isfinite(bound)):
            return Gumbel(mu=self.mu, sigma=self.sigma)

        if self.zeta > 0:
            return Frechet(mu=bound, sigma=scale, zeta=shape)
        return Weibull(mu=bound, sigma=scale, zeta=shape)
