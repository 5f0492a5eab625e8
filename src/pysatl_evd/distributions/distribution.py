"""
Extreme Value Distribution Base
===============================

This module defines :class:`ExtremeValueDistribution`, the shared evaluation
layer of the Gumbel, Fréchet, Weibull and GEV families.

Every family is expressed through a function ``t(x) >= 0`` with
``F(x) = exp(-t(x))``. Families implement ``_t``, ``_logpdf`` and ``_ppf`` on
float64 arrays; the base class takes care of:

- parameter coercion and constraint validation at construction;
- scalar/array dispatch (scalars in, ``float`` out; arrays in, arrays out);
- silencing expected overflow/underflow and propagating NaN inputs;
- the open-interval contract of the quantile function;
- inversion sampling from a caller-provided uniform source.

Notes
-----
Points outside the support are never an error: the CDF returns its limiting
value (0 below a lower bound, 1 above an upper bound) and the PDF returns 0.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from dataclasses import fields
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_evd.distributions.sampling import (
    ArraySample,
    default_source,
    draw_uniform,
    draw_uniforms,
)
from pysatl_evd.errors import DomainError, ParameterError
from pysatl_evd.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_evd.distributions.sampling import UniformSource
    from pysatl_evd.distributions.support import ContinuousSupport
    from pysatl_evd.families.parametrizations import ParametrizationConstraint
    from pysatl_evd.types import ArrayLike, FamilyName, NumericArray


class ExtremeValueDistribution(ABC):
    """
    Abstract base class of the extreme value distribution families.

    Concrete families are frozen dataclasses declaring at least ``mu`` and
    ``sigma`` fields (see :func:`~pysatl_evd.families.parametrizations.family`).
    """

    __slots__ = ()

    # These attributes are set by the @family decorator
    __family_name__: ClassVar[FamilyName]
    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    mu: float
    sigma: float

    def __post_init__(self) -> None:
        for name in self.parameters:
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, float(value))
            except (TypeError, ValueError) as exc:
                raise ParameterError(f"Parameter {name}={value!r} is not a real number") from exc
        self.validate()

    def validate(self) -> None:
        """
        Validate all constraints of this family.

        Raises
        ------
        ParameterError
            If any constraint is not satisfied.
        """
        for c in self._constraints:
            if not c.check(self):
                raise ParameterError(f'Constraint "{c.description}" does not hold')

    @property
    def name(self) -> FamilyName:
        """Name of the family."""
        return self.__family_name__

    @property
    def parameters(self) -> dict[str, float]:
        """Parameters as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(cast("Any", self))}

    @property
    def loc(self) -> float:
        """Location parameter."""
        return self.mu

    @property
    def scale(self) -> float:
        """Scale parameter."""
        return self.sigma

    @property
    @abstractmethod
    def support(self) -> ContinuousSupport:
        """Interval on which the density is positive."""

    # ------------------------------------------------------------------ #
    # Family hooks (float64 arrays in, float64 arrays out)
    # ------------------------------------------------------------------ #

    def _standardize(self, x: NumericArray) -> NumericArray:
        return (x - self.mu) / self.sigma

    @abstractmethod
    def _t(self, x: NumericArray) -> NumericArray:
        """``-log F(x)``; ``inf`` below a lower bound, ``0`` above an upper bound."""

    @abstractmethod
    def _logpdf(self, x: NumericArray) -> NumericArray:
        """Log-density, ``-inf`` outside the support and at infinite points."""

    @abstractmethod
    def _ppf(self, p: NumericArray) -> NumericArray:
        """Quantile for ``p`` already checked to lie in ``(0, 1)``."""

    @abstractmethod
    def mean(self) -> float:
        """Expectation, ``inf`` when it does not exist."""

    @abstractmethod
    def var(self) -> float:
        """Variance, ``inf`` when it does not exist."""

    # ------------------------------------------------------------------ #
    # Characteristics
    # ------------------------------------------------------------------ #

    @staticmethod
    def _evaluate(
        func: Callable[[NumericArray], NumericArray], x: ArrayLike
    ) -> float | NumericArray:
        arr = np.asarray(x, dtype=np.float64)
        with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
            result = np.where(np.isnan(arr), np.nan, func(arr))
        if np.ndim(arr) == 0:
            return float(result)
        return cast("NumericArray", result)

    def cdf(self, x: ArrayLike) -> float | NumericArray:
        """
        Cumulative distribution function ``P(X <= x)``.

        Parameters
        ----------
        x : float or array_like
            Evaluation point(s); any real value, including ``±inf``.

        Returns
        -------
        float or NumericArray
            Values in ``[0, 1]``; limiting values outside the support.
        """
        return self._evaluate(lambda a: np.exp(-self._t(a)), x)

    def sf(self, x: ArrayLike) -> float | NumericArray:
        """Survival function ``1 - F(x)``, accurate in the upper tail."""
        return self._evaluate(lambda a: -np.expm1(-self._t(a)), x)

    def logcdf(self, x: ArrayLike) -> float | NumericArray:
        """Logarithm of the cumulative distribution function."""
        return self._evaluate(lambda a: -self._t(a), x)

    def pdf(self, x: ArrayLike) -> float | NumericArray:
        """
        Probability density function.

        Parameters
        ----------
        x : float or array_like
            Evaluation point(s).

        Returns
        -------
        float or NumericArray
            Non-negative density values, ``0`` outside the support.
        """
        return self._evaluate(lambda a: np.exp(self._logpdf(a)), x)

    def logpdf(self, x: ArrayLike) -> float | NumericArray:
        """Logarithm of the probability density function."""
        return self._evaluate(self._logpdf, x)

    def quantile(self, p: ArrayLike) -> float | NumericArray:
        """
        Quantile function (inverse CDF).

        Parameters
        ----------
        p : float or array_like
            Probabilities, each strictly inside ``(0, 1)``.

        Returns
        -------
        float or NumericArray
            Quantiles corresponding to probabilities ``p``.

        Raises
        ------
        DomainError
            If any probability lies outside ``(0, 1)`` or is NaN.
        """
        arr = np.asarray(p, dtype=np.float64)
        if not np.all((arr > 0.0) & (arr < 1.0)):
            raise DomainError("Probability must be in the open interval (0, 1)")
        return self._evaluate(self._ppf, arr)

    def ppf(self, p: ArrayLike) -> float | NumericArray:
        """Alias of :meth:`quantile`."""
        return self.quantile(p)

    def log_likelihood(self, data: ArraySample | ArrayLike) -> float:
        """
        Log-likelihood of observations.

        Returns ``-inf`` as soon as one observation lies outside the support.
        """
        values = data.values if isinstance(data, ArraySample) else np.ravel(data)
        return float(np.sum(self.logpdf(np.asarray(values, dtype=np.float64))))

    @property
    def characteristics(self) -> dict[CharacteristicName, Callable[..., Any]]:
        """Mapping from characteristic names to bound methods."""
        return {
            CharacteristicName.PDF: self.pdf,
            CharacteristicName.CDF: self.cdf,
            CharacteristicName.PPF: self.quantile,
            CharacteristicName.SF: self.sf,
            CharacteristicName.LOGPDF: self.logpdf,
            CharacteristicName.LOGCDF: self.logcdf,
            CharacteristicName.MEAN: self.mean,
            CharacteristicName.VAR: self.var,
        }

    def query_method(self, characteristic_name: str) -> Callable[..., Any]:
        """
        Resolve a characteristic by name.

        Raises
        ------
        KeyError
            If the characteristic is unknown.
        """
        try:
            return self.characteristics[CharacteristicName(characteristic_name)]
        except ValueError as exc:
            raise KeyError(characteristic_name) from exc

    def calculate_characteristic(self, characteristic_name: str, value: Any = None) -> Any:
        """Evaluate a characteristic; moments take no argument."""
        method = self.query_method(characteristic_name)
        if characteristic_name in (CharacteristicName.MEAN, CharacteristicName.VAR):
            return method()
        return method(value)

    # ------------------------------------------------------------------ #
    # Sampling
    # ------------------------------------------------------------------ #

    def sample(self, rng: UniformSource) -> float:
        """
        Draw one variate by inversion of a uniform variate from ``rng``.

        Parameters
        ----------
        rng : UniformSource
            Source of uniform variates on ``[0, 1)``; its seeding and lifetime
            belong to the caller.
        """
        return cast(float, self.quantile(draw_uniform(rng)))

    def sample_n(self, n: int, rng: UniformSource | None = None) -> ArraySample:
        """
        Draw ``n`` i.i.d. variates by inversion.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.
        """
        source = default_source() if rng is None else rng
        u = draw_uniforms(n, source)
        values = np.asarray(self.quantile(u), dtype=np.float64)
        return ArraySample(values.reshape(n, 1))

    def random(self, seed: int | None = None) -> float:
        """Draw one variate from a generator seeded with ``seed`` (entropy if None)."""
        return self.sample(default_source(seed))
