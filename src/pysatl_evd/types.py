"""
Core Type Definitions
=====================

Fundamental types used throughout PySATL EVD.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import Enum, StrEnum, auto
from typing import Any

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for float64 arrays produced by the characteristics."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

type ArrayLike = Number | NumericArray | list[float] | tuple[float, ...]
"""Type alias for anything accepted as an evaluation point."""


class ContinuousSupportShape1D(Enum):
    """
    Shapes taken by the support of an extreme value distribution.

    Attributes
    ----------
    REAL_LINE
        Whole real line, Gumbel and GEV with zero shape.
    RAY_LEFT
        Open ray (-∞, b): inverse Weibull and GEV with negative shape.
    RAY_RIGHT
        Open ray (a, ∞): Fréchet and GEV with positive shape.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()


class CharacteristicName(StrEnum):
    """
    Enumeration of the characteristics every extreme value distribution provides.

    Note
    ----
    Values are the names accepted by
    :meth:`~pysatl_evd.distributions.distribution.ExtremeValueDistribution.query_method`.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    SF = "sf"
    LOGPDF = "logpdf"
    LOGCDF = "logcdf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    GUMBEL = "Gumbel"
    FRECHET = "Frechet"
    WEIBULL = "Weibull"
    GEV = "GEV"


__all__ = [
    "ArrayLike",
    "BoolArray",
    "CharacteristicName",
    "ContinuousSupportShape1D",
    "FamilyName",
    "Number",
    "NumPyNumber",
    "NumericArray",
]
