"""
Supports of the extreme value distributions.

A finite endpoint of an extreme value law never carries probability mass, so
every support is an open interval that is unbounded on at least one side.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf, isnan
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_evd.types import BoolArray, ContinuousSupportShape1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Open interval ``(left, right)`` on which a density is positive.

    Parameters
    ----------
    left : float, default=-inf
        Lower endpoint, excluded.
    right : float, default=inf
        Upper endpoint, excluded.

    Raises
    ------
    ValueError
        If the interval is empty or bounded on both sides.
    """

    left: float = -inf
    right: float = inf

    def __post_init__(self) -> None:
        if isnan(self.left) or isnan(self.right) or not self.left < self.right:
            raise ValueError(f"Empty support ({self.left}, {self.right})")
        if self.left > -inf and self.right < inf:
            raise ValueError("Support of an extreme value law is unbounded on one side")

    @classmethod
    def above(cls, bound: float) -> ContinuousSupport:
        """Support ``(bound, inf)``."""
        return cls(left=bound)

    @classmethod
    def below(cls, bound: float) -> ContinuousSupport:
        """Support ``(-inf, bound)``."""
        return cls(right=bound)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Check whether point(s) lie strictly inside the support."""
        arr = np.asarray(x)
        result = (arr > self.left) & (arr < self.right)
        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Shape of the support."""
        if self.left == -inf and self.right == inf:
            return ContinuousSupportShape1D.REAL_LINE
        if self.left == -inf:
            return ContinuousSupportShape1D.RAY_LEFT
        return ContinuousSupportShape1D.RAY_RIGHT

