from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError
from math import inf, nan

import numpy as np
import pytest

from pysatl_evd.distributions.support import ContinuousSupport, Support
from pysatl_evd.families.builtins.gev import GEV
from pysatl_evd.types import ContinuousSupportShape1D


class TestContinuousSupport:
    def test_default_is_real_line(self) -> None:
        support = ContinuousSupport()

        assert isinstance(support, Support)
        assert support.shape == ContinuousSupportShape1D.REAL_LINE
        assert 0.0 in support
        assert inf not in support
        assert -inf not in support

    def test_above_is_open_ray(self) -> None:
        support = ContinuousSupport.above(1.0)

        assert support == ContinuousSupport(left=1.0, right=inf)
        assert support.shape == ContinuousSupportShape1D.RAY_RIGHT
        assert support.contains(1.0) is False
        assert support.contains(1.5) is True
        assert support.contains(inf) is False

    def test_below_is_open_ray(self) -> None:
        support = ContinuousSupport.below(-2.0)

        assert support.shape == ContinuousSupportShape1D.RAY_LEFT
        assert support.contains(-2.0) is False
        assert support.contains(-3.0) is True

    def test_contains_vectorized(self) -> None:
        support = ContinuousSupport.above(0.0)
        x = np.array([[-1.0, 0.0], [1e-12, 5.0]])

        result = support.contains(x)
        assert result.shape == (2, 2)
        np.testing.assert_array_equal(result, [[False, False], [True, True]])

    def test_nan_is_not_contained(self) -> None:
        assert ContinuousSupport().contains(nan) is False

    def test_is_immutable(self) -> None:
        support = ContinuousSupport.above(0.0)

        with pytest.raises(FrozenInstanceError):
            support.left = 1.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "left, right",
        [(1.0, 1.0), (2.0, 1.0), (nan, inf), (0.0, 1.0)],
    )
    def test_invalid_intervals(self, left, right) -> None:
        with pytest.raises(ValueError):
            ContinuousSupport(left=left, right=right)

    @pytest.mark.parametrize("zeta", [5e-324, -5e-324])
    def test_overflowing_bound_gives_real_line(self, zeta) -> None:
        """A bound -sigma/zeta that overflows leaves the support unbounded."""
        support = GEV(mu=0.0, sigma=1.0, zeta=zeta).support

        assert support.shape == ContinuousSupportShape1D.REAL_LINE
