"""
Common fixtures and utilities for extreme value distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np
from scipy.integrate import quad

from pysatl_evd.distributions.distribution import ExtremeValueDistribution

PROBABILITY_GRID = np.array([0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999])


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @staticmethod
    def integrate_pdf(dist: ExtremeValueDistribution) -> float:
        """Integrate the density over the support of ``dist``."""
        support = dist.support
        median = float(dist.quantile(0.5))
        left, _ = quad(dist.pdf, support.left, median, limit=200)
        right, _ = quad(dist.pdf, median, support.right, limit=200)
        return left + right
