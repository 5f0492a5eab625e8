from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import random

import numpy as np
import pytest

from pysatl_evd.distributions.sampling import (
    MAX_UNIFORM_REDRAWS,
    ArraySample,
    draw_uniform,
    draw_uniforms,
)
from pysatl_evd.errors import DomainError
from pysatl_evd.families.builtins.frechet import Frechet
from pysatl_evd.families.builtins.gev import GEV
from pysatl_evd.families.builtins.gumbel import Gumbel
from pysatl_evd.families.builtins.weibull import Weibull
from tests.utils.mocks import SequenceSource


class TestSingleDraw:
    @pytest.mark.parametrize(
        "distr",
        [
            Gumbel(mu=0.5, sigma=2.0),
            Frechet(mu=1.0, sigma=2.0, zeta=3.0),
            Weibull(mu=2.0, sigma=2.0, zeta=2.0),
            GEV(mu=0.0, sigma=1.0, zeta=-0.3),
        ],
    )
    def test_sample_lies_in_support_and_is_reproducible(self, distr) -> None:
        first = [distr.sample(np.random.default_rng(7)) for _ in range(3)]
        rng = np.random.default_rng(7)
        second = distr.sample(rng)

        assert first == [second] * 3
        assert distr.support.contains(second)

    def test_sample_is_quantile_of_uniform(self) -> None:
        distr = Gumbel(mu=0.5, sigma=2.0)

        assert distr.sample(SequenceSource([0.7])) == distr.quantile(0.7)

    def test_zero_variate_is_redrawn(self) -> None:
        distr = Weibull(mu=2.0, sigma=2.0, zeta=2.0)
        source = SequenceSource([0.0, 0.0, 0.7])

        assert distr.sample(source) == distr.quantile(0.7)
        assert source.calls == 3

    def test_source_stuck_at_zero(self) -> None:
        source = SequenceSource([0.0])

        with pytest.raises(DomainError, match="consecutive"):
            draw_uniform(source)
        assert source.calls == MAX_UNIFORM_REDRAWS

    @pytest.mark.parametrize("u", [1.0, -0.25, 2.0, float("nan")])
    def test_source_outside_unit_interval(self, u) -> None:
        with pytest.raises(DomainError, match="expected a value in"):
            Gumbel(mu=0.0, sigma=1.0).sample(SequenceSource([u]))

    def test_standard_library_generator_is_a_source(self) -> None:
        distr = Frechet(mu=0.0, sigma=1.0, zeta=2.0)

        x = distr.sample(random.Random(123))
        assert x == distr.sample(random.Random(123))
        assert x > 0.0

    def test_random_with_seed(self) -> None:
        distr = GEV(mu=1.0, sigma=2.0, zeta=0.2)

        assert distr.random(seed=42) == distr.sample(np.random.default_rng(42))
        assert np.isfinite(distr.random())


class TestBatchSampling:
    def test_sample_n_shape_and_mean(self) -> None:
        distr = Gumbel(mu=0.5, sigma=2.0)

        n = 5000
        sample = distr.sample_n(n, np.random.default_rng(2025))

        assert isinstance(sample, ArraySample)
        assert sample.shape == (n, 1)
        assert len(sample) == n
        arr = sample.array
        assert np.isfinite(arr).all()
        assert float(arr.mean()) == pytest.approx(distr.mean(), abs=0.15)

    def test_sample_n_respects_support(self) -> None:
        distr = GEV(mu=0.0, sigma=1.0, zeta=-0.5)

        sample = distr.sample_n(1000, np.random.default_rng(1))
        assert (sample.values < 2.0).all()

    def test_sample_n_is_reproducible(self) -> None:
        distr = Frechet(mu=1.0, sigma=2.0, zeta=3.0)

        a = distr.sample_n(50, np.random.default_rng(11))
        b = distr.sample_n(50, np.random.default_rng(11))
        np.testing.assert_array_equal(a.array, b.array)

    def test_sample_n_with_generic_source(self) -> None:
        distr = Weibull(mu=2.0, sigma=2.0, zeta=2.0)

        sample = distr.sample_n(3, SequenceSource([0.0, 0.25, 0.5, 0.75]))
        np.testing.assert_allclose(list(sample), distr.quantile([0.25, 0.5, 0.75]))

    def test_sample_n_zero(self) -> None:
        sample = Gumbel(mu=0.0, sigma=1.0).sample_n(0, np.random.default_rng(0))

        assert sample.shape == (0, 1)
        assert list(sample) == []

    def test_negative_sample_size(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Gumbel(mu=0.0, sigma=1.0).sample_n(-1)

    def test_draw_uniforms_are_strictly_inside(self) -> None:
        u = draw_uniforms(1000, np.random.default_rng(3))

        assert u.shape == (1000,)
        assert ((u > 0.0) & (u < 1.0)).all()


class TestArraySample:
    def test_requires_two_dimensions(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))

    def test_accessors(self) -> None:
        sample = ArraySample(np.array([[1.0], [2.0], [3.0]]))

        assert sample.dimension == 1
        assert sample.shape == (3, 1)
        assert list(sample) == [1.0, 2.0, 3.0]
        np.testing.assert_array_equal(sample.values, [1.0, 2.0, 3.0])
