"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of the extreme value
families in the global FamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_evd.errors import ParameterError
from pysatl_evd.families.builtins.gev import GEV
from pysatl_evd.families.builtins.gumbel import Gumbel
from pysatl_evd.families.configuration import (
    configure_families_register,
    create_distribution,
    reset_families_register,
)
from pysatl_evd.families.registry import FamilyRegister
from pysatl_evd.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, FamilyRegister)

    def test_configure_families_register_is_cached(self):
        assert self.registry is configure_families_register()

    def test_families_registered(self):
        """Test that all expected families are registered."""
        assert set(self.registry.names()) == {
            FamilyName.GUMBEL,
            FamilyName.FRECHET,
            FamilyName.WEIBULL,
            FamilyName.GEV,
        }
        assert self.registry.get(FamilyName.GEV) is GEV

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        # They should be different instances after reset
        assert registry1 is not registry2
        assert FamilyName.GUMBEL in registry2.names()

    def test_registry_singleton_pattern(self):
        """Test that FamilyRegister itself follows singleton pattern."""
        assert FamilyRegister() is FamilyRegister()


class TestRegistry:
    def test_unknown_family(self):
        configure_families_register()

        with pytest.raises(ValueError, match="No family Pareto found"):
            FamilyRegister.get("Pareto")
        assert not FamilyRegister.contains("Pareto")

    def test_duplicate_registration_warns(self):
        configure_families_register()

        with pytest.warns(UserWarning, match="already registered"):
            FamilyRegister.register(Gumbel)
        assert FamilyRegister.get(FamilyName.GUMBEL) is Gumbel

    def test_register_on_empty_registry(self):
        FamilyRegister.register(Gumbel)

        assert FamilyRegister.names() == [FamilyName.GUMBEL]


class TestCreateDistribution:
    @pytest.mark.parametrize(
        "name, params",
        [
            ("Gumbel", {"mu": 0.5, "sigma": 2.0}),
            ("Frechet", {"mu": 1.0, "sigma": 0.1, "zeta": 1.0}),
            ("Weibull", {"mu": 2.0, "sigma": 2.0, "zeta": 2.0}),
            (FamilyName.GEV, {"mu": 2.0, "sigma": 2.0, "zeta": 0.0}),
        ],
    )
    def test_create_by_name(self, name, params):
        dist = create_distribution(name, **params)

        assert dist.name == name
        assert dist.parameters == params

    def test_create_validates_parameters(self):
        with pytest.raises(ParameterError):
            create_distribution("GEV", mu=0.0, sigma=0.0, zeta=0.1)

    def test_create_unknown_family(self):
        with pytest.raises(ValueError, match="No family"):
            create_distribution("Normal", mu=0.0, sigma=1.0)
