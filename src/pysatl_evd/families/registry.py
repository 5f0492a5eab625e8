"""
Global registry for extreme value distribution families using singleton pattern.

This module implements a centralized registry that maps family names to the
distribution classes, enabling construction by name across the application.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, ClassVar

    from pysatl_evd.distributions.distribution import ExtremeValueDistribution


class FamilyRegister:
    """
    Singleton registry of extreme value distribution families.

    Maintains a global mapping from family names to distribution classes.
    """

    _instance: ClassVar[FamilyRegister | None] = None
    _registered_families: dict[str, type[ExtremeValueDistribution]]

    def __new__(cls) -> FamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def contains(cls, name: str) -> bool:
        """Check whether a family with the given name is registered."""
        return name in cls()._registered_families

    @classmethod
    def names(cls) -> list[str]:
        """Names of the registered families, in registration order."""
        return list(cls()._registered_families)

    @classmethod
    def get(cls, name: str) -> type[ExtremeValueDistribution]:
        """
        Retrieve a family class by name.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def register(cls, family_class: type[ExtremeValueDistribution]) -> None:
        """
        Register a family class under its family name.

        Notes
        -----
        * Registering a name twice is ignored with a warning.
        """
        self = cls()
        name = family_class.__family_name__
        if name in self._registered_families:
            warnings.warn(
                f"Family {name} have been already registered. Registration is ignored",
                UserWarning,
                stacklevel=2,
            )
            return
        self._registered_families[name] = family_class

    @classmethod
    def create(cls, name: str, **parameters: Any) -> ExtremeValueDistribution:
        """
        Construct a distribution of the named family.

        Raises
        ------
        ValueError
            If the family is unknown.
        ParameterError
            If the parameters violate the family constraints.
        """
        return cls.get(name)(**parameters)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
