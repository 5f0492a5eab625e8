"""
Library Errors
==============

Exceptions raised by PySATL EVD.

- :class:`ParameterError`: a distribution was constructed with parameters
  violating one of its constraints.
- :class:`DomainError`: a probability (or uniform variate) lies outside the
  open interval ``(0, 1)``.

Both derive from :class:`ValueError`, so code catching ``ValueError`` around
NumPy/SciPy style calls keeps working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class EVDError(Exception):
    """Base class for all PySATL EVD errors."""


class ParameterError(EVDError, ValueError):
    """Distribution parameters do not satisfy the family constraints."""


class DomainError(EVDError, ValueError):
    """Argument outside the domain of a quantile or sampling operation."""


__all__ = [
    "EVDError",
    "ParameterError",
    "DomainError",
]
