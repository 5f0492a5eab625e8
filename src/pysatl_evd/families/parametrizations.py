"""
Parameter constraints and the family class decorator.

This module provides the machinery that turns a plain class declaring
distribution parameters into an immutable, validated value object:
constraint predicates are marked with :func:`constraint` and collected by
:func:`family`, which also converts the class into a frozen slotted dataclass.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, TypeVar, dataclass_transform

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_evd.types import FamilyName


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values of a distribution.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


P = ParamSpec("P")
T = TypeVar("T", bound=type)


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint, used in error messages.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type) -> list[ParametrizationConstraint]:
    """Collect constraint methods from the class in declaration order."""
    constraints: list[ParametrizationConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                kind = type(attr).__name__
                raise TypeError(f"@constraint '{name}' must be an instance method, not @{kind}")
            continue

        func = attr if callable(attr) and isfunction(attr) else None
        if not func:
            continue
        if getattr(func, "__is_constraint", False):
            desc = getattr(func, "__constraint_description", func.__name__)
            constraints.append(ParametrizationConstraint(description=desc, check=func))
    return constraints


@dataclass_transform(frozen_default=True)
def family(*, name: FamilyName) -> Callable[[T], T]:
    """
    Class decorator declaring an extreme value distribution family.

    Parameters
    ----------
    name : FamilyName
        Name of the family.

    Returns
    -------
    Callable[[type], type]
        Class decorator.

    Notes
    -----
    Converts the class to a frozen slotted dataclass if it is not one already,
    attaches the family name and stores the discovered ``@constraint`` methods
    in ``_constraints``.
    """

    def decorator(cls: T) -> T:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family_name__ = name
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator
