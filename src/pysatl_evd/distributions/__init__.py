"""
Distributions subpackage

Evaluation layer shared by the extreme value families:

- distribution base class (:mod:`.distribution`);
- uniform sources and array-backed samples (:mod:`.sampling`);
- continuous supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import ExtremeValueDistribution
from .sampling import (
    MAX_UNIFORM_REDRAWS,
    ArraySample,
    UniformSource,
    default_source,
    draw_uniform,
    draw_uniforms,
)
from .support import ContinuousSupport, Support

__all__ = [
    # distribution
    "ExtremeValueDistribution",
    # sampling
    "UniformSource",
    "ArraySample",
    "MAX_UNIFORM_REDRAWS",
    "default_source",
    "draw_uniform",
    "draw_uniforms",
    # support
    "Support",
    "ContinuousSupport",
]
