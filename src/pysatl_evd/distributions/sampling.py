"""
Sampling Interfaces
===================

This module defines the uniform randomness capability consumed by inversion
sampling and the array-backed container returned for batches of draws.

- :class:`UniformSource`: anything with a ``random()`` method returning a
  float in ``[0, 1)`` (``numpy.random.Generator``, ``random.Random``, ...).
- :func:`draw_uniform` / :func:`draw_uniforms`: draw variates strictly
  inside ``(0, 1)``.
- :class:`ArraySample`: ``(n, 1)`` array of samples.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_evd.errors import DomainError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

MAX_UNIFORM_REDRAWS = 64
"""Number of times a zero uniform variate is redrawn before giving up."""


@runtime_checkable
class UniformSource(Protocol):
    """Source of uniform variates on ``[0, 1)``."""

    def random(self) -> float: ...


def default_source(seed: int | None = None) -> np.random.Generator:
    """
    Build a NumPy generator to be used as a :class:`UniformSource`.

    Parameters
    ----------
    seed : int or None, default None
        ``None`` seeds from fresh OS entropy, an integer gives a
        reproducible stream.
    """
    return np.random.default_rng(seed)


def _check_variate(u: float) -> float:
    if not 0.0 <= u < 1.0:
        raise DomainError(f"Uniform source returned {u!r}, expected a value in [0, 1)")
    return u


def draw_uniform(source: UniformSource) -> float:
    """
    Draw a single uniform variate strictly inside ``(0, 1)``.

    Zero draws are discarded and redrawn, at most ``MAX_UNIFORM_REDRAWS`` times.

    Raises
    ------
    DomainError
        If the source yields a value outside ``[0, 1)`` or keeps yielding zero.
    """
    for _ in range(MAX_UNIFORM_REDRAWS):
        u = _check_variate(float(source.random()))
        if u > 0.0:
            return u
    raise DomainError(f"Uniform source returned 0.0 in {MAX_UNIFORM_REDRAWS} consecutive draws")


def draw_uniforms(n: int, source: UniformSource) -> npt.NDArray[np.float64]:
    """
    Draw ``n`` uniform variates strictly inside ``(0, 1)``.

    NumPy generators are drawn from in bulk, other sources one value at a time.
    """
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")

    if not isinstance(source, np.random.Generator):
        return np.array([draw_uniform(source) for _ in range(n)], dtype=np.float64)

    u = source.random(n)
    for _ in range(MAX_UNIFORM_REDRAWS):
        zeros = u == 0.0
        if not zeros.any():
            return u
        u[zeros] = source.random(int(zeros.sum()))
    raise DomainError(f"Uniform source returned 0.0 in {MAX_UNIFORM_REDRAWS} consecutive draws")


class ArraySample:
    """
    Array-backed sample container.

    This implementation stores samples as a 2D floating-point array
    of shape (n_samples, 1).

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over the sampled values of a univariate sample."""
        for row in self.data:
            yield float(row[0])

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def values(self) -> npt.NDArray[np.floating[Any]]:
        """Flat view of the sampled values."""
        return self.data.reshape(-1)

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)
