"""Least-squares fitting of a two-dimensional affine map."""

from __future__ import annotations

from typing import TextIO

import numpy as np

from numkit.linalg import gaussj

_F = np.float32


def read_fit_data(
    stream: TextIO, count: int = 77
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Read ``count`` rows of ``x y xp yp`` and return the four columns."""
    if count <= 0:
        raise ValueError("count must be positive")
    tokens = stream.read().split()
    needed = 4 * count
    if len(tokens) < needed:
        raise ValueError(f"expected {needed} values, found {len(tokens)}")
    values = np.array([float(token) for token in tokens[:needed]], dtype=_F).reshape(count, 4)
    x, y, xp, yp = (values[:, column].copy() for column in range(4))
    return x, y, xp, yp


def fit_affine(x, y, xp, yp) -> np.ndarray:
    """Fit ``xp = a1 x + a2 y + a3`` and ``yp = a4 x + a5 y + a6`` by least squares.

    The normal equations are solved by Gauss-Jordan elimination. Returns
    ``[a1, a2, a3, a4, a5, a6]``.
    """
    x, y, xp, yp = (np.asarray(values, dtype=_F) for values in (x, y, xp, yp))
    if any(values.ndim != 1 for values in (x, y, xp, yp)):
        raise ValueError("data must be one-dimensional")
    count = x.shape[0]
    if count == 0 or any(values.shape[0] != count for values in (y, xp, yp)):
        raise ValueError("data columns must be non-empty and of equal length")

    sx, sy = _F(np.sum(x)), _F(np.sum(y))
    sxx, sxy, syy = _F(np.dot(x, x)), _F(np.dot(x, y)), _F(np.dot(y, y))
    normal = np.array(
        [[sxx, sxy, sx], [sxy, syy, sy], [sx, sy, _F(count)]],
        dtype=_F,
    )
    rhs = np.array(
        [
            [np.dot(x, xp), np.dot(x, yp)],
            [np.dot(y, xp), np.dot(y, yp)],
            [np.sum(xp), np.sum(yp)],
        ],
        dtype=_F,
    )
    _, solution = gaussj(normal, rhs)
    return np.concatenate([solution[:, 0], solution[:, 1]]).astype(_F)


__all__ = ["fit_affine", "read_fit_data"]