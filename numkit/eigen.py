"""Eigenvalues and eigenvectors of real symmetric matrices by Jacobi rotations."""

from __future__ import annotations

import math

import numpy as np

from numkit.linalg import ConvergenceError
from numkit.rng import NRRandom

_F = np.float32
_MAX_SWEEPS = 50


def _rotate(x: np.ndarray, y: np.ndarray, s: np.float32, tau: np.float32) -> None:
    g = x.copy()
    h = y.copy()
    x[:] = g - s * (h + g * tau)
    y[:] = h + s * (g - h * tau)


def jacobi(a) -> tuple[np.ndarray, np.ndarray, int]:
    """Diagonalise the symmetric matrix ``a`` by cyclic Jacobi rotations.

    Returns ``(d, v, nrot)``: the eigenvalues, a matrix whose columns are the
    normalised eigenvectors, and the number of rotations performed. Only the
    upper triangle of ``a`` is used; ``a`` itself is left unchanged.
    """
    a = np.array(a, dtype=_F)
    if a.ndim != 2 or a.shape[0] != a.shape[1] or a.shape[0] == 0:
        raise ValueError("matrix must be square and non-empty")
    n = a.shape[0]
    v = np.eye(n, dtype=_F)
    d = np.diag(a).astype(_F).copy()
    b = d.copy()
    z = np.zeros(n, dtype=_F)
    nrot = 0
    upper = np.triu_indices(n, 1)

    with np.errstate(all="ignore"):
        for sweep in range(1, _MAX_SWEEPS + 1):
            sm = _F(np.sum(np.abs(a[upper])))
            if sm == 0.0:
                return d, v, nrot
            tresh = _F(0.2 * float(sm) / (n * n)) if sweep < 4 else _F(0)
            for ip in range(n - 1):
                for iq in range(ip + 1, n):
                    apq = a[ip, iq]
                    g = _F(100.0 * abs(float(apq)))
                    if (
                        sweep > 4
                        and _F(abs(d[ip]) + g) == _F(abs(d[ip]))
                        and _F(abs(d[iq]) + g) == _F(abs(d[iq]))
                    ):
                        a[ip, iq] = 0.0
                    elif abs(apq) > tresh:
                        h = _F(d[iq] - d[ip])
                        if _F(abs(h) + g) == _F(abs(h)):
                            t = _F(apq / h)
                        else:
                            theta = _F(0.5 * float(h) / float(apq))
                            ft = float(theta)
                            t = _F(1.0 / (abs(ft) + math.sqrt(1.0 + ft * ft)))
                            if theta < 0.0:
                                t = -t
                        c = _F(1.0 / math.sqrt(1.0 + float(t) * float(t)))
                        s = _F(t * c)
                        tau = _F(s / (_F(1) + c))
                        h = _F(t * apq)
                        z[ip] -= h
                        z[iq] += h
                        d[ip] -= h
                        d[iq] += h
                        a[ip, iq] = 0.0
                        _rotate(a[:ip, ip], a[:ip, iq], s, tau)
                        _rotate(a[ip, ip + 1:iq], a[ip + 1:iq, iq], s, tau)
                        _rotate(a[ip, iq + 1:], a[iq, iq + 1:], s, tau)
                        _rotate(v[:, ip], v[:, iq], s, tau)
                        nrot += 1
            b += z
            d[:] = b
            z[:] = 0.0
    raise ConvergenceError("Too many iterations in routine jacobi")


def eigsrt(d, v) -> tuple[np.ndarray, np.ndarray]:
    """Sort eigenvalues into descending order, permuting eigenvector columns alike.

    Returns new arrays; the inputs are left unchanged.
    """
    d = np.array(d, dtype=_F)
    v = np.array(v, dtype=_F)
    if d.ndim != 1 or v.ndim != 2 or v.shape[1] != d.shape[0]:
        raise ValueError("eigenvector matrix must have one column per eigenvalue")
    n = d.shape[0]
    for i in range(n - 1):
        rest = d[i:]
        k = i + int(np.flatnonzero(rest == rest.max())[-1]) if rest.size else i
        if k != i:
            d[[i, k]] = d[[k, i]]
            v[:, [i, k]] = v[:, [k, i]]
    return d, v


def random_symmetric(n: int, generator: NRRandom) -> np.ndarray:
    """An ``n`` by ``n`` symmetric matrix of Gaussian deviates.

    The upper triangle, diagonal included, is filled row by row.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    matrix = np.zeros((n, n), dtype=_F)
    for i in range(n):
        for j in range(i, n):
            value = _F(generator.gauss())
            matrix[i, j] = value
            matrix[j, i] = value
    return matrix


__all__ = ["eigsrt", "jacobi", "random_symmetric"]