"""Dense linear algebra in single precision.

Covers Gauss-Jordan elimination, LU decomposition with iterative
improvement, and singular value decomposition.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_F = np.float32
_TINY = _F(1.0e-20)


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix is singular and cannot be inverted or factored."""


class ConvergenceError(ArithmeticError):
    """Raised when an iterative decomposition fails to converge."""


def _square(a) -> np.ndarray:
    matrix = np.array(a, dtype=_F)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("matrix must be square")
    if matrix.shape[0] == 0:
        raise ValueError("matrix must not be empty")
    return matrix


def _sign(a, b) -> np.float32:
    return _F(abs(a)) if b >= 0.0 else _F(-abs(a))


def _pythag(a, b) -> np.float32:
    absa = _F(abs(_F(a)))
    absb = _F(abs(_F(b)))
    if absa > absb:
        ratio = _F(absb / absa)
        return _F(absa * np.sqrt(_F(1) + ratio * ratio))
    if absb == 0.0:
        return _F(0)
    ratio = _F(absa / absb)
    return _F(absb * np.sqrt(_F(1) + ratio * ratio))


def pythag(a: float, b: float) -> float:
    """sqrt(a^2 + b^2) computed without destructive overflow or underflow."""
    return float(_pythag(a, b))


def svdcmp(a) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Singular value decomposition ``a = u @ diag(w) @ v.T``.

    Returns ``(u, w, v)``; ``u`` has the shape of ``a``, ``w`` holds the
    ``n`` non-negative singular values and ``v`` is ``n`` by ``n``.
    """
    a = np.array(a, dtype=_F)
    if a.ndim != 2 or 0 in a.shape:
        raise ValueError("matrix must be two-dimensional and non-empty")
    m, n = a.shape
    w = np.zeros(n, dtype=_F)
    v = np.zeros((n, n), dtype=_F)
    rv1 = np.zeros(n, dtype=_F)

    with np.errstate(all="ignore"):
        g = scale = anorm = _F(0)
        l = 0
        for i in range(n):
            l = i + 1
            rv1[i] = scale * g
            g = s = scale = _F(0)
            if i < m:
                scale = _F(np.sum(np.abs(a[i:, i])))
                if scale:
                    a[i:, i] /= scale
                    s = _F(np.dot(a[i:, i], a[i:, i]))
                    f = a[i, i]
                    g = -_sign(np.sqrt(s), f)
                    h = _F(f * g - s)
                    a[i, i] = f - g
                    for j in range(l, n):
                        s = _F(np.dot(a[i:, i], a[i:, j]))
                        f = _F(s / h)
                        a[i:, j] += f * a[i:, i]
                    a[i:, i] *= scale
            w[i] = scale * g
            g = s = scale = _F(0)
            if i < m and i != n - 1:
                scale = _F(np.sum(np.abs(a[i, l:])))
                if scale:
                    a[i, l:] /= scale
                    s = _F(np.dot(a[i, l:], a[i, l:]))
                    f = a[i, l]
                    g = -_sign(np.sqrt(s), f)
                    h = _F(f * g - s)
                    a[i, l] = f - g
                    rv1[l:] = a[i, l:] / h
                    for j in range(l, m):
                        s = _F(np.dot(a[j, l:], a[i, l:]))
                        a[j, l:] += s * rv1[l:]
                    a[i, l:] *= scale
            anorm = max(anorm, _F(abs(w[i]) + abs(rv1[i])))

        for i in range(n - 1, -1, -1):
            if i < n - 1:
                if g:
                    v[l:, i] = (a[i, l:] / a[i, l]) / g
                    for j in range(l, n):
                        s = _F(np.dot(a[i, l:], v[l:, j]))
                        v[l:, j] += s * v[l:, i]
                v[i, l:] = 0.0
                v[l:, i] = 0.0
            v[i, i] = 1.0
            g = rv1[i]
            l = i

        for i in range(min(m, n) - 1, -1, -1):
            l = i + 1
            g = w[i]
            a[i, l:] = 0.0
            if g:
                g = _F(_F(1) / g)
                for j in range(l, n):
                    s = _F(np.dot(a[l:, i], a[l:, j]))
                    f = _F((s / a[i, i]) * g)
                    a[i:, j] += f * a[i:, i]
                a[i:, i] *= g
            else:
                a[i:, i] = 0.0
            a[i, i] += _F(1)

        for k in range(n - 1, -1, -1):
            for its in range(1, 31):
                flag = True
                nm = 0
                for l in range(k, -1, -1):
                    nm = l - 1
                    if _F(abs(rv1[l]) + anorm) == anorm:
                        flag = False
                        break
                    if _F(abs(w[nm]) + anorm) == anorm:
                        break
                if flag:
                    c = _F(0)
                    s = _F(1)
                    for i in range(l, k + 1):
                        f = _F(s * rv1[i])
                        rv1[i] = c * rv1[i]
                        if _F(abs(f) + anorm) == anorm:
                            break
                        g = w[i]
                        h = _pythag(f, g)
                        w[i] = h
                        h = _F(_F(1) / h)
                        c = _F(g * h)
                        s = _F(-f * h)
                        col_nm = a[:, nm].copy()
                        col_i = a[:, i].copy()
                        a[:, nm] = col_nm * c + col_i * s
                        a[:, i] = col_i * c - col_nm * s
                z = w[k]
                if l == k:
                    if z < 0.0:
                        w[k] = -z
                        v[:, k] = -v[:, k]
                    break
                if its == 30:
                    raise ConvergenceError("no convergence in 30 svdcmp iterations")
                x = w[l]
                nm = k - 1
                y = w[nm]
                g = rv1[nm]
                h = rv1[k]
                f = _F(((y - z) * (y + z) + (g - h) * (g + h)) / (_F(2) * h * y))
                g = _pythag(f, 1.0)
                f = _F(((x - z) * (x + z) + h * ((y / (f + _sign(g, f))) - h)) / x)
                c = s = _F(1)
                for j in range(l, nm + 1):
                    i = j + 1
                    g = rv1[i]
                    y = w[i]
                    h = _F(s * g)
                    g = _F(c * g)
                    z = _pythag(f, h)
                    rv1[j] = z
                    c = _F(f / z)
                    s = _F(h / z)
                    f = _F(x * c + g * s)
                    g = _F(g * c - x * s)
                    h = _F(y * s)
                    y = _F(y * c)
                    vj = v[:, j].copy()
                    vi = v[:, i].copy()
                    v[:, j] = vj * c + vi * s
                    v[:, i] = vi * c - vj * s
                    z = _pythag(f, h)
                    w[j] = z
                    if z:
                        z = _F(_F(1) / z)
                        c = _F(f * z)
                        s = _F(h * z)
                    f = _F(c * g + s * y)
                    x = _F(c * y - s * g)
                    aj = a[:, j].copy()
                    ai = a[:, i].copy()
                    a[:, j] = aj * c + ai * s
                    a[:, i] = ai * c - aj * s
                rv1[l] = 0.0
                rv1[k] = f
                w[k] = x
    return a, w, v


def svbksb(u, w, v, b) -> np.ndarray:
    """Solve ``a x = b`` from the decomposition returned by :func:`svdcmp`.

    Singular values equal to zero are skipped.
    """
    u = np.asarray(u, dtype=_F)
    w = np.asarray(w, dtype=_F)
    v = np.asarray(v, dtype=_F)
    b = np.asarray(b, dtype=_F)
    if b.shape != (u.shape[0],):
        raise ValueError("right-hand side must have one entry per row of u")
    tmp = np.zeros(w.shape[0], dtype=_F)
    nonzero = w != 0.0
    tmp[nonzero] = (u[:, nonzero].T @ b) / w[nonzero]
    return (v @ tmp).astype(_F)


def gaussj(a, b) -> tuple[np.ndarray, np.ndarray]:
    """Gauss-Jordan elimination with full pivoting.

    Returns ``(inverse, solution)``: the inverse of ``a`` and the solution for
    each column of ``b``. A one-dimensional ``b`` gives a one-dimensional
    solution.
    """
    a = _square(a)
    n = a.shape[0]
    b = np.array(b, dtype=_F)
    vector = b.ndim == 1
    if vector:
        b = b.reshape(-1, 1)
    if b.ndim != 2 or b.shape[0] != n:
        raise ValueError("right-hand side must have one row per row of the matrix")

    ipiv = np.zeros(n, dtype=int)
    pivots: list[tuple[int, int]] = []
    others = np.ones(n, dtype=bool)
    with np.errstate(all="ignore"):
        for _ in range(n):
            free = ipiv == 0
            magnitude = np.abs(a)
            candidates = np.outer(free, free) & ~np.isnan(magnitude)
            if not candidates.any():
                raise SingularMatrixError("gaussj: Singular Matrix")
            big = magnitude[candidates].max()
            flat = np.flatnonzero(candidates & (magnitude == big))[-1]
            irow, icol = divmod(int(flat), n)
            ipiv[icol] += 1
            if irow != icol:
                a[[irow, icol]] = a[[icol, irow]]
                b[[irow, icol]] = b[[icol, irow]]
            pivots.append((irow, icol))
            if a[icol, icol] == 0.0:
                raise SingularMatrixError("gaussj: Singular Matrix")
            pivinv = _F(_F(1) / a[icol, icol])
            a[icol, icol] = 1.0
            a[icol] *= pivinv
            b[icol] *= pivinv
            others[:] = True
            others[icol] = False
            dums = a[others, icol].copy()
            a[others, icol] = 0.0
            a[others] -= np.outer(dums, a[icol]).astype(_F)
            b[others] -= np.outer(dums, b[icol]).astype(_F)
    for irow, icol in reversed(pivots):
        if irow != icol:
            a[:, [irow, icol]] = a[:, [icol, irow]]
    return a, (b[:, 0] if vector else b)


@dataclass(eq=False)
class LUDecomposition:
    """Row-permuted LU factors of a square matrix.

    ``lu`` holds L below the diagonal (unit diagonal implied) and U on and
    above it; ``indx`` records the row interchanges and ``parity`` is +1 or
    -1 for an even or odd number of them.
    """

    lu: np.ndarray
    indx: tuple[int, ...]
    parity: float

    def solve(self, b) -> np.ndarray:
        """Solve ``a x = b`` for the factored matrix ``a``."""
        return lubksb(self.lu, self.indx, b)

    def determinant(self) -> float:
        """Determinant of the factored matrix."""
        det = _F(self.parity)
        for value in np.diag(self.lu):
            det = _F(det * value)
        return float(det)

    def inverse(self) -> np.ndarray:
        """Inverse of the factored matrix, built column by column."""
        n = self.lu.shape[0]
        columns = [self.solve(unit) for unit in np.eye(n, dtype=_F)]
        return np.column_stack(columns).astype(_F)


def ludcmp(a) -> LUDecomposition:
    """LU decomposition by Crout's method with implicit partial pivoting."""
    a = _square(a)
    n = a.shape[0]
    big = np.max(np.abs(a), axis=1)
    if np.any(big == 0.0):
        raise SingularMatrixError("Singular matrix in routine ludcmp")
    vv = (_F(1) / big).astype(_F)
    parity = 1.0
    indx: list[int] = []
    with np.errstate(all="ignore"):
        for j in range(n):
            for i in range(j):
                a[i, j] = _F(a[i, j] - np.dot(a[i, :i], a[:i, j]))
            for i in range(j, n):
                a[i, j] = _F(a[i, j] - np.dot(a[i, :j], a[:j, j]))
            scaled = vv[j:] * np.abs(a[j:, j])
            hits = np.flatnonzero(scaled == np.max(scaled))
            if hits.size == 0:
                raise SingularMatrixError("Singular matrix in routine ludcmp")
            imax = j + int(hits[-1])
            if j != imax:
                a[[imax, j]] = a[[j, imax]]
                parity = -parity
                vv[imax] = vv[j]
            indx.append(imax)
            if a[j, j] == 0.0:
                a[j, j] = _TINY
            if j != n - 1:
                a[j + 1:, j] *= _F(_F(1) / a[j, j])
    return LUDecomposition(lu=a, indx=tuple(indx), parity=parity)


def lubksb(lu, indx, b) -> np.ndarray:
    """Forward and back substitution with factors from :func:`ludcmp`."""
    lu = np.asarray(lu, dtype=_F)
    x = np.array(b, dtype=_F)
    n = lu.shape[0]
    if x.shape != (n,) or len(indx) != n:
        raise ValueError("right-hand side and permutation must match the matrix size")
    first = None
    for i, ip in enumerate(indx):
        total = x[ip]
        x[ip] = x[i]
        if first is not None:
            total = _F(total - np.dot(lu[i, first:i], x[first:i]))
        elif total:
            first = i
        x[i] = total
    for i in range(n - 1, -1, -1):
        x[i] = _F((x[i] - np.dot(lu[i, i + 1:], x[i + 1:])) / lu[i, i])
    return x


def mprove(a, lu, indx, b, x) -> np.ndarray:
    """One step of iterative improvement of a solution ``x`` of ``a x = b``.

    The residual is accumulated in double precision.
    """
    a64 = np.asarray(a, dtype=np.float64)
    x32 = np.asarray(x, dtype=_F)
    residual = (a64 @ x32.astype(np.float64) - np.asarray(b, dtype=_F).astype(np.float64))
    correction = lubksb(lu, indx, residual.astype(_F))
    return (x32 - correction).astype(_F)


__all__ = [
    "ConvergenceError",
    "LUDecomposition",
    "SingularMatrixError",
    "gaussj",
    "lubksb",
    "ludcmp",
    "mprove",
    "pythag",
    "svbksb",
    "svdcmp",
]