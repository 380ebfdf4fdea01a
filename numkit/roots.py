"""Bracketing and root-finding routines in single precision."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

_F = np.float32

Func = Callable[[float], float]
FuncDeriv = Callable[[float], "tuple[float, float]"]


class RootFindingError(ArithmeticError):
    """Raised when a root cannot be found by the requested method."""


@dataclass(frozen=True)
class RootResult:
    """A root estimate and the number of iterations spent finding it."""

    root: float
    iterations: int


def _call(func: Func, x: np.float32) -> np.float32:
    return _F(func(float(x)))


def _call_deriv(funcd: FuncDeriv, x: np.float32) -> tuple[np.float32, np.float32]:
    f, df = funcd(float(x))
    return _F(f), _F(df)


def zbrak(
    func: Func, x1: float, x2: float, n: int, max_roots: int | None = None
) -> list[tuple[float, float]]:
    """Split [x1, x2] into ``n`` steps and return sub-intervals where ``func`` changes sign.

    The scan stops once ``max_roots`` brackets have been found.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    brackets: list[tuple[float, float]] = []
    with np.errstate(all="ignore"):
        x = _F(x1)
        dx = _F(_F(_F(x2) - x) / _F(n))
        fp = _call(func, x)
        for _ in range(n):
            x = _F(x + dx)
            fc = _call(func, x)
            if fc * fp <= 0.0:
                brackets.append((float(_F(x - dx)), float(x)))
                if max_roots is not None and len(brackets) == max_roots:
                    return brackets
            fp = fc
    return brackets


def rtbis(func: Func, x1: float, x2: float, xacc: float, max_iter: int = 40) -> RootResult:
    """Find a root bracketed by [x1, x2] by bisection."""
    with np.errstate(all="ignore"):
        a, b = _F(x1), _F(x2)
        f = _call(func, a)
        fmid = _call(func, b)
        if f * fmid >= 0.0:
            raise RootFindingError("Root must be bracketed for bisection in rtbis")
        if f < 0.0:
            dx, rtb = _F(b - a), a
        else:
            dx, rtb = _F(a - b), b
        for j in range(1, max_iter + 1):
            dx = _F(dx * _F(0.5))
            xmid = _F(rtb + dx)
            fmid = _call(func, xmid)
            if fmid <= 0.0:
                rtb = xmid
            if abs(dx) < xacc or fmid == 0.0:
                return RootResult(float(rtb), j)
    raise RootFindingError("Too many bisections in rtbis")


def rtflsp(func: Func, x1: float, x2: float, xacc: float, max_iter: int = 30) -> RootResult:
    """Find a root bracketed by [x1, x2] by the false-position method."""
    with np.errstate(all="ignore"):
        a, b = _F(x1), _F(x2)
        fl = _call(func, a)
        fh = _call(func, b)
        if fl * fh > 0.0:
            raise RootFindingError("Root must be bracketed in rtflsp")
        if fl < 0.0:
            xl, xh = a, b
        else:
            xl, xh = b, a
            fl, fh = fh, fl
        dx = _F(xh - xl)
        for j in range(1, max_iter + 1):
            rtf = _F(xl + dx * fl / (fl - fh))
            f = _call(func, rtf)
            if f < 0.0:
                delta = _F(xl - rtf)
                xl, fl = rtf, f
            else:
                delta = _F(xh - rtf)
                xh, fh = rtf, f
            dx = _F(xh - xl)
            if abs(delta) < xacc or f == 0.0:
                return RootResult(float(rtf), j)
    raise RootFindingError("Maximum number of iterations exceeded in rtflsp")


def rtsec(func: Func, x1: float, x2: float, xacc: float, max_iter: int = 30) -> RootResult:
    """Find a root near [x1, x2] by the secant method."""
    with np.errstate(all="ignore"):
        a, b = _F(x1), _F(x2)
        fl = _call(func, a)
        f = _call(func, b)
        if abs(fl) < abs(f):
            rts, xl = a, b
            fl, f = f, fl
        else:
            xl, rts = a, b
        for j in range(1, max_iter + 1):
            dx = _F((xl - rts) * f / (f - fl))
            xl, fl = rts, f
            rts = _F(rts + dx)
            f = _call(func, rts)
            if abs(dx) < xacc or f == 0.0:
                return RootResult(float(rts), j)
    raise RootFindingError("Maximum number of iterations exceeded in rtsec")


def rtnewt(funcd: FuncDeriv, x1: float, x2: float, xacc: float, max_iter: int = 20) -> RootResult:
    """Find a root in [x1, x2] by Newton-Raphson; ``funcd`` returns (f, df)."""
    with np.errstate(all="ignore"):
        a, b = _F(x1), _F(x2)
        rtn = _F(_F(0.5) * (a + b))
        for j in range(1, max_iter + 1):
            f, df = _call_deriv(funcd, rtn)
            dx = _F(f / df)
            rtn = _F(rtn - dx)
            if (a - rtn) * (rtn - b) < 0.0:
                raise RootFindingError("Jumped out of brackets in rtnewt")
            if abs(dx) < xacc:
                return RootResult(float(rtn), j)
    raise RootFindingError("Maximum number of iterations exceeded in rtnewt")


def rtsafe(funcd: FuncDeriv, x1: float, x2: float, xacc: float, max_iter: int = 100) -> RootResult:
    """Find a bracketed root by Newton-Raphson safeguarded with bisection."""
    with np.errstate(all="ignore"):
        a, b = _F(x1), _F(x2)
        fl, _ = _call_deriv(funcd, a)
        fh, _ = _call_deriv(funcd, b)
        if (fl > 0.0 and fh > 0.0) or (fl < 0.0 and fh < 0.0):
            raise RootFindingError("Root must be bracketed in rtsafe")
        if fl == 0.0:
            return RootResult(float(a), 0)
        if fh == 0.0:
            return RootResult(float(b), 0)
        if fl < 0.0:
            xl, xh = a, b
        else:
            xh, xl = a, b
        rts = _F(_F(0.5) * (a + b))
        dxold = _F(abs(b - a))
        dx = dxold
        f, df = _call_deriv(funcd, rts)
        for j in range(1, max_iter + 1):
            out_of_range = ((rts - xh) * df - f) * ((rts - xl) * df - f) > 0.0
            too_slow = abs(2.0 * float(f)) > abs(float(dxold) * float(df))
            if out_of_range or too_slow:
                dxold = dx
                dx = _F(_F(0.5) * (xh - xl))
                rts = _F(xl + dx)
                if xl == rts:
                    return RootResult(float(rts), j)
            else:
                dxold = dx
                dx = _F(f / df)
                previous = rts
                rts = _F(rts - dx)
                if previous == rts:
                    return RootResult(float(rts), j)
            if abs(dx) < xacc:
                return RootResult(float(rts), j)
            f, df = _call_deriv(funcd, rts)
            if f < 0.0:
                xl = rts
            else:
                xh = rts
    raise RootFindingError("Maximum number of iterations exceeded in rtsafe")


def muller(func: Func, x1: float, x2: float, xacc: float, max_iter: int = 40) -> RootResult:
    """Find a root near [x1, x2] by Muller's method.

    Starts from x1, x2 and their midpoint. After ``max_iter`` steps the
    current estimate is returned rather than reported as a failure.
    """
    if max_iter <= 0:
        raise RootFindingError("Maximum number of iterations exceeded in muller")
    with np.errstate(all="ignore"):
        a0, b0 = _F(x1), _F(x2)
        xx2 = _F(a0 + (b0 - a0) / _F(2))
        xx1 = b0
        xx0 = a0
        for j in range(1, max_iter + 1):
            h0 = _F(xx1 - xx0)
            h1 = _F(xx2 - xx1)
            f1 = _call(func, xx1)
            f2 = _call(func, xx2)
            f0 = _call(func, xx0)
            d0 = _F((f1 - f0) / h0)
            d1 = _F((f2 - f1) / h1)
            a = _F((d1 - d0) / (h1 + h0))
            b = _F(a * h1 + d1)
            c = f2
            rad = _F(np.sqrt(b * b - _F(4) * a * c))
            den = _F(b + rad) if abs(b + rad) > abs(b - rad) else _F(b - rad)
            dxr = _F(_F(-2) * c / den)
            xr = _F(xx2 + dxr)
            if abs(dxr) < xacc * float(xr) or j >= max_iter:
                return RootResult(float(xr), j)
            xx0, xx1, xx2 = xx1, xx2, xr
    raise RootFindingError("Maximum number of iterations exceeded in muller")