"""Series approximations, digit chopping and error estimates."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SeriesTerm:
    """One partial sum of a series together with its error estimates."""

    index: int
    value: float
    true_error: float
    approx_error: float


def relative_error(true: float, approx: float) -> float:
    """Relative error of ``approx`` against ``true``."""
    return (true - approx) / true


def percent_relative_error(true: float, approx: float) -> float:
    """Relative error of ``approx`` against ``true`` in percent."""
    return relative_error(true, approx) * 100


def exp_neg_series(x: float, terms: int) -> list[SeriesTerm]:
    """Partial sums of the Maclaurin series of exp(-x)."""
    true = math.exp(-x)
    result = []
    total = 0.0
    term = 1.0
    for i in range(terms):
        previous = total if i else 1.0
        if i:
            term *= -x / i
        total += term
        result.append(
            SeriesTerm(
                index=i + 1,
                value=total,
                true_error=relative_error(true, total),
                approx_error=relative_error(total, previous),
            )
        )
    return result


def exp_neg_inverse_series(x: float, terms: int) -> list[SeriesTerm]:
    """Approximations of exp(-x) as the reciprocal of the series of exp(x)."""
    true = math.exp(-x)
    result = []
    total = 0.0
    term = 1.0
    inverse = 1.0
    for i in range(terms):
        previous = inverse
        if i:
            term *= x / i
        total += term
        inverse = 1 / total
        result.append(
            SeriesTerm(
                index=i + 1,
                value=inverse,
                true_error=relative_error(true, inverse),
                approx_error=relative_error(inverse, previous),
            )
        )
    return result


def chop(value: float, digits: int) -> float:
    """Chop ``value`` to ``digits`` significant decimal digits in single precision."""
    if digits < 0:
        raise ValueError("digits must not be negative")
    num = np.float32(value)
    if not np.isfinite(num):
        raise ValueError("cannot chop a non-finite value")
    ten = np.float32(10)
    scale = np.float32(10**digits)
    shifts = 0
    while num > 1:
        num /= ten
        shifts += 1
    num = np.float32(int(num * scale)) / scale
    for _ in range(shifts):
        num *= ten
    return float(num)


def chopped_ratio(x: float, digits: int) -> float:
    """Evaluate 6x / (1 - 3x^2)^2 with every step chopped to ``digits`` digits.

    A chopped denominator of zero yields an infinite (or NaN) result.
    """
    xf = np.float32(x)
    numerator = np.float32(chop(xf * np.float32(6), digits))
    square = np.float32(chop(np.float32(3) * xf * xf, digits))
    diff = np.float32(1) - square
    denominator = np.float32(chop(diff * diff, digits))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(numerator / denominator)


def cosine_series(x: float, terms: int) -> list[SeriesTerm]:
    """Partial sums of the Maclaurin series of cos(x); errors are in percent."""
    true = math.cos(x)
    result = []
    approx = 1.0
    term = 1.0
    for i in range(1, terms + 1):
        term *= (x * x) / ((2 * i) * (2 * i - 1)) * -1
        previous = approx
        approx += term
        result.append(
            SeriesTerm(
                index=i,
                value=approx,
                true_error=percent_relative_error(true, approx),
                approx_error=percent_relative_error(approx, previous),
            )
        )
    return result


def velocity_with_error(g: float, t: float, c: float, m: float) -> tuple[float, float, float]:
    """Falling-body velocity and the sensitivities to drag ``c`` and mass ``m``.

    Returns ``(velocity, dv_dc, dv_dm)``; the error bound is ``dv_dc + dv_dm``.
    """
    velocity = g * m * (1 - math.exp((-c / m) * t)) / c
    dv_dc = abs(g * (t * c + m) * math.exp((-t * c) / m) / (c * c))
    dv_dm = abs(g * (m + c * t) * math.exp(-c * t / m) / (c * m))
    return velocity, dv_dc, dv_dm