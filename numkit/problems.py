"""Root-finding problem sets and the text reports built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable

import numpy as np

from numkit.bessel import bessj0, bessj1
from numkit.roots import (
    RootFindingError,
    RootResult,
    muller,
    rtbis,
    rtflsp,
    rtnewt,
    rtsafe,
    rtsec,
    zbrak,
)

Func = Callable[[float], float]
FuncDeriv = Callable[[float], "tuple[float, float]"]

_SQRT2 = math.sqrt(2)


def _f32(value: float) -> float:
    return float(np.float32(value))


def _arg(x: float) -> float:
    return float(np.float32(x))


def _fsquare(x: float) -> float:
    xf = np.float32(x)
    return float(xf * xf)


@dataclass(frozen=True)
class Problem:
    """A function to solve, its derivative form and the interval to scan for roots."""

    title: str
    func: Func
    funcd: FuncDeriv
    x1: float
    x2: float
    steps: int
    max_roots: int | None = None
    fine_skip: frozenset = frozenset()


def bessel_j0_fdf(x: float) -> tuple[float, float]:
    """J0(x) and its derivative -J1(x)."""
    return bessj0(x), -bessj1(x)


def exp_sine(x: float) -> float:
    """10 e^-x sin(2 pi x) - 2."""
    x = _arg(x)
    return _f32(10 * np.exp(-x) * np.sin(2 * math.pi * x) - 2)


def _exp_sine_derivative(x: float) -> float:
    x = _arg(x)
    return _f32(
        10 * np.exp(-x) * (2 * math.pi * np.cos(2 * math.pi * x) - np.sin(2 * math.pi * x))
    )


def exp_sine_fdf(x: float) -> tuple[float, float]:
    """Value and derivative of :func:`exp_sine`."""
    return exp_sine(x), _exp_sine_derivative(x)


def double_root(x: float) -> float:
    """x^2 - 2x e^-x + e^-2x, which touches zero without crossing it."""
    xf = np.float32(x)
    x = float(xf)
    twice = float(np.float32(2) * xf)
    return _f32(_fsquare(x) - twice * np.exp(-x) + np.exp(-twice))


def _double_root_derivative(x: float) -> float:
    x = _arg(x)
    return _f32(2 * np.exp(-2 * x) * (1 + np.exp(x)) * (-1 + np.exp(x) * x))


def double_root_fdf(x: float) -> tuple[float, float]:
    """Value and derivative of :func:`double_root`."""
    return double_root(x), _double_root_derivative(x)


def shifted_cosine(x: float) -> float:
    """cos(x + sqrt 2) + x (x/2 + sqrt 2)."""
    x = _arg(x)
    half = float(np.float32(x) / np.float32(2))
    return _f32(np.cos(x + _SQRT2) + x * (half + _SQRT2))


def _shifted_cosine_derivative(x: float) -> float:
    x = _arg(x)
    return _f32(-np.sin(x + _SQRT2) + x + _SQRT2)


def shifted_cosine_fdf(x: float) -> tuple[float, float]:
    """Value and derivative of :func:`shifted_cosine`."""
    return shifted_cosine(x), _shifted_cosine_derivative(x)


def _sine(x: float) -> float:
    return _f32(np.sin(_arg(x)))


def sine_fdf(x: float) -> tuple[float, float]:
    """sin(x) and cos(x) in single precision."""
    return _sine(x), _f32(np.cos(_arg(x)))


def circuit(x: float) -> float:
    """Damped response of an electric circuit less its 1 % threshold."""
    x = _arg(x)
    root = np.sqrt(2000 - 0.01 * x * x)
    return _f32(np.exp(-0.005 * x) * np.cos(root * 0.05) - 0.01)


def _circuit_derivative(x: float) -> float:
    x = _arg(x)
    root = np.sqrt(2000 - 0.01 * x * x)
    return _f32(
        np.exp(-0.005 * x)
        * ((0.0005 * x * np.sin(0.05 * root) / root) - 0.005 * np.cos(0.05 * root))
    )


def circuit_fdf(x: float) -> tuple[float, float]:
    """Value and derivative of :func:`circuit`."""
    return circuit(x), _circuit_derivative(x)


def charge(x: float) -> float:
    """Force balance of a charged ring against a point charge."""
    x = _arg(x)
    return _f32(100 * x - np.power(_fsquare(x) + 0.9 * 0.9, 1.5) * 8.85 * math.pi)


def _charge_derivative(x: float) -> float:
    x = _arg(x)
    return _f32(
        100 - 1.5 * x * np.power(_fsquare(x) + 0.9 * 0.9, 0.5) * 2 * 8.85 * math.pi
    )


def charge_fdf(x: float) -> tuple[float, float]:
    """Value and derivative of :func:`charge`."""
    return charge(x), _charge_derivative(x)


def heat_capacity(x: float) -> float:
    """Quartic heat-capacity fit less the target value 1.2."""
    x = _arg(x)
    return _f32(
        0.99403
        + 1.671e-4 * x
        + 9.7215e-8 * x * x
        - 9.5838e-11 * x * x * x
        + 1.9520e-14 * x * x * x * x
        - 1.2
    )


def _heat_capacity_derivative(x: float) -> float:
    x = _arg(x)
    return _f32(
        1.671e-4 + 2 * 9.7215e-8 * x - 3 * 9.5838e-11 * x * x + 4 * 1.9520e-14 * x * x * x
    )


def heat_capacity_fdf(x: float) -> tuple[float, float]:
    """Value and derivative of :func:`heat_capacity`."""
    return heat_capacity(x), _heat_capacity_derivative(x)


BESSEL_PROBLEM = Problem("Bessel function J0", bessj0, bessel_j0_fdf, 1.0, 10.0, 100, 100)

SINGLE_ROOT_PROBLEMS = (
    Problem("exponential sine", exp_sine, exp_sine_fdf, 0.1, 1.0, 100, 1),
    Problem("double root", double_root, double_root_fdf, 0.0, 1.0, 10000, 1),
    Problem("shifted cosine", shifted_cosine, shifted_cosine_fdf, -2.0, -1.0, 10000, 1),
    Problem("sine", _sine, sine_fdf, 3.0, 4.0, 1, 1),
)

ENGINEERING_PROBLEMS = (
    Problem("Electric circuit design", circuit, circuit_fdf, 0.0, 400.0, 100, 5),
    Problem("problem 8.32", charge, charge_fdf, 0.0, 2.0, 100, 5),
    Problem(
        "problem 8.36",
        heat_capacity,
        heat_capacity_fdf,
        -1300.0,
        1200.0,
        10_000_000,
        10,
        frozenset({"rtsec", "rtnewt"}),
    ),
)

_METHODS = (
    ("rtbis", "Bisection", False),
    ("rtflsp", "Linear interpolation", False),
    ("rtsec", "Secant", False),
    ("rtnewt", "Newton-Raphson", True),
    ("rtsafe", "Newton with bracketing", True),
    ("muller", "Muller method", False),
)

METHOD_NAMES = tuple(name for name, _, _ in _METHODS)


@lru_cache(maxsize=None)
def _brackets(problem: Problem) -> tuple[tuple[float, float], ...]:
    return tuple(zbrak(problem.func, problem.x1, problem.x2, problem.steps, problem.max_roots))


def _solver(name: str, newton_max_iter: int, secant_max_iter: int):
    if name == "rtbis":
        return rtbis
    if name == "rtflsp":
        return rtflsp
    if name == "rtsec":
        return lambda f, a, b, acc: rtsec(f, a, b, acc, secant_max_iter)
    if name == "rtnewt":
        return lambda f, a, b, acc: rtnewt(f, a, b, acc, newton_max_iter)
    if name == "rtsafe":
        return rtsafe
    return muller


def run_methods(
    problem: Problem,
    xacc: float,
    newton_max_iter: int = 20,
    secant_max_iter: int = 30,
    skip: Iterable[str] = (),
) -> dict[str, list[RootResult]]:
    """Solve every bracketed root of ``problem`` with each method not in ``skip``.

    Returns the results keyed by method name, in bracket order. A method that
    fails raises :class:`RootFindingError`.
    """
    skipped = frozenset(skip)
    unknown = skipped - set(METHOD_NAMES)
    if unknown:
        raise ValueError(f"unknown methods: {', '.join(sorted(unknown))}")
    brackets = _brackets(problem)
    results: dict[str, list[RootResult]] = {}
    for name, _, uses_derivative in _METHODS:
        if name in skipped:
            continue
        solve = _solver(name, newton_max_iter, secant_max_iter)
        target = problem.funcd if uses_derivative else problem.func
        results[name] = [solve(target, lo, hi, xacc) for lo, hi in brackets]
    return results


def bessel_report() -> str:
    """Roots of J0 on [1, 10] found by every method."""
    results = run_methods(BESSEL_PROBLEM, 1e-6)
    lines = ["Part1: Find the roots of the Bessel function J0 using the following methods"]
    for name, label, _ in _METHODS:
        lines.append(f"======{label}======")
        for number, result in enumerate(results[name], 1):
            lines.append(f"iteration count: {result.iterations}")
            lines.append(f"{number}th root: {result.root:.6f}")
        lines.append("")
    return "\n".join(lines)


def single_root_report() -> str:
    """First root of each single-root problem, found by safeguarded Newton-Raphson."""
    lines = ["Part2"]
    for number, problem in enumerate(SINGLE_ROOT_PROBLEMS, 1):
        lines.append(f"======problem{number}======")
        brackets = _brackets(problem)
        if not brackets:
            lines.append("root: not bracketed")
        else:
            lo, hi = brackets[0]
            lines.append(f"root: {rtsafe(problem.funcd, lo, hi, 1e-6).root:.6f}")
        lines.append("")
    return "\n".join(lines)


def engineering_report() -> str:
    """Roots of the engineering problems at two tolerances by every method."""
    lines: list[str] = []
    for problem in ENGINEERING_PROBLEMS:
        coarse = run_methods(problem, 1e-4, 1000, 1000)
        fine = run_methods(problem, 1e-6, 1000, 1000, skip=problem.fine_skip)
        lines.append("-" * 56)
        lines.append(f"Solving {problem.title}")
        lines.append("")
        for name, label, _ in _METHODS:
            lines.append(f"=================={label}==================")
            for tolerance, results in (("1e-4", coarse), ("1e-6", fine)):
                if name not in results:
                    continue
                for number, result in enumerate(results[name], 1):
                    lines.append(f"iteration count: {result.iterations}")
                    lines.append(f"{number}th root with {tolerance}: {result.root:.6f}")
                lines.append("")
    return "\n".join(lines)


__all__ = [
    "BESSEL_PROBLEM",
    "ENGINEERING_PROBLEMS",
    "METHOD_NAMES",
    "Problem",
    "RootFindingError",
    "SINGLE_ROOT_PROBLEMS",
    "bessel_j0_fdf",
    "bessel_report",
    "charge",
    "charge_fdf",
    "circuit",
    "circuit_fdf",
    "double_root",
    "double_root_fdf",
    "engineering_report",
    "exp_sine",
    "exp_sine_fdf",
    "heat_capacity",
    "heat_capacity_fdf",
    "run_methods",
    "shifted_cosine",
    "shifted_cosine_fdf",
    "sine_fdf",
    "single_root_report",
]