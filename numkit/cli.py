"""Command-line entry point running the numerical experiments and printing reports."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, Sequence

import numpy as np

from numkit.approximation import (
    chop,
    chopped_ratio,
    cosine_series,
    exp_neg_inverse_series,
    exp_neg_series,
    percent_relative_error,
    velocity_with_error,
)
from numkit.eigen import eigsrt, jacobi, random_symmetric
from numkit.linalg import ConvergenceError, SingularMatrixError
from numkit.machine import get_deps, get_feps, machar, machar_double
from numkit.problems import bessel_report, engineering_report, single_root_report
from numkit.rng import NRRandom
from numkit.roots import RootFindingError

_F = np.float32


def _machine_report() -> str:
    single = machar()
    double = machar_double()
    lines = [
        f"float eps by machar {single.eps:.23f}",
        f"double eps by the machar_double {double.eps:.52f}",
        "",
        f"float eps by my own function = {get_feps():.23f}",
        f"double eps by my own function = {get_deps():.52f}",
    ]
    return "\n".join(lines)


def _series_lines(terms) -> list[str]:
    lines = []
    for term in terms:
        lines.append(f"{term.index}th result: {term.value:e}")
        lines.append(f"Relative true error: {term.true_error:e}")
        lines.append(f"Relative approximate error: {term.approx_error:e}")
        lines.append("")
    return lines


def _chopped_denominator(x: float, digits: int) -> float:
    xf = _F(x)
    square = _F(chop(_F(3) * xf * xf, digits))
    diff = _F(1) - square
    return chop(diff * diff, digits)


def _errors_report() -> str:
    lines = ["======== Problem 3.6 ========"]
    lines.extend(_series_lines(exp_neg_series(5, 20)))
    lines.extend(_series_lines(exp_neg_inverse_series(5, 20)))
    lines.append("")

    lines.append("======== Problem 3.7 ========")
    x = 0.577
    lines.append(f"Result by using 3-digit: {chopped_ratio(x, 3):.52f}")
    lines.append(f"Result by using 4-digit: {chopped_ratio(x, 4):.52f}")
    lines.append(f"denominator of digit-3: {_chopped_denominator(x, 3):f}")
    lines.append(f"denominator of digit-4: {_chopped_denominator(x, 4):f}")
    lines.append("")
    lines.append("**That's the reason why the results are inf**")
    lines.append("")

    lines.append("======== Problem 4.2 ========")
    for term in cosine_series(math.pi / 3, 14):
        lines.append(
            f"{term.index}: Approximation {term.value:e}, "
            f"True Percentage Relative Error: {term.true_error:f}%, "
            f"Approx Percentage Relative Error: {term.approx_error:f}%"
        )
    lines.append("")

    lines.append("======== Problem 4.5 ========")
    answer = 554.0
    for index, approx in enumerate((-62.0, 78.0, 354.0, 554.0)):
        error = percent_relative_error(answer, approx)
        lines.append(f"{index}: True Percent Relative Error: {error:f}%")
    lines.append("")

    lines.append("======== Problem 4.12 ========")
    velocity, dv_dc, dv_dm = velocity_with_error(9.81, 6, 12.5, 50)
    lines.append(f"dv/dc: {dv_dc:f}, dv/dm: {dv_dm:f}")
    lines.append(f"Approximation Result: {velocity:.52f} +- {dv_dc + dv_dm:f}")
    return "\n".join(lines)


def _roots_report() -> str:
    return bessel_report() + "\n" + single_root_report()


def _eigen_report(size: int, seed: int) -> str:
    matrix = random_symmetric(size, NRRandom(seed))
    d, v, _ = jacobi(matrix)
    d, v = eigsrt(d, v)
    lines = []
    for value, vector in zip(d, v.T):
        lines.append(f"eigen values: {float(value):f} ")
        lines.append(
            "eigen vectors(transpose): "
            + "".join(f"{float(component):f}  " for component in vector)
        )
    return "\n".join(lines)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numkit", description="Run numerical experiments and print their reports."
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("machine", help="floating-point machine epsilon")
    commands.add_parser("errors", help="series approximations and error estimates")
    commands.add_parser("roots", help="roots of J0 and four single-root problems")
    commands.add_parser("engineering", help="roots of three engineering problems")
    eigen = commands.add_parser("eigen", help="eigen-decomposition of a random symmetric matrix")
    eigen.add_argument("--size", type=_positive_int, default=11)
    eigen.add_argument("--seed", type=int, default=-1)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen experiment, print its report and return an exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    reports: dict[str, Callable[[], str]] = {
        "machine": _machine_report,
        "errors": _errors_report,
        "roots": _roots_report,
        "engineering": engineering_report,
        "eigen": lambda: _eigen_report(args.size, args.seed),
    }
    try:
        report = reports[args.command]()
    except (RootFindingError, ConvergenceError, SingularMatrixError) as exc:
        print("Numerical run-time error...", file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1
    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())