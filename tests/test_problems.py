import math

import pytest

from numkit.bessel import bessj0, bessj1
from numkit.problems import (
    BESSEL_PROBLEM,
    ENGINEERING_PROBLEMS,
    METHOD_NAMES,
    Problem,
    bessel_j0_fdf,
    bessel_report,
    charge,
    charge_fdf,
    circuit,
    circuit_fdf,
    double_root,
    double_root_fdf,
    exp_sine,
    exp_sine_fdf,
    heat_capacity,
    heat_capacity_fdf,
    run_methods,
    shifted_cosine,
    shifted_cosine_fdf,
    sine_fdf,
    single_root_report,
)
from numkit.roots import RootFindingError, zbrak


def test_bessel_fdf_pairs_j0_with_negated_j1():
    assert bessel_j0_fdf(3.7) == (bessj0(3.7), -bessj1(3.7))


@pytest.mark.parametrize(
    "func, fdf, x, h",
    [
        (exp_sine, exp_sine_fdf, 0.3, 1e-3),
        (double_root, double_root_fdf, 2.0, 1e-3),
        (shifted_cosine, shifted_cosine_fdf, 0.0, 1e-3),
        (circuit, circuit_fdf, 100.0, 0.1),
        (charge, charge_fdf, 1.0, 1e-3),
        (heat_capacity, heat_capacity_fdf, 500.0, 1.0),
    ],
)
def test_derivative_matches_central_difference(func, fdf, x, h):
    value, derivative = fdf(x)
    assert value == func(x)
    estimate = (func(x + h) - func(x - h)) / (2 * h)
    assert derivative == pytest.approx(estimate, rel=1e-2)


def test_sine_fdf_gives_sine_and_cosine():
    value, derivative = sine_fdf(1.0)
    assert value == pytest.approx(math.sin(1.0), abs=1e-6)
    assert derivative == pytest.approx(math.cos(1.0), abs=1e-6)


def test_bessel_roots_from_every_method():
    brackets = zbrak(BESSEL_PROBLEM.func, BESSEL_PROBLEM.x1, BESSEL_PROBLEM.x2,
                     BESSEL_PROBLEM.steps, BESSEL_PROBLEM.max_roots)
    assert len(brackets) == 3
    results = run_methods(BESSEL_PROBLEM, 1e-6)
    assert set(results) == set(METHOD_NAMES)
    for name, found in results.items():
        assert len(found) == len(brackets)
        for result in found:
            assert abs(bessj0(result.root)) < 1e-3
    for name in ("rtbis", "rtflsp", "rtsafe"):
        for (lo, hi), result in zip(brackets, results[name]):
            assert lo - 1e-5 <= result.root <= hi + 1e-5


def test_charge_roots_are_zeros_of_the_function():
    problem = ENGINEERING_PROBLEMS[1]
    brackets = zbrak(problem.func, problem.x1, problem.x2, problem.steps, problem.max_roots)
    results = run_methods(problem, 1e-4, 1000, 1000)
    assert brackets
    for found in results.values():
        assert len(found) == len(brackets)
        for result in found:
            assert abs(charge(result.root)) < 0.05


def test_skipped_methods_are_absent():
    results = run_methods(BESSEL_PROBLEM, 1e-6, skip={"rtsec", "rtnewt"})
    assert set(results) == set(METHOD_NAMES) - {"rtsec", "rtnewt"}


def test_unknown_method_in_skip_is_rejected():
    with pytest.raises(ValueError):
        run_methods(BESSEL_PROBLEM, 1e-6, skip={"golden"})


def test_newton_iteration_limit_raises():
    with pytest.raises(RootFindingError):
        run_methods(BESSEL_PROBLEM, 1e-6, newton_max_iter=1)


def test_problem_without_sign_change_gives_no_roots():
    flat = Problem("flat", lambda x: 1.0, lambda x: (1.0, 0.0), 0.0, 1.0, 10)
    results = run_methods(flat, 1e-6)
    assert all(found == [] for found in results.values())
    assert set(results) == set(METHOD_NAMES)


def test_bessel_report_lists_every_root():
    report = bessel_report()
    assert report.startswith("Part1: Find the roots of the Bessel function J0")
    assert "======Bisection======" in report
    assert "======Muller method======" in report
    assert report.count("th root:") == len(METHOD_NAMES) * 3


def test_single_root_report_finds_pi_for_sine():
    report = single_root_report()
    assert "======problem4======" in report
    last_section = report.split("======problem4======")[1]
    assert f"root: {math.pi:.6f}" in last_section
    assert report.count("======problem") == 4