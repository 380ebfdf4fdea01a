import math

import pytest

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


def square_minus_two(x):
    return x * x - 2


def square_minus_two_fdf(x):
    return x * x - 2, 2 * x


def bessel_fdf(x):
    return bessj0(x), -bessj1(x)


@pytest.mark.parametrize("method", [rtbis, rtflsp, rtsec, muller])
def test_plain_methods_find_sqrt_two(method):
    result = method(square_minus_two, 1.0, 2.0, 1e-6)
    assert abs(result.root - math.sqrt(2)) < 1e-5
    assert result.iterations >= 1


@pytest.mark.parametrize("method", [rtnewt, rtsafe])
def test_derivative_methods_find_sqrt_two(method):
    result = method(square_minus_two_fdf, 1.0, 2.0, 1e-6)
    assert abs(result.root - math.sqrt(2)) < 1e-5
    assert 1 <= result.iterations <= 100


def test_zbrak_finds_sign_changes_of_sine():
    brackets = zbrak(math.sin, 1.0, 10.0, 100)
    assert len(brackets) == 3
    for (lo, hi), k in zip(brackets, (1, 2, 3)):
        assert lo < k * math.pi <= hi + 1e-6
        assert math.sin(lo) * math.sin(hi) <= 0.0


def test_zbrak_stops_at_max_roots():
    brackets = zbrak(math.sin, 1.0, 10.0, 100, max_roots=2)
    assert len(brackets) == 2
    assert brackets == zbrak(math.sin, 1.0, 10.0, 100)[:2]


def test_zbrak_rejects_zero_steps():
    with pytest.raises(ValueError):
        zbrak(math.sin, 1.0, 10.0, 0)


def test_methods_agree_on_bessel_roots():
    brackets = zbrak(bessj0, 1.0, 10.0, 100, max_roots=100)
    assert len(brackets) == 3
    for lo, hi in brackets:
        roots = [
            rtbis(bessj0, lo, hi, 1e-6).root,
            rtflsp(bessj0, lo, hi, 1e-6).root,
            rtsec(bessj0, lo, hi, 1e-6).root,
            rtnewt(bessel_fdf, lo, hi, 1e-6).root,
            rtsafe(bessel_fdf, lo, hi, 1e-6).root,
            muller(bessj0, lo, hi, 1e-6).root,
        ]
        for root in roots:
            assert lo - 1e-4 <= root <= hi + 1e-4
            assert abs(root - roots[0]) < 1e-4
            assert abs(bessj0(root)) < 1e-4


def test_rtbis_requires_bracket():
    with pytest.raises(RootFindingError):
        rtbis(square_minus_two, 2.0, 3.0, 1e-6)


def test_rtflsp_requires_bracket():
    with pytest.raises(RootFindingError):
        rtflsp(square_minus_two, 2.0, 3.0, 1e-6)


def test_rtsafe_requires_bracket():
    with pytest.raises(RootFindingError):
        rtsafe(square_minus_two_fdf, 2.0, 3.0, 1e-6)


def test_rtbis_too_many_bisections():
    with pytest.raises(RootFindingError):
        rtbis(square_minus_two, 1.0, 2.0, 1e-6, max_iter=2)


def test_rtsec_iteration_limit():
    with pytest.raises(RootFindingError):
        rtsec(square_minus_two, 1.0, 2.0, 1e-12, max_iter=1)


def test_rtnewt_jumps_out_of_brackets():
    def atan_fdf(x):
        return math.atan(x), 1 / (1 + x * x)

    with pytest.raises(RootFindingError):
        rtnewt(atan_fdf, -10.0, 20.0, 1e-6)


def test_rtsafe_returns_endpoint_when_it_is_a_root():
    result = rtsafe(lambda x: (x, 1.0), 0.0, 1.0, 1e-6)
    assert result == RootResult(0.0, 0)


def test_muller_cube_root():
    result = muller(lambda x: x ** 3 - 2, 1.0, 2.0, 1e-6, max_iter=40)
    assert abs(result.root - 2 ** (1 / 3)) < 1e-5
    assert result.iterations <= 40


def test_muller_returns_estimate_at_iteration_limit():
    result = muller(square_minus_two, 1.0, 2.0, 1e-12, max_iter=1)
    assert result.iterations == 1
    assert abs(result.root - math.sqrt(2)) < 0.1


def test_tighter_tolerance_is_not_less_accurate():
    coarse = rtbis(square_minus_two, 1.0, 2.0, 1e-2)
    fine = rtbis(square_minus_two, 1.0, 2.0, 1e-6)
    assert fine.iterations > coarse.iterations
    assert abs(fine.root - math.sqrt(2)) <= abs(coarse.root - math.sqrt(2))