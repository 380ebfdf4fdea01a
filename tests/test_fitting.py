import io

import numpy as np
import pytest

from numkit.fitting import fit_affine, read_fit_data
from numkit.linalg import SingularMatrixError

PARAMS = (1.5, -0.25, 3.0, 0.5, 2.0, -1.0)


def _affine_data(params, count=77):
    a1, a2, a3, a4, a5, a6 = params
    index = np.arange(count, dtype=np.float64)
    x = (index % 11) * 0.5 - 2.0
    y = (index // 11) * 0.75 - 1.5
    xp = a1 * x + a2 * y + a3
    yp = a4 * x + a5 * y + a6
    return x, y, xp, yp


def test_fit_recovers_exact_affine_map():
    result = fit_affine(*_affine_data(PARAMS))
    assert result.shape == (6,)
    assert np.allclose(result, PARAMS, atol=1e-3)


def test_read_fit_data_columns():
    stream = io.StringIO("1 2 3 4\n5 6 7 8\n9 9 9 9\n")
    x, y, xp, yp = read_fit_data(stream, 2)
    assert x.tolist() == [1.0, 5.0]
    assert y.tolist() == [2.0, 6.0]
    assert xp.tolist() == [3.0, 7.0]
    assert yp.tolist() == [4.0, 8.0]


def test_read_then_fit_round_trip():
    columns = _affine_data(PARAMS)
    text = "\n".join(
        f"{a:f} {b:f} {c:f} {d:f}" for a, b, c, d in zip(*columns)
    )
    data = read_fit_data(io.StringIO(text))
    assert len(data[0]) == 77
    assert np.allclose(fit_affine(*data), PARAMS, atol=1e-3)


def test_read_fit_data_short_input():
    with pytest.raises(ValueError):
        read_fit_data(io.StringIO("1 2 3 4\n5 6 7"), 2)


def test_read_fit_data_rejects_bad_count():
    with pytest.raises(ValueError):
        read_fit_data(io.StringIO("1 2 3 4"), 0)


def test_fit_identical_points_is_singular():
    ones = np.ones(10)
    with pytest.raises(SingularMatrixError):
        fit_affine(ones, ones, ones, ones)


def test_fit_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fit_affine([1.0, 2.0, 3.0], [1.0, 2.0], [1.0, 2.0, 3.0], [1.0, 2.0, 3.0])