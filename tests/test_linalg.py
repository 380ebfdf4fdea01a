import numpy as np
import pytest

from numkit.linalg import (
    LUDecomposition,
    SingularMatrixError,
    gaussj,
    lubksb,
    ludcmp,
    mprove,
    pythag,
    svbksb,
    svdcmp,
)

A3 = np.array([[2.0, 1.0, -1.0], [-3.0, -1.0, 2.0], [-2.0, 1.0, 2.0]])
B3 = np.array([8.0, -11.0, -3.0])

A4 = np.array(
    [
        [4.0, -2.0, 1.0, 3.0],
        [3.0, 6.0, -4.0, 2.0],
        [2.0, 1.0, 8.0, -5.0],
        [1.0, -3.0, 2.0, 7.0],
    ]
)
B4 = np.array([1.0, 2.0, 3.0, 4.0])


def test_pythag_values():
    assert pythag(3.0, 4.0) == pytest.approx(5.0)
    assert pythag(0.0, 0.0) == 0.0
    assert pythag(-4.0, 3.0) == pytest.approx(pythag(3.0, 4.0))


def test_pythag_avoids_overflow():
    assert pythag(1e30, 1e30) == pytest.approx(1e30 * np.sqrt(2), rel=1e-5)


@pytest.mark.parametrize("a, b", [(A3, B3), (A4, B4)])
def test_gaussj_solution_and_inverse(a, b):
    inverse, x = gaussj(a, b)
    assert x.shape == b.shape
    np.testing.assert_allclose(a @ x, b, atol=1e-4)
    np.testing.assert_allclose(inverse @ a, np.eye(a.shape[0]), atol=1e-4)


def test_gaussj_matrix_right_hand_side():
    rhs = np.column_stack([B4, 2 * B4])
    _, x = gaussj(A4, rhs)
    assert x.shape == (4, 2)
    np.testing.assert_allclose(x[:, 1], 2 * x[:, 0], rtol=1e-4)


def test_gaussj_does_not_modify_input():
    a = A3.copy()
    gaussj(a, B3)
    np.testing.assert_array_equal(a, A3)


def test_gaussj_singular():
    with pytest.raises(SingularMatrixError):
        gaussj([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])


def test_gaussj_rejects_non_square():
    with pytest.raises(ValueError):
        gaussj([[1.0, 2.0, 3.0]], [1.0])


@pytest.mark.parametrize("a, b", [(A3, B3), (A4, B4)])
def test_ludcmp_solve(a, b):
    decomposition = ludcmp(a)
    assert isinstance(decomposition, LUDecomposition)
    x = decomposition.solve(b)
    np.testing.assert_allclose(a @ x, b, atol=1e-4)
    np.testing.assert_allclose(lubksb(decomposition.lu, decomposition.indx, b), x)


@pytest.mark.parametrize("a", [A3, A4])
def test_ludcmp_determinant_and_inverse(a):
    decomposition = ludcmp(a)
    assert decomposition.determinant() == pytest.approx(np.linalg.det(a), rel=1e-4)
    np.testing.assert_allclose(decomposition.inverse() @ a, np.eye(a.shape[0]), atol=1e-4)


def test_ludcmp_row_swap_parity():
    decomposition = ludcmp([[0.0, 1.0], [1.0, 0.0]])
    assert decomposition.parity == -1.0
    assert decomposition.determinant() == pytest.approx(np.linalg.det([[0, 1], [1, 0]]))


def test_ludcmp_factors_reproduce_permuted_matrix():
    decomposition = ludcmp(A4)
    n = A4.shape[0]
    lower = np.tril(decomposition.lu, -1) + np.eye(n)
    upper = np.triu(decomposition.lu)
    permuted = A4.copy()
    for j, imax in enumerate(decomposition.indx):
        permuted[[j, imax]] = permuted[[imax, j]]
    np.testing.assert_allclose(lower @ upper, permuted, atol=1e-4)


def test_ludcmp_zero_row_is_singular():
    with pytest.raises(SingularMatrixError):
        ludcmp([[1.0, 2.0], [0.0, 0.0]])


def test_mprove_keeps_good_solution_close():
    decomposition = ludcmp(A4)
    x = decomposition.solve(B4)
    improved = mprove(A4, decomposition.lu, decomposition.indx, B4, x)
    np.testing.assert_allclose(A4 @ improved, B4, atol=1e-4)


def test_mprove_corrects_perturbed_solution():
    decomposition = ludcmp(A4)
    exact = np.linalg.solve(A4, B4)
    rough = exact + 0.01
    improved = mprove(A4, decomposition.lu, decomposition.indx, B4, rough)
    assert np.max(np.abs(improved - exact)) < np.max(np.abs(rough - exact))


@pytest.mark.parametrize(
    "a",
    [A3, A4, np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]), np.array([[2.0, 0.0], [0.0, -3.0]])],
)
def test_svdcmp_reconstructs(a):
    u, w, v = svdcmp(a)
    assert u.shape == a.shape
    assert w.shape == (a.shape[1],)
    assert np.all(w >= 0)
    np.testing.assert_allclose(u @ np.diag(w) @ v.T, a, atol=1e-4)
    np.testing.assert_allclose(v.T @ v, np.eye(a.shape[1]), atol=1e-4)
    np.testing.assert_allclose(u.T @ u, np.eye(a.shape[1]), atol=1e-4)


def test_svdcmp_singular_values_match_numpy():
    _, w, _ = svdcmp(A4)
    expected = np.linalg.svd(A4, compute_uv=False)
    np.testing.assert_allclose(np.sort(w)[::-1], expected, rtol=1e-4)


def test_svbksb_solves_system():
    u, w, v = svdcmp(A4)
    x = svbksb(u, w, v, B4)
    np.testing.assert_allclose(A4 @ x, B4, atol=1e-4)


def test_svbksb_skips_zero_singular_values():
    a = np.array([[1.0, 0.0], [0.0, 0.0]])
    u, w, v = svdcmp(a)
    x = svbksb(u, w, v, np.array([3.0, 5.0]))
    assert np.all(np.isfinite(x))
    np.testing.assert_allclose(a @ x, [3.0, 0.0], atol=1e-5)


def test_svbksb_rejects_wrong_length():
    u, w, v = svdcmp(A3)
    with pytest.raises(ValueError):
        svbksb(u, w, v, [1.0, 2.0])