"""Reading linear systems and reporting their solutions by several methods."""

from __future__ import annotations

from typing import TextIO

import numpy as np

from numkit.linalg import gaussj, lubksb, ludcmp, mprove, svbksb, svdcmp

_F = np.float32


def read_system(stream: TextIO) -> tuple[np.ndarray, np.ndarray]:
    """Read ``m n``, then an ``m`` by ``n`` matrix and ``n`` right-hand side values."""
    tokens = stream.read().split()
    if len(tokens) < 2:
        raise ValueError("missing matrix dimensions")
    try:
        m, n = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise ValueError("matrix dimensions must be integers") from exc
    if m <= 0 or n <= 0:
        raise ValueError("matrix dimensions must be positive")
    needed = m * n + n
    values = tokens[2:2 + needed]
    if len(values) < needed:
        raise ValueError(f"expected {needed} values, found {len(values)}")
    numbers = np.array([float(value) for value in values], dtype=_F)
    return numbers[: m * n].reshape(m, n), numbers[m * n:]


def _vector_lines(values) -> list[str]:
    return [f"{float(value):.20f}" for value in values]


def _matrix_lines(matrix) -> list[str]:
    return ["".join(f"{float(value):.10f} " for value in row) for row in matrix]


def system_report(a, b, index: int) -> str:
    """Text report solving ``a x = b`` by Gauss-Jordan, LU and SVD, with inverse and determinant."""
    a = np.asarray(a, dtype=_F)
    b = np.asarray(b, dtype=_F)
    lines = [f"Solution for linear equation {index}"]

    lines.append("========== Solve Equation by gaussj ==========")
    inverse_gj, x_gj = gaussj(a, b)
    if -1000 < x_gj[0] < 1000:
        lines.extend(_vector_lines(x_gj))
    lines.append("")

    lines.append("========== Solve Equation by ludcmp ==========")
    decomposition = ludcmp(a)
    x_lu = lubksb(decomposition.lu, decomposition.indx, b)
    lines.append("---------- Result Before mprove() ----------")
    lines.extend(_vector_lines(x_lu))
    improved = mprove(a, decomposition.lu, decomposition.indx, b, x_lu)
    lines.append("---------- Result After mprove ----------")
    lines.extend(_vector_lines(improved))
    lines.append("")

    lines.append("========== Solve Equation by svdcmp ==========")
    u, w, v = svdcmp(a)
    lines.extend(_vector_lines(svbksb(u, w, v, b)))
    lines.append("")

    lines.append("========== Find inverse and determinant ==========")
    lines.append("By Gauss-Jordan elimination")
    lines.append("---------- Inverse Matrix ----------")
    lines.extend(_matrix_lines(inverse_gj))
    lines.append("")
    lines.append("By LU decomposition")
    lines.append("---------- Inverse Matrix ----------")
    lines.extend(_matrix_lines(decomposition.inverse()))
    lines.append("---------- Determinant ----------")
    lines.append(f"  {decomposition.determinant():.20f}")
    lines.append("")
    lines.append("")
    return "\n".join(lines) + "\n"


__all__ = ["read_system", "system_report"]