"""Rational and asymptotic approximations of Bessel functions J0 and J1."""

from __future__ import annotations

import math

import numpy as np


def _prepare(x: float) -> tuple[np.float32, np.float32]:
    xf = np.float32(x)
    return xf, np.float32(abs(xf))


def bessj0(x: float) -> float:
    """Bessel function of the first kind of order zero, single precision."""
    xf, ax = _prepare(x)
    if ax < 8.0:
        y = float(xf * xf)
        ans1 = 57568490574.0 + y * (-13362590354.0 + y * (651619640.7
               + y * (-11214424.18 + y * (77392.33017 + y * (-184.9052456)))))
        ans2 = 57568490411.0 + y * (1029532985.0 + y * (9494680.718
               + y * (59272.64853 + y * (267.8532712 + y * 1.0))))
        ans = ans1 / ans2
    else:
        z = np.float32(8.0 / float(ax))
        y = float(z * z)
        xx = float(ax) - 0.785398164
        ans1 = 1.0 + y * (-0.1098628627e-2 + y * (0.2734510407e-4
               + y * (-0.2073370639e-5 + y * 0.2093887211e-6)))
        ans2 = -0.1562499995e-1 + y * (0.1430488765e-3
               + y * (-0.6911147651e-5 + y * (0.7621095161e-6
               - y * 0.934945152e-7)))
        ans = math.sqrt(0.636619772 / float(ax)) * (
            math.cos(xx) * ans1 - float(z) * math.sin(xx) * ans2
        )
    return float(np.float32(ans))


def bessj1(x: float) -> float:
    """Bessel function of the first kind of order one, single precision."""
    xf, ax = _prepare(x)
    if ax < 8.0:
        y = float(xf * xf)
        ans1 = float(xf) * (72362614232.0 + y * (-7895059235.0 + y * (242396853.1
               + y * (-2972611.439 + y * (15704.48260 + y * (-30.16036606))))))
        ans2 = 144725228442.0 + y * (2300535178.0 + y * (18583304.74
               + y * (99447.43394 + y * (376.9991397 + y * 1.0))))
        ans = ans1 / ans2
    else:
        z = np.float32(8.0 / float(ax))
        y = float(z * z)
        xx = float(ax) - 2.356194491
        ans1 = 1.0 + y * (0.183105e-2 + y * (-0.3516396496e-4
               + y * (0.2457520174e-5 + y * (-0.240337019e-6))))
        ans2 = 0.04687499995 + y * (-0.2002690873e-3
               + y * (0.8449199096e-5 + y * (-0.88228987e-6
               + y * 0.105787412e-6)))
        ans = math.sqrt(0.636619772 / float(ax)) * (
            math.cos(xx) * ans1 - float(z) * math.sin(xx) * ans2
        )
        if xf < 0.0:
            ans = -ans
    return float(np.float32(ans))