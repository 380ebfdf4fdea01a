"""Floating-point machine parameters determined at run time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np


@dataclass(frozen=True)
class MachineParameters:
    """Characteristics of a floating-point type as found by probing arithmetic."""

    ibeta: int
    it: int
    irnd: int
    ngrd: int
    machep: int
    negep: int
    iexp: int
    minexp: int
    maxexp: int
    eps: float
    epsneg: float
    xmin: float
    xmax: float


def _probe(conv: Callable[[int], np.floating]) -> MachineParameters:
    one = conv(1)
    two = one + one
    zero = one - one

    a = one
    while True:
        a += a
        temp = a + one
        temp1 = temp - a
        if temp1 - one != zero:
            break

    b = one
    while True:
        b += b
        temp = a + b
        itemp = int(temp - a)
        if itemp != 0:
            break
    ibeta = itemp
    beta = conv(ibeta)

    it = 0
    b = one
    while True:
        it += 1
        b *= beta
        temp = b + one
        temp1 = temp - b
        if temp1 - one != zero:
            break

    irnd = 0
    betah = beta / two
    temp = a + betah
    if temp - a != zero:
        irnd = 1
    tempa = a + beta
    temp = tempa + betah
    if irnd == 0 and temp - tempa != zero:
        irnd = 2

    negep = it + 3
    betain = one / beta
    a = one
    for _ in range(negep):
        a *= betain
    b = a
    while (one - a) - one == zero:
        a *= beta
        negep -= 1
    negep = -negep
    epsneg = a

    machep = -it - 3
    a = b
    while (one + a) - one == zero:
        a *= beta
        machep += 1
    eps = a

    ngrd = 0
    temp = one + eps
    if irnd == 0 and temp * one - one != zero:
        ngrd = 1

    i = 0
    k = 1
    z = betain
    t = one + eps
    nxres = 0
    while True:
        y = z
        z = y * y
        a = z * one
        temp = z * t
        if a + a == zero or abs(z) >= y:
            break
        temp1 = temp * betain
        if temp1 * beta == z:
            break
        i += 1
        k += k

    if ibeta != 10:
        iexp = i + 1
        mx = k + k
    else:
        iexp = 2
        iz = ibeta
        while k >= iz:
            iz *= ibeta
            iexp += 1
        mx = iz + iz - 1

    while True:
        xmin = y
        y *= betain
        a = y * one
        temp = y * t
        if a + a != zero and abs(y) < xmin:
            k += 1
            temp1 = temp * betain
            if temp1 * beta == y and temp != y:
                nxres = 3
                xmin = y
                break
        else:
            break

    minexp = -k
    if mx <= k + k - 3 and ibeta != 10:
        mx += mx
        iexp += 1
    maxexp = mx + minexp
    irnd += nxres
    if irnd >= 2:
        maxexp -= 2
    i = maxexp + minexp
    if ibeta == 2 and not i:
        maxexp -= 1
    if i > 20:
        maxexp -= 1
    if a != y:
        maxexp -= 2

    xmax = one - epsneg
    if xmax * one != xmax:
        xmax = one - beta * epsneg
    xmax /= xmin * beta * beta * beta
    for _ in range(maxexp + minexp + 3):
        if ibeta == 2:
            xmax += xmax
        else:
            xmax *= beta

    return MachineParameters(
        ibeta=ibeta,
        it=it,
        irnd=irnd,
        ngrd=ngrd,
        machep=machep,
        negep=negep,
        iexp=iexp,
        minexp=minexp,
        maxexp=maxexp,
        eps=float(eps),
        epsneg=float(epsneg),
        xmin=float(xmin),
        xmax=float(xmax),
    )


def machar() -> MachineParameters:
    """Probe single-precision arithmetic."""
    with np.errstate(all="ignore"):
        return _probe(np.float32)


def machar_double() -> MachineParameters:
    """Probe double-precision arithmetic."""
    with np.errstate(all="ignore"):
        return _probe(np.float64)


def _halving_epsilon(conv: Callable[[int], np.floating]) -> float:
    one = conv(1)
    two = conv(2)
    eps = one
    while True:
        eps /= two
        if not eps + one > one:
            break
    return float(eps * two)


def get_feps() -> float:
    """Machine epsilon of single precision found by repeated halving."""
    return _halving_epsilon(np.float32)


def get_deps() -> float:
    """Machine epsilon of double precision found by repeated halving."""
    return _halving_epsilon(np.float64)