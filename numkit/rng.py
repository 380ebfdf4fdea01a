"""Portable uniform and Gaussian pseudo-random deviates.

The uniform generator is a minimal-standard multiplicative congruential
generator with a Bays-Durham shuffle; Gaussian deviates come from the polar
Box-Muller method.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable

import numpy as np

_F = np.float32

_IA = 16807
_IM = 2147483647
_AM = 1.0 / _IM
_IQ = 127773
_IR = 2836
_NTAB = 32
_NDIV = 1 + (_IM - 1) // _NTAB
_EPS = 1.2e-7
_RNMX = 5.0 - _EPS

DEFAULT_SIZES = (1000, 100, 10000, 100000)


class NRRandom:
    """Shuffled congruential generator producing single-precision deviates.

    A negative or zero seed starts a fresh sequence. A positive seed is
    treated like a seed of -1, exactly as the generator's own initialisation
    rule prescribes.
    """

    def __init__(self, seed: int = -1) -> None:
        self._idum = int(seed)
        self._iy = 0
        self._iv = [0] * _NTAB
        self._spare: float | None = None

    def _step(self) -> None:
        k = self._idum // _IQ
        self._idum = _IA * (self._idum - k * _IQ) - _IR * k
        if self._idum < 0:
            self._idum += _IM

    def uniform(self) -> float:
        """Next uniform deviate in (0, 1)."""
        if self._idum <= 0 or not self._iy:
            self._idum = 1 if -self._idum < 1 else -self._idum
            for j in range(_NTAB + 7, -1, -1):
                self._step()
                if j < _NTAB:
                    self._iv[j] = self._idum
            self._iy = self._iv[0]
        self._step()
        j = self._iy // _NDIV
        self._iy = self._iv[j]
        self._iv[j] = self._idum
        temp = _F(_AM * self._iy)
        if temp > _RNMX:
            return float(_F(_RNMX))
        return float(temp)

    def gauss(self) -> float:
        """Next normally distributed deviate with zero mean and unit variance."""
        if self._idum < 0:
            self._spare = None
        if self._spare is not None:
            spare, self._spare = self._spare, None
            return spare
        while True:
            v1 = _F(2.0 * self.uniform() - 1.0)
            v2 = _F(2.0 * self.uniform() - 1.0)
            rsq = _F(v1 * v1 + v2 * v2)
            if not (rsq >= 1.0 or rsq == 0.0):
                break
        fac = _F(math.sqrt(-2.0 * math.log(float(rsq)) / float(rsq)))
        self._spare = float(_F(v1 * fac))
        return float(_F(v2 * fac))


def write_samples(
    directory: str | Path, seed: int = -1, sizes: Iterable[int] = DEFAULT_SIZES
) -> list[Path]:
    """Write uniform and Gaussian sample files for each size in ``sizes``.

    For each size ``n`` the files ``uniform<n>.txt`` (values in [-3, 2)) and
    ``gauss<n>.txt`` (mean 0.5, standard deviation 1.5) are written, one
    value per line. All files draw from one generator in turn. Returns the
    paths written.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    generator = NRRandom(seed)
    written: list[Path] = []
    hundred = _F(100)
    for size in sizes:
        if size < 0:
            raise ValueError("sample sizes must not be negative")
        uniform_path = directory / f"uniform{size}.txt"
        gauss_path = directory / f"gauss{size}.txt"
        with uniform_path.open("w") as uniform_file, gauss_path.open("w") as gauss_file:
            for _ in range(size):
                scaled = float(_F(generator.uniform()) * hundred)
                uniform_file.write(f"{math.fmod(scaled, 5) - 3:.6f}\n")
                gauss_file.write(f"{generator.gauss() * 1.5 + 0.5:.6f}\n")
        written.extend((uniform_path, gauss_path))
    return written


__all__ = ["DEFAULT_SIZES", "NRRandom", "write_samples"]