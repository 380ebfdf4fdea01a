# numkit

Classic numerical methods, computed in single precision (`numpy.float32`)
wherever the algorithms call for it, with results returned as Python floats
or numpy arrays.

## Installation

```
pip install .
```

The only dependency is `numpy`.

## What is in the package

- `numkit.machine`: `machar()` and `machar_double()` probe single- and double-precision arithmetic and return a frozen `MachineParameters` dataclass. It holds the radix `ibeta`, the digit count `it`, the rounding mode `irnd`, the guard digits `ngrd`, the exponents `machep`, `negep`, `iexp`, `minexp` and `maxexp`, and the values `eps`, `epsneg`, `xmin` and `xmax`. `get_feps()` and `get_deps()` find the machine epsilon by repeated halving.
- `numkit.approximation`: `relative_error` and `percent_relative_error`. `exp_neg_series` and `exp_neg_inverse_series` are two ways of summing exp(-x), and `cosine_series` sums cos(x). Each of the three returns a list of `SeriesTerm` records (`index`, `value`, `true_error`, `approx_error`). `chop(value, digits)` truncates a value to a number of significant decimal digits. `chopped_ratio(x, digits)` evaluates 6x / (1 - 3x²)² with every step chopped. `velocity_with_error(g, t, c, m)` returns the falling-body velocity together with its sensitivities to drag and to mass.
- `numkit.bessel`: `bessj0(x)` and `bessj1(x)`, which use rational approximations below |x| = 8 and asymptotic ones above.
- `numkit.roots`: `zbrak(func, x1, x2, n, max_roots)` returns a list of `(lo, hi)` sign-change brackets. Six solvers each return a `RootResult(root, iterations)` and raise `RootFindingError` on failure:
  - `rtbis`: bisection
  - `rtflsp`: false position
  - `rtsec`: secant
  - `rtnewt`: Newton–Raphson
  - `rtsafe`: Newton safeguarded by bisection
  - `muller`: Muller's method

  `rtnewt` and `rtsafe` take a function that returns `(f, df)`. `muller` returns its current estimate once `max_iter` is reached, instead of raising.
- `numkit.problems`: the test functions (`circuit`, `charge`, `heat_capacity`, `exp_sine`, `double_root`, `shifted_cosine`) and their `*_fdf` forms. A `Problem` dataclass holds a function, its interval and its scan steps. `run_methods(problem, xacc, ...)` applies every solver to every bracket. `bessel_report()`, `single_root_report()` and `engineering_report()` return text reports.
- `numkit.linalg`:
  - `gaussj(a, b)` returns `(inverse, solution)` by Gauss–Jordan elimination with full pivoting.
  - `ludcmp(a)` returns an `LUDecomposition` with `solve`, `determinant` and `inverse` methods.
  - `lubksb` performs substitution with the LU factors, and `mprove` makes one step of iterative improvement with a double-precision residual.
  - `svdcmp(a)` returns `(u, w, v)`, and `svbksb` solves a system from those factors.
  - `pythag` is also provided.
  - Failures raise `SingularMatrixError` or `ConvergenceError`.
- `numkit.linsys`: `read_system(stream)` reads `m n`, then the matrix, then the right-hand side. `system_report(a, b, index)` solves the system by Gauss–Jordan, LU (before and after improvement) and SVD, and reports the inverse and the determinant.
- `numkit.rng`: `NRRandom(seed)` is a shuffled congruential generator. `uniform()` returns deviates in (0, 1) and `gauss()` returns standard normal deviates by the polar method. `write_samples(directory, seed, sizes)` writes `uniform<n>.txt` and `gauss<n>.txt` files.
- `numkit.eigen`:
  - `jacobi(a)` returns `(d, v, nrot)` for a symmetric matrix.
  - `eigsrt(d, v)` sorts the eigenvalues into descending order and moves the eigenvector columns with them.
  - `random_symmetric(n, generator)` builds a symmetric matrix of Gaussian deviates.
- `numkit.fitting`: `read_fit_data(stream, count)` reads rows of `x y xp yp`. `fit_affine(x, y, xp, yp)` returns `[a1, ..., a6]` for `xp = a1 x + a2 y + a3` and `yp = a4 x + a5 y + a6`.

## Examples

```python
from numkit.bessel import bessj0
from numkit.roots import zbrak, rtbis

for lo, hi in zbrak(bessj0, 1.0, 10.0, 100, 100):
    result = rtbis(bessj0, lo, hi, 1e-6, 40)
    print(f"{result.root:.6f} after {result.iterations} iterations")
```

```python
from numkit.linalg import ludcmp

lu = ludcmp([[4.0, 3.0], [6.0, 3.0]])
print(lu.solve([10.0, 12.0]))
print(lu.determinant())
print(lu.inverse())
```

```python
from numkit.rng import NRRandom
from numkit.eigen import random_symmetric, jacobi, eigsrt

matrix = random_symmetric(5, NRRandom(-1))
d, v, nrot = jacobi(matrix)
d, v = eigsrt(d, v)
print(d)
```

## Command line

The `numkit` command runs one experiment and prints its report:

```
numkit machine                       # machine epsilon, single and double precision
numkit errors                        # series approximations and error estimates
numkit roots                         # roots of J0 and four single-root problems
numkit engineering                   # three engineering problems at 1e-4 and 1e-6
numkit eigen --size 11 --seed -1     # eigen-decomposition of a random symmetric matrix
```

If a numerical method fails, the command prints the error to standard error and exits with status 1. If no command is given, it prints the help and exits with status 2.

## What it does not do

The command line has no subcommands for linear systems, affine fitting or writing random sample files. To use those, call `read_system` and `system_report`, `read_fit_data` and `fit_affine`, or `write_samples` from Python with your own data. No data files ship with the package.

## Tests

```
pip install .[test]
pytest
```