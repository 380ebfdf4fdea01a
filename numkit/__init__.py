"""Classic numerical methods: machine parameters, series errors, Bessel functions, root finding, linear systems, random deviates, Jacobi eigenvalues and affine fitting."""

__version__ = "0.1.0"