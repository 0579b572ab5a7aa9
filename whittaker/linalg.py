"""
GNU GENERAL PUBLIC LICENSE
Copyright (C) 2025 Will D. Rust, Marko Stojanovic, Daniel M. Simms

https://github.com/dspix/laspy/blob/main/LICENSE
"""

import logging
import warnings

import numpy as np
import scipy.linalg
import scipy.sparse as sparse
from scipy.sparse.linalg import splu

from whittaker.errors import NumericalFailure

logger = logging.getLogger(__name__)


def solve(coefmat, y):
    """Solve the symmetric system ``coefmat @ z = y``.

    Dense matrices are factorised with Cholesky, falling back to LU when
    the matrix turns out not to be positive definite in floating point.
    Sparse matrices go through a sparse LU (scipy has no sparse Cholesky).

    Arguments :
        coefmat: square system matrix, numpy array or scipy sparse matrix
        y: right-hand side vector
    Returns :
        z: solution vector (float64)
    Raises :
        NumericalFailure: singular system or non-finite solution
    """
    y = np.asarray(y, dtype=float)
    if sparse.issparse(coefmat):
        coefmat = sparse.csc_matrix(coefmat, dtype=float)
        if not np.all(np.isfinite(coefmat.data)):
            raise NumericalFailure("system matrix contains non-finite values")
        z = _solve_sparse(coefmat, y)
    else:
        coefmat = np.asarray(coefmat, dtype=float)
        if not np.all(np.isfinite(coefmat)):
            raise NumericalFailure("system matrix contains non-finite values")
        z = _solve_dense(coefmat, y)

    if not np.all(np.isfinite(z)):
        raise NumericalFailure("solution contains non-finite values")
    return z


def _solve_sparse(coefmat, y):
    logger.debug("sparse LU solve, n=%d, nnz=%d", coefmat.shape[0], coefmat.nnz)
    try:
        lu = splu(coefmat)
    except RuntimeError as err:
        # splu reports "Factor is exactly singular" as RuntimeError
        raise NumericalFailure(f"sparse LU factorisation failed: {err}") from err
    return lu.solve(y)


def _solve_dense(coefmat, y):
    try:
        c_and_lower = scipy.linalg.cho_factor(coefmat, lower=True)
    except np.linalg.LinAlgError:
        logger.debug("Cholesky failed, falling back to LU, n=%d", coefmat.shape[0])
    else:
        logger.debug("dense Cholesky solve, n=%d", coefmat.shape[0])
        return scipy.linalg.cho_solve(c_and_lower, y)

    with warnings.catch_warnings():
        # singularity is read off the pivots below
        warnings.simplefilter("ignore", scipy.linalg.LinAlgWarning)
        try:
            lu, piv = scipy.linalg.lu_factor(coefmat)
        except np.linalg.LinAlgError as err:
            raise NumericalFailure(f"LU factorisation failed: {err}") from err

    if np.any(np.diag(lu) == 0):
        raise NumericalFailure("system matrix is singular")
    return scipy.linalg.lu_solve((lu, piv), y)
