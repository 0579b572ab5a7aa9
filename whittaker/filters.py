"""
GNU GENERAL PUBLIC LICENSE
Copyright (C) 2025 Will D. Rust, Marko Stojanovic, Daniel M. Simms

https://github.com/dspix/laspy/blob/main/LICENSE
"""

import logging
import math
import numbers

import numpy as np
import scipy.sparse as sparse

from whittaker.errors import InvalidInput, InvalidOrder
from whittaker.linalg import solve

logger = logging.getLogger(__name__)


def _check_order(N, d):
    if isinstance(N, bool) or not isinstance(N, numbers.Integral):
        raise InvalidOrder(f"sample count must be an integer, got {N!r}")
    if isinstance(d, bool) or not isinstance(d, numbers.Integral):
        raise InvalidOrder(f"order must be an integer, got {d!r}")
    if N < 1:
        raise InvalidOrder("cannot build a difference operator for an empty series")
    if d < 0:
        raise InvalidOrder(f"order must be non negative, got {d}")
    if d >= N:
        raise InvalidOrder(f"order {d} needs more than {N} samples")
    return int(N), int(d)


def difference_stencil(d):
    """Finite difference coefficients of order `d` (length d+1).

    Built by differencing a unit impulse `d` times, e.g.
    d=2 -> [1, -2, 1], d=3 -> [-1, 3, -3, 1].
    """
    if isinstance(d, bool) or not isinstance(d, numbers.Integral) or d < 0:
        raise InvalidOrder(f"order must be a non negative integer, got {d!r}")
    diagonals = np.zeros(2*d + 1)
    diagonals[d] = 1.
    for i in range(d):
        diff = diagonals[:-1] - diagonals[1:]
        diagonals = diff
    return diagonals


def speyediff(N, d, format='csc'):
    """Construct a d-th order sparse difference matrix based on
    an initial N x N identity matrix

    Final matrix (N-d) x N. Pass format='dense' for a numpy array,
    otherwise any scipy.sparse format name.
    Reproduced from https://github.com/mhvwerts/whittaker-eilers-smoother
    (CeCILL-B license)
    """
    N, d = _check_order(N, d)
    shape = (N-d, N)
    diagonals = difference_stencil(d)
    offsets = np.arange(d+1)
    if format == 'dense':
        return sparse.diags(diagonals, offsets, shape, format='csr').toarray()
    return sparse.diags(diagonals, offsets, shape, format=format)


def penalty_matrix(D, lmbd):
    """System matrix I + lmbd * D'D for difference operator `D`.

    Keeps the storage of `D`: dense in, dense out; sparse in, CSC out.
    """
    m = D.shape[1]
    if sparse.issparse(D):
        E = sparse.eye(m, format='csc')
        return (E + lmbd * D.conj().T.dot(D)).tocsc()
    D = np.asarray(D, dtype=float)
    return np.eye(m) + lmbd * D.T.dot(D)


def _check_values(y):
    try:
        y = np.array(y, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidInput(f"samples must be real numbers: {err}") from err
    if y.ndim != 1:
        raise InvalidInput(f"samples must be one dimensional, got shape {y.shape}")
    if not np.all(np.isfinite(y)):
        raise InvalidInput("samples must be finite (no NaN or inf)")
    return y


def _check_lambda(lmbd):
    if isinstance(lmbd, bool) or not isinstance(lmbd, numbers.Real):
        raise InvalidInput(f"lambda must be a real number, got {lmbd!r}")
    try:
        lmbd = float(lmbd)
    except (TypeError, OverflowError) as err:
        raise InvalidInput(f"lambda must be a finite real number: {err}") from err
    if not math.isfinite(lmbd) or lmbd < 0:
        raise InvalidInput(f"lambda must be finite and non negative, got {lmbd}")
    return lmbd


def smooth(y, lmbd, d=2, sparse=True):
    """
    Implementation of the Whittaker smoothing algorithm,
    based on the work by Eilers [1].

    [1] P. H. C. Eilers, "A perfect smoother", Anal. Chem. 2003, (75), 3631-3636

    The larger `lmbd`, the smoother the data.
    For smoothing of a complete data series, sampled at equal intervals

    With `sparse` (the default) the operator and system matrix are kept
    in sparse storage and solved by sparse LU, which scales to long
    series. `sparse=False` uses dense matrices and a Cholesky solve.

    Arguments :
        y: vector containing raw data
        lmbd: smoothing parameter (roughness penalty), >= 0
        d: order of the smoothing, 0 <= d < len(y)
        sparse: use sparse matrices
    Returns :
        z: smoothed data, same length as `y`
    Raises :
        InvalidOrder: empty `y` or `d` out of range
        InvalidInput: non-finite samples, negative or non-finite `lmbd`
        NumericalFailure: the system could not be solved
    """
    y = _check_values(y)
    _, d = _check_order(len(y), d)
    lmbd = _check_lambda(lmbd)

    m = len(y)
    if lmbd == 0:
        # I + 0 * D'D is the identity
        return y

    D = speyediff(m, d, format='csc' if sparse else 'dense')
    coefmat = penalty_matrix(D, lmbd)
    logger.debug("smoothing %d samples, lambda=%g, order=%d, sparse=%s",
                 m, lmbd, d, sparse)
    z = solve(coefmat, y)
    return z
