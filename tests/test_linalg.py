"""Tests for the symmetric system solver."""

import numpy as np
import pytest
import scipy.sparse as sparse

from whittaker import NumericalFailure, WhittakerError, penalty_matrix, solve, speyediff


class TestSolve:
    """Tests for solve() on dense and sparse matrices."""

    def test_identity_dense(self):
        y = np.array([1.0, 5.0, 1.0, 5.0, 1.0])
        np.testing.assert_array_equal(solve(np.eye(5), y), y)

    def test_identity_sparse(self):
        y = np.array([1.0, 5.0, 1.0, 5.0, 1.0])
        np.testing.assert_allclose(solve(sparse.eye(5, format='csc'), y), y)

    def test_matches_numpy(self):
        np.random.seed(42)
        y = np.random.normal(0, 1, 40)
        C = penalty_matrix(speyediff(40, 2, format='dense'), 25.0)
        expected = np.linalg.solve(C, y)

        np.testing.assert_allclose(solve(C, y), expected, rtol=1e-10)
        np.testing.assert_allclose(
            solve(sparse.csc_matrix(C), y), expected, rtol=1e-10
        )

    def test_sparse_input_in_other_formats(self):
        """Non-CSC sparse matrices are converted before factorising."""
        y = np.array([1.0, 2.0, 3.0])
        C = penalty_matrix(speyediff(3, 1), 1.0).tocsr()
        np.testing.assert_allclose(solve(C, y), np.linalg.solve(C.toarray(), y))

    def test_indefinite_falls_back_to_lu(self):
        """A non-singular matrix that Cholesky rejects is solved by LU."""
        C = np.array([[0.0, 1.0], [1.0, 0.0]])
        np.testing.assert_allclose(solve(C, [2.0, 3.0]), [3.0, 2.0])

    def test_singular_dense(self):
        C = np.array([[1.0, 1.0], [1.0, 1.0]])
        with pytest.raises(NumericalFailure):
            solve(C, [1.0, 2.0])

    def test_singular_sparse(self):
        C = sparse.csc_matrix(np.array([[1.0, 1.0], [1.0, 1.0]]))
        with pytest.raises(NumericalFailure):
            solve(C, [1.0, 2.0])

    def test_non_finite_matrix(self):
        C = np.array([[np.inf, 0.0], [0.0, 1.0]])
        with pytest.raises(NumericalFailure):
            solve(C, [1.0, 2.0])
        with pytest.raises(NumericalFailure):
            solve(sparse.csc_matrix(C), [1.0, 2.0])

    def test_failure_is_whittaker_error(self):
        with pytest.raises(WhittakerError):
            solve(np.zeros((3, 3)), np.ones(3))
        with pytest.raises(ArithmeticError):
            solve(np.zeros((3, 3)), np.ones(3))
