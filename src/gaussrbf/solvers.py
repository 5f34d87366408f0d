"""
Linear solves for RBF output weights.

Given a fixed design matrix Phi, find w minimising ||Phi w - y||^2
(optionally plus a ridge penalty).
"""

import numpy as np
from scipy import linalg

from .exceptions import FitFailed


def _check_finite(design, y):
    if not np.all(np.isfinite(design)):
        raise FitFailed("Design matrix contains NaN or infinite values")
    if not np.all(np.isfinite(y)):
        raise FitFailed("Targets contain NaN or infinite values")


def solve_weights_lstsq(design, y):
    """Solve for output weights by ordinary least squares.

    Uses the SVD-based LAPACK driver ``gelsd``, which returns the
    minimum-norm solution when the design matrix is rank-deficient
    (coincident centroids, extreme gamma).

    Parameters
    ----------
    design : ndarray of shape (n_samples, n_basis)
        Basis matrix.
    y : ndarray of shape (n_samples,)
        Target values.

    Returns
    -------
    weights : ndarray of shape (n_basis,)
        Output weights.
    rank : int
        Effective rank of ``design``.

    Raises
    ------
    FitFailed
        On non-finite input or if LAPACK does not converge.
    """
    _check_finite(design, y)
    try:
        weights, _, rank, _ = linalg.lstsq(
            design, y, lapack_driver='gelsd', check_finite=False
        )
    except (linalg.LinAlgError, ValueError) as exc:
        raise FitFailed(f"Least-squares solve failed: {exc}") from exc
    return np.asarray(weights, dtype=np.float64), int(rank)


def solve_weights_ridge(design, y, alpha=1.0, n_unpenalized=0):
    """Solve for output weights using Ridge regression.

    Uses a direct solve of (Phi^T Phi + alpha P) w = Phi^T y, where P is
    the identity with its first ``n_unpenalized`` diagonal entries zeroed
    (so a bias column is not shrunk).

    Parameters
    ----------
    design : ndarray of shape (n_samples, n_basis)
        Basis matrix.
    y : ndarray of shape (n_samples,)
        Target values.
    alpha : float
        Regularization strength.
    n_unpenalized : int
        Number of leading columns excluded from the penalty.

    Returns
    -------
    weights : ndarray of shape (n_basis,)
        Output weights.
    """
    _check_finite(design, y)
    n_basis = design.shape[1]
    penalty = np.ones(n_basis)
    penalty[:n_unpenalized] = 0.0
    gram = design.T @ design + alpha * np.diag(penalty)
    try:
        weights = linalg.solve(gram, design.T @ y, assume_a='pos', check_finite=False)
    except linalg.LinAlgError:
        # Fallback to least squares if singular
        weights, _ = solve_weights_lstsq(design, y)
    return np.asarray(weights, dtype=np.float64)


def solve_weights(design, y, alpha=0.0, n_unpenalized=0):
    """Dispatch to least squares (``alpha == 0``) or ridge.

    Returns
    -------
    weights : ndarray of shape (n_basis,)
    rank : int or None
        Design-matrix rank for least squares, None for ridge.
    """
    if alpha == 0:
        return solve_weights_lstsq(design, y)
    return solve_weights_ridge(design, y, alpha, n_unpenalized), None
