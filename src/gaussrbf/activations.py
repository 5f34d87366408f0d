"""
Gaussian RBF basis computation.

Every model and estimator in the package evaluates basis vectors through
``compute_basis`` so that fit and predict see identical features.
"""

import numpy as np
from scipy.spatial.distance import cdist

from .exceptions import DegenerateBasis


def gaussian_responses(X, centroids, gamma):
    """
    Compute raw isotropic Gaussian responses.

    phi[i, j] = exp(-gamma * ||x_i - c_j||^2)

    Parameters
    ----------
    X : ndarray of shape (n_samples, n_features)
    centroids : ndarray of shape (n_centroids, n_features)
    gamma : float
        Bandwidth; larger values give narrower bumps.

    Returns
    -------
    phi : ndarray of shape (n_samples, n_centroids)
    """
    if X.shape[0] == 0:
        return np.empty((0, centroids.shape[0]))
    sq_dist = cdist(X, centroids, metric='sqeuclidean')
    return np.exp(-gamma * sq_dist)


def normalize_responses(phi):
    """Rescale each row of ``phi`` to sum to one.

    Raises
    ------
    DegenerateBasis
        If any row sums to exactly zero.
    """
    totals = phi.sum(axis=1, keepdims=True)
    degenerate = np.flatnonzero(totals[:, 0] == 0.0)
    if degenerate.size:
        raise DegenerateBasis(degenerate)
    return phi / totals


def compute_basis(X, centroids, gamma, normalize=False, add_constant=False):
    """
    Compute the Gaussian RBF basis matrix.

    Parameters
    ----------
    X : ndarray of shape (n_samples, n_features)
        Input samples.
    centroids : ndarray of shape (n_centroids, n_features)
        Basis function centres.
    gamma : float
        Bandwidth of every basis function.
    normalize : bool, default=False
        Rescale each row to sum to one (partition of unity).
    add_constant : bool, default=False
        Prepend a column of ones for a bias term. Applied after
        normalization, so the constant is never rescaled.

    Returns
    -------
    phi : ndarray of shape (n_samples, n_centroids + add_constant)
        Basis matrix, one row per input row in input order.

    Raises
    ------
    DegenerateBasis
        If ``normalize`` is set and every response of some row is zero.
    """
    phi = gaussian_responses(X, centroids, gamma)

    if normalize and phi.shape[0]:
        phi = normalize_responses(phi)

    if add_constant:
        phi = np.hstack([np.ones((phi.shape[0], 1)), phi])

    return phi
