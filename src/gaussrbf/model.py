"""
GaussianRBFModel: fixed-basis linear regression over Gaussian RBF features.

Centroids and bandwidth are fixed at construction; ``fit`` solves a single
least-squares problem for the output weights and ``predict`` evaluates the
learned linear combination.
"""

import numbers

import numpy as np
from sklearn.utils import check_random_state

from .activations import compute_basis
from .exceptions import (
    DimensionMismatch, FitFailed, InternalStateError, InvalidParameter, ShapeMismatch
)
from .solvers import solve_weights


class GaussianRBFModel:
    """
    Linear combination of Gaussian radial basis functions.

    Parameters
    ----------
    centroids : array-like of shape (n_centroids, n_features)
        Centres of the basis functions. Copied and frozen.
    gamma : float
        Bandwidth, must be finite and > 0. The response of centroid c at x
        is exp(-gamma * ||x - c||^2).
    normalize : bool, default=False
        Rescale every basis vector to sum to one. Inputs far from all
        centroids raise ``DegenerateBasis`` instead of producing NaN.
    add_constant : bool, default=False
        Prepend a constant 1 to every basis vector (bias term).
    alpha : float, default=0.0
        Ridge penalty on the non-bias weights. 0 gives ordinary least
        squares.
    random_state : int, RandomState or None, default=None
        Seed for the placeholder weights used before the first fit.

    Attributes are read-only; configuration cannot change after
    construction, which keeps ``weights`` consistent with the basis length.

    Examples
    --------
    >>> import numpy as np
    >>> from gaussrbf import GaussianRBFModel
    >>> X = np.array([[-1.0], [0.0], [1.0]])
    >>> model = GaussianRBFModel(X, gamma=50.0).fit(X, [-1.0, 0.0, 1.0])
    >>> bool(np.allclose(model.predict(X), [-1.0, 0.0, 1.0]))
    True
    """

    def __init__(self, centroids, gamma, normalize=False, add_constant=False,
                 alpha=0.0, random_state=None):
        centroids = np.array(centroids, dtype=np.float64)
        if centroids.ndim != 2:
            raise InvalidParameter(
                f"centroids must be a 2-D array, got {centroids.ndim}-D"
            )
        if centroids.shape[0] == 0 or centroids.shape[1] == 0:
            raise InvalidParameter(f"centroids must be non-empty, got shape {centroids.shape}")
        if not np.all(np.isfinite(centroids)):
            raise InvalidParameter("centroids contain NaN or infinite values")

        if (not isinstance(gamma, numbers.Real) or isinstance(gamma, bool)
                or not np.isfinite(gamma) or gamma <= 0):
            raise InvalidParameter(f"gamma must be a finite number > 0, got {gamma!r}")
        if (not isinstance(alpha, numbers.Real) or isinstance(alpha, bool)
                or not np.isfinite(alpha) or alpha < 0):
            raise InvalidParameter(f"alpha must be a finite number >= 0, got {alpha!r}")

        centroids.setflags(write=False)
        self._centroids = centroids
        self._gamma = float(gamma)
        self._normalize = bool(normalize)
        self._add_constant = bool(add_constant)
        self._alpha = float(alpha)
        self._rank = None
        self._fitted = False

        rng = check_random_state(random_state)
        self._weights = rng.uniform(-1.0, 1.0, self.basis_length)

    # ------------------------------------------------------------------
    # Read-only configuration

    @property
    def centroids(self):
        """Copy of the centroid matrix, shape (basis_count, input_dimension)."""
        return self._centroids.copy()

    @property
    def input_dimension(self):
        return self._centroids.shape[1]

    @property
    def basis_count(self):
        """Number of Gaussian (non-bias) basis functions."""
        return self._centroids.shape[0]

    @property
    def basis_length(self):
        """Length of a basis vector, including the bias entry if any."""
        return self.basis_count + int(self._add_constant)

    @property
    def gamma(self):
        return self._gamma

    @property
    def normalize(self):
        return self._normalize

    @property
    def add_constant(self):
        return self._add_constant

    @property
    def alpha(self):
        return self._alpha

    @property
    def weights(self):
        """Copy of the current weight vector (placeholder until fit)."""
        return self._weights.copy()

    @property
    def is_fitted(self):
        return self._fitted

    @property
    def rank(self):
        """Design-matrix rank from the last least-squares fit, or None."""
        return self._rank

    # ------------------------------------------------------------------

    def _check_matrix(self, X):
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2:
            raise DimensionMismatch(
                f"Expected a 2-D array of shape (n_samples, {self.input_dimension}), "
                f"got {X.ndim}-D"
            )
        if X.shape[1] != self.input_dimension:
            raise DimensionMismatch(
                f"X has {X.shape[1]} columns, but centroids have {self.input_dimension}"
            )
        return X

    def basis(self, x):
        """
        Evaluate the basis vector of a single point.

        Parameters
        ----------
        x : array-like of shape (input_dimension,)

        Returns
        -------
        phi : ndarray of shape (basis_length,)
        """
        x = np.asarray(x, dtype=np.float64)
        if x.ndim != 1 or x.shape[0] != self.input_dimension:
            raise DimensionMismatch(
                f"x must have shape ({self.input_dimension},), got {x.shape}"
            )
        return self.design_matrix(x[np.newaxis, :])[0]

    def design_matrix(self, X):
        """Basis vectors of every row of X, shape (n_samples, basis_length)."""
        X = self._check_matrix(X)
        return compute_basis(
            X, self._centroids, self._gamma,
            normalize=self._normalize, add_constant=self._add_constant,
        )

    def fit(self, X, y):
        """
        Solve for the weights minimising ||Phi w - y||^2.

        Weights are only replaced once the solve has succeeded; on any
        error the previous weights are kept.

        Parameters
        ----------
        X : array-like of shape (n_samples, input_dimension)
        y : array-like of shape (n_samples,)

        Returns
        -------
        self : GaussianRBFModel
        """
        X = self._check_matrix(X)
        y = np.asarray(y, dtype=np.float64)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()
        if y.ndim != 1:
            raise ShapeMismatch(f"y must be one-dimensional, got shape {y.shape}")
        if X.shape[0] != y.shape[0]:
            raise ShapeMismatch(
                f"X has {X.shape[0]} rows but y has {y.shape[0]} values"
            )
        if X.shape[0] == 0:
            raise FitFailed("Cannot fit on an empty training set")
        if not np.all(np.isfinite(X)):
            raise FitFailed("X contains NaN or infinite values")

        design = self.design_matrix(X)
        weights, rank = solve_weights(
            design, y, alpha=self._alpha, n_unpenalized=int(self._add_constant)
        )

        self._weights = weights
        self._rank = rank
        self._fitted = True
        return self

    def predict(self, X):
        """
        Predict one scalar per row of X.

        Parameters
        ----------
        X : array-like of shape (n_samples, input_dimension)

        Returns
        -------
        y_pred : ndarray of shape (n_samples,)
            Predictions in input row order.
        """
        design = self.design_matrix(X)
        if self._weights.shape != (design.shape[1],):
            raise InternalStateError(
                f"Stored weights have shape {self._weights.shape}, "
                f"expected ({design.shape[1]},)"
            )
        return design @ self._weights

    __call__ = predict

    def __repr__(self):
        return (
            f"GaussianRBFModel(basis_count={self.basis_count}, "
            f"input_dimension={self.input_dimension}, gamma={self._gamma}, "
            f"normalize={self._normalize}, add_constant={self._add_constant}, "
            f"alpha={self._alpha}, fitted={self._fitted})"
        )
