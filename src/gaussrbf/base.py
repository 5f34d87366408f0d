"""
Base class for Gaussian RBF estimators.

Contains the shared scikit-learn plumbing: standardization, centroid
placement and gamma resolution. The numerical work is delegated to
GaussianRBFModel.
"""

import numbers

import numpy as np
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.preprocessing import StandardScaler
from sklearn.utils import check_array

from .auto_params import gamma_from_spacing
from .center_initialization import init_centers
from .exceptions import DimensionMismatch, InvalidParameter
from .model import GaussianRBFModel


class _GaussianRBFBase(RegressorMixin, BaseEstimator):
    """
    Base class for Gaussian RBF regressors.

    Provides shared functionality:
    - Standardization
    - Centroid resolution (user-supplied or placed from data)
    - Gamma resolution ('auto' or fixed)
    - Building and fitting the underlying GaussianRBFModel
    """

    def __init__(
        self,
        centroids=None,
        n_centroids=10,
        center_init='kmeans',
        gamma='auto',
        normalize=False,
        add_constant=True,
        alpha=0.0,
        standardize=False,
        random_state=None,
        verbose=0,
    ):
        self.centroids = centroids
        self.n_centroids = n_centroids
        self.center_init = center_init
        self.gamma = gamma
        self.normalize = normalize
        self.add_constant = add_constant
        self.alpha = alpha
        self.standardize = standardize
        self.random_state = random_state
        self.verbose = verbose

    def _standardize_input(self, X, fit=False):
        """
        Standardize features if enabled.

        Parameters
        ----------
        X : ndarray
            Input features.
        fit : bool
            If True, fit the scaler (call during fit()).
            If False, transform only (call during predict()).

        Returns
        -------
        X_scaled : ndarray
            Standardized features (or original if standardize=False).
        """
        if not self.standardize:
            self.scaler_ = None
            return X

        if fit:
            self.scaler_ = StandardScaler()
            return self.scaler_.fit_transform(X)
        else:
            return self.scaler_.transform(X)

    def _resolve_centroids(self, X):
        """
        Centroids in the (possibly standardized) feature space of X.

        User-supplied centroids are given in the original feature space and
        pass through the same scaler as the data.
        """
        if self.centroids is None:
            return init_centers(
                X, self.n_centroids,
                method=self.center_init,
                random_state=self.random_state,
            )

        centroids = check_array(self.centroids, dtype=np.float64)
        if centroids.shape[1] != X.shape[1]:
            raise DimensionMismatch(
                f"centroids have {centroids.shape[1]} columns, "
                f"but X has {X.shape[1]} features"
            )
        if self.scaler_ is not None:
            centroids = self.scaler_.transform(centroids)
        return centroids

    def _resolve_gamma(self, X, centroids):
        """Resolve 'auto' gamma to a float."""
        if isinstance(self.gamma, str):
            if self.gamma != 'auto':
                raise InvalidParameter(f"Unknown gamma: {self.gamma!r}")
            return gamma_from_spacing(centroids, X)
        if not isinstance(self.gamma, numbers.Real):
            raise InvalidParameter(f"gamma must be a float or 'auto', got {self.gamma!r}")
        return float(self.gamma)

    def _fit_rbf_model(self, X, y):
        """
        Build and fit a GaussianRBFModel on standardized X.

        Returns
        -------
        model : GaussianRBFModel
            Fitted model.
        """
        centroids = self._resolve_centroids(X)
        gamma = self._resolve_gamma(X, centroids)

        if self.verbose >= 1:
            print(f"Gaussian RBF: {len(centroids)} centroids, gamma={gamma:.6g}")

        model = GaussianRBFModel(
            centroids, gamma,
            normalize=self.normalize,
            add_constant=self.add_constant,
            alpha=self.alpha,
            random_state=self.random_state,
        )
        model.fit(X, y)

        if self.verbose >= 2 and model.rank is not None:
            print(f"Design matrix rank: {model.rank} / {model.basis_length}")

        return model
