"""
GaussianRBFRegressor: scikit-learn estimator around GaussianRBFModel.

Places centroids from the training data (or takes them as given), resolves
the bandwidth, and fits the output weights by a single least-squares solve.

Recommended defaults
--------------------
- center_init='kmeans', n_centroids ~ n_samples / 5
- gamma='auto' (1 / (2 s^2) for mean centroid spacing s)
- add_constant=True
"""

import numpy as np
import pandas as pd
from sklearn.utils.validation import check_is_fitted, validate_data

from .base import _GaussianRBFBase


class GaussianRBFRegressor(_GaussianRBFBase):
    """
    Gaussian RBF Network Regressor.

    A linear model over fixed isotropic Gaussian basis functions.

    Parameters
    ----------
    centroids : array-like of shape (n_centroids, n_features) or None, default=None
        Fixed centroids in the original feature space. If None, they are
        placed from the training data using ``center_init``.

    n_centroids : int, default=10
        Number of centroids to place when ``centroids`` is None.
        For center_init='grid' this is the number of points per feature.

    center_init : str, default='kmeans'
        How to place centroids:
        - 'kmeans': K-means cluster centres
        - 'random': Random training rows
        - 'grid': Regular grid over the data's bounding box

    gamma : float or 'auto', default='auto'
        Bandwidth. 'auto' uses the mean nearest-neighbour spacing of the
        centroids.

    normalize : bool, default=False
        Normalize basis vectors to sum to one.

    add_constant : bool, default=True
        Add a bias basis function.

    alpha : float, default=0.0
        Ridge penalty on the basis weights; 0 gives plain least squares.

    standardize : bool, default=False
        Standardize features before computing distances.

    random_state : int or None, default=None
        Random seed for centroid placement and placeholder weights.

    verbose : int, default=0
        Verbosity level.

    Attributes
    ----------
    model_ : GaussianRBFModel
        The fitted core model.
    centroids_ : ndarray of shape (n_centroids, n_features)
        Centroids, in standardized space if standardize=True.
    gamma_ : float
        Resolved bandwidth.
    weights_ : ndarray of shape (n_centroids + add_constant,)
        Output layer weights (bias first if add_constant).
    scaler_ : StandardScaler or None
        Feature scaler (if standardize=True).

    Examples
    --------
    >>> from gaussrbf import GaussianRBFRegressor
    >>> from gaussrbf.data import make_sine_data
    >>>
    >>> X, y = make_sine_data(n_samples=200, random_state=42)
    >>> model = GaussianRBFRegressor(n_centroids=12, random_state=42)
    >>> model.fit(X, y)
    >>> print(f"R2: {model.score(X, y):.4f}")
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
        super().__init__(
            centroids=centroids,
            n_centroids=n_centroids,
            center_init=center_init,
            gamma=gamma,
            normalize=normalize,
            add_constant=add_constant,
            alpha=alpha,
            standardize=standardize,
            random_state=random_state,
            verbose=verbose,
        )

    def fit(self, X, y, sample_weight=None):
        """
        Fit the Gaussian RBF model.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Training data.
        y : array-like of shape (n_samples,)
            Target values.
        sample_weight : array-like of shape (n_samples,), default=None
            Not yet supported. Raises NotImplementedError if provided.

        Returns
        -------
        self : GaussianRBFRegressor
            Fitted estimator.
        """
        if sample_weight is not None:
            raise NotImplementedError("sample_weight is not yet supported")

        # sklearn input validation (sets n_features_in_, feature_names_in_)
        X, y = validate_data(
            self, X, y,
            accept_sparse=False,
            dtype=np.float64,
            multi_output=False,
            y_numeric=True,
        )
        y = y.ravel()

        X_scaled = self._standardize_input(X, fit=True)

        model = self._fit_rbf_model(X_scaled, y)

        self.model_ = model
        self.centroids_ = model.centroids
        self.gamma_ = model.gamma
        self.weights_ = model.weights
        self.n_outputs_ = 1

        if self.verbose >= 1:
            y_pred = model.predict(X_scaled)
            ss_tot = np.sum((y - y.mean())**2)
            if ss_tot > 0:
                r2 = 1 - np.sum((y - y_pred)**2) / ss_tot
                print(f"Training R2: {r2:.4f}")

        return self

    def predict(self, X):
        """
        Predict target values.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Samples to predict.

        Returns
        -------
        y_pred : ndarray of shape (n_samples,)
            Predicted values.
        """
        check_is_fitted(self)
        X = validate_data(self, X, accept_sparse=False, dtype=np.float64, reset=False)
        X_scaled = self._standardize_input(X, fit=False)
        return self.model_.predict(X_scaled)

    def __sklearn_tags__(self):
        tags = super().__sklearn_tags__()
        # One isotropic bandwidth underfits sparse high-dimensional targets
        tags.regressor_tags.poor_score = True
        return tags

    @property
    def n_params_(self):
        """Total number of fitted parameters: K*d (centroids) + len(weights_)."""
        K, d = self.centroids_.shape
        return K * d + len(self.weights_)

    def weight_summary(self):
        """Centroid coordinates and output weight of every basis function.

        Returns
        -------
        df : DataFrame
            One row per basis function (bias first, indexed 'const', with
            NaN coordinates). Columns: one per feature, then 'weight'.
        """
        check_is_fitted(self)
        columns = (self.feature_names_in_.tolist()
                   if hasattr(self, 'feature_names_in_')
                   else list(range(self.centroids_.shape[1])))
        df = pd.DataFrame(self.centroids_, columns=columns)
        index = list(range(len(df)))
        if self.model_.add_constant:
            bias = pd.DataFrame([[np.nan] * len(columns)], columns=columns)
            df = pd.concat([bias, df], ignore_index=True)
            index = ['const'] + index
        df.index = index
        df['weight'] = self.weights_
        return df
