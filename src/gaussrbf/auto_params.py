"""
Gaussian RBF Hyperparameter Recommendations

Heuristics for choosing gamma, the number of centroids and the ridge
penalty from data characteristics.

Key idea: a Gaussian bump should reach roughly to its nearest neighbouring
centroid. With mean nearest-neighbour spacing s this gives
gamma = 1 / (2 s^2), i.e. a standard deviation of s.
"""

import numpy as np
from typing import List, Union
from dataclasses import dataclass, field
from sklearn.neighbors import NearestNeighbors


@dataclass
class RBFHyperparams:
    """Recommended hyperparameters with explanations.

    Attributes
    ----------
    n_centroids : int
        Recommended number of centroids.
    gamma : float or 'auto'
        Recommended bandwidth ('auto' when no centroids are known yet).
    alpha : float
        Recommended ridge penalty.
    center_init : str
        Recommended centroid placement method.
    n_centroids_rationale : str
        Explanation for n_centroids choice.
    gamma_rationale : str
        Explanation for gamma choice.
    warnings : list
        List of warning messages for edge cases.
    """
    n_centroids: int
    gamma: Union[float, str]
    alpha: float
    center_init: str
    n_centroids_rationale: str = ""
    gamma_rationale: str = ""
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return as dict for model instantiation.

        Returns
        -------
        dict
            Parameters suitable for GaussianRBFRegressor(**params.to_dict())
        """
        return {
            'n_centroids': self.n_centroids,
            'gamma': self.gamma,
            'alpha': self.alpha,
            'center_init': self.center_init,
        }

    def __repr__(self):
        s = "RBFHyperparams(\n"
        s += f"  n_centroids={self.n_centroids}  # {self.n_centroids_rationale}\n"
        s += f"  gamma={self.gamma!r}  # {self.gamma_rationale}\n"
        s += f"  alpha={self.alpha}\n"
        s += f"  center_init='{self.center_init}'\n"
        if self.warnings:
            s += f"  warnings={self.warnings}\n"
        s += ")"
        return s


def gamma_from_spacing(centroids, X=None):
    """Bandwidth from the mean nearest-neighbour spacing of the centroids.

    Parameters
    ----------
    centroids : array-like of shape (n_centroids, n_features)
    X : array-like of shape (n_samples, n_features), optional
        Training data, used only for the fallback.

    Returns
    -------
    float
        1 / (2 s^2) for mean spacing s. With fewer than two distinct
        centroids, 1 / (n_features * X.var()) if X is given and not
        constant, else 1.0.
    """
    centroids = np.unique(np.asarray(centroids, dtype=np.float64), axis=0)
    n_features = centroids.shape[1]

    if len(centroids) >= 2:
        nn = NearestNeighbors(n_neighbors=2).fit(centroids)
        dist, _ = nn.kneighbors(centroids)
        spacing = dist[:, 1].mean()
        return float(1.0 / (2.0 * spacing ** 2))

    if X is not None:
        var = np.asarray(X, dtype=np.float64).var()
        if var > 0:
            return float(1.0 / (n_features * var))
    return 1.0


def recommend_rbf_hyperparams(
    X: np.ndarray = None,
    n_samples: int = None,
    n_features: int = None,
    centroids: np.ndarray = None,
    verbose: bool = False
) -> RBFHyperparams:
    """
    Recommend Gaussian RBF hyperparameters based on data characteristics.

    Parameters
    ----------
    X : array-like, optional
        Training data with shape (n_samples, n_features).
        If provided, n_samples and n_features are inferred.
    n_samples : int, optional
        Number of training samples (if X not provided).
    n_features : int, optional
        Number of features (if X not provided).
    centroids : array-like, optional
        Already-chosen centroids; gamma is derived from their spacing.
    verbose : bool, default=False
        Print detailed recommendations and warnings.

    Returns
    -------
    RBFHyperparams
        Recommended hyperparameters with rationales.

    Examples
    --------
    >>> from gaussrbf import recommend_rbf_hyperparams, GaussianRBFRegressor
    >>>
    >>> params = recommend_rbf_hyperparams(X_train)
    >>> model = GaussianRBFRegressor(**params.to_dict())
    """
    if X is not None:
        X = np.asarray(X)
        n_samples, n_features = X.shape

    if n_samples is None or n_features is None:
        raise ValueError("Provide either X or both n_samples and n_features")

    n, d = n_samples, n_features
    warnings = []

    # Keep at least ~5 samples per basis function
    n_centroids = int(np.clip(n // 5, 1, 100))
    center_init = 'kmeans'
    if n_centroids < 5:
        n_centroids_rationale = f"n={n}: capped at n/5 to keep the fit overdetermined"
        warnings.append(f"Very small sample size (n={n}): results may be unstable")
    elif n_centroids == 100:
        n_centroids_rationale = "capped at 100"
    else:
        n_centroids_rationale = f"n/5 = {n_centroids} samples-per-basis rule"

    if d > 3:
        warnings.append(
            f"d={d}: isotropic Gaussian bases cover high-dimensional spaces poorly; "
            "consider standardize=True"
        )

    if centroids is not None:
        gamma = round(gamma_from_spacing(centroids, X), 6)
        gamma_rationale = "1 / (2 s^2) for mean centroid spacing s"
    elif X is not None:
        gamma = 'auto'
        gamma_rationale = "resolved from centroid spacing at fit time"
    else:
        gamma = 'auto'
        gamma_rationale = "no data given; resolved at fit time"

    # Small ridge keeps near-singular designs (dense centroids, small gamma) stable
    alpha = 1e-6 if n >= 5 * n_centroids else 1e-3

    params = RBFHyperparams(
        n_centroids=n_centroids,
        gamma=gamma,
        alpha=alpha,
        center_init=center_init,
        n_centroids_rationale=n_centroids_rationale,
        gamma_rationale=gamma_rationale,
        warnings=warnings,
    )

    if verbose:
        print(params)
        if warnings:
            print("\nWarnings:")
            for w in warnings:
                print(f"  - {w}")

    return params
