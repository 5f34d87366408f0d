"""
Centroid placement strategies for Gaussian RBF models.

Centroids stay fixed once placed; none of these strategies look at the
targets.
"""

import numpy as np
from sklearn.cluster import KMeans
from sklearn.utils import check_random_state

from .data import cartesian_grid

MAX_GRID_CENTROIDS = 10000


def init_centers_kmeans(X, n_centroids, random_state=None):
    """Initialize centroids using K-means clustering.

    Parameters
    ----------
    X : ndarray of shape (n_samples, n_features)
        Training features.
    n_centroids : int
        Number of centroids.
    random_state : int or None
        Random seed.

    Returns
    -------
    centroids : ndarray of shape (min(n_centroids, n_samples), n_features)
        Cluster centres.
    """
    n_samples = len(X)
    n_centroids = min(n_centroids, n_samples)
    km = KMeans(n_clusters=n_centroids, random_state=random_state, n_init=10)
    km.fit(X)
    return km.cluster_centers_


def init_centers_random(X, n_centroids, random_state=None):
    """Initialize centroids by sampling training rows without replacement.

    Returns
    -------
    centroids : ndarray of shape (min(n_centroids, n_samples), n_features)
    """
    n_samples = len(X)
    n_centroids = min(n_centroids, n_samples)
    rng = check_random_state(random_state)
    indices = rng.choice(n_samples, size=n_centroids, replace=False)
    return X[indices].copy()


def init_centers_grid(X, n_per_axis):
    """Place centroids on a regular grid spanning the data's bounding box.

    Each feature gets ``n_per_axis`` evenly spaced values between its
    minimum and maximum; the centroids are all their combinations.

    Returns
    -------
    centroids : ndarray of shape (n_per_axis ** n_features, n_features)
    """
    n_features = X.shape[1]
    n_total = n_per_axis ** n_features
    if n_total > MAX_GRID_CENTROIDS:
        raise ValueError(
            f"Grid of {n_per_axis} points per axis in {n_features} dimensions "
            f"gives {n_total} centroids (max {MAX_GRID_CENTROIDS}); "
            "use method='kmeans' instead"
        )
    lo, hi = X.min(axis=0), X.max(axis=0)
    axes = [np.linspace(lo[d], hi[d], n_per_axis) for d in range(n_features)]
    return cartesian_grid(*axes)


def init_centers(X, n_centroids, method='kmeans', random_state=None):
    """Initialize RBF centroids using the specified method.

    Parameters
    ----------
    X : ndarray of shape (n_samples, n_features)
        Training features.
    n_centroids : int
        Number of centroids ('kmeans', 'random') or points per axis ('grid').
    method : str, default='kmeans'
        - 'kmeans': K-means cluster centres
        - 'random': Random training rows
        - 'grid': Regular grid over the bounding box
    random_state : int or None
        Random seed.

    Returns
    -------
    centroids : ndarray of shape (n_centroids_out, n_features)
    """
    if method == 'kmeans':
        return init_centers_kmeans(X, n_centroids, random_state)
    elif method == 'random':
        return init_centers_random(X, n_centroids, random_state)
    elif method == 'grid':
        return init_centers_grid(X, n_centroids)
    else:
        raise ValueError(f"Unknown center initialization method: {method}")
