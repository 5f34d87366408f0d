"""
Synthetic data and grids for exercising RBF approximators.

All samplers take an explicit ``random_state`` so results are reproducible;
nothing here touches numpy's global random state.
"""

import numpy as np
from sklearn.utils import check_random_state


def uniform(a, b, size, random_state=None):
    """Samples from U(a, b) with the given shape."""
    rng = check_random_state(random_state)
    return a + (b - a) * rng.random_sample(size)


def make_sine_data(a=-3.5, b=3.5, noise=0.1, n_samples=50, random_state=None):
    """Noisy samples of y = sin(x) + N(0, noise).

    Inputs are drawn uniformly from [a, b] and sorted ascending, which
    makes the result directly plottable as a curve.

    Parameters
    ----------
    a, b : float
        Interval bounds.
    noise : float
        Standard deviation of the additive Gaussian noise.
    n_samples : int
        Number of samples.
    random_state : int, RandomState or None
        Seed.

    Returns
    -------
    X : ndarray of shape (n_samples, 1)
    y : ndarray of shape (n_samples,)
    """
    rng = check_random_state(random_state)
    X = np.sort(uniform(a, b, (n_samples, 1), rng), axis=0)
    y = np.sin(X[:, 0]) + rng.normal(0.0, noise, n_samples)
    return X, y


def make_sine_product_data(a=-3.5, b=3.5, noise=0.1, n_samples=200, random_state=None):
    """Noisy samples of y = sin(x0) * sin(x1) + N(0, noise) on [a, b]^2.

    Returns
    -------
    X : ndarray of shape (n_samples, 2)
    y : ndarray of shape (n_samples,)
    """
    rng = check_random_state(random_state)
    X = uniform(a, b, (n_samples, 2), rng)
    y = np.sin(X[:, 0]) * np.sin(X[:, 1]) + rng.normal(0.0, noise, n_samples)
    return X, y


def cartesian_grid(*axes):
    """
    All combinations of the given 1-D axes, one combination per row.

    The first axis varies slowest, so for two axes of lengths n1 and n2
    row ``i * n2 + j`` is ``(axes[0][i], axes[1][j])``. Reshaping a column
    (or a prediction vector) to ``(n1, n2)`` recovers the mesh.

    Parameters
    ----------
    *axes : array-like of shape (n_k,)

    Returns
    -------
    grid : ndarray of shape (prod(n_k), len(axes))

    Examples
    --------
    >>> cartesian_grid([0, 1], [10, 20, 30]).tolist()
    [[0.0, 10.0], [0.0, 20.0], [0.0, 30.0], [1.0, 10.0], [1.0, 20.0], [1.0, 30.0]]
    """
    if not axes:
        raise ValueError("cartesian_grid needs at least one axis")
    axes = [np.asarray(ax, dtype=np.float64).ravel() for ax in axes]
    mesh = np.meshgrid(*axes, indexing='ij')
    return np.column_stack([m.ravel() for m in mesh])
