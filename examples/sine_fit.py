"""
Fit sin(x) and sin(x0) * sin(x1) with a GaussianRBFModel and plot the results.

Centroids sit on a regular grid over [-3.5, 3.5] (per axis), as do the
evaluation points.

Usage:
    python examples/sine_fit.py
"""

import matplotlib.pyplot as plt
import numpy as np

from gaussrbf import GaussianRBFModel
from gaussrbf.data import cartesian_grid, make_sine_data, make_sine_product_data
from gaussrbf.plotting import plot_fit_1d, plot_fit_2d

A, B = -3.5, 3.5


def fit_1d(n_centroids=8, gamma=0.5, seed=0):
    X, y = make_sine_data(A, B, noise=0.1, n_samples=50, random_state=seed)
    centroids = np.linspace(A, B, n_centroids)[:, None]
    model = GaussianRBFModel(centroids, gamma, add_constant=True).fit(X, y)

    X_eval = np.linspace(A, B, 200)[:, None]
    return plot_fit_1d(X, y, X_eval, model(X_eval))


def fit_2d(n_per_axis=6, gamma=0.3, axis_len=40, seed=0):
    X, y = make_sine_product_data(A, B, noise=0.1, n_samples=300, random_state=seed)
    c = np.linspace(A, B, n_per_axis)
    model = GaussianRBFModel(cartesian_grid(c, c), gamma, normalize=True).fit(X, y)

    ax = np.linspace(A, B, axis_len)
    X_eval = cartesian_grid(ax, ax)
    return plot_fit_2d(X, y, X_eval, model(X_eval), axis_len)


if __name__ == "__main__":
    fit_1d()
    fit_2d()
    plt.show()
