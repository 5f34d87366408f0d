"""Visualization of fitted Gaussian RBF approximations.

Requires matplotlib (``pip install gaussrbf[plot]``).
"""

from typing import Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import cm


def plot_fit_1d(
    X,
    y,
    X_eval,
    y_hat,
    ax: Optional[plt.Axes] = None,
    figsize: tuple = (8, 5),
):
    """
    Plot training samples and a fitted curve for one input variable.

    Parameters:
        X: Training inputs, shape (n, 1)
        y: Training targets, shape (n,)
        X_eval: Evaluation inputs, shape (m, 1), sorted for a clean line
        y_hat: Predictions at X_eval, shape (m,)
        ax: Existing axes to draw on
        figsize: Figure size when a new figure is created

    Returns:
        (fig, ax)
    """
    X = np.asarray(X).reshape(len(X), -1)
    X_eval = np.asarray(X_eval).reshape(len(X_eval), -1)
    if X.shape[1] != 1 or X_eval.shape[1] != 1:
        raise ValueError("plot_fit_1d needs single-column inputs")

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.plot(X[:, 0], y, 'o', color='#8C7EEE', label='samples')
    ax.plot(X_eval[:, 0], y_hat, lw=2, color='#34CEA4', label='RBF fit')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend()

    return fig, ax


def plot_fit_2d(
    X,
    y,
    X_eval,
    y_hat,
    axis_len: int,
    ax=None,
    figsize: tuple = (9, 7),
    stride: int = 5,
    contour_offset: Optional[float] = None,
):
    """
    Plot training samples and a fitted surface for two input variables.

    The evaluation points must come from ``cartesian_grid(a1, a2)`` with
    ``len(a1) == len(a2) == axis_len``, so that reshaping to
    (axis_len, axis_len) recovers the mesh.

    Parameters:
        X: Training inputs, shape (n, 2)
        y: Training targets, shape (n,)
        X_eval: Grid inputs, shape (axis_len**2, 2)
        y_hat: Predictions at X_eval, shape (axis_len**2,)
        axis_len: Number of grid values per axis
        ax: Existing 3-D axes to draw on
        figsize: Figure size when a new figure is created
        stride: Row/column stride of the wireframe
        contour_offset: z level of the contour projection (default: below min)

    Returns:
        (fig, ax)
    """
    X = np.asarray(X)
    X_eval = np.asarray(X_eval)
    y_hat = np.asarray(y_hat)
    if X.ndim != 2 or X.shape[1] != 2 or X_eval.ndim != 2 or X_eval.shape[1] != 2:
        raise ValueError("plot_fit_2d needs two-column inputs")
    if X_eval.shape[0] != axis_len ** 2 or y_hat.shape[0] != axis_len ** 2:
        raise ValueError(
            f"Expected {axis_len ** 2} grid points for axis_len={axis_len}, "
            f"got {X_eval.shape[0]} inputs and {y_hat.shape[0]} predictions"
        )

    xx = X_eval[:, 0].reshape(axis_len, axis_len)
    yy = X_eval[:, 1].reshape(axis_len, axis_len)
    zz = y_hat.reshape(axis_len, axis_len)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, subplot_kw=dict(projection='3d'))
    else:
        fig = ax.figure

    if contour_offset is None:
        contour_offset = min(np.min(zz), np.min(y)) - 1.0

    ax.scatter(X[:, 0], X[:, 1], y, c=y, cmap=cm.winter)
    ax.plot_wireframe(xx, yy, zz, rstride=stride, cstride=stride, color='#34CEA4')
    ax.contour(xx, yy, zz, zdir='z', offset=contour_offset, cmap=cm.winter)
    ax.set_zlim(bottom=contour_offset)
    ax.set_xlabel('x0')
    ax.set_ylabel('x1')
    ax.set_zlabel('y')

    return fig, ax
