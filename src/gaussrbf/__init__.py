"""
gaussrbf - Gaussian Radial Basis Function Approximator

Fixed-centroid Gaussian RBF regression: a linear combination of Gaussian
bumps fitted by least squares, plus a scikit-learn compatible estimator.
"""

from .model import GaussianRBFModel
from .regressor import GaussianRBFRegressor
from .activations import compute_basis
from .solvers import solve_weights, solve_weights_lstsq, solve_weights_ridge
from .center_initialization import init_centers
from .auto_params import recommend_rbf_hyperparams, gamma_from_spacing, RBFHyperparams
from .data import make_sine_data, make_sine_product_data, cartesian_grid
from .exceptions import (
    RBFError,
    InvalidParameter,
    DimensionMismatch,
    ShapeMismatch,
    DegenerateBasis,
    FitFailed,
    InternalStateError,
)

__all__ = [
    'GaussianRBFModel',
    'GaussianRBFRegressor',
    'compute_basis',
    'solve_weights',
    'solve_weights_lstsq',
    'solve_weights_ridge',
    'init_centers',
    'recommend_rbf_hyperparams',
    'gamma_from_spacing',
    'RBFHyperparams',
    'make_sine_data',
    'make_sine_product_data',
    'cartesian_grid',
    'RBFError',
    'InvalidParameter',
    'DimensionMismatch',
    'ShapeMismatch',
    'DegenerateBasis',
    'FitFailed',
    'InternalStateError',
]

__version__ = '0.1.0'
