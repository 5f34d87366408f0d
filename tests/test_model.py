"""Tests for GaussianRBFModel."""

import numpy as np
import pytest

from gaussrbf import (
    GaussianRBFModel, DegenerateBasis, DimensionMismatch, FitFailed,
    InternalStateError, InvalidParameter, ShapeMismatch,
)

E1 = np.exp(-1.0)
LINE_CENTROIDS = [[-1.0], [0.0], [1.0]]


# --- basis ---

def test_basis_raw_values():
    model = GaussianRBFModel(LINE_CENTROIDS, gamma=1.0)
    np.testing.assert_allclose(model.basis([0.0]), [E1, 1.0, E1])


def test_basis_normalized_values():
    model = GaussianRBFModel(LINE_CENTROIDS, gamma=1.0, normalize=True)
    total = 1.0 + 2 * E1
    np.testing.assert_allclose(model.basis([0.0]), [E1 / total, 1.0 / total, E1 / total])


def test_basis_normalized_with_constant():
    model = GaussianRBFModel(LINE_CENTROIDS, gamma=1.0, normalize=True, add_constant=True)
    phi = model.basis([0.0])
    total = 1.0 + 2 * E1
    assert phi[0] == 1.0
    np.testing.assert_allclose(phi[1:], [E1 / total, 1.0 / total, E1 / total])


@pytest.mark.parametrize("normalize", [False, True])
@pytest.mark.parametrize("add_constant", [False, True])
def test_basis_length(normalize, add_constant):
    rng = np.random.RandomState(0)
    centroids = rng.randn(7, 3)
    model = GaussianRBFModel(centroids, gamma=0.5, normalize=normalize, add_constant=add_constant)
    for x in rng.randn(5, 3):
        phi = model.basis(x)
        assert phi.shape == (7 + add_constant,)
        assert model.basis_length == 7 + add_constant
        if add_constant:
            assert phi[0] == 1.0
        if normalize:
            assert phi[int(add_constant):].sum() == pytest.approx(1.0)


def test_basis_dimension_mismatch():
    model = GaussianRBFModel(np.zeros((4, 2)), gamma=1.0)
    with pytest.raises(DimensionMismatch):
        model.basis([0.0, 0.0, 0.0])
    with pytest.raises(DimensionMismatch):
        model.basis([[0.0, 0.0]])


def test_basis_degenerate_normalization():
    """An input far from every centroid underflows every response."""
    model = GaussianRBFModel([[0.0]], gamma=1.0, normalize=True)
    with pytest.raises(DegenerateBasis) as excinfo:
        model.basis([100.0])
    assert excinfo.value.rows == [0]


def test_basis_far_input_without_normalize_is_zero():
    model = GaussianRBFModel([[0.0]], gamma=1.0)
    np.testing.assert_array_equal(model.basis([100.0]), [0.0])


def test_design_matrix_rows_match_basis():
    rng = np.random.RandomState(1)
    model = GaussianRBFModel(rng.randn(5, 2), gamma=0.7, normalize=True, add_constant=True)
    X = rng.randn(8, 2)
    design = model.design_matrix(X)
    assert design.shape == (8, 6)
    for i, x in enumerate(X):
        np.testing.assert_allclose(design[i], model.basis(x))


# --- construction ---

@pytest.mark.parametrize("gamma", [0.0, -1.0, np.nan, np.inf, "1.0"])
def test_invalid_gamma(gamma):
    with pytest.raises(InvalidParameter):
        GaussianRBFModel(LINE_CENTROIDS, gamma=gamma)


@pytest.mark.parametrize("centroids", [
    np.empty((0, 2)),
    np.empty((3, 0)),
    [1.0, 2.0, 3.0],
    [[0.0], [np.nan]],
])
def test_invalid_centroids(centroids):
    with pytest.raises(InvalidParameter):
        GaussianRBFModel(centroids, gamma=1.0)


@pytest.mark.parametrize("alpha", [-1.0, np.nan, True, "0.1"])
def test_invalid_alpha(alpha):
    with pytest.raises(InvalidParameter):
        GaussianRBFModel(LINE_CENTROIDS, gamma=1.0, alpha=alpha)


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        GaussianRBFModel(LINE_CENTROIDS, gamma=0.0)


def test_configuration_is_read_only():
    centroids = np.array(LINE_CENTROIDS)
    model = GaussianRBFModel(centroids, gamma=1.0)
    centroids[0, 0] = 99.0
    assert model.centroids[0, 0] == -1.0
    model.centroids[0, 0] = 42.0
    assert model.centroids[0, 0] == -1.0
    with pytest.raises(AttributeError):
        model.add_constant = True
    with pytest.raises(AttributeError):
        model.gamma = 2.0


def test_dimensions():
    model = GaussianRBFModel(np.zeros((4, 3)), gamma=1.0, add_constant=True)
    assert model.input_dimension == 3
    assert model.basis_count == 4
    assert model.basis_length == 5
    assert model.weights.shape == (5,)


def test_placeholder_weights_seeded():
    a = GaussianRBFModel(LINE_CENTROIDS, gamma=1.0, random_state=3)
    b = GaussianRBFModel(LINE_CENTROIDS, gamma=1.0, random_state=3)
    np.testing.assert_array_equal(a.weights, b.weights)
    assert np.all(np.abs(a.weights) <= 1.0)
    assert not a.is_fitted
    assert a.rank is None


def test_predict_before_fit_uses_placeholder_weights():
    model = GaussianRBFModel(LINE_CENTROIDS, gamma=1.0, random_state=0)
    X = np.array([[0.5], [-0.2]])
    np.testing.assert_allclose(model.predict(X), model.design_matrix(X) @ model.weights)


# --- fit / predict ---

def test_fit_three_points_large_gamma():
    X = np.array(LINE_CENTROIDS)
    y = np.array([-1.0, 0.0, 1.0])
    model = GaussianRBFModel(X, gamma=50.0)
    model.fit(X, y)
    assert model.is_fitted
    np.testing.assert_allclose(model.predict(X), y, atol=1e-2)


def test_interpolation_with_centroids_at_samples():
    X = np.linspace(-2, 2, 15)[:, None]
    y = np.sin(X[:, 0])
    model = GaussianRBFModel(X, gamma=2.0)
    model.fit(X, y)
    mse = np.mean((model.predict(X) - y) ** 2)
    assert mse < 1e-3


def test_fit_returns_self():
    X = np.array(LINE_CENTROIDS)
    model = GaussianRBFModel(X, gamma=1.0)
    assert model.fit(X, [0.0, 1.0, 0.0]) is model


def test_fit_idempotent():
    rng = np.random.RandomState(0)
    X = rng.uniform(-3, 3, (40, 2))
    y = np.sin(X[:, 0]) * np.cos(X[:, 1])
    model = GaussianRBFModel(rng.uniform(-3, 3, (10, 2)), gamma=0.5, add_constant=True)
    w1 = model.fit(X, y).weights
    w2 = model.fit(X, y).weights
    np.testing.assert_allclose(w1, w2, rtol=1e-10, atol=1e-12)


def test_refit_replaces_weights():
    X = np.linspace(-1, 1, 10)[:, None]
    model = GaussianRBFModel(X[::3], gamma=1.0)
    w1 = model.fit(X, X[:, 0]).weights
    w2 = model.fit(X, -X[:, 0]).weights
    np.testing.assert_allclose(w2, -w1, atol=1e-8)


def test_predict_row_order_preserved():
    rng = np.random.RandomState(2)
    X = rng.randn(30, 2)
    y = X[:, 0] ** 2 - X[:, 1]
    model = GaussianRBFModel(rng.randn(6, 2), gamma=0.8, add_constant=True).fit(X, y)

    X_new = rng.randn(12, 2)
    perm = rng.permutation(12)
    np.testing.assert_allclose(model.predict(X_new[perm]), model.predict(X_new)[perm])
    for i in range(len(X_new)):
        assert model.predict(X_new[i:i + 1])[0] == pytest.approx(model.predict(X_new)[i])


def test_call_matches_predict():
    X = np.linspace(-1, 1, 8)[:, None]
    model = GaussianRBFModel(X[::2], gamma=3.0).fit(X, X[:, 0] ** 2)
    np.testing.assert_array_equal(model(X), model.predict(X))


def test_predict_empty():
    model = GaussianRBFModel(np.zeros((3, 2)), gamma=1.0, add_constant=True)
    out = model.predict(np.empty((0, 2)))
    assert out.shape == (0,)


def test_predict_dimension_mismatch():
    model = GaussianRBFModel(np.zeros((3, 2)), gamma=1.0)
    with pytest.raises(DimensionMismatch):
        model.predict(np.zeros((4, 3)))
    with pytest.raises(DimensionMismatch):
        model.predict(np.zeros(2))


def test_fit_shape_mismatch():
    model = GaussianRBFModel(np.zeros((3, 1)), gamma=1.0)
    with pytest.raises(ShapeMismatch):
        model.fit(np.zeros((5, 1)), np.zeros(4))
    with pytest.raises(ShapeMismatch):
        model.fit(np.zeros((5, 1)), np.zeros((5, 2)))


def test_fit_accepts_column_targets():
    X = np.linspace(-1, 1, 6)[:, None]
    model = GaussianRBFModel(X, gamma=5.0)
    model.fit(X, X.copy())
    np.testing.assert_allclose(model.predict(X), X[:, 0], atol=1e-6)


def test_fit_dimension_mismatch():
    model = GaussianRBFModel(np.zeros((3, 2)), gamma=1.0)
    with pytest.raises(DimensionMismatch):
        model.fit(np.zeros((5, 1)), np.zeros(5))


def test_fit_empty_training_set():
    model = GaussianRBFModel(np.zeros((3, 1)), gamma=1.0)
    with pytest.raises(FitFailed):
        model.fit(np.empty((0, 1)), np.empty(0))


@pytest.mark.parametrize("bad", ["X", "y"])
def test_failed_fit_leaves_weights_unchanged(bad):
    X = np.linspace(-1, 1, 10)[:, None]
    y = np.sin(X[:, 0])
    model = GaussianRBFModel(X[::2], gamma=2.0).fit(X, y)
    before = model.weights

    X_bad, y_bad = X.copy(), y.copy()
    if bad == "X":
        X_bad[3, 0] = np.nan
    else:
        y_bad[3] = np.inf
    with pytest.raises(FitFailed):
        model.fit(X_bad, y_bad)
    np.testing.assert_array_equal(model.weights, before)


def test_degenerate_fit_leaves_weights_unchanged():
    X = np.array([[0.0], [0.5], [100.0]])
    model = GaussianRBFModel([[0.0], [0.5]], gamma=1.0, normalize=True, random_state=0)
    before = model.weights
    with pytest.raises(DegenerateBasis) as excinfo:
        model.fit(X, [0.0, 1.0, 2.0])
    assert excinfo.value.rows == [2]
    np.testing.assert_array_equal(model.weights, before)
    assert not model.is_fitted


def test_duplicate_centroids_rank_deficient():
    X = np.linspace(-2, 2, 20)[:, None]
    y = np.cos(X[:, 0])
    centroids = np.vstack([np.linspace(-2, 2, 5)[:, None]] * 2)
    model = GaussianRBFModel(centroids, gamma=1.0).fit(X, y)
    assert model.rank is not None and model.rank <= model.basis_length
    reference = GaussianRBFModel(centroids[:5], gamma=1.0).fit(X, y)
    np.testing.assert_allclose(model.predict(X), reference.predict(X), atol=1e-8)


def test_ridge_shrinks_weights():
    rng = np.random.RandomState(0)
    X = rng.uniform(-2, 2, (50, 1))
    y = np.sin(2 * X[:, 0]) + rng.normal(0, 0.1, 50)
    centroids = np.linspace(-2, 2, 12)[:, None]
    ols = GaussianRBFModel(centroids, gamma=2.0).fit(X, y)
    ridge = GaussianRBFModel(centroids, gamma=2.0, alpha=1.0).fit(X, y)
    assert ridge.rank is None
    assert np.linalg.norm(ridge.weights) < np.linalg.norm(ols.weights)


def test_internal_state_error():
    model = GaussianRBFModel(LINE_CENTROIDS, gamma=1.0)
    model._weights = np.zeros(5)
    with pytest.raises(InternalStateError):
        model.predict([[0.0]])


def test_repr():
    model = GaussianRBFModel(np.zeros((4, 2)), gamma=0.5, add_constant=True)
    r = repr(model)
    assert "basis_count=4" in r and "fitted=False" in r
