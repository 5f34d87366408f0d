"""
Optuna hyperparameter tuning for GaussianRBFRegressor.

Searches bandwidth, centroid count and normalization on the noisy
sin(x0) * sin(x1) surface.

Usage:
    python examples/optuna_tuning.py
"""

import optuna
from sklearn.model_selection import cross_val_score, KFold

from gaussrbf import GaussianRBFRegressor
from gaussrbf.data import make_sine_product_data


def rbf_objective(trial: optuna.Trial, X, y):
    """Optuna objective: 5-fold CV R² for GaussianRBFRegressor."""
    use_auto_gamma = trial.suggest_categorical("gamma_auto", [True, False])
    gamma = "auto" if use_auto_gamma else trial.suggest_float("gamma", 1e-2, 1e1, log=True)

    model = GaussianRBFRegressor(
        n_centroids=trial.suggest_int("n_centroids", 5, 60),
        gamma=gamma,
        normalize=trial.suggest_categorical("normalize", [True, False]),
        alpha=trial.suggest_float("alpha", 1e-8, 1e-1, log=True),
        center_init="kmeans",
        add_constant=True,
        random_state=42,
    )

    cv = KFold(n_splits=5, shuffle=True, random_state=42)
    scores = cross_val_score(model, X, y, cv=cv, scoring="r2")
    return scores.mean()


if __name__ == "__main__":
    X, y = make_sine_product_data(noise=0.1, n_samples=400, random_state=42)

    study = optuna.create_study(direction="maximize")
    study.optimize(lambda trial: rbf_objective(trial, X, y), n_trials=30)

    print(f"\nBest R²: {study.best_value:.4f}")
    print(f"Best params: {study.best_params}")

    # Refit with best params
    bp = study.best_params
    best_model = GaussianRBFRegressor(
        n_centroids=bp["n_centroids"],
        gamma="auto" if bp["gamma_auto"] else bp["gamma"],
        normalize=bp["normalize"],
        alpha=bp["alpha"],
        center_init="kmeans",
        add_constant=True,
        random_state=42,
    )
    best_model.fit(X, y)
    print(f"Train R²: {best_model.score(X, y):.4f}")
    print(f"Resolved gamma: {best_model.gamma_:.4g}")
    print(best_model.weight_summary().head())
