"""
Gaussian Process Surrogate Model
"""

import numpy as np
from typing import Any, Dict, Mapping, Sequence
from scipy.stats import multivariate_normal
from sklearn.gaussian_process import GaussianProcessRegressor
from sklearn.gaussian_process.kernels import RBF, Matern, ConstantKernel as C

from .base import AbstractSurrogate
from .errors import DomainMismatchError, NotFittedError


class GaussianProcessSurrogate(AbstractSurrogate[np.ndarray, float]):
    """
    Gaussian Process regressor over points in R^input_dim.

    Observations are refit with the current kernel held fixed. Kernel
    hyperparameters only change through update_hyperparameters.
    """

    def __init__(self, input_dim=1, kernel='rbf', nu=2.5, alpha=1e-6,
                 normalize_y=True, n_restarts_optimizer=5,
                 optimize_hyperparameters=True, seed=None, verbose=False):
        if kernel == 'rbf':
            k = C(1.0) * RBF(1.0)
        elif kernel == 'matern':
            k = C(1.0) * Matern(1.0, nu=nu)
        else:
            raise ValueError(f"Unknown kernel: {kernel}. Available kernels: ['rbf', 'matern']")

        self.input_dim = int(input_dim)
        self.kernel = k
        self.alpha = alpha
        self.normalize_y = normalize_y
        self.n_restarts_optimizer = n_restarts_optimizer
        self.optimize_hyperparameters = optimize_hyperparameters
        self.seed = seed
        self.verbose = verbose
        self.rng = np.random.RandomState(seed)

        self.X_train = np.zeros((0, self.input_dim))
        self.y_train = np.zeros(0)
        self.model = None

    def _as_point(self, x) -> np.ndarray:
        try:
            x = np.asarray(x, dtype=float)
        except (TypeError, ValueError) as e:
            raise DomainMismatchError(f"Cannot interpret {x!r} as a point") from e
        if x.ndim == 0 and self.input_dim == 1:
            x = x.reshape(1)
        if x.shape != (self.input_dim,):
            raise DomainMismatchError(
                f"Expected a point of shape ({self.input_dim},), got {x.shape}"
            )
        return x

    def _as_matrix(self, xs) -> np.ndarray:
        rows = [self._as_point(x) for x in xs]
        if not rows:
            raise ValueError("At least one point is required")
        return np.stack(rows, axis=0)

    def _fit(self, X, y, kernel, optimize: bool):
        """
        Fit on (X, y), optionally maximizing the log marginal likelihood.

        The instance is only updated once the fit succeeds.
        """
        model = GaussianProcessRegressor(
            kernel=kernel,
            alpha=self.alpha,
            normalize_y=self.normalize_y,
            optimizer='fmin_l_bfgs_b' if optimize else None,
            n_restarts_optimizer=self.n_restarts_optimizer if optimize else 0,
            random_state=self.seed,
        )
        model.fit(X, y)
        self.X_train, self.y_train = X, y
        self.model = model
        self.kernel = model.kernel_
        if self.verbose:
            print(f"[GP] Fit on {len(self.y_train)} points, kernel={self.kernel}")

    def _require_fit(self):
        if self.model is None:
            raise NotFittedError("GaussianProcessSurrogate has no observations yet")

    def __call__(self, x) -> float:
        return self.mean(x)

    def add_point(self, x, y) -> None:
        x = self._as_point(x)
        try:
            y = float(y)
        except (TypeError, ValueError) as e:
            raise DomainMismatchError(f"Cannot interpret {y!r} as a value") from e
        X = np.vstack([self.X_train, x])
        y = np.append(self.y_train, y)
        self._fit(X, y, self.kernel, optimize=False)

    def update_hyperparameters(self, prior: Mapping[str, Any]) -> None:
        """
        Set kernel hyperparameters from prior, then re-estimate them.

        Args:
            prior: Mapping from kernel hyperparameter name (as returned by
                hyperparameters()) to a value. The values are used as they
                are when optimization is disabled, and as the optimizer's
                starting point otherwise.
        """
        unknown = set(prior) - set(self.hyperparameters())
        if unknown:
            raise ValueError(
                f"Unknown hyperparameters: {sorted(unknown)}. "
                f"Available hyperparameters: {sorted(self.hyperparameters())}"
            )
        kernel = self.kernel.clone_with_theta(self.kernel.theta)
        kernel.set_params(**dict(prior))
        if len(self.y_train):
            self._fit(self.X_train, self.y_train, kernel,
                      optimize=self.optimize_hyperparameters)
        else:
            self.kernel = kernel

    def hyperparameters(self) -> Dict[str, Any]:
        params = self.kernel.get_params()
        record = {}
        for h in self.kernel.hyperparameters:
            value = params[h.name]
            record[h.name] = np.copy(value) if isinstance(value, np.ndarray) else value
        return record

    def posterior(self, xs: Sequence):
        """Joint normal over f(xs) with the GP's predictive mean and covariance."""
        self._require_fit()
        X = self._as_matrix(xs)
        mu, cov = self.model.predict(X, return_cov=True)
        return multivariate_normal(mean=mu, cov=cov, allow_singular=True)

    def mean(self, x) -> float:
        self._require_fit()
        mu = self.model.predict(self._as_point(x)[None, :])
        return float(mu[0])

    def var(self, x) -> float:
        self._require_fit()
        _, std = self.model.predict(self._as_point(x)[None, :], return_std=True)
        return max(float(std[0]) ** 2, 0.0)

    def rand(self, xs: Sequence) -> np.ndarray:
        sample = self.posterior(xs).rvs(random_state=self.rng)
        return np.atleast_1d(sample)

    def logpdf(self) -> float:
        self._require_fit()
        return float(self.model.log_marginal_likelihood_value_)
