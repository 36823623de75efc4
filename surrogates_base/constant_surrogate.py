"""
Constant Surrogate Model
"""

import numbers
from typing import Any, Dict, List, Mapping, Sequence, Tuple

import numpy as np
from scipy.stats import multivariate_normal

from .base import AbstractSurrogate
from .errors import NotFittedError


class ConstantSurrogate(AbstractSurrogate[float, float]):
    """Predicts a fixed constant with zero variance everywhere."""

    domain_type = numbers.Real
    range_type = numbers.Real

    def __init__(self, constant=0.0, verbose=False):
        self.constant = float(constant)
        self.verbose = verbose
        self.data: List[Tuple[float, float]] = []

    def _require_data(self):
        if not self.data:
            raise NotFittedError("ConstantSurrogate has no observations yet")

    def __call__(self, x: float) -> float:
        self.check_point(x)
        return self.constant

    def add_point(self, x: float, y: float) -> None:
        self.check_point(x)
        self.check_value(y)
        self.data.append((float(x), float(y)))

    def update_hyperparameters(self, prior: Mapping[str, Any]) -> None:
        """Override the constant with prior['constant']."""
        unknown = set(prior) - {"constant"}
        if unknown:
            raise ValueError(f"Unknown hyperparameters: {sorted(unknown)}")
        if "constant" in prior:
            self.constant = float(prior["constant"])
            if self.verbose:
                print(f"[Constant] constant set to {self.constant}")

    def hyperparameters(self) -> Dict[str, Any]:
        return {"constant": self.constant}

    def posterior(self, xs: Sequence[float]):
        """Degenerate normal centred on the constant."""
        self._require_data()
        xs = list(xs)
        for x in xs:
            self.check_point(x)
        n = len(xs)
        return multivariate_normal(
            mean=np.full(n, self.constant), cov=np.zeros((n, n)), allow_singular=True
        )

    def mean(self, x: float) -> float:
        self._require_data()
        self.check_point(x)
        return self.constant

    def var(self, x: float) -> float:
        self._require_data()
        self.check_point(x)
        return 0.0

    def rand(self, xs: Sequence[float]) -> np.ndarray:
        self._require_data()
        xs = list(xs)
        for x in xs:
            self.check_point(x)
        return np.full(len(xs), self.constant)

    def logpdf(self) -> float:
        """0 if every observation equals the constant, -inf otherwise."""
        self._require_data()
        ys = np.array([y for _, y in self.data])
        return 0.0 if np.all(ys == self.constant) else -np.inf
