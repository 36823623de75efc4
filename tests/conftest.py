import numpy as np
import pytest

from surrogates_base import AbstractSurrogate, ConstantSurrogate, GaussianProcessSurrogate
from surrogates_base.errors import NotFittedError


class RecordingSurrogate(AbstractSurrogate[float, float]):
    """Surrogate with f(x) = 2x that records every primitive call."""

    def __init__(self, fail_on=None, rand_extra=0):
        self.calls = []
        self.data = []
        self.fail_on = fail_on
        self.rand_extra = rand_extra
        self.params = {"slope": 2.0}

    def __call__(self, x):
        return self.params["slope"] * x

    def add_point(self, x, y):
        self.calls.append(("add_point", x, y))
        if x == self.fail_on:
            raise ValueError(f"cannot add {x}")
        self.data.append((x, y))

    def update_hyperparameters(self, prior):
        self.params = {**self.params, **prior}

    def hyperparameters(self):
        return dict(self.params)

    def posterior(self, xs):
        xs = list(xs)
        self.calls.append(("posterior", xs))
        return {"mean": [self(x) for x in xs], "points": xs}

    def mean(self, x):
        if not self.data:
            raise NotFittedError("no data")
        self.calls.append(("mean", x))
        return self(x)

    def var(self, x):
        if not self.data:
            raise NotFittedError("no data")
        self.calls.append(("var", x))
        return x * x

    def rand(self, xs):
        xs = list(xs)
        self.calls.append(("rand", xs))
        return [self(x) for x in xs] + [0.0] * self.rand_extra

    def logpdf(self):
        return 0.0


@pytest.fixture
def recording():
    s = RecordingSurrogate()
    s.add_point(0.0, 0.0)
    s.calls.clear()
    return s


@pytest.fixture
def constant():
    s = ConstantSurrogate(constant=3.5)
    s.add_point(0.0, 3.5)
    return s


@pytest.fixture
def sine_data():
    """Generate 8-point sine wave training data."""
    X = np.linspace(0.0, 1.0, 8)[:, None]
    y = np.sin(2 * np.pi * X).ravel()
    return X, y


@pytest.fixture
def gp(sine_data):
    X, y = sine_data
    s = GaussianProcessSurrogate(input_dim=1, seed=0)
    s.add_points(X, y)
    s.update_hyperparameters({})
    return s
