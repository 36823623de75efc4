"""
Base class for all surrogate models.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Mapping, Optional, Sequence, TypeVar
import numpy as np

from .errors import DomainMismatchError, LengthMismatchError

D = TypeVar("D")
R = TypeVar("R")


class AbstractSurrogate(ABC, Generic[D, R]):
    """
    Abstract base class for surrogates of a function f: D -> R.

    Subclasses implement the primitives (the abstract methods below) and
    inherit batch and single-point forms built from them. Any derived method
    may be overridden as long as it agrees with the default on single points.

    A matrix of points should be passed as an iterable of rows, the layout
    numpy uses for [n_samples, n_features] arrays.
    """

    # Optional isinstance checks used by check_point / check_value.
    domain_type: Optional[type] = None
    range_type: Optional[type] = None

    @abstractmethod
    def __call__(self, x: D) -> R:
        """Evaluate the surrogate at x. Must not mutate state."""
        pass

    @abstractmethod
    def add_point(self, x: D, y: R) -> None:
        """
        Add the observation y = f(x) to the surrogate.

        Args:
            x: Input point
            y: Observed value at x
        """
        pass

    @abstractmethod
    def update_hyperparameters(self, prior: Mapping[str, Any]) -> None:
        """
        Update hyperparameters using the prior information in `prior`.

        Args:
            prior: Mapping from hyperparameter name to prior information.
                Its interpretation is up to the implementation.
        """
        pass

    @abstractmethod
    def hyperparameters(self) -> Dict[str, Any]:
        """Return a new dict of the hyperparameter values currently in use."""
        pass

    @abstractmethod
    def posterior(self, xs: Sequence[D]) -> Any:
        """
        Return the joint posterior at points xs.

        Args:
            xs: Ordered sequence of input points

        Returns:
            A handle on the joint posterior over f(xs). Its type is chosen
            by the implementation.
        """
        pass

    @abstractmethod
    def mean(self, x: D) -> float:
        """Return the posterior mean at point x."""
        pass

    @abstractmethod
    def var(self, x: D) -> float:
        """Return the posterior variance at point x. Never negative."""
        pass

    @abstractmethod
    def rand(self, xs: Sequence[D]) -> Sequence[R]:
        """
        Draw one sample from the joint posterior at points xs.

        Args:
            xs: Ordered sequence of input points

        Returns:
            Sampled values, same length and order as xs
        """
        pass

    @abstractmethod
    def logpdf(self) -> float:
        """Return the log marginal likelihood of the observed data."""
        pass

    # Derived operations

    def add_points(self, xs: Sequence[D], ys: Sequence[R]) -> None:
        """
        Add observations ys at points xs, one add_point call per pair.

        Lengths are checked before anything is added. If an add fails
        partway, the pairs before it stay in the surrogate.

        Raises:
            LengthMismatchError: If xs and ys differ in length
        """
        xs, ys = list(xs), list(ys)
        if len(xs) != len(ys):
            raise LengthMismatchError(
                f"Got {len(xs)} points but {len(ys)} values"
            )
        for x, y in zip(xs, ys):
            self.add_point(x, y)

    def posterior_at(self, x: D) -> Any:
        """Return the posterior at a single point x."""
        return self.posterior([x])

    def means(self, xs: Sequence[D]) -> np.ndarray:
        """Return the posterior means at points xs, computed point by point."""
        return np.asarray([self.mean(x) for x in xs])

    def variances(self, xs: Sequence[D]) -> np.ndarray:
        """Return the posterior variances at points xs, computed point by point."""
        return np.asarray([self.var(x) for x in xs])

    def rand_at(self, x: D) -> R:
        """
        Draw a sample from the posterior at a single point x.

        Raises:
            LengthMismatchError: If rand([x]) does not return exactly one value
        """
        sample = self.rand([x])
        try:
            n = len(sample)
        except TypeError as e:
            raise LengthMismatchError(
                f"rand returned a scalar {type(sample).__name__}, expected a sequence"
            ) from e
        if n != 1:
            raise LengthMismatchError(
                f"rand returned {n} values for a single point"
            )
        return sample[0]

    # Validation helpers for implementations

    def check_point(self, x: Any) -> None:
        if self.domain_type is not None and not isinstance(x, self.domain_type):
            raise DomainMismatchError(
                f"{type(self).__name__} expects points of type "
                f"{self.domain_type.__name__}, got {type(x).__name__}"
            )

    def check_value(self, y: Any) -> None:
        if self.range_type is not None and not isinstance(y, self.range_type):
            raise DomainMismatchError(
                f"{type(self).__name__} expects values of type "
                f"{self.range_type.__name__}, got {type(y).__name__}"
            )
