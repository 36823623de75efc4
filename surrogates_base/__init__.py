"""
Surrogate model contract.
Defines the primitives every surrogate implements, the batch and
single-point operations derived from them, and two reference surrogates.
"""

from .base import AbstractSurrogate
from .config import Config
from .constant_surrogate import ConstantSurrogate
from .errors import (
    DomainMismatchError,
    LengthMismatchError,
    NotFittedError,
    SurrogateError,
)
from .gp_surrogate import GaussianProcessSurrogate

__all__ = [
    'AbstractSurrogate',
    'ConstantSurrogate',
    'GaussianProcessSurrogate',
    'Config',
    'SurrogateError',
    'DomainMismatchError',
    'LengthMismatchError',
    'NotFittedError',
    'SURROGATE_MODELS',
    'get_surrogate_model',
]

SURROGATE_MODELS = {
    'constant': ConstantSurrogate,
    'gp': GaussianProcessSurrogate,
}


def get_surrogate_model(name: str, config: Config = None, **kwargs):
    """
    Factory function to get surrogate model by name.
    
    Args:
        name: Model name ('constant', 'gp')
        config: Optional Config supplying default constructor arguments
        **kwargs: Arguments to pass to the model constructor, taking
            precedence over config
        
    Returns:
        Instantiated surrogate model
        
    Raises:
        ValueError: If model name is not recognized
        
    Example:
        >>> model = get_surrogate_model('gp', input_dim=2, seed=0)
        >>> model.add_points(X_train, y_train)
        >>> mu, var = model.means(X_test), model.variances(X_test)
    """
    if name not in SURROGATE_MODELS:
        raise ValueError(
            f"Unknown surrogate model: {name}. "
            f"Available models: {list(SURROGATE_MODELS.keys())}"
        )
    if config is not None:
        kwargs = {**config.surrogate_kwargs(name), **kwargs}
    return SURROGATE_MODELS[name](**kwargs)
