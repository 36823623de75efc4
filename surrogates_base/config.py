from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Config:
    seed: Optional[int] = 42
    verbose: bool = False            # print fitting progress

    # === GP ===
    input_dim: int = 1
    kernel: str = "rbf"              # "rbf" or "matern"
    nu: float = 2.5                  # Matern smoothness
    alpha: float = 1e-6              # jitter added to the kernel diagonal
    normalize_y: bool = True
    n_restarts_optimizer: int = 5
    optimize_hyperparameters: bool = True

    # === Constant ===
    constant: float = 0.0

    # Per-surrogate overrides, e.g. {"gp": {"alpha": 1e-4}}
    overrides: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def surrogate_kwargs(self, name: str) -> Dict[str, Any]:
        """Constructor kwargs for the surrogate registered under `name`."""
        if name == "gp":
            kwargs = dict(
                input_dim=self.input_dim,
                kernel=self.kernel,
                nu=self.nu,
                alpha=self.alpha,
                normalize_y=self.normalize_y,
                n_restarts_optimizer=self.n_restarts_optimizer,
                optimize_hyperparameters=self.optimize_hyperparameters,
                seed=self.seed,
                verbose=self.verbose,
            )
        elif name == "constant":
            kwargs = dict(constant=self.constant, verbose=self.verbose)
        else:
            raise ValueError(f"No configuration for surrogate: {name}")
        kwargs.update(self.overrides.get(name, {}))
        return kwargs
