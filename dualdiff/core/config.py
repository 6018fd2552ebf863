# dualdiff/core/config.py
from dataclasses import dataclass


@dataclass
class GradientConfig:
    """Configuration for the per-dimension gradient passes."""
    # Execution
    parallel: bool = False       # run the n passes on an executor
    n_workers: int = 4
    use_processes: bool = False  # ProcessPoolExecutor instead of threads (f must pickle)

    # Diagnostics
    check_finite: bool = True    # warn when a harvested partial is NaN/inf

    # Logging
    verbose: bool = False

    def __post_init__(self):
        if self.n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {self.n_workers}")


DEFAULT_CONFIG = GradientConfig()
