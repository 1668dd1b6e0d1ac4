import os
from dataclasses import dataclass, field

from golreach.errors import ConfigurationError
from golreach.scenarios import MIN_DIMENSION, check_scenario, end_generations

DEFAULT_DIMENSION = 8
DEFAULT_MAX_ITERATIONS = 10_000


def _default_workers():
    return os.cpu_count() or 1


@dataclass
class RunConfig:
    scenario: str
    dimension: int = DEFAULT_DIMENSION
    workers: int = field(default_factory=_default_workers)
    # None = no cap on the reachable-states loop
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    verify: bool = False

    def validate(self):
        check_scenario(self.scenario)
        if self.dimension < MIN_DIMENSION:
            raise ConfigurationError(
                f"dimension must be at least {MIN_DIMENSION} for the preset patterns, got {self.dimension}")
        if self.workers < 1:
            raise ConfigurationError(f"worker count must be at least 1, got {self.workers}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ConfigurationError(f"max_iterations must be positive, got {self.max_iterations}")
        return self

    @property
    def end_generations(self):
        return end_generations(self.scenario, self.dimension)
