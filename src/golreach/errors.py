class GolReachError(Exception):
    """Base class for every error raised by golreach."""


class ConfigurationError(GolReachError, ValueError):
    """A run was configured with an unusable dimension, worker count or scenario."""


class FormulaReleasedError(GolReachError, RuntimeError):
    """A formula handle was used (or released) after it had already been released."""


class RelationBuildError(GolReachError):
    """
    A worker failed while building its share of the transition relation.

    The whole construction is abandoned: remaining chunks are cancelled and the
    first failure is re-raised through this exception (see __cause__).
    """

    def __init__(self, chunk, cause):
        start, stop = chunk
        super().__init__(f"transition chunk [{start}, {stop}) failed: {cause!r}")
        self.chunk = chunk


class FixpointLimitError(GolReachError):
    """The reachable-states loop did not stabilize within the iteration cap."""

    def __init__(self, iterations):
        super().__init__(f"no fixpoint after {iterations} iterations")
        self.iterations = iterations
