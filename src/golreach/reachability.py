import logging
import time
from dataclasses import dataclass, field

from golreach.analyzer import count_states
from golreach.errors import FixpointLimitError

log = logging.getLogger(__name__)


@dataclass
class IterationStats:
    iteration: int
    nodes: int
    states: int


@dataclass
class FixpointResult:
    reachable: object
    iterations: int
    stats: list = field(default_factory=list)
    seconds: float = 0.0


def image(relation, states, pre_cube, renaming):
    """
    Relational image of `states` under `relation`, back in pre-state variables:

        rename(exists X. (T & S), post -> pre)
    """
    with relation.and_(states) as conj:
        with conj.exist(pre_cube) as post_image:
            return post_image.replace(renaming)


def reachable_states(initial, relation, pre_cube, renaming, basis,
                     max_iterations=None, on_iteration=None):
    """
    Least fixpoint of R = I | image(R), starting from R = false.

    Each round computes the states one more transition away from R, maps
    them back to pre-state variables and adds the initial state. The loop
    stops as soon as the new R is equivalent to the previous one; since the
    state space is finite the sequence is bound to stabilize, but
    `max_iterations` (None = unbounded) turns a runaway loop into
    FixpointLimitError.

    `basis` is the model-count basis of the per-iteration stats
    (see analyzer.count_basis).
    `on_iteration(k, result)` is called with every intermediate R (borrowed).
    Returns a FixpointResult whose `reachable` formula the caller owns.
    """
    start = time.time()
    engine = initial.engine
    result = engine.false()
    previous = None
    stats = []
    iteration = 0

    try:
        while True:
            iteration += 1
            if max_iterations is not None and iteration > max_iterations:
                raise FixpointLimitError(max_iterations)

            if previous is not None:
                previous.release()
            previous = result

            # --- Symbolic Image Computation ---
            with image(relation, previous, pre_cube, renaming) as projected:
                result = initial.or_(projected)

            count = count_states(result, basis)
            stats.append(IterationStats(iteration, engine.node_count(), count))
            log.debug("iteration %d: %d nodes, %d states", iteration, stats[-1].nodes, count)
            if on_iteration is not None:
                on_iteration(iteration, result)

            # --- Convergence Check ---
            if result.is_equivalent_to(previous):
                break
    except BaseException:
        if previous is not None and previous is not result:
            previous.release()
        result.release()
        raise

    previous.release()
    log.info("fixpoint reached after %d iteration(s)", iteration)
    return FixpointResult(result, iteration, stats, time.time() - start)
