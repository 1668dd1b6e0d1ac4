import logging
import time
from dataclasses import dataclass, field

from golreach.analyzer import analyze, count_basis
from golreach.builder import build_transition_relation
from golreach.encoder import build_generations, live_cells, release_all
from golreach.engine import Engine
from golreach.explicit import ExplicitBoard, explore
from golreach.layout import BoardLayout
from golreach.reachability import reachable_states
from golreach.scenarios import GLIDER, build_initial_generation, initial_cells

log = logging.getLogger(__name__)


@dataclass
class RunResult:
    scenario: str
    dimension: int
    end_generations: int
    trajectory: list
    verdict: object
    reachable_states: int
    iterations: int
    stats: list = field(default_factory=list)
    seconds: float = 0.0
    verified: object = None


def run(config, out=print):
    """
    One complete verification run, inside its own engine:

      1. initial board -> sequential trajectory of generations
      2. generations -> transition relation (parallel)
      3. fixpoint -> reachable states
      4. reachable states -> verdict
    """
    config.validate()
    start = time.time()
    D = config.dimension
    title = " Glider " if config.scenario == GLIDER else " Blinker "
    out(f"***************** {title} example ***************************")

    with Engine() as engine, BoardLayout(engine, D) as layout:
        with build_initial_generation(layout, config.scenario) as initial:
            generations = build_generations(layout, initial, config.end_generations)
            try:
                trajectory = [frozenset(live_cells(layout, g)) for g in generations]
                relation = build_transition_relation(layout, generations, config.workers)
            finally:
                release_all(generations)

            with relation, layout.pre_state_cube() as pre_cube:
                out("\n[*] Computing reachable states\n")
                fix = reachable_states(
                    initial, relation, pre_cube, layout.renaming(), count_basis(layout),
                    max_iterations=config.max_iterations,
                    on_iteration=lambda k, _: out(f" - iteration K = {k}"),
                )
                out("\n[*] Done computing reachable states\n")

        with fix.reachable as reachable:
            verdict = analyze(layout, reachable)
            state_count = reachable.sat_count(layout.cell_count)

    for line in verdict.lines():
        out(line)

    result = RunResult(
        scenario=config.scenario,
        dimension=D,
        end_generations=config.end_generations,
        trajectory=trajectory,
        verdict=verdict,
        reachable_states=state_count,
        iterations=fix.iterations,
        stats=fix.stats,
    )

    if config.verify:
        result.verified = verify(result)
        if result.verified:
            out(">> Verification Passed: Symbolic result matches explicit exploration.")
        else:
            out(">> Warning: Symbolic and explicit exploration differ!")

    result.seconds = time.time() - start
    out(f"[*] Total time: {int(result.seconds * 1000)}")
    out("***************************************************************" + "\n" + "\n")
    return result


def verify(result):
    """Cross-check a symbolic run against the explicit bitmask oracle."""
    explicit = explore(result.dimension, initial_cells(result.scenario), result.end_generations)
    board = ExplicitBoard(result.dimension)
    board_cells = [board.cells_of(m) for m in explicit.trajectory]

    checks = {
        "trajectory": board_cells == [set(t) for t in result.trajectory],
        "terminates": explicit.terminates == result.verdict.terminates,
        "reachable": explicit.solution_count == result.reachable_states,
    }
    for name, ok in checks.items():
        if not ok:
            log.warning("explicit cross-check failed on %s", name)
    return all(checks.values())

