import logging

from golreach import rules

log = logging.getLogger(__name__)


def _liveness(layout, generation):
    """Return an is_live(r, c) predicate read from one satisfying assignment."""
    assignment = generation.any_sat()

    def is_live(r, c):
        return assignment.holds(layout.pre_id(r, c))

    return is_live


def live_cells(layout, generation):
    """Set of (row, col) alive in a singleton generation."""
    is_live = _liveness(layout, generation)
    return {(r, c) for r, c in layout.cells() if is_live(r, c)}


def encode_transition(layout, generation):
    """
    One transition: the map from the board variables of `generation` to the
    post-state variables, as a single conjunctive BDD.

    Each cell contributes one conjunct:
      - live cell that dies (solitude, overpopulation, border):  x & ~x'
      - live cell that survives:                                 x &  x'
      - dead cell that gets populated:                          ~x &  x'
      - any other dead cell:                                     x <-> x'

    The generation is borrowed; the returned relation is owned by the caller.
    """
    D = layout.dimension
    is_live = _liveness(layout, generation)
    res = layout.engine.true()

    for r, c in layout.cells():
        x = layout.pre(r, c)
        y = layout.post(r, c)
        outcome = rules.cell_outcome(r, c, D, is_live)

        if outcome in (rules.SOLITUDE, rules.OVERPOPULATION, rules.BORDER):
            res.and_with(x.copy())
            res.and_with(y.not_())
        elif outcome == rules.SURVIVES:
            res.and_with(x.copy())
            res.and_with(y.copy())
        elif outcome == rules.POPULATED:
            res.and_with(x.not_())
            res.and_with(y.copy())
        else:
            # frame condition: the dead cell stays as it is
            res.and_with(x.biimp(y))

    return res


def next_generation(layout, generation):
    """Successor of a singleton generation, again as a singleton over pre variables."""
    D = layout.dimension
    is_live = _liveness(layout, generation)
    res = layout.engine.true()

    for r, c in layout.cells():
        x = layout.pre(r, c)
        if rules.next_cell_state(r, c, D, is_live):
            res.and_with(x.copy())
        else:
            res.and_with(x.not_())

    return res


def build_generations(layout, initial, end_generations):
    """
    Simulate `end_generations` steps from `initial`, strictly in order.

    Returns end_generations + 1 owned formulas, the first one being a copy of
    `initial` (which stays owned by the caller).
    """
    generations = [initial.copy()]
    current = generations[0]

    try:
        for step in range(end_generations):
            current = next_generation(layout, current)
            generations.append(current)
            log.debug("generation %d built", step + 1)
    except BaseException:
        release_all(generations)
        raise

    return generations


def release_all(formulas):
    for f in formulas:
        f.release()
