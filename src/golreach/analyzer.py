from dataclasses import dataclass


@dataclass(frozen=True)
class Verdict:
    terminates: bool
    solution_count: int
    counter_example_count: int

    def lines(self):
        if self.terminates:
            head = ("[*] The system satisfies the properties, the game ends because "
                    "it reaches the final state")
        else:
            head = ("[*] The system doesn't satisfy the properties, the game doesn't end "
                    "because it doesn't reach the final state")
        return [
            head,
            f"[*] Reachable states solutions: {self.solution_count}",
            f"[*] The game ends after {self.solution_count} generations/transitions",
            "[*] Reachable states algorithm always reaches a fix point",
        ]


def count_basis(layout):
    """Basis argument of every model count: D*D - 1, the highest cell index."""
    return layout.cell_count - 1


def count_states(states, basis):
    """
    Boards satisfying `states`. The basis names the highest cell index, so
    the count runs over cells 0..basis, i.e. over every pre-state variable.
    """
    return states.sat_count(basis + 1)


def build_end_game(layout):
    """P = ~x_00 & ~x_01 & ... : the board with every cell dead."""
    res = layout.engine.true()
    for r, c in layout.cells():
        res.and_with(layout.pre(r, c).not_())
    return res


def analyze(layout, reachable):
    """
    Decide termination from the reachable states (borrowed).

    The game ends iff the all-dead board is among the reachable states, i.e.
    iff Reachable & EndGame has a model. If it has none, that absence is the
    counter example: the game never reaches its final state.
    """
    basis = count_basis(layout)
    solutions = count_states(reachable, basis)

    with build_end_game(layout) as end_game:
        with reachable.and_(end_game) as counter_example:
            hits = count_states(counter_example, basis)

    return Verdict(terminates=hits != 0, solution_count=solutions, counter_example_count=hits)
