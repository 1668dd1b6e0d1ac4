from collections import deque
from dataclasses import dataclass

from golreach import rules


@dataclass(frozen=True)
class TransitionTerm:
    """Explicit counterpart of one encoded transition (all fields are bitmasks)."""
    live: int
    dying: int
    births: int


class ExplicitBoard:
    """
    Explicit-state oracle using integer bitmasks.
    Each cell -> one bit (LSB = cell (0, 0), row-major), so a whole board is
    one int and the all-dead board is 0.
    """

    def __init__(self, dimension):
        self.dimension = dimension
        self.num_cells = dimension * dimension

    def bit(self, r, c):
        return 1 << (r * self.dimension + c)

    def mask_of(self, cells):
        m = 0
        for r, c in cells:
            m |= self.bit(r, c)
        return m

    def cells_of(self, mask):
        D = self.dimension
        return {divmod(i, D) for i in range(self.num_cells) if (mask >> i) & 1}

    def _is_live(self, mask):
        return lambda r, c: bool(mask & self.bit(r, c))

    def step(self, mask):
        """Next board according to the cell rules."""
        is_live = self._is_live(mask)
        nxt = 0
        for r in range(self.dimension):
            for c in range(self.dimension):
                if rules.next_cell_state(r, c, self.dimension, is_live):
                    nxt |= self.bit(r, c)
        return nxt

    def trajectory(self, initial_mask, end_generations):
        masks = [initial_mask]
        for _ in range(end_generations):
            masks.append(self.step(masks[-1]))
        return masks

    def transition_term(self, mask):
        """
        What the symbolic transition of board `mask` demands and does:
        live cells must be live and are cleared when they die, born cells
        must be dead and become live, every other cell is copied.
        """
        is_live = self._is_live(mask)
        dying = births = 0
        for r in range(self.dimension):
            for c in range(self.dimension):
                outcome = rules.cell_outcome(r, c, self.dimension, is_live)
                if outcome in (rules.SOLITUDE, rules.OVERPOPULATION, rules.BORDER):
                    dying |= self.bit(r, c)
                elif outcome == rules.POPULATED:
                    births |= self.bit(r, c)
        return TransitionTerm(mask, dying, births)

    def fire_mask(self, mask, term):
        """Return the successor of `mask` under `term`, or None if not enabled."""
        if (mask & term.live) != term.live:
            return None
        if mask & term.births:
            return None
        return (mask & ~term.dying) | term.births

    def reachable_markings_bfs(self, initial_mask, terms):
        q = deque([initial_mask])
        visited = {initial_mask}
        while q:
            m = q.popleft()
            for term in terms:
                nm = self.fire_mask(m, term)
                if nm is not None and nm not in visited:
                    visited.add(nm)
                    q.append(nm)
        return visited


@dataclass(frozen=True)
class ExplicitResult:
    trajectory: list
    reachable: set

    @property
    def terminates(self):
        return 0 in self.reachable

    @property
    def solution_count(self):
        return len(self.reachable)


def explore(dimension, initial_cells, end_generations):
    """Sample the trajectory, then BFS over the transitions sampled along it."""
    board = ExplicitBoard(dimension)
    masks = board.trajectory(board.mask_of(initial_cells), end_generations)
    terms = [board.transition_term(m) for m in masks[:-1]]
    return ExplicitResult(masks, board.reachable_markings_bfs(masks[0], terms))
