"""
Cell update rules of the bordered Game of Life.

A live cell dies of solitude (0 or 1 neighbors), of overpopulation (4 or
more) or because it sits in the last row or last column of the board; the
border death applies even when the neighbor count would let it survive.
A dead cell with exactly three neighbors is populated.

Everything here works on a plain `is_live(row, col)` predicate so the
symbolic encoder and the explicit oracle make identical decisions.
"""

SOLITUDE = "solitude"
OVERPOPULATION = "overpopulation"
BORDER = "border"
SURVIVES = "survives"
POPULATED = "populated"
STAYS_DEAD = "stays_dead"

# up, up-left, up-right, down, down-left, down-right, left, right
NEIGHBOR_OFFSETS = (
    (-1, 0), (-1, -1), (-1, 1),
    (1, 0), (1, -1), (1, 1),
    (0, -1), (0, 1),
)


def neighbor_count(row, col, dimension, is_live):
    """Live cells in the Moore neighborhood; positions off the board are absent."""
    count = 0
    for dr, dc in NEIGHBOR_OFFSETS:
        r, c = row + dr, col + dc
        if 0 <= r < dimension and 0 <= c < dimension and is_live(r, c):
            count += 1
    return count


def on_border(row, col, dimension):
    return row == dimension - 1 or col == dimension - 1


def cell_outcome(row, col, dimension, is_live):
    """Name the rule that decides cell (row, col), in priority order."""
    neighbors = neighbor_count(row, col, dimension, is_live)

    if is_live(row, col):
        if neighbors in (0, 1):
            return SOLITUDE
        if neighbors >= 4:
            return OVERPOPULATION
        if on_border(row, col, dimension):
            return BORDER
        return SURVIVES

    if neighbors == 3:
        return POPULATED
    return STAYS_DEAD


def next_cell_state(row, col, dimension, is_live):
    return cell_outcome(row, col, dimension, is_live) in (SURVIVES, POPULATED)
