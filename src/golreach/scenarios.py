"""Preset initial boards. Both patterns sit around the middle of the board."""

from golreach.errors import ConfigurationError

BLINKER = "blinker"
GLIDER = "glider"

# the presets touch row/column 5
MIN_DIMENSION = 6

PATTERNS = {
    BLINKER: ((5, 3), (5, 4), (5, 5)),
    GLIDER: ((5, 3), (5, 4), (5, 5), (4, 5), (3, 4)),
}


def check_scenario(name):
    if name not in PATTERNS:
        raise ConfigurationError(f"unknown scenario {name!r}, expected one of {sorted(PATTERNS)}")
    return name


def end_generations(name, dimension):
    """
    Length of the sampled trajectory: a glider needs to travel to the border
    (2*D + 1 steps), a blinker repeats after 2.
    """
    check_scenario(name)
    if name == GLIDER:
        return 2 * dimension + 1
    return 2


def initial_cells(name):
    return set(PATTERNS[check_scenario(name)])


def build_initial_generation(layout, name):
    return layout.configuration(initial_cells(name))
