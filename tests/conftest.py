from types import SimpleNamespace

import pytest

from golreach.builder import build_transition_relation
from golreach.encoder import build_generations, release_all
from golreach.engine import Engine
from golreach.layout import BoardLayout
from golreach.scenarios import build_initial_generation, end_generations


@pytest.fixture
def engine():
    with Engine() as e:
        yield e


@pytest.fixture
def layout(engine):
    with BoardLayout(engine, 8) as lay:
        yield lay


@pytest.fixture
def make_system(layout):
    """Build initial state, trajectory, relation and pre-state cube for a preset."""
    owned = []

    def make(scenario, workers=2):
        initial = build_initial_generation(layout, scenario)
        generations = build_generations(layout, initial, end_generations(scenario, layout.dimension))
        relation = build_transition_relation(layout, generations, workers)
        pre_cube = layout.pre_state_cube()
        owned.extend([initial, relation, pre_cube])
        owned.extend(generations)
        return SimpleNamespace(
            initial=initial,
            generations=generations,
            relation=relation,
            pre_cube=pre_cube,
            renaming=layout.renaming(),
        )

    yield make
    release_all(owned)
