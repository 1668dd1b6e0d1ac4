"""End-to-end runs of the two preset scenarios."""
import pytest

from golreach.cli import main
from golreach.config import RunConfig
from golreach.errors import ConfigurationError
from golreach.explicit import ExplicitBoard, explore
from golreach.runner import run
from golreach.scenarios import BLINKER, GLIDER, end_generations, initial_cells


def quiet_run(config):
    lines = []
    return run(config, out=lines.append), lines


class TestBlinker:
    """Scenario A: oscillating pattern, dimension 8, two generations."""

    def test_golden_values(self):
        result, lines = quiet_run(RunConfig(scenario=BLINKER, dimension=8, workers=2))
        assert result.end_generations == 2
        assert len(result.trajectory) == 3
        assert result.trajectory[0] == result.trajectory[2]
        assert result.verdict.terminates is False
        assert result.verdict.solution_count == 2
        assert result.verdict.counter_example_count == 0
        assert any("doesn't end" in line for line in lines)
        assert "[*] The game ends after 2 generations/transitions" in lines

    def test_verify(self):
        result, lines = quiet_run(RunConfig(scenario=BLINKER, dimension=8, workers=1, verify=True))
        assert result.verified is True
        assert any("Verification Passed" in line for line in lines)


class TestGlider:
    """Scenario B: moving pattern, dimension 8, 2*8+1 generations."""

    @pytest.fixture(scope="class")
    def outcome(self):
        return run(RunConfig(scenario=GLIDER, dimension=8, workers=4, verify=True),
                   out=lambda line: None)

    def test_trajectory_length(self, outcome):
        assert outcome.end_generations == 17
        assert len(outcome.trajectory) == 18

    def test_consecutive_generations_follow_rules(self, outcome):
        board = ExplicitBoard(8)
        for before, after in zip(outcome.trajectory, outcome.trajectory[1:]):
            assert board.cells_of(board.step(board.mask_of(before))) == set(after)

    def test_matches_explicit_exploration(self, outcome):
        explicit = explore(8, initial_cells(GLIDER), 17)
        assert outcome.verdict.terminates == explicit.terminates
        assert outcome.reachable_states == explicit.solution_count
        assert outcome.verified is True

    def test_golden_values(self, outcome):
        assert outcome.verdict.terminates is True
        assert outcome.verdict.solution_count == 12
        assert outcome.verdict.counter_example_count == 1
        assert outcome.iterations == 13

    def test_fixpoint_stats(self, outcome):
        assert len(outcome.stats) == outcome.iterations
        assert outcome.stats[-1].states == outcome.stats[-2].states


class TestConfig:

    def test_end_generations(self):
        assert end_generations(GLIDER, 8) == 17
        assert end_generations(BLINKER, 8) == 2
        assert RunConfig(scenario=GLIDER, dimension=10).end_generations == 21

    @pytest.mark.parametrize("kwargs", [
        {"scenario": "spaceship"},
        {"scenario": BLINKER, "dimension": 5},
        {"scenario": BLINKER, "workers": 0},
        {"scenario": BLINKER, "max_iterations": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            RunConfig(**kwargs).validate()


class TestCli:

    def test_blinker(self, capsys):
        assert main(["--scenario", "blinker", "--workers", "2"]) == 0
        out = capsys.readouterr().out
        assert "Blinker" in out
        assert "[*] Reachable states solutions: 2" in out

    def test_bad_dimension(self, capsys):
        assert main(["--scenario", "glider", "--dimension", "4"]) == 1
        assert "[Error]" in capsys.readouterr().out
