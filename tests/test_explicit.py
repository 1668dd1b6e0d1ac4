"""Tests for the explicit bitmask oracle."""
from golreach.explicit import ExplicitBoard, explore
from golreach.scenarios import BLINKER, initial_cells


class TestExplicitBoard:

    def test_mask_round_trip(self):
        board = ExplicitBoard(8)
        cells = {(0, 0), (3, 4), (7, 7)}
        assert board.cells_of(board.mask_of(cells)) == cells
        assert board.mask_of({(0, 0)}) == 1

    def test_blinker_oscillates(self):
        board = ExplicitBoard(8)
        masks = board.trajectory(board.mask_of(initial_cells(BLINKER)), 2)
        assert board.cells_of(masks[1]) == {(4, 4), (5, 4), (6, 4)}
        assert masks[2] == masks[0]

    def test_term_needs_live_cells_and_free_births(self):
        board = ExplicitBoard(8)
        start = board.mask_of(initial_cells(BLINKER))
        term = board.transition_term(start)
        assert board.fire_mask(start, term) == board.step(start)
        assert board.fire_mask(0, term) is None
        assert board.fire_mask(start | board.bit(4, 4), term) is None

    def test_unrelated_cells_are_copied(self):
        board = ExplicitBoard(8)
        start = board.mask_of(initial_cells(BLINKER))
        term = board.transition_term(start)
        extra = board.bit(0, 0)
        assert board.fire_mask(start | extra, term) == board.step(start) | extra

    def test_blinker_exploration(self):
        result = explore(8, initial_cells(BLINKER), 2)
        assert len(result.trajectory) == 3
        assert result.solution_count == 2
        assert not result.terminates

    def test_lonely_cell_terminates(self):
        result = explore(8, {(2, 2)}, 1)
        assert result.terminates
        assert result.reachable == {ExplicitBoard(8).bit(2, 2), 0}
