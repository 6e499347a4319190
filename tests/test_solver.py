"""
Tests for the propagation + backtracking solver
"""
import numpy as np
import pytest

from AsQ_Grid import Grid, Puzzle, DisplayVariant
from AsQ_Solver import GridSolver, solve, solve_game


def assert_full_and_valid(grid):
    """Every row, column and box is a permutation of the alphabet."""
    alphabet = set(grid.alphabet)
    symbols = grid.to_matrix()
    n = grid.BASE_NUMBER
    for i in range(grid.DIMENSION):
        assert set(symbols[i, :]) == alphabet
        assert set(symbols[:, i]) == alphabet
    for br in range(0, grid.DIMENSION, n):
        for bc in range(0, grid.DIMENSION, n):
            assert set(symbols[br:br + n, bc:bc + n].flatten()) == alphabet


def assert_keeps_clues(solution, clues):
    given = clues.grid_toArray() != 0
    assert np.array_equal(solution.grid_toArray()[given], clues.grid_toArray()[given])


class TestScenarios:
    """End-to-end scenarios."""

    def test_single_blank(self, scenario_a):
        solution = solve(scenario_a)
        assert solution is not None
        assert solution[4, 4] == "1"
        assert solution.grid_toString() == "1234341221434321"

    def test_duplicate_in_row_makes_unsolvable(self):
        grid = Grid.from_matrix([["1", "2", "3", "4"],
                                 ["3", "4", "1", "2"],
                                 ["2", "1", "4", "3"],
                                 ["1", "1", "2", None]])
        assert solve(grid) is None

    def test_duplicate_in_column_makes_unsolvable(self):
        grid = Grid.from_matrix([["1", "2", "3", "4"],
                                 ["3", "4", "1", "2"],
                                 ["2", "1", "4", "3"],
                                 ["1", "3", "2", None]])
        assert solve(grid) is None

    def test_blank_without_candidates(self):
        # (1, 4) sees 1, 2, 3 in its row and 4 in its column
        grid = Grid.from_string("123." "...4" "...." "....")
        assert not grid.has_conflict()
        assert solve(grid) is None

    def test_classic_puzzle(self, puzzle_9, solution_9):
        assert solve(puzzle_9) == solution_9

    def test_input_is_not_mutated(self, puzzle_9):
        before = puzzle_9.grid_toArray()
        solve(puzzle_9)
        assert np.array_equal(puzzle_9.grid_toArray(), before)


class TestProperties:
    """Invariants of the solver."""

    @pytest.mark.parametrize("n", [2, 3])
    def test_empty_grid_solves_to_valid_grid(self, n):
        solution = solve(Grid(baseNumber=n))
        assert solution is not None
        assert solution.is_valid()
        assert_full_and_valid(solution)

    def test_letters_grid(self):
        n, dimension = 4, 16
        rows, cols = np.indices((dimension, dimension))
        pattern = (n * (rows % n) + rows // n + cols) % dimension + 1
        codes = pattern.copy()
        codes[(rows + cols) % 3 == 0] = 0
        clues = Grid.from_codes(codes, n)
        solution = solve(clues)
        assert solution is not None
        assert_keeps_clues(solution, clues)
        assert_full_and_valid(solution)
        assert set(solution.alphabet) == set("ABCDEFGHIJKLMNOP")

    def test_complete_grid_is_returned_unchanged(self, full_grid_9):
        solver = GridSolver(full_grid_9)
        assert solver.solve() == full_grid_9
        assert solver.stats.branches == 0
        assert solver.stats.forced == 0

    def test_complete_invalid_grid(self, full_grid_9):
        codes = full_grid_9.grid_toArray()
        codes[0, 0], codes[0, 1] = codes[0, 1], codes[0, 0]
        assert solve(Grid.from_codes(codes)) is None

    def test_conflicting_clues_are_unsolvable(self, puzzle_9):
        codes = puzzle_9.grid_toArray()
        codes[0, 0] = codes[0, 2]
        assert solve(Grid.from_codes(codes)) is None

    def test_determinism(self):
        first = solve(Grid(baseNumber=3))
        second = solve(Grid(baseNumber=3))
        assert first == second

    def test_first_branch_follows_alphabet_order(self):
        # MRV picks the first blank; candidates in alphabet order -> '1' first
        solution = solve(Grid(baseNumber=3))
        assert solution[1, 1] == "1"

    def test_solution_keeps_clues(self, puzzle_9):
        solution = solve(puzzle_9)
        assert_keeps_clues(solution, puzzle_9)
        assert_full_and_valid(solution)

    def test_forced_cells_are_never_reverted(self):
        solver = GridSolver(Grid(baseNumber=3), history=True)
        solution = solver.solve()
        placements = solver.history
        assert any(p.forced for p in placements)
        cells = [(p.row, p.col) for p in placements]
        assert len(cells) == len(set(cells))
        assert len(cells) == 81
        for p in placements:
            assert solution[p.row, p.col] == p.symbol

    def test_stats(self, puzzle_9):
        solver = GridSolver(puzzle_9)
        solver.solve()
        assert solver.stats.states >= 1
        assert solver.stats.forced + solver.stats.branches >= 1
        assert solver.solution is not None

    def test_unsolvable_stats_count_dead_end(self):
        solver = GridSolver(Grid.from_string("11.." + "." * 12))
        assert solver.solve() is None
        assert solver.stats.dead_ends == 1


class TestCandidates:
    """Test the candidate computation."""

    def test_candidates_of_single_blank(self, scenario_a):
        solver = GridSolver(scenario_a)
        hr, hc, cands = solver.candidates(scenario_a.grid_toArray())
        assert list(hr) == [3]
        assert list(hc) == [3]
        assert cands.tolist() == [[True, False, False, False]]

    def test_row_major_order(self):
        grid = Grid.from_string("1.2." + "." * 12)
        hr, hc, _ = GridSolver(grid).candidates(grid.grid_toArray())
        assert list(zip(hr, hc))[:3] == [(0, 1), (0, 3), (1, 0)]


class TestSolveGame:
    """Test the game-level wrapper."""

    def test_keeps_clues(self, scenario_a):
        game = solve_game(scenario_a)
        assert isinstance(game, Puzzle)
        assert game.variant is DisplayVariant.SOLVED
        assert game.clues == scenario_a
        assert game.grid[4, 4] == "1"

    def test_solved_puzzle_keeps_original_clues(self, scenario_a):
        game = solve_game(solve_game(scenario_a))
        assert game.clues == scenario_a

    def test_unsolvable(self):
        assert solve_game(Grid.from_string("11.." + "." * 12)) is None
