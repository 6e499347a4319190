"""
Shared fixtures for the grid, solver, generator and display tests
"""
import pytest

from AsQ_Grid import Grid


# a complete, valid 9 x 9 grid
GRID_9 = ("724913568"
          "519687342"
          "386254197"
          "231479685"
          "467538219"
          "895162734"
          "178345926"
          "943726851"
          "652891473")

PUZZLE_9 = ("..3.2.6.."
            "9..3.5..1"
            "..18.64.."
            "..81.29.."
            "7.......8"
            "..67.82.."
            "..26.95.."
            "8..2.3..9"
            "..5.1.3..")

SOLUTION_9 = ("483921657"
              "967345821"
              "251876493"
              "548132976"
              "729564138"
              "136798245"
              "372689514"
              "814253769"
              "695417382")


@pytest.fixture
def scenario_a():
    """4 x 4 grid with a single blank at row 4, col 4."""
    return Grid.from_matrix([["1", "2", "3", "4"],
                             ["3", "4", "1", "2"],
                             ["2", "1", "4", "3"],
                             ["4", "3", "2", None]])


@pytest.fixture
def full_grid_9():
    """A complete valid 9 x 9 grid."""
    return Grid.from_string(GRID_9)


@pytest.fixture
def puzzle_9():
    """A 9 x 9 puzzle with a unique solution."""
    return Grid.from_string(PUZZLE_9)


@pytest.fixture
def solution_9():
    """The solution of puzzle_9."""
    return Grid.from_string(SOLUTION_9)
