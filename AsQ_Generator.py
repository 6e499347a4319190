#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AltSudoQ_Generator

Random games: seed a sparse grid, let the solver complete it,
then blank out cells.

Created on Sun Oct 18 14:51:09 2026

@author: alexanderpfaff
"""

from __future__ import annotations
import logging
import math
import numpy as np
from dataclasses import dataclass
from typing import Optional
from tqdm import tqdm

from utilFunX import VALID_BASENUMBERS
from AsQ_Grid import Grid
from AsQ_Solver import GridSolver


logger = logging.getLogger(__name__)



class GenerationFailed(RuntimeError):
    """Raised when no full grid could be produced within max_attempts."""



def _is_integer(x) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def _check_basenumber(n) -> int:
    if not _is_integer(n) or n not in VALID_BASENUMBERS:
        raise ValueError("n must be a single integer between 2 and 5 inclusive")
    return int(n)


def default_gaps(n: int) -> int:
    """ default number of cells to blank: ceiling(2 * n**4 / 3) """
    return math.ceil(2 * n**4 / 3)



@dataclass
class GameConfig:
    """
    Generation parameters:
        base_number  -- puzzle size n (2 - 5), grid side n**2
        gaps         -- number of cells to blank; default ceiling(2 n**4 / 3)
        max_attempts -- how often to seed & solve before giving up
        seed         -- random seed for reproducibility
    """
    base_number: int = 3
    gaps: Optional[int] = None
    max_attempts: int = 5
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.base_number = _check_basenumber(self.base_number)
        if self.gaps is None:
            self.gaps = default_gaps(self.base_number)
        if not _is_integer(self.gaps) or not (0 <= self.gaps <= self.base_number**4):
            raise ValueError(f"gaps must lie within 0 - {self.base_number**4}; submitted: {self.gaps}")
        if not _is_integer(self.max_attempts) or self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1; submitted: {self.max_attempts}")



def seed_game(n: int = 3, rng: Optional[np.random.Generator] = None) -> Grid:
    """
    Generates a sparse starting grid: one instance of each symbol
    at random (distinct) positions, all other cells blank.
    """
    n = _check_basenumber(n)
    if rng is None:
        rng = np.random.default_rng()
    dimension = n**2
    codes = np.zeros(dimension**2, dtype=np.int8)
    positions = rng.choice(dimension**2, size=dimension, replace=False)
    codes[positions] = np.arange(1, dimension + 1)
    return Grid.from_codes(codes, n)



class GameGenerator:
    """
    Builds a full grid by solving random seed grids (up to max_attempts
    times), then removes `gaps` random cells.
    """

    def __init__(self, config: Optional[GameConfig] = None, progress: bool = False) -> None:
        self.config: GameConfig = config if config is not None else GameConfig()
        self._progress: bool = progress
        self._rng: np.random.Generator = np.random.default_rng(self.config.seed)
        self._solved: Optional[Grid] = None

    def __repr__(self) -> str:
        return "<class 'GameGenerator'>"

    @property
    def solved(self) -> Optional[Grid]:
        """ the full grid behind the last generated game """
        return self._solved


    def _full_grid(self) -> Grid:
        attempts = range(1, self.config.max_attempts + 1)
        if self._progress:
            attempts = tqdm(attempts, desc=f"Generating {self.config.base_number**2} X {self.config.base_number**2} grid")
        for attempt in attempts:
            solved = GridSolver(seed_game(self.config.base_number, self._rng)).solve()
            if solved is not None:
                logger.info("Full grid found on attempt %d/%d", attempt, self.config.max_attempts)
                return solved
            logger.warning("Seed grid unsolvable (attempt %d/%d)", attempt, self.config.max_attempts)
        raise GenerationFailed(f"Maximum number of tries exceeded ({self.config.max_attempts}).")


    def generate(self) -> Grid:
        """
        Generates a playable game.

        Returns
        -------
        Grid
            The full grid with `gaps` randomly chosen cells blanked.
            No uniqueness of the solution is guaranteed.

        Raises
        ------
        GenerationFailed
            If no seed grid could be solved within max_attempts.
        """
        self._solved = self._full_grid()
        codes = self._solved.grid_toArray((self._solved.SIZE,))
        holes = self._rng.choice(codes.size, size=self.config.gaps, replace=False)
        codes[holes] = 0
        return Grid.from_codes(codes, self.config.base_number)



def make_game(n: int = 3,
              gaps: Optional[int] = None,
              max_attempts: int = 5,
              seed: Optional[int] = None,
              progress: bool = False) -> Grid:
    """
    Make a new random game of size n**2 x n**2.

    Parameters
    ----------
    n : int, optional
        Base number 2 - 5 (n = 5 can be slow). Default is 3.
    gaps : int, optional
        Number of blank cells; default ceiling(2 n**4 / 3).
    max_attempts : int, optional
        Number of seed & solve attempts before giving up. Default is 5.
    seed : int, optional
        Random seed for reproducibility. Default is None.
    progress : bool
        Show a progress bar over the attempts.

    Returns
    -------
    Grid
    """
    config = GameConfig(base_number=n, gaps=gaps, max_attempts=max_attempts, seed=seed)
    return GameGenerator(config, progress=progress).generate()




intro = ("\n\n\t\t====================================================\n"
         "\t\t*                                                  * \n"
         "\t\t*                   ALT_SUDO_Q                     * \n"
         "\t\t*                                                  * \n"
         "\t\t*       Grids of 4, 9, 16 and 25 symbols:          * \n"
         "\t\t*       generate, validate, solve and show         * \n"
         "\t\t*                                                  * \n"
         "\t\t==================================================== ")



if __name__ == '__main__':
    from AsQ_Display import print_game
    from AsQ_Solver import solve_game
    print(intro)
    game = make_game(3, seed=1234)
    print_game(game)
    print_game(solve_game(game))
