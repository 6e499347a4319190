#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AltSudoQ_Solver

Constraint propagation (forced singles) with depth-first backtracking
on the cell with the minimum remaining values.

Created on Sun Oct 18 10:02:37 2026

@author: alexanderpfaff
"""

from __future__ import annotations
import logging
import time
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from AsQ_Grid import Grid, Puzzle, has_conflict, _unit_views, _unit_counts


logger = logging.getLogger(__name__)

# a search state: (owned code array, depth, trail of placements or None)
_State = Tuple[np.ndarray, int, Optional[List["Placement"]]]



@dataclass
class Placement:
    """ one cell filled on the solution path; 1-based coordinates """
    row: int
    col: int
    symbol: str
    forced: bool
    depth: int


@dataclass
class SolverStats:
    states: int = 0
    propagations: int = 0
    forced: int = 0
    branches: int = 0
    dead_ends: int = 0
    max_depth: int = 0
    duration_ms: int = 0



class GridSolver:
    """
    Deterministic solver for grids of base number 2 - 5.

    Each search state runs forced-single propagation until it either dies
    (conflict / a blank without candidates), completes, or needs a guess;
    guesses are made on the first blank with the fewest candidates (row-major
    scan), trying candidates in alphabet order.

    The depth-first search runs on an explicit LIFO stack of owned code
    array snapshots rather than on the call stack, so 25 x 25 grids with
    up to 625 blanks do not hit the recursion limit. Children are pushed in
    reverse alphabet order and therefore popped in alphabet order, which
    reproduces the recursive visiting order exactly.
    """

    def __init__(self, grid: Union[Grid, Puzzle], history: bool = False) -> None:
        if isinstance(grid, Puzzle):
            grid = grid.grid
        self._grid: Grid = grid
        self._history: bool = history
        self.__BASE_NUMBER: int = grid.BASE_NUMBER
        self.__DIMENSION: int = grid.DIMENSION

        rows, cols = np.indices((self.DIMENSION, self.DIMENSION))
        self._boxIndex: np.ndarray = (rows // self.BASE_NUMBER) * self.BASE_NUMBER + cols // self.BASE_NUMBER

        self.stats = SolverStats()
        self.history: Optional[List[Placement]] = None
        self._solution: Optional[Grid] = None


    def __repr__(self) -> str:
        return "<class 'GridSolver'>"

    @property
    def BASE_NUMBER(self):
        return self.__BASE_NUMBER

    @property
    def DIMENSION(self):
        return self.__DIMENSION

    @property
    def solution(self) -> Optional[Grid]:
        return self._solution


    def candidates(self, codes: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Candidate sets of all blank cells.

        Parameters
        ----------
        codes : np.ndarray
            (N, N) code array, 0 = blank.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            Row indices and column indices of the blanks (0-based, row-major),
            and a (blanks, N) bool matrix: True where code k+1 is still possible.
        """
        rows, cols, boxes = _unit_views(codes, self.BASE_NUMBER)
        row_has = _unit_counts(rows, self.DIMENSION) > 0
        col_has = _unit_counts(cols, self.DIMENSION) > 0
        box_has = _unit_counts(boxes, self.DIMENSION) > 0

        hr, hc = np.nonzero(codes == 0)
        used = row_has[hr] | col_has[hc] | box_has[self._boxIndex[hr, hc]]
        return hr, hc, ~used


    def _place(self, row: int, col: int, code: int, forced: bool, depth: int) -> Placement:
        return Placement(row=int(row) + 1, col=int(col) + 1,
                         symbol=self._grid.ALPHABET[int(code) - 1],
                         forced=forced, depth=depth)


    def _expand(self, codes: np.ndarray, depth: int,
                trail: Optional[List[Placement]]) -> Optional[List[_State]]:
        """
        Propagates forced singles on `codes` (in place).

        Returns
        -------
        None  -- dead state (conflict or a blank without candidates)
        []    -- the state is complete
        [..]  -- child states, one per candidate of the MRV cell, in alphabet order
        """
        if has_conflict(codes):
            return None

        while (codes == 0).any():
            hr, hc, cands = self.candidates(codes)
            counts = cands.sum(axis=1)
            if (counts == 0).any():
                return None

            forced = counts == 1
            if forced.any():
                values = cands[forced].argmax(axis=1) + 1
                codes[hr[forced], hc[forced]] = values
                self.stats.propagations += 1
                self.stats.forced += int(forced.sum())
                if trail is not None:
                    trail.extend(self._place(r, c, v, True, depth)
                                 for r, c, v in zip(hr[forced], hc[forced], values))
                # two singles in one unit may have been forced to the same symbol
                if has_conflict(codes):
                    return None
                continue

            m = int(np.argmin(counts))
            row, col = hr[m], hc[m]
            self.stats.branches += 1
            logger.debug("Branch on r%dc%d with %d candidates (depth %d)",
                         row + 1, col + 1, counts[m], depth)
            children: List[_State] = []
            for value in np.flatnonzero(cands[m]) + 1:
                child = codes.copy()
                child[row, col] = value
                child_trail = None
                if trail is not None:
                    child_trail = trail + [self._place(row, col, value, False, depth + 1)]
                children.append((child, depth + 1, child_trail))
            return children

        return []


    def solve(self) -> Optional[Grid]:
        """
        Fills all blanks of the grid.

        Returns
        -------
        Grid or None
            The solved grid (a new object), or None if no completion exists
            (Unsolvable). None is an ordinary result, never an exception.
        """
        start = time.time()
        self.stats = SolverStats()
        self._solution = None

        stack: List[_State] = [(self._grid.grid_toArray(), 0, [] if self._history else None)]
        while stack:
            codes, depth, trail = stack.pop()
            self.stats.states += 1
            self.stats.max_depth = max(self.stats.max_depth, depth)

            children = self._expand(codes, depth, trail)
            if children is None:
                self.stats.dead_ends += 1
                logger.debug("Dead end at depth %d; backtracking", depth)
                continue
            if not children:
                self._solution = Grid.from_codes(codes, self.BASE_NUMBER)
                self.history = trail
                break
            stack.extend(reversed(children))

        self.stats.duration_ms = int((time.time() - start) * 1000)
        logger.info("Solve %s in %d ms: %d states, %d branches, %d dead ends, %d cells forced",
                    "succeeded" if self._solution is not None else "failed",
                    self.stats.duration_ms, self.stats.states, self.stats.branches,
                    self.stats.dead_ends, self.stats.forced)
        return self._solution



def solve(grid: Union[Grid, Puzzle]) -> Optional[Grid]:
    """ solves a grid; returns None if it has no solution """
    return GridSolver(grid).solve()


def solve_game(game: Union[Grid, Puzzle]) -> Optional[Puzzle]:
    """
    Solves a game and keeps the original clues along with the solution,
    for presentation purposes.

    Returns
    -------
    Puzzle or None
        Puzzle(grid=solution, clues=original clue grid), None if unsolvable.
    """
    if isinstance(game, Puzzle):
        clues = game.clues if game.clues is not None else game.grid
    else:
        clues = game
    solution = GridSolver(game).solve()
    if solution is None:
        return None
    return Puzzle(grid=solution, clues=clues.copy())
