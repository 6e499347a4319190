#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AltSudoQ_Display

Textual and graphical presentation of games; a solved game (with its clues)
shows clue cells and solver-filled cells distinguishably.

Created on Sun Oct 18 19:12:30 2026

@author: alexanderpfaff
"""

from __future__ import annotations
from typing import Optional, Tuple, Union

import numpy as np
from matplotlib.figure import Figure

from AsQ_Grid import Grid, Puzzle, DisplayVariant


GameLike = Union[Grid, Puzzle]



def _unpack(game: GameLike, clues: Optional[Grid] = None) -> Tuple[Grid, np.ndarray, DisplayVariant]:
    """
    aux-method
    Returns (grid, filled, variant); filled marks the solver-filled cells.
    A Puzzle brings its own clues.
    """
    if isinstance(game, Puzzle):
        grid = game.grid
        if clues is None:
            clues = game.clues
    else:
        grid = game
    if clues is not None and clues.DIMENSION != grid.DIMENSION:
        raise ValueError(f"Clue grid ({clues.DIMENSION} X {clues.DIMENSION}) does not match "
                         f"the game ({grid.DIMENSION} X {grid.DIMENSION})")
    puzzle = Puzzle(grid, clues)
    return grid, puzzle.filled_mask(), puzzle.variant



def render_text(game: GameLike, clues: Optional[Grid] = None) -> str:
    """
    Renders a game as text with block borders every n rows / columns:

        +------+------+
        | 1  2 | 3  4 |
        | 3  4 |    2 |
        +------+------+
        ...

    Blanks are empty cells. In the SOLVED variant (clues given, or a solved
    Puzzle) clue cells appear as [s] and solver-filled cells as plain s.

    Parameters
    ----------
    game : Grid or Puzzle
    clues : Grid, optional
        The original clue grid; overrides the clues of a Puzzle.

    Returns
    -------
    str
    """
    grid, filled, variant = _unpack(game, clues)
    n = grid.BASE_NUMBER
    symbols = grid.to_matrix()
    if variant is DisplayVariant.SOLVED:
        clue_mask = (symbols != "") & ~filled
    else:
        clue_mask = np.zeros(symbols.shape, dtype=bool)

    def token(i: int, j: int) -> str:
        sym = symbols[i, j]
        if not sym:
            return "   "
        if clue_mask[i, j]:
            return f"[{sym}]"
        return f" {sym} "

    border = "+" + "+".join(["-" * (3*n)] * n) + "+"
    lines = [border]
    for i in range(grid.DIMENSION):
        blocks = ("".join(token(i, j) for j in range(d*n, (d+1)*n))
                  for d in range(n))
        lines.append("|" + "|".join(blocks) + "|")
        if (i+1) % n == 0:
            lines.append(border)
    return "\n".join(lines)


def print_game(game: Optional[GameLike]) -> Optional[GameLike]:
    """ prints a game (or notes an unsolvable one); returns it """
    if game is None:
        print("No solution.")
    else:
        print(render_text(game))
    return game



def plot_game(game: GameLike,
              clues: Optional[Grid] = None,
              cex: Optional[float] = None,
              col_solution: str = "grey",
              col_game: str = "firebrick",
              path: Optional[str] = None,
              size: float = 6.0) -> Figure:
    """
    Graphical display of a game and, if solved, its solution.

    Parameters
    ----------
    game : Grid or Puzzle
    clues : Grid, optional
        The original clue grid; overrides the clues of a Puzzle.
    cex : float, optional
        Character expansion; default 2 - (n-3)/2 (shrinks with the grid).
    col_solution : str
        Colour of solver-filled symbols.
    col_game : str
        Colour of the original game's symbols (drawn bold).
    path : str, optional
        If given, the figure is saved there.
    size : float
        Figure width = height in inches.

    Returns
    -------
    Figure
    """
    grid, filled, _ = _unpack(game, clues)
    n = grid.BASE_NUMBER
    dimension = grid.DIMENSION
    if cex is None:
        cex = 2 - (n-3)/2

    fig = Figure(figsize=(size, size))
    ax = fig.add_axes([0.01, 0.01, 0.98, 0.98])
    ax.set_xlim(0, dimension)
    ax.set_ylim(0, dimension)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_aspect("equal")

    for k in range(dimension + 1):
        thick = k % n == 0
        style = dict(color="black", linestyle="-" if thick else ":", linewidth=2 if thick else 0.5)
        ax.axhline(k, **style)
        ax.axvline(k, **style)

    symbols = grid.to_matrix()

    for i in range(dimension):
        for j in range(dimension):
            if not symbols[i, j]:
                continue
            ax.text(j + 0.5, dimension - i - 0.5, symbols[i, j],
                    ha="center", va="center", fontsize=12 * cex,
                    color=col_solution if filled[i, j] else col_game,
                    fontweight="normal" if filled[i, j] else "bold")

    if path is not None:
        fig.savefig(path)
    return fig
