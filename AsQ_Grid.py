#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
AltSudoQ_Grid

Grids of side N = n**2 (n = 2..5), the four-coordinate system
and the validity check.

Created in October 2026

@author: AlexPfaff

"""

from __future__ import annotations
import numpy as np
from typing import Optional, List, Tuple, Union, Iterator
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum

from utilFunX import (InvalidDimension, SequenceLike, alphabet_for, _infer_basenumber,
                      _str_toSeq, _tokens_toCodes, _matrix_toCodes, _is_validgrid)

# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *
# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

Coord = Tuple[int, int]


@dataclass
class Cell:
    """
    Minimal unit of a grid structure; contains the actual value and
    the grid coordinates:
        run -- running number
        row -- row number
        col -- column number
        box -- box number
        a   -- row within the box
        b   -- box row   (row = a + n*(b-1))
        c   -- column within the box
        d   -- box column (col = c + n*(d-1))

    """
    run: int
    row: int
    col: int
    box: int
    a: int
    b: int
    c: int
    d: int
    val: Optional[str] = None


class DisplayVariant(Enum):
    """ how a game is to be presented """
    PLAIN = "plain"
    SOLVED = "solved"


# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

def _unit_views(codes: np.ndarray, basenumber: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    aux-method
    Returns the rows, columns and boxes of a code grid, each as (N, N) array
    (one neighbourhood per line). The 4D view has axes [b, a, d, c]:
        block  -> fixed (b, d)
        row    -> fixed (a, b)
        column -> fixed (c, d)
    """
    n = basenumber
    dimension = n**2
    four = codes.reshape(n, n, n, n)
    rows = four.reshape(dimension, dimension)
    cols = four.transpose(2, 3, 0, 1).reshape(dimension, dimension)
    boxes = four.transpose(0, 2, 1, 3).reshape(dimension, dimension)
    return rows, cols, boxes


def _unit_counts(units: np.ndarray, dimension: int) -> np.ndarray:
    """ (units, N) -> (units, N) occurrence counts of the codes 1..N per unit """
    return (units[:, :, None] == np.arange(1, dimension + 1)).sum(axis=1)


def _codes_of(grid: Union[Grid, np.ndarray]) -> Tuple[np.ndarray, int]:
    if isinstance(grid, Grid):
        return grid._arrayGrid, grid.BASE_NUMBER
    codes = np.asarray(grid)
    dimension = codes.shape[0] if codes.ndim == 2 else round(codes.size ** 0.5)
    return codes.reshape(dimension, dimension), _infer_basenumber(dimension)


def has_conflict(grid: Union[Grid, np.ndarray]) -> bool:
    """
    Checks whether any block, row, or column contains the same non-blank
    symbol twice; blanks (code 0) are ignored.

    Parameters
    ----------
    grid : Grid or np.ndarray
        A Grid or an (N, N) code array (0 = blank).

    Returns
    -------
    bool
        True if some neighbourhood holds a duplicate.
    """
    codes, basenumber = _codes_of(grid)
    units = np.concatenate(_unit_views(codes, basenumber))
    return bool((_unit_counts(units, basenumber**2) > 1).any())


# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *
# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

class Grid:
    """
        Provides a (baseNumber x baseNumber) X (baseNumber x baseNumber) grid,
        baseNumber = 2, 3, 4 or 5 (default 3 ==> classical 9 X 9 Sudoku);
        cells hold a symbol of the alphabet or are blank.

        The constructor generates a base grid (baseGrid), a coordinate system of
        Cell objects enumerated over the four coordinates (b, a, d, c), which
        amounts to running numbers from top-left to bottom-right:
           -- row = a + n*(b-1),
           -- col = c + n*(d-1),
           -- box = d + n*(b-1).

           An illustration (n = 2); the cell holding 'x':

                *****************
                * . | . * . | . *
                *-------*-------*
                * . | . * . | . *
                *****************
                * . | . * . | x *
                *-------*-------*
                * . | . * . | . *
                *****************

               has row 3, col 4 <==> (a, b, c, d) = (1, 2, 2, 2), box 4.

           Internally the values are stored as integer codes (self._arrayGrid):
           0 = blank, k = k-th symbol of the alphabet.
           The alphabet is '1'..'N' for n <= 3, 'A'.. for n = 4, 5.
    """

    def __init__(self, baseNumber: int = 3):
        self.__ALPHABET: Tuple[str] = alphabet_for(baseNumber)
        self.__BASE_NUMBER: int = baseNumber
        self.__DIMENSION: int = baseNumber**2
        self.__SIZE: int = baseNumber**4
        n = baseNumber
        """ Algorithm to calculate the grid coordinates. """
        self._baseGrid: Tuple[Cell] = tuple(
            Cell(run=self.DIMENSION*(n*b + a) + n*d + c + 1,
                 row=n*b + a + 1,
                 col=n*d + c + 1,
                 box=n*b + d + 1,
                 a=a + 1, b=b + 1, c=c + 1, d=d + 1)
            for b in range(n)
            for a in range(n)
            for d in range(n)
            for c in range(n)
            )
        self._arrayGrid = np.zeros(shape=(self.DIMENSION, self.DIMENSION), dtype=np.int8)


    def __str__(self) -> str:
        """Returns a human-readable summary of the current grid state."""
        return (
            f"Grid[\n"
            f"  base number     : {self.BASE_NUMBER}  \n"
            f"   -> dimension   : {self.DIMENSION}\t\t ( = {self.BASE_NUMBER} x {self.BASE_NUMBER} ) \n"
            f"   -> size        : {self.SIZE}\t\t ( = {self.DIMENSION} X {self.DIMENSION} ) \n"
            f"  blanks          : {self.blanks()}\n"
            f"  has conflict    : {self.has_conflict()}\n"
            f"  is valid        : {self.is_valid()}\n"
            f"]"
        )

    def __repr__(self) -> str:
        return "<class 'Grid'>"

    def __eq__(self, other: Grid) -> bool:
        """Checks strict equality based on grid array contents."""
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._arrayGrid, other._arrayGrid)

    def __hash__(self) -> int:
        return hash(tuple(self._arrayGrid.flatten().tolist()))

    def __getitem__(self, idx: Union[int, Coord]) -> Optional[str]:
        """ grid[run] or grid[row, col] (1-based); None for a blank cell """
        if isinstance(idx, tuple):
            row, col = idx
            self._check_range(row, col)
            code = self._arrayGrid[row-1, col-1]
        else:
            if idx < 1 or idx > self.SIZE:
                raise ValueError(f"Invalid running number (choose 1 - {self.SIZE})")
            code = self._arrayGrid.flat[idx-1]
        return self.ALPHABET[code-1] if code else None

    def __iter__(self) -> Iterator:
        return iter(self.to_matrix().flatten())


    @property
    def BASE_NUMBER(self):
        return self.__BASE_NUMBER

    @property
    def DIMENSION(self):
        return self.__DIMENSION

    @property
    def SIZE(self):
        return self.__SIZE

    @property
    def ALPHABET(self) -> Tuple[str]:
        return self.__ALPHABET

    @property
    def alphabet(self) -> Tuple[str]:
        return self.__ALPHABET

    @property
    def baseGrid(self):
        return self._baseGrid[:]


# * * * * * * * * * * * * * *  INVENTORY  * * * * * * * * * * * * * * * * * * *

    """ 0.    CONSTRUCT a GRID """

    @classmethod
    def from_matrix(cls, matrix: SequenceLike) -> Grid:
        """
        Class method to instantiate a Grid object from a matrix of tokens.

        Parameters
        ----------
        matrix : SequenceLike
            Rectangular N x N container (list of lists, list of strings,
            2D np.ndarray) of tokens; tokens are compared as strings.

        Returns
        -------
        Grid

        Raises
        ------
        InvalidDimension
            If the matrix is ragged, not square, or N is not in (4, 9, 16, 25).

        Notes
        -----
        Any token outside the alphabet (None, '', '0', '.', 'x', ...) becomes blank;
        this is never an error.
        """
        codes, basenumber = _matrix_toCodes(matrix)
        return cls.from_codes(codes, basenumber)


    @classmethod
    def from_string(cls, grid_str: str) -> Grid:
        """
        Class method to instantiate a Grid from a row-wise string of
        N**2 characters (whitespace is ignored), e.g. "12.434.1........".
        """
        seq = _str_toSeq(grid_str)
        dimension = round(seq.size ** 0.5)
        if dimension**2 != seq.size:
            raise InvalidDimension(f"String of {seq.size} cells cannot form a square grid.")
        basenumber = _infer_basenumber(dimension)
        codes = _tokens_toCodes(seq.tolist(), alphabet_for(basenumber))
        return cls.from_codes(codes, basenumber)


    @classmethod
    def from_codes(cls, codes: np.ndarray, basenumber: Optional[int] = None) -> Grid:
        """ instantiates a Grid from an integer code array (0 = blank) """
        codes = np.asarray(codes)
        if basenumber is None:
            basenumber = _infer_basenumber(round(codes.size ** 0.5))
        g = cls(baseNumber=basenumber)
        if codes.size != g.SIZE:
            raise InvalidDimension(f"The array submitted does not contain the required number of cells: {g.SIZE}")
        if codes.min() < 0 or codes.max() > g.DIMENSION:
            raise ValueError(f"Codes must lie within 0 - {g.DIMENSION}")
        g._quick_insert(codes)
        return g


    def _quick_insert(self, arr: np.ndarray) -> None:
        self._arrayGrid = np.array(arr, dtype=np.int8).reshape(self.DIMENSION, self.DIMENSION)
        flat = self._arrayGrid.flatten()
        for cell in self._baseGrid:
            code = flat[cell.run-1]
            cell.val = self.ALPHABET[code-1] if code else None


    def copy(self) -> Grid:
        return Grid.from_codes(self._arrayGrid, self.BASE_NUMBER)


    def blanks(self) -> int:
        """ number of blank cells """
        return int((self._arrayGrid == 0).sum())

    def is_complete(self) -> bool:
        """Return True if grid contains no blanks."""
        return not (0 in self._arrayGrid)



    """ A.    VISUAL """

    def showFrame(self) -> None:
        """prints the current grid (= baseGrid) as a sequence of coordinates """
        for cell in self._baseGrid:
            outStr: str = f'run: {cell.run:3};   '  \
                + f'row: {cell.row:2};   '          \
                + f'col: {cell.col:2};   '          \
                + f'box: {cell.box:2};   '          \
                + f'(a, b, c, d): ({cell.a}, {cell.b}, {cell.c}, {cell.d});   '  \
                + f'value: {cell.val if cell.val else "-"} '
            print(outStr)

    def showGrid(self) -> None:
        """prints out the current grid as Sudoku grid """
        from AsQ_Display import render_text
        print(render_text(self))



    """ B.    VALUES / COORDINATES """

    def _check_range(self, row: int, col: int) -> None:
        if not (1 <= row <= self.DIMENSION and 1 <= col <= self.DIMENSION):
            raise ValueError(f"Invalid cell ({row}, {col}) (choose 1 - {self.DIMENSION})")

    def to_coords(self, row: int, col: int) -> Tuple[int, int, int, int]:
        """
        Converts linear (row, col) into the four coordinates (a, b, c, d)
        with row = a + n*(b-1) and col = c + n*(d-1); all 1-based.
        """
        self._check_range(row, col)
        n = self.BASE_NUMBER
        return (row-1) % n + 1, (row-1) // n + 1, (col-1) % n + 1, (col-1) // n + 1

    def from_coords(self, a: int, b: int, c: int, d: int) -> Coord:
        """ inverse of to_coords """
        n = self.BASE_NUMBER
        if not all(1 <= x <= n for x in (a, b, c, d)):
            raise ValueError(f"Invalid coordinates ({a}, {b}, {c}, {d}) (choose 1 - {n})")
        return a + n*(b-1), c + n*(d-1)

    def getRun(self, row: int, col: int) -> int:
        """ calculates the running number from row number and column number """
        self._check_range(row, col)
        return (row-1) * self.DIMENSION + col

    def getCell(self, row: int, col: int) -> Cell:
        """ returns (a copy of) the cell at (row, col) """
        return deepcopy(self._baseGrid[self.getRun(row, col) - 1])


    def rowCells(self, row: int, col: int) -> List[Coord]:
        """ row neighbourhood: fixed (a, b), varying (c, d) """
        a, b, _, _ = self.to_coords(row, col)
        n = self.BASE_NUMBER
        return [self.from_coords(a, b, c, d) for d in range(1, n+1) for c in range(1, n+1)]

    def colCells(self, row: int, col: int) -> List[Coord]:
        """ column neighbourhood: fixed (c, d), varying (a, b) """
        _, _, c, d = self.to_coords(row, col)
        n = self.BASE_NUMBER
        return [self.from_coords(a, b, c, d) for b in range(1, n+1) for a in range(1, n+1)]

    def boxCells(self, row: int, col: int) -> List[Coord]:
        """ block neighbourhood: fixed (b, d), varying (a, c) """
        _, b, _, d = self.to_coords(row, col)
        n = self.BASE_NUMBER
        return [self.from_coords(a, b, c, d) for a in range(1, n+1) for c in range(1, n+1)]


    def gridRow(self, r: int) -> np.ndarray:
        """ returns the symbols in row r as array """
        if r < 1 or r > self.DIMENSION:
            raise ValueError(f"Invalid row number (choose 1 - {self.DIMENSION})")
        return self.to_matrix()[r-1, :]

    def gridCol(self, c: int) -> np.ndarray:
        """ returns the symbols in column c as array """
        if c < 1 or c > self.DIMENSION:
            raise ValueError(f"Invalid column number (choose 1 - {self.DIMENSION})")
        return self.to_matrix()[:, c-1]

    def gridBox(self, k: int) -> np.ndarray:
        """
        Returns the symbols in box k as (flattened) array;
        in order to re-box-ify: .gridBox(k).reshape(basenumber, basenumber)
        """
        if k < 1 or k > self.DIMENSION:
            raise ValueError(f"Invalid box number (choose 1 - {self.DIMENSION})")
        _, _, boxes = _unit_views(self.to_matrix(), self.BASE_NUMBER)
        return boxes[k-1].copy()


    def grid_toArray(self, shape=None) -> np.ndarray:
        """
        returns the current grid as a numpy array of codes (0 = blank);

        Parameter
        ----------
        shape : Tuple[int]
            must be reshapeable in accordance with self.SIZE;
            default: (DIMENSION, DIMENSION).

        """
        if shape is None:
            shape = (self.DIMENSION, self.DIMENSION)
        return self._arrayGrid.copy().reshape(shape)

    def to_matrix(self) -> np.ndarray:
        """ returns the current grid as (N, N) array of symbols; '' for blanks """
        symbols = np.array(("",) + self.ALPHABET, dtype='<U1')
        return symbols[self._arrayGrid]

    def grid_toString(self, blank: str = ".") -> str:
        """ row-wise string representation; inverse of Grid.from_string """
        return "".join(sym if sym else blank for sym in self.to_matrix().flatten())



    """ C.    CHECK the GRID   """

    def has_conflict(self) -> bool:
        """
        Checks whether the current grid violates the rules so far:
        some symbol occurs more than once in a row, column, or box.
        Blanks are ignored.
        """
        return has_conflict(self)


    def conflict_pos(self) -> Tuple[bool, Optional[Coord]]:
        """
        Locates the first violation (rows, then columns, then boxes).

        Returns
        -------
        (False, None) if there is no conflict.
        (True, (row, col)) of the first cell holding a duplicated symbol (1-based).
        """
        dimension = self.DIMENSION
        # cell positions (0 .. SIZE-1) laid out like the values of each unit
        positions = np.arange(self.SIZE).reshape(dimension, dimension)
        unit_index = np.arange(dimension)[:, None]

        for units, places in zip(_unit_views(self._arrayGrid, self.BASE_NUMBER),
                                 _unit_views(positions, self.BASE_NUMBER)):
            # column 0 counts the blanks as "never duplicated"
            counts = np.hstack([np.zeros((dimension, 1), dtype=int),
                                _unit_counts(units, dimension)])
            duplicated = counts[unit_index, units] > 1
            if duplicated.any():
                u = int(np.argmax(duplicated.any(axis=1)))
                k = int(np.argmax(duplicated[u]))
                run = int(places[u, k])
                return True, (run // dimension + 1, run % dimension + 1)

        return False, None


    def is_valid(self) -> bool:
        """
        Checks whether the current grid is completely filled
        and valid: each symbol occurs exactly once in every row, column, and box.
        """
        return _is_validgrid(self._arrayGrid, basenumber=self.BASE_NUMBER)



# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

@dataclass
class Puzzle:
    """
    A grid plus, once solved, the original clue grid; the clues only serve
    presentation (clues vs. solver-filled cells).
    """
    grid: Grid
    clues: Optional[Grid] = None

    @property
    def variant(self) -> DisplayVariant:
        return DisplayVariant.PLAIN if self.clues is None else DisplayVariant.SOLVED

    @property
    def BASE_NUMBER(self) -> int:
        return self.grid.BASE_NUMBER

    def filled_mask(self) -> np.ndarray:
        """ (N, N) bool array: True where the solver filled a blank clue cell """
        if self.clues is None:
            return np.zeros((self.grid.DIMENSION, self.grid.DIMENSION), dtype=bool)
        return (self.clues.grid_toArray() == 0) & (self.grid.grid_toArray() != 0)
