#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 21:40:12 2026

@author: alexanderpfaff
"""

import numpy as np
from typing import Optional, Tuple, TypeVar, Union, Sequence, Iterable



V = TypeVar('V', str, int)

# Allows string input for convenience (e.g. "12.4..13"), parsed via _str_toSeq
SequenceLike = Union[Sequence[V], np.ndarray]

VALID_BASENUMBERS: Tuple[int] = (2, 3, 4, 5)



class InvalidDimension(ValueError):
    """Raised when a grid is not N x N with N = n**2 for n in 2..5."""



def alphabet_for(basenumber: int) -> Tuple[str]:
    """
    Returns the ordered symbol set for grids of base number n;
    digits '1'..'N' for n <= 3, capital letters 'A'.. for n = 4, 5.
    The ordering is significant: it determines the branch order of the solver.
    """
    if basenumber not in VALID_BASENUMBERS:
        raise InvalidDimension(f"Base number {basenumber} not supported (choose 2 - 5)")
    dimension = basenumber**2
    if basenumber <= 3:
        return tuple(str(i) for i in range(1, dimension + 1))
    return tuple(chr(i) for i in range(65, 65 + dimension))



def _infer_basenumber(dimension: int) -> int:
    """ infers n from the side length N = n**2 of the grid """
    base = round(dimension ** 0.5)
    if base**2 != dimension or base not in VALID_BASENUMBERS:
        raise InvalidDimension(f"Grid side {dimension} is not a valid dimension (choose 4, 9, 16 or 25).")
    return base



def _str_toSeq(grid_str: str) -> np.ndarray:
    """
    Converts a grid string to a (flat) sequence of single-character tokens.

    Parameters
    ----------
    grid_str : str
        Row-wise string of N**2 characters; blanks may be given as any
        character outside the alphabet (e.g. '.' or '0').

    Returns
    -------
    np.ndarray
        Array of dtype '<U1'.

    """
    grid_str = "".join(grid_str.split())
    return np.array(list(grid_str), dtype='<U1')



def _tokens_toCodes(tokens: Iterable, alphabet: Sequence[str]) -> np.ndarray:
    """
    aux-method
    Translates tokens into integer codes: k for the k-th symbol of the
    alphabet (1-based), 0 for anything else (None, '', out-of-alphabet).
    """
    lookup = {sym: idx for idx, sym in enumerate(alphabet, start=1)}
    return np.array([0 if tok is None else lookup.get(str(tok), 0)
                     for tok in tokens],
                    dtype=np.int8)



def _matrix_toCodes(matrix: SequenceLike) -> Tuple[np.ndarray, int]:
    """
    Coerces a rectangular matrix of tokens into an (N, N) code array.

    Returns
    -------
    Tuple[np.ndarray, int]
        The code array and the inferred base number.

    Raises
    ------
    InvalidDimension
        If the matrix is ragged, not square or its side is not 4, 9, 16, 25.
    """
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise InvalidDimension(f"Expected a 2D matrix; submitted shape: {matrix.shape}")
        rows = [list(r) for r in matrix]
    else:
        try:
            rows = [list(r) for r in matrix]
        except TypeError:
            raise InvalidDimension("Expected a matrix (sequence of rows)")

    dimension = len(rows)
    if any(len(r) != dimension for r in rows):
        raise InvalidDimension("Grid must be square: every row needs exactly as many cells as there are rows.")
    basenumber = _infer_basenumber(dimension)

    flat = [tok for r in rows for tok in r]
    codes = _tokens_toCodes(flat, alphabet_for(basenumber))
    return codes.reshape(dimension, dimension), basenumber



def _is_validgrid(codes: np.ndarray,
                  basenumber: Optional[int] = None
                  ) -> bool:
    """
    Checks whether the code grid is completely filled
    and valid according to Sudoku rules: each code from 1 to DIMENSION
    occurs exactly once in every row, column, and box.

    Returns
    -------
    bool
        True if the grid is a valid complete Sudoku solution, else False.
    """
    codes = np.asarray(codes)
    if basenumber is None:
        basenumber = _infer_basenumber(round(codes.size ** 0.5))
    dimension = basenumber**2
    expected = set(range(1, dimension + 1))

    codes = codes.reshape(dimension, dimension)
    # Check rows and columns
    for i in range(dimension):
        if set(codes[i, :].tolist()) != expected:
            return False
        if set(codes[:, i].tolist()) != expected:
            return False

    # Check boxes
    for r in range(0, dimension, basenumber):
        for c in range(0, dimension, basenumber):
            box = codes[r:r + basenumber, c:c + basenumber].flatten()
            if set(box.tolist()) != expected:
                return False
    return True
