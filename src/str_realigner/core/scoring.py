#!/usr/bin/env python3
"""
Smith-Waterman score matrix for the STR realigner.

The matrix holds local alignment scores of a hypothesis (rows) against a
read (columns). Only the best score and the row where it was found are
kept; no traceback is stored.
"""

from typing import List, Tuple

from ..config import ScoringConfig
from ..exceptions import MatrixBoundsError


NO_ALIGNMENT = -1


class ScoreMatrix:
    """Row-major score grid backed by one flat buffer."""

    def __init__(self, rows: int, cols: int):
        """
        Allocate a zero-filled matrix.

        Args:
            rows: Number of rows (hypothesis length + 1)
            cols: Number of columns (read length + 1)
        """
        if rows < 1 or cols < 1:
            raise MatrixBoundsError(f"Invalid matrix shape {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: List[int] = [0] * (rows * cols)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise MatrixBoundsError(
                f"Cell outside {self.rows}x{self.cols} score matrix", row=row, col=col
            )
        return row * self.cols + col

    def get(self, row: int, col: int) -> int:
        """Return the score stored at (row, col)."""
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, value: int) -> None:
        """Store a score at (row, col)."""
        self._cells[self._index(row, col)] = value

    def row(self, row: int) -> List[int]:
        """Return a copy of one row."""
        start = self._index(row, 0)
        return self._cells[start:start + self.cols]

    def max_value(self) -> int:
        return max(self._cells)

    def min_value(self) -> int:
        return min(self._cells)


def calc_score(i: int, j: int, seq1: str, seq2: str,
               score_matrix: ScoreMatrix, scoring: ScoringConfig) -> int:
    """
    Calculate and store the score of cell (i, j).

    The score is the best of the diagonal, up and left neighbours, floored
    at zero.

    Args:
        i: Row index (1-based position in seq1)
        j: Column index (1-based position in seq2)
        seq1: Hypothesis sequence
        seq2: Read sequence
        score_matrix: Matrix filled for all cells before (i, j) in row-major order
        scoring: Scoring scheme

    Returns:
        The stored cell score

    Raises:
        MatrixBoundsError: If (i, j) is not an interior cell of the matrix
    """
    if i < 1 or j < 1:
        raise MatrixBoundsError("Boundary cells are not scored", row=i, col=j)
    if i > len(seq1) or j > len(seq2):
        raise MatrixBoundsError("Cell outside sequence lengths", row=i, col=j)

    similarity = scoring.match_score if seq1[i - 1] == seq2[j - 1] else scoring.mismatch_score

    max_score = 0
    diag_score = score_matrix.get(i - 1, j - 1) + similarity
    if diag_score > max_score:
        max_score = diag_score
    up_score = score_matrix.get(i - 1, j) + scoring.gap_score
    if up_score > max_score:
        max_score = up_score
    left_score = score_matrix.get(i, j - 1) + scoring.gap_score
    if left_score > max_score:
        max_score = left_score

    score_matrix.set(i, j, max_score)
    return max_score


def create_score_matrix(seq1: str, seq2: str,
                        scoring: ScoringConfig) -> Tuple[ScoreMatrix, int, int]:
    """
    Fill the score matrix of two sequences and locate its best cell.

    Cells are filled row by row, left to right. Ties keep the first
    maximum found in that order.

    Args:
        seq1: Hypothesis sequence (rows)
        seq2: Read sequence (columns)
        scoring: Scoring scheme

    Returns:
        Tuple of (matrix, best_row, best_score). best_row is NO_ALIGNMENT
        and best_score is 0 when no cell scores above zero.
    """
    rows = len(seq1) + 1
    cols = len(seq2) + 1
    score_matrix = ScoreMatrix(rows, cols)

    max_score = 0
    max_pos_row = NO_ALIGNMENT
    for i in range(1, rows):
        for j in range(1, cols):
            current = calc_score(i, j, seq1, seq2, score_matrix, scoring)
            if current > max_score:
                max_score = current
                max_pos_row = i

    if max_pos_row == NO_ALIGNMENT:
        return score_matrix, NO_ALIGNMENT, 0
    return score_matrix, max_pos_row, max_score
