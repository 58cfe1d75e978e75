#!/usr/bin/env python3
"""
Tests for the score matrix and local aligner.
"""

import pytest

from str_realigner.config import ScoringConfig
from str_realigner.core.alignment import smith_waterman
from str_realigner.core.scoring import NO_ALIGNMENT, ScoreMatrix, calc_score, create_score_matrix
from str_realigner.exceptions import AlignmentError, MatrixBoundsError


class TestScoreMatrix:
    """Flat buffer matrix tests."""

    def test_zero_initialised(self):
        matrix = ScoreMatrix(3, 4)
        assert matrix.shape == (3, 4)
        assert matrix.max_value() == 0
        assert matrix.row(2) == [0, 0, 0, 0]

    def test_set_and_get(self):
        matrix = ScoreMatrix(3, 4)
        matrix.set(2, 3, 7)
        assert matrix.get(2, 3) == 7
        assert matrix.row(2) == [0, 0, 0, 7]
        assert matrix.get(1, 3) == 0

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 4), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, row, col):
        matrix = ScoreMatrix(3, 4)
        with pytest.raises(MatrixBoundsError) as exc_info:
            matrix.get(row, col)
        assert exc_info.value.row == row
        assert exc_info.value.col == col

    def test_bounds_error_is_alignment_error(self):
        with pytest.raises(AlignmentError):
            ScoreMatrix(2, 2).set(5, 5, 1)

    def test_invalid_shape(self):
        with pytest.raises(MatrixBoundsError):
            ScoreMatrix(0, 3)


class TestCalcScore:
    """Single cell recurrence tests."""

    def test_match_on_empty_neighbours(self):
        scoring = ScoringConfig()
        matrix = ScoreMatrix(2, 2)
        assert calc_score(1, 1, "A", "A", matrix, scoring) == 3
        assert matrix.get(1, 1) == 3

    def test_mismatch_floors_at_zero(self):
        scoring = ScoringConfig()
        matrix = ScoreMatrix(2, 2)
        assert calc_score(1, 1, "A", "G", matrix, scoring) == 0

    def test_gap_from_up_neighbour(self):
        scoring = ScoringConfig(match_score=5, mismatch_score=-4, gap_score=-1)
        matrix = ScoreMatrix(3, 2)
        matrix.set(1, 1, 5)
        # G vs A mismatches, so the best path is a gap from the cell above
        assert calc_score(2, 1, "AG", "A", matrix, scoring) == 4

    def test_boundary_cell_rejected(self):
        matrix = ScoreMatrix(2, 2)
        with pytest.raises(MatrixBoundsError):
            calc_score(0, 1, "A", "A", matrix, ScoringConfig())

    def test_cell_past_sequences_rejected(self):
        matrix = ScoreMatrix(3, 3)
        with pytest.raises(MatrixBoundsError):
            calc_score(2, 1, "A", "AA", matrix, ScoringConfig())

    def test_cell_past_matrix_rejected(self):
        matrix = ScoreMatrix(2, 2)
        with pytest.raises(MatrixBoundsError):
            calc_score(2, 2, "AA", "AA", matrix, ScoringConfig())


class TestCreateScoreMatrix:
    """Matrix builder tests."""

    def test_exact_match(self):
        matrix, row, score = create_score_matrix("ACGT", "ACGT", ScoringConfig())
        assert matrix.shape == (5, 5)
        assert row == 4
        assert score == 12

    def test_boundary_row_and_column_stay_zero(self):
        matrix, _, _ = create_score_matrix("ACGTTGCA", "TGCAAC", ScoringConfig())
        assert matrix.row(0) == [0] * matrix.cols
        assert all(matrix.get(i, 0) == 0 for i in range(matrix.rows))

    @pytest.mark.parametrize("seq1,seq2", [
        ("ACGTTGCA", "TTTTAAAA"),
        ("AAAACACACATTTT", "GGCAGG"),
        ("CACACA", "ACACAC"),
        ("G", "C"),
    ])
    def test_cells_never_negative(self, seq1, seq2):
        scoring = ScoringConfig(match_score=1, mismatch_score=-5, gap_score=-7)
        matrix, _, _ = create_score_matrix(seq1, seq2, scoring)
        assert matrix.min_value() >= 0

    def test_no_alignment_sentinel(self):
        matrix, row, score = create_score_matrix("AAAA", "GGGG", ScoringConfig())
        assert row == NO_ALIGNMENT
        assert score == 0
        assert matrix.max_value() == 0

    def test_empty_hypothesis(self):
        _, row, score = create_score_matrix("", "ACGT", ScoringConfig())
        assert row == NO_ALIGNMENT
        assert score == 0

    def test_ties_keep_first_row(self):
        _, row, score = create_score_matrix("ACGTACGT", "ACGT", ScoringConfig())
        assert score == 12
        assert row == 4


class TestSmithWaterman:
    """Local aligner offset convention tests."""

    def test_read_at_start(self):
        result = smith_waterman("ACGTGGGG", "ACGT")
        assert result.position == 0
        assert result.score == 12

    def test_read_inside_hypothesis(self):
        result = smith_waterman("GGGGACGT", "ACGT")
        assert result.position == 4
        assert result.score == 12

    def test_partial_match_can_be_negative(self):
        # Only the last two read bases match, at the start of the hypothesis
        result = smith_waterman("GTAAAA", "CCGT")
        assert result.score == 6
        assert result.position == 2 - 4

    def test_gapped_alignment(self):
        scoring = ScoringConfig(match_score=5, mismatch_score=-4, gap_score=-1)
        result = smith_waterman("ACGT", "ACT", scoring)
        assert result.score == 14
        assert result.position == 1

    def test_no_alignment_offsets_sentinel(self):
        result = smith_waterman("AAAA", "GGGG")
        assert result.score == 0
        assert result.position == NO_ALIGNMENT - 4
