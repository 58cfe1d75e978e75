#!/usr/bin/env python3
"""
Local alignment module for the STR realigner.

Wraps the score matrix builder and reports where a read sits in
hypothesis coordinates.
"""

from ..config import ScoringConfig
from ..models import AlignmentResult
from .scoring import create_score_matrix


def smith_waterman(seq1: str, seq2: str, scoring: ScoringConfig = None) -> AlignmentResult:
    """
    Locally align a read against a hypothesis sequence.

    The returned position is the row of the best cell minus the read
    length, i.e. where the read would start if laid flush against the
    matched end. It may be negative.

    Args:
        seq1: Hypothesis sequence
        seq2: Read sequence
        scoring: Scoring scheme (defaults to ScoringConfig())

    Returns:
        AlignmentResult with position and best score
    """
    if scoring is None:
        scoring = ScoringConfig()

    _, start_pos, current_score = create_score_matrix(seq1, seq2, scoring)
    return AlignmentResult(position=start_pos - len(seq2), score=current_score)
