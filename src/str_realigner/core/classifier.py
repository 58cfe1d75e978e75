#!/usr/bin/env python3
"""
Read classification module for the STR realigner.

Places a realigned read relative to the repeat span of its winning
hypothesis. Coordinates are hypothesis coordinates, with the first base of
the pre-flank at 0 and the repeat starting at prefix_length.
"""

from ..config import ScoringConfig
from ..exceptions import ClassificationError
from ..models import SingleReadType


def compute_margin(period: int) -> int:
    """Slack in bases allowed around the repeat span."""
    return 4 * period - 1


def score_threshold(read_length: int, scoring: ScoringConfig) -> int:
    """Minimum alignment score for a read to be classified."""
    return int(scoring.match_perc_threshold * read_length * scoring.match_score)


def classify_realigned_read(seq: str, motif: str, start_pos: int, n_copy: int,
                            score: int, prefix_length: int,
                            scoring: ScoringConfig = None) -> SingleReadType:
    """
    Classify a realigned read.

    Args:
        seq: Read sequence
        motif: Repeat unit
        start_pos: Read start in hypothesis coordinates
        n_copy: Copy number of the winning hypothesis
        score: Alignment score of the winning hypothesis
        prefix_length: Repeat span start in hypothesis coordinates
        scoring: Scoring scheme (defaults to ScoringConfig())

    Returns:
        The read's SingleReadType

    Raises:
        ClassificationError: If the read geometry matches no class
    """
    if scoring is None:
        scoring = ScoringConfig()

    end_pos = start_pos + len(seq) - 1

    # Coordinates of the STR
    start_str = prefix_length
    end_str = prefix_length + n_copy * len(motif)
    margin = compute_margin(len(motif))

    start_in_str = start_str - margin <= start_pos <= end_str + margin
    end_in_str = start_str - margin <= end_pos <= end_str + margin

    if score < score_threshold(len(seq), scoring) or n_copy == 0:
        return SingleReadType.UNKNOWN
    if start_in_str and end_in_str:
        return SingleReadType.IRR
    if start_in_str and not end_in_str:
        return SingleReadType.POSTFLANK
    if not start_in_str and end_in_str:
        return SingleReadType.PREFLANK
    if start_pos < start_str and end_pos > end_str:
        return SingleReadType.ENCLOSING

    raise ClassificationError(
        f"Read matches no class for repeat span {start_str}-{end_str}",
        start_pos=start_pos,
        end_pos=end_pos,
    )
