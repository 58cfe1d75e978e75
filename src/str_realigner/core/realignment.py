#!/usr/bin/env python3
"""
Expansion-aware realignment module for the STR realigner.

A read is aligned against a family of reference reconstructions, one per
trial copy number, and the best scoring copy number is kept.
"""

from loguru import logger

from ..config import ScoringConfig
from ..exceptions import ClassificationError, RealignmentError
from ..models import Locus, ReadEvidence, RealignmentResult
from .alignment import smith_waterman
from .classifier import classify_realigned_read


def build_hypothesis(pre_flank: str, post_flank: str, motif: str, n_copy: int) -> str:
    """Reference reconstruction with n_copy repeat units between the flanks."""
    return pre_flank + motif * n_copy + post_flank


def max_trial_copies(read_length: int, period: int) -> int:
    """Largest copy number tried for a read (inclusive)."""
    return read_length // period + 2


def expansion_aware_realign(seq: str, pre_flank: str, post_flank: str, motif: str,
                            scoring: ScoringConfig = None) -> RealignmentResult:
    """
    Find the copy number that best explains a read.

    Copy numbers 0 through len(seq) // period + 2 are tried in order. A
    hypothesis replaces the current best only on a strictly higher score,
    and the search stops at the first perfect score.

    Args:
        seq: Read sequence
        pre_flank: Reference sequence upstream of the repeat
        post_flank: Reference sequence downstream of the repeat
        motif: Repeat unit
        scoring: Scoring scheme (defaults to ScoringConfig())

    Returns:
        RealignmentResult of the winning hypothesis

    Raises:
        RealignmentError: If the motif is empty
    """
    if scoring is None:
        scoring = ScoringConfig()
    if not motif:
        raise RealignmentError("Motif must not be empty")

    perfect_score = scoring.perfect_score(len(seq))
    max_score = 0
    max_n_copy = 0
    max_pos = 0

    for n_copy in range(max_trial_copies(len(seq), len(motif)) + 1):
        hypothesis = build_hypothesis(pre_flank, post_flank, motif, n_copy)
        result = smith_waterman(hypothesis, seq, scoring)
        if result.score > max_score:
            max_score = result.score
            max_n_copy = n_copy
            max_pos = result.position
        if result.score == perfect_score:
            break

    return RealignmentResult(n_copy=max_n_copy, position=max_pos, score=max_score)


class ReadRealigner:
    """Realigns and classifies reads against one locus."""

    def __init__(self, locus: Locus, scoring: ScoringConfig = None):
        """
        Initialize realigner.

        Args:
            locus: Locus the reads belong to
            scoring: Scoring scheme (defaults to ScoringConfig())
        """
        if not locus.motif:
            raise RealignmentError("Motif must not be empty", locus_name=locus.name)
        self.locus = locus
        self.scoring = scoring if scoring is not None else ScoringConfig()

    def realign(self, seq: str) -> RealignmentResult:
        """Run expansion-aware realignment of one read."""
        return expansion_aware_realign(
            seq,
            self.locus.pre_flank,
            self.locus.post_flank,
            self.locus.motif,
            self.scoring,
        )

    def evaluate(self, read_name: str, seq: str) -> ReadEvidence:
        """
        Realign and classify one read.

        A classification failure is recorded on the returned evidence
        instead of being raised.
        """
        result = self.realign(seq)
        evidence = ReadEvidence(
            read_name=read_name,
            locus_name=self.locus.name,
            n_copy=result.n_copy,
            position=result.position,
            score=result.score,
        )

        try:
            evidence.read_type = classify_realigned_read(
                seq,
                self.locus.motif,
                result.position,
                result.n_copy,
                result.score,
                self.locus.prefix_length,
                self.scoring,
            )
        except ClassificationError as e:
            evidence.error = str(e)
            return evidence

        logger.debug(
            f"{self.locus.name}/{read_name}: n_copy={result.n_copy} "
            f"pos={result.position} score={result.score} class={evidence.read_type.value}"
        )
        return evidence
