"""Core processing modules for the STR realigner."""

from .scoring import ScoreMatrix, calc_score, create_score_matrix, NO_ALIGNMENT
from .alignment import smith_waterman
from .classifier import classify_realigned_read, compute_margin, score_threshold
from .realignment import ReadRealigner, build_hypothesis, expansion_aware_realign
from .locus import LocusProcessor
from .parser import LocusParser, ReadParser
from .writer import EvidenceWriter

__all__ = [
    "ScoreMatrix",
    "calc_score",
    "create_score_matrix",
    "NO_ALIGNMENT",
    "smith_waterman",
    "classify_realigned_read",
    "compute_margin",
    "score_threshold",
    "ReadRealigner",
    "build_hypothesis",
    "expansion_aware_realign",
    "LocusProcessor",
    "LocusParser",
    "ReadParser",
    "EvidenceWriter"
]
