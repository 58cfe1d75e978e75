"""STR Realigner.

Expansion-aware realignment and read classification for short tandem
repeat loci. Each read is realigned against reference reconstructions
with increasing repeat copy numbers, and the winning alignment places the
read inside, across, or at the edge of the repeat.
"""

__version__ = "1.0.0"

from .config import PipelineConfig, ScoringConfig
from .models import (
    SingleReadType, Locus, AlignmentResult, RealignmentResult,
    ReadEvidence, LocusEvidence
)
from .core import (
    ScoreMatrix, calc_score, create_score_matrix,
    smith_waterman,
    expansion_aware_realign, build_hypothesis, ReadRealigner,
    classify_realigned_read,
    LocusProcessor, LocusParser, ReadParser, EvidenceWriter
)
from .main import run_pipeline

__all__ = [
    "__version__",
    "PipelineConfig",
    "ScoringConfig",
    "SingleReadType",
    "Locus",
    "AlignmentResult",
    "RealignmentResult",
    "ReadEvidence",
    "LocusEvidence",
    "ScoreMatrix",
    "calc_score",
    "create_score_matrix",
    "smith_waterman",
    "expansion_aware_realign",
    "build_hypothesis",
    "ReadRealigner",
    "classify_realigned_read",
    "LocusProcessor",
    "LocusParser",
    "ReadParser",
    "EvidenceWriter",
    "run_pipeline"
]
