"""Per-locus read evidence collection."""

from __future__ import annotations

from typing import Iterable, Tuple

from loguru import logger

from ..config import ScoringConfig
from ..models import Locus, LocusEvidence
from .realignment import ReadRealigner


class LocusProcessor:
    """Collects classified read evidence for loci."""

    def __init__(self, scoring: ScoringConfig = None):
        self.scoring = scoring if scoring is not None else ScoringConfig()

    def process_locus(self, locus: Locus, reads: Iterable[Tuple[str, str]]) -> LocusEvidence:
        """
        Realign and classify every read of a locus.

        Reads whose classification fails are kept apart from the
        classified evidence.

        Args:
            locus: Locus to process
            reads: (read_name, sequence) pairs

        Returns:
            LocusEvidence with the kept and failed reads
        """
        realigner = ReadRealigner(locus, self.scoring)
        locus_evidence = LocusEvidence(locus=locus)

        for read_name, seq in reads:
            evidence = realigner.evaluate(read_name, seq)
            if not evidence.is_classified:
                logger.warning(f"Dropping read {read_name} at {locus.name}: {evidence.error}")
                locus_evidence.failed.append(evidence)
                continue
            locus_evidence.reads.append(evidence)

        logger.info(
            f"Locus {locus.name}: kept {len(locus_evidence.reads)} reads, "
            f"dropped {locus_evidence.dropped}"
        )
        return locus_evidence
