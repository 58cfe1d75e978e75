#!/usr/bin/env python3
"""
Evidence output module for the STR realigner.

Writes per-read evidence and per-locus class tallies as tab-separated
tables.
"""

from pathlib import Path
from typing import Iterable

from ..exceptions import PipelineError
from ..models import LocusEvidence, SingleReadType


EVIDENCE_HEADER = ["locus", "read", "n_copy", "position", "score", "class"]
SUMMARY_HEADER = ["locus", "motif", "reads", "dropped"] + [t.value for t in SingleReadType]


class EvidenceWriter:
    """Writer for read evidence and locus summaries."""

    def __init__(self, output_dir: Path):
        """
        Initialize writer.

        Args:
            output_dir: Directory receiving the output tables
        """
        self.output_dir = Path(output_dir)

    @property
    def evidence_file(self) -> Path:
        return self.output_dir / "read_evidence.tsv"

    @property
    def summary_file(self) -> Path:
        return self.output_dir / "locus_summary.tsv"

    def write(self, results: Iterable[LocusEvidence]) -> None:
        """Write both output tables."""
        results = list(results)
        self.write_evidence(results)
        self.write_summary(results)

    def write_evidence(self, results: Iterable[LocusEvidence]) -> Path:
        """
        Write one line per evaluated read.

        Reads whose classification failed are written with class FAILED.
        """
        try:
            with open(self.evidence_file, 'w') as f:
                f.write("\t".join(EVIDENCE_HEADER) + "\n")
                for locus_evidence in results:
                    for ev in locus_evidence.all_reads():
                        line = "\t".join([
                            ev.locus_name,
                            ev.read_name,
                            str(ev.n_copy),
                            str(ev.position),
                            str(ev.score),
                            ev.class_label,
                        ])
                        f.write(line + "\n")
        except IOError as e:
            raise PipelineError(f"Failed to write evidence file: {e}") from e
        return self.evidence_file

    def write_summary(self, results: Iterable[LocusEvidence]) -> Path:
        """Write one line of class counts per locus."""
        try:
            with open(self.summary_file, 'w') as f:
                f.write("\t".join(SUMMARY_HEADER) + "\n")
                for locus_evidence in results:
                    counts = locus_evidence.class_counts()
                    line = "\t".join(
                        [
                            locus_evidence.locus.name,
                            locus_evidence.locus.motif,
                            str(locus_evidence.total_reads),
                            str(locus_evidence.dropped),
                        ]
                        + [str(counts[t]) for t in SingleReadType]
                    )
                    f.write(line + "\n")
        except IOError as e:
            raise PipelineError(f"Failed to write summary file: {e}") from e
        return self.summary_file
