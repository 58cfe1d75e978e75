"""Data models for the STR realigner."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class SingleReadType(Enum):
    """Structural class of a single realigned read."""
    IRR = "IRR"
    PREFLANK = "PREFLANK"
    POSTFLANK = "POSTFLANK"
    ENCLOSING = "ENCLOSING"
    UNKNOWN = "UNKNOWN"


@dataclass
class Locus:
    """STR locus with its reference flanks."""

    name: str
    chromosome: str
    start: int
    end: int
    motif: str
    pre_flank: str
    post_flank: str

    @property
    def period(self) -> int:
        """Get repeat unit length."""
        return len(self.motif)

    @property
    def prefix_length(self) -> int:
        """Repeat span start in hypothesis coordinates."""
        return len(self.pre_flank)

    @property
    def reference_copies(self) -> int:
        """Number of whole motif copies spanned by the reference coordinates."""
        if not self.motif:
            return 0
        return (self.end - self.start + 1) // self.period

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "Locus":
        """Create from dictionary."""
        return cls(**data)


@dataclass(frozen=True)
class AlignmentResult:
    """Best local alignment of a read against one hypothesis."""

    position: int  # row of the best cell minus read length
    score: int


@dataclass(frozen=True)
class RealignmentResult:
    """Winning hypothesis of an expansion-aware realignment."""

    n_copy: int
    position: int
    score: int


@dataclass
class ReadEvidence:
    """Per-read evidence handed to the genotyper."""

    read_name: str
    locus_name: str
    n_copy: int
    position: int
    score: int
    read_type: Optional[SingleReadType] = None
    error: Optional[str] = None

    @property
    def is_classified(self) -> bool:
        """True unless classification failed for this read."""
        return self.error is None and self.read_type is not None

    @property
    def class_label(self) -> str:
        """Class name used in output tables."""
        return self.read_type.value if self.is_classified else "FAILED"

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        data = asdict(self)
        data['read_type'] = self.read_type.value if self.read_type else None
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "ReadEvidence":
        """Create from dictionary."""
        data = dict(data)
        if isinstance(data.get('read_type'), str):
            data['read_type'] = SingleReadType(data['read_type'])
        return cls(**data)


@dataclass
class LocusEvidence:
    """Classified read evidence collected at one locus."""

    locus: Locus
    reads: List[ReadEvidence] = field(default_factory=list)
    failed: List[ReadEvidence] = field(default_factory=list)

    @property
    def dropped(self) -> int:
        """Reads dropped after a classification failure."""
        return len(self.failed)

    @property
    def total_reads(self) -> int:
        """Reads evaluated, including dropped ones."""
        return len(self.reads) + len(self.failed)

    def all_reads(self) -> List[ReadEvidence]:
        """Kept and dropped evidence."""
        return self.reads + self.failed

    def class_counts(self) -> Dict[SingleReadType, int]:
        """Count kept reads per structural class."""
        counts = Counter(ev.read_type for ev in self.reads)
        return {read_type: counts.get(read_type, 0) for read_type in SingleReadType}

    def copy_numbers(self, read_type: SingleReadType) -> List[int]:
        """Copy number estimates of the kept reads of one class."""
        return [ev.n_copy for ev in self.reads if ev.read_type is read_type]
