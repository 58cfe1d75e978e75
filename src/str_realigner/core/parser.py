"""Tab-separated locus and read table parsers."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Tuple

from loguru import logger

from ..exceptions import ParseError
from ..models import Locus


SEQUENCE_RE = re.compile(r"^[ACGTN]*$")


class _TableParser:
    """Line-oriented parser for tab-separated tables."""

    kind = "table"

    def __init__(self, input_file: Path):
        """Initialize parser with input file path."""
        self.input_file = Path(input_file)

        if not self.input_file.exists():
            raise ParseError(f"Input file not found: {self.input_file}")

    def _records(self) -> List:
        records = []
        line_number = 0

        logger.info(f"Parsing {self.kind} file: {self.input_file}")

        try:
            with open(self.input_file, 'r', encoding='utf-8') as f:
                for line in f:
                    line_number += 1
                    line = line.rstrip("\r\n")

                    # Skip empty lines
                    if not line.strip():
                        continue

                    # Skip comment lines
                    if line.startswith('#'):
                        continue

                    try:
                        records.append(self._parse_line(line, line_number))
                    except ParseError as e:
                        logger.warning(f"Skipping invalid line {line_number}: {e}")
                        continue

        except IOError as e:
            raise ParseError(f"Failed to read {self.kind} file: {e}")

        logger.info(f"Successfully parsed {len(records)} {self.kind} records")
        return records

    def _parse_line(self, line: str, line_number: int):
        raise NotImplementedError

    @staticmethod
    def _clean_sequence(value: str, field_name: str, line_number: int, line: str) -> str:
        seq = value.strip().upper()
        if not SEQUENCE_RE.match(seq):
            raise ParseError(f"Invalid bases in {field_name}", line_number, line)
        return seq


class LocusParser(_TableParser):
    """Parser for locus tables.

    Columns: name, chromosome, start, end, motif, pre_flank, post_flank.
    """

    kind = "locus"

    def parse(self) -> Dict[str, Locus]:
        """Parse the locus table into loci keyed by name, in file order."""
        loci: Dict[str, Locus] = {}
        for locus in self._records():
            if locus.name in loci:
                logger.warning(f"Duplicate locus {locus.name}, keeping first definition")
                continue
            loci[locus.name] = locus
        return loci

    def _parse_line(self, line: str, line_number: int) -> Locus:
        parts = line.split("\t")

        if len(parts) != 7:
            raise ParseError(
                f"Expected 7 tab-separated fields, got {len(parts)}",
                line_number,
                line
            )

        name, chromosome, start, end, motif, pre_flank, post_flank = parts
        name = name.strip()
        if not name:
            raise ParseError("Empty locus name", line_number, line)

        try:
            start_coord = int(start)
            end_coord = int(end)
        except ValueError:
            raise ParseError("Locus coordinates must be integers", line_number, line)

        if end_coord < start_coord:
            raise ParseError("Locus end precedes start", line_number, line)

        motif = self._clean_sequence(motif, "motif", line_number, line)
        if not motif:
            raise ParseError("Empty motif", line_number, line)

        return Locus(
            name=name,
            chromosome=chromosome.strip(),
            start=start_coord,
            end=end_coord,
            motif=motif,
            pre_flank=self._clean_sequence(pre_flank, "pre_flank", line_number, line),
            post_flank=self._clean_sequence(post_flank, "post_flank", line_number, line),
        )


class ReadParser(_TableParser):
    """Parser for read tables.

    Columns: read_name, locus_name, sequence.
    """

    kind = "read"

    def parse(self) -> Dict[str, List[Tuple[str, str]]]:
        """Parse the read table into (read_name, sequence) lists keyed by locus name."""
        reads: Dict[str, List[Tuple[str, str]]] = {}
        for read_name, locus_name, seq in self._records():
            reads.setdefault(locus_name, []).append((read_name, seq))
        return reads

    def _parse_line(self, line: str, line_number: int) -> Tuple[str, str, str]:
        parts = line.split("\t")

        if len(parts) != 3:
            raise ParseError(
                f"Expected 3 tab-separated fields, got {len(parts)}",
                line_number,
                line
            )

        read_name, locus_name, seq = (part.strip() for part in parts)
        if not read_name or not locus_name:
            raise ParseError("Empty read or locus name", line_number, line)

        seq = self._clean_sequence(seq, "sequence", line_number, line)
        if not seq:
            raise ParseError("Empty read sequence", line_number, line)

        return read_name, locus_name, seq
