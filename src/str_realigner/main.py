#!/usr/bin/env python3
"""
Main pipeline module for the STR realigner.

This module provides the main entry point and runs realignment and read
classification over every locus of the input tables.
"""

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import argparse

from loguru import logger as loguru_logger

from .config import PipelineConfig
from .core.locus import LocusProcessor
from .core.parser import LocusParser, ReadParser
from .core.writer import EvidenceWriter
from .exceptions import PipelineError
from .models import Locus, LocusEvidence, SingleReadType


def setup_logging(log_level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Core modules log through loguru
    loguru_logger.remove()
    loguru_logger.add(
        sys.stdout,
        level=log_level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss,SSS} - {name} - {level} - {message}",
    )


def run_pipeline(config: PipelineConfig) -> List[LocusEvidence]:
    """
    Run realignment and classification for all loci.

    Args:
        config: Pipeline configuration

    Returns:
        LocusEvidence for every locus processed, in locus file order
    """
    logger = logging.getLogger(__name__)

    # Create output directory
    config.output_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Starting STR realigner")
    logger.info(f"Loci file: {config.loci_file}")
    logger.info(f"Reads file: {config.reads_file}")
    logger.info(f"Output directory: {config.output_dir}")

    try:
        # Step 1: Parse loci
        logger.info("Step 1: Parsing loci...")
        loci = LocusParser(config.loci_file).parse()
        logger.info(f"Parsed {len(loci)} loci")

        if not loci:
            logger.warning("No valid loci found in loci file")
            return []

        # Step 2: Parse reads
        logger.info("Step 2: Parsing reads...")
        reads = ReadParser(config.reads_file).parse()

        for locus_name in reads:
            if locus_name not in loci:
                logger.warning(f"Skipping reads for unknown locus {locus_name}")

        # Step 3: Realign and classify
        logger.info("Step 3: Realigning reads...")
        processor = LocusProcessor(config.scoring)
        jobs = [(locus, reads.get(name, [])) for name, locus in loci.items()]

        if config.threads > 1:
            with ThreadPoolExecutor(max_workers=config.threads) as executor:
                outcomes = list(executor.map(lambda job: process_locus(processor, *job), jobs))
        else:
            outcomes = [process_locus(processor, *job) for job in jobs]

        results = [outcome for outcome in outcomes if outcome is not None]

        # Step 4: Write output
        logger.info("Step 4: Writing evidence...")
        writer = EvidenceWriter(config.output_dir)
        writer.write(results)

        _log_totals(results)
        logger.info("Pipeline completed successfully")
        return results

    except Exception as e:
        logger.error(f"Pipeline failed: {e}")
        raise


def process_locus(
    processor: LocusProcessor,
    locus: Locus,
    locus_reads: List[Tuple[str, str]]
) -> Optional[LocusEvidence]:
    """
    Process a single locus.

    Args:
        processor: Locus processor carrying the scoring scheme
        locus: Locus to process
        locus_reads: (read_name, sequence) pairs of the locus

    Returns:
        LocusEvidence, or None when the locus failed
    """
    logger = logging.getLogger(__name__)

    if not locus_reads:
        logger.warning(f"No reads found for locus {locus.name}")

    try:
        return processor.process_locus(locus, locus_reads)
    except PipelineError as e:
        logger.error(f"Failed to process locus {locus.name}: {e}")
        return None


def _log_totals(results: List[LocusEvidence]) -> None:
    logger = logging.getLogger(__name__)

    totals: Dict[SingleReadType, int] = {t: 0 for t in SingleReadType}
    for locus_evidence in results:
        for read_type, count in locus_evidence.class_counts().items():
            totals[read_type] += count

    dropped = sum(r.dropped for r in results)
    logger.info(
        "Read classes: "
        + ", ".join(f"{t.value}={n}" for t, n in totals.items())
        + f", dropped={dropped}"
    )


def main() -> None:
    """Main entry point for command line interface."""
    parser = argparse.ArgumentParser(
        description="STR realigner - estimate repeat copy numbers and classify reads at STR loci"
    )

    parser.add_argument(
        "loci",
        type=Path,
        help="Tab-separated locus table"
    )

    parser.add_argument(
        "reads",
        type=Path,
        help="Tab-separated read table"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("output"),
        help="Output directory (default: output)"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with scoring parameters"
    )

    parser.add_argument(
        "--match-score",
        type=int,
        help="Score of a matching base (default: 3)"
    )

    parser.add_argument(
        "--mismatch-score",
        type=int,
        help="Score of a mismatching base (default: -1)"
    )

    parser.add_argument(
        "--gap-score",
        type=int,
        help="Score of a gap (default: -3)"
    )

    parser.add_argument(
        "--match-perc-threshold",
        type=float,
        help="Fraction of the perfect score a read needs to be classified (default: 0.9)"
    )

    parser.add_argument(
        "--threads",
        type=int,
        default=1,
        help="Number of loci processed in parallel (default: 1)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)"
    )

    args = parser.parse_args()

    # Setup logging
    setup_logging(args.log_level)

    try:
        config = PipelineConfig.from_args(vars(args))
        run_pipeline(config)
    except PipelineError as e:
        logging.error(f"Pipeline failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Pipeline interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
