#!/usr/bin/env python3
"""
Command line interface for nucgrep.

Builds a ScanConfig from the arguments, opens the input and prints the
matching records.
"""

import argparse
import gzip
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, List, Optional

from loguru import logger

from . import __version__
from .config import ScanConfig
from .core.fasta import FastaReader
from .core.scanner import Scanner
from .exceptions import ConfigurationError, NucgrepError
from .formatter import OutcomeFormatter
from .models import ScanSummary


STDIN = "-"


def setup_logging(log_level: str = "WARNING") -> None:
    """Send log messages to stderr; stdout carries results."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format="<level>{level: <8}</level> | {message}",
    )


@contextmanager
def open_input(path: str) -> Iterator[IO]:
    """
    Open a FASTA source for reading.
    
    Args:
        path: File path, "-" for standard input; ".gz" files are decompressed
    """
    if path == STDIN:
        # raw bytes when available; FastaReader decodes them
        yield getattr(sys.stdin, "buffer", sys.stdin)
        return
    
    file_path = Path(path)
    if file_path.suffix == ".gz":
        handle = gzip.open(file_path, "rt", encoding="utf-8", errors="replace")
    else:
        handle = open(file_path, "r", encoding="utf-8", errors="replace")
    with handle:
        yield handle


def run_scan(config: ScanConfig, handle: IO, formatter: OutcomeFormatter,
             source: str = "<stdin>") -> ScanSummary:
    """
    Scan one input stream and write every matching record.
    
    Args:
        config: Scan configuration
        handle: Open FASTA stream
        formatter: Output writer
        source: Input name for log messages
        
    Returns:
        Counters for the scan
    """
    scanner = Scanner(config)
    reader = FastaReader(handle, strict=config.strict, source=source)
    for outcome in scanner.scan(reader):
        formatter.write(outcome)
    return scanner.summary


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the nucgrep command."""
    parser = argparse.ArgumentParser(
        prog="nucgrep",
        description=(
            "Find sequences in sequences. Look for PATTERN in each FASTA record "
            "in FILE, allowing up to N mismatching characters. "
            "If no file is given, read standard input."
        )
    )
    
    parser.add_argument(
        "path",
        nargs="?",
        default=STDIN,
        metavar="FILE",
        help="FASTA file, optionally gzip compressed (default: stdin)"
    )
    
    parser.add_argument(
        "-p", "--pattern",
        metavar="PATTERN",
        help="Nucleotide PATTERN to look for, e.g. 'AaTGATAcGGCGg'"
    )
    
    parser.add_argument(
        "-N", "--allow-non-matching",
        type=int,
        metavar="N",
        default=None,
        help="Maximum number of non-matching characters per window (default: 0)"
    )
    
    parser.add_argument(
        "-i", "--ignore-case",
        action="store_true",
        help="Ignore case, e.g. find 'aTgA' for PATTERN 'ATGA' and vice versa"
    )
    
    strand = parser.add_mutually_exclusive_group()
    strand.add_argument(
        "-r", "--reverse-complement",
        action="store_true",
        help="Also show matches for the reverse complement of PATTERN"
    )
    strand.add_argument(
        "-R", "--reverse-complement-only",
        action="store_true",
        help="Show only matches for the reverse complement of PATTERN"
    )
    
    parser.add_argument(
        "-H", "--headers-only",
        action="store_true",
        help="Only show headers of records that match"
    )
    
    parser.add_argument(
        "--sites",
        action="store_true",
        help="Print one tab-separated line per match instead of the sequence"
    )
    
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on content before the first FASTA header instead of skipping it"
    )
    
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML file with scan settings; command-line options take precedence"
    )
    
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not highlight matches"
    )
    
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )
    
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for command line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if args.pattern is None and args.config is None:
        parser.error("the following arguments are required: -p/--pattern")
    
    setup_logging(args.log_level)
    
    try:
        if args.config is not None:
            config = ScanConfig.from_yaml(args.config, **ScanConfig.args_to_fields(vars(args)))
        else:
            config = ScanConfig.from_args(vars(args))
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    
    formatter = OutcomeFormatter(
        headers_only=config.headers_only,
        sites=args.sites,
        color=not args.no_color,
    )
    source = "<stdin>" if args.path == STDIN else args.path
    
    try:
        with open_input(args.path) as handle:
            run_scan(config, handle, formatter, source=source)
    except BrokenPipeError:
        # downstream closed the pipe (e.g. head); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)
    except OSError as e:
        logger.error(f"{args.path}: {e.strerror or e}")
        sys.exit(1)
    except NucgrepError as e:
        logger.error(f"Scan failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Scan interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
