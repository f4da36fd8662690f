"""nucgrep.

Approximate nucleotide pattern search over FASTA records: report the
records, and the positions within them, where a pattern occurs with at
most N mismatching characters, optionally ignoring case and searching
the reverse complement.
"""

__version__ = "0.1.0"

from .exceptions import NucgrepError, ConfigurationError, MalformedInputError, UnsupportedSymbolError
from .models import Orientation, Record, MatchSite, RecordOutcome, ScanSummary
from .config import ScanConfig, ReverseComplementMode
from .core import (
    complement, reverse_complement,
    count_mismatches, find_matches,
    FastaReader, read_fasta,
    Scanner, scan
)
from .formatter import OutcomeFormatter
from .main import main

__all__ = [
    "__version__",
    "NucgrepError",
    "ConfigurationError",
    "MalformedInputError",
    "UnsupportedSymbolError",
    "Orientation",
    "Record",
    "MatchSite",
    "RecordOutcome",
    "ScanSummary",
    "ScanConfig",
    "ReverseComplementMode",
    "complement",
    "reverse_complement",
    "count_mismatches",
    "find_matches",
    "FastaReader",
    "read_fasta",
    "Scanner",
    "scan",
    "OutcomeFormatter",
    "main"
]
