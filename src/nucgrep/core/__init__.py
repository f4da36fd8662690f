"""Core matching modules for nucgrep."""

from .alphabet import complement, comparison_key, normalize, validate_symbols
from .revcomp import reverse_complement
from .matcher import count_mismatches, find_matches
from .fasta import FastaReader, read_fasta
from .scanner import Scanner, scan

__all__ = [
    "complement",
    "comparison_key",
    "normalize",
    "validate_symbols",
    "reverse_complement",
    "count_mismatches",
    "find_matches",
    "FastaReader",
    "read_fasta",
    "Scanner",
    "scan"
]
