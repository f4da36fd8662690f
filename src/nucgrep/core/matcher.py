#!/usr/bin/env python3
"""
Approximate matching module for nucgrep.

Every window of the sequence that has the pattern's length is compared
position by position with the pattern. A window is reported when its
mismatch count does not exceed the allowance. There are no gaps.
"""

from typing import Iterator

from ..exceptions import ConfigurationError
from ..models import MatchSite, Orientation
from .alphabet import normalize


def count_mismatches(window: str, pattern: str, limit: int = None) -> int:
    """
    Count positions at which two equal-length strings differ.
    
    Args:
        window: Slice of the sequence
        pattern: Pattern of the same length
        limit: Stop counting once the count exceeds this value
        
    Returns:
        Number of differing positions (at most limit + 1 when limit is set)
    """
    if len(window) != len(pattern):
        raise ValueError(
            f"Cannot compare strings of different length ({len(window)} vs {len(pattern)})"
        )
    mismatches = 0
    for a, b in zip(window, pattern):
        if a != b:
            mismatches += 1
            if limit is not None and mismatches > limit:
                break
    return mismatches


def _exact_sites(sequence: str, pattern: str, orientation: Orientation) -> Iterator[MatchSite]:
    # overlapping occurrences, so advance one past each hit
    length = len(pattern)
    start = sequence.find(pattern)
    while start != -1:
        yield MatchSite(start, length, orientation, 0)
        start = sequence.find(pattern, start + 1)


def _approximate_sites(sequence: str, pattern: str, allowance: int,
                       orientation: Orientation) -> Iterator[MatchSite]:
    length = len(pattern)
    for start in range(len(sequence) - length + 1):
        mismatches = count_mismatches(sequence[start:start + length], pattern, allowance)
        if mismatches <= allowance:
            yield MatchSite(start, length, orientation, mismatches)


def find_matches(
    sequence: str,
    pattern: str,
    allowance: int = 0,
    case_insensitive: bool = False,
    orientation: Orientation = Orientation.FORWARD,
) -> Iterator[MatchSite]:
    """
    Find all windows of ``sequence`` within ``allowance`` mismatches of ``pattern``.
    
    Arguments are validated immediately; the sites themselves are produced
    lazily in increasing offset order. Each call is independent.
    
    Args:
        sequence: Sequence to scan
        pattern: Non-empty pattern
        allowance: Maximum mismatches per window (non-negative)
        case_insensitive: Fold case before comparing
        orientation: Tag attached to every site produced
        
    Returns:
        Iterator of MatchSite
        
    Raises:
        ConfigurationError: If the pattern is empty or the allowance negative
    """
    if not pattern:
        raise ConfigurationError("Pattern must not be empty", parameter="pattern")
    if allowance < 0:
        raise ConfigurationError(
            f"Allowance must be non-negative, got {allowance}", parameter="allowance"
        )
    
    sequence = normalize(sequence, case_insensitive)
    pattern = normalize(pattern, case_insensitive)
    
    if len(pattern) > len(sequence):
        return iter(())
    if allowance == 0:
        return _exact_sites(sequence, pattern, orientation)
    return _approximate_sites(sequence, pattern, allowance, orientation)
