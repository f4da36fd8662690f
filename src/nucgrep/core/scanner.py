#!/usr/bin/env python3
"""
Scan orchestration for nucgrep.

Pulls records one at a time, runs the matcher for each requested
orientation and merges the resulting sites.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from loguru import logger

from ..models import MatchSite, Orientation, Record, RecordOutcome, ScanSummary
from .matcher import find_matches

if TYPE_CHECKING:
    from ..config import ScanConfig


class Scanner:
    """Runs one ScanConfig over a stream of records."""
    
    def __init__(self, config: ScanConfig):
        """
        Initialize scanner.
        
        Args:
            config: Validated scan configuration
        """
        self.config = config
        self.summary = ScanSummary()
    
    def find_sites(self, sequence: str) -> Iterator[MatchSite]:
        """
        Sites of all requested orientations, by ascending offset.
        
        At equal offsets forward sites come before reverse-complement sites.
        """
        config = self.config
        streams = []
        if config.reverse_complement_mode.searches_forward:
            streams.append(find_matches(
                sequence, config.forward_pattern, config.allowance,
                config.case_insensitive, Orientation.FORWARD
            ))
        if config.reverse_complement_mode.searches_reverse:
            streams.append(find_matches(
                sequence, config.reverse_pattern, config.allowance,
                config.case_insensitive, Orientation.REVERSE_COMPLEMENT
            ))
        if len(streams) == 1:
            return streams[0]
        return heapq.merge(*streams, key=lambda site: site.sort_key)
    
    def scan_record(self, record: Record) -> Optional[RecordOutcome]:
        """Outcome for one record, or None if nothing matched."""
        self.summary.records_read += 1
        
        if self.config.headers_only:
            sites: List[MatchSite] = []
            count = sum(1 for _ in self.find_sites(record.sequence))
        else:
            sites = list(self.find_sites(record.sequence))
            count = len(sites)
        
        logger.debug(f"{record.id or '<no id>'}: {count} site(s) in {len(record)} bp")
        if count == 0:
            return None
        
        self.summary.records_matched += 1
        self.summary.total_sites += count
        return RecordOutcome(
            header=record.header,
            match_count=count,
            sites=sites,
            sequence=None if self.config.headers_only else record.sequence,
        )
    
    def scan(self, records: Iterable[Record]) -> Iterator[RecordOutcome]:
        """Lazily yield outcomes for the matching records."""
        logger.info(f"Scanning with {self.config.describe()}")
        for record in records:
            outcome = self.scan_record(record)
            if outcome is not None:
                yield outcome
        logger.info(
            f"Scanned {self.summary.records_read} record(s): "
            f"{self.summary.records_matched} matched, {self.summary.total_sites} site(s)"
        )


def scan(records: Iterable[Record], config: ScanConfig) -> Iterator[RecordOutcome]:
    """Scan a record stream with a configuration."""
    return Scanner(config).scan(records)
