"""Data models for nucgrep."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Orientation(Enum):
    """Orientation of the pattern that produced a match."""
    FORWARD = "forward"
    REVERSE_COMPLEMENT = "reverse-complement"
    
    @property
    def strand(self) -> str:
        """Strand symbol as used in tabular output."""
        return "+" if self is Orientation.FORWARD else "-"
    
    @property
    def rank(self) -> int:
        """Tie-break rank: forward sites sort before reverse-complement sites."""
        return 0 if self is Orientation.FORWARD else 1


@dataclass(frozen=True)
class Record:
    """One FASTA entry."""
    
    header: str
    sequence: str
    
    @property
    def id(self) -> str:
        """Header up to the first whitespace."""
        parts = self.header.split(None, 1)
        return parts[0] if parts else ""
    
    @property
    def description(self) -> str:
        """Header text after the identifier."""
        parts = self.header.split(None, 1)
        return parts[1] if len(parts) > 1 else ""
    
    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class MatchSite:
    """One approximate occurrence of the pattern in a sequence."""
    
    offset: int  # 0-based start in the record sequence
    length: int
    orientation: Orientation
    mismatches: int
    
    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.offset + self.length
    
    @property
    def is_exact(self) -> bool:
        return self.mismatches == 0
    
    @property
    def sort_key(self):
        return (self.offset, self.orientation.rank)
    
    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        data = asdict(self)
        data["orientation"] = self.orientation.value
        return data
    
    @classmethod
    def from_dict(cls, data: Dict) -> "MatchSite":
        """Create from dictionary."""
        data = dict(data)
        data["orientation"] = Orientation(data["orientation"])
        return cls(**data)


@dataclass
class RecordOutcome:
    """Scan result for a single matching record."""
    
    header: str
    match_count: int
    sites: List[MatchSite] = field(default_factory=list)
    sequence: Optional[str] = None  # None in headers-only mode
    
    @property
    def id(self) -> str:
        parts = self.header.split(None, 1)
        return parts[0] if parts else ""
    
    @property
    def orientations(self) -> List[Orientation]:
        """Distinct orientations present among the sites, forward first."""
        return sorted({site.orientation for site in self.sites}, key=lambda o: o.rank)
    
    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "header": self.header,
            "match_count": self.match_count,
            "sites": [site.to_dict() for site in self.sites],
        }


@dataclass
class ScanSummary:
    """Counters collected over one scan, used for logging."""
    
    records_read: int = 0
    records_matched: int = 0
    total_sites: int = 0
    
    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)
