"""Rendering of scan outcomes for the terminal."""

from __future__ import annotations

from typing import IO, List, Optional, Tuple

from rich.console import Console
from rich.text import Text

from .models import MatchSite, RecordOutcome


EXACT_STYLE = "bold green"
APPROXIMATE_STYLE = "bold yellow"


def merge_sites(sites: List[MatchSite]) -> List[Tuple[int, int, bool]]:
    """
    Collapse overlapping or touching sites into highlight spans.
    
    Returns:
        List of (start, end, exact) with end exclusive; a span is exact
        when any site inside it has no mismatches
    """
    spans: List[List] = []
    for site in sorted(sites, key=lambda s: s.sort_key):
        if spans and site.offset <= spans[-1][1]:
            span = spans[-1]
            span[1] = max(span[1], site.end)
            span[2] = span[2] or site.is_exact
        else:
            spans.append([site.offset, site.end, site.is_exact])
    return [tuple(span) for span in spans]


def highlight(sequence: str, sites: List[MatchSite]) -> Text:
    """Sequence as rich Text with matched windows styled."""
    text = Text(sequence)
    for start, end, exact in merge_sites(sites):
        text.stylize(EXACT_STYLE if exact else APPROXIMATE_STYLE, start, end)
    return text


def site_rows(outcome: RecordOutcome) -> List[str]:
    """Tab-separated description of every site of an outcome."""
    rows = []
    for site in outcome.sites:
        matched = outcome.sequence[site.offset:site.end] if outcome.sequence is not None else ""
        rows.append("\t".join([
            outcome.header,
            str(site.offset),
            str(site.end),
            site.orientation.strand,
            str(site.mismatches),
            matched,
        ]))
    return rows


class OutcomeFormatter:
    """Writes RecordOutcome objects to a console."""
    
    def __init__(
        self,
        file: Optional[IO] = None,
        headers_only: bool = False,
        sites: bool = False,
        color: bool = True,
        console: Optional[Console] = None,
    ):
        """
        Initialize formatter.
        
        Args:
            file: Output stream (stdout when None)
            headers_only: Only print header lines
            sites: Print one tab-separated row per site instead of sequences
            color: Highlight matches when the output supports it
            console: Pre-built console, overrides file and color
        """
        self.headers_only = headers_only
        self.sites = sites
        self.console = console or Console(
            file=file,
            color_system="auto" if color else None,
            highlight=False,
            soft_wrap=True,
        )
    
    def render(self, outcome: RecordOutcome) -> List[Text]:
        """Lines to print for one outcome in record mode."""
        header = Text(f">{outcome.header}")
        if self.headers_only or outcome.sequence is None:
            return [header]
        return [header, highlight(outcome.sequence, outcome.sites)]
    
    def write(self, outcome: RecordOutcome) -> None:
        if self.sites and not self.headers_only:
            # written raw, rich would expand the tabs
            file = self.console.file
            for row in site_rows(outcome):
                file.write(row + "\n")
            return
        for line in self.render(outcome):
            self.console.print(line)
