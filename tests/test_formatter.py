#!/usr/bin/env python3
"""
Tests for outcome rendering.
"""

import io

from nucgrep.formatter import (
    APPROXIMATE_STYLE, EXACT_STYLE, OutcomeFormatter, highlight, merge_sites, site_rows
)
from nucgrep.models import MatchSite, Orientation, RecordOutcome


def site(offset, length=4, mismatches=0, orientation=Orientation.FORWARD):
    return MatchSite(offset=offset, length=length, orientation=orientation, mismatches=mismatches)


def test_merge_sites():
    sites = [site(0), site(2, mismatches=1), site(10, mismatches=1), site(14)]
    
    assert merge_sites(sites) == [(0, 6, True), (10, 18, True)]
    assert merge_sites([site(3, mismatches=2)]) == [(3, 7, False)]
    assert merge_sites([]) == []


def test_highlight_styles():
    text = highlight("CATGGAATGA", [site(1, mismatches=1), site(6)])
    
    assert text.plain == "CATGGAATGA"
    assert [(s.start, s.end, s.style) for s in text.spans] == [
        (1, 5, APPROXIMATE_STYLE),
        (6, 10, EXACT_STYLE),
    ]


def test_plain_output():
    buffer = io.StringIO()
    formatter = OutcomeFormatter(file=buffer, color=False)
    formatter.write(RecordOutcome("h1 sample", 1, [site(0)], sequence="ACGTTT"))
    
    assert buffer.getvalue() == ">h1 sample\nACGTTT\n"


def test_long_sequences_are_not_wrapped():
    buffer = io.StringIO()
    sequence = "ACGT" * 60
    OutcomeFormatter(file=buffer, color=False).write(RecordOutcome("h", 1, [site(0)], sequence=sequence))
    
    assert buffer.getvalue().splitlines() == [">h", sequence]


def test_header_markup_is_not_interpreted():
    buffer = io.StringIO()
    OutcomeFormatter(file=buffer, color=False, headers_only=True).write(
        RecordOutcome("chr1 [bold]x[/bold]", 2)
    )
    
    assert buffer.getvalue() == ">chr1 [bold]x[/bold]\n"


def test_headers_only_output():
    buffer = io.StringIO()
    formatter = OutcomeFormatter(file=buffer, headers_only=True, color=False)
    formatter.write(RecordOutcome("h1", 3))
    formatter.write(RecordOutcome("h2", 1))
    
    assert buffer.getvalue() == ">h1\n>h2\n"


def test_site_rows():
    outcome = RecordOutcome(
        "seq1", 2,
        [site(1, mismatches=1), site(1, orientation=Orientation.REVERSE_COMPLEMENT)],
        sequence="CATGGA",
    )
    
    assert site_rows(outcome) == [
        "seq1\t1\t5\t+\t1\tATGG",
        "seq1\t1\t5\t-\t0\tATGG",
    ]


def test_sites_output_keeps_tabs():
    buffer = io.StringIO()
    formatter = OutcomeFormatter(file=buffer, sites=True, color=False)
    formatter.write(RecordOutcome("seq1", 1, [site(1, mismatches=1)], sequence="CATGGA"))
    
    assert buffer.getvalue() == "seq1\t1\t5\t+\t1\tATGG\n"
