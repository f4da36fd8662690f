#!/usr/bin/env python3
"""
Tests for the nucleotide alphabet and the reverse-complement transform.
"""

import pytest

from nucgrep.core.alphabet import (
    complement, comparison_key, guess_is_rna, is_nucleotide, normalize, validate_symbols
)
from nucgrep.core.revcomp import reverse_complement
from nucgrep.exceptions import ConfigurationError, UnsupportedSymbolError


def test_comparison_key_folds_case_only_when_insensitive():
    assert comparison_key("a", case_insensitive=True) == "A"
    assert comparison_key("A", case_insensitive=True) == "A"
    assert comparison_key("a", case_insensitive=False) == "a"
    assert normalize("acGt", True) == "ACGT"
    assert normalize("acGt", False) == "acGt"


@pytest.mark.parametrize("symbol,expected", [
    ("A", "T"), ("T", "A"), ("C", "G"), ("G", "C"),
    ("a", "t"), ("g", "c"), ("U", "A"), ("u", "a"),
    ("R", "Y"), ("K", "M"), ("B", "V"), ("d", "h"),
    ("N", "N"), ("n", "n"), ("S", "S"), ("W", "W"), ("-", "-"),
])
def test_complement(symbol, expected):
    assert complement(symbol) == expected


def test_complement_rna_pairs_a_with_u():
    assert complement("A", is_rna=True) == "U"
    assert complement("a", is_rna=True) == "u"
    assert complement("G", is_rna=True) == "C"


def test_complement_unknown_symbol():
    with pytest.raises(UnsupportedSymbolError) as excinfo:
        complement("X")
    assert excinfo.value.symbol == "X"


def test_validate_symbols_reports_position():
    validate_symbols("ACGTNacgtnRYKM-")
    with pytest.raises(UnsupportedSymbolError) as excinfo:
        validate_symbols("ACG T")
    assert excinfo.value.position == 3
    assert excinfo.value.symbol == " "
    assert isinstance(excinfo.value, ConfigurationError)


def test_is_nucleotide():
    assert is_nucleotide("N")
    assert is_nucleotide("u")
    assert not is_nucleotide("X")
    assert not is_nucleotide("*")


def test_guess_is_rna():
    assert guess_is_rna("AUG") is True
    assert guess_is_rna("ATG") is False
    assert guess_is_rna("AAAA") is False
    with pytest.raises(UnsupportedSymbolError):
        guess_is_rna("atgcu")


@pytest.mark.parametrize("pattern,is_rna,expected", [
    ("ATG", False, "CAT"),
    ("atgcn", False, "ngcat"),
    ("augcn", True, "ngcau"),
    ("GCTA", False, "TAGC"),
    ("GCUA", None, "UAGC"),
    ("GcuA", None, "UagC"),
    ("GGGGaaaaaaaatttatatat", None, "atatataaattttttttCCCC"),
    ("GGGGaaaaaaaauuuauauau", None, "auauauaaauuuuuuuuCCCC"),
    ("AUG", True, "CAU"),
    ("AUG", False, "CAT"),
    ("vnhdbatgcywsmkrd", None, "hymkswrgcatvhdnb"),
    ("ATGCNHVBYWSMKRD", None, "HYMKSWRVBDNGCAT"),
    ("ATGCNhVBYWsMKRdD", None, "HhYMKsWRVBdNGCAT"),
    ("aAaAAAA", None, "TTTTtTt"),
    ("aAaAAAA", True, "UUUUuUu"),
])
def test_reverse_complement(pattern, is_rna, expected):
    assert reverse_complement(pattern, is_rna) == expected


def test_reverse_complement_unknown_symbol():
    with pytest.raises(UnsupportedSymbolError) as excinfo:
        reverse_complement("blarghblergh!")
    assert excinfo.value.symbol == "!"
    assert excinfo.value.position == 12


def test_reverse_complement_rejects_mixed_t_and_u():
    with pytest.raises(UnsupportedSymbolError):
        reverse_complement("atgcu")


@pytest.mark.parametrize("pattern", ["ATGA", "AATT", "acgtNNrykm", "GATTACA", "A", "AUGGCU"])
def test_reverse_complement_round_trip(pattern):
    once = reverse_complement(pattern)
    assert len(once) == len(pattern)
    assert reverse_complement(once) == pattern


def test_self_complementary_pattern():
    assert reverse_complement("AATT") == "AATT"
    assert reverse_complement("GAATTC") == "GAATTC"
