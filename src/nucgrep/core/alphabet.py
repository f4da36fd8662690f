#!/usr/bin/env python3
"""
Nucleotide alphabet module for nucgrep.

Symbols are compared literally. IUPAC ambiguity codes such as ``N`` are
ordinary symbols: ``N`` matches ``N`` (or ``n`` when case is folded) and
nothing else. Complements preserve case; symbols outside the IUPAC
nucleotide alphabet have no complement.
"""

from ..exceptions import UnsupportedSymbolError


# IUPAC nucleotide codes plus the alignment gap
NUCLEOTIDE_SYMBOLS = frozenset("ACGTURYKMSWBDHVN-acgturykmswbdhvn")

_DNA_COMPLEMENT = {
    'A': 'T', 'T': 'A', 'U': 'A',
    'C': 'G', 'G': 'C',
    'R': 'Y', 'Y': 'R',
    'K': 'M', 'M': 'K',
    'B': 'V', 'V': 'B',
    'D': 'H', 'H': 'D',
    'S': 'S', 'W': 'W',
    'N': 'N', '-': '-',
}

COMPLEMENT = dict(_DNA_COMPLEMENT)
COMPLEMENT.update({k.lower(): v.lower() for k, v in _DNA_COMPLEMENT.items() if k.isalpha()})

RNA_COMPLEMENT = dict(COMPLEMENT, A='U', a='u')


def comparison_key(symbol: str, case_insensitive: bool = False) -> str:
    """Canonical form of a symbol for equality tests."""
    return symbol.upper() if case_insensitive else symbol


def normalize(text: str, case_insensitive: bool = False) -> str:
    """Apply ``comparison_key`` to every symbol of a string."""
    return text.upper() if case_insensitive else text


def is_nucleotide(symbol: str) -> bool:
    return symbol in NUCLEOTIDE_SYMBOLS


def validate_symbols(pattern: str) -> None:
    """
    Check that every symbol of a pattern belongs to the nucleotide alphabet.
    
    Raises:
        UnsupportedSymbolError: For the first symbol outside the alphabet
    """
    for position, symbol in enumerate(pattern):
        if symbol not in NUCLEOTIDE_SYMBOLS:
            raise UnsupportedSymbolError(symbol, position)


def guess_is_rna(text: str) -> bool:
    """
    Decide whether a string is RNA (contains U and no T).
    
    Raises:
        UnsupportedSymbolError: If both T and U occur
    """
    upper = text.upper()
    has_u = 'U' in upper
    if has_u and 'T' in upper:
        position = min(upper.index('T'), upper.index('U'))
        raise UnsupportedSymbolError(
            text[position], position,
            message="Cannot complement a sequence mixing T and U"
        )
    return has_u


def complement(symbol: str, is_rna: bool = False) -> str:
    """
    Complement of a single symbol, preserving case.
    
    Args:
        symbol: One nucleotide character
        is_rna: Complement A to U instead of T
        
    Returns:
        The pairing partner of ``symbol``
        
    Raises:
        UnsupportedSymbolError: If ``symbol`` has no defined complement
    """
    table = RNA_COMPLEMENT if is_rna else COMPLEMENT
    try:
        return table[symbol]
    except KeyError:
        raise UnsupportedSymbolError(symbol) from None
