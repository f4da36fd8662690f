"""Reverse-complement transform."""

from typing import Optional

from ..exceptions import UnsupportedSymbolError
from .alphabet import COMPLEMENT, RNA_COMPLEMENT, guess_is_rna


def reverse_complement(pattern: str, is_rna: Optional[bool] = None) -> str:
    """
    Reverse complement of a pattern.
    
    Position i of the result is the complement of position len-1-i of the
    input. Case is preserved.
    
    Args:
        pattern: Nucleotide string
        is_rna: Force RNA (True) or DNA (False) pairing for A; guessed
            from the presence of U when None
            
    Returns:
        New string of the same length
        
    Raises:
        UnsupportedSymbolError: If a symbol has no complement, or when
            guessing and the pattern mixes T and U
    """
    if is_rna is None:
        is_rna = guess_is_rna(pattern)
    table = RNA_COMPLEMENT if is_rna else COMPLEMENT
    
    result = []
    for position in range(len(pattern) - 1, -1, -1):
        symbol = pattern[position]
        partner = table.get(symbol)
        if partner is None:
            raise UnsupportedSymbolError(symbol, position)
        result.append(partner)
    return "".join(result)
