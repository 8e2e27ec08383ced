"""
Codebook Package

This package holds the fixed 100-symbol alphabet and the two lookups
(index -> symbol, symbol -> index) every other component is built on.
"""

from .table import CODEBOOK, CODEBOOK_SIZE, symbol_at, index_of, contains

__all__ = ['CODEBOOK', 'CODEBOOK_SIZE', 'symbol_at', 'index_of', 'contains']
