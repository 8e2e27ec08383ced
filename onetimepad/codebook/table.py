"""
Codebook Table

This module defines the fixed 100-symbol codebook used to turn text into
two-digit code numbers and back. The order of the table is part of the
public contract: changing it breaks every code string produced before.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Number of symbols in the codebook (indices 0-99)
CODEBOOK_SIZE = 100

CODEBOOK: Tuple[str, ...] = (
    # 0-25: lowercase letters
    *"abcdefghijklmnopqrstuvwxyz",
    # 26-51: uppercase letters
    *"ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    # 52-61: digits
    *"0123456789",
    # 62-93: punctuation
    *"`~!@#$%^&*()-=_+[]{}|\\;:'\",.<>/?",
    # 94-99: whitespace controls and dashes
    " ", "\n", "\r", "\t", "–", "—",
)


def _create_reverse_table(codebook: Tuple[str, ...]) -> Mapping[str, int]:
    """
    Create the symbol -> index lookup for the codebook.

    Args:
        codebook: The forward table

    Returns:
        Read-only mapping from each symbol to its index
    """
    reverse = {symbol: index for index, symbol in enumerate(codebook)}
    if len(codebook) != CODEBOOK_SIZE or len(reverse) != CODEBOOK_SIZE:
        raise ValueError(
            f"Codebook must hold exactly {CODEBOOK_SIZE} distinct symbols, "
            f"got {len(codebook)} entries ({len(reverse)} distinct)"
        )
    return MappingProxyType(reverse)


_INDEX_OF = _create_reverse_table(CODEBOOK)


def symbol_at(index: int) -> str:
    """
    Look up the symbol stored at a codebook index.

    Args:
        index: Code number in range 0-99

    Returns:
        The symbol for that code number

    Raises:
        IndexError: If the index is outside 0-99
    """
    if not 0 <= index < CODEBOOK_SIZE:
        raise IndexError(f"Codebook index must be in range 0-{CODEBOOK_SIZE - 1}, got {index}")
    return CODEBOOK[index]


def index_of(symbol: str) -> Optional[int]:
    """
    Look up the codebook index of a symbol.

    Args:
        symbol: A single character

    Returns:
        The code number, or None if the symbol is not in the codebook
    """
    return _INDEX_OF.get(symbol)


def contains(symbol: str) -> bool:
    """Check whether a character is part of the codebook."""
    return symbol in _INDEX_OF


if __name__ == "__main__":
    for i in range(0, CODEBOOK_SIZE, 10):
        print(f"{i:02d}: {[symbol_at(j) for j in range(i, i + 10)]!r}")

    assert index_of("H") == 33
    assert index_of("€") is None
    assert all(index_of(symbol_at(i)) == i for i in range(CODEBOOK_SIZE))

    print("Codebook checks completed successfully!")
