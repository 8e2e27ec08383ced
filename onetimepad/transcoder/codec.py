"""
Codebook Transcoder

This module converts text into number-encoded "code" strings and back using
the codebook. Each character becomes a zero-padded two-digit code number.
This is substitution, not encryption.
"""

import numpy as np
from typing import Sequence, Union

from ..codebook.table import index_of, symbol_at

# Width of one code number in a code string
CODE_WIDTH = 2

_DIGIT_ZERO = ord("0")


class MalformedCodeError(ValueError):
    """Raised when a code string cannot be split into two-digit code numbers."""


def is_code(text: str) -> bool:
    """
    Check whether a string looks like a code string (ASCII decimal digits only).

    Args:
        text: The string to check

    Returns:
        True if the string is non-empty and holds only the digits 0-9
    """
    return bool(text) and text.isascii() and text.isdigit()


def encode(text: str) -> str:
    """
    Convert text characters to code numbers using the codebook.

    Characters that are not in the codebook are filtered out.

    Args:
        text: The text to encode

    Returns:
        The code string, two digits per encoded character
    """
    code = []
    for char in text:
        index = index_of(char)
        if index is not None:
            code.append(f"{index:02d}")
    return "".join(code)


def decode(code: str) -> str:
    """
    Convert a code string back to text using the codebook.

    Args:
        code: A code string such as the output of encode()

    Returns:
        The decoded text

    Raises:
        MalformedCodeError: If the code has an odd length or non-digit characters
    """
    if not code:
        return ""
    if len(code) % CODE_WIDTH != 0:
        raise MalformedCodeError(f"Code length must be even, got {len(code)} digits")
    if not is_code(code):
        raise MalformedCodeError("Code must only contain the digits 0-9")

    return "".join(
        symbol_at(int(code[i:i + CODE_WIDTH]))
        for i in range(0, len(code), CODE_WIDTH)
    )


def to_digits(code: str) -> np.ndarray:
    """
    Split a code string into its single-digit stream.

    Args:
        code: A string of decimal digits

    Returns:
        Array of digit values (0-9), one per character

    Raises:
        MalformedCodeError: If the string contains non-digit characters
    """
    if not code:
        return np.zeros(0, dtype=np.uint8)
    if not is_code(code):
        raise MalformedCodeError("Digit stream must only contain the digits 0-9")
    return np.frombuffer(code.encode("ascii"), dtype=np.uint8) - _DIGIT_ZERO


def from_digits(digits: Union[np.ndarray, Sequence[int]]) -> str:
    """
    Join a single-digit stream back into a code string.

    Args:
        digits: Digit values in range 0-9

    Returns:
        The digits as a string
    """
    digits = np.asarray(digits, dtype=np.uint8)
    if digits.size and digits.max() > 9:
        raise ValueError("Digit stream values must be in range 0-9")
    return (digits + _DIGIT_ZERO).astype(np.uint8).tobytes().decode("ascii")


if __name__ == "__main__":
    text = "Hello world"
    code = encode(text)
    print(f"Text: {text!r}")
    print(f"Code: {code}")
    print(f"Decoded: {decode(code)!r}")
    assert decode(code) == text
    assert encode("Hello") == "3304111114"

    try:
        decode("123")
        print("ERROR: Odd-length code not detected!")
    except MalformedCodeError as e:
        print(f"Correctly rejected malformed code: {e}")

    print("Transcoder checks completed successfully!")
