"""
Transcoder Package

This package implements the reversible mapping between text and
number-encoded code strings, plus the single-digit stream view of a
code string used by the cipher.
"""

from .codec import encode, decode, is_code, to_digits, from_digits, MalformedCodeError

__all__ = ['encode', 'decode', 'is_code', 'to_digits', 'from_digits', 'MalformedCodeError']
