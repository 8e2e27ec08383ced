"""
One-Time Pad Mode Package

This package combines a number-encoded message with a number-encoded key
digit by digit, and reports failures as tagged results rather than
exceptions.
"""

from .combinator import (
    otp, encrypt, decrypt, repeat_key,
    Mode, OTPError, OTPResult, OTPFailure,
)

__all__ = [
    'otp', 'encrypt', 'decrypt', 'repeat_key',
    'Mode', 'OTPError', 'OTPResult', 'OTPFailure',
]
