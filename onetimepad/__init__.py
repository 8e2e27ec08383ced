"""
onetimepad - Textbook One-Time Pad Cipher Library

This library implements the pencil-and-paper one-time pad: text is
substituted with two-digit code numbers from a fixed 100-symbol codebook,
then combined with a number-encoded key by digit-wise modular addition.

This is NOT secure encryption. There is no authentication, the caller
supplies the key, and modulo-10 addition leaks structure whenever a key is
reused or repeated.

Key Features:
- Fixed 100-symbol codebook (letters, digits, punctuation, whitespace)
- encode()/decode() between text and code strings
- otp() encryption and decryption with tagged results instead of exceptions
- Optional (insecure) key repetition for short keys
- Random and password-derived (Argon2id) pad keys

"""

from .transcoder import encode, decode
from .otp_mode import otp, Mode, OTPError, OTPResult
from .key_schedule import generate_key, derive_key_from_password

__version__ = '1.0.1'
__author__ = 'onetimepad Team'

__all__ = [
    'encode', 'decode', 'otp', 'Mode', 'OTPError', 'OTPResult',
    'generate_key', 'derive_key_from_password',
]
