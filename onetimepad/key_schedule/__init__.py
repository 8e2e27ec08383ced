"""
Key Schedule Package

This package produces one-time pad keys, either at random from the
codebook or derived from a password.
"""

from .pad_keys import generate_key, generate_key_for, derive_key_from_password, PAD_KDF_DEFAULT_PARAMS

__all__ = ['generate_key', 'generate_key_for', 'derive_key_from_password', 'PAD_KDF_DEFAULT_PARAMS']
