"""
Pad Key Generation

This module produces keys (pads) for the one-time pad cipher: random keys
drawn from the codebook, and deterministic keys derived from a password
with Argon2id. A key should be at least as long as the message it protects.
"""

import logging
import secrets
from typing import Dict, Optional, Tuple
import argon2

from ..codebook.table import CODEBOOK, CODEBOOK_SIZE
from ..transcoder.codec import encode

logger = logging.getLogger(__name__)

# Default parameters for Argon2id
PAD_KDF_DEFAULT_PARAMS = {
    'time_cost': 4,       # Number of iterations
    'memory_cost': 65536, # 64 MB
    'parallelism': 4,     # Number of threads
    'salt_len': 16        # Salt size in bytes
}

# Largest multiple of the codebook size that fits in a byte; bytes at or
# above it are rejected so that every symbol is equally likely
_REJECTION_LIMIT = 256 - 256 % CODEBOOK_SIZE


def generate_key(length: int) -> str:
    """
    Generate a random key of codebook symbols.

    Args:
        length: Number of symbols in the key

    Returns:
        A random key string
    """
    if length < 1:
        raise ValueError(f"Key length must be at least 1, got {length}")
    return "".join(secrets.choice(CODEBOOK) for _ in range(length))


def generate_key_for(message: str) -> str:
    """
    Generate a random key exactly as long as the encodable part of a message.

    Args:
        message: The plaintext the key will protect

    Returns:
        A random key string
    """
    length = len(encode(message)) // 2
    if length == 0:
        raise ValueError("Message contains no codebook symbols")
    return generate_key(length)


def _bytes_to_symbols(data: bytes, length: int) -> str:
    """
    Map raw bytes to codebook symbols by rejection sampling.

    Args:
        data: Raw key material
        length: Maximum number of symbols to produce

    Returns:
        Up to `length` symbols; fewer if too many bytes were rejected
    """
    symbols = []
    for b in data:
        if b >= _REJECTION_LIMIT:
            continue
        symbols.append(CODEBOOK[b % CODEBOOK_SIZE])
        if len(symbols) == length:
            break
    return "".join(symbols)


def derive_key_from_password(password: str,
                             length: int,
                             salt: Optional[bytes] = None,
                             params: Optional[Dict[str, int]] = None) -> Tuple[str, bytes]:
    """
    Derive a key of codebook symbols from a password using Argon2id.

    The same password, salt, parameters and length always produce the
    same key.

    Args:
        password: The password to derive the key from
        length: Number of symbols in the key
        salt: Optional salt (will be generated if not provided)
        params: Optional parameters for Argon2id

    Returns:
        A tuple of (key, salt)
    """
    if length < 1:
        raise ValueError(f"Key length must be at least 1, got {length}")

    if params is None:
        params = PAD_KDF_DEFAULT_PARAMS

    if salt is None:
        salt = secrets.token_bytes(params.get('salt_len', PAD_KDF_DEFAULT_PARAMS['salt_len']))

    # Rejection discards about 22% of bytes, so start with twice the length
    hash_len = max(32, 2 * length)
    while True:
        raw = argon2.low_level.hash_secret_raw(
            secret=password.encode('utf-8'),
            salt=salt,
            time_cost=params.get('time_cost', PAD_KDF_DEFAULT_PARAMS['time_cost']),
            memory_cost=params.get('memory_cost', PAD_KDF_DEFAULT_PARAMS['memory_cost']),
            parallelism=params.get('parallelism', PAD_KDF_DEFAULT_PARAMS['parallelism']),
            hash_len=hash_len,
            type=argon2.low_level.Type.ID  # Argon2id variant
        )
        key = _bytes_to_symbols(raw, length)
        if len(key) == length:
            return key, salt
        logger.debug(f"Derived {len(key)}/{length} symbols from {hash_len} bytes, retrying")
        hash_len *= 2


if __name__ == "__main__":
    key = generate_key(16)
    print(f"Random key: {key!r}")
    assert len(key) == 16

    fast_params = {'time_cost': 1, 'memory_cost': 8, 'parallelism': 1, 'salt_len': 16}
    derived, salt = derive_key_from_password("correct horse", 24, params=fast_params)
    print(f"Derived key: {derived!r}")
    print(f"Salt: {salt.hex()}")

    again, _ = derive_key_from_password("correct horse", 24, salt=salt, params=fast_params)
    assert derived == again

    print("Pad key checks completed successfully!")
