"""
One-Time Pad Combinator

This module performs the actual one-time pad encryption or decryption.
The message and key are number-encoded with the codebook, treated as
streams of single decimal digits, and combined by modular addition
(encrypt) or subtraction (decrypt), modulo 10 with no carrying.

For the greatest security the key should be as random as possible and at
least as long as the message. Even then this is a textbook cipher: it has
no authentication and modulo-10 addition leaks structure. Do not use it to
protect real secrets.
"""

import os
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..transcoder.codec import encode, decode, is_code, to_digits, from_digits

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

LOG_PREFIX = "[onetimepad]"

# Environment variable supplying the default for key_repetition
KEY_REPETITION_ENV = "ONETIMEPAD_KEY_REPETITION"

KEY_REPETITION_WARNING = (
    "WARNING: The key is shorter than the message.\n"
    "The keyRepetition flag has been set, so the key will now be repeated "
    "until it's long enough, but this is not secure. Repetition of the key "
    "will cause statistical patterns in the ciphertext that will make it "
    "easier for a third party to decrypt it without the key. You really "
    "should use a key that's at least the same length as the message."
)


class Mode(str, Enum):
    """Direction of the one-time pad operation."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class OTPError(Enum):
    """Failure kinds returned by otp(); each value is the logged message."""
    EMPTY_INPUT = "The message and key must not be empty."
    INVALID_ENCODED_MESSAGE = "When decrypting, the message must only contain numbers."
    KEY_TOO_SHORT = "The key is shorter than the message."
    MALFORMED_CODE = "When decrypting, the message must have an even number of digits."

    @property
    def message(self) -> str:
        return self.value


class OTPFailure(ValueError):
    """Raised by OTPResult.unwrap() when the result holds an error."""

    def __init__(self, error: OTPError):
        super().__init__(f"Error: {error.message}")
        self.error = error


@dataclass(frozen=True)
class OTPResult:
    """Tagged result of otp(): either a value or an error, never both."""
    value: Optional[str] = None
    error: Optional[OTPError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("OTPResult must hold exactly one of value or error")

    @classmethod
    def success(cls, value: str) -> "OTPResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: OTPError) -> "OTPResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """
        Return the output string of a successful result.

        Raises:
            OTPFailure: If the result holds an error
        """
        if self.error is not None:
            raise OTPFailure(self.error)
        return self.value


def _fail(error: OTPError) -> OTPResult:
    logger.error(f"{LOG_PREFIX} Error: {error.message}")
    return OTPResult.failure(error)


def _default_key_repetition() -> bool:
    return os.environ.get(KEY_REPETITION_ENV, "").strip().lower() in ("1", "true", "yes")


def repeat_key(code_key: str, length: int) -> str:
    """
    Extend an encoded key by doubling it until it is at least `length` digits.

    The key is self-concatenated (key + key), so the result is always a
    power-of-two multiple of the original length. Digits beyond `length`
    are simply left unused by the caller.

    Args:
        code_key: The number-encoded key
        length: Minimum number of digits required

    Returns:
        The repeated key

    Raises:
        ValueError: If the key is empty and a positive length is required
    """
    if not code_key and length > 0:
        raise ValueError("Cannot repeat an empty key")
    while len(code_key) < length:
        code_key += code_key
    return code_key


def _combine(code_message: str, code_key: str, mode: Mode) -> str:
    """
    Add or subtract the key digits from the message digits, modulo 10.

    Args:
        code_message: The number-encoded message
        code_key: The number-encoded key, at least as long as the message
        mode: Mode.ENCRYPT to add, Mode.DECRYPT to subtract

    Returns:
        The combined digit string, same length as the message
    """
    message_digits = to_digits(code_message).astype(np.int16)
    key_digits = to_digits(code_key[:len(code_message)]).astype(np.int16)

    if mode is Mode.ENCRYPT:
        output = np.mod(message_digits + key_digits, 10)
    else:
        # np.mod takes the sign of the divisor, so the result is never negative
        output = np.mod(message_digits - key_digits, 10)

    return from_digits(output)


def otp(message: str,
        key: str,
        mode: Union[Mode, str],
        key_repetition: Optional[bool] = False) -> OTPResult:
    """
    Encrypt or decrypt a message with a key.

    Args:
        message: A plaintext string (encrypt) or a number-encoded ciphertext (decrypt)
        key: The plaintext key
        mode: Mode.ENCRYPT / "encrypt" or Mode.DECRYPT / "decrypt"
        key_repetition: Whether a key shorter than the message may be repeated
            until it's long enough. This is NOT secure. None reads the default
            from the ONETIMEPAD_KEY_REPETITION environment variable.

    Returns:
        An OTPResult holding either the ciphertext code string (encrypt),
        the recovered plaintext (decrypt), or the error kind

    Raises:
        ValueError: If mode is not "encrypt" or "decrypt"
    """
    mode = Mode(mode)
    if key_repetition is None:
        key_repetition = _default_key_repetition()

    # The message and key must not be empty
    if not message or not key:
        return _fail(OTPError.EMPTY_INPUT)

    code_key = encode(key)

    # In decrypt mode the message should already be number-encoded
    if mode is Mode.ENCRYPT:
        code_message = encode(message)
    else:
        if not is_code(message):
            return _fail(OTPError.INVALID_ENCODED_MESSAGE)
        if len(message) % 2 != 0:
            return _fail(OTPError.MALFORMED_CODE)
        code_message = message

    # The key should be at least the same length as the message
    if len(code_key) < len(code_message):
        if not key_repetition or not code_key:
            return _fail(OTPError.KEY_TOO_SHORT)
        if mode is Mode.ENCRYPT:
            logger.warning(f"{LOG_PREFIX} {KEY_REPETITION_WARNING}")
        code_key = repeat_key(code_key, len(code_message))

    code_output = _combine(code_message, code_key, mode)

    # Ciphertext stays number-encoded; plaintext is decoded back to text
    if mode is Mode.DECRYPT:
        return OTPResult.success(decode(code_output))
    return OTPResult.success(code_output)


def encrypt(message: str, key: str, key_repetition: Optional[bool] = False) -> OTPResult:
    """
    Encrypt a plaintext message with a key.

    Args:
        message: The plaintext to encrypt
        key: The plaintext key
        key_repetition: Whether a short key may be repeated (NOT secure)

    Returns:
        An OTPResult holding the ciphertext code string or the error kind
    """
    return otp(message, key, Mode.ENCRYPT, key_repetition)


def decrypt(ciphertext: str, key: str, key_repetition: Optional[bool] = False) -> OTPResult:
    """
    Decrypt a number-encoded ciphertext with a key.

    Args:
        ciphertext: The code string produced by encrypt()
        key: The plaintext key used for encryption
        key_repetition: Whether a short key may be repeated

    Returns:
        An OTPResult holding the recovered plaintext or the error kind
    """
    return otp(ciphertext, key, Mode.DECRYPT, key_repetition)


if __name__ == "__main__":
    message = "My secret message"
    key = "jE1&;bWi3f+w7TI8k"

    ciphertext = encrypt(message, key).unwrap()
    print(f"Message: {message!r}")
    print(f"Key: {key!r}")
    print(f"Ciphertext: {ciphertext}")
    assert ciphertext == "3754478888035502649989266753346614"

    plaintext = decrypt(ciphertext, key).unwrap()
    print(f"Decrypted: {plaintext!r}")
    assert plaintext == message

    # Short key without repetition must fail
    result = encrypt("Hello", "ab")
    print(f"Short key result: {result.error}")
    assert result.error is OTPError.KEY_TOO_SHORT

    # Non-numeric ciphertext must fail
    result = decrypt("abc", key)
    print(f"Non-numeric ciphertext result: {result.error}")
    assert result.error is OTPError.INVALID_ENCODED_MESSAGE

    print("One-time pad checks completed successfully!")
