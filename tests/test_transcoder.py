"""Tests for converting between text and code strings."""

from __future__ import annotations

import numpy as np
import pytest

from onetimepad.codebook import CODEBOOK
from onetimepad.transcoder import (
    MalformedCodeError,
    decode,
    encode,
    from_digits,
    is_code,
    to_digits,
)


def test_encode_matches_documented_example() -> None:
    assert encode("Hello") == "3304111114"


def test_encode_hello_world() -> None:
    assert encode("Hello world") == "3304111114942214171103"
    assert decode("3304111114942214171103") == "Hello world"


def test_encode_zero_pads_single_digit_indices() -> None:
    assert encode("abj") == "000109"


@pytest.mark.parametrize(
    "text",
    [
        "Hello world",
        "My secret message",
        "line one\nline two\r\n\tindented",
        "quotes ' \" and \\ backslash",
        "dashes – and —",
        "".join(CODEBOOK),
    ],
)
def test_decode_inverts_encode_for_codebook_text(text: str) -> None:
    code = encode(text)
    assert len(code) == 2 * len(text)
    assert decode(code) == text


def test_encode_filters_unknown_characters() -> None:
    assert encode("Héllo€ wörld") == encode("Hllo wrld")
    assert encode("€é") == ""


def test_encode_and_decode_empty() -> None:
    assert encode("") == ""
    assert decode("") == ""


@pytest.mark.parametrize("code", ["1", "123", "33041"])
def test_decode_rejects_odd_length(code: str) -> None:
    with pytest.raises(MalformedCodeError):
        decode(code)


@pytest.mark.parametrize("code", ["3a", "33 4", "-1", "٣٣"])
def test_decode_rejects_non_digit_characters(code: str) -> None:
    with pytest.raises(MalformedCodeError):
        decode(code)


def test_malformed_code_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        decode("999")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0123456789", True),
        ("", False),
        ("12a", False),
        ("1.5", False),
        ("٣", False),
    ],
)
def test_is_code(text: str, expected: bool) -> None:
    assert is_code(text) is expected


def test_digit_stream_view_of_code_string() -> None:
    digits = to_digits("3304111114")

    assert digits.dtype == np.uint8
    assert digits.tolist() == [3, 3, 0, 4, 1, 1, 1, 1, 1, 4]
    assert from_digits(digits) == "3304111114"
    assert from_digits([0, 9, 5]) == "095"


def test_digit_stream_of_empty_string() -> None:
    assert to_digits("").size == 0
    assert from_digits(np.zeros(0, dtype=np.uint8)) == ""


def test_to_digits_rejects_non_digits() -> None:
    with pytest.raises(MalformedCodeError):
        to_digits("12x4")


def test_from_digits_rejects_values_above_nine() -> None:
    with pytest.raises(ValueError):
        from_digits([1, 10])
