from __future__ import annotations

import pytest

from pypkcs7._constants import INVALID_PADDING_MESSAGE
from pypkcs7.exceptions import EmptyInputError, InvalidBlockSizeError, InvalidPaddingError
from pypkcs7.padding import pad, unpad


def _sample(length: int) -> bytes:
    return bytes((i * 7 + 3) % 256 for i in range(length))


def test_pad_short_block() -> None:
    assert pad(bytes([0xDE, 0xAD, 0xBE, 0xEF]), 8) == bytes([0xDE, 0xAD, 0xBE, 0xEF, 0x04, 0x04, 0x04, 0x04])


def test_pad_partial_aes_block() -> None:
    data = bytes.fromhex("deadbeef" * 3)
    assert pad(data, 16) == data + b"\x04" * 4


def test_pad_longer_than_one_block() -> None:
    data = bytes.fromhex("deadbeef" * 5)
    padded = pad(data, 16)
    assert len(padded) == 32
    assert padded == data + b"\x0c" * 12


def test_pad_empty_adds_full_block_and_unpads_back() -> None:
    padded = pad(b"", 16)
    assert padded == b"\x10" * 16
    assert unpad(padded) == b""


def test_pad_aligned_input_adds_full_block() -> None:
    data = b"a" * 24
    assert pad(data, 8) == data + b"\x08" * 8


def test_pad_defaults_to_aes_block_size() -> None:
    assert pad(b"abc") == b"abc" + b"\x0d" * 13


def test_round_trip_every_block_size() -> None:
    for block_size in range(1, 256):
        for length in (0, 1, block_size - 1, block_size, block_size + 1, 2 * block_size + 3):
            data = _sample(length)
            padded = pad(data, block_size)
            assert len(padded) % block_size == 0
            assert len(padded) > len(data)
            assert unpad(padded) == data


def test_pad_block_size_bounds() -> None:
    assert pad(b"abc", 1) == b"abc\x01"
    assert pad(b"", 255) == b"\xff" * 255

    for bad in (0, 256, -1):
        with pytest.raises(InvalidBlockSizeError, match="between 1 and 255 inclusive") as exc_info:
            pad(b"\x01\x02\x03\x04", bad)
        assert exc_info.value.block_size == bad


def test_pad_rejects_non_int_block_size() -> None:
    with pytest.raises(InvalidBlockSizeError):
        pad(b"abc", True)  # type: ignore[arg-type]
    with pytest.raises(InvalidBlockSizeError):
        pad(b"abc", 8.0)  # type: ignore[arg-type]


def test_pad_does_not_mutate_input() -> None:
    source = bytearray(b"hello")
    padded = pad(source, 8)
    assert source == bytearray(b"hello")
    assert isinstance(padded, bytes)
    assert padded == b"hello\x03\x03\x03"


def test_unpad_empty_raises() -> None:
    with pytest.raises(EmptyInputError, match="must not be empty"):
        unpad(b"")


def test_unpad_zero_marker_is_invalid() -> None:
    with pytest.raises(InvalidPaddingError):
        unpad(bytes([0x01, 0x02, 0x03, 0x00]))


def test_unpad_marker_longer_than_input_is_invalid() -> None:
    with pytest.raises(InvalidPaddingError):
        unpad(b"\x01\x05")


def test_unpad_tampered_padding_byte_is_invalid() -> None:
    padded = bytearray(pad(b"hello", 8))
    padded[5] = 0x02
    with pytest.raises(InvalidPaddingError):
        unpad(bytes(padded))


def test_unpad_errors_are_indistinguishable() -> None:
    messages = set()
    for bad in (b"\x01\x02\x03\x00", b"\x01\x05", b"hello\x02\x03\x03"):
        with pytest.raises(InvalidPaddingError) as exc_info:
            unpad(bad)
        messages.add(str(exc_info.value))
    assert messages == {INVALID_PADDING_MESSAGE}


def test_unpad_whole_input_is_padding() -> None:
    assert unpad(b"\x04" * 4) == b""


def test_unpad_accepts_marker_larger_than_aes_block() -> None:
    assert unpad(b"x" + b"\x11" * 17) == b"x"


def test_unpad_bytes_like_inputs() -> None:
    source = bytearray(b"abc\x01")
    assert unpad(source) == b"abc"
    assert source == bytearray(b"abc\x01")
    assert unpad(memoryview(b"abcd\x02\x02")) == b"abcd"
