"""Custom exception hierarchy for pypkcs7."""

from __future__ import annotations

from pypkcs7._constants import BLOCK_SIZE_MESSAGE, EMPTY_INPUT_MESSAGE, INVALID_PADDING_MESSAGE


class Pkcs7Error(Exception):
    """Base exception for all pypkcs7 errors."""


class Pkcs7ConfigError(Pkcs7Error):
    """Invalid configuration value."""


class Pkcs7InputError(Pkcs7Error):
    """Malformed caller input (e.g. bad hex text)."""


class InvalidBlockSizeError(Pkcs7Error):
    """Block size outside the 1..255 range PKCS#7 can encode."""

    def __init__(self, block_size: object) -> None:
        self.block_size = block_size
        super().__init__(BLOCK_SIZE_MESSAGE)


class EmptyInputError(Pkcs7Error):
    """Unpad was given an empty byte sequence."""

    def __init__(self) -> None:
        super().__init__(EMPTY_INPUT_MESSAGE)


class InvalidPaddingError(Pkcs7Error):
    """Padding failed validation.

    Raised with the same message whatever check failed (zero marker,
    marker longer than the data, or a mismatching padding byte), so a
    caller decrypting attacker-controlled ciphertext cannot be turned
    into a padding oracle by surfacing the error text.
    """

    def __init__(self) -> None:
        super().__init__(INVALID_PADDING_MESSAGE)
