"""Block-size-bound PKCS#7 codec.

Pads through ``cryptography``'s PKCS7 primitive, the same one block-cipher
callers use in front of AES-CBC, and optionally unpads with the stricter,
block-aware validation that primitive performs.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import padding as crypto_padding

from pypkcs7.config import Pkcs7Config
from pypkcs7.exceptions import EmptyInputError, InvalidPaddingError, Pkcs7InputError
from pypkcs7.padding import check_block_size, unpad

_logger = logging.getLogger(__name__)


def parse_hex_bytes(value: str, *, name: str) -> bytes:
    text = value.strip()
    if text.startswith("0x") or text.startswith("0X"):
        text = text[2:]
    if len(text) % 2 != 0:
        raise Pkcs7InputError(f"{name} hex length must be even (got {len(text)})")
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise Pkcs7InputError(f"{name} must be hex-encoded") from exc


class Pkcs7Codec:
    """PKCS#7 pad/unpad bound to one block size.

    Instances hold only an immutable :class:`Pkcs7Config` and may be
    shared freely between threads and tasks.
    """

    def __init__(self, config: Pkcs7Config | None = None) -> None:
        self._config = config or Pkcs7Config()
        check_block_size(self._config.block_size)
        self._algorithm = crypto_padding.PKCS7(self._config.block_size * 8)
        _logger.debug(
            "PKCS7 codec ready block_size=%d strict=%s",
            self._config.block_size,
            self._config.strict,
        )

    @property
    def config(self) -> Pkcs7Config:
        return self._config

    @property
    def block_size(self) -> int:
        return self._config.block_size

    def pad(self, data: bytes) -> bytes:
        """Pad *data* to a multiple of the configured block size."""
        padder = self._algorithm.padder()
        return padder.update(bytes(data)) + padder.finalize()

    def unpad(self, data: bytes) -> bytes:
        """Strip PKCS#7 padding from *data*.

        Raises
        ------
        EmptyInputError
            If *data* is empty.
        InvalidPaddingError
            If the padding is malformed, or, in strict mode, if *data* is
            not block aligned.
        """
        if not data:
            raise EmptyInputError()
        if not self._config.strict:
            try:
                return unpad(data)
            except InvalidPaddingError:
                _logger.debug("Rejected padded input of length %d", len(data))
                raise

        if len(data) % self._config.block_size != 0:
            _logger.debug("Rejected padded input of length %d", len(data))
            raise InvalidPaddingError()
        unpadder = self._algorithm.unpadder()
        try:
            return unpadder.update(bytes(data)) + unpadder.finalize()
        except ValueError:
            _logger.debug("Rejected padded input of length %d", len(data))
            raise InvalidPaddingError() from None

    def pad_hex(self, text: str) -> str:
        """Pad hex-encoded data, returning lowercase hex."""
        return self.pad(parse_hex_bytes(text, name="input")).hex()

    def unpad_hex(self, text: str) -> str:
        """Unpad hex-encoded data, returning lowercase hex."""
        return self.unpad(parse_hex_bytes(text, name="input")).hex()
