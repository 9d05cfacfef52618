"""Constants shared across pypkcs7."""

from __future__ import annotations

# PKCS#7 encodes the padding length in a single byte.
MIN_BLOCK_SIZE = 1
MAX_BLOCK_SIZE = 255

# AES block size in bytes.
DEFAULT_BLOCK_SIZE = 16

BLOCK_SIZE_MESSAGE = "pkcs7: block size must be between 1 and 255 inclusive"
EMPTY_INPUT_MESSAGE = "pkcs7: source must not be empty"
INVALID_PADDING_MESSAGE = "pkcs7: invalid padding"

ENV_BLOCK_SIZE = "PKCS7_BLOCK_SIZE"
ENV_STRICT = "PKCS7_STRICT"
