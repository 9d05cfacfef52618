"""PKCS#7 padding (RFC 5652, section 6.3).

The padding length ``n`` is always between 1 and the block size, and the
padding itself is ``n`` copies of the byte ``n``. When the input already
ends on a block boundary a full block of padding is appended, so every
padded value can be unpadded unambiguously.
"""

from __future__ import annotations

import hmac

from pypkcs7._constants import DEFAULT_BLOCK_SIZE, MAX_BLOCK_SIZE, MIN_BLOCK_SIZE
from pypkcs7.exceptions import EmptyInputError, InvalidBlockSizeError, InvalidPaddingError


def check_block_size(block_size: int) -> int:
    """Return *block_size* if PKCS#7 can encode it.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is not an int in ``[1, 255]``.
    """
    if isinstance(block_size, bool) or not isinstance(block_size, int):
        raise InvalidBlockSizeError(block_size)
    if block_size < MIN_BLOCK_SIZE or block_size > MAX_BLOCK_SIZE:
        raise InvalidBlockSizeError(block_size)
    return block_size


def pad(data: bytes, block_size: int = DEFAULT_BLOCK_SIZE) -> bytes:
    """Return *data* followed by its PKCS#7 padding.

    The block size is checked before anything else, so an out-of-range
    value never produces output. Between 1 and *block_size* marker bytes
    are always added; block-aligned input gets a whole extra block.

    Parameters
    ----------
    data : bytes
        Data to pad. Any bytes-like object is accepted and left untouched.
    block_size : int
        Block size in bytes, 1 to 255 inclusive (default 16).

    Returns
    -------
    bytes
        Padded data whose length is a multiple of *block_size*.

    Raises
    ------
    InvalidBlockSizeError
        If *block_size* is out of range.
    """
    check_block_size(block_size)
    pad_len = block_size - len(data) % block_size
    return bytes(data) + bytes([pad_len]) * pad_len


def unpad(data: bytes) -> bytes:
    """Strip PKCS#7 padding.

    Parameters
    ----------
    data : bytes
        Padded data. Any bytes-like object is accepted and left untouched.

    Returns
    -------
    bytes
        The data with its padding removed.

    Raises
    ------
    EmptyInputError
        If *data* is empty.
    InvalidPaddingError
        If the padding is malformed. The error is the same for every
        kind of malformation.
    """
    view = memoryview(data).cast("B")
    length = len(view)
    if length == 0:
        raise EmptyInputError()

    pad_len = view[-1]
    if pad_len == 0 or pad_len > length:
        raise InvalidPaddingError()

    orig_len = length - pad_len
    # Constant time in the position of the first bad byte.
    if not hmac.compare_digest(view[orig_len:].tobytes(), bytes([pad_len]) * pad_len):
        raise InvalidPaddingError()
    return view[:orig_len].tobytes()
