"""pypkcs7 - PKCS#7 block padding for block-cipher modes."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypkcs7")
except PackageNotFoundError:
    __version__ = "0+local"
from pypkcs7._constants import DEFAULT_BLOCK_SIZE, MAX_BLOCK_SIZE, MIN_BLOCK_SIZE
from pypkcs7.codec import Pkcs7Codec
from pypkcs7.config import Pkcs7Config
from pypkcs7.exceptions import (
    EmptyInputError,
    InvalidBlockSizeError,
    InvalidPaddingError,
    Pkcs7ConfigError,
    Pkcs7Error,
    Pkcs7InputError,
)
from pypkcs7.padding import pad, unpad

__all__ = [
    "__version__",
    "DEFAULT_BLOCK_SIZE",
    "EmptyInputError",
    "InvalidBlockSizeError",
    "InvalidPaddingError",
    "MAX_BLOCK_SIZE",
    "MIN_BLOCK_SIZE",
    "Pkcs7Codec",
    "Pkcs7Config",
    "Pkcs7ConfigError",
    "Pkcs7Error",
    "Pkcs7InputError",
    "pad",
    "unpad",
]
