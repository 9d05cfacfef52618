"""Padding configuration for pypkcs7."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pypkcs7._constants import DEFAULT_BLOCK_SIZE, ENV_BLOCK_SIZE, ENV_STRICT
from pypkcs7.exceptions import Pkcs7ConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class Pkcs7Config:
    """Codec configuration.

    Parameters
    ----------
    block_size : int
        Block size in bytes used when padding, and for alignment checks
        when *strict* is set. Must be 1 to 255 inclusive; validated by
        :class:`~pypkcs7.codec.Pkcs7Codec`.
    strict : bool
        When true, unpad also requires the input length to be a multiple
        of *block_size* and the padding marker to be at most *block_size*.
    """

    block_size: int = DEFAULT_BLOCK_SIZE
    strict: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> Pkcs7Config:
        """Create configuration from environment variables.

        Reads ``PKCS7_BLOCK_SIZE`` and ``PKCS7_STRICT``. Explicit keyword
        arguments override environment values.

        Returns
        -------
        Pkcs7Config
            Populated configuration.

        Raises
        ------
        Pkcs7ConfigError
            If ``PKCS7_BLOCK_SIZE`` is not an integer.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        size_env = env.get(ENV_BLOCK_SIZE)
        if size_env is not None and "block_size" not in overrides:
            try:
                config_kwargs["block_size"] = int(size_env.strip())
            except ValueError as exc:
                raise Pkcs7ConfigError(f"{ENV_BLOCK_SIZE} must be an integer (got {size_env!r})") from exc

        if "strict" not in overrides:
            config_kwargs["strict"] = _env_bool(env.get(ENV_STRICT), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
