# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Client settings, optionally read from the environment."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from typing import Final


ENV_HOST: Final[str] = "OCTOPRINT_HOST"
ENV_API_KEY: Final[str] = "OCTOPRINT_API_KEY"
ENV_TIMEOUT: Final[str] = "OCTOPRINT_TIMEOUT"
ENV_VERIFY_SSL: Final[str] = "OCTOPRINT_VERIFY_SSL"

DEFAULT_TIMEOUT: Final[float] = 30.0

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True)
class ClientConfig:
    """Connection settings for :class:`~octoprint_client.client.Client`."""

    host: str | None = None
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    verify: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Read settings from ``OCTOPRINT_*`` variables.

        Unset variables keep the defaults; an unparsable timeout raises
        ``ValueError``.
        """
        env = os.environ if environ is None else environ

        timeout = DEFAULT_TIMEOUT
        raw_timeout = env.get(ENV_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ValueError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from exc

        raw_verify = env.get(ENV_VERIFY_SSL)
        verify = raw_verify is None or raw_verify.strip().lower() not in _FALSE_VALUES

        return cls(
            host=env.get(ENV_HOST) or None,
            api_key=env.get(ENV_API_KEY) or None,
            timeout=timeout,
            verify=verify,
        )


__all__ = ["ClientConfig"]
