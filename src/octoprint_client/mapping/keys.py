# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Key case conversion for OctoPrint payloads.

OctoPrint mixes conventions: most endpoints answer in camelCase
(``displayVersion``, ``estimatedPrintTime``), a few in snake_case, and plugin
payloads occasionally use dashes.  Everything the client hands out uses
snake_case keys so attribute declarations can match them directly.
"""

from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Any


__all__ = [
    "camel_to_snake",
    "deep_underscore_keys",
    "is_camel_case",
    "underscore",
]


_CAMEL_BOUNDARY = re.compile(r"[a-z][A-Z]")
_LOWER_UPPER = re.compile(r"([a-z\d])([A-Z])")
_WORD_BOUNDARY = re.compile(r"([A-Z]+)(?=[A-Z][a-z])|([a-z\d])(?=[A-Z])")


def is_camel_case(key: str) -> bool:
    """Return whether ``key`` has a lower-case letter followed by an upper-case one."""
    return bool(_CAMEL_BOUNDARY.search(key))


def camel_to_snake(key: str) -> str:
    """Convert ``firstName`` style keys to ``first_name``."""
    return _LOWER_UPPER.sub(r"\1_\2", key).lower()


def underscore(key: str) -> str:
    """Convert a key to snake_case, acronym aware.

    ``HTTPServer`` becomes ``http_server`` and ``config-hash`` becomes
    ``config_hash``.  Keys that are already snake_case come back unchanged.
    """
    word = key.replace("::", "/")
    word = _WORD_BOUNDARY.sub(lambda match: (match.group(1) or match.group(2)) + "_", word)
    return word.replace("-", "_").lower()


def deep_underscore_keys(value: Any) -> Any:
    """Return ``value`` with every mapping key converted by :func:`underscore`.

    Lists are walked recursively; non-string keys are kept as they are.
    """
    if isinstance(value, Mapping):
        return {
            (underscore(key) if isinstance(key, str) else key): deep_underscore_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [deep_underscore_keys(item) for item in value]
    return value
