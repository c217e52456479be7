# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Shared value types of the OctoPrint API."""

from __future__ import annotations

from enum import Enum


class Location(Enum):
    """Storage holding a file.

    ``LOCAL`` is OctoPrint's uploads folder, ``SDCARD`` the printer's SD card.
    """

    LOCAL = "local"
    SDCARD = "sdcard"

    @classmethod
    def deserialize(cls, value: str | Location) -> Location:
        if isinstance(value, cls):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value


__all__ = ["Location"]
