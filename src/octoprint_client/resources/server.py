# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Server and API version information."""

from __future__ import annotations

from typing import Any

from ..mapping import Model, auto_attr
from ..resource import BaseResource


class ServerVersion(Model, BaseResource):
    path = "/api/version"

    api: str | None = auto_attr(str)
    server: str | None = auto_attr(str)
    text: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)

    @classmethod
    def get(cls) -> ServerVersion:
        return cls.fetch_resource()


class ServerInformation(Model, BaseResource):
    """Server version and, if OctoPrint runs in safe mode, the reason for it."""

    path = "/api/server"

    version: str | None = auto_attr(str)
    safemode: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)

    @classmethod
    def get(cls) -> ServerInformation:
        return cls.fetch_resource()


__all__ = ["ServerInformation", "ServerVersion"]
