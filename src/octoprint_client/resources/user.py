# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""The user owning the API key in use."""

from __future__ import annotations

from typing import Any

from ..mapping import Model, auto_attr
from ..resource import BaseResource


class CurrentUser(Model, BaseResource):
    path = "/api/currentuser"

    name: str | None = auto_attr(str)
    permissions: list[str] | None = auto_attr(list)
    groups: list[str] | None = auto_attr(list)
    extra: dict[str, Any] | None = auto_attr(dict)

    @classmethod
    def current(cls) -> CurrentUser:
        return cls.fetch_resource()


__all__ = ["CurrentUser"]
