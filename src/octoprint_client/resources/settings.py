# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Server settings.  Returned as plain dicts, the tree is too plugin dependent to type."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..resource import BaseResource


class Settings(BaseResource):
    path = "/api/settings"

    @classmethod
    def get(cls) -> dict[str, Any]:
        return cls.fetch_resource(deserialize=False)

    @classmethod
    def save(cls, settings: Mapping[str, Any]) -> Any:
        """Save a (partial) settings tree; keys use OctoPrint's own camelCase names."""
        return cls.post(params=settings)

    @classmethod
    def regenerate_api_key(cls) -> Any:
        return cls.post(path=cls.resource_path("apikey"))

    @classmethod
    def fetch_templates(cls) -> dict[str, Any]:
        return cls.fetch_resource("templates", deserialize=False)


__all__ = ["Settings"]
