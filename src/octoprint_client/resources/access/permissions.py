# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Permissions known to the access control system."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...mapping import DeserializationConfig, Model, auto_attr
from ...resource import BaseResource


def split_needs(data: dict[str, Any]) -> None:
    """Expose ``needs.role`` as ``needs_role``.

    OctoPrint describes what a permission, group or user requires as
    ``{"needs": {"role": [...]}}``.
    """
    needs = data.get("needs")
    if isinstance(needs, Mapping) and needs.get("role") is not None:
        data["needs_role"] = needs["role"]


def unwrap_list(response: Any, key: str) -> list[Any]:
    """Return the list stored under ``key``, or ``response`` itself when it is a bare list."""
    if isinstance(response, Mapping):
        response = response.get(key)
    return list(response) if isinstance(response, list) else []


class Permission(Model):
    key: str | None = auto_attr(str)
    name: str | None = auto_attr(str)
    dangerous: bool | None = auto_attr(bool)
    default_groups: list[str] | None = auto_attr(str, array=True)
    description: str | None = auto_attr(str)
    needs: dict[str, Any] | None = auto_attr(dict)
    needs_role: list[str] | None = auto_attr(str, array=True)
    plugin: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().transform(split_needs)


class Permissions(BaseResource):
    path = "/api/access/permissions"

    @classmethod
    def list(cls) -> list[Permission]:
        response = cls.fetch_resource(deserialize=False)
        return [Permission.deserialize(entry) for entry in unwrap_list(response, "permissions")]


__all__ = ["Permission", "Permissions"]
