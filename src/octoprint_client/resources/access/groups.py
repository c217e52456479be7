# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""User groups of the access control system."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ...mapping import DeserializationConfig, Model, auto_attr
from ...resource import BaseResource
from .permissions import split_needs, unwrap_list


class Group(Model):
    key: str | None = auto_attr(str)
    name: str | None = auto_attr(str)
    description: str | None = auto_attr(str)
    permissions: list[str] | None = auto_attr(str, array=True)
    subgroups: list[str] | None = auto_attr(str, array=True)
    needs: dict[str, Any] | None = auto_attr(dict)
    needs_role: list[str] | None = auto_attr(str, array=True)
    default: bool | None = auto_attr(bool)
    removable: bool | None = auto_attr(bool)
    changeable: bool | None = auto_attr(bool)
    toggleable: bool | None = auto_attr(bool)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().transform(split_needs)


def _pick_group(response: Any, key: str) -> Group:
    # Writes answer with the full group list; return the one that was written.
    if isinstance(response, Mapping) and "groups" not in response:
        return Group.deserialize(response)
    groups = [Group.deserialize(entry) for entry in unwrap_list(response, "groups")]
    for group in groups:
        if group.key == key:
            return group
    raise LookupError(f"Group {key!r} missing from server response")


class Groups(BaseResource):
    path = "/api/access/groups"

    @classmethod
    def list(cls) -> list[Group]:
        response = cls.fetch_resource(deserialize=False)
        return [Group.deserialize(entry) for entry in unwrap_list(response, "groups")]

    @classmethod
    def add(
        cls,
        key: str,
        name: str,
        *,
        description: str = "",
        permissions: Iterable[str] = (),
        subgroups: Iterable[str] = (),
        default: bool = False,
    ) -> Group:
        params = {
            "key": key,
            "name": name,
            "description": description,
            "permissions": list(permissions),
            "subgroups": list(subgroups),
            "default": default,
        }
        return _pick_group(cls.post(params=params), key)

    @classmethod
    def get(cls, key: str) -> Group:
        return Group.deserialize(cls.fetch_resource(key, deserialize=False))

    @classmethod
    def update(cls, key: str, params: Mapping[str, Any]) -> Group:
        return _pick_group(cls.put(path=cls.resource_path(key), params=params), key)

    @classmethod
    def delete(cls, key: str) -> None:  # type: ignore[override]
        super().delete(path=cls.resource_path(key))


__all__ = ["Group", "Groups"]
