# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""User accounts, their passwords, personal settings and API keys."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ...mapping import DeserializationConfig, Model, auto_attr
from ...resource import BaseResource
from .permissions import split_needs, unwrap_list


class User(Model):
    name: str | None = auto_attr(str)
    active: bool | None = auto_attr(bool)
    admin: bool | None = auto_attr(bool)
    api_key: str | None = auto_attr(str)
    settings: dict[str, Any] | None = auto_attr(dict)
    groups: list[str] | None = auto_attr(str, array=True)
    permissions: list[str] | None = auto_attr(str, array=True)
    needs: dict[str, Any] | None = auto_attr(dict)
    needs_role: list[str] | None = auto_attr(str, array=True)
    roles: list[str] | None = auto_attr(str, array=True)
    user: bool | None = auto_attr(bool)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().rename(apikey="api_key").transform(split_needs)


def _pick_user(response: Any, name: str) -> User:
    # Writes answer with the full user list; return the one that was written.
    if isinstance(response, Mapping) and "users" not in response:
        return User.deserialize(response)
    users = [User.deserialize(entry) for entry in unwrap_list(response, "users")]
    for user in users:
        if user.name == name:
            return user
    raise LookupError(f"User {name!r} missing from server response")


class Users(BaseResource):
    path = "/api/access/users"

    @classmethod
    def list(cls) -> list[User]:
        response = cls.fetch_resource(deserialize=False)
        return [User.deserialize(entry) for entry in unwrap_list(response, "users")]

    @classmethod
    def add(
        cls,
        name: str,
        password: str,
        *,
        active: bool = True,
        admin: bool = False,
        groups: Iterable[str] | None = None,
        permissions: Iterable[str] | None = None,
    ) -> User:
        params: dict[str, Any] = {"name": name, "password": password, "active": active, "admin": admin}
        if groups is not None:
            params["groups"] = list(groups)
        if permissions is not None:
            params["permissions"] = list(permissions)
        return _pick_user(cls.post(params=params), name)

    @classmethod
    def get(cls, username: str) -> User:
        return User.deserialize(cls.fetch_resource(username, deserialize=False))

    @classmethod
    def update(cls, username: str, params: Mapping[str, Any]) -> User:
        return _pick_user(cls.put(path=cls.resource_path(username), params=params), username)

    @classmethod
    def delete(cls, username: str) -> None:  # type: ignore[override]
        super().delete(path=cls.resource_path(username))

    # ------------------------------------------------------------------
    # Per-user endpoints
    # ------------------------------------------------------------------

    @classmethod
    def change_password(cls, username: str, password: str, *, current: str | None = None) -> None:
        """Change a password; non-admins must also pass their ``current`` one."""
        params = {"password": password}
        if current is not None:
            params["current"] = current
        cls.put(path=cls.resource_path(username, "password"), params=params)

    @classmethod
    def get_settings(cls, username: str) -> dict[str, Any]:
        return cls.fetch_resource(cls.resource_path(username, "settings"), deserialize=False)

    @classmethod
    def update_settings(cls, username: str, settings: Mapping[str, Any]) -> Any:
        return cls.patch(path=cls.resource_path(username, "settings"), params=settings)

    @classmethod
    def generate_api_key(cls, username: str) -> str | None:
        response = cls.post(path=cls.resource_path(username, "apikey"))
        if isinstance(response, Mapping):
            return response.get("apikey")
        return None

    @classmethod
    def delete_api_key(cls, username: str) -> None:
        cls.client().request(cls.resource_path(username, "apikey"), http_method="delete")


__all__ = ["User", "Users"]
