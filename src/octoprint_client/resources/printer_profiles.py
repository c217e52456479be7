# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Printer profiles: build volume, axes, extruders and heater setup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..mapping import DeserializationConfig, Model, auto_attr
from ..resource import BaseResource


class PrinterProfile(Model):
    id: str | None = auto_attr(str)
    name: str | None = auto_attr(str)
    color: str | None = auto_attr(str)
    model: str | None = auto_attr(str)
    default: bool | None = auto_attr(bool)
    current: bool | None = auto_attr(bool)
    resource: str | None = auto_attr(str)
    volume: dict[str, Any] | None = auto_attr(dict)
    heated_bed: bool | None = auto_attr(bool)
    heated_chamber: bool | None = auto_attr(bool)
    axes: dict[str, Any] | None = auto_attr(dict)
    extruder: dict[str, Any] | None = auto_attr(dict)
    extra: dict[str, Any] | None = auto_attr(dict)


def _profiles_by_id(data: dict[str, Any]) -> None:
    profiles = data.get("profiles")
    if isinstance(profiles, Mapping):
        data["profiles"] = {
            identifier: PrinterProfile.deserialize(info) if isinstance(info, Mapping) else info
            for identifier, info in profiles.items()
        }


def _unwrap_profile(response: Any) -> PrinterProfile:
    # Create and update answer with {"profile": {...}}.
    if isinstance(response, Mapping) and isinstance(response.get("profile"), Mapping):
        response = response["profile"]
    return PrinterProfile.deserialize(response)


class PrinterProfiles(Model, BaseResource):
    path = "/api/printerprofiles"

    profiles: dict[str, PrinterProfile] | None = auto_attr(dict)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().transform(_profiles_by_id)

    @classmethod
    def list(cls) -> PrinterProfiles:
        return cls.fetch_resource()

    @classmethod
    def get(cls, identifier: str) -> PrinterProfile:
        return PrinterProfile.deserialize(cls.fetch_resource(identifier, deserialize=False))

    @classmethod
    def create(cls, profile: Mapping[str, Any], *, based_on: str | None = None) -> PrinterProfile:
        """Create a profile, optionally copying unset values from ``based_on``."""
        params: dict[str, Any] = {"profile": dict(profile)}
        if based_on:
            params["basedOn"] = based_on
        return _unwrap_profile(cls.post(params=params))

    @classmethod
    def update(cls, identifier: str, profile: Mapping[str, Any]) -> PrinterProfile:
        return _unwrap_profile(cls.patch(path=cls.resource_path(identifier), params={"profile": dict(profile)}))

    @classmethod
    def delete_profile(cls, identifier: str) -> Any:
        return cls.delete(path=cls.resource_path(identifier))


__all__ = ["PrinterProfile", "PrinterProfiles"]
