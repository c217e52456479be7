# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Serial connection between OctoPrint and the printer."""

from __future__ import annotations

from typing import Any

from ..mapping import DeserializationConfig, Model, auto_attr
from ..resource import BaseResource


class ConnectionSettings(Model):
    state: str | None = auto_attr(str)
    port: str | None = auto_attr(str)
    baudrate: int | None = auto_attr(int)
    printer_profile: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)


class ConnectionOptions(Model):
    ports: list[str] | None = auto_attr(str, array=True)
    baudrates: list[int] | None = auto_attr(int, array=True)
    printer_profiles: list[dict[str, Any]] | None = auto_attr(dict, array=True)
    port_preference: str | None = auto_attr(str)
    baudrate_preference: int | None = auto_attr(int)
    printer_profile_preference: str | None = auto_attr(str)
    autoconnect: bool | None = auto_attr(bool)
    extra: dict[str, Any] | None = auto_attr(dict)


class Connection(Model, BaseResource):
    path = "/api/connection"

    current: ConnectionSettings | None = auto_attr(ConnectionSettings)
    options: ConnectionOptions | None = auto_attr(ConnectionOptions)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = (
        DeserializationConfig().nested("current", ConnectionSettings).nested("options", ConnectionOptions)
    )

    @classmethod
    def get(cls) -> Connection:
        return cls.fetch_resource()

    @classmethod
    def connect(
        cls,
        *,
        port: str | None = None,
        baudrate: int | None = None,
        printer_profile: str | None = None,
        save: bool | None = None,
        autoconnect: bool | None = None,
    ) -> Any:
        """Connect to the printer; omitted settings fall back to the saved preferences."""
        params: dict[str, Any] = {"command": "connect"}
        for key, value in (
            ("port", port),
            ("baudrate", baudrate),
            ("printerProfile", printer_profile),
            ("save", save),
            ("autoconnect", autoconnect),
        ):
            if value is not None:
                params[key] = value
        return cls.post(params=params)

    @classmethod
    def disconnect(cls) -> Any:
        return cls.post(params={"command": "disconnect"})

    @classmethod
    def fake_ack(cls) -> Any:
        return cls.post(params={"command": "fake_ack"})


__all__ = ["Connection", "ConnectionOptions", "ConnectionSettings"]
