# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Log files served by the bundled logging plugin."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ..mapping import DeserializationConfig, Model, auto_attr
from ..resource import BaseResource


class LogReferences(Model):
    resource: str | None = auto_attr(str)
    download: str | None = auto_attr(str)


class LogFile(Model):
    name: str | None = auto_attr(str)
    size: int | None = auto_attr(int)
    date: int | None = auto_attr(int)
    refs: LogReferences | None = auto_attr(LogReferences)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().nested("refs", LogReferences)

    @property
    def modification_time(self) -> datetime | None:
        if self.date is None:
            return None
        return datetime.fromtimestamp(self.date, tz=timezone.utc)

    def __str__(self) -> str:
        return f"{self.name} ({self.size} bytes, modified: {self.modification_time})"


class Logs(Model, BaseResource):
    path = "/plugin/logging/logs"

    files: list[LogFile] | None = auto_attr(LogFile, array=True)
    free: int | None = auto_attr(int)
    total: int | None = auto_attr(int)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().array("files", LogFile)

    @classmethod
    def list(cls) -> Logs:
        return cls.fetch_resource()

    @classmethod
    def delete_file(cls, filename: str) -> Any:
        return cls.delete(path=cls.resource_path(filename))


__all__ = ["LogFile", "LogReferences", "Logs"]
