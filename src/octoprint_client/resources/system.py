# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""System commands such as restarting OctoPrint or shutting down the host."""

from __future__ import annotations

from typing import Any

from ..mapping import DeserializationConfig, Model, auto_attr
from ..resource import BaseResource


class Command(Model):
    action: str | None = auto_attr(str)
    name: str | None = auto_attr(str)
    confirm: str | None = auto_attr(str)
    source: str | None = auto_attr(str)
    resource: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)


class SystemCommands(Model, BaseResource):
    """Commands grouped by source: ``core`` ships with OctoPrint, ``custom`` comes from config.yaml."""

    path = "/api/system/commands"

    core: list[Command] | None = auto_attr(Command, array=True)
    custom: list[Command] | None = auto_attr(Command, array=True)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().array("core", Command).array("custom", Command)

    @classmethod
    def list(cls) -> SystemCommands:
        return cls.fetch_resource()

    @classmethod
    def list_by_source(cls, source: str) -> list[Command]:
        response = cls.fetch_resource(source, deserialize=False)
        commands = response if isinstance(response, list) else []
        return [Command.deserialize(command) for command in commands]

    @classmethod
    def execute(cls, source: str, action: str) -> bool:
        cls.post(path=cls.resource_path(source, action))
        return True


class System(BaseResource):
    path = "/api/system"

    @classmethod
    def commands(cls) -> SystemCommands:
        return SystemCommands.list()


__all__ = ["Command", "System", "SystemCommands"]
