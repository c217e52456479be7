# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Job operations: state of the current print job and job commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..mapping import DeserializationConfig, Model, auto_attr
from ..resource import BaseResource


class JobInformation(Model):
    file: dict[str, Any] | None = auto_attr(dict)
    estimated_print_time: float | None = auto_attr(float)
    last_print_time: float | None = auto_attr(float)
    filament: dict[str, Any] | None = auto_attr(dict)
    user: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)


class JobProgress(Model):
    completion: float | None = auto_attr(float)
    filepos: int | None = auto_attr(int)
    print_time: int | None = auto_attr(int)
    print_time_left: int | None = auto_attr(int)
    print_time_left_origin: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)


class Job(Model, BaseResource):
    """The current print job.

    OctoPrint reports the job description under ``job``; it is exposed as
    :attr:`information`.
    """

    path = "/api/job"

    information: JobInformation | None = auto_attr(JobInformation, source="job")
    progress: JobProgress | None = auto_attr(JobProgress)
    state: str | None = auto_attr(str)
    error: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().nested("job", JobInformation).nested("progress", JobProgress)

    @classmethod
    def get(cls) -> Job:
        return cls.fetch_resource()

    @classmethod
    def issue_command(cls, command: str, *, options: Mapping[str, Any] | None = None) -> Any:
        return cls.post(params={"command": command, **(options or {})})

    @classmethod
    def start(cls) -> Any:
        return cls.issue_command("start")

    @classmethod
    def cancel(cls) -> Any:
        return cls.issue_command("cancel")

    @classmethod
    def restart(cls) -> Any:
        return cls.issue_command("restart")

    @classmethod
    def pause(cls) -> Any:
        return cls.issue_command("pause", options={"action": "pause"})

    @classmethod
    def resume(cls) -> Any:
        return cls.issue_command("pause", options={"action": "resume"})

    @classmethod
    def toggle(cls) -> Any:
        return cls.issue_command("pause", options={"action": "toggle"})


__all__ = ["Job", "JobInformation", "JobProgress"]
