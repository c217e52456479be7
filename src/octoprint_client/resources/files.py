# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""File operations: listing, uploads, folders and file commands.

OctoPrint API reference: ``https://docs.octoprint.org/en/master/api/files.html``.
Every operation addressing a single file takes the file's :class:`Location`;
passing anything else, such as the plain string ``"local"``, raises
:class:`pydantic.ValidationError` before a request is made.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ConfigDict, validate_call

from ..client import UploadFile
from ..mapping import DeserializationConfig, Model, auto_attr
from ..resource import BaseResource
from ..types import Location


_STRICT = ConfigDict(strict=True, arbitrary_types_allowed=True)


class Refs(Model):
    resource: str | None = auto_attr(str)
    download: str | None = auto_attr(str)
    model: str | None = auto_attr(str)


class Folder(Model):
    name: str | None = auto_attr(str)
    display_name: str | None = auto_attr(str)
    origin: Location | str | None = auto_attr(Location)
    path: str | None = auto_attr(str)
    refs: Refs | None = auto_attr(Refs)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = (
        DeserializationConfig()
        .nested("origin", Location)
        .nested("refs", Refs)
        .rename(display="display_name")
    )


class File(Model):
    """A file or folder entry as listed by OctoPrint.

    ``display`` arrives as :attr:`display_name`, ``hash`` as :attr:`md5_hash`
    and the upload timestamp ``date`` as :attr:`date_timestamp`; :attr:`date`
    turns the latter into an aware :class:`~datetime.datetime`.
    """

    name: str | None = auto_attr(str)
    display_name: str | None = auto_attr(str)
    origin: Location | str | None = auto_attr(Location)
    path: str | None = auto_attr(str)
    type: str | None = auto_attr(str)
    type_path: list[str] | None = auto_attr(str, array=True)
    refs: Refs | None = auto_attr(Refs)
    display_layer_progress: dict[str, Any] | None = auto_attr(dict)
    dashboard: dict[str, Any] | None = auto_attr(dict)
    date_timestamp: int | None = auto_attr(int)
    gcode_analysis: dict[str, Any] | None = auto_attr(dict)
    md5_hash: str | None = auto_attr(str)
    size: int | None = auto_attr(int)
    userdata: Any = auto_attr()
    children: list[File] | None = auto_attr("File", array=True)
    prints: dict[str, Any] | None = auto_attr(dict)
    statistics: dict[str, Any] | None = auto_attr(dict)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = (
        DeserializationConfig()
        .nested("refs", Refs)
        .nested("origin", Location)
        .array("children", "File")
        .rename(display="display_name", hash="md5_hash", date="date_timestamp")
        .collect_extras()
    )

    @property
    def date(self) -> datetime | None:
        if self.date_timestamp is None:
            return None
        return datetime.fromtimestamp(self.date_timestamp, tz=timezone.utc)

    @property
    def is_folder(self) -> bool:
        return self.type == "folder"


def _location_key(location: Any) -> Location | Any:
    try:
        return Location.deserialize(location)
    except ValueError:
        return location


def _files_by_location(data: dict[str, Any]) -> None:
    files = data.get("files")
    if isinstance(files, Mapping):
        data["files"] = {_location_key(location): File.deserialize(entry) for location, entry in files.items()}


class OperationResult(Model):
    """Outcome of an upload or folder creation.

    ``files`` maps each :class:`Location` written to the resulting
    :class:`File`.
    """

    done: bool | None = auto_attr(bool)
    effective_select: bool | None = auto_attr(bool)
    effective_print: bool | None = auto_attr(bool)
    files: dict[Location, File] | None = auto_attr(dict)
    folder: Folder | None = auto_attr(Folder)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().nested("folder", Folder).transform(_files_by_location)


class Files(Model, BaseResource):
    path = "/api/files"

    files: list[File] | None = auto_attr(File, array=True)
    free: int | None = auto_attr(int)
    total: int | None = auto_attr(int)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().array("files", File)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    @classmethod
    @validate_call(config=_STRICT)
    def list(
        cls,
        location: Location | None = Location.LOCAL,
        *,
        options: Mapping[str, Any] | None = None,
    ):
        """List the files of ``location``; pass ``None`` to list every location.

        ``options`` become query parameters, e.g. ``{"recursive": True}``.
        """
        return cls.fetch_resource(None if location is None else str(location), options=options)

    @classmethod
    @validate_call(config=_STRICT)
    def get(
        cls,
        filename: str,
        location: Location = Location.LOCAL,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> File:
        response = cls.fetch_resource(f"{location}/{filename}", options=options, deserialize=False)
        return File.deserialize(response)

    # ------------------------------------------------------------------
    # Uploads and folders
    # ------------------------------------------------------------------

    @classmethod
    @validate_call(config=_STRICT)
    def upload(
        cls,
        file_path: str | Path,
        location: Location = Location.LOCAL,
        *,
        path: str | None = None,
        select: bool | None = None,
        print: bool | None = None,
        userdata: str | Mapping[str, Any] | None = None,
    ) -> OperationResult:
        """Upload a local file, optionally selecting or printing it right away."""
        params = {
            "file": UploadFile(file_path),
            "path": path,
            "select": select,
            "print": print,
            "userdata": userdata,
        }
        response = cls.post(path=cls.resource_path(location), params=params)
        return OperationResult.deserialize(response)

    @classmethod
    @validate_call(config=_STRICT)
    def create_folder(
        cls,
        foldername: str,
        *,
        path: str | None = None,
        location: Location = Location.LOCAL,
    ) -> OperationResult:
        body = {"foldername": foldername, "path": path}
        response = cls.client().request(
            cls.resource_path(location), http_method="post", body=body, form=True
        )
        return OperationResult.deserialize(response)

    # ------------------------------------------------------------------
    # File commands
    # ------------------------------------------------------------------

    @classmethod
    @validate_call(config=_STRICT)
    def issue_command(
        cls,
        filename: str,
        command: str,
        location: Location = Location.LOCAL,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return cls.post(
            path=cls.resource_path(location, filename),
            params={"command": command, **(options or {})},
        )

    @classmethod
    @validate_call(config=_STRICT)
    def select(cls, filename: str, location: Location = Location.LOCAL, *, print: bool | None = None) -> Any:
        options = {} if print is None else {"print": print}
        return cls.issue_command(filename, "select", location, options=options)

    @classmethod
    @validate_call(config=_STRICT)
    def unselect(cls, filename: str, location: Location = Location.LOCAL) -> Any:
        return cls.issue_command(filename, "unselect", location, options={})

    @classmethod
    @validate_call(config=_STRICT)
    def slice(
        cls,
        filename: str,
        location: Location = Location.LOCAL,
        *,
        print: bool | None = None,
        profile: Mapping[str, Any] | None = None,
    ) -> Any:
        """Slice ``filename``; ``profile`` entries (slicer, profile, ...) are sent as-is."""
        options: dict[str, Any] = {} if print is None else {"print": print}
        options.update(profile or {})
        return cls.issue_command(filename, "slice", location, options=options)

    @classmethod
    @validate_call(config=_STRICT)
    def copy(cls, filename: str, destination: str, location: Location = Location.LOCAL) -> Any:
        return cls.issue_command(filename, "copy", location, options={"destination": destination})

    @classmethod
    @validate_call(config=_STRICT)
    def move(cls, filename: str, destination: str, location: Location = Location.LOCAL) -> Any:
        return cls.issue_command(filename, "move", location, options={"destination": destination})

    @classmethod
    @validate_call(config=_STRICT)
    def delete_file(cls, filename: str, location: Location = Location.LOCAL) -> Any:
        return cls.delete(path=cls.resource_path(location, filename))


__all__ = ["File", "Files", "Folder", "OperationResult", "Refs"]
