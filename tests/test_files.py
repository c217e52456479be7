# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError
import pytest

from octoprint_client.client import Client
from octoprint_client.resources.files import File, Files, Folder, OperationResult, Refs
from octoprint_client.types import Location
from tests.helpers import Recorder


FILE_PAYLOAD = {
    "name": "cube.gcode",
    "display": "Cube",
    "path": "parts/cube.gcode",
    "origin": "local",
    "type": "machinecode",
    "typePath": ["machinecode", "gcode"],
    "hash": "abc123",
    "size": 1024,
    "date": 1700000000,
    "refs": {"resource": "http://octoprint.test/api/files/local/parts/cube.gcode", "download": "http://dl"},
    "gcodeAnalysis": {"estimatedPrintTime": 600},
    "thumbnail": "plugin/thumb.png",
}


def test_file_deserialization() -> None:
    file = File.deserialize(FILE_PAYLOAD)

    assert file.display_name == "Cube"
    assert file.md5_hash == "abc123"
    assert file.origin is Location.LOCAL
    assert file.type_path == ["machinecode", "gcode"]
    assert isinstance(file.refs, Refs)
    assert file.refs.download == "http://dl"
    assert file.gcode_analysis == {"estimatedPrintTime": 600}
    assert file.date_timestamp == 1700000000
    assert file.date == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert file.extra == {"thumbnail": "plugin/thumb.png"}
    assert not file.is_folder


def test_file_without_date() -> None:
    assert File.deserialize({"name": "x"}).date is None


def test_folder_children_are_files() -> None:
    folder = File.deserialize(
        {"name": "parts", "type": "folder", "children": [{"name": "a.gcode"}, {"name": "b.gcode", "hash": "h"}]}
    )

    assert folder.is_folder
    assert [child.name for child in folder.children] == ["a.gcode", "b.gcode"]
    assert folder.children[1].md5_hash == "h"


def test_list_defaults_to_local(client: Client, recorder: Recorder) -> None:
    recorder.reply(payload={"files": [FILE_PAYLOAD], "free": 1000, "total": 3000})

    files = Files.list()

    assert recorder.last.url.path == "/api/files/local"
    assert isinstance(files, Files)
    assert files.files[0].display_name == "Cube"
    assert (files.free, files.total) == (1000, 3000)


def test_list_all_locations(client: Client, recorder: Recorder) -> None:
    recorder.reply(payload={"files": []})

    Files.list(None)

    assert recorder.last.url.path == "/api/files"


def test_list_one_location_with_options(client: Client, recorder: Recorder) -> None:
    recorder.reply(payload={"files": []})

    Files.list(Location.SDCARD, options={"recursive": True})

    assert recorder.last.url.path == "/api/files/sdcard"
    assert recorder.last.url.params["recursive"] == "true"


def test_get_returns_file(client: Client, recorder: Recorder) -> None:
    recorder.reply(payload=FILE_PAYLOAD)

    file = Files.get("parts/cube.gcode")

    assert recorder.last.url.path == "/api/files/local/parts/cube.gcode"
    assert file.name == "cube.gcode"


def test_location_must_be_a_location(client: Client) -> None:
    with pytest.raises(ValidationError):
        Files.get("cube.gcode", "local")
    with pytest.raises(ValidationError):
        Files.upload("cube.gcode", location="invalid")


def test_upload(client: Client, recorder: Recorder, tmp_path: Path) -> None:
    gcode = tmp_path / "cube.gcode"
    gcode.write_text("G28\n")
    recorder.reply(
        201,
        payload={
            "done": True,
            "effectiveSelect": True,
            "files": {"local": {"name": "cube.gcode", "origin": "local", "refs": {"resource": "r"}}},
        },
    )

    result = Files.upload(str(gcode), select=True)

    assert recorder.last.url.path == "/api/files/local"
    assert recorder.last.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="select"\r\n\r\ntrue' in recorder.last.content
    assert b'name="print"' not in recorder.last.content
    assert isinstance(result, OperationResult)
    assert result.done is True
    assert result.effective_select is True
    assert isinstance(result.files[Location.LOCAL], File)
    assert result.files[Location.LOCAL].refs.resource == "r"


def test_operation_result_keeps_unknown_locations() -> None:
    result = OperationResult.deserialize(
        {"done": True, "files": {"local": {"name": "a.gcode"}, "printer": {"name": "b.gcode"}}}
    )

    assert result.files[Location.LOCAL].name == "a.gcode"
    assert isinstance(result.files["printer"], File)
    assert result.files["printer"].name == "b.gcode"


def test_create_folder(client: Client, recorder: Recorder) -> None:
    recorder.reply(
        201,
        payload={"done": True, "folder": {"name": "parts", "origin": "local", "path": "parts", "refs": {"resource": "r"}}},
    )

    result = Files.create_folder("parts")

    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/files/local"
    assert recorder.last.content == b"foldername=parts"
    assert isinstance(result.folder, Folder)
    assert result.folder.origin is Location.LOCAL
    assert result.folder.refs.resource == "r"


def test_issue_command_merges_options(client: Client, recorder: Recorder) -> None:
    assert Files.issue_command("cube.gcode", "select", Location.LOCAL, options={"print": True}) is True

    assert recorder.last.url.path == "/api/files/local/cube.gcode"
    assert recorder.last_json() == {"command": "select", "print": True}


@pytest.mark.parametrize(
    ("call", "expected"),
    [
        (lambda: Files.select("a.gcode"), {"command": "select"}),
        (lambda: Files.select("a.gcode", print=False), {"command": "select", "print": False}),
        (lambda: Files.unselect("a.gcode"), {"command": "unselect"}),
        (lambda: Files.copy("a.gcode", "backup"), {"command": "copy", "destination": "backup"}),
        (lambda: Files.move("a.gcode", "archive"), {"command": "move", "destination": "archive"}),
        (lambda: Files.slice("a.gcode", print=None), {"command": "slice"}),
        (
            lambda: Files.slice("a.gcode", print=True, profile={"slicer": "cura", "profile": "fast"}),
            {"command": "slice", "print": True, "slicer": "cura", "profile": "fast"},
        ),
    ],
)
def test_command_helpers(client: Client, recorder: Recorder, call, expected) -> None:  # type: ignore[no-untyped-def]
    call()

    assert recorder.last.url.path == "/api/files/local/a.gcode"
    assert recorder.last_json() == expected


def test_commands_on_sd_card(client: Client, recorder: Recorder) -> None:
    Files.slice("model.stl", Location.SDCARD, print=False, profile={"setting": "value"})

    assert recorder.last.url.path == "/api/files/sdcard/model.stl"
    assert recorder.last_json() == {"command": "slice", "print": False, "setting": "value"}


def test_delete_file(client: Client, recorder: Recorder) -> None:
    assert Files.delete_file("TEST.GCO", Location.SDCARD) is True

    assert recorder.last.method == "DELETE"
    assert recorder.last.url.path == "/api/files/sdcard/TEST.GCO"
