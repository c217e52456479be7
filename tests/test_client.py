# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

from __future__ import annotations

import logging
from pathlib import Path
import threading

import httpx
import pytest

import octoprint_client
from octoprint_client.client import Client, UploadFile, configure, configure_from_env, get_client
from octoprint_client.exceptions import (
    AuthenticationError,
    ConflictError,
    MalformedResponseError,
    MissingCredentialsError,
    NotFoundError,
    UnknownError,
)
from tests.helpers import API_KEY, HOST, Recorder, mock_factory


@pytest.mark.parametrize(("host", "api_key"), [(None, "key"), ("http://h", None), ("", "key")])
def test_missing_credentials(host: str | None, api_key: str | None) -> None:
    with pytest.raises(MissingCredentialsError):
        Client(host, api_key)


def test_sends_bearer_token_to_host(client: Client, recorder: Recorder) -> None:
    client.request("/api/version")

    assert str(recorder.last.url) == f"{HOST}/api/version"
    assert recorder.last.headers["Authorization"] == f"Bearer {API_KEY}"


def test_json_keys_are_deep_underscored(client: Client, recorder: Recorder) -> None:
    recorder.reply(payload={"displayVersion": "1.9", "plugins": [{"isEnabled": True}]})

    assert client.request("/api/server") == {"display_version": "1.9", "plugins": [{"is_enabled": True}]}


def test_no_content_and_empty_bodies_are_true(client: Client, recorder: Recorder) -> None:
    recorder.reply(204)
    recorder.reply(200, content=b"")

    assert client.request("/api/job", http_method="post", body={"command": "start"}) is True
    assert client.request("/api/job", http_method="post", body={"command": "start"}) is True


def test_error_message_uses_error_field(client: Client, recorder: Recorder) -> None:
    recorder.reply(403, payload={"error": "Insufficient rights"})

    with pytest.raises(AuthenticationError, match=r"^\[403\] Insufficient rights$") as excinfo:
        client.request("/api/settings")
    assert excinfo.value.status_code == 403


def test_error_message_falls_back_to_reason_phrase(client: Client, recorder: Recorder) -> None:
    recorder.reply(404, content=b"<html>nope</html>")

    with pytest.raises(NotFoundError, match=r"^\[404\] Not Found$"):
        client.request("/api/files/local/missing.gcode")


def test_unmapped_status_raises_unknown_error(client: Client, recorder: Recorder) -> None:
    recorder.reply(418, payload={})

    with pytest.raises(UnknownError, match=r"^\[418\]"):
        client.request("/api/teapot")


def test_invalid_json_raises_malformed_response(client: Client, recorder: Recorder) -> None:
    recorder.reply(200, content=b"{not json")

    with pytest.raises(MalformedResponseError):
        client.request("/api/version")


def test_get_sends_params_but_no_body(client: Client, recorder: Recorder) -> None:
    client.request("/api/files", body={"ignored": True}, params={"recursive": True})

    assert recorder.last.url.params["recursive"] == "true"
    assert recorder.last.content == b""


def test_json_body(client: Client, recorder: Recorder) -> None:
    client.request("/api/job", http_method="POST", body={"command": "pause", "action": "toggle"})

    assert recorder.last.method == "POST"
    assert recorder.last.headers["Content-Type"] == "application/json"
    assert recorder.last_json() == {"command": "pause", "action": "toggle"}


def test_none_body_sends_nothing(client: Client, recorder: Recorder) -> None:
    client.request("/api/files/local/a.gcode", http_method="delete")

    assert recorder.last.method == "DELETE"
    assert recorder.last.content == b""


def test_upload_body_is_multipart(client: Client, recorder: Recorder, tmp_path: Path) -> None:
    gcode = tmp_path / "cube.gcode"
    gcode.write_text("G28\n")

    client.request(
        "/api/files/local",
        http_method="post",
        body={"file": UploadFile(gcode), "select": True, "userdata": {"a": 1}, "path": None},
    )

    content_type = recorder.last.headers["Content-Type"]
    body = recorder.last.content
    assert content_type.startswith("multipart/form-data")
    assert b'filename="cube.gcode"' in body
    assert b"G28" in body
    assert b'name="select"\r\n\r\ntrue' in body
    assert b'{"a": 1}' in body
    assert b'name="path"' not in body


def test_form_flag_sends_form_fields(client: Client, recorder: Recorder) -> None:
    client.request("/api/files/local", http_method="post", body={"foldername": "parts"}, form=True)

    assert recorder.last.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert recorder.last.content == b"foldername=parts"


def test_timeout_option_is_applied(client: Client, recorder: Recorder) -> None:
    client.request("/api/version", options={"timeout": 5.0})

    assert recorder.last.extensions["timeout"]["read"] == 5.0


def test_requests_are_logged_with_duration(
    client: Client, recorder: Recorder, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="octoprint_client"):
        client.request("/api/job")

    (record,) = [r for r in caplog.records if getattr(r, "event", None) == "octoprint.request"]
    assert record.method == "GET"
    assert record.status == 204
    assert record.duration_ms >= 0


def test_errors_are_logged_as_warnings(
    client: Client, recorder: Recorder, caplog: pytest.LogCaptureFixture
) -> None:
    recorder.reply(409, payload={"error": "Printer is not operational"})

    with caplog.at_level(logging.WARNING, logger="octoprint_client"), pytest.raises(ConflictError):
        client.request("/api/job", http_method="post", body={"command": "start"})

    assert any("Printer is not operational" in r.getMessage() for r in caplog.records)


def test_use_restores_previous_client_after_errors() -> None:
    outer = Client(HOST, "outer", http_client_factory=mock_factory(Recorder()))
    inner = Client(HOST, "inner", http_client_factory=mock_factory(Recorder()))

    with outer.use():
        with pytest.raises(RuntimeError), inner.use():
            assert get_client() is inner
            raise RuntimeError("boom")
        assert get_client() is outer
    assert get_client() is None


def test_configure_sets_configured_client() -> None:
    configured = configure(HOST, API_KEY, http_client_factory=mock_factory(Recorder()))

    assert get_client() is configured
    assert octoprint_client.get_client() is configured


def test_configure_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCTOPRINT_HOST", HOST)
    monkeypatch.setenv("OCTOPRINT_API_KEY", "env-key")

    configured = configure_from_env(http_client_factory=mock_factory(Recorder()))

    assert configured.api_key == "env-key"
    assert get_client() is configured


def test_configure_from_env_without_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OCTOPRINT_HOST", raising=False)
    monkeypatch.delenv("OCTOPRINT_API_KEY", raising=False)

    with pytest.raises(MissingCredentialsError):
        configure_from_env()


def test_configured_client_is_not_shared_with_new_threads(client: Client) -> None:
    seen: list[Client | None] = []

    thread = threading.Thread(target=lambda: seen.append(get_client()))
    thread.start()
    thread.join()

    assert get_client() is client
    assert seen == [None]


def test_client_is_a_context_manager() -> None:
    with Client(HOST, API_KEY, http_client_factory=mock_factory(Recorder())) as octo:
        assert isinstance(octo.session, httpx.Client)
    assert octo.session.is_closed
