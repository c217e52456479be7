# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

from __future__ import annotations

from octoprint_client.client import Client
from octoprint_client.resources.connection import Connection, ConnectionOptions, ConnectionSettings
from tests.helpers import Recorder


def test_get_connection(client: Client, recorder: Recorder) -> None:
    recorder.reply(
        payload={
            "current": {"state": "Operational", "port": "/dev/ttyACM0", "baudrate": 250000, "printerProfile": "_default"},
            "options": {
                "ports": ["/dev/ttyACM0", "VIRTUAL"],
                "baudrates": [250000, 115200],
                "printerProfiles": [{"name": "Default", "id": "_default"}],
                "portPreference": "/dev/ttyACM0",
                "autoconnect": True,
            },
        }
    )

    connection = Connection.get()

    assert recorder.last.url.path == "/api/connection"
    assert isinstance(connection.current, ConnectionSettings)
    assert connection.current.printer_profile == "_default"
    assert connection.current.baudrate == 250000
    assert isinstance(connection.options, ConnectionOptions)
    assert connection.options.ports == ["/dev/ttyACM0", "VIRTUAL"]
    assert connection.options.printer_profiles == [{"name": "Default", "id": "_default"}]
    assert connection.options.autoconnect is True
    assert connection.options.baudrate_preference is None


def test_connect_with_defaults(client: Client, recorder: Recorder) -> None:
    assert Connection.connect() is True

    assert recorder.last.method == "POST"
    assert recorder.last_json() == {"command": "connect"}


def test_connect_with_settings(client: Client, recorder: Recorder) -> None:
    Connection.connect(port="VIRTUAL", baudrate=115200, printer_profile="my_printer", save=True, autoconnect=False)

    assert recorder.last_json() == {
        "command": "connect",
        "port": "VIRTUAL",
        "baudrate": 115200,
        "printerProfile": "my_printer",
        "save": True,
        "autoconnect": False,
    }


def test_disconnect_and_fake_ack(client: Client, recorder: Recorder) -> None:
    Connection.disconnect()
    assert recorder.last_json() == {"command": "disconnect"}

    Connection.fake_ack()
    assert recorder.last_json() == {"command": "fake_ack"}
