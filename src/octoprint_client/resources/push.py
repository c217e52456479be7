# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Push updates over SockJS XHR polling.

OctoPrint pushes state, event and plugin messages through a SockJS endpoint.
This module speaks its XHR transport: every ``POST`` to
``/sockjs/<server>/<session>/xhr`` returns one frame, and commands are sent to
``.../xhr_send`` as a JSON array of JSON encoded strings.

Frames:

* ``o``: session opened
* ``h``: heartbeat
* ``a[...]``: array of messages, each a JSON string or object
* ``c[code, "reason"]``: session closed

Typical use::

    push = Push.subscribe(events=True, state=False, plugins=False)
    push.listen()
    ...
    for message in push.receive():
        print(message)
    push.unsubscribe()
"""

from __future__ import annotations

import json
import queue
import secrets
import threading
from typing import Any

import httpx

from ..client import Client, error_detail
from ..exceptions import Error, MalformedResponseError, error_for_status
from ..mapping.keys import deep_underscore_keys
from ..resource import BaseResource
from ..utils.logger import get_logger


_logger = get_logger("octoprint_client.push")

DEFAULT_SERVER_ID = "000"
_JOIN_TIMEOUT = 1.0

Message = dict[str, Any]


def _new_session_id() -> str:
    return secrets.token_hex(8)


class Push(BaseResource):
    """One SockJS session.

    The client is captured on creation, so the background polling thread
    keeps using it even though the configured client does not cross
    threads.
    """

    path = "/sockjs"

    def __init__(
        self,
        session_id: str | None = None,
        server_id: str = DEFAULT_SERVER_ID,
        *,
        client: Client | None = None,
    ) -> None:
        super().__init__()
        self.session_id = session_id or _new_session_id()
        self.server_id = server_id
        self._client = client or type(self).client()
        self._queue: queue.Queue[Message] = queue.Queue()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self.closed = False

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    @classmethod
    def subscribe(
        cls,
        *,
        state: bool | dict[str, Any] = True,
        events: bool | list[str] = True,
        plugins: bool | list[str] = True,
        session_id: str | None = None,
    ) -> Push:
        """Open an authenticated session subscribed to the given message types."""
        push = cls(session_id)
        push.open_session()
        push.authenticate()
        push.poll_once()  # consumes the initial "connected" message
        push.send_subscribe(state=state, events=events, plugins=plugins)
        return push

    @classmethod
    def test(cls, *, session_id: str | None = None) -> dict[str, Any]:
        """Open a session and return the server's ``connected`` payload, ``{}`` if absent."""
        push = cls(session_id)
        push.open_session()
        push.authenticate()
        for message in push.poll_once():
            if "connected" in message:
                return message["connected"]
        return {}

    def unsubscribe(self) -> bool:
        self._stop_polling()
        self._send_command({"subscribe": {"state": False, "events": False, "plugins": False}})
        return True

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def open_session(self) -> bool:
        response = self._post("xhr")
        return response.text.strip() == "o"

    def authenticate(self) -> None:
        self._send_command({"auth": f"_api:{self._client.api_key}"})

    def send_subscribe(
        self,
        *,
        state: bool | dict[str, Any] = True,
        events: bool | list[str] = True,
        plugins: bool | list[str] = True,
    ) -> None:
        self._send_command({"subscribe": {"state": state, "events": events, "plugins": plugins}})

    def poll_once(self) -> list[Message]:
        """Poll for one frame and return the messages it carries."""
        return self._parse_frame(self._post("xhr").text)

    # ------------------------------------------------------------------
    # Background polling
    # ------------------------------------------------------------------

    def listen(self) -> None:
        """Poll on a daemon thread, queueing messages for :meth:`receive`.

        After :meth:`unsubscribe` the previous poller may still be waiting on a
        long poll; it is joined before a new one starts.
        """
        if self.listening():
            if not self._stop.is_set():
                return
            self._thread.join()  # type: ignore[union-attr]
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._poll_loop,
            name=f"octoprint-push-{self.session_id}",
            daemon=True,
        )
        self._thread.start()

    def listening(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def receive(self) -> list[Message]:
        """Return every queued message without blocking."""
        messages: list[Message] = []
        while True:
            try:
                messages.append(self._queue.get_nowait())
            except queue.Empty:
                return messages

    def _poll_loop(self) -> None:
        while not self._stop.is_set() and not self.closed:
            try:
                messages = self.poll_once()
            except (httpx.HTTPError, Error) as exc:
                _logger.warning(
                    "Push polling stopped: %s",
                    exc,
                    extra={"event": "octoprint.push.error", "session_id": self.session_id},
                )
                return
            if self._stop.is_set():
                return
            for message in messages:
                self._queue.put(message)

    def _stop_polling(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(_JOIN_TIMEOUT)
            if not self._thread.is_alive():
                self._thread = None

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def session_path(self, transport: str) -> str:
        return f"{self.path}/{self.server_id}/{self.session_id}/{transport}"

    def _post(self, transport: str, content: str | None = None) -> httpx.Response:
        headers = {"Content-Type": "application/json"} if content is not None else None
        response = self._client.session.post(self.session_path(transport), content=content, headers=headers)
        if response.status_code >= 400:
            raise error_for_status(response.status_code, error_detail(response))
        return response

    def _send_command(self, message: Message) -> None:
        self._post("xhr_send", json.dumps([json.dumps(message)]))

    def _parse_frame(self, body: str) -> list[Message]:
        body = body.strip()
        if body.startswith("c"):
            self.closed = True
            _logger.info("Push session %s closed by server: %s", self.session_id, body[1:])
            return []
        if not body.startswith("a"):
            return []

        try:
            entries = json.loads(body[1:])
            messages = [json.loads(entry) if isinstance(entry, str) else entry for entry in entries]
        except ValueError as exc:
            raise MalformedResponseError(f"Invalid SockJS frame: {body[:80]!r}") from exc
        return [deep_underscore_keys(message) for message in messages]


__all__ = ["Push"]
