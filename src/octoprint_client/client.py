# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""HTTP client for the OctoPrint REST API.

The client owns one :class:`httpx.Client` bound to the server's base URL and
normalises every response:

* ``204 No Content`` and empty bodies become ``True``;
* error statuses raise the matching :mod:`octoprint_client.exceptions` class;
* JSON bodies are returned with every key converted to snake_case.

Resources do not take a client argument.  They use the *configured* client,
held in a :class:`~contextvars.ContextVar`::

    import octoprint_client as octoprint

    octoprint.configure("http://octopi.local", "API_KEY")
    octoprint.Job.start()

    with octoprint.Client("http://other.local", "OTHER_KEY").use():
        octoprint.Job.get()   # talks to other.local

Being a context variable, the configured client does not leak into threads
started afterwards; code running there must configure its own client or use
:meth:`Client.use`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
import json
import os
from pathlib import Path
import time
from typing import IO, Any

import httpx

from .config import DEFAULT_TIMEOUT, ClientConfig
from .exceptions import MalformedResponseError, MissingCredentialsError, error_for_status
from .mapping.keys import deep_underscore_keys
from .utils.logger import get_logger


_logger = get_logger("octoprint_client.client")

HttpClientFactory = Callable[..., httpx.Client]

_CURRENT_CLIENT: ContextVar["Client | None"] = ContextVar("octoprint_current_client", default=None)

_BODYLESS_METHODS = frozenset({"GET", "HEAD"})


@dataclass(slots=True)
class UploadFile:
    """A local file sent as one part of a multipart request."""

    path: str | os.PathLike[str]
    content_type: str = "application/octet-stream"
    filename: str | None = None

    @property
    def name(self) -> str:
        return self.filename or Path(self.path).name

    def open(self) -> IO[bytes]:
        return open(self.path, "rb")


class Client:
    """Authenticated connection to one OctoPrint server.

    Args:
        host: Base URL of the server, e.g. ``http://octopi.local``.
        api_key: Application or user API key, sent as a bearer token.
        timeout: Default request timeout in seconds.
        verify: Verify TLS certificates.
        http_client_factory: Callable building the underlying
            :class:`httpx.Client`; receives ``base_url``, ``headers``,
            ``timeout`` and ``verify`` keyword arguments.

    Raises:
        MissingCredentialsError: If ``host`` or ``api_key`` is empty.

    """

    def __init__(
        self,
        host: str | None,
        api_key: str | None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
        http_client_factory: HttpClientFactory = httpx.Client,
    ) -> None:
        if not host or not api_key:
            raise MissingCredentialsError()

        self.host = host
        self.api_key = api_key
        self.session = http_client_factory(
            base_url=host,
            headers={"Authorization": f"Bearer {api_key}", "Accept": "application/json"},
            timeout=timeout,
            verify=verify,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> Client:
        return cls(config.host, config.api_key, timeout=config.timeout, verify=config.verify, **kwargs)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def request(
        self,
        path: str,
        *,
        http_method: str = "get",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        options: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        form: bool = False,
    ) -> Any:
        """Send a request and return the normalised response.

        Args:
            path: Request path, relative to the host.
            http_method: HTTP verb, case-insensitive.
            body: JSON body, or a mapping holding :class:`UploadFile` values
                to send as multipart form data.  Ignored for GET and HEAD.
            headers: Extra request headers.
            options: Per-request transport settings; ``timeout`` is honoured.
            params: Query string parameters.
            form: Send ``body`` as form fields even without uploads.

        Returns:
            ``True`` for empty responses, otherwise the decoded JSON with
            snake_case keys.

        """
        method = http_method.upper()
        kwargs: dict[str, Any] = {"headers": dict(headers or {})}
        if params:
            kwargs["params"] = dict(params)
        if options and "timeout" in options:
            kwargs["timeout"] = options["timeout"]

        handles: list[IO[bytes]] = []
        if method not in _BODYLESS_METHODS and body is not None:
            if form or _contains_upload(body):
                kwargs["data"], kwargs["files"] = _multipart_fields(body, handles)
            else:
                kwargs["json"] = body

        started = time.perf_counter()
        try:
            response = self.session.request(method, path, **kwargs)
        finally:
            for handle in handles:
                handle.close()
        duration_ms = (time.perf_counter() - started) * 1000

        _logger.debug(
            "%s %s -> %s",
            method,
            path,
            response.status_code,
            extra={
                "event": "octoprint.request",
                "method": method,
                "path": path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return self._process_response(response)

    def _process_response(self, response: httpx.Response) -> Any:
        status = response.status_code
        if status == 204:
            return True
        if status >= 400:
            error = error_for_status(status, error_detail(response))
            _logger.warning(
                "OctoPrint request failed: %s",
                error,
                extra={"event": "octoprint.error", "status": status, "path": response.request.url.path},
            )
            raise error

        if not response.content.strip():
            return True
        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Invalid JSON in response to {response.request.method} {response.request.url.path}"
            ) from exc
        return deep_underscore_keys(payload)

    # ------------------------------------------------------------------
    # Configuration scope
    # ------------------------------------------------------------------

    @contextmanager
    def use(self) -> Iterator[Client]:
        """Make this client the configured one for the duration of the block."""
        token = _CURRENT_CLIENT.set(self)
        try:
            yield self
        finally:
            _CURRENT_CLIENT.reset(token)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(host={self.host!r})"


def _contains_upload(body: Any) -> bool:
    return isinstance(body, Mapping) and any(isinstance(value, UploadFile) for value in body.values())


def _multipart_fields(
    body: Mapping[str, Any], handles: list[IO[bytes]]
) -> tuple[dict[str, str], dict[str, tuple[str, IO[bytes], str]]]:
    data: dict[str, str] = {}
    files: dict[str, tuple[str, IO[bytes], str]] = {}
    for key, value in body.items():
        if value is None:
            continue
        if isinstance(value, UploadFile):
            handle = value.open()
            handles.append(handle)
            files[key] = (value.name, handle, value.content_type)
        elif isinstance(value, bool):
            data[key] = "true" if value else "false"
        elif isinstance(value, (Mapping, list)):
            data[key] = json.dumps(value)
        else:
            data[key] = str(value)
    return data, files


def error_detail(response: httpx.Response) -> str | None:
    """Return the JSON ``error`` field of an error response, else its reason phrase."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, Mapping) and payload.get("error"):
        return str(payload["error"])
    return response.reason_phrase or None


# ----------------------------------------------------------------------
# Configured client
# ----------------------------------------------------------------------


def configure(host: str | None, api_key: str | None, **kwargs: Any) -> Client:
    """Create a client and make it the configured one for this context."""
    client = Client(host, api_key, **kwargs)
    _CURRENT_CLIENT.set(client)
    return client


def configure_from_env(**kwargs: Any) -> Client:
    """Configure a client from ``OCTOPRINT_*`` environment variables."""
    client = Client.from_config(ClientConfig.from_env(), **kwargs)
    _CURRENT_CLIENT.set(client)
    return client


def get_client() -> Client | None:
    """Return the configured client, or ``None``."""
    return _CURRENT_CLIENT.get()


def set_client(client: Client | None) -> Token["Client | None"]:
    return _CURRENT_CLIENT.set(client)


def reset_client(token: Token["Client | None"]) -> None:
    _CURRENT_CLIENT.reset(token)


__all__ = [
    "Client",
    "UploadFile",
    "configure",
    "configure_from_env",
    "get_client",
    "reset_client",
    "set_client",
]
