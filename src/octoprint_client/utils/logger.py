# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Logging for the OctoPrint client.

The client only emits records; nothing is printed until an application calls
:func:`setup_logger`.  Request records carry ``event``, ``method``, ``path``,
``status`` and ``duration_ms`` extras, which the formatters below render as a
status/duration suffix (text) or a ``request`` object (JSON).

Environment:

* ``OCTOPRINT_CLIENT_LOG_LEVEL``: level name, e.g. ``DEBUG`` to see every request
* ``OCTOPRINT_CLIENT_LOG_JSON``: ``1``/``true`` for one JSON document per line
* ``NO_COLOR``: disable ANSI colors

The JSON serializer is pluggable, so orjson or similar can be used without
making it a dependency.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
import os
from typing import Any, ClassVar, Final


RESET: Final[str] = "\033[0m"
DIM: Final[str] = "\033[2m"

DEBUG_COLOR: Final[str] = "\033[36m"
INFO_COLOR: Final[str] = "\033[32m"
WARNING_COLOR: Final[str] = "\033[33m"
ERROR_COLOR: Final[str] = "\033[1;31m"
CRITICAL_COLOR: Final[str] = "\033[1;35m"
LOGGER_COLOR: Final[str] = "\033[94m"

DEFAULT_LOGGER_NAME: Final[str] = "octoprint_client"
ENV_LOG_LEVEL: Final[str] = "OCTOPRINT_CLIENT_LOG_LEVEL"
ENV_LOG_JSON: Final[str] = "OCTOPRINT_CLIENT_LOG_JSON"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"

REQUEST_FIELDS: Final[tuple[str, ...]] = ("method", "path", "status", "duration_ms")

JsonSerializer = Callable[[dict[str, Any]], str]
PayloadTransformer = Callable[[dict[str, Any]], dict[str, Any]]

# Attributes every LogRecord has; anything else arrived through ``extra``.
_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def _request_suffix(record: logging.LogRecord) -> str:
    duration = getattr(record, "duration_ms", None)
    if not isinstance(duration, (int, float)):
        return ""
    return f" [{duration:.2f} ms]"


def _is_failure(record: logging.LogRecord) -> bool:
    status = getattr(record, "status", None)
    return isinstance(status, int) and status >= 400


class PlainFormatter(logging.Formatter):
    """Text formatter appending ``[N.NN ms]`` to request records."""

    def format(self, record: logging.LogRecord) -> str:
        return super().format(record) + _request_suffix(record)


class ColoredFormatter(PlainFormatter):
    """ANSI colored variant of :class:`PlainFormatter`.

    Level names are colored per :attr:`LEVEL_COLORS`; request records with an
    error status are highlighted regardless of their level.
    """

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": DEBUG_COLOR,
        "INFO": INFO_COLOR,
        "WARNING": WARNING_COLOR,
        "ERROR": ERROR_COLOR,
        "CRITICAL": CRITICAL_COLOR,
    }

    def format(self, record: logging.LogRecord) -> str:
        saved = record.levelname, record.name
        color = WARNING_COLOR if _is_failure(record) else self.LEVEL_COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{RESET}"
        record.name = f"{LOGGER_COLOR}{record.name}{RESET}"
        try:
            text = logging.Formatter.format(self, record)
        finally:
            record.levelname, record.name = saved

        suffix = _request_suffix(record)
        return f"{text}{DIM}{suffix}{RESET}" if suffix else text


class OctoPrintHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler attached by :func:`setup_logger`.

    Its type marks the handler as ours, so repeated setup calls can find and
    replace it.
    """


class StructuredJSONFormatter(logging.Formatter):
    """One JSON document per record.

    Request extras are grouped under ``request``; other extras, and the
    contents of an ``extra={"context": {...}}`` mapping, under ``context``.
    """

    def __init__(
        self,
        serializer: JsonSerializer | None = None,
        *,
        datefmt: str | None = None,
        payload_transformer: PayloadTransformer | None = None,
    ) -> None:
        super().__init__(datefmt=datefmt)
        self._serializer = serializer or _default_json_serializer
        self._transformer = payload_transformer

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            payload["event"] = event

        request = {field: getattr(record, field) for field in REQUEST_FIELDS if hasattr(record, field)}
        if request:
            payload["request"] = request

        context: dict[str, Any] = {}
        for key, value in vars(record).items():
            if key in _RECORD_ATTRS or key in REQUEST_FIELDS or key == "event":
                continue
            if key == "context" and isinstance(value, dict):
                context.update(value)
            else:
                context.setdefault(key, value)
        if context:
            payload["context"] = context

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if self._transformer is not None:
            payload = self._transformer(payload)
        return self._serializer(payload)


def _default_json_serializer(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, default=str)


def _read_bool_env(key: str) -> bool:
    value = os.getenv(key)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL) or logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if isinstance(handler, OctoPrintHandler)]


def setup_logger(
    *,
    level: int | str | None = None,
    use_json: bool | None = None,
    use_color: bool | None = None,
    json_serializer: JsonSerializer | None = None,
    payload_transformer: PayloadTransformer | None = None,
    fmt: str | None = None,
    datefmt: str | None = DEFAULT_DATEFMT,
    logger_name: str = DEFAULT_LOGGER_NAME,
    force: bool = False,
) -> logging.Logger:
    """Attach an :class:`OctoPrintHandler` to the client's logger.

    Args:
        level: Log level; falls back to ``OCTOPRINT_CLIENT_LOG_LEVEL``, then
            ``INFO``.
        use_json: JSON output; defaults to ``OCTOPRINT_CLIENT_LOG_JSON``.
        use_color: Colored text; defaults to on unless ``NO_COLOR`` is set or
            JSON output is selected.
        json_serializer: Payload to string conversion for JSON output.
        payload_transformer: Hook adjusting the JSON payload before
            serialization.
        fmt: Text format string.
        datefmt: Timestamp format.
        logger_name: Logger to configure; pass ``""`` for the root logger.
        force: Replace a handler attached by an earlier call instead of
            leaving the configuration alone.

    Returns:
        The configured logger.

    """
    logger = logging.getLogger(logger_name or None)
    existing = _owned_handlers(logger)
    if existing and not force:
        return logger
    for handler in existing:
        logger.removeHandler(handler)
        handler.close()

    resolved_level = _resolve_level(level)
    json_output = _read_bool_env(ENV_LOG_JSON) if use_json is None else use_json
    if use_color is None:
        use_color = not json_output and not os.getenv(ENV_NO_COLOR)

    formatter: logging.Formatter
    if json_output:
        formatter = StructuredJSONFormatter(
            json_serializer, datefmt=datefmt, payload_transformer=payload_transformer
        )
    elif use_color:
        formatter = ColoredFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)
    else:
        formatter = PlainFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)

    handler = OctoPrintHandler()
    handler.setLevel(resolved_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(resolved_level)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``name`` (default ``octoprint_client``) without configuring anything."""
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "REQUEST_FIELDS",
    "ColoredFormatter",
    "OctoPrintHandler",
    "PlainFormatter",
    "StructuredJSONFormatter",
    "get_logger",
    "setup_logger",
]
