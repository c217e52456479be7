# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Base class shared by every API resource.

A resource binds an endpoint path to the configured client::

    class Wizard(BaseResource):
        path = "/api/setup/wizard"

        @classmethod
        def get(cls) -> dict[str, Any]:
            return cls.fetch_resource(deserialize=False)

Resources carrying response data also derive from
:class:`~octoprint_client.mapping.Model`, listed first so its
``deserialize`` takes precedence.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from .client import Client, get_client
from .exceptions import ClientNotConfiguredError


class BaseResource:
    path: ClassVar[str] = ""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__()

    @classmethod
    def client(cls) -> Client:
        client = get_client()
        if client is None:
            raise ClientNotConfiguredError("No client configured")
        return client

    @classmethod
    def resource_path(cls, *parts: object) -> str:
        """Join ``parts`` onto the resource path, skipping ``None`` and empty parts."""
        segments = [cls.path.rstrip("/")]
        segments.extend(str(part).strip("/") for part in parts if part is not None and str(part) != "")
        return "/".join(segments)

    @classmethod
    def deserialize(cls, attrs: Any) -> Any:
        if not isinstance(attrs, Mapping):
            return attrs
        return cls(**attrs)

    # ------------------------------------------------------------------
    # HTTP verbs
    # ------------------------------------------------------------------

    @classmethod
    def fetch_resource(
        cls,
        subpath: str | None = None,
        *,
        options: Mapping[str, Any] | None = None,
        deserialize: bool = True,
    ) -> Any:
        """GET the resource, or a subpath of it.

        Relative subpaths are appended to :attr:`path`; absolute ones are used
        as is.  ``options`` become the query string.
        """
        if subpath is None:
            path = cls.path
        elif subpath.startswith("/"):
            path = subpath
        else:
            path = cls.resource_path(subpath)

        response = cls.client().request(path, http_method="get", params=options)
        if not deserialize:
            return response
        return cls.deserialize(response)

    @classmethod
    def get(cls) -> Any:
        return cls.fetch_resource()

    @classmethod
    def post(
        cls,
        path: str | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return cls._send("post", path, dict(params or {}), headers, options)

    @classmethod
    def put(
        cls,
        path: str | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return cls._send("put", path, dict(params or {}), headers, options)

    @classmethod
    def patch(
        cls,
        path: str | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return cls._send("patch", path, dict(params or {}), headers, options)

    @classmethod
    def delete(
        cls,
        path: str | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        # An empty DELETE carries no body at all.
        return cls._send("delete", path, dict(params) if params else None, headers, options)

    @classmethod
    def _send(
        cls,
        http_method: str,
        path: str | None,
        body: dict[str, Any] | None,
        headers: Mapping[str, str] | None,
        options: Mapping[str, Any] | None,
    ) -> Any:
        return cls.client().request(
            path or cls.path,
            http_method=http_method,
            body=body,
            headers=headers,
            options=options,
        )


__all__ = ["BaseResource"]
