# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Server-side connectivity and path tests.

Each test posts one command to ``/api/util/test`` and returns a
:class:`Util` result.  Only the fields common to most tests are declared;
test specific fields (``typeok``, ``access``, ``response``...) end up in
:attr:`Util.extra`.
"""

from __future__ import annotations

from typing import Any

from ..mapping import Model, auto_attr
from ..resource import BaseResource


def _compact(params: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None}


class Util(Model, BaseResource):
    path = "/api/util"

    result: Any = auto_attr()
    exists: bool | None = auto_attr(bool)
    status: Any = auto_attr()
    extra: dict[str, Any] | None = auto_attr(dict)

    @classmethod
    def _run_test(cls, params: dict[str, Any]) -> Util:
        return cls.deserialize(cls.post(path=cls.resource_path("test"), params=_compact(params)))

    @classmethod
    def test_path(
        cls,
        path: str,
        *,
        check_type: str | None = None,
        check_access: str | None = None,
        allow_create_dir: bool | None = None,
        check_writable_dir: bool | None = None,
    ) -> Util:
        return cls._run_test(
            {
                "command": "path",
                "path": path,
                "check_type": check_type,
                "check_access": check_access,
                "allow_create_dir": allow_create_dir,
                "check_writable_dir": check_writable_dir,
            }
        )

    @classmethod
    def test_url(
        cls,
        url: str,
        *,
        method: str | None = None,
        timeout: float | None = None,
        status: int | str | None = None,
        auth_user: str | None = None,
        auth_pass: str | None = None,
        auth_digest: bool | None = None,
        auth_bearer: str | None = None,
        content_type_whitelist: list[str] | None = None,
        content_type_blacklist: list[str] | None = None,
    ) -> Util:
        return cls._run_test(
            {
                "command": "url",
                "url": url,
                "method": method,
                "timeout": timeout,
                "status": status,
                "auth_user": auth_user,
                "auth_pass": auth_pass,
                "auth_digest": auth_digest,
                "auth_bearer": auth_bearer,
                "content_type_whitelist": content_type_whitelist,
                "content_type_blacklist": content_type_blacklist,
            }
        )

    @classmethod
    def test_server(
        cls,
        host: str,
        port: int,
        *,
        protocol: str | None = None,
        timeout: float | None = None,
    ) -> Util:
        return cls._run_test(
            {"command": "server", "host": host, "port": port, "protocol": protocol, "timeout": timeout}
        )

    @classmethod
    def test_resolution(cls, name: str) -> Util:
        return cls._run_test({"command": "resolution", "name": name})

    @classmethod
    def test_address(cls, address: str | None = None) -> Util:
        return cls._run_test({"command": "address", "address": address})


__all__ = ["Util"]
