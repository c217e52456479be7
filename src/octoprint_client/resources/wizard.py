# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""First-run setup wizard."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..resource import BaseResource


class Wizard(BaseResource):
    path = "/api/setup/wizard"

    @classmethod
    def get(cls) -> dict[str, Any]:
        return cls.fetch_resource(deserialize=False)

    @classmethod
    def finish(cls, handled: Iterable[str]) -> Any:
        """Mark the wizards named in ``handled`` as done."""
        return cls.post(params={"handled": list(handled)})


__all__ = ["Wizard"]
