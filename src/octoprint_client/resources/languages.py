# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Installed language packs."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..client import UploadFile
from ..mapping import DeserializationConfig, Model, auto_attr
from ..resource import BaseResource


class LanguagePack(Model):
    identifier: str | None = auto_attr(str)
    display: str | None = auto_attr(str)
    languages: list[Any] | None = auto_attr(list)
    extra: dict[str, Any] | None = auto_attr(dict)


class LanguagePackList(Model):
    language_packs: list[LanguagePack] | None = auto_attr(LanguagePack, array=True)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().array("language_packs", LanguagePack)


def _packs_by_component(data: dict[str, Any]) -> None:
    packs = data.get("language_packs")
    if isinstance(packs, Mapping):
        data["language_packs"] = {
            component: LanguagePack.deserialize(info) if isinstance(info, Mapping) else info
            for component, info in packs.items()
        }


class Languages(Model, BaseResource):
    """Language packs keyed by the component (``_core`` or a plugin) they translate."""

    path = "/api/languages"

    language_packs: dict[str, LanguagePack] | None = auto_attr(dict)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().transform(_packs_by_component)

    @classmethod
    def list(cls) -> Languages:
        return cls.fetch_resource()

    @classmethod
    def upload(cls, file_path: str | Path, *, locale: str | None = None) -> LanguagePackList:
        """Upload a language pack archive (zip or tar.gz)."""
        response = cls.post(params={"file": UploadFile(file_path), "locale": locale})
        return LanguagePackList.deserialize(response)

    @classmethod
    def delete_pack(cls, locale: str, pack: str) -> Any:
        return cls.delete(path=cls.resource_path(locale, pack))


__all__ = ["LanguagePack", "LanguagePackList", "Languages"]
