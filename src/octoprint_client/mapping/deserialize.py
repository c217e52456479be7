# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Declarative deserialization of API payloads.

A class describes how a response turns into an instance by attaching a
:class:`DeserializationConfig` as ``__deserialize__``::

    class File(Model):
        __deserialize__ = (
            DeserializationConfig()
            .nested("refs", Refs)
            .array("children", "File")
            .rename(display="display_name", hash="md5_hash")
        )

``File.deserialize(payload)`` then applies, in order: camelCase key
conversion, nested conversions, array conversions, renames, custom
transforms and extras collection, before calling ``File(**payload)``.
The caller's mapping is never mutated.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, ClassVar, TypeVar

from .attrs import AutoInitializable, resolve_target
from .keys import camel_to_snake, is_camel_case


__all__ = [
    "DeserializationConfig",
    "Deserializable",
    "Model",
]


Transformation = Callable[[dict[str, Any]], Any]
T = TypeVar("T", bound="Deserializable")

DEFAULT_EXTRAS_FIELD = "extra"


class DeserializationConfig:
    """Per-class deserialization rules, built with chained calls."""

    __slots__ = ("nested_objects", "array_objects", "key_mappings", "transformations", "extras_field")

    def __init__(self) -> None:
        self.nested_objects: dict[str, Any] = {}
        self.array_objects: dict[str, Any] = {}
        self.key_mappings: dict[str, str] = {}
        self.transformations: list[Transformation] = []
        self.extras_field = DEFAULT_EXTRAS_FIELD

    def nested(self, field: str, target: Any) -> DeserializationConfig:
        """Convert the mapping stored under ``field`` into ``target``."""
        self.nested_objects[field] = target
        return self

    def array(self, field: str, target: Any) -> DeserializationConfig:
        """Convert every mapping in the list stored under ``field`` into ``target``."""
        self.array_objects[field] = target
        return self

    def rename(self, mapping: Mapping[str, str] | None = None, /, **pairs: str) -> DeserializationConfig:
        """Rename payload keys, old name to new name."""
        if mapping:
            self.key_mappings.update(mapping)
        self.key_mappings.update(pairs)
        return self

    def transform(self, fn: Transformation) -> DeserializationConfig:
        """Register a callable run on the payload after renames.

        The callable may edit the dict in place or return a replacement.
        """
        self.transformations.append(fn)
        return self

    def collect_extras(self, field: str = DEFAULT_EXTRAS_FIELD) -> DeserializationConfig:
        """Set the attribute receiving unrecognised keys."""
        self.extras_field = field
        return self

    def __repr__(self) -> str:
        return (
            f"DeserializationConfig(nested={self.nested_objects!r}, array={self.array_objects!r}, "
            f"rename={self.key_mappings!r}, transforms={len(self.transformations)}, "
            f"extras={self.extras_field!r})"
        )


class Deserializable:
    """Mixin adding :meth:`deserialize` and its helper steps."""

    __deserialize__: ClassVar[DeserializationConfig | None] = None

    @classmethod
    def deserialize(cls: type[T], data: Any) -> T | Any:
        """Build an instance from ``data``; non-mapping data, such as the
        ``True`` of an empty response, is returned unchanged.
        """
        if not isinstance(data, Mapping):
            return data
        payload = dict(data)
        cls.convert_camel_case_keys(payload)

        config = cls.__deserialize__
        if config is not None:
            for field, target in config.nested_objects.items():
                cls.deserialize_nested(payload, field, target)
            for field, target in config.array_objects.items():
                cls.deserialize_array(payload, field, target)
            if config.key_mappings:
                cls.rename_keys(payload, config.key_mappings)
            for transformation in config.transformations:
                result = transformation(payload)
                if isinstance(result, Mapping) and result is not payload:
                    payload = dict(result)

        cls.handle_extras(payload)
        return cls(**payload)

    # ------------------------------------------------------------------
    # Individual steps
    # ------------------------------------------------------------------

    @staticmethod
    def convert_camel_case_keys(data: dict[str, Any]) -> dict[str, Any]:
        """Rename top-level camelCase keys to snake_case in place."""
        for key in [key for key in data if isinstance(key, str) and is_camel_case(key)]:
            data[camel_to_snake(key)] = data.pop(key)
        return data

    @staticmethod
    def rename_keys(data: dict[str, Any], mapping: Mapping[str, str]) -> dict[str, Any]:
        for old_key, new_key in mapping.items():
            if old_key in data:
                data[new_key] = data.pop(old_key)
        return data

    @classmethod
    def deserialize_nested(cls, data: dict[str, Any], field: str, target: Any) -> dict[str, Any]:
        value = data.get(field)
        if value is not None:
            data[field] = cls._coerce(value, target)
        return data

    @classmethod
    def deserialize_array(cls, data: dict[str, Any], field: str, target: Any) -> dict[str, Any]:
        value = data.get(field)
        if isinstance(value, list):
            data[field] = [cls._coerce(item, target) for item in value]
        return data

    @classmethod
    def handle_extras(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Move unrecognised keys into the extras bucket.

        Only classes declaring the bucket attribute collect extras.  A key is
        recognised when it is an attribute name or an attribute's source key.
        """
        attrs = cls.auto_attrs() if issubclass(cls, AutoInitializable) else {}
        config = cls.__deserialize__
        bucket = config.extras_field if config is not None else DEFAULT_EXTRAS_FIELD
        if bucket not in attrs:
            return data

        valid_keys = set(attrs) | {spec.source for spec in attrs.values()}
        extra_keys = [key for key in data if key not in valid_keys]
        if not extra_keys:
            return data

        extras = {key: data.pop(key) for key in extra_keys}
        existing = data.get(bucket)
        if isinstance(existing, Mapping):
            extras = {**existing, **extras}
        data[bucket] = extras
        return data

    @classmethod
    def _coerce(cls, value: Any, target: Any) -> Any:
        if value is None:
            return None

        target = resolve_target(cls, target)
        if isinstance(target, type) and issubclass(target, Enum):
            if isinstance(value, target):
                return value
            try:
                return target(value)
            except ValueError:
                return value

        if not isinstance(value, Mapping):
            return value
        deserialize = getattr(target, "deserialize", None)
        if callable(deserialize):
            return deserialize(value)
        return target(**value)


class Model(Deserializable, AutoInitializable):
    """Base for response data classes: declared attributes plus deserialization."""
