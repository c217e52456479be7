# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Declarative attributes with generated constructors.

Data classes declare their attributes in the class body and get a keyword
constructor for free::

    class Refs(AutoInitializable):
        resource: str | None = auto_attr(str)
        download: str | None = auto_attr(str)

    class File(AutoInitializable):
        name: str | None = auto_attr(str)
        display_name: str | None = auto_attr(str, source="display")
        refs: Refs | None = auto_attr(Refs)
        children: list[File] | None = auto_attr("File", array=True)

    File(name="a.gcode", display="A", refs={"resource": "http://..."})

Conversion is deliberately shallow.  Only mapping values are converted, and
only into non-basic classes; scalars, lists of scalars and plain ``dict``
attributes are stored untouched.  Missing values become ``None`` whether or
not the attribute is declared nilable, since OctoPrint omits fields freely
between releases.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
import sys
from typing import Any, ClassVar


__all__ = [
    "AttrSpec",
    "AutoInitializable",
    "auto_attr",
    "resolve_target",
]


_BASIC_TYPES: tuple[type, ...] = (dict, list, str, int, float, bool)


@dataclass(frozen=True, slots=True)
class AttrSpec:
    """Resolved configuration of one declared attribute."""

    name: str
    type: Any = None
    source: str = ""
    array: bool = False
    nilable: bool = True


class _AttrDeclaration:
    __slots__ = ("type", "source", "array", "nilable")

    def __init__(self, type: Any, source: str | None, array: bool, nilable: bool) -> None:
        self.type = type
        self.source = source
        self.array = array
        self.nilable = nilable


def auto_attr(
    type: Any = None,
    *,
    source: str | None = None,
    array: bool = False,
    nilable: bool = True,
) -> Any:
    """Declare an attribute in an :class:`AutoInitializable` class body.

    Args:
        type: Target class for mapping values.  Strings name a class in the
            declaring module and are resolved on first use, which allows self
            references.
        source: Constructor keyword feeding the attribute.  Defaults to the
            attribute name.
        array: Convert each element when the value is a list.
        nilable: Documentation only; missing values are always ``None``.

    """
    return _AttrDeclaration(type, source, array, nilable)


def resolve_target(owner: type, target: Any) -> Any:
    """Resolve a string class reference relative to ``owner``'s module."""
    if not isinstance(target, str):
        return target
    if target == owner.__name__:
        return owner

    resolved: Any = sys.modules.get(owner.__module__)
    for part in target.split("."):
        resolved = getattr(resolved, part, None)
        if resolved is None:
            raise NameError(f"Cannot resolve {target!r} for {owner.__qualname__}")
    return resolved


class AutoInitializable:
    """Base class generating ``__init__``, ``__eq__`` and ``__repr__`` from declarations."""

    __auto_attrs__: ClassVar[dict[str, AttrSpec]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        attrs = dict(getattr(cls, "__auto_attrs__", {}))
        for name, value in list(vars(cls).items()):
            if not isinstance(value, _AttrDeclaration):
                continue
            attrs[name] = AttrSpec(
                name=name,
                type=value.type,
                source=value.source or name,
                array=value.array,
                nilable=value.nilable,
            )
            # Instances own the value; leaving the marker would shadow it on
            # classes that never set the attribute.
            delattr(cls, name)
        cls.__auto_attrs__ = attrs

    def __init__(self, **kwargs: Any) -> None:
        cls = type(self)
        for name, spec in cls.__auto_attrs__.items():
            value = kwargs.get(spec.source)
            if value is None:
                setattr(self, name, None)
                continue

            if spec.type is None:
                converted = value
            elif spec.array and isinstance(value, list):
                converted = [cls._convert_value(item, spec.type) for item in value]
            else:
                converted = cls._convert_value(value, spec.type)
            setattr(self, name, converted)

        super().__init__()

    @classmethod
    def auto_attrs(cls) -> dict[str, AttrSpec]:
        """Return the declared attributes keyed by attribute name."""
        return dict(cls.__auto_attrs__)

    @classmethod
    def _convert_value(cls, value: Any, target: Any) -> Any:
        if not isinstance(value, Mapping):
            return value

        target = resolve_target(cls, target)
        if not isinstance(target, type) or target in _BASIC_TYPES:
            return value
        if issubclass(target, Enum):
            return value
        return target(**value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__auto_attrs__)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name, None)!r}" for name in self.__auto_attrs__)
        return f"{type(self).__name__}({fields})"
