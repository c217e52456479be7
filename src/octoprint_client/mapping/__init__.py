# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Object mapping layer turning OctoPrint JSON into typed objects."""

from __future__ import annotations

from .attrs import AttrSpec, AutoInitializable, auto_attr
from .deserialize import DeserializationConfig, Deserializable, Model
from .keys import camel_to_snake, deep_underscore_keys, is_camel_case, underscore


__all__ = [
    "AttrSpec",
    "AutoInitializable",
    "DeserializationConfig",
    "Deserializable",
    "Model",
    "auto_attr",
    "camel_to_snake",
    "deep_underscore_keys",
    "is_camel_case",
    "underscore",
]
