# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Typed client for the OctoPrint REST API."""

from __future__ import annotations

from . import exceptions, types
from .client import Client, UploadFile, configure, configure_from_env, get_client
from .config import ClientConfig
from .exceptions import Error
from .resource import BaseResource
from .resources import (
    Connection,
    CurrentUser,
    Files,
    Job,
    Languages,
    Logs,
    PrinterProfiles,
    Push,
    ServerInformation,
    ServerVersion,
    Settings,
    System,
    SystemCommands,
    Util,
    Wizard,
    access,
)
from .types import Location


__version__ = "0.1.0"

__all__ = [
    "BaseResource",
    "Client",
    "ClientConfig",
    "Connection",
    "CurrentUser",
    "Error",
    "Files",
    "Job",
    "Languages",
    "Location",
    "Logs",
    "PrinterProfiles",
    "Push",
    "ServerInformation",
    "ServerVersion",
    "Settings",
    "System",
    "SystemCommands",
    "UploadFile",
    "Util",
    "Wizard",
    "access",
    "configure",
    "configure_from_env",
    "exceptions",
    "get_client",
    "types",
]
