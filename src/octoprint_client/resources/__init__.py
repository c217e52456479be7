# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""API resources, one module per OctoPrint endpoint group."""

from __future__ import annotations

from . import access
from .connection import Connection, ConnectionOptions, ConnectionSettings
from .files import File, Files, Folder, OperationResult, Refs
from .job import Job, JobInformation, JobProgress
from .languages import LanguagePack, LanguagePackList, Languages
from .logs import LogFile, LogReferences, Logs
from .printer_profiles import PrinterProfile, PrinterProfiles
from .push import Push
from .server import ServerInformation, ServerVersion
from .settings import Settings
from .system import Command, System, SystemCommands
from .user import CurrentUser
from .util import Util
from .wizard import Wizard


__all__ = [
    "access",
    "Command",
    "Connection",
    "ConnectionOptions",
    "ConnectionSettings",
    "CurrentUser",
    "File",
    "Files",
    "Folder",
    "Job",
    "JobInformation",
    "JobProgress",
    "LanguagePack",
    "LanguagePackList",
    "Languages",
    "LogFile",
    "LogReferences",
    "Logs",
    "OperationResult",
    "PrinterProfile",
    "PrinterProfiles",
    "Push",
    "Refs",
    "ServerInformation",
    "ServerVersion",
    "Settings",
    "System",
    "SystemCommands",
    "Util",
    "Wizard",
]
