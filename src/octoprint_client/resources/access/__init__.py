# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

"""Access control: users, groups and permissions."""

from __future__ import annotations

from .groups import Group, Groups
from .permissions import Permission, Permissions
from .users import User, Users


__all__ = [
    "Group",
    "Groups",
    "Permission",
    "Permissions",
    "User",
    "Users",
]
