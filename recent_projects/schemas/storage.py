"""
Fragments of the VS Code-family storage.json we read.

Only the leaves are modeled. The surrounding document is undocumented and
changes between releases, so it is walked with guarded lookups in the parser
and each leaf entry is validated on its own: one bad entry must not take its
siblings down with it.

Menubar shape (primary):

    {"lastKnownMenubarData": {"menus": {"File": {"items": [
        {"id": "submenuitem.MenubarRecentMenu", "submenu": {"items": [
            {"id": "openRecentFolder", "label": "~/code/app",
             "uri": {"$mid": 1, "scheme": "file", "path": "/Users/alice/code/app"}}
        ]}}
    ]}}}}

Backup workspaces shape (fallback):

    {"backupWorkspaces": {"folders": [{"folderUri": "file:///Users/alice/code/app"}]}}
"""

from __future__ import annotations

import pydantic

from recent_projects.schemas.types import PermissiveModel


class MenubarUri(PermissiveModel):
    """Serialized URI object attached to a menubar entry (`$mid` and friends land in extras)."""

    scheme: str | None = None
    path: str | None = None
    external: str | None = None


class MenubarRecentItem(PermissiveModel):
    """One entry of the File > Open Recent submenu."""

    id: str
    label: str = pydantic.Field(min_length=1)
    uri: MenubarUri


class BackupFolder(PermissiveModel):
    """One entry of backupWorkspaces.folders."""

    folderUri: str = pydantic.Field(min_length=1)
