"""
Storage parser service - extracts recent projects from IDE storage.json files.

Framework-agnostic and synchronous: takes file contents, returns a ParseResult.
Malformed input never raises; it yields an empty result.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any, Protocol

import pydantic

from recent_projects.schemas.models import ParseResult, RawProject
from recent_projects.schemas.storage import BackupFolder, MenubarRecentItem
from recent_projects.services.normalizer import final_segment, resolve_uri, strip_drive_separator

__all__ = [
    'OPEN_RECENT_FOLDER_ID',
    'RECENT_MENU_ID',
    'StorageParser',
    'VSCodeStorageParser',
]

# Menubar identifiers written by every VS Code fork we support
RECENT_MENU_ID = 'submenuitem.MenubarRecentMenu'
OPEN_RECENT_FOLDER_ID = 'openRecentFolder'


# ==============================================================================
# Parser Protocol
# ==============================================================================


class StorageParser(Protocol):
    """Contract shared by all storage parsers."""

    def parse(self, content: str) -> ParseResult: ...


# ==============================================================================
# Guarded lookups
# ==============================================================================


def _dig(data: Any, *keys: str) -> Any:
    """Follow a chain of dict keys, returning None as soon as a step is missing or not a dict."""
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _dedupe_by_path(projects: list[RawProject]) -> tuple[RawProject, ...]:
    """Deduplicate by raw path: last occurrence wins, first-occurrence order kept."""
    by_path: dict[str, RawProject] = {}
    for project in projects:
        by_path[project.raw_path] = project
    return tuple(by_path.values())


# ==============================================================================
# VS Code-family parser
# ==============================================================================


class VSCodeStorageParser:
    """
    Parser for the storage.json written by VS Code and its forks.

    Two strategies, strictly ordered:
    1. Menubar: File > Open Recent entries from lastKnownMenubarData (has IDE labels)
    2. Backup workspaces: backupWorkspaces.folders, only consulted when (1) finds nothing
    """

    def __init__(self, platform: str) -> None:
        """
        Initialize parser.

        Args:
            platform: Host platform identifier, controls drive-letter handling
        """
        self.platform = platform

    def parse(self, content: str) -> ParseResult:
        """
        Parse storage.json contents.

        Args:
            content: Raw file contents

        Returns:
            ParseResult with the extracted projects and the strategy that produced them
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            return ParseResult()

        if not isinstance(data, dict):
            return ParseResult()

        projects, skipped = self._collect(self._iter_menubar(data))
        if projects:
            return ParseResult(projects=_dedupe_by_path(projects), strategy='menubar', skipped=skipped)

        fallback, fallback_skipped = self._collect(self._iter_backup_workspaces(data))
        skipped += fallback_skipped
        if fallback:
            return ParseResult(projects=_dedupe_by_path(fallback), strategy='backup_workspaces', skipped=skipped)

        return ParseResult(skipped=skipped)

    @staticmethod
    def _collect(entries: Iterator[RawProject | None]) -> tuple[list[RawProject], int]:
        """Split an entry stream into parsed projects and a count of discarded entries."""
        projects: list[RawProject] = []
        skipped = 0
        for entry in entries:
            if entry is None:
                skipped += 1
            else:
                projects.append(entry)
        return projects, skipped

    def _iter_menubar(self, data: dict[str, Any]) -> Iterator[RawProject | None]:
        """Yield one RawProject (or None for an unusable entry) per recent-folder menu item."""
        file_items = _as_list(_dig(data, 'lastKnownMenubarData', 'menus', 'File', 'items'))
        recent_menu = next(
            (item for item in file_items if isinstance(item, dict) and item.get('id') == RECENT_MENU_ID),
            None,
        )
        if recent_menu is None:
            return

        for raw_item in _as_list(_dig(recent_menu, 'submenu', 'items')):
            # Separators, "More...", "Clear Recently Opened" and recent files share the submenu
            if not isinstance(raw_item, dict) or raw_item.get('id') != OPEN_RECENT_FOLDER_ID:
                continue

            try:
                item = MenubarRecentItem.model_validate(raw_item)
            except pydantic.ValidationError:
                yield None
                continue

            if item.uri.scheme == 'file':
                project_path = strip_drive_separator(item.uri.path, self.platform) if item.uri.path else None
            else:
                project_path = resolve_uri(item.uri.external, self.platform) if item.uri.external else None

            yield RawProject(name=item.label, raw_path=project_path) if project_path else None

    def _iter_backup_workspaces(self, data: dict[str, Any]) -> Iterator[RawProject | None]:
        """Yield one RawProject (or None for an unusable entry) per backed-up folder."""
        for raw_entry in _as_list(_dig(data, 'backupWorkspaces', 'folders')):
            try:
                entry = BackupFolder.model_validate(raw_entry)
            except pydantic.ValidationError:
                yield None
                continue

            project_path = resolve_uri(entry.folderUri, self.platform)
            yield RawProject(name=final_segment(project_path), raw_path=project_path) if project_path else None
