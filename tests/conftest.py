"""
Shared fixtures: a fake home directory and storage.json builders.

Storage payloads mirror what VS Code actually writes, trimmed to the keys the
parser reads plus a few neighbours it must ignore.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from recent_projects.schemas.models import HostEnvironment

StorageWriter = Callable[[str, Any], Path]


def _recent_folder(label: str, path: str) -> dict[str, Any]:
    return {
        'id': 'openRecentFolder',
        'label': label,
        'uri': {'$mid': 1, 'scheme': 'file', 'path': path},
        'enabled': True,
    }


@pytest.fixture
def menubar_storage() -> Callable[..., dict[str, Any]]:
    """Build a storage.json document with a File > Open Recent submenu."""

    def build(*folders: tuple[str, str], extra_items: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        items: list[dict[str, Any]] = [_recent_folder(label, path) for label, path in folders]
        items.extend(extra_items or [])
        items.append({'id': 'vscode.menubar.separator'})
        items.append({'id': 'workbench.action.clearRecentFiles', 'label': 'Clear Recently Opened...'})
        return {
            'telemetry.machineId': 'abc123',
            'lastKnownMenubarData': {
                'menus': {
                    'File': {
                        'items': [
                            {'id': 'workbench.action.files.newUntitledFile', 'label': 'New Text File'},
                            {
                                'id': 'submenuitem.MenubarRecentMenu',
                                'label': 'Open Recent',
                                'submenu': {'items': items},
                            },
                        ]
                    }
                }
            },
        }

    return build


@pytest.fixture
def backup_storage() -> Callable[..., dict[str, Any]]:
    """Build a storage.json document with only backupWorkspaces."""

    def build(*folder_uris: str) -> dict[str, Any]:
        return {
            'backupWorkspaces': {
                'workspaces': [],
                'folders': [{'folderUri': uri} for uri in folder_uris],
                'emptyWindows': [],
            }
        }

    return build


@pytest.fixture
def home(tmp_path: Path) -> Path:
    home_dir = tmp_path / 'home' / 'alice'
    home_dir.mkdir(parents=True)
    return home_dir


@pytest.fixture
def linux_host(home: Path) -> HostEnvironment:
    return HostEnvironment(home=str(home), platform='linux')


@pytest.fixture
def write_storage(home: Path) -> StorageWriter:
    """Write a storage file under ~/.config (the linux app-support root)."""

    def write(relative: str, payload: Any) -> Path:
        path = home / '.config' / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding='utf-8')
        return path

    return write
