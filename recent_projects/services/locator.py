"""
Storage locator service - finds the storage.json an IDE is currently using.

Each IDE declares a StorageLayout: per platform, an ordered list of paths
relative to that platform's application-support root. Newer layouts come
first because, when present, they are authoritative.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from recent_projects.protocols import LoggerProtocol, NullLogger
from recent_projects.schemas.models import HostEnvironment

__all__ = ['StorageLayout', 'StorageLocator', 'app_support_root', 'standard_layout']


@dataclass(frozen=True)
class StorageLayout:
    """Where one IDE keeps its storage file, per platform."""

    ide_id: str
    candidates: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def suffixes_for(self, platform: str) -> Sequence[str]:
        return self.candidates.get(platform, ())


def standard_layout(ide_id: str, app_name: str) -> StorageLayout:
    """
    Layout shared by most VS Code forks: same three locations on every platform.

    Args:
        ide_id: Provider identifier
        app_name: Directory name the application uses under the app-support root

    Returns:
        StorageLayout probing global storage, then the two legacy locations
    """
    suffixes = (
        f'{app_name}/User/globalStorage/storage.json',
        f'{app_name}/User/storage.json',
        f'{app_name}/storage.json',
    )
    return StorageLayout(ide_id=ide_id, candidates={'darwin': suffixes, 'linux': suffixes, 'win32': suffixes})


def _path_flavor(platform: str) -> type[PurePath]:
    return PureWindowsPath if platform == 'win32' else PurePosixPath


def app_support_root(host: HostEnvironment) -> PurePath | None:
    """
    Application-support root for the host platform.

    Returns:
        Root directory, or None for an unrecognized platform
    """
    flavor = _path_flavor(host.platform)
    home = flavor(host.home)

    if host.platform == 'darwin':
        return home / 'Library' / 'Application Support'
    if host.platform == 'linux':
        return home / '.config'
    if host.platform == 'win32':
        return flavor(host.appdata) if host.appdata else home / 'AppData' / 'Roaming'
    return None


class StorageLocator:
    """
    Resolves an IDE's storage file on the host.

    Candidates are recomputed on every call; nothing is cached.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self.logger: LoggerProtocol = logger or NullLogger()

    def candidate_paths(self, layout: StorageLayout, host: HostEnvironment) -> list[str]:
        """
        Ordered candidate paths for a layout on a host.

        Args:
            layout: IDE storage layout
            host: Host environment

        Returns:
            Absolute paths in probe order (empty for unrecognized platforms)
        """
        root = app_support_root(host)
        if root is None:
            return []
        return [str(root / suffix) for suffix in layout.suffixes_for(host.platform)]

    async def locate(self, layout: StorageLayout, host: HostEnvironment) -> str | None:
        """
        First candidate that exists on disk.

        Candidates that cannot be stat'ed (permissions, broken mounts) are
        skipped like missing ones.

        Args:
            layout: IDE storage layout
            host: Host environment

        Returns:
            Path to the storage file, None if no candidate exists
        """
        for candidate in self.candidate_paths(layout, host):
            try:
                found = await asyncio.to_thread(Path(candidate).is_file)
            except OSError as e:
                await self.logger.debug(f'[{layout.ide_id}] Skipping unreadable candidate {candidate}: {e}')
                continue
            if found:
                await self.logger.debug(f'[{layout.ide_id}] Storage file found: {candidate}')
                return candidate
        return None
