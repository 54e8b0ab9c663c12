"""
Recent-project providers - one per IDE.

A provider composes StorageLocator + StorageParser + PathNormalizer into a
single capability: "return this IDE's current list of recent projects".
Every failure is contained at the provider boundary; the worst a provider can
do is contribute an empty list.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from recent_projects.exceptions import StorageReadError
from recent_projects.protocols import LoggerProtocol, NullLogger
from recent_projects.schemas.models import HostEnvironment, RecentProject
from recent_projects.services.locator import StorageLayout, StorageLocator, standard_layout
from recent_projects.services.normalizer import PathNormalizer
from recent_projects.services.parser import StorageParser, VSCodeStorageParser

__all__ = [
    'CursorProvider',
    'KiroProvider',
    'PROVIDER_CLASSES',
    'ProjectProvider',
    'QoderProvider',
    'VSCodeProvider',
    'default_providers',
]


class ProjectProvider:
    """
    Base provider for VS Code-family IDEs.

    Subclasses set `id` and `layout`; everything else is shared.
    """

    id: ClassVar[str]
    layout: ClassVar[StorageLayout]

    def __init__(
        self,
        host: HostEnvironment,
        normalizer: PathNormalizer | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize provider.

        Args:
            host: Host environment to probe
            normalizer: Path normalizer (default: one built for host.home)
            logger: Logger instance (default: NullLogger)
        """
        self.host = host
        self.logger: LoggerProtocol = logger or NullLogger()
        self.normalizer = normalizer or PathNormalizer(host.home)
        self.locator = StorageLocator(self.logger)
        self.parser: StorageParser = VSCodeStorageParser(host.platform)

    async def get_recent_projects(self) -> list[RecentProject]:
        """
        This IDE's recent projects, normalized and deduplicated by path.

        Never raises: missing, unreadable or malformed storage yields [].
        """
        try:
            return await self._discover()
        except StorageReadError as e:
            await self.logger.info(f'[{self.id}] {e}')
            return []
        except Exception as e:
            await self.logger.error(f'[{self.id}] Failed to load recent projects: {e!r}')
            return []

    async def _discover(self) -> list[RecentProject]:
        storage_path = await self.locator.locate(self.layout, self.host)
        if storage_path is None:
            await self.logger.info(f'[{self.id}] No storage file found')
            return []

        content = await self._read_storage(storage_path)
        result = self.parser.parse(content)

        if result.skipped:
            await self.logger.debug(f'[{self.id}] Skipped {result.skipped} malformed entries in {storage_path}')
        if not result.projects:
            await self.logger.info(f'[{self.id}] No recognizable project list in {storage_path}')
            return []
        await self.logger.debug(f'[{self.id}] Extracted {len(result.projects)} projects via {result.strategy}')

        by_path: dict[str, RecentProject] = {}
        for raw in result.projects:
            normalized = self.normalizer.normalize(raw.raw_path)
            by_path[normalized.canonical_path] = RecentProject(
                name=raw.name,
                path=normalized.canonical_path,
                source=self.id,
            )
        return list(by_path.values())

    @staticmethod
    async def _read_storage(storage_path: str) -> str:
        """
        Read a storage file off the event loop.

        Raises:
            StorageReadError: If the file cannot be read or is not valid UTF-8
        """
        try:
            # utf-8-sig: some Windows builds write a BOM
            return await asyncio.to_thread(Path(storage_path).read_text, encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(storage_path, str(e)) from e


# ==============================================================================
# IDE providers
# ==============================================================================


_VSCODE_POSIX_SUFFIXES = (
    # Global storage (current layout) first
    'Code/User/globalStorage/storage.json',
    'Code - Insiders/User/globalStorage/storage.json',
    'VSCodium/User/globalStorage/storage.json',
    # Stable
    'Code/storage.json',
    'Code/User/storage.json',
    # Insiders
    'Code - Insiders/storage.json',
    'Code - Insiders/User/storage.json',
    # VSCodium
    'VSCodium/storage.json',
    'VSCodium/User/storage.json',
)


class VSCodeProvider(ProjectProvider):
    """VS Code (Stable, Insiders and VSCodium share this provider)."""

    id = 'vscode'
    layout = StorageLayout(
        ide_id='vscode',
        candidates={
            # Cursor is also probed on macOS as a last resort
            'darwin': (*_VSCODE_POSIX_SUFFIXES, 'Cursor/User/globalStorage/storage.json'),
            'linux': _VSCODE_POSIX_SUFFIXES,
            'win32': (
                'Code/User/globalStorage/storage.json',
                'Code - Insiders/User/globalStorage/storage.json',
                'Code/storage.json',
                'Code/User/storage.json',
                'Code - Insiders/storage.json',
                'Code - Insiders/User/storage.json',
            ),
        },
    )


class CursorProvider(ProjectProvider):
    id = 'cursor'
    layout = standard_layout('cursor', 'Cursor')


class KiroProvider(ProjectProvider):
    id = 'kiro'
    layout = standard_layout('kiro', 'Kiro')


class QoderProvider(ProjectProvider):
    id = 'qoder'
    layout = standard_layout('qoder', 'Qoder')


# Registration order is priority order: on a path collision the later provider wins
PROVIDER_CLASSES: tuple[type[ProjectProvider], ...] = (VSCodeProvider, CursorProvider, KiroProvider, QoderProvider)


def default_providers(
    host: HostEnvironment,
    normalizer: PathNormalizer | None = None,
    logger: LoggerProtocol | None = None,
) -> Sequence[ProjectProvider]:
    """Instantiate every built-in provider, in priority order."""
    normalizer = normalizer or PathNormalizer(host.home)
    return [provider_class(host, normalizer=normalizer, logger=logger) for provider_class in PROVIDER_CLASSES]
