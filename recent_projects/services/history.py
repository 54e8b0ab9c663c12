"""
History aggregator - merges every provider's recent projects into one list.

Providers run concurrently and are joined before the merge; the merge itself
is single-threaded, so no locking is needed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from recent_projects.protocols import LoggerProtocol, NullLogger
from recent_projects.schemas.models import HostEnvironment, RecentProject
from recent_projects.services.normalizer import PathNormalizer
from recent_projects.services.providers import ProjectProvider, default_providers

__all__ = ['HistoryAggregator', 'filter_projects']


def filter_projects(projects: Sequence[RecentProject], query: str) -> list[RecentProject]:
    """
    Case-insensitive substring match on name or path.

    An empty query matches every project.
    """
    needle = query.lower()
    return [p for p in projects if needle in p.name.lower() or needle in p.path.lower()]


class HistoryAggregator:
    """
    Unified recent-project history across IDEs.

    Provider order is priority order: when two providers report the same
    canonical path, the record from the provider registered later wins, while
    the merged list keeps the position where the path was first seen.
    """

    def __init__(
        self,
        providers: Sequence[ProjectProvider] | None = None,
        host: HostEnvironment | None = None,
        normalizer: PathNormalizer | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize aggregator.

        Args:
            providers: Providers in priority order (default: all built-in providers)
            host: Host environment (default: captured from the running process)
            normalizer: Path normalizer (default: one built for host.home)
            logger: Logger instance (default: NullLogger)
        """
        self.host = host or HostEnvironment.from_system()
        self.logger: LoggerProtocol = logger or NullLogger()
        self.normalizer = normalizer or PathNormalizer(self.host.home)
        self.providers: tuple[ProjectProvider, ...] = tuple(
            default_providers(self.host, self.normalizer, self.logger) if providers is None else providers
        )

    async def get_recent_projects(self) -> list[RecentProject]:
        """
        Merged, deduplicated recent projects from every provider.

        Returns:
            One record per canonical path, `name` set to the home-abbreviated path
        """
        results = await asyncio.gather(*(self._collect(provider) for provider in self.providers))

        merged: dict[str, RecentProject] = {}
        for provider_projects in results:
            for project in provider_projects:
                normalized = self.normalizer.normalize(project.path)
                # Re-assigning an existing key keeps its original position
                merged[normalized.canonical_path] = project.model_copy(
                    update={'path': normalized.canonical_path, 'name': normalized.display_name}
                )

        await self.logger.debug(f'Merged {sum(map(len, results))} records into {len(merged)} projects')
        return list(merged.values())

    async def search(self, query: str) -> list[RecentProject]:
        """
        Recent projects whose name or path contains `query` (case-insensitive).

        Args:
            query: Substring to look for

        Returns:
            Matching projects in merged order
        """
        return filter_projects(await self.get_recent_projects(), query)

    async def _collect(self, provider: ProjectProvider) -> list[RecentProject]:
        """Run one provider; a provider that raises contributes nothing."""
        try:
            return await provider.get_recent_projects()
        except Exception as e:
            await self.logger.error(f'[{provider.id}] Provider failed: {e!r}')
            return []
