"""
ide-recent-projects - unified recently-opened project history for VS Code-family IDEs.

    >>> import asyncio
    >>> from recent_projects import HistoryAggregator
    >>> projects = asyncio.run(HistoryAggregator().search('app'))
"""

from __future__ import annotations

from recent_projects.schemas.models import HostEnvironment, RecentProject
from recent_projects.services.history import HistoryAggregator

__all__ = ['HistoryAggregator', 'HostEnvironment', 'RecentProject']
