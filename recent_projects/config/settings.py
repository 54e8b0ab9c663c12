"""
Module-level settings singleton.

Import `settings` from here rather than instantiating RecentProjectsSettings,
so the environment is read once, on first access.
"""

from __future__ import annotations

from recent_projects.config.base import RecentProjectsSettings, lazy_settings

# Module-level singleton (lazy-loaded)
settings = lazy_settings(RecentProjectsSettings)
