"""Configuration for ide-recent-projects."""

from __future__ import annotations

from recent_projects.config.base import RecentProjectsSettings, get_settings, lazy_settings
from recent_projects.config.settings import settings

__all__ = ['RecentProjectsSettings', 'get_settings', 'lazy_settings', 'settings']
