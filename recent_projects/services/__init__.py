"""Service layer for recent-project discovery."""

from recent_projects.services.history import HistoryAggregator, filter_projects
from recent_projects.services.locator import StorageLayout, StorageLocator
from recent_projects.services.normalizer import PathNormalizer, resolve_uri
from recent_projects.services.parser import StorageParser, VSCodeStorageParser
from recent_projects.services.providers import (
    CursorProvider,
    KiroProvider,
    ProjectProvider,
    QoderProvider,
    VSCodeProvider,
    default_providers,
)

__all__ = [
    'CursorProvider',
    'HistoryAggregator',
    'KiroProvider',
    'PathNormalizer',
    'ProjectProvider',
    'QoderProvider',
    'StorageLayout',
    'StorageLocator',
    'StorageParser',
    'VSCodeProvider',
    'VSCodeStorageParser',
    'default_providers',
    'filter_projects',
    'resolve_uri',
]
