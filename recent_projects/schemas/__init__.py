"""
Schema definitions for ide-recent-projects.

This package contains Pydantic models for:
- models: pipeline records (RawProject, NormalizedPath, RecentProject, ParseResult, HostEnvironment)
- storage: the storage.json fragments read by the parser
"""

from __future__ import annotations

from recent_projects.schemas.models import (
    HostEnvironment,
    NormalizedPath,
    ParseResult,
    RawProject,
    RecentProject,
)
from recent_projects.schemas.types import SUPPORTED_PLATFORMS, BaseStrictModel, Platform

__all__ = [
    'BaseStrictModel',
    'HostEnvironment',
    'NormalizedPath',
    'ParseResult',
    'Platform',
    'RawProject',
    'RecentProject',
    'SUPPORTED_PLATFORMS',
]
