"""
Pipeline records.

RawProject -> NormalizedPath -> RecentProject, plus the parser's ParseResult.
All records are frozen; merging replaces a record rather than mutating it.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

from recent_projects.schemas.types import SUPPORTED_PLATFORMS, BaseStrictModel, ParseStrategy


class RawProject(BaseStrictModel):
    """A (name, path) pair as extracted from a storage file, before normalization."""

    name: str
    raw_path: str


class NormalizedPath(BaseStrictModel):
    """Canonical form of a raw path plus its home-abbreviated display form."""

    canonical_path: str
    display_name: str


class RecentProject(BaseStrictModel):
    """
    A recently opened project as reported by one IDE.

    `path` is always canonical (ignored suffixes trimmed). `source` is the id
    of the provider that produced the record.
    """

    name: str
    path: str
    source: str


class ParseResult(BaseStrictModel):
    """Output of a storage parser.

    `strategy` and `skipped` are diagnostic only; consumers read `projects`.
    """

    projects: tuple[RawProject, ...] = ()
    strategy: ParseStrategy = 'none'
    skipped: int = 0


class HostEnvironment(BaseStrictModel):
    """
    The bits of the host the pipeline depends on.

    Captured once per top-level discovery call and passed down explicitly so
    tests can point every provider at a fake home directory.
    """

    home: str
    platform: str
    appdata: str | None = None

    @classmethod
    def from_system(cls, environ: Mapping[str, str] | None = None) -> HostEnvironment:
        """Capture home directory, sys.platform and APPDATA from the running process."""
        env = os.environ if environ is None else environ
        return cls(home=str(Path.home()), platform=sys.platform, appdata=env.get('APPDATA') or None)

    @property
    def is_supported(self) -> bool:
        return self.platform in SUPPORTED_PLATFORMS
