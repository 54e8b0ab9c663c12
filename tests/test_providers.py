"""Tests for per-IDE providers."""

from __future__ import annotations

import asyncio
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from recent_projects.schemas.models import HostEnvironment, RecentProject
from recent_projects.services.locator import StorageLayout
from recent_projects.services.providers import (
    PROVIDER_CLASSES,
    CursorProvider,
    KiroProvider,
    ProjectProvider,
    QoderProvider,
    VSCodeProvider,
)

StorageWriter = Callable[[str, Any], Path]


class RecordingLogger:
    """Collects log messages by level."""

    def __init__(self) -> None:
        self.messages: dict[str, list[str]] = {'debug': [], 'info': [], 'warning': [], 'error': []}

    async def debug(self, message: str) -> None:
        self.messages['debug'].append(message)

    async def info(self, message: str) -> None:
        self.messages['info'].append(message)

    async def warning(self, message: str) -> None:
        self.messages['warning'].append(message)

    async def error(self, message: str) -> None:
        self.messages['error'].append(message)


def _run(provider: ProjectProvider) -> list[RecentProject]:
    return asyncio.run(provider.get_recent_projects())


def test_registration_order() -> None:
    assert [cls.id for cls in PROVIDER_CLASSES] == ['vscode', 'cursor', 'kiro', 'qoder']


@pytest.mark.parametrize(
    ('provider_class', 'app_dir'),
    [(VSCodeProvider, 'Code'), (CursorProvider, 'Cursor'), (KiroProvider, 'Kiro'), (QoderProvider, 'Qoder')],
)
def test_provider_reads_its_own_storage(
    provider_class: type[ProjectProvider],
    app_dir: str,
    linux_host: HostEnvironment,
    write_storage: StorageWriter,
    menubar_storage: Callable[..., dict[str, Any]],
) -> None:
    write_storage(f'{app_dir}/User/globalStorage/storage.json', menubar_storage(('app', '/srv/app')))

    assert _run(provider_class(linux_host)) == [RecentProject(name='app', path='/srv/app', source=provider_class.id)]


def test_provider_trims_and_dedupes_by_canonical_path(
    linux_host: HostEnvironment,
    write_storage: StorageWriter,
    menubar_storage: Callable[..., dict[str, Any]],
) -> None:
    storage = menubar_storage(
        ('app', '/srv/app'),
        ('app (git)', '/srv/app/.git'),
        ('lib', '/srv/lib/.vscode'),
    )
    write_storage('Kiro/User/globalStorage/storage.json', storage)

    assert _run(KiroProvider(linux_host)) == [
        RecentProject(name='app (git)', path='/srv/app', source='kiro'),
        RecentProject(name='lib', path='/srv/lib', source='kiro'),
    ]


def test_provider_uses_fallback_layout(
    linux_host: HostEnvironment,
    write_storage: StorageWriter,
    backup_storage: Callable[..., dict[str, Any]],
) -> None:
    write_storage('Qoder/storage.json', backup_storage('file:///srv/legacy-app'))

    assert _run(QoderProvider(linux_host)) == [RecentProject(name='legacy-app', path='/srv/legacy-app', source='qoder')]


def test_missing_storage_is_informational(linux_host: HostEnvironment) -> None:
    logger = RecordingLogger()

    assert _run(CursorProvider(linux_host, logger=logger)) == []
    assert logger.messages['info'] == ['[cursor] No storage file found']
    assert logger.messages['error'] == []


def test_malformed_storage_yields_nothing(linux_host: HostEnvironment, write_storage: StorageWriter) -> None:
    logger = RecordingLogger()
    write_storage('Cursor/User/globalStorage/storage.json', '{ this is not json')

    assert _run(CursorProvider(linux_host, logger=logger)) == []
    assert logger.messages['error'] == []


def test_undecodable_storage_yields_nothing(home: Path, linux_host: HostEnvironment) -> None:
    path = home / '.config' / 'Cursor' / 'User' / 'globalStorage' / 'storage.json'
    path.parent.mkdir(parents=True)
    path.write_bytes(b'\xff\xfe\x00garbage')
    logger = RecordingLogger()

    assert _run(CursorProvider(linux_host, logger=logger)) == []
    assert any('Failed to read storage file' in m for m in logger.messages['info'])


@pytest.mark.skipif(sys.platform == 'win32' or os.geteuid() == 0, reason='needs POSIX permissions as non-root')
def test_unreadable_storage_yields_nothing(
    linux_host: HostEnvironment,
    write_storage: StorageWriter,
    menubar_storage: Callable[..., dict[str, Any]],
) -> None:
    path = write_storage('Cursor/User/globalStorage/storage.json', menubar_storage(('app', '/srv/app')))
    path.chmod(0)
    try:
        assert _run(CursorProvider(linux_host)) == []
    finally:
        path.chmod(0o644)


def test_unexpected_failure_is_contained(
    linux_host: HostEnvironment,
    write_storage: StorageWriter,
    menubar_storage: Callable[..., dict[str, Any]],
) -> None:
    class ExplodingParser:
        def parse(self, content: str) -> Any:
            raise RuntimeError('boom')

    write_storage('Cursor/User/globalStorage/storage.json', menubar_storage(('app', '/srv/app')))
    logger = RecordingLogger()
    provider = CursorProvider(linux_host, logger=logger)
    provider.parser = ExplodingParser()

    assert _run(provider) == []
    assert len(logger.messages['error']) == 1
    assert 'boom' in logger.messages['error'][0]


def test_unknown_platform_yields_nothing(tmp_path: Path) -> None:
    host = HostEnvironment(home=str(tmp_path), platform='sunos5')

    assert _run(VSCodeProvider(host)) == []


def test_provider_reads_storage_whatever_its_file_name(
    linux_host: HostEnvironment, write_storage: StorageWriter, menubar_storage: Callable[..., dict[str, Any]]
) -> None:
    class StateFileProvider(ProjectProvider):
        id = 'statefile'
        layout = StorageLayout(ide_id='statefile', candidates={'linux': ('StateFile/User/state',)})

    write_storage('StateFile/User/state', menubar_storage(('app', '/srv/app')))

    assert _run(StateFileProvider(linux_host)) == [RecentProject(name='app', path='/srv/app', source='statefile')]


def test_inaccessible_candidate_does_not_hide_later_storage(
    linux_host: HostEnvironment,
    write_storage: StorageWriter,
    menubar_storage: Callable[..., dict[str, Any]],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    write_storage('VSCodium/User/globalStorage/storage.json', menubar_storage(('app', '/srv/app')))
    real_is_file = Path.is_file

    def is_file(self: Path) -> bool:
        if '/Code/' in str(self):
            raise PermissionError(13, 'Permission denied', str(self))
        return real_is_file(self)

    monkeypatch.setattr(Path, 'is_file', is_file)
    logger = RecordingLogger()

    assert _run(VSCodeProvider(linux_host, logger=logger)) == [
        RecentProject(name='app', path='/srv/app', source='vscode')
    ]
    assert logger.messages['error'] == []
    assert any('Permission denied' in message for message in logger.messages['debug'])
