"""
Base configuration for ide-recent-projects.

Settings plus the helper functions that load them.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='RecentProjectsSettings')


class RecentProjectsSettings(pydantic_settings.BaseSettings):
    """Configuration for the discovery pipeline."""

    model_config = pydantic_settings.SettingsConfigDict(
        # No implicit .env: the CLI runs inside arbitrary project directories.
        # get_settings() passes _env_file when one is named explicitly.
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown keys in an explicit .env file
    )

    # Application metadata
    APP_NAME: str = 'ide-recent-projects'
    VERSION: str = '0.1.0'

    # Trailing directory names trimmed from project paths (IDEs often record a
    # project's .vscode or .git folder instead of the project itself)
    IGNORED_DIRS: tuple[str, ...] = ('.git', '.devcontainer', '.vscode')

    @pydantic.field_validator('IGNORED_DIRS')
    @classmethod
    def validate_ignored_dirs(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate ignored names are single, non-empty path segments."""
        for name in v:
            if not name or '/' in name or '\\' in name:
                raise ValueError(f'IGNORED_DIRS entries must be single directory names, got {name!r}')
        return v


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
