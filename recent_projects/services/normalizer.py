"""
Path normalization - URI resolution, ignored-suffix trimming, home abbreviation.

Everything here is pure string manipulation. Paths may come from any of the
supported platforms (or be opaque remote URIs), so nothing goes through the
local os.path flavor: both separators are handled explicitly.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from urllib.parse import unquote

from recent_projects.config.settings import settings
from recent_projects.schemas.models import NormalizedPath

__all__ = [
    'FILE_URI_PREFIX',
    'REMOTE_URI_PREFIXES',
    'PathNormalizer',
    'final_segment',
    'resolve_uri',
    'strip_drive_separator',
]

FILE_URI_PREFIX = 'file://'

# Remote workspaces are kept as opaque URIs; `code --folder-uri` understands them
REMOTE_URI_PREFIXES = ('vscode-remote://', 'vscode-vfs://')

_SEPARATORS = ('/', '\\')
_DRIVE_WITH_LEADING_SLASH = re.compile(r'^/[a-zA-Z]:')
_WINDOWS_ABSOLUTE = re.compile(r'^[a-zA-Z]:[\\/]')


def strip_drive_separator(path: str, platform: str) -> str:
    """
    Drop the leading slash URIs put in front of a Windows drive letter.

    Examples:
        >>> strip_drive_separator('/C:/Users/alice/app', 'win32')
        'C:/Users/alice/app'

        >>> strip_drive_separator('/C:/Users/alice/app', 'linux')
        '/C:/Users/alice/app'
    """
    if platform == 'win32' and _DRIVE_WITH_LEADING_SLASH.match(path):
        return path[1:]
    return path


def resolve_uri(uri: str, platform: str) -> str | None:
    """
    Resolve a storage URI string to a project path.

    Args:
        uri: URI or path as stored by the IDE (possibly percent-encoded)
        platform: Host platform identifier (sys.platform value)

    Returns:
        Local filesystem path, the untouched URI for remote workspaces,
        or None if the string is neither or is not valid UTF-8 once decoded.

    Examples:
        >>> resolve_uri('file:///Users/alice/my%20app', 'darwin')
        '/Users/alice/my app'

        >>> resolve_uri('vscode-remote://ssh-remote%2Bbox/home/alice/app', 'linux')
        'vscode-remote://ssh-remote+box/home/alice/app'
    """
    if not uri:
        return None

    try:
        decoded = unquote(uri, errors='strict')
    except UnicodeDecodeError:
        return None

    if decoded.startswith(FILE_URI_PREFIX):
        return strip_drive_separator(decoded[len(FILE_URI_PREFIX) :], platform) or None
    if decoded.startswith(REMOTE_URI_PREFIXES):
        return decoded
    if decoded.startswith('/') or _WINDOWS_ABSOLUTE.match(decoded):
        return decoded
    return None


def final_segment(path: str) -> str:
    """Last non-empty path segment, splitting on either separator."""
    segments = [segment for segment in re.split(r'[\\/]', path) if segment]
    return segments[-1] if segments else path


class PathNormalizer:
    """
    Canonicalizes project paths and builds their display form.

    normalize() is pure and total: inputs that match no special case pass
    through unchanged.
    """

    def __init__(self, home: str, ignored_dirs: Sequence[str] | None = None) -> None:
        """
        Initialize normalizer.

        Args:
            home: Home directory of the host, abbreviated to `~` in display names
            ignored_dirs: Trailing directory names to trim (default: settings.IGNORED_DIRS)
        """
        stripped_home = home.rstrip('/\\')
        self.home = stripped_home or home
        self.ignored_dirs = tuple(settings.IGNORED_DIRS if ignored_dirs is None else ignored_dirs)

    def normalize(self, raw_path: str) -> NormalizedPath:
        """
        Normalize a raw project path.

        Examples:
            >>> PathNormalizer('/Users/alice').normalize('/Users/alice/proj/.vscode')
            NormalizedPath(canonical_path='/Users/alice/proj', display_name='~/proj')
        """
        canonical_path = self.trim_ignored(raw_path)
        return NormalizedPath(canonical_path=canonical_path, display_name=self.abbreviate_home(canonical_path))

    def trim_ignored(self, path: str) -> str:
        """Strip trailing ignored directories (`/app/.vscode` -> `/app`), repeatedly."""
        trimmed = path
        while True:
            for name in self.ignored_dirs:
                if trimmed.endswith(tuple(sep + name for sep in _SEPARATORS)):
                    # Never trim a root-level ignored dir down to nothing
                    trimmed = trimmed[: -len(name) - 1] or trimmed[0]
                    break
            else:
                return trimmed

    def abbreviate_home(self, path: str) -> str:
        """Replace a leading home directory with `~` (only at a path boundary)."""
        if not self.home or self.home in _SEPARATORS:
            return path
        if path == self.home:
            return '~'
        if path.startswith(tuple(self.home + sep for sep in _SEPARATORS)):
            return '~' + path[len(self.home) :]
        return path
