#!/usr/bin/env -S uv run
"""
Inspect what the parser extracts from a storage.json file.

Useful when an IDE release changes its storage layout: shows which strategy
matched, how many entries were discarded, and what each project normalizes to.

Usage:
    uv run scripts/inspect_storage.py PATH [--platform win32]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from recent_projects.schemas.models import HostEnvironment
from recent_projects.services.normalizer import PathNormalizer
from recent_projects.services.parser import VSCodeStorageParser


def inspect_storage(storage_file: Path, platform: str) -> int:
    """Print the parse result for one storage file. Returns a process exit code."""
    if not storage_file.is_file():
        print(f'Not a file: {storage_file}')
        return 1

    host = HostEnvironment.from_system()
    result = VSCodeStorageParser(platform).parse(storage_file.read_text(encoding='utf-8-sig'))
    normalizer = PathNormalizer(host.home)

    print('=' * 80)
    print(f'Storage file: {storage_file}')
    print(f'Strategy:     {result.strategy}')
    print(f'Projects:     {len(result.projects)}')
    print(f'Skipped:      {result.skipped}')
    print('=' * 80)

    for raw in result.projects:
        normalized = normalizer.normalize(raw.raw_path)
        print(f'{raw.name}')
        print(f'  raw:       {raw.raw_path}')
        if normalized.canonical_path != raw.raw_path:
            print(f'  canonical: {normalized.canonical_path}')
        print(f'  display:   {normalized.display_name}')

    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('path', type=Path, help='storage.json to inspect')
    parser.add_argument('--platform', default=sys.platform, help='Platform rules to apply (default: this host)')
    args = parser.parse_args()
    sys.exit(inspect_storage(args.path, args.platform))


if __name__ == '__main__':
    main()
