# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Read the package list out of a TOML lock file.

Both ``Cargo.lock`` and ``uv.lock`` store one ``[[package]]`` table per
resolved package. They differ in how the source is written::

    ┌────────────┬──────────────────────────────────────────────────────┐
    │ Lock file  │ source                                               │
    ├────────────┼──────────────────────────────────────────────────────┤
    │ Cargo.lock │ "registry+https://github.com/rust-lang/crates.io-…"  │
    │            │ (absent for workspace members and path deps)         │
    ├────────────┼──────────────────────────────────────────────────────┤
    │ uv.lock    │ { registry = "https://pypi.org/simple" }             │
    │            │ { editable = "." } / { virtual = "." } for members   │
    └────────────┴──────────────────────────────────────────────────────┘

Workspace members come back with ``source=None``; they are the project
being audited, not a dependency.

Usage::

    from licensehound.lockfile import parse_lockfile

    for record in parse_lockfile(Path('Cargo.lock')):
        print(record.name, record.version, record.source)
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Final

from licensehound._types import PackageRecord
from licensehound.errors import LockFileError
from licensehound.logging import get_logger

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

__all__ = [
    'parse_lockfile',
    'parse_lockfile_text',
]

logger = get_logger(__name__)

#: uv.lock source keys that point outside the workspace, by priority.
_EXTERNAL_SOURCE_KEYS: Final[tuple[str, ...]] = ('registry', 'git', 'url', 'path', 'directory')


def _source_locator(raw: object) -> str | None:
    if isinstance(raw, str):
        return raw or None
    if isinstance(raw, dict):
        for key in _EXTERNAL_SOURCE_KEYS:
            value = raw.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def parse_lockfile_text(text: str) -> list[PackageRecord]:
    """Parse lock file contents into records, preserving file order.

    Raises:
        LockFileError: If *text* is not valid TOML.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = f'invalid lock file: {exc}'
        raise LockFileError(msg) from exc

    packages: list[dict[str, Any]] = data.get('package', [])
    records: list[PackageRecord] = []
    for pkg_raw in packages:
        if not isinstance(pkg_raw, dict):
            continue
        name = pkg_raw.get('name', '')
        if not name:
            continue
        records.append(
            PackageRecord(
                name=name,
                version=str(pkg_raw.get('version', '')),
                source=_source_locator(pkg_raw.get('source')),
            )
        )
    return records


def parse_lockfile(lock_path: Path) -> list[PackageRecord]:
    """Parse a ``Cargo.lock`` or ``uv.lock`` file.

    Args:
        lock_path: Path to the lock file.

    Returns:
        One :class:`PackageRecord` per ``[[package]]`` table, in file
        order.

    Raises:
        LockFileError: If the file cannot be read or parsed.
    """
    try:
        text = lock_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        msg = f'cannot read lock file {lock_path}: {exc}'
        raise LockFileError(msg) from exc

    records = parse_lockfile_text(text)
    logger.debug(
        'parsed_lockfile',
        path=str(lock_path),
        total=len(records),
        without_source=sum(1 for r in records if r.source is None),
    )
    return records
