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

r"""Read license and link fields from package manifests per ecosystem.

Supports:
    - **Python**: ``pyproject.toml`` (``project.license`` as a string
      or ``{text = ...}``, license classifiers, ``[project.urls]``).
    - **JavaScript/TypeScript**: ``package.json`` (``license``,
      ``homepage``, ``repository``).
    - **Rust**: ``Cargo.toml`` (``package.license``, ``homepage``,
      ``repository``, ``documentation``).

Usage::

    from licensehound.sources import read_manifest_metadata

    found = read_manifest_metadata(Path('vendor/serde-1.0.197'))
    if found is not None:
        manifest_path, metadata = found
        # metadata.license    == "MIT OR Apache-2.0"
        # metadata.repository == "https://github.com/serde-rs/serde"
"""

from __future__ import annotations

import json
import re
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, Final

from licensehound._types import PackageMetadata

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

__all__ = [
    'clean_license',
    'metadata_from_urls',
    'read_manifest_metadata',
]

# Registry placeholders that mean "no license given".
_IGNORED_LICENSE_VALUES: Final[frozenset[str]] = frozenset({'unknown', 'none', '', 'other'})

# Project URL labels, normalized (lowercase, no punctuation/whitespace).
_URL_LABELS: Final[dict[str, str]] = {
    'homepage': 'homepage',
    'home': 'homepage',
    'repository': 'repository',
    'source': 'repository',
    'sourcecode': 'repository',
    'code': 'repository',
    'github': 'repository',
    'documentation': 'documentation',
    'docs': 'documentation',
}

_LABEL_NORMALIZE_RE: Final[re.Pattern[str]] = re.compile(r'[^a-z0-9]')


def _str_or_none(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def clean_license(value: object) -> str | None:
    """Return the declared license string, or ``None`` for placeholders."""
    text = _str_or_none(value)
    if text is None or text.lower() in _IGNORED_LICENSE_VALUES:
        return None
    return text


def metadata_from_urls(
    urls: Iterable[tuple[str, str]],
    *,
    declared_license: str | None = None,
) -> PackageMetadata:
    """Build metadata from ``(label, url)`` pairs.

    Labels are matched loosely (``Source Code`` and ``source-code`` are
    the same label); the first URL for each field wins.
    """
    found: dict[str, str] = {}
    for label, url in urls:
        field_name = _URL_LABELS.get(_LABEL_NORMALIZE_RE.sub('', label.lower()))
        url = url.strip()
        if field_name and url and field_name not in found:
            found[field_name] = url
    return PackageMetadata(license=declared_license, **found)


def _load_toml(path: Path) -> dict[str, Any] | None:
    try:
        with path.open('rb') as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return None


def _read_pyproject(path: Path) -> PackageMetadata | None:
    data = _load_toml(path)
    if data is None:
        return None
    project: dict[str, Any] = data.get('project', {})
    if not isinstance(project, dict):
        return None

    lic = project.get('license')
    license_value = clean_license(lic)
    if license_value is None and isinstance(lic, dict):
        license_value = clean_license(lic.get('text'))
    if license_value is None:
        classifiers = project.get('classifiers', [])
        if isinstance(classifiers, list):
            license_value = next(
                (c for c in classifiers if isinstance(c, str) and c.startswith('License ::')),
                None,
            )

    urls = project.get('urls', {})
    pairs = [(k, v) for k, v in urls.items() if isinstance(v, str)] if isinstance(urls, dict) else []
    return metadata_from_urls(pairs, declared_license=license_value)


def _normalize_repository_url(url: str) -> str:
    """Turn npm-style repository specs into plain https URLs."""
    if url.startswith('git+'):
        url = url[len('git+') :]
    if url.startswith('github:'):
        url = f'https://github.com/{url[len("github:") :]}'
    return url


def _read_package_json(path: Path) -> PackageMetadata | None:
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None

    lic = data.get('license')
    license_value = clean_license(lic)
    if license_value is None and isinstance(lic, dict):
        license_value = clean_license(lic.get('type'))

    repo = data.get('repository')
    if isinstance(repo, dict):
        repo = repo.get('url')
    repository = _str_or_none(repo)

    return PackageMetadata(
        license=license_value,
        homepage=_str_or_none(data.get('homepage')),
        repository=_normalize_repository_url(repository) if repository else None,
    )


def _read_cargo_toml(path: Path) -> PackageMetadata | None:
    data = _load_toml(path)
    if data is None:
        return None
    package: dict[str, Any] = data.get('package', {})
    if not isinstance(package, dict):
        return None
    # ``license.workspace = true`` and friends are tables, not values.
    return PackageMetadata(
        license=clean_license(package.get('license')),
        homepage=_str_or_none(package.get('homepage')),
        repository=_str_or_none(package.get('repository')),
        documentation=_str_or_none(package.get('documentation')),
    )


# ── Ordered manifest readers ─────────────────────────────────────────

_READERS: list[tuple[str, Callable[[Path], PackageMetadata | None]]] = [
    ('pyproject.toml', _read_pyproject),
    ('package.json', _read_package_json),
    ('Cargo.toml', _read_cargo_toml),
]


def read_manifest_metadata(pkg_dir: Path) -> tuple[Path, PackageMetadata] | None:
    """Read the first parseable manifest in *pkg_dir*.

    Args:
        pkg_dir: Package root directory.

    Returns:
        ``(manifest_path, metadata)``, or ``None`` if the directory has
        no manifest license-hound can parse.
    """
    for file_name, reader in _READERS:
        manifest = pkg_dir / file_name
        if not manifest.is_file():
            continue
        metadata = reader(manifest)
        if metadata is not None:
            return manifest, metadata
    return None
