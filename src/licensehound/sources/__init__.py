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

r"""Locate the source tree and manifest metadata of locked packages.

The :class:`PackageSourceProvider` protocol lets the report assembler
stay ignorant of where sources live. Built-in providers:

- :class:`VendorDirectoryProvider`: unpacked sources under a vendor
  directory (``cargo vendor``, npm/pip source mirrors).
- :class:`InstalledDistributionProvider`: distributions installed in
  the running Python environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from licensehound._types import PackageRecord, PackageSource
from licensehound.sources._installed import InstalledDistributionProvider, metadata_from_distribution
from licensehound.sources._manifest import clean_license, metadata_from_urls, read_manifest_metadata
from licensehound.sources._vendor import VendorDirectoryProvider

__all__ = [
    'InstalledDistributionProvider',
    'PackageSourceProvider',
    'VendorDirectoryProvider',
    'clean_license',
    'make_provider',
    'metadata_from_distribution',
    'metadata_from_urls',
    'read_manifest_metadata',
]


@runtime_checkable
class PackageSourceProvider(Protocol):
    """Protocol for anything that can locate a package's source."""

    def fetch(self, record: PackageRecord) -> PackageSource:
        """Return the located source of *record*.

        Raises:
            SourceUnavailable: If the source cannot be located.
        """
        ...


def make_provider(kind: str, *, vendor_dir: Path) -> PackageSourceProvider:
    """Build the provider named *kind* (``"vendor"`` or ``"installed"``).

    Raises:
        ValueError: For an unknown provider name.
    """
    if kind == 'vendor':
        return VendorDirectoryProvider(vendor_dir)
    if kind == 'installed':
        return InstalledDistributionProvider()
    msg = f'unknown package source provider {kind!r}'
    raise ValueError(msg)
