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

"""Package sources unpacked under a vendor directory.

Layouts produced by ``cargo vendor --versioned-dirs`` (``serde-1.0.197``)
and plain ``cargo vendor`` / hand-made mirrors (``serde``) are both
accepted; the versioned directory is preferred.
"""

from __future__ import annotations

from pathlib import Path

from licensehound._types import PackageRecord, PackageSource
from licensehound.errors import SourceUnavailable
from licensehound.logging import get_logger
from licensehound.sources._manifest import read_manifest_metadata

log = get_logger('licensehound.sources.vendor')


class VendorDirectoryProvider:
    """Locate package sources under *root*.

    Args:
        root: Directory holding one subdirectory per package.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def candidate_dirs(self, record: PackageRecord) -> list[Path]:
        return [
            self.root / f'{record.name}-{record.version}',
            self.root / record.name,
        ]

    def fetch(self, record: PackageRecord) -> PackageSource:
        """Return the vendored source of *record*.

        Raises:
            SourceUnavailable: If no candidate directory holds a
                readable manifest.
        """
        for pkg_dir in self.candidate_dirs(record):
            if not pkg_dir.is_dir():
                continue
            found = read_manifest_metadata(pkg_dir)
            if found is None:
                log.debug('manifest_not_found', path=str(pkg_dir))
                continue
            manifest_path, metadata = found
            return PackageSource(
                name=record.name,
                version=record.version,
                source_dir=pkg_dir,
                manifest_path=manifest_path,
                metadata=metadata,
            )
        raise SourceUnavailable(self.root / f'{record.name}-{record.version}')
