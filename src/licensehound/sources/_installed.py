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

"""Package sources taken from the running Python environment.

Useful for auditing a ``uv.lock`` after ``uv sync``: every locked
package is installed, and its ``.dist-info`` directory carries both the
core metadata and (since PEP 639) the license files.

Metadata fields used::

    License-Expression   → declared license (preferred)
    License              → declared license (legacy)
    Classifier           → "License :: ..." as a last resort
    Home-page            → homepage
    Project-URL          → homepage / repository / documentation
"""

from __future__ import annotations

import importlib.metadata
from collections.abc import Callable
from pathlib import Path

from licensehound._types import PackageMetadata, PackageRecord, PackageSource
from licensehound.errors import SourceUnavailable
from licensehound.logging import get_logger
from licensehound.sources._manifest import clean_license, metadata_from_urls

log = get_logger('licensehound.sources.installed')


def _dist_info_dir(dist: importlib.metadata.Distribution) -> Path | None:
    for file in dist.files or ():
        if file.name == 'METADATA' and file.parent.name.endswith('.dist-info'):
            return Path(str(dist.locate_file(file))).parent
    return None


def _declared_license(meta: importlib.metadata.PackageMetadata) -> str | None:
    declared = clean_license(meta.get('License-Expression')) or clean_license(meta.get('License'))
    if declared is not None:
        return declared
    for classifier in meta.get_all('Classifier') or ():
        if classifier.startswith('License ::'):
            return classifier
    return None


def metadata_from_distribution(dist: importlib.metadata.Distribution) -> PackageMetadata:
    """Extract the license and links from a distribution's core metadata."""
    meta = dist.metadata
    pairs: list[tuple[str, str]] = []
    home_page = meta.get('Home-page')
    if home_page:
        pairs.append(('Homepage', home_page))
    for entry in meta.get_all('Project-URL') or ():
        label, sep, url = entry.partition(',')
        if sep:
            pairs.append((label, url))
    return metadata_from_urls(pairs, declared_license=_declared_license(meta))


class InstalledDistributionProvider:
    """Locate packages among the installed Python distributions.

    Args:
        lookup: Distribution finder; defaults to
            :func:`importlib.metadata.distribution`.
    """

    def __init__(
        self,
        lookup: Callable[[str], importlib.metadata.Distribution] = importlib.metadata.distribution,
    ) -> None:
        self._lookup = lookup

    def fetch(self, record: PackageRecord) -> PackageSource:
        """Return the installed distribution matching *record*.

        Raises:
            SourceUnavailable: If the distribution is not installed, is
                installed at another version, or has no ``.dist-info``.
        """
        try:
            dist = self._lookup(record.name)
        except importlib.metadata.PackageNotFoundError as exc:
            raise SourceUnavailable(f'{record.name} is not installed') from exc

        if dist.version != record.version:
            raise SourceUnavailable(f'{record.name} {record.version} is not installed (found {dist.version})')

        dist_info = _dist_info_dir(dist)
        if dist_info is None:
            raise SourceUnavailable(f'{record.name} {record.version} has no .dist-info directory')

        licenses_dir = dist_info / 'licenses'
        source_dir = licenses_dir if licenses_dir.is_dir() else dist_info
        log.debug('distribution_found', package=record.name, path=str(source_dir))
        return PackageSource(
            name=record.name,
            version=record.version,
            source_dir=source_dir,
            manifest_path=dist_info / 'METADATA',
            metadata=metadata_from_distribution(dist),
        )
