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

"""Find a license file inside the package's own source tree."""

from __future__ import annotations

from pathlib import Path

from licensehound._types import FromPackageTree, RecoveredLicense
from licensehound.catalog import LicenseId, candidate_filenames
from licensehound.logging import get_logger

log = get_logger('licensehound.provenance.local')


def probe_package_tree(source_dir: Path, license_id: LicenseId) -> RecoveredLicense | None:
    """Read the first conventional license file present in *source_dir*.

    Args:
        source_dir: Root of the package's source tree.
        license_id: The declared license; decides the suffix variants.

    Returns:
        The file's text tagged :class:`FromPackageTree`, or ``None`` if
        no candidate file exists or none can be read.
    """
    for name in candidate_filenames(license_id):
        path = source_dir / name
        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError):
            continue
        log.debug('license_file_found', path=str(path))
        return RecoveredLicense(source=FromPackageTree(name), text=text)
    return None
