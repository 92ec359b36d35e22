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

"""Try every license source for a package, in priority order.

Sources (tried in order)::

    ┌────────────────────┐  None  ┌────────────────────┐  None  ┌────────────────────┐
    │ package source tree│──────→│ GitHub license API │──────→│ GitHub raw files   │
    │ LICENSE, COPYING…  │       │ spdx_id must agree │       │ (branch, guesses)  │
    └────────────────────┘       └────────────────────┘       └────────────────────┘

The GitHub sources only apply when the manifest's ``repository`` field
is a plain ``https://github.com/<owner>/<repo>`` URL. The first source
that answers wins; later sources are never contacted.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx

from licensehound._types import PackageSource, RecoveredLicense
from licensehound.catalog import LicenseId
from licensehound.config import DEFAULT_API_BASE, DEFAULT_BRANCH, DEFAULT_RAW_BASE
from licensehound.logging import get_logger
from licensehound.provenance._github import parse_github_repo
from licensehound.provenance._github_api import probe_license_api
from licensehound.provenance._github_raw import probe_raw_repo
from licensehound.provenance._local import probe_package_tree

log = get_logger('licensehound.provenance.resolver')

Probe = Callable[[], 'RecoveredLicense | None']


class ProvenanceResolver:
    """Locate the license document for a package.

    Args:
        client: HTTP client shared by the GitHub probes.
        branch: Branch used by the raw-file probe.
        api_base: GitHub REST API base URL.
        raw_base: GitHub raw-content base URL.
    """

    def __init__(
        self,
        client: httpx.Client,
        *,
        branch: str = DEFAULT_BRANCH,
        api_base: str = DEFAULT_API_BASE,
        raw_base: str = DEFAULT_RAW_BASE,
    ) -> None:
        self._client = client
        self._branch = branch
        self._api_base = api_base
        self._raw_base = raw_base

    def probes(self, package: PackageSource, license_id: LicenseId) -> list[tuple[str, Probe]]:
        """Return the named probes that apply to *package*, in order."""
        probes: list[tuple[str, Probe]] = [
            ('package_tree', lambda: probe_package_tree(package.source_dir, license_id)),
        ]
        repo = parse_github_repo(package.metadata.repository)
        if repo is None:
            return probes
        probes.append((
            'github_api',
            lambda: probe_license_api(
                self._client,
                repo,
                package.name,
                license_id,
                api_base=self._api_base,
            ),
        ))
        probes.append((
            'github_repo',
            lambda: probe_raw_repo(
                self._client,
                repo,
                license_id,
                branch=self._branch,
                raw_base=self._raw_base,
            ),
        ))
        return probes

    def resolve(self, package: PackageSource, license_id: LicenseId) -> RecoveredLicense | None:
        """Return the first license document any probe finds, or ``None``."""
        for name, probe in self.probes(package, license_id):
            found = probe()
            if found is not None:
                log.debug('license_resolved', package=package.name, probe=name)
                return found
            log.debug('probe_no_match', package=package.name, probe=name)
        return None
