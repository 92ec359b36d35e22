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

"""Guess license file paths in a GitHub repository and fetch them raw.

Used when the license API has no (usable) answer. Candidate names are
tried in catalog order against
``raw.githubusercontent.com/{owner}/{repo}/{branch}/{name}``.
"""

from __future__ import annotations

import httpx

from licensehound._types import FromHostedRepo, RecoveredLicense
from licensehound.catalog import LicenseId, candidate_filenames
from licensehound.config import DEFAULT_BRANCH, DEFAULT_RAW_BASE
from licensehound.logging import get_logger
from licensehound.net import log_forbidden
from licensehound.provenance._github import GitHubRepo

log = get_logger('licensehound.provenance.github_raw')


def probe_raw_repo(
    client: httpx.Client,
    repo: GitHubRepo,
    license_id: LicenseId,
    *,
    branch: str = DEFAULT_BRANCH,
    raw_base: str = DEFAULT_RAW_BASE,
) -> RecoveredLicense | None:
    """Fetch the first candidate license file that exists in *repo*.

    A 403 aborts the whole probe: GitHub applies rate limits per
    client, so the remaining candidates would be refused as well.

    Args:
        client: HTTP client (see :func:`licensehound.net.http_client`).
        repo: Repository to look in.
        license_id: License the package declares.
        branch: Branch to read from.
        raw_base: Raw-content base URL.

    Returns:
        The file text tagged :class:`FromHostedRepo`, or ``None``.
    """
    for name in candidate_filenames(license_id):
        url = f'{raw_base}/{repo.owner}/{repo.repo}/{branch}/{name}'
        try:
            resp = client.get(url)
        except httpx.HTTPError as exc:
            log.debug('raw_request_failed', url=url, error=str(exc))
            continue

        if resp.status_code == httpx.codes.FORBIDDEN:
            log_forbidden(url, resp)
            return None

        if resp.is_success:
            log.debug('raw_license_found', url=url)
            return RecoveredLicense(source=FromHostedRepo(url), text=resp.text)

    return None
