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

"""License provenance resolution.

Each probe answers "does this source have the license document?" with
a :class:`~licensehound._types.RecoveredLicense` or ``None``:

- :func:`probe_package_tree`: conventional file names in the
  package's source directory.
- :func:`probe_license_api`: GitHub's repository license API,
  cross-checked against the declared license.
- :func:`probe_raw_repo`: guessed file names fetched raw from the
  GitHub repository.

:class:`ProvenanceResolver` runs them in that order and stops at the
first answer.

Usage::

    from licensehound.provenance import ProvenanceResolver

    with http_client(credentials) as client:
        found = ProvenanceResolver(client).resolve(package, LicenseId.MIT)
    if found is not None:
        print(found.source.kind, found.source.locator)
"""

from licensehound.provenance._github import GitHubRepo, parse_github_repo
from licensehound.provenance._github_api import (
    LicenseDocument,
    decode_content,
    probe_license_api,
)
from licensehound.provenance._github_raw import probe_raw_repo
from licensehound.provenance._local import probe_package_tree
from licensehound.provenance._resolver import ProvenanceResolver

__all__ = [
    'GitHubRepo',
    'LicenseDocument',
    'ProvenanceResolver',
    'decode_content',
    'parse_github_repo',
    'probe_license_api',
    'probe_package_tree',
    'probe_raw_repo',
]
