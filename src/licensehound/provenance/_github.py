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

"""GitHub repository URL parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

#: Only plain repository URLs are recognized; deeper paths are not.
_GITHUB_REPO_RE: Final[re.Pattern[str]] = re.compile(
    r'^https://github\.com/(?P<owner>[^/]+)/(?P<repo>[^/.]+)(?:\.git)?/?$',
)


@dataclass(frozen=True)
class GitHubRepo:
    """An ``owner/repo`` pair on github.com."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f'{self.owner}/{self.repo}'


def parse_github_repo(url: str | None) -> GitHubRepo | None:
    """Extract the owner and repository from a GitHub repository URL.

    >>> parse_github_repo('https://github.com/serde-rs/serde.git')
    GitHubRepo(owner='serde-rs', repo='serde')
    >>> parse_github_repo('https://gitlab.com/foo/bar') is None
    True
    """
    if not url:
        return None
    match = _GITHUB_REPO_RE.match(url)
    if match is None:
        return None
    return GitHubRepo(owner=match.group('owner'), repo=match.group('repo'))
