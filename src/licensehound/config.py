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

"""Run configuration for license-hound.

Everything that varies between runs is collected into one frozen
:class:`HoundConfig` at startup. GitHub credentials come from the
environment and are read exactly once, here, then handed to
:func:`licensehound.net.http_client`.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from licensehound import __version__

__all__ = [
    'DEFAULT_API_BASE',
    'DEFAULT_BRANCH',
    'DEFAULT_LOCKFILES',
    'DEFAULT_RAW_BASE',
    'DEFAULT_TIMEOUT',
    'GITHUB_PASSWORD_ENV',
    'GITHUB_USERNAME_ENV',
    'PROVIDERS',
    'USER_AGENT',
    'GitHubCredentials',
    'HoundConfig',
    'find_default_lockfile',
]

GITHUB_USERNAME_ENV: Final[str] = 'LICENSE_HOUND_GITHUB_USERNAME'
GITHUB_PASSWORD_ENV: Final[str] = 'LICENSE_HOUND_GITHUB_PASSWORD'

USER_AGENT: Final[str] = f'license-hound/{__version__}'

DEFAULT_API_BASE: Final[str] = 'https://api.github.com'
DEFAULT_RAW_BASE: Final[str] = 'https://raw.githubusercontent.com'
DEFAULT_BRANCH: Final[str] = 'master'

#: Seconds; applies to connect, read, write and pool acquisition.
DEFAULT_TIMEOUT: Final[float] = 30.0

#: Tried in order when no lock file is given on the command line.
DEFAULT_LOCKFILES: Final[tuple[str, ...]] = ('Cargo.lock', 'uv.lock')

PROVIDERS: Final[tuple[str, ...]] = ('vendor', 'installed')


@dataclass(frozen=True)
class GitHubCredentials:
    """Optional HTTP basic-auth credentials for GitHub.

    Attributes:
        username: GitHub user name. Authentication is only used when
            this is set.
        password: Password or personal access token. May be empty.
    """

    username: str = ''
    password: str = field(default='', repr=False)

    @property
    def present(self) -> bool:
        return bool(self.username)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitHubCredentials:
        """Read credentials from ``LICENSE_HOUND_GITHUB_*`` env vars."""
        env = os.environ if environ is None else environ
        return cls(
            username=env.get(GITHUB_USERNAME_ENV, ''),
            password=env.get(GITHUB_PASSWORD_ENV, ''),
        )


@dataclass(frozen=True)
class HoundConfig:
    """Settings for one license-hound run.

    Attributes:
        lockfile: Lock file to audit.
        provider: How package sources are located (``"vendor"`` or
            ``"installed"``).
        vendor_dir: Root of vendored package sources (``vendor``
            provider only).
        credentials: GitHub credentials.
        api_base: GitHub REST API base URL.
        raw_base: GitHub raw-content base URL.
        branch: Branch raw license files are fetched from.
        timeout: HTTP timeout in seconds.
        user_agent: ``User-Agent`` header sent with every request.
    """

    lockfile: Path
    provider: str = 'vendor'
    vendor_dir: Path = Path('vendor')
    credentials: GitHubCredentials = field(default_factory=GitHubCredentials)
    api_base: str = DEFAULT_API_BASE
    raw_base: str = DEFAULT_RAW_BASE
    branch: str = DEFAULT_BRANCH
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        environ: Mapping[str, str] | None = None,
    ) -> HoundConfig:
        """Build a config from parsed CLI arguments and the environment."""
        lockfile = Path(args.lockfile) if args.lockfile else find_default_lockfile(Path.cwd())
        return cls(
            lockfile=lockfile,
            provider=args.provider,
            vendor_dir=Path(args.vendor_dir),
            credentials=GitHubCredentials.from_env(environ),
            branch=args.branch,
            timeout=args.timeout,
        )


def find_default_lockfile(root: Path) -> Path:
    """Return the first of :data:`DEFAULT_LOCKFILES` that exists in *root*.

    Falls back to ``root / 'Cargo.lock'`` so the error message names a
    concrete file.
    """
    for name in DEFAULT_LOCKFILES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return root / DEFAULT_LOCKFILES[0]
