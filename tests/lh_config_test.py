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

"""Tests for licensehound.config and licensehound.net."""

from __future__ import annotations

import base64
from pathlib import Path

import httpx
from licensehound.cli import build_parser
from licensehound.config import (
    DEFAULT_BRANCH,
    GITHUB_PASSWORD_ENV,
    GITHUB_USERNAME_ENV,
    USER_AGENT,
    GitHubCredentials,
    HoundConfig,
    find_default_lockfile,
)
from licensehound.net import credentials_hint, describe_error, http_client, log_forbidden


class TestGitHubCredentials:
    """Tests for GitHubCredentials."""

    def test_absent(self) -> None:
        """No environment means no credentials."""
        creds = GitHubCredentials.from_env({})
        assert not creds.present

    def test_from_env(self) -> None:
        """Both variables are read."""
        creds = GitHubCredentials.from_env({GITHUB_USERNAME_ENV: 'octocat', GITHUB_PASSWORD_ENV: 'hunter22'})
        assert creds.present
        assert creds.username == 'octocat'
        assert creds.password == 'hunter22'

    def test_password_not_in_repr(self) -> None:
        """The password never shows up in reprs."""
        assert 'hunter22' not in repr(GitHubCredentials('octocat', 'hunter22'))

    def test_password_alone_is_not_enough(self) -> None:
        """Auth needs a username."""
        assert not GitHubCredentials.from_env({GITHUB_PASSWORD_ENV: 'hunter22'}).present


class TestHoundConfig:
    """Tests for HoundConfig.from_args()."""

    def test_defaults(self, tmp_path: Path) -> None:
        """Unspecified options take their defaults."""
        args = build_parser().parse_args([str(tmp_path / 'Cargo.lock')])
        config = HoundConfig.from_args(args, environ={})
        assert config.lockfile == tmp_path / 'Cargo.lock'
        assert config.provider == 'vendor'
        assert config.vendor_dir == Path('vendor')
        assert config.branch == DEFAULT_BRANCH
        assert config.user_agent == USER_AGENT
        assert not config.credentials.present

    def test_options(self, tmp_path: Path) -> None:
        """CLI options and credentials flow into the config."""
        args = build_parser().parse_args([
            str(tmp_path / 'uv.lock'),
            '--provider',
            'installed',
            '--branch',
            'main',
            '--timeout',
            '5',
        ])
        config = HoundConfig.from_args(args, environ={GITHUB_USERNAME_ENV: 'octocat'})
        assert config.provider == 'installed'
        assert config.branch == 'main'
        assert config.timeout == 5.0
        assert config.credentials.username == 'octocat'


class TestFindDefaultLockfile:
    """Tests for find_default_lockfile()."""

    def test_cargo_first(self, tmp_path: Path) -> None:
        """Cargo.lock wins when both exist."""
        (tmp_path / 'Cargo.lock').write_text('', encoding='utf-8')
        (tmp_path / 'uv.lock').write_text('', encoding='utf-8')
        assert find_default_lockfile(tmp_path) == tmp_path / 'Cargo.lock'

    def test_uv(self, tmp_path: Path) -> None:
        """uv.lock is found on its own."""
        (tmp_path / 'uv.lock').write_text('', encoding='utf-8')
        assert find_default_lockfile(tmp_path) == tmp_path / 'uv.lock'

    def test_fallback(self, tmp_path: Path) -> None:
        """With neither present, Cargo.lock is named."""
        assert find_default_lockfile(tmp_path) == tmp_path / 'Cargo.lock'


class TestHttpClient:
    """Tests for http_client()."""

    def _capture(self, credentials: GitHubCredentials | None) -> httpx.Request:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        with http_client(credentials, transport=httpx.MockTransport(handler)) as client:
            client.get('https://api.github.com/repos/a/b/license')
        return seen[0]

    def test_user_agent(self) -> None:
        """Every request carries the license-hound User-Agent."""
        assert self._capture(None).headers['User-Agent'] == USER_AGENT

    def test_basic_auth(self) -> None:
        """Credentials become a basic auth header."""
        request = self._capture(GitHubCredentials('octocat', 'hunter22'))
        expected = base64.b64encode(b'octocat:hunter22').decode('ascii')
        assert request.headers['Authorization'] == f'Basic {expected}'

    def test_no_auth_without_username(self) -> None:
        """Absent credentials send no Authorization header."""
        assert 'Authorization' not in self._capture(GitHubCredentials()).headers


class TestDescribeError:
    """Tests for describe_error()."""

    def test_message_and_docs(self) -> None:
        """Message and documentation URL are combined."""
        resp = httpx.Response(
            403,
            json={'message': 'API rate limit exceeded', 'documentation_url': 'https://docs.github.com/rate'},
        )
        assert describe_error(resp) == 'API rate limit exceeded (https://docs.github.com/rate)'

    def test_message_only(self) -> None:
        """A bare message is returned as-is."""
        assert describe_error(httpx.Response(404, json={'message': 'Not Found'})) == 'Not Found'

    def test_not_json(self) -> None:
        """Non-JSON bodies describe as empty."""
        assert describe_error(httpx.Response(502, text='<html>Bad Gateway</html>')) == ''

    def test_unexpected_json(self) -> None:
        """JSON without a message describes as empty."""
        assert describe_error(httpx.Response(500, json=['x'])) == ''


class TestForbidden:
    """Tests for the 403 diagnostics."""

    def test_hint_names_env_vars(self) -> None:
        """The hint shows both credential variables."""
        hint = credentials_hint()
        assert GITHUB_USERNAME_ENV in hint
        assert GITHUB_PASSWORD_ENV in hint

    def test_log_forbidden(self) -> None:
        """Logging a refusal does not raise."""
        log_forbidden('https://api.github.com/x', httpx.Response(403, json={'message': 'Forbidden'}))
