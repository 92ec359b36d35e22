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

"""HTTP plumbing shared by the GitHub probers.

One :class:`httpx.Client` is built per run. It carries the fixed
``User-Agent`` and, when configured, basic-auth credentials. Requests
are never retried: a failed request means "this source has no answer".
"""

from __future__ import annotations

import httpx

from licensehound.config import (
    DEFAULT_TIMEOUT,
    GITHUB_PASSWORD_ENV,
    GITHUB_USERNAME_ENV,
    USER_AGENT,
    GitHubCredentials,
)
from licensehound.logging import get_logger

__all__ = [
    'credentials_hint',
    'describe_error',
    'http_client',
    'log_forbidden',
]

log = get_logger('licensehound.net')


def http_client(
    credentials: GitHubCredentials | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the HTTP client used for every GitHub request.

    Args:
        credentials: Optional basic-auth credentials.
        timeout: Request timeout in seconds.
        user_agent: Value of the ``User-Agent`` header.
        transport: Override the transport (tests pass an
            :class:`httpx.MockTransport`).

    Returns:
        An :class:`httpx.Client`. Use it as a context manager.
    """
    auth = None
    if credentials is not None and credentials.present:
        auth = httpx.BasicAuth(credentials.username, credentials.password)
    return httpx.Client(
        auth=auth,
        headers={'User-Agent': user_agent},
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
    )


def describe_error(resp: httpx.Response) -> str:
    """Render GitHub's ``{message, documentation_url}`` error body.

    Returns an empty string when the body is not a GitHub error.
    """
    try:
        data = resp.json()
    except ValueError:
        return ''
    if not isinstance(data, dict):
        return ''
    message = data.get('message')
    if not isinstance(message, str):
        return ''
    doc_url = data.get('documentation_url')
    if isinstance(doc_url, str) and doc_url:
        return f'{message} ({doc_url})'
    return message


def credentials_hint() -> str:
    """Command line showing how to authenticate against GitHub."""
    return f'{GITHUB_USERNAME_ENV}=... {GITHUB_PASSWORD_ENV}=... license-hound'


def log_forbidden(url: str, resp: httpx.Response) -> None:
    """Tell the operator GitHub refused *url* and how to fix it."""
    log.error(
        'github_forbidden',
        url=url,
        status=resp.status_code,
        message=describe_error(resp),
    )
    log.warning('github_auth_hint', hint=f'Try authenticating with your GitHub user: {credentials_hint()}')
