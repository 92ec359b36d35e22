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

"""Fetch a repository's license through GitHub's license API.

``GET /repos/{owner}/{repo}/license`` returns the file GitHub detected
as the repository license together with GitHub's own classification::

    {
      "download_url": "https://raw.githubusercontent.com/.../LICENSE",
      "content": "VGhlIE1JVCBMaWNlbnNl...\\n...",
      "encoding": "base64",
      "license": {"spdx_id": "MIT", ...}
    }

GitHub's answer is only used when its ``spdx_id`` agrees with the
license the package declares. A missing or null ``spdx_id`` counts as a
disagreement and is reported like one. Every failure (transport error, bad
status, malformed body, disagreement) yields ``None`` so the resolver
can move on to the next source.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any, Final

import httpx

from licensehound._types import FromHostedApi, RecoveredLicense
from licensehound.catalog import LicenseId
from licensehound.config import DEFAULT_API_BASE
from licensehound.logging import get_logger
from licensehound.net import describe_error, log_forbidden
from licensehound.provenance._github import GitHubRepo

log = get_logger('licensehound.provenance.github_api')

#: The only content encoding GitHub uses for this endpoint.
BASE64_ENCODING: Final[str] = 'base64'


@dataclass(frozen=True)
class LicenseDocument:
    """The fields license-hound needs from a license API response."""

    download_url: str
    content: str
    encoding: str
    spdx_id: str | None

    @classmethod
    def from_json(cls, data: Any) -> LicenseDocument:  # noqa: ANN401
        """Build from a decoded JSON body.

        Raises:
            ValueError: If a required field is missing or not a string.
                A missing or null ``license.spdx_id`` is allowed and
                kept as ``None``.
        """
        if not isinstance(data, dict):
            msg = 'license response is not a JSON object'
            raise ValueError(msg)
        fields = {key: data.get(key) for key in ('download_url', 'content', 'encoding')}
        for key, value in fields.items():
            if not isinstance(value, str):
                msg = f'license response field {key!r} missing or not a string'
                raise ValueError(msg)
        license_info = data.get('license')
        spdx_id = license_info.get('spdx_id') if isinstance(license_info, dict) else None
        if spdx_id is not None and not isinstance(spdx_id, str):
            msg = 'license response field license.spdx_id is not a string'
            raise ValueError(msg)
        return cls(spdx_id=spdx_id, **fields)  # type: ignore[arg-type]

    def decoded(self) -> str | None:
        return decode_content(self.content, self.encoding)


def decode_content(content: str, encoding: str) -> str | None:
    """Decode API file content into text.

    Only ``base64`` is supported. GitHub wraps the payload at 60
    characters like MIME does; the line breaks are ignored.

    Returns:
        The UTF-8 text, or ``None`` for an unsupported encoding or
        undecodable content.
    """
    if encoding != BASE64_ENCODING:
        log.debug('unsupported_content_encoding', encoding=encoding)
        return None
    try:
        return base64.b64decode(''.join(content.split()), validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError):
        log.debug('content_decode_failed', encoding=encoding)
        return None


def probe_license_api(
    client: httpx.Client,
    repo: GitHubRepo,
    package_name: str,
    license_id: LicenseId,
    *,
    api_base: str = DEFAULT_API_BASE,
) -> RecoveredLicense | None:
    """Ask GitHub which license file *repo* has and fetch it.

    Args:
        client: HTTP client (see :func:`licensehound.net.http_client`).
        repo: Repository to query.
        package_name: Package being audited, for diagnostics.
        license_id: License the package declares.
        api_base: GitHub REST API base URL.

    Returns:
        The decoded license text tagged :class:`FromHostedApi`, or
        ``None``.
    """
    url = f'{api_base}/repos/{repo.owner}/{repo.repo}/license'
    try:
        resp = client.get(url)
    except httpx.HTTPError as exc:
        log.debug('license_api_request_failed', url=url, error=str(exc))
        return None

    if resp.status_code == httpx.codes.FORBIDDEN:
        log_forbidden(url, resp)
        return None

    if resp.status_code == httpx.codes.NOT_FOUND:
        return None

    if not resp.is_success:
        log.error(
            'license_api_unexpected_status',
            url=url,
            status=resp.status_code,
            message=describe_error(resp),
        )
        return None

    try:
        document = LicenseDocument.from_json(resp.json())
    except ValueError as exc:
        log.debug('license_api_malformed_response', url=url, error=str(exc))
        return None

    if document.spdx_id != license_id.spdx_id:
        log.warning(
            'license_mismatch',
            package=package_name,
            repo=repo.full_name,
            github_license=document.spdx_id,
            declared_license=license_id.spdx_id,
        )
        return None

    text = document.decoded()
    if text is None:
        return None

    return RecoveredLicense(source=FromHostedApi(document.download_url), text=text)
