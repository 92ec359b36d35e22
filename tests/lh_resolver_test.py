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

"""Tests for the local prober and ProvenanceResolver."""

from __future__ import annotations

import base64
from pathlib import Path

import httpx
from licensehound._types import (
    FromHostedApi,
    FromHostedRepo,
    FromPackageTree,
    PackageMetadata,
    PackageSource,
)
from licensehound.catalog import LicenseId
from licensehound.net import http_client
from licensehound.provenance import ProvenanceResolver, probe_package_tree

GITHUB = 'https://github.com/owner/widget'


def _package(source_dir: Path, repository: str | None = GITHUB) -> PackageSource:
    return PackageSource(
        name='widget',
        version='1.0.0',
        source_dir=source_dir,
        manifest_path=source_dir / 'Cargo.toml',
        metadata=PackageMetadata(license='MIT', repository=repository),
    )


class _Transport:
    """Routes requests to canned responses and records them."""

    def __init__(self, routes: dict[str, httpx.Response] | None = None) -> None:
        self.routes = routes or {}
        self.urls: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.urls.append(url)
        return self.routes.get(url, httpx.Response(404))


class TestProbePackageTree:
    """Tests for probe_package_tree()."""

    def test_suffixed_file_preferred(self, tmp_path: Path) -> None:
        """LICENSE-MIT beats LICENSE for MIT packages."""
        (tmp_path / 'LICENSE').write_text('generic', encoding='utf-8')
        (tmp_path / 'LICENSE-MIT').write_text('mit text', encoding='utf-8')
        found = probe_package_tree(tmp_path, LicenseId.MIT)
        assert found is not None
        assert found.source == FromPackageTree('LICENSE-MIT')
        assert found.text == 'mit text'

    def test_copying(self, tmp_path: Path) -> None:
        """COPYING is found when LICENSE is absent."""
        (tmp_path / 'COPYING.txt').write_text('copying', encoding='utf-8')
        found = probe_package_tree(tmp_path, LicenseId.BSD_3_CLAUSE)
        assert found is not None
        assert found.source.locator == 'COPYING.txt'

    def test_suffix_ignored_for_other_licenses(self, tmp_path: Path) -> None:
        """LICENSE-MIT is not a candidate for MPL-2.0."""
        (tmp_path / 'LICENSE-MIT').write_text('mit text', encoding='utf-8')
        assert probe_package_tree(tmp_path, LicenseId.MPL_2_0) is None

    def test_directory_is_skipped(self, tmp_path: Path) -> None:
        """A directory named LICENSE is not a license file."""
        (tmp_path / 'LICENSE').mkdir()
        (tmp_path / 'LICENSE.txt').write_text('text', encoding='utf-8')
        found = probe_package_tree(tmp_path, LicenseId.MPL_2_0)
        assert found is not None
        assert found.source == FromPackageTree('LICENSE.txt')

    def test_undecodable_file_is_skipped(self, tmp_path: Path) -> None:
        """Binary files are passed over."""
        (tmp_path / 'LICENSE').write_bytes(b'\xff\xfe\x00bad')
        assert probe_package_tree(tmp_path, LicenseId.MPL_2_0) is None

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing source directory yields None."""
        assert probe_package_tree(tmp_path / 'nope', LicenseId.MIT) is None


class TestProvenanceResolver:
    """Tests for ProvenanceResolver."""

    def test_local_file_wins_without_network(self, tmp_path: Path) -> None:
        """A license in the source tree means zero HTTP requests."""
        (tmp_path / 'LICENSE').write_text('Copyright 2020 Owner', encoding='utf-8')
        transport = _Transport()
        with http_client(transport=httpx.MockTransport(transport)) as client:
            found = ProvenanceResolver(client).resolve(_package(tmp_path), LicenseId.MIT)
        assert found is not None
        assert isinstance(found.source, FromPackageTree)
        assert transport.urls == []

    def test_non_github_repository_only_probes_locally(self, tmp_path: Path) -> None:
        """Without a GitHub repository only the package tree is probed."""
        transport = _Transport()
        with http_client(transport=httpx.MockTransport(transport)) as client:
            resolver = ProvenanceResolver(client)
            package = _package(tmp_path, repository='https://gitlab.com/owner/widget')
            assert [name for name, _ in resolver.probes(package, LicenseId.MIT)] == ['package_tree']
            assert resolver.resolve(package, LicenseId.MIT) is None
        assert transport.urls == []

    def test_probe_order(self, tmp_path: Path) -> None:
        """GitHub probes follow the package tree."""
        with http_client(transport=httpx.MockTransport(_Transport())) as client:
            probes = ProvenanceResolver(client).probes(_package(tmp_path), LicenseId.MIT)
        assert [name for name, _ in probes] == ['package_tree', 'github_api', 'github_repo']

    def test_api_answer_skips_raw_probe(self, tmp_path: Path) -> None:
        """An API hit means raw files are never requested."""
        api_url = 'https://api.github.com/repos/owner/widget/license'
        download_url = 'https://raw.githubusercontent.com/owner/widget/master/LICENSE'
        transport = _Transport({
            api_url: httpx.Response(
                200,
                json={
                    'download_url': download_url,
                    'content': base64.b64encode(b'Copyright 2019 Owner').decode('ascii'),
                    'encoding': 'base64',
                    'license': {'spdx_id': 'MIT'},
                },
            ),
        })
        with http_client(transport=httpx.MockTransport(transport)) as client:
            found = ProvenanceResolver(client).resolve(_package(tmp_path), LicenseId.MIT)
        assert found is not None
        assert found.source == FromHostedApi(download_url)
        assert found.text == 'Copyright 2019 Owner'
        assert transport.urls == [api_url]

    def test_falls_through_to_raw(self, tmp_path: Path) -> None:
        """When the API has no answer, raw files are guessed on the branch."""
        raw_url = 'https://raw.githubusercontent.com/owner/widget/main/LICENSE'
        transport = _Transport({raw_url: httpx.Response(200, text='Copyright 2018 Owner')})
        with http_client(transport=httpx.MockTransport(transport)) as client:
            found = ProvenanceResolver(client, branch='main').resolve(_package(tmp_path), LicenseId.MPL_2_0)
        assert found is not None
        assert found.source == FromHostedRepo(raw_url)
        assert transport.urls == [
            'https://api.github.com/repos/owner/widget/license',
            raw_url,
        ]

    def test_nothing_found(self, tmp_path: Path) -> None:
        """All probes failing yields None."""
        transport = _Transport()
        with http_client(transport=httpx.MockTransport(transport)) as client:
            assert ProvenanceResolver(client).resolve(_package(tmp_path), LicenseId.BSD_3_CLAUSE) is None
        # One API request plus one per raw candidate.
        assert len(transport.urls) == 1 + 6
