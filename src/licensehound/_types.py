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

"""Shared leaf-level types used across licensehound.

This module must have **zero** imports from other ``licensehound``
modules to avoid circular-import chains.  It is safe to import
from any module in the project.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Union

__all__ = [
    'FromHostedApi',
    'FromHostedRepo',
    'FromPackageTree',
    'LicenseSource',
    'PackageMetadata',
    'PackageRecord',
    'PackageSource',
    'RecoveredLicense',
]


@dataclass(frozen=True)
class FromPackageTree:
    """License file found inside the package's own source tree.

    Attributes:
        file_name: Name of the file relative to the source directory.
    """

    kind: ClassVar[str] = 'package_tree'

    file_name: str

    @property
    def locator(self) -> str:
        return self.file_name


@dataclass(frozen=True)
class FromHostedApi:
    """License document returned by the GitHub repository license API.

    Attributes:
        url: The ``download_url`` reported by GitHub.
    """

    kind: ClassVar[str] = 'github_api'

    url: str

    @property
    def locator(self) -> str:
        return self.url


@dataclass(frozen=True)
class FromHostedRepo:
    """License file fetched as raw content from a GitHub repository.

    Attributes:
        url: The raw-content URL that answered.
    """

    kind: ClassVar[str] = 'github_repo'

    url: str

    @property
    def locator(self) -> str:
        return self.url


LicenseSource = Union[FromPackageTree, FromHostedApi, FromHostedRepo]


@dataclass(frozen=True)
class RecoveredLicense:
    """A license document together with where it was found."""

    source: LicenseSource
    text: str


@dataclass(frozen=True)
class PackageRecord:
    """A single ``[[package]]`` entry from a lock file.

    Attributes:
        name: Package name as written in the lock file.
        version: Pinned version string.
        source: Source locator (registry URL, git URL, ...). ``None``
            for workspace members and path dependencies.
    """

    name: str
    version: str
    source: str | None = None


@dataclass(frozen=True)
class PackageMetadata:
    """License-related fields read from a package manifest."""

    license: str | None = None
    homepage: str | None = None
    repository: str | None = None
    documentation: str | None = None

    @property
    def link(self) -> str | None:
        """Best human-facing link: homepage, then repository, then docs."""
        return self.homepage or self.repository or self.documentation


@dataclass(frozen=True)
class PackageSource:
    """A package whose source has been located on disk.

    Attributes:
        name: Package name.
        version: Package version.
        source_dir: Directory probed for license files.
        manifest_path: The manifest the metadata was read from.
        metadata: Parsed manifest metadata.
    """

    name: str
    version: str
    source_dir: Path
    manifest_path: Path
    metadata: PackageMetadata = field(default_factory=PackageMetadata)
