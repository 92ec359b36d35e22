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

"""Error types for license-hound.

Per-package failures derive from :class:`LicenseError`. They are
raised while chasing a single package and captured into that package's
report entry, so one bad dependency never aborts the whole audit.

:class:`LockFileError` is the only process-fatal error; the CLI turns
it into a non-zero exit status.

This module must have **zero** imports from other ``licensehound``
modules so it can be imported from anywhere.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

__all__ = [
    'LicenseError',
    'LicenseNotDeclared',
    'LockFileError',
    'NoSource',
    'SourceUnavailable',
    'UnableToRecoverAttribution',
    'UnableToRecoverLicenseFile',
    'UnacceptableLicense',
]


class LicenseError(Exception):
    """Base class for per-package audit failures.

    Attributes:
        detail: The value explaining the failure (a path, the license
            text, the raw declaration), or ``None``.
    """

    summary: ClassVar[str] = 'license audit failed'

    def __init__(self, detail: str | Path | None = None) -> None:
        self.detail = detail
        message = self.summary if detail is None else f'{self.summary}: {detail}'
        super().__init__(message)

    @property
    def name(self) -> str:
        """The variant name used in reports (e.g. ``"NoSource"``)."""
        return type(self).__name__

    def to_dict(self) -> dict[str, object]:
        """Serialize as a tagged error value for the JSON report."""
        return {
            'outcome': 'error',
            'error': self.name,
            'detail': None if self.detail is None else str(self.detail),
        }


class NoSource(LicenseError):
    """The lock file entry has no source locator (e.g. a workspace member)."""

    summary = 'package has no source'

    def __init__(self) -> None:
        super().__init__(None)


class SourceUnavailable(LicenseError):
    """The package's source tree could not be obtained."""

    summary = 'package source unavailable'


class LicenseNotDeclared(LicenseError):
    """The manifest (detail) has no license field."""

    summary = 'no license declared in manifest'


class UnableToRecoverLicenseFile(LicenseError):
    """No prober found a license document for the package at detail."""

    summary = 'unable to recover license file'


class UnableToRecoverAttribution(LicenseError):
    """The license text (detail) has no copyright line."""

    summary = 'unable to recover copyright attribution'

    def __str__(self) -> str:
        # The full license text is too noisy for log lines.
        return self.summary


class UnacceptableLicense(LicenseError):
    """The declared license (detail) is not in the accepted catalog."""

    summary = 'unacceptable license'


class LockFileError(Exception):
    """The lock file is missing or cannot be parsed."""
