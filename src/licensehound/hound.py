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

"""Chase down the license of every locked package.

Per package::

    PackageRecord ──→ provider.fetch ──→ declared license ──→ classify
                                                                  │
    LicenseDescription ←── copyright line ←── ProvenanceResolver ←┘

Any step may fail with a :class:`~licensehound.errors.LicenseError`;
:meth:`LicenseHound.report` records the failure in that package's entry
and carries on with the next package.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from licensehound._types import LicenseSource, PackageRecord
from licensehound.catalog import LicenseId, classify_declared_license
from licensehound.copyright import recover_copyright_notice
from licensehound.errors import (
    LicenseError,
    LicenseNotDeclared,
    NoSource,
    UnableToRecoverLicenseFile,
)
from licensehound.logging import get_logger
from licensehound.provenance import ProvenanceResolver
from licensehound.sources import PackageSourceProvider

__all__ = [
    'Conclusion',
    'LicenseDescription',
    'LicenseHound',
    'LicenseReport',
]

log = get_logger('licensehound.hound')


@dataclass(frozen=True)
class LicenseDescription:
    """Everything needed to attribute one dependency.

    Attributes:
        chosen_license: The accepted license the declaration mapped to.
        copyright_notice: Copyright paragraph from the license text.
        full_spdx_license: The license string exactly as declared.
        full_license_document: Full text of the license document.
        license_source: Where the document was found.
        link: Homepage, repository or documentation URL, if any.
    """

    chosen_license: LicenseId
    copyright_notice: str
    full_spdx_license: str
    full_license_document: str
    license_source: LicenseSource
    link: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            'outcome': 'ok',
            'chosen_license': self.chosen_license.spdx_id,
            'copyright_notice': self.copyright_notice,
            'full_spdx_license': self.full_spdx_license,
            'full_license_document': self.full_license_document,
            'license_source': {
                'kind': self.license_source.kind,
                'locator': self.license_source.locator,
            },
            'link': self.link,
        }


Conclusion = Union[LicenseDescription, LicenseError]


@dataclass(frozen=True)
class LicenseReport:
    """Outcome for one lock file entry."""

    package_name: str
    version: str
    conclusion: Conclusion

    @property
    def ok(self) -> bool:
        return isinstance(self.conclusion, LicenseDescription)

    def to_dict(self) -> dict[str, object]:
        return {
            'package_name': self.package_name,
            'version': self.version,
            'conclusion': self.conclusion.to_dict(),
        }


class LicenseHound:
    """Assemble license descriptions for lock file entries.

    Args:
        provider: Locates each package's source and manifest metadata.
        resolver: Finds the license document.
    """

    def __init__(self, provider: PackageSourceProvider, resolver: ProvenanceResolver) -> None:
        self._provider = provider
        self._resolver = resolver

    def chase(self, record: PackageRecord) -> LicenseDescription:
        """Work out the license description of a single package.

        Raises:
            LicenseError: The specific reason no description could be
                assembled.
        """
        if record.source is None:
            raise NoSource()

        package = self._provider.fetch(record)
        metadata = package.metadata

        declared = metadata.license
        if declared is None:
            raise LicenseNotDeclared(package.manifest_path)

        chosen = classify_declared_license(declared)

        found = self._resolver.resolve(package, chosen)
        if found is None:
            raise UnableToRecoverLicenseFile(package.source_dir)

        return LicenseDescription(
            chosen_license=chosen,
            copyright_notice=recover_copyright_notice(found.text),
            full_spdx_license=declared,
            full_license_document=found.text,
            license_source=found.source,
            link=metadata.link,
        )

    def report(self, records: Iterable[PackageRecord]) -> list[LicenseReport]:
        """Chase every record, in order, capturing per-package failures."""
        reports: list[LicenseReport] = []
        for record in records:
            conclusion: Conclusion
            try:
                conclusion = self.chase(record)
            except LicenseError as exc:
                conclusion = exc
                log.info(
                    'license_unresolved',
                    package=record.name,
                    version=record.version,
                    error=exc.name,
                    detail=str(exc),
                )
            else:
                log.info(
                    'license_resolved',
                    package=record.name,
                    version=record.version,
                    license=conclusion.chosen_license.spdx_id,
                    source=conclusion.license_source.kind,
                )
            reports.append(LicenseReport(record.name, record.version, conclusion))
        return reports
