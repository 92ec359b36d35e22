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

"""Catalog of accepted licenses and the file names they live under.

license-hound only accepts a small whitelist of permissive licenses.
Each :class:`LicenseId` knows its canonical SPDX code and the suffix
variants projects use when they ship several license files side by
side (e.g. ``LICENSE-MIT`` next to ``LICENSE-APACHE``).

Candidate file names are the product of three axes, in this order::

    base name   ×   suffix              ×   extension
    ─────────       ──────────────────      ─────────
    LICENSE         license suffixes…       ''
    COPYING         ''                      '.txt'
    LICENCE

The order is significant: when a source tree holds more than one
matching file, the first candidate wins.

Usage::

    from licensehound.catalog import (
        LicenseId,
        candidate_filenames,
        classify_declared_license,
    )

    lic = classify_declared_license('MIT OR Apache-2.0')
    assert lic is LicenseId.MIT
    assert list(candidate_filenames(lic))[:2] == ['LICENSE-MIT', 'LICENSE-MIT.txt']
"""

from __future__ import annotations

import enum
import itertools
from collections.abc import Iterator
from typing import Final

from licensehound.errors import UnacceptableLicense

__all__ = [
    'BASE_NAMES',
    'EXTENSIONS',
    'LicenseId',
    'candidate_filenames',
    'classify_declared_license',
    'guess_filenames',
]

#: Conventional license file stems, in priority order.
BASE_NAMES: Final[tuple[str, ...]] = ('LICENSE', 'COPYING', 'LICENCE')

#: File extensions tried for every stem, in priority order.
EXTENSIONS: Final[tuple[str, ...]] = ('', '.txt')


class LicenseId(enum.Enum):
    """Licenses license-hound is willing to accept.

    Attributes:
        spdx_id: Canonical SPDX code.
        suffixes: File-name suffixes used for this license in addition
            to the bare base name.
    """

    MIT = ('MIT', ('-MIT',))
    BSD_3_CLAUSE = ('BSD-3-Clause', ())
    MPL_2_0 = ('MPL-2.0', ())

    def __init__(self, spdx_id: str, suffixes: tuple[str, ...]) -> None:
        self.spdx_id = spdx_id
        self.suffixes = suffixes


def guess_filenames(license_id: LicenseId) -> Iterator[tuple[str, str, str]]:
    """Return a fresh iterator over ``(base, suffix, extension)`` triples.

    Base names vary slowest and extensions fastest. The license
    specific suffixes come before the empty suffix, so ``LICENSE-MIT``
    is preferred over a bare ``LICENSE`` for MIT.
    """
    return itertools.product(BASE_NAMES, (*license_id.suffixes, ''), EXTENSIONS)


def candidate_filenames(license_id: LicenseId) -> Iterator[str]:
    """Yield candidate file names in :func:`guess_filenames` order."""
    for base, suffix, ext in guess_filenames(license_id):
        yield f'{base}{suffix}{ext}'


# Order matters: the first identifier found anywhere in the declaration
# wins, even inside compound expressions like "MIT AND GPL-3.0".
_CLASSIFICATION_ORDER: Final[tuple[LicenseId, ...]] = (
    LicenseId.MIT,
    LicenseId.MPL_2_0,
    LicenseId.BSD_3_CLAUSE,
)


def classify_declared_license(declaration: str) -> LicenseId:
    """Pick the accepted license named in a manifest's license field.

    This is a substring test, not an SPDX expression parser: any
    declaration mentioning ``MIT`` is classified as MIT regardless of
    the operators around it.

    Args:
        declaration: Raw license string from the package manifest.

    Returns:
        The first :class:`LicenseId` whose SPDX code occurs in
        *declaration*.

    Raises:
        UnacceptableLicense: If no accepted identifier occurs.
    """
    for license_id in _CLASSIFICATION_ORDER:
        if license_id.spdx_id in declaration:
            return license_id
    raise UnacceptableLicense(declaration)
