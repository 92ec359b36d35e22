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

r"""Recover the copyright attribution line from license text.

License files are free-form prose, so this is a heuristic: the text is
regrouped into paragraphs (hard-wrapped lines are joined back
together) and the first paragraph mentioning "copyright" is returned.

A leading ``//`` or ``#`` comment marker is removed from each line
before trimming, so attributions copied out of C-style and of
shell/Python/TOML source headers come back as bare text:
``'# Copyright 2020 X'`` yields ``'Copyright 2020 X'``. Only the first
marker on a line is removed, and only when it is the first character.

Example::

    >>> recover_copyright_notice('The MIT License (MIT)\n\nCopyright (c) 2013\nBen Balter\n')
    'Copyright (c) 2013 Ben Balter'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Final

from licensehound.errors import UnableToRecoverAttribution

__all__ = [
    'iter_paragraphs',
    'recover_copyright_notice',
]

# Checked against the raw line, before whitespace is trimmed.
_COMMENT_MARKERS: Final[tuple[str, ...]] = ('//', '#')


def _clean_line(line: str) -> str:
    for marker in _COMMENT_MARKERS:
        if line.startswith(marker):
            line = line[len(marker) :]
            break
    return line.strip()


def iter_paragraphs(lines: Iterable[str]) -> Iterator[str]:
    """Join runs of non-empty lines into single-spaced paragraphs.

    Empty lines separate paragraphs and are dropped.
    """
    current = ''
    for raw in lines:
        line = _clean_line(raw)
        if not line:
            if current:
                yield current
            current = ''
        elif current:
            current = f'{current} {line}'
        else:
            current = line
    if current:
        yield current


def recover_copyright_notice(license_text: str) -> str:
    """Return the first paragraph of *license_text* mentioning copyright.

    Args:
        license_text: Full text of a license document.

    Returns:
        The copyright paragraph, with wrapped lines joined by spaces.

    Raises:
        UnableToRecoverAttribution: If no paragraph contains
            ``copyright`` (case-insensitive).
    """
    for paragraph in iter_paragraphs(license_text.splitlines()):
        if 'copyright' in paragraph.lower():
            return paragraph
    raise UnableToRecoverAttribution(license_text)
