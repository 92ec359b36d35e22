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

"""Tests for licensehound.copyright."""

from __future__ import annotations

import pytest
from licensehound.copyright import iter_paragraphs, recover_copyright_notice
from licensehound.errors import UnableToRecoverAttribution

RAW_MIT = (
    'The MIT License (MIT)\n'
    '\n'
    'Copyright (c) 2013 Ben Balter\n'
    '\n'
    'Permission is hereby granted, free of charge, to any person obtaining a copy of\n'
    'this software and associated documentation files (the "Software"), to deal in\n'
    'the Software without restriction, including without limitation the rights to\n'
    'use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of\n'
    'the Software, and to permit persons to whom the Software is furnished to do so,\n'
    'subject to the following conditions:\n'
    '\n'
    'The above copyright notice and this permission notice shall be included in all\n'
    'copies or substantial portions of the Software.\n'
)


class TestIterParagraphs:
    """Tests for iter_paragraphs()."""

    def test_joins_wrapped_lines(self) -> None:
        """Adjacent non-empty lines are joined with one space."""
        assert list(iter_paragraphs(['a', 'b', '', 'c'])) == ['a b', 'c']

    def test_drops_blank_runs(self) -> None:
        """Consecutive blank lines produce no empty paragraphs."""
        assert list(iter_paragraphs(['', '', 'a', '', '', 'b', ''])) == ['a', 'b']

    def test_trims_whitespace(self) -> None:
        """Lines are trimmed before joining."""
        assert list(iter_paragraphs(['   a  ', '\tb'])) == ['a b']

    def test_whitespace_only_line_breaks_paragraph(self) -> None:
        """A line of spaces counts as empty."""
        assert list(iter_paragraphs(['a', '    ', 'b'])) == ['a', 'b']

    def test_strips_slash_comment_marker(self) -> None:
        """Leading // markers are removed."""
        assert list(iter_paragraphs(['// Copyright 2020', '//   Jane'])) == ['Copyright 2020 Jane']

    def test_strips_hash_comment_marker(self) -> None:
        """Leading # markers are removed."""
        assert list(iter_paragraphs(['# Copyright 2020 Jane'])) == ['Copyright 2020 Jane']

    def test_empty_input(self) -> None:
        """No lines, no paragraphs."""
        assert list(iter_paragraphs([])) == []


class TestRecoverCopyrightNotice:
    """Tests for recover_copyright_notice()."""

    def test_mit_example(self) -> None:
        """The canonical MIT text yields its copyright line."""
        assert recover_copyright_notice(RAW_MIT) == 'Copyright (c) 2013 Ben Balter'

    def test_single_line_is_idempotent(self) -> None:
        """A lone copyright line comes back unchanged."""
        line = 'Copyright (c) 2020 X'
        assert recover_copyright_notice(line) == line
        assert recover_copyright_notice(recover_copyright_notice(line)) == line

    def test_wrapped_copyright_is_merged(self) -> None:
        """Hard-wrapped attributions are rejoined."""
        text = 'Copyright (c) 2014-2020\n  The Rust Project Developers\n\nPermission...'
        assert recover_copyright_notice(text) == 'Copyright (c) 2014-2020 The Rust Project Developers'

    def test_case_insensitive(self) -> None:
        """COPYRIGHT in capitals is found."""
        assert recover_copyright_notice('Title\n\nCOPYRIGHT 1999 ACME') == 'COPYRIGHT 1999 ACME'

    def test_first_match_wins(self) -> None:
        """With several copyright paragraphs, the first is returned."""
        text = 'Copyright 2001 First\n\nCopyright 2002 Second\n'
        assert recover_copyright_notice(text) == 'Copyright 2001 First'

    def test_copyright_inside_paragraph(self) -> None:
        """A paragraph merely mentioning copyright still matches."""
        text = 'Title\n\nThe above copyright notice shall be\nincluded.\n'
        assert recover_copyright_notice(text) == 'The above copyright notice shall be included.'

    def test_crlf_line_endings(self) -> None:
        """Windows line endings are handled."""
        text = 'MIT License\r\n\r\nCopyright (c) 2021 Someone\r\n'
        assert recover_copyright_notice(text) == 'Copyright (c) 2021 Someone'

    def test_comment_header(self) -> None:
        """Copyright in a // comment block is recovered without markers."""
        text = '// Copyright 2018 Example Corp.\n// All rights reserved.\n//\n// Use of this...'
        assert recover_copyright_notice(text) == 'Copyright 2018 Example Corp. All rights reserved.'

    def test_hash_comment_header(self) -> None:
        """Copyright in a # comment block is recovered without markers."""
        assert recover_copyright_notice('# Copyright 2020 X\n') == 'Copyright 2020 X'

    def test_only_one_marker_removed(self) -> None:
        """Only one leading marker is removed."""
        assert recover_copyright_notice('## Copyright 2020 X') == '# Copyright 2020 X'

    def test_indented_marker_kept(self) -> None:
        """Markers after leading whitespace are part of the text."""
        assert recover_copyright_notice('   // Copyright 2020 X') == '// Copyright 2020 X'

    def test_no_copyright_fails(self) -> None:
        """Texts without copyright raise with the full text attached."""
        text = 'Mozilla Public License Version 2.0\n\n1. Definitions\n'
        with pytest.raises(UnableToRecoverAttribution) as exc_info:
            recover_copyright_notice(text)
        assert exc_info.value.detail == text

    def test_empty_text_fails(self) -> None:
        """An empty document has no attribution."""
        with pytest.raises(UnableToRecoverAttribution):
            recover_copyright_notice('')
