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

"""Render license reports as JSON and as a console summary.

The JSON report is an array in lock file order::

    [
      {
        "package_name": "serde",
        "version": "1.0.197",
        "conclusion": {
          "outcome": "ok",
          "chosen_license": "MIT",
          "copyright_notice": "Copyright (c) 2014 The Rust Project Developers",
          "full_spdx_license": "MIT OR Apache-2.0",
          "full_license_document": "...",
          "license_source": {"kind": "package_tree", "locator": "LICENSE-MIT"},
          "link": "https://serde.rs"
        }
      },
      {
        "package_name": "my-app",
        "version": "0.1.0",
        "conclusion": {"outcome": "error", "error": "NoSource", "detail": null}
      }
    ]
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.table import Table

from licensehound.hound import LicenseDescription, LicenseReport

__all__ = [
    'render_summary',
    'report_to_json',
    'write_report',
]


def report_to_json(reports: Sequence[LicenseReport]) -> list[dict[str, object]]:
    """Convert reports to JSON-compatible dicts, keeping their order."""
    return [r.to_dict() for r in reports]


def write_report(reports: Sequence[LicenseReport], stream: TextIO) -> None:
    """Write the JSON report to *stream*, followed by a newline."""
    json.dump(report_to_json(reports), stream, indent=2, ensure_ascii=False)
    stream.write('\n')


def render_summary(reports: Sequence[LicenseReport], console: Console) -> None:
    """Print a one-row-per-package table and a totals line."""
    table = Table(title='License audit', show_lines=False)
    table.add_column('Package', style='bold')
    table.add_column('Version')
    table.add_column('License / error')
    table.add_column('Source')

    for report in reports:
        conclusion = report.conclusion
        if isinstance(conclusion, LicenseDescription):
            table.add_row(
                report.package_name,
                report.version,
                f'[green]{conclusion.chosen_license.spdx_id}[/]',
                conclusion.license_source.kind,
            )
        else:
            table.add_row(
                report.package_name,
                report.version,
                f'[red]{conclusion.name}[/]',
                '',
            )

    console.print(table)
    resolved = sum(1 for report in reports if report.ok)
    failed = len(reports) - resolved
    parts = [f'[bold]{len(reports)} packages[/]', f'[green]{resolved} resolved[/]']
    if failed:
        parts.append(f'[red]{failed} unresolved[/]')
    console.print(' • '.join(parts), highlight=False)
