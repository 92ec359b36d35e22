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

"""Command-line entry point for license-hound.

Exit codes:
    0  Report written (individual packages may still have failed).
    2  The lock file could not be read or parsed.

Usage::

    license-hound                          # Cargo.lock or uv.lock in cwd
    license-hound uv.lock --provider installed --summary
    LICENSE_HOUND_GITHUB_USERNAME=me LICENSE_HOUND_GITHUB_PASSWORD=tok \\
        license-hound Cargo.lock --vendor-dir vendor > licenses.json
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from licensehound import __version__
from licensehound.config import DEFAULT_BRANCH, DEFAULT_TIMEOUT, PROVIDERS, HoundConfig
from licensehound.errors import LockFileError
from licensehound.hound import LicenseHound, LicenseReport
from licensehound.lockfile import parse_lockfile
from licensehound.logging import configure_logging, get_logger
from licensehound.net import http_client
from licensehound.provenance import ProvenanceResolver
from licensehound.report import render_summary, write_report
from licensehound.sources import make_provider

log = get_logger('licensehound.cli')

EXIT_OK = 0
EXIT_LOCKFILE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='license-hound',
        description='Recover license texts and copyright notices for every package in a lock file.',
    )
    parser.add_argument(
        'lockfile',
        nargs='?',
        default=None,
        help='Lock file to audit (default: Cargo.lock, then uv.lock, in the current directory).',
    )
    parser.add_argument(
        '--provider',
        choices=PROVIDERS,
        default='vendor',
        help='Where package sources come from (default: vendor).',
    )
    parser.add_argument(
        '--vendor-dir',
        default='vendor',
        help='Directory of unpacked package sources for --provider vendor (default: vendor).',
    )
    parser.add_argument(
        '--branch',
        default=DEFAULT_BRANCH,
        help=f'Repository branch for raw license files (default: {DEFAULT_BRANCH}).',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f'HTTP timeout in seconds (default: {DEFAULT_TIMEOUT:g}).',
    )
    parser.add_argument(
        '-o',
        '--output',
        default=None,
        help='Write the JSON report to this file instead of stdout.',
    )
    parser.add_argument(
        '--summary',
        action='store_true',
        help='Print a summary table to stderr.',
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Log JSON lines instead of console output.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def run(config: HoundConfig) -> list[LicenseReport]:
    """Audit every package in ``config.lockfile``.

    Raises:
        LockFileError: If the lock file cannot be read or parsed.
    """
    records = parse_lockfile(config.lockfile)
    log.info('lockfile_parsed', path=str(config.lockfile), packages=len(records))

    provider = make_provider(config.provider, vendor_dir=config.vendor_dir)
    with http_client(
        config.credentials,
        timeout=config.timeout,
        user_agent=config.user_agent,
    ) as client:
        resolver = ProvenanceResolver(
            client,
            branch=config.branch,
            api_base=config.api_base,
            raw_base=config.raw_base,
        )
        return LicenseHound(provider, resolver).report(records)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the audit and write the report."""
    args = build_parser().parse_args(argv)
    config = HoundConfig.from_args(args)
    configure_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        json_log=args.json_log,
        secrets=(config.credentials.password,),
    )

    try:
        reports = run(config)
    except LockFileError as exc:
        log.error('lockfile_error', path=str(config.lockfile), error=str(exc))
        return EXIT_LOCKFILE_ERROR

    if args.output:
        with Path(args.output).open('w', encoding='utf-8') as f:
            write_report(reports, f)
    else:
        write_report(reports, sys.stdout)

    if args.summary:
        render_summary(reports, Console(stderr=True))

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
