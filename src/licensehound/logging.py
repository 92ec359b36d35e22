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

"""Structured logging for license-hound.

All diagnostics go through `structlog <https://www.structlog.org/>`_
on top of the stdlib root logger and are written to **stderr**; stdout
carries the JSON license report (``license-hound | jq '.[0]'``)::

    log.warning('license_mismatch', ...)
        │
        ▼
    ┌──────────────┐   ┌────────────────┐   ┌───────────────────────────┐
    │ level, name, │──→│ SecretRedactor │──→│ ConsoleRenderer (default) │
    │ timestamp    │   │ (credentials)  │   │ JSONRenderer (--json-log) │
    └──────────────┘   └────────────────┘   └───────────────────────────┘

The redactor never looks at the environment. The CLI passes it the
GitHub password it already holds in
:class:`~licensehound.config.GitHubCredentials`. It runs in the stderr
handler's formatter, so it also covers loggers cached before the
last :func:`configure_logging` call.

Usage::

    from licensehound.logging import configure_logging, get_logger

    configure_logging(verbose=True, secrets=[config.credentials.password])
    log = get_logger('licensehound.cli')
    log.info('lockfile_parsed', packages=42)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, MutableMapping
from typing import Any, Final

import structlog

__all__ = [
    'REDACTED',
    'SecretRedactor',
    'configure_logging',
    'get_logger',
]

REDACTED: Final[str] = '[REDACTED]'


class SecretRedactor:
    """Structlog processor replacing known secret strings in event fields.

    Only string values are rewritten; other values pass through as-is.

    Args:
        secrets: Values to hide. Empty strings are ignored.
    """

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        # Longest first so a secret containing another is replaced whole.
        self.secrets: tuple[str, ...] = tuple(sorted({s for s in secrets if s}, key=len, reverse=True))

    def redact(self, value: object) -> object:
        if not isinstance(value, str):
            return value
        for secret in self.secrets:
            value = value.replace(secret, REDACTED)
        return value

    def __call__(
        self,
        logger: Any,  # noqa: ANN401
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        if not self.secrets:
            return event_dict
        for key, value in event_dict.items():
            event_dict[key] = self.redact(value)
        return event_dict


def _level(*, verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    secrets: Iterable[str] = (),
) -> None:
    """Route structlog output to stderr at the requested verbosity.

    May be called again to reconfigure; the last call wins.

    Args:
        verbose: Log at DEBUG.
        quiet: Log only warnings and errors. Takes precedence over
            *verbose*.
        json_log: Emit one JSON object per line instead of console
            output.
        secrets: Credential values to scrub from every log event.
    """
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=_level(verbose=verbose, quiet=quiet),
        force=True,
    )

    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            SecretRedactor(secrets),
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'licensehound') -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for *name* (``licensehound.<area>``)."""
    return structlog.get_logger(name)
