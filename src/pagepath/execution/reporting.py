"""
Error reporting collaborators for path resolution.

Resolution never raises for a missing field. Each unresolved segment is
handed to a Reporter instead, which the surrounding build decides how to
surface.
"""

import logging
from typing import Protocol

from pagepath.exceptions import UnresolvedFieldError

REPORTER_LOGGER_NAME = "pagepath.reporter"


class Reporter(Protocol):
    """Sink for human-readable resolution diagnostics."""

    def error(self, message: str) -> None: ...

    def log(self, message: str) -> None: ...


class LoggingReporter:
    """Reporter writing to the standard logging system."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(REPORTER_LOGGER_NAME)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def log(self, message: str) -> None:
        self._logger.info(message)


def report_unresolved(reporter: Reporter, error: UnresolvedFieldError) -> None:
    """
    Report one unresolved segment.

    Emits exactly one error line naming the segment and its normalized
    field path, followed by the serialized record.

    Params:
        reporter: Destination for the diagnostics
        error: The unresolved segment error
    """
    reporter.error(f"PagePath: {error}")
    reporter.log(error.serialized_record())
