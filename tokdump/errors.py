"""Fatal harness errors and the exit status each one maps to."""

from __future__ import annotations

from typing import Optional

EXIT_OK = 0
EXIT_FIXTURE_FAILURES = 1
EXIT_FIXTURE_NOT_FOUND = 3
EXIT_STREAM_OPEN = 4
EXIT_STREAM_CLOSE = 5
EXIT_SCANNER_CONFIG = 6


class HarnessError(Exception):
    """Base class for errors that end a fixture run."""

    exit_code = EXIT_FIXTURE_FAILURES

    def __init__(self, message: str, fixture: Optional[str] = None) -> None:
        self.message = message
        self.fixture = fixture
        super().__init__(message)

    def __str__(self) -> str:
        if self.fixture is None:
            return self.message
        return f"{self.fixture}: {self.message}"


class FixtureNotFound(HarnessError):
    exit_code = EXIT_FIXTURE_NOT_FOUND


class StreamOpenFailure(HarnessError):
    exit_code = EXIT_STREAM_OPEN


class StreamCloseFailure(HarnessError):
    exit_code = EXIT_STREAM_CLOSE


class ScannerConfigError(HarnessError):
    exit_code = EXIT_SCANNER_CONFIG
