"""Scan fixtures and dump their token streams to golden-comparable files."""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, List, Optional, TextIO

from tokdump.config import HarnessConfig
from tokdump.errors import EXIT_FIXTURE_FAILURES, EXIT_OK, HarnessError
from tokdump.pipe import FixturePipe
from tokdump.render import format_token, render_token
from tokdump.scanner import Scanner, ScannerFactory, ScanState
from tokdump.tokens import TokenKind

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class FixtureResult:
    name: str
    token_count: int = 0
    error: Optional[HarnessError] = None

    @property
    def passed(self) -> bool:
        return self.error is None


@dataclasses.dataclass
class RunSummary:
    results: List[FixtureResult] = dataclasses.field(default_factory=list)

    @property
    def failures(self) -> List[FixtureResult]:
        return [result for result in self.results if not result.passed]

    @property
    def exit_code(self) -> int:
        return EXIT_OK if not self.failures else EXIT_FIXTURE_FAILURES


def dump_tokens(scanner: Scanner, out: TextIO, debug: bool = False) -> int:
    """Write one formatted line per token until end-of-input.

    The end-of-input token itself is not written. Returns the number of
    lines written.
    """
    count = 0
    token = scanner.next_token()
    while token.kind is not TokenKind.EOF:
        if debug:
            logger.debug("→ %s", render_token(token))
        out.write(format_token(token))
        out.write("\n")
        count += 1
        token = scanner.next_token()
    return count


def run_fixture(
    name: str, scanner_factory: ScannerFactory, config: Optional[HarnessConfig] = None
) -> FixtureResult:
    """Scan fixture ``name`` into its output file.

    Raises the :class:`HarnessError` subclass for any fixture I/O failure.
    """
    config = config or HarnessConfig()
    logger.info("scanning fixture %s", name)
    with FixturePipe(name, config) as pipe:
        scanner = scanner_factory(pipe.input, ScanState())
        count = dump_tokens(scanner, pipe.output, debug=config.debug)
    logger.info("wrote %d tokens to %s", count, pipe.output_path)
    return FixtureResult(name, token_count=count)


def run_fixtures(
    scanner_factory: ScannerFactory,
    config: Optional[HarnessConfig] = None,
    names: Optional[Iterable[str]] = None,
) -> RunSummary:
    """Run every fixture in order.

    With ``config.fail_fast`` (the default) the first fixture error is
    raised and the remaining fixtures are not run. Otherwise the error is
    recorded in the summary and the run moves on to the next fixture.
    """
    config = config or HarnessConfig()
    summary = RunSummary()
    for name in config.fixtures if names is None else names:
        try:
            result = run_fixture(name, scanner_factory, config)
        except HarnessError as exc:
            if config.fail_fast:
                raise
            logger.error("%s", exc)
            result = FixtureResult(name, error=exc)
        summary.results.append(result)
    return summary
