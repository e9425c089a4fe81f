#!/usr/bin/env python3
"""Dump the C-- scanner's token stream for each fixture into ``<name>.out``.

Each fixture ``<name>`` is read from ``<input-dir>/<name>.in`` and its
tokens are written one per line to ``<output-dir>/<name>.out`` for
comparison against an accepted baseline. Any fixture I/O error stops the
run with a distinct exit status unless ``--keep-going`` is given.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from tokdump.config import (
    DEFAULT_FIXTURES,
    DEFAULT_INPUT_SUFFIX,
    DEFAULT_OUTPUT_SUFFIX,
    SCANNER_ENV_VAR,
    HarnessConfig,
)
from tokdump.driver import RunSummary, run_fixtures
from tokdump.errors import HarnessError, ScannerConfigError
from tokdump.scanner import load_scanner_factory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokdump",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "fixtures",
        nargs="*",
        metavar="NAME",
        help=f"Fixture base names (default: {' '.join(DEFAULT_FIXTURES)})",
    )
    parser.add_argument(
        "--scanner",
        default=os.environ.get(SCANNER_ENV_VAR),
        help=f"Scanner factory as module:callable (default: ${SCANNER_ENV_VAR})",
    )
    parser.add_argument("--input-dir", type=Path, default=Path("."))
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument("--input-suffix", default=DEFAULT_INPUT_SUFFIX)
    parser.add_argument("--output-suffix", default=DEFAULT_OUTPUT_SUFFIX)
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Record fixture errors and continue with the next fixture",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Echo every rendered token"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> HarnessConfig:
    return HarnessConfig(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        input_suffix=args.input_suffix,
        output_suffix=args.output_suffix,
        fixtures=list(args.fixtures) or list(DEFAULT_FIXTURES),
        debug=args.debug,
        fail_fast=not args.keep_going,
    )


def print_report(summary: RunSummary) -> None:
    total = len(summary.results)
    failed = len(summary.failures)
    print(f"Fixtures: {total - failed} written, {failed} failed, {total} total")
    for result in summary.failures:
        print(f"  {result.name}: {result.error.message}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)

    try:
        if not args.scanner:
            raise ScannerConfigError(
                f"no scanner configured; pass --scanner or set {SCANNER_ENV_VAR}"
            )
        factory = load_scanner_factory(args.scanner)
        summary = run_fixtures(factory, config)
    except HarnessError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code

    if not config.fail_fast:
        print_report(summary)
    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
