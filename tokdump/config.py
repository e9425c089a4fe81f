"""Harness configuration: where fixtures live and how they are named."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import List, Tuple

# Base names of the fixtures run when none are given explicitly. ``eof``
# holds an unterminated string literal that runs into end-of-file.
DEFAULT_FIXTURES = ("allTokens", "illegalTokens", "eof")
DEFAULT_INPUT_SUFFIX = ".in"
DEFAULT_OUTPUT_SUFFIX = ".out"
SCANNER_ENV_VAR = "TOKDUMP_SCANNER"


@dataclasses.dataclass
class HarnessConfig:
    input_dir: Path = Path(".")
    output_dir: Path = Path(".")
    input_suffix: str = DEFAULT_INPUT_SUFFIX
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    fixtures: List[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_FIXTURES)
    )
    debug: bool = False
    fail_fast: bool = True

    def fixture_paths(self, name: str) -> Tuple[Path, Path]:
        """Return the ``(input, output)`` paths for fixture ``name``."""
        return (
            Path(self.input_dir) / f"{name}{self.input_suffix}",
            Path(self.output_dir) / f"{name}{self.output_suffix}",
        )
