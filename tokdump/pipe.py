"""Paired input/output streams for a single fixture run."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from tokdump.config import HarnessConfig
from tokdump.errors import FixtureNotFound, StreamCloseFailure, StreamOpenFailure

logger = logging.getLogger(__name__)


class FixturePipe:
    """Open a fixture's source and its rendered-output sink together.

    Both streams are opened on construction and released together by
    :meth:`close`. Use it as a context manager so the streams are released
    on every exit path, including a scanner that raises mid-run::

        with FixturePipe("allTokens", config) as pipe:
            dump_tokens(scanner_factory(pipe.input, state), pipe.output)

    A missing source raises :class:`FixtureNotFound` before the output file
    is created.
    """

    def __init__(self, name: str, config: Optional[HarnessConfig] = None) -> None:
        self.name = name
        self.config = config or HarnessConfig()
        self.input_path, self.output_path = self.config.fixture_paths(name)
        self.input: Optional[TextIO] = None
        self.output: Optional[TextIO] = None
        self._open()

    def _open(self) -> None:
        if not self.input_path.is_file():
            raise FixtureNotFound(f"{self.input_path} not found", self.name)
        try:
            self.input = open(self.input_path, "r", encoding="utf-8")
        except OSError as exc:
            raise StreamOpenFailure(
                f"cannot open {self.input_path}: {exc}", self.name
            ) from exc
        try:
            self.output = open(self.output_path, "w", encoding="utf-8", newline="\n")
        except OSError as exc:
            self.input.close()
            self.input = None
            raise StreamOpenFailure(
                f"cannot open {self.output_path}: {exc}", self.name
            ) from exc
        logger.debug("opened %s -> %s", self.input_path, self.output_path)

    @property
    def closed(self) -> bool:
        return self.input is None and self.output is None

    def close(self) -> None:
        """Flush and release both streams; safe to call more than once."""
        failure: Optional[OSError] = None
        for attr in ("output", "input"):
            stream = getattr(self, attr)
            if stream is None:
                continue
            setattr(self, attr, None)
            try:
                stream.close()
            except OSError as exc:
                if failure is None:
                    failure = exc
        if failure is not None:
            raise StreamCloseFailure(
                f"error closing files: {failure}", self.name
            ) from failure

    def __enter__(self) -> "FixturePipe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FixturePipe({self.name!r}, input={str(self.input_path)!r})"
