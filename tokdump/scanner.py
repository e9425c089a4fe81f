"""The scanner collaborator as seen by the dump driver.

The harness does not tokenize anything itself. A scanner is any object with
a ``next_token()`` method returning :class:`~tokdump.tokens.Token` values
and which keeps returning end-of-input tokens once the source is exhausted.
Scanners are built per fixture by a factory that receives the fixture's
input stream and a fresh :class:`ScanState`.
"""

from __future__ import annotations

import dataclasses
import importlib
from typing import Callable, Protocol, TextIO

from tokdump.errors import ScannerConfigError
from tokdump.tokens import Token


@dataclasses.dataclass
class ScanState:
    """Position counters shared between a scanner and its caller.

    A new instance is created for every fixture so position tracking never
    leaks from one fixture into the next.
    """

    char_num: int = 1
    line_num: int = 1


class Scanner(Protocol):
    def next_token(self) -> Token:
        ...


ScannerFactory = Callable[[TextIO, ScanState], Scanner]


def load_scanner_factory(reference: str) -> ScannerFactory:
    """Resolve a ``"package.module:callable"`` reference to a scanner factory."""
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ScannerConfigError(
            f"scanner must be given as 'module:callable', got {reference!r}"
        )
    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise ScannerConfigError(
            f"cannot import scanner module {module_name!r}: {exc}"
        ) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ScannerConfigError(
                f"{module_name!r} has no attribute {attr_path!r}"
            ) from exc
    if not callable(target):
        raise ScannerConfigError(f"scanner {reference!r} is not callable")
    return target
